"""
Motus Word Corpus - The word list memorable passwords are built from.
"""

from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator, Tuple

from motus.core.log import get_logger

logger = get_logger('wordlist')

# Bundled list, shipped as package data
WORDLIST_FILE = Path(__file__).resolve().parent.parent / "data" / "wordlist.txt"

# Words shorter than this are dropped when loading a list from disk
MIN_WORD_LENGTH = 5


class CorpusError(ValueError):
    """Malformed word list (duplicate or non-lowercase entry)."""
    pass


class WordCorpus:
    """
    Immutable, ordered collection of distinct lowercase words.

    Only size() and get(index) are needed by the generators; the class also
    behaves like a read-only sequence.
    """

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str]):
        words = tuple(words)
        seen = set()
        for word in words:
            if not (word.isalpha() and word.islower()):
                raise CorpusError(f"Invalid word in corpus: {word!r}")
            if word in seen:
                raise CorpusError(f"Duplicate word in corpus: {word!r}")
            seen.add(word)
        object.__setattr__(self, "_words", words)

    def __setattr__(self, name, value):
        raise AttributeError("WordCorpus is immutable")

    def size(self) -> int:
        return len(self._words)

    def get(self, index: int) -> str:
        return self._words[index]

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word) -> bool:
        return word in self._words

    def __repr__(self) -> str:
        return f"WordCorpus(size={len(self._words)})"


def parse_wordlist(text: str, min_length: int = MIN_WORD_LENGTH) -> WordCorpus:
    """
    Build a corpus from word list text.

    Blank lines and lines starting with '#' are skipped, surrounding
    whitespace is stripped and words shorter than min_length are dropped.

    Raises:
        CorpusError: If a word repeats or is not lowercase alphabetic
    """
    words = []
    for line in text.splitlines():
        word = line.strip()
        if not word or word.startswith("#"):
            continue
        if len(word) < min_length:
            continue
        words.append(word)
    return WordCorpus(words)


def load_corpus(path=None, min_length: int = MIN_WORD_LENGTH) -> WordCorpus:
    """
    Load a word list file.

    Args:
        path: Word list file (default: the bundled list)
        min_length: Shortest word to keep

    Returns:
        The loaded WordCorpus
    """
    path = Path(path) if path else WORDLIST_FILE
    with open(path, 'r', encoding='utf-8') as f:
        corpus = parse_wordlist(f.read(), min_length)
    logger.debug("Loaded %d words from %s", corpus.size(), path)
    return corpus


@lru_cache(maxsize=1)
def default_corpus() -> WordCorpus:
    """The bundled corpus, loaded on first use and shared read-only afterwards."""
    return load_corpus()
