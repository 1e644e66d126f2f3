# -*- coding: utf-8 -*-
"""
Motus Generator - Memorable, random and PIN password generation.

All randomness comes from an EntropySource; the generators never touch the
random module directly, so a seeded source reproduces their output exactly.
"""

import string
from enum import Enum
from typing import List

import numpy as np

from motus.core.entropy import EntropySource
from motus.core.wordlist import WordCorpus
from motus.core.log import get_logger

logger = get_logger('generator')

# Character sets
LOWERCASE_CHARS = string.ascii_lowercase
UPPERCASE_CHARS = string.ascii_uppercase
NUMBER_CHARS = string.digits
SYMBOL_CHARS = "!@#$%^&*()"

# Prefix kept from each word when full words are disabled
TRUNCATED_WORD_LENGTH = 4


# =============================================================================
# Errors
# =============================================================================

class GenerationError(ValueError):
    """Base error for requests that can never succeed as given."""
    pass


class InvalidWordCount(GenerationError):
    """Zero words requested."""
    pass


class InsufficientCorpus(GenerationError):
    """More distinct words requested than the corpus holds."""
    pass


class InvalidLength(GenerationError):
    """Zero-length password or PIN requested."""
    pass


class PasswordTooShort(GenerationError):
    """Length cannot hold one character of every mandatory class."""
    pass


class SeparatorMode(Enum):
    """How words of a memorable password are joined."""

    NONE = "none"
    NUMBERS = "numbers"
    SYMBOLS = "symbols"
    NUMBERS_AND_SYMBOLS = "numbers-and-symbols"

    def __str__(self):
        return self.value


# =============================================================================
# Memorable passwords
# =============================================================================

def _select_words(entropy: EntropySource, corpus: WordCorpus, count: int) -> List[str]:
    """Pick count distinct words, rejecting indices already drawn."""
    size = corpus.size()
    chosen: List[int] = []
    seen = set()

    while len(chosen) < count:
        index = entropy.next_uniform(size)
        if index in seen:
            continue
        seen.add(index)
        chosen.append(index)

    return [corpus.get(i) for i in chosen]


def _separator(entropy: EntropySource, mode: SeparatorMode) -> str:
    if mode is SeparatorMode.NONE:
        return " "
    if mode is SeparatorMode.NUMBERS:
        return entropy.choice(NUMBER_CHARS)
    if mode is SeparatorMode.SYMBOLS:
        return entropy.choice(SYMBOL_CHARS)
    if mode is SeparatorMode.NUMBERS_AND_SYMBOLS:
        return entropy.choice(NUMBER_CHARS) + entropy.choice(SYMBOL_CHARS)
    raise ValueError(f"Unknown separator mode: {mode!r}")


def memorable_password(
    entropy: EntropySource,
    corpus: WordCorpus,
    word_count: int = 5,
    separator: SeparatorMode = SeparatorMode.NONE,
    capitalize: bool = False,
    full_words: bool = True
) -> str:
    """
    Generate a passphrase from distinct corpus words.

    Words are drawn first, in order, then each separator is drawn left to
    right. With full_words disabled every word is cut to its first
    TRUNCATED_WORD_LENGTH characters before capitalization.

    Args:
        entropy: Randomness source
        corpus: Word list to draw from
        word_count: Number of words
        separator: Separator mode between words
        capitalize: Upper-case the first letter of each word
        full_words: Keep whole words instead of short prefixes

    Returns:
        Generated passphrase

    Raises:
        InvalidWordCount: If word_count is below 1
        InsufficientCorpus: If the corpus holds fewer than word_count words
    """
    if word_count < 1:
        raise InvalidWordCount(f"Word count must be at least 1, got {word_count}")
    if word_count > corpus.size():
        raise InsufficientCorpus(
            f"Cannot pick {word_count} distinct words from a corpus of {corpus.size()}"
        )

    tokens = _select_words(entropy, corpus, word_count)

    if not full_words:
        tokens = [word[:TRUNCATED_WORD_LENGTH] for word in tokens]

    if capitalize:
        tokens = [word[:1].upper() + word[1:] for word in tokens]

    parts = [tokens[0]]
    for token in tokens[1:]:
        parts.append(_separator(entropy, separator))
        parts.append(token)

    logger.debug("Generated memorable password (%d words, separator=%s)", word_count, separator)
    return ''.join(parts)


# =============================================================================
# Random passwords
# =============================================================================

def character_classes(include_numbers: bool, include_symbols: bool) -> List[str]:
    """Mandatory character classes, in reservation order."""
    classes = [LOWERCASE_CHARS, UPPERCASE_CHARS]
    if include_numbers:
        classes.append(NUMBER_CHARS)
    if include_symbols:
        classes.append(SYMBOL_CHARS)
    return classes


def random_password(
    entropy: EntropySource,
    length: int = 20,
    include_numbers: bool = False,
    include_symbols: bool = False
) -> str:
    """
    Generate a password containing every enabled character class.

    One position is reserved per class and filled from that class, the rest
    are filled from the combined pool, and the result is shuffled so the
    reserved characters do not sit at fixed offsets.

    Args:
        entropy: Randomness source
        length: Password length
        include_numbers: Require and allow digits
        include_symbols: Require and allow symbols from SYMBOL_CHARS

    Returns:
        Generated password

    Raises:
        InvalidLength: If length is below 1
        PasswordTooShort: If length is smaller than the number of classes
    """
    if length < 1:
        raise InvalidLength(f"Password length must be at least 1, got {length}")

    classes = character_classes(include_numbers, include_symbols)
    if length < len(classes):
        raise PasswordTooShort(
            f"A {length}-character password cannot hold the {len(classes)} "
            "required character classes"
        )

    pool = ''.join(classes)
    password = [entropy.choice(chars) for chars in classes]
    password.extend(entropy.choice(pool) for _ in range(length - len(classes)))
    entropy.shuffle(password)

    logger.debug("Generated random password (%d chars, %d classes)", length, len(classes))
    return ''.join(password)


# =============================================================================
# PIN codes
# =============================================================================

def pin_password(entropy: EntropySource, digit_count: int = 7) -> str:
    """
    Generate a numeric PIN. Leading zeros are kept.

    Raises:
        InvalidLength: If digit_count is below 1
    """
    if digit_count < 1:
        raise InvalidLength(f"PIN length must be at least 1, got {digit_count}")

    return ''.join(NUMBER_CHARS[entropy.next_uniform(10)] for _ in range(digit_count))


# =============================================================================
# Theoretical entropy
# =============================================================================

def separator_alphabet_size(mode: SeparatorMode) -> int:
    """Number of distinct separators a mode can produce."""
    return {
        SeparatorMode.NONE: 1,
        SeparatorMode.NUMBERS: len(NUMBER_CHARS),
        SeparatorMode.SYMBOLS: len(SYMBOL_CHARS),
        SeparatorMode.NUMBERS_AND_SYMBOLS: len(NUMBER_CHARS) * len(SYMBOL_CHARS),
    }[mode]


def calculate_memorable_entropy(
    word_count: int,
    corpus_size: int,
    separator: SeparatorMode = SeparatorMode.NONE
) -> float:
    """
    Calculate theoretical entropy of a memorable password.

    Counts the ordered selections of distinct words plus the randomly drawn
    separators. Truncation is ignored, so the figure is an upper bound when
    full words are disabled.

    Returns:
        Entropy in bits
    """
    words = np.arange(corpus_size - word_count + 1, corpus_size + 1, dtype=np.float64)
    separators = max(word_count - 1, 0) * np.log2(separator_alphabet_size(separator))
    return float(np.sum(np.log2(words)) + separators)


def calculate_password_entropy(
    length: int,
    include_numbers: bool = False,
    include_symbols: bool = False
) -> float:
    """
    Calculate theoretical entropy of a random password.

    Returns:
        Entropy in bits (length * log2(pool size))
    """
    pool = ''.join(character_classes(include_numbers, include_symbols))
    return float(length * np.log2(len(pool)))


def calculate_pin_entropy(digit_count: int) -> float:
    """Entropy in bits of a PIN with digit_count digits."""
    return float(digit_count * np.log2(len(NUMBER_CHARS)))
