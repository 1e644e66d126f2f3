"""
Motus Engine - Single entry point dispatching generation requests.

    request = MemorableRequest(word_count=4, capitalize=True)
    secret = generate(request, SecureEntropy())
    secret.text, secret.kind   # ('Timber Quest Orchid Vapor', SecretKind.MEMORABLE)

The engine does no I/O: printing, clipboard and analysis belong to the caller.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from motus.core.entropy import EntropySource
from motus.core.wordlist import WordCorpus, default_corpus
from motus.core.generator import (
    SeparatorMode,
    memorable_password,
    random_password,
    pin_password,
    calculate_memorable_entropy,
    calculate_password_entropy,
    calculate_pin_entropy,
)


class SecretKind(Enum):
    MEMORABLE = "memorable"
    RANDOM = "random"
    PIN = "pin"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class MemorableRequest:
    word_count: int = 5
    separator: SeparatorMode = SeparatorMode.NONE
    capitalize: bool = False
    full_words: bool = True

    @property
    def kind(self) -> SecretKind:
        return SecretKind.MEMORABLE


@dataclass(frozen=True)
class RandomRequest:
    length: int = 20
    include_numbers: bool = False
    include_symbols: bool = False

    @property
    def kind(self) -> SecretKind:
        return SecretKind.RANDOM


@dataclass(frozen=True)
class PinRequest:
    digit_count: int = 7

    @property
    def kind(self) -> SecretKind:
        return SecretKind.PIN


GenerationRequest = Union[MemorableRequest, RandomRequest, PinRequest]


@dataclass(frozen=True)
class GeneratedSecret:
    """A generated password and the kind of request that produced it."""

    text: str
    kind: SecretKind

    def __str__(self):
        return self.text


def generate(
    request: GenerationRequest,
    entropy: EntropySource,
    corpus: Optional[WordCorpus] = None
) -> GeneratedSecret:
    """
    Generate the secret described by request.

    Args:
        request: Memorable, random or PIN request
        entropy: Randomness source, used by this call only
        corpus: Word list for memorable requests (default: bundled list)

    Returns:
        The GeneratedSecret

    Raises:
        GenerationError: If the request can never be satisfied
        TypeError: If request is not a known request type
    """
    if isinstance(request, MemorableRequest):
        text = memorable_password(
            entropy,
            corpus if corpus is not None else default_corpus(),
            word_count=request.word_count,
            separator=request.separator,
            capitalize=request.capitalize,
            full_words=request.full_words,
        )
    elif isinstance(request, RandomRequest):
        text = random_password(
            entropy,
            length=request.length,
            include_numbers=request.include_numbers,
            include_symbols=request.include_symbols,
        )
    elif isinstance(request, PinRequest):
        text = pin_password(entropy, digit_count=request.digit_count)
    else:
        raise TypeError(f"Unsupported generation request: {type(request).__name__}")

    return GeneratedSecret(text=text, kind=request.kind)


def estimate_entropy_bits(
    request: GenerationRequest,
    corpus: Optional[WordCorpus] = None
) -> float:
    """Theoretical entropy in bits of the output space of request."""
    if isinstance(request, MemorableRequest):
        corpus = corpus if corpus is not None else default_corpus()
        return calculate_memorable_entropy(request.word_count, corpus.size(), request.separator)
    if isinstance(request, RandomRequest):
        return calculate_password_entropy(
            request.length, request.include_numbers, request.include_symbols
        )
    if isinstance(request, PinRequest):
        return calculate_pin_entropy(request.digit_count)
    raise TypeError(f"Unsupported generation request: {type(request).__name__}")
