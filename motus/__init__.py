"""
Motus - Secure memorable passwords, random passwords and PIN codes.

This package provides the generation engine (entropy sources, word corpus,
generators) and the command-line layer around it (configuration, strength
analysis, clipboard).
"""

__version__ = "0.3.1"

from motus.core.entropy import (
    EntropySource,
    SecureEntropy,
    SeededEntropy,
    BufferEntropy,
    EntropyExhaustedError,
    create_entropy_source,
)

from motus.core.wordlist import (
    WordCorpus,
    CorpusError,
    load_corpus,
    default_corpus,
)

from motus.core.generator import (
    GenerationError,
    InvalidWordCount,
    InsufficientCorpus,
    InvalidLength,
    PasswordTooShort,
    SeparatorMode,
    memorable_password,
    random_password,
    pin_password,
)

from motus.core.engine import (
    SecretKind,
    MemorableRequest,
    RandomRequest,
    PinRequest,
    GeneratedSecret,
    generate,
    estimate_entropy_bits,
)

__all__ = [
    # Version
    "__version__",
    # Entropy
    "EntropySource",
    "SecureEntropy",
    "SeededEntropy",
    "BufferEntropy",
    "EntropyExhaustedError",
    "create_entropy_source",
    # Corpus
    "WordCorpus",
    "CorpusError",
    "load_corpus",
    "default_corpus",
    # Generator
    "GenerationError",
    "InvalidWordCount",
    "InsufficientCorpus",
    "InvalidLength",
    "PasswordTooShort",
    "SeparatorMode",
    "memorable_password",
    "random_password",
    "pin_password",
    # Engine
    "SecretKind",
    "MemorableRequest",
    "RandomRequest",
    "PinRequest",
    "GeneratedSecret",
    "generate",
    "estimate_entropy_bits",
]
