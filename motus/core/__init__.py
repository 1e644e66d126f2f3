"""
Motus Core - Entropy sources, word corpus, generators and the generation engine.
"""

from motus.core.entropy import (
    EntropySource,
    SecureEntropy,
    SeededEntropy,
    BufferEntropy,
    EntropyExhaustedError,
    create_entropy_source,
    whiten_entropy,
    read_entropy_file,
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
    SYMBOL_CHARS,
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

from motus.core.security import secure_zero

__all__ = [
    "EntropySource",
    "SecureEntropy",
    "SeededEntropy",
    "BufferEntropy",
    "EntropyExhaustedError",
    "create_entropy_source",
    "whiten_entropy",
    "read_entropy_file",
    "WordCorpus",
    "CorpusError",
    "load_corpus",
    "default_corpus",
    "GenerationError",
    "InvalidWordCount",
    "InsufficientCorpus",
    "InvalidLength",
    "PasswordTooShort",
    "SeparatorMode",
    "memorable_password",
    "random_password",
    "pin_password",
    "SYMBOL_CHARS",
    "SecretKind",
    "MemorableRequest",
    "RandomRequest",
    "PinRequest",
    "GeneratedSecret",
    "generate",
    "estimate_entropy_bits",
    "secure_zero",
]
