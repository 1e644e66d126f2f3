"""
Motus Entropy - Uniform random draws for the generators.

Every generator consumes randomness through a single capability,
``EntropySource.next_uniform(n)``, which returns an integer in ``[0, n)``.
Three interchangeable sources are provided:

    SecureEntropy   OS CSPRNG (secrets), the default
    SeededEntropy   PCG64 stream, reproducible for a given seed
    BufferEntropy   a finite byte buffer, e.g. an entropy file

All reductions to ``[0, n)`` use rejection sampling, never a bare modulo.
"""

import hashlib
import secrets
from abc import ABC, abstractmethod
from pathlib import Path
from typing import MutableSequence, Optional, Sequence, TypeVar, Union

import numpy as np

from motus.core.security import secure_zero
from motus.core.log import get_logger

logger = get_logger('entropy')

T = TypeVar('T')

# Largest seed accepted by SeededEntropy (the CLI takes an unsigned 64-bit value)
MAX_SEED = 2 ** 64 - 1


class EntropyExhaustedError(ValueError):
    """A finite entropy buffer ran out of bytes."""
    pass


# =============================================================================
# Entropy source interface
# =============================================================================

class EntropySource(ABC):
    """
    Supplier of uniformly distributed integers.

    A source is stateful and owned by the generation call that uses it.
    Do not share one instance between concurrent callers.
    """

    name = "unknown"

    def next_uniform(self, n: int) -> int:
        """
        Return a uniformly distributed integer in [0, n).

        Raises:
            ValueError: If n is not a positive integer
        """
        if n <= 0:
            raise ValueError(f"Upper bound must be positive, got {n}")
        return self._uniform(n)

    @abstractmethod
    def _uniform(self, n: int) -> int:
        """Draw from [0, n); n is already validated."""

    def choice(self, seq: Sequence[T]) -> T:
        """Return a uniformly chosen element of a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from empty sequence")
        return seq[self.next_uniform(len(seq))]

    def shuffle(self, seq: MutableSequence) -> None:
        """Fisher-Yates shuffle in place."""
        for i in range(len(seq) - 1, 0, -1):
            j = self.next_uniform(i + 1)
            seq[i], seq[j] = seq[j], seq[i]


# =============================================================================
# Implementations
# =============================================================================

class SecureEntropy(EntropySource):
    """OS-backed cryptographically secure source. Not reproducible."""

    name = "CSPRNG"

    def _uniform(self, n: int) -> int:
        return secrets.randbelow(n)


class SeededEntropy(EntropySource):
    """
    Reproducible source for deterministic output and regression tests.

    Draws come from the raw 64-bit output of numpy's PCG64 bit generator,
    whose stream numpy keeps stable across versions and platforms. Higher
    level numpy sampling methods are avoided on purpose: their algorithms may
    change between releases.
    """

    name = "seeded"

    def __init__(self, seed: int):
        if not 0 <= seed <= MAX_SEED:
            raise ValueError(f"Seed must be between 0 and {MAX_SEED}, got {seed}")
        self.seed = seed
        self._bitgen = np.random.PCG64(seed)

    def _raw(self, words: int) -> int:
        value = 0
        for _ in range(words):
            value = (value << 64) | int(self._bitgen.random_raw())
        return value

    def _uniform(self, n: int) -> int:
        words = max(1, (n.bit_length() + 63) // 64)
        space = 1 << (64 * words)
        limit = space - (space % n)

        while True:
            value = self._raw(words)
            if value < limit:
                return value % n


class BufferEntropy(EntropySource):
    """
    Source reading from a finite buffer of random bytes.

    Each draw consumes the smallest number of bytes able to cover [0, n) and
    rejects values above the largest multiple of n, so the result stays
    uniform as long as the buffer itself is.
    """

    name = "buffer"

    def __init__(self, random_bytes: np.ndarray, name: Optional[str] = None):
        self._buffer = np.asarray(random_bytes, dtype=np.uint8)
        self._offset = 0
        if name:
            self.name = name

    @property
    def remaining(self) -> int:
        """Bytes not yet consumed."""
        return len(self._buffer) - self._offset

    def _uniform(self, n: int) -> int:
        width = max(1, ((n - 1).bit_length() + 7) // 8)
        space = 1 << (8 * width)
        limit = space - (space % n)

        while True:
            if self._offset + width > len(self._buffer):
                raise EntropyExhaustedError(
                    f"Not enough entropy: used {self._offset} of "
                    f"{len(self._buffer)} bytes. Provide a larger entropy file."
                )
            chunk = self._buffer[self._offset:self._offset + width]
            self._offset += width

            value = int.from_bytes(chunk.tobytes(), 'big')
            if value < limit:
                return value % n

    def wipe(self) -> None:
        """Zero the underlying buffer once generation is over."""
        secure_zero(self._buffer)


# =============================================================================
# Entropy files
# =============================================================================

def whiten_entropy(raw: bytes) -> bytes:
    """
    Condition raw bytes of unknown quality.

    The whole input is absorbed by SHAKE-256 and squeezed back out at the
    same length, so a biased or structured file still yields uniform bytes
    and no byte of the input appears in the output.

    Args:
        raw: Bytes read from an entropy file

    Returns:
        Whitened bytes, ``len(raw)`` of them
    """
    return hashlib.shake_256(raw).digest(len(raw))


def read_entropy_file(path: Union[str, Path], whiten: bool = True) -> np.ndarray:
    """
    Read an entropy file into a byte buffer.

    Args:
        path: File of random bytes
        whiten: Pass the contents through whiten_entropy()

    Returns:
        The bytes as a writable numpy uint8 array

    Raises:
        OSError: If the file cannot be read
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Entropy file not found: {path}")

    raw = path.read_bytes()
    logger.debug("Read %d bytes of entropy from %s", len(raw), path)

    if whiten:
        raw = whiten_entropy(raw)
    return np.frombuffer(raw, dtype=np.uint8).copy()


def create_entropy_source(
    seed: Optional[int] = None,
    entropy_file: Optional[str] = None,
    whiten: bool = True
) -> EntropySource:
    """
    Build the entropy source for one generation run.

    Args:
        seed: Seed for a reproducible source
        entropy_file: File of random bytes to consume instead of the OS CSPRNG
        whiten: Condition the entropy file with whiten_entropy()

    Returns:
        A fresh EntropySource instance
    """
    if seed is not None and entropy_file is not None:
        raise ValueError("A seed and an entropy file cannot be combined")

    if seed is not None:
        logger.info("Using seeded entropy source (reproducible output)")
        return SeededEntropy(seed)

    if entropy_file is not None:
        logger.info("Using entropy file %s", entropy_file)
        return BufferEntropy(read_entropy_file(entropy_file, whiten), name="file")

    logger.debug("Using system CSPRNG")
    return SecureEntropy()
