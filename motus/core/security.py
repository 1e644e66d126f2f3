"""
Motus Security - Best-effort wiping of entropy buffers.
"""

from typing import Union
import numpy as np


def secure_zero(data: Union[np.ndarray, bytearray, bytes]) -> None:
    """
    Overwrite an entropy buffer with zeros once it has been consumed.

    Python gives no guarantee that the memory is really cleared: the
    interpreter may already hold copies elsewhere. Immutable ``bytes`` and
    read-only arrays are left untouched.

    Args:
        data: Writable numpy array or bytearray to wipe.
    """
    if isinstance(data, np.ndarray):
        if data.flags.writeable:
            data[:] = 0
    elif isinstance(data, bytearray):
        data[:] = bytes(len(data))
