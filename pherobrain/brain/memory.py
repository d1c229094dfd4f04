"""AgentMemory — the fixed 32-byte scratch buffer each ant carries.

The host zero-fills the buffer when an ant spawns, hands the same buffer
to every think tick of that ant, and drops it when the ant dies.  The
host never interprets the bytes; their layout is private to whatever
brain writes them.  The default brain leaves it untouched.
"""

from __future__ import annotations

from typing import overload

import numpy as np
from numpy.typing import DTypeLike, NDArray

MEMORY_SIZE = 32


class AgentMemory:
    """Fixed-capacity mutable byte region owned by a single ant.

    Indexing and slice assignment work like a ``bytearray`` except that
    the length can never change.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        """Create a zero-filled buffer of ``MEMORY_SIZE`` bytes."""
        self._data = bytearray(MEMORY_SIZE)

    @classmethod
    def from_bytes(cls, raw: bytes | bytearray) -> AgentMemory:
        """Build a memory buffer from exactly ``MEMORY_SIZE`` bytes.

        Raises:
            ValueError: If ``raw`` has the wrong length.
        """
        if len(raw) != MEMORY_SIZE:
            msg = f"memory must be {MEMORY_SIZE} bytes, got {len(raw)}"
            raise ValueError(msg)
        memory = cls()
        memory._data[:] = raw
        return memory

    def __len__(self) -> int:
        return MEMORY_SIZE

    @overload
    def __getitem__(self, key: int) -> int: ...

    @overload
    def __getitem__(self, key: slice) -> bytes: ...

    def __getitem__(self, key: int | slice) -> int | bytes:
        if isinstance(key, slice):
            return bytes(self._data[key])
        return self._data[key]

    def __setitem__(self, key: int | slice, value: int | bytes) -> None:
        if isinstance(key, slice):
            start, stop, step = key.indices(MEMORY_SIZE)
            span = len(range(start, stop, step))
            if not isinstance(value, (bytes, bytearray)) or len(value) != span:
                msg = f"slice assignment must supply exactly {span} bytes"
                raise ValueError(msg)
        self._data[key] = value  # type: ignore[index,assignment]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AgentMemory):
            return self._data == other._data
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AgentMemory({self._data.hex()})"

    @property
    def is_zeroed(self) -> bool:
        """Return True if every byte is zero."""
        return not any(self._data)

    def reset(self) -> None:
        """Zero the whole buffer in place."""
        self._data[:] = bytes(MEMORY_SIZE)

    def to_bytes(self) -> bytes:
        """Return an immutable copy of the current contents."""
        return bytes(self._data)

    def view(self, dtype: DTypeLike = np.uint8) -> NDArray:
        """Return a writable NumPy view over the buffer.

        Writes through the view land in this memory, so a stateful brain
        can keep e.g. a few ``float32`` slots or ``uint16`` counters.

        Args:
            dtype: Element type; its size must divide ``MEMORY_SIZE``.
        """
        return np.frombuffer(self._data, dtype=dtype)
