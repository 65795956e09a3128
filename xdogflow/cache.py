"""A cache of freed image allocations, reused by exact width and height."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

Allocator = Callable[[int, int], Tuple[Any, int]]


@dataclass(frozen=True, eq=False)
class Block:
    """An allocation of ``height`` rows of ``pitch`` bytes for ``width`` bytes of data."""

    handle: Any
    pitch: int
    width: int
    height: int

    @property
    def nbytes(self) -> int:
        return self.pitch * self.height


def _allocate_bytes(width: int, height: int) -> Tuple[bytearray, int]:
    return bytearray(width * height), width


class AllocationCache:
    """Keeps freed blocks and hands them out again for requests of the same size.

    ``allocate(width, height)`` is called when no cached block fits and must
    return ``(handle, pitch)``.
    """

    def __init__(self, allocate: Optional[Allocator] = None) -> None:
        self._allocate = allocate or _allocate_bytes
        self._free: Dict[Tuple[int, int], List[Block]] = defaultdict(list)
        self._cache_size = 0
        self._total_size = 0

    def alloc(self, width: int, height: int) -> Block:
        """A block for ``width`` bytes by ``height`` rows, cached if possible."""
        if width < 0 or height < 0:
            raise ValueError(f"allocation size must not be negative: {width}x{height}")
        bucket = self._free.get((width, height))
        if bucket:
            block = bucket.pop()
            if not bucket:
                del self._free[(width, height)]
            self._cache_size -= block.nbytes
            return block
        handle, pitch = self._allocate(width, height)
        block = Block(handle, pitch, width, height)
        self._total_size += block.nbytes
        return block

    def free(self, block: Block) -> None:
        """Return ``block`` to the cache for later reuse."""
        self._free[(block.width, block.height)].append(block)
        self._cache_size += block.nbytes

    def clear(self) -> None:
        """Drop every cached block."""
        for bucket in self._free.values():
            for block in bucket:
                self._total_size -= block.nbytes
        self._free.clear()
        self._cache_size = 0

    @property
    def size(self) -> int:
        """Bytes held in cached, unused blocks."""
        return self._cache_size

    @property
    def total(self) -> int:
        """Bytes of all blocks allocated and not cleared."""
        return self._total_size