"""Per-type object pools that reuse slots and grow in fixed-size blocks."""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class ObjectPool(Generic[T]):
    """Pool of objects made by ``factory``, growing ``capacity`` slots at a time.

    Free slots are handed out lowest index first; a freed slot is the next
    one to be reused.
    """

    def __init__(self, factory: Callable[[], T], capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"pool capacity must be positive, got {capacity}")
        self._factory = factory
        self._capacity = capacity
        self._slots: List[Optional[T]] = []
        self._free: List[int] = []
        self._index: Dict[int, int] = {}
        self._expand()

    @property
    def capacity(self) -> int:
        """Number of slots added per block."""
        return self._capacity

    @property
    def block_count(self) -> int:
        return len(self._slots) // self._capacity

    def __len__(self) -> int:
        return len(self._slots) - len(self._free)

    def __contains__(self, obj: object) -> bool:
        idx = self._index.get(id(obj))
        return idx is not None and self._slots[idx] is obj

    def allocate(self) -> T:
        """Create an object in the first free slot, growing if none is free."""
        if not self._free:
            self._expand()
        idx = self._free.pop()
        obj = self._factory()
        self._slots[idx] = obj
        self._index[id(obj)] = idx
        return obj

    def deallocate(self, obj: T) -> None:
        """Return the slot held by ``obj`` to the pool."""
        idx = self._index.get(id(obj))
        if idx is None or self._slots[idx] is not obj:
            raise ValueError("object was not allocated from this pool")
        del self._index[id(obj)]
        self._slots[idx] = None
        self._free.append(idx)

    def is_unused(self) -> bool:
        """True when no slot is in use."""
        return len(self._free) == len(self._slots)

    def _expand(self) -> None:
        start = len(self._slots)
        self._slots.extend([None] * self._capacity)
        self._free.extend(reversed(range(start, start + self._capacity)))


class PoolManager:
    """Keeps one ``ObjectPool`` per class, built with the class as factory."""

    def __init__(self) -> None:
        self._pools: Dict[type, ObjectPool[Any]] = {}

    def has_pool(self, kind: type) -> bool:
        return kind in self._pools

    def create_pool(self, kind: type, capacity: int) -> bool:
        """Create a pool for ``kind``; False if one already exists."""
        if capacity <= 0:
            raise ValueError(f"pool capacity must be positive, got {capacity}")
        if kind in self._pools:
            return False
        self._pools[kind] = ObjectPool(kind, capacity)
        return True

    def delete_pool(self, kind: type) -> bool:
        """Drop the pool for ``kind``; False if there was none."""
        return self._pools.pop(kind, None) is not None

    def allocate(self, kind: type) -> Any:
        """Allocate from the pool for ``kind``; KeyError if it has none."""
        try:
            pool = self._pools[kind]
        except KeyError:
            raise KeyError(f"no pool for {kind.__name__}") from None
        return pool.allocate()

    def deallocate(self, obj: Any) -> None:
        """Free ``obj`` and drop its pool once the pool is entirely unused.

        Objects whose class has no pool are ignored.
        """
        kind = type(obj)
        pool = self._pools.get(kind)
        if pool is None:
            return
        pool.deallocate(obj)
        if pool.is_unused():
            self.delete_pool(kind)

    def deallocate_but_keep_pool(self, obj: Any) -> None:
        """Free ``obj`` but keep its pool even when empty."""
        pool = self._pools.get(type(obj))
        if pool is not None:
            pool.deallocate(obj)