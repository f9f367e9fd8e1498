"""Intrusive reference counting and a handle that holds one reference."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar


class RefCounted(ABC):
    """Base for objects released when their reference count drops to zero."""

    _ref_count: int = 0

    @property
    def ref_count(self) -> int:
        return self._ref_count

    def increment_ref(self) -> None:
        self._ref_count += 1

    def decrement_ref(self) -> None:
        self._ref_count -= 1
        if self._ref_count == 0:
            self.release()

    @abstractmethod
    def release(self) -> None:
        """Called once the last reference is dropped."""


T = TypeVar("T", bound=RefCounted)


class SharedRef(Generic[T]):
    """Holds one reference to a ``RefCounted`` target, or to nothing.

    Used as a context manager, the reference is dropped on exit.
    """

    def __init__(self, target: Optional[T] = None) -> None:
        self._target: Optional[T] = None
        self.reset(target)

    @property
    def target(self) -> Optional[T]:
        return self._target

    def reset(self, target: Optional[T] = None) -> None:
        """Point at ``target`` instead, moving the held reference."""
        if target is not None:
            target.increment_ref()
        previous, self._target = self._target, target
        if previous is not None:
            previous.decrement_ref()

    def __enter__(self) -> SharedRef[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.reset(None)

    def __bool__(self) -> bool:
        return self._target is not None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SharedRef):
            return self._target is other._target
        return self._target is other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SharedRef({self._target!r})"