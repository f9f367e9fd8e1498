"""Sprite frames, widget frames and animation data kept by name."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional


@dataclass(frozen=True)
class FrameRect:
    """A rectangle in a texture, in whole pixels."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


class AnimationType(IntEnum):
    NONE = 0
    TIME = 1
    MOVE = 2


class AnimationState(IntEnum):
    NONE = 0
    IDLE = 1
    WALK = 2
    JUMP = 3


@dataclass
class AnimationData:
    """The frames of one animation state and how they are played."""

    type: AnimationType = AnimationType.NONE
    is_loop: bool = False
    interval_per_frame: float = 0.0
    frames: List[FrameRect] = field(default_factory=list)


class SpriteFrames(Dict[str, FrameRect]):
    """Single sprite frames by key."""

    def frame(self, key: str) -> Optional[FrameRect]:
        """The frame stored as ``key``, or None."""
        return self.get(key)


class UIFrames(Dict[str, List[FrameRect]]):
    """Lists of widget frames by key."""

    def frames(self, key: str) -> Optional[List[FrameRect]]:
        """The frames stored as ``key``, or None."""
        return self.get(key)


class AnimationLibrary:
    """Animations by key, each a set of per-state animation data."""

    def __init__(self) -> None:
        self._animations: Dict[str, Dict[AnimationState, AnimationData]] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._animations

    def __iter__(self) -> Iterator[str]:
        return iter(self._animations)

    def __len__(self) -> int:
        return len(self._animations)

    def create(self, key: str) -> bool:
        """Create an empty animation ``key``; False if it already exists."""
        if key in self._animations:
            return False
        self._animations[key] = {}
        return True

    def get(self, key: str) -> Optional[Mapping[AnimationState, AnimationData]]:
        """A read-only view of the states of animation ``key``, or None."""
        states = self._animations.get(key)
        if states is None:
            return None
        return MappingProxyType(states)

    def add_state(self, key: str, state: AnimationState, data: AnimationData) -> None:
        """Store ``data`` for ``state`` of animation ``key``.

        Raises KeyError if the animation has not been created.
        """
        try:
            states = self._animations[key]
        except KeyError:
            raise KeyError(f"no animation named {key!r}") from None
        states[state] = data