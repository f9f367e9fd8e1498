"""Collision channels, profiles and the shape intersection tests."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, Optional

from .vector import Vector2D


class Channel(IntEnum):
    """The collision channel an object belongs to."""

    DEFAULT = 0
    PLAYER = 1
    MONSTER = 2
    BULLET = 3


class Interaction(IntEnum):
    """How a profile reacts to another channel."""

    IGNORE = 0   # no detection, no response
    OVERLAP = 1  # detection and events only
    BLOCK = 2    # detection plus physical response


class ColliderType(Enum):
    NONE = 0
    BOX = 1
    CIRCLE = 2


class CollisionEvent(Enum):
    ENTER = 0
    STAY = 1
    EXIT = 2


class PairStatus(Enum):
    """What is known about a pair of colliders from the previous frame."""

    DNE = 0
    COLLIDED = 1
    NOT_COLLIDED = 2


@dataclass
class CollisionProfile:
    """A named channel with its interaction towards every channel."""

    name: str
    channel: Channel
    default_interaction: InitVar[Interaction]
    responses: Dict[Channel, Interaction] = field(init=False)

    def __post_init__(self, default_interaction: Interaction) -> None:
        self.responses = {channel: default_interaction for channel in Channel}


class ColliderPair:
    """An unordered pair of colliders, usable as a dict or set key."""

    __slots__ = ("collider1", "collider2")

    def __init__(self, collider1: Any, collider2: Any) -> None:
        self.collider1 = collider1
        self.collider2 = collider2

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColliderPair):
            return NotImplemented
        return (
            self.collider1 is other.collider1 and self.collider2 is other.collider2
        ) or (self.collider1 is other.collider2 and self.collider2 is other.collider1)

    def __hash__(self) -> int:
        return hash(frozenset((id(self.collider1), id(self.collider2))))

    def __repr__(self) -> str:
        return f"ColliderPair({self.collider1!r}, {self.collider2!r})"


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle; (x, y) is the top-left corner."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h


@dataclass(frozen=True)
class Circle:
    center: Vector2D = Vector2D.ZERO
    radius: float = 0.0


def aabb_hit(box1: Rect, box2: Rect) -> Optional[Vector2D]:
    """Centre of the overlap of two rectangles, or None if they are apart."""
    if (
        box1.right < box2.x
        or box1.x > box2.right
        or box1.bottom < box2.y
        or box1.y > box2.bottom
    ):
        return None
    x = (max(box1.x, box2.x) + min(box1.right, box2.right)) * 0.5
    y = (max(box1.y, box2.y) + min(box1.bottom, box2.bottom)) * 0.5
    return Vector2D(x, y)


def circle_circle_hit(circle1: Circle, circle2: Circle) -> Optional[Vector2D]:
    """Midpoint of the two centres if the circles touch, else None."""
    distance = circle1.center.distance(circle2.center)
    if distance > circle1.radius + circle2.radius:
        return None
    return (circle1.center + circle2.center) * 0.5


def aabb_circle_hit(box: Rect, circle: Circle) -> Optional[Vector2D]:
    """Point of the box closest to the circle centre if they touch, else None."""
    closest = circle.center.clamp(box.x, box.right, box.bottom, box.y)
    if circle.radius < circle.center.distance(closest):
        return None
    return closest


def rect_contains_point(rect: Rect, point: Vector2D) -> bool:
    """True if ``point`` lies in ``rect``, edges included."""
    return not (
        rect.right < point.x
        or rect.x > point.x
        or rect.bottom < point.y
        or rect.y > point.y
    )


def circle_contains_point(circle: Circle, point: Vector2D) -> bool:
    """True if ``point`` lies in ``circle``, boundary included."""
    return circle.center.distance(point) <= circle.radius


class CollisionProfiles:
    """Registry of collision profiles by name."""

    def __init__(self) -> None:
        self._profiles: Dict[str, CollisionProfile] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)

    def register_defaults(self) -> None:
        """Create the Player, Monster and Bullet sample profiles."""
        self.create_profile("Player", Channel.PLAYER, Interaction.BLOCK)
        self.create_profile("Monster", Channel.MONSTER, Interaction.BLOCK)
        self.create_profile("Bullet", Channel.BULLET, Interaction.OVERLAP)
        self.set_interaction("Player", Channel.BULLET, Interaction.IGNORE)
        self.set_interaction("Bullet", Channel.PLAYER, Interaction.IGNORE)

    def create_profile(
        self, name: str, channel: Channel, interaction: Interaction
    ) -> bool:
        """Add a profile; False if the name is taken."""
        if name in self._profiles:
            return False
        self._profiles[name] = CollisionProfile(name, channel, interaction)
        return True

    def set_interaction(
        self, name: str, other_channel: Channel, interaction: Interaction
    ) -> bool:
        """Set how profile ``name`` treats ``other_channel``; False if unknown."""
        profile = self._profiles.get(name)
        if profile is None:
            return False
        profile.responses[other_channel] = interaction
        return True

    def find_profile(self, name: str) -> Optional[CollisionProfile]:
        return self._profiles.get(name)