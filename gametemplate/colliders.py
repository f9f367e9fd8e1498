"""Collider components: box and circle shapes with collision callbacks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Tuple

from .collision import (
    Circle,
    ColliderType,
    CollisionEvent,
    CollisionProfile,
    CollisionProfiles,
    Rect,
    aabb_circle_hit,
    aabb_hit,
    circle_circle_hit,
)
from .entity import Component
from .vector import Vector2D

Callback = Callable[["Collider", "Collider"], None]


class Collider(Component, ABC):
    """A component that detects overlap with other colliders.

    Counts the colliders it currently touches and runs callbacks on
    enter, stay and exit.
    """

    collider_type = ColliderType.NONE

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.profile: Optional[CollisionProfile] = None
        self.collided_count = 0
        self.hit_point = Vector2D.ZERO
        self._callbacks: Dict[CollisionEvent, List[Callback]] = {
            event: [] for event in CollisionEvent
        }

    @property
    def is_collided(self) -> bool:
        return self.collided_count > 0

    def init(self) -> bool:
        super().init()
        return True

    @abstractmethod
    def intersect(self, other: Collider) -> bool:
        """Test for overlap with ``other``, recording the hit point on both."""

    def on_collision_enter(self, other: Collider) -> None:
        self.collided_count += 1
        for callback in list(self._callbacks[CollisionEvent.ENTER]):
            callback(self, other)

    def on_collision_stay(self, other: Collider) -> None:
        for callback in list(self._callbacks[CollisionEvent.STAY]):
            callback(self, other)

    def on_collision_exit(self, other: Collider) -> None:
        """Run exit callbacks once the last touching collider has left."""
        self.collided_count -= 1
        if self.collided_count <= 0:
            self.collided_count = 0
            for callback in list(self._callbacks[CollisionEvent.EXIT]):
                callback(self, other)

    def add_callback(self, event: CollisionEvent, callback: Callback) -> None:
        self._callbacks[event].append(callback)

    def set_profile(self, name: str, profiles: CollisionProfiles) -> None:
        """Use the profile called ``name``; None if it is not registered."""
        self.profile = profiles.find_profile(name)

    def _record_hit(self, other: Collider, hit: Optional[Vector2D]) -> bool:
        if hit is None:
            return False
        self.hit_point = hit
        other.hit_point = hit
        return True

    def _top_left(self) -> Vector2D:
        t = self.transform
        return t.world_pos - t.pivot * t.world_scale


class BoxCollider(Collider):
    """Axis-aligned box sized by the world scale around the pivot."""

    collider_type = ColliderType.BOX

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.rect = Rect()

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        top_left = self._top_left()
        scale = self.transform.world_scale
        self.rect = Rect(top_left.x, top_left.y, scale.x, scale.y)

    def intersect(self, other: Collider) -> bool:
        if other.collider_type is ColliderType.BOX:
            return self._record_hit(other, aabb_hit(self.rect, other.rect))
        if other.collider_type is ColliderType.CIRCLE:
            return self._record_hit(other, aabb_circle_hit(self.rect, other.circle))
        return True


class CircleCollider(Collider):
    """Circle whose diameter is the world scale's x component."""

    collider_type = ColliderType.CIRCLE

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.circle = Circle()

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        scale = self.transform.world_scale
        center = self._top_left() + scale * 0.5
        self.circle = Circle(center, scale.x * 0.5)

    def intersect(self, other: Collider) -> bool:
        if other.collider_type is ColliderType.CIRCLE:
            return self._record_hit(other, circle_circle_hit(self.circle, other.circle))
        if other.collider_type is ColliderType.BOX:
            return self._record_hit(other, aabb_circle_hit(other.rect, self.circle))
        return True


def circle_outline(center: Vector2D, radius: float) -> List[Tuple[int, int]]:
    """Pixel points of a circle outline using the midpoint algorithm."""
    cx, cy = int(center.x), int(center.y)
    r = int(radius)
    x, y = r, 0
    dx, dy = 1, 1
    error = dx - 2 * r
    points: List[Tuple[int, int]] = []
    while x >= y:
        points.extend(
            [
                (cx + x, cy + y),
                (cx + y, cy + x),
                (cx - y, cy + x),
                (cx - x, cy + y),
                (cx - x, cy - y),
                (cx - y, cy - x),
                (cx + y, cy - x),
                (cx + x, cy - y),
            ]
        )
        if error <= 0:
            y += 1
            error += dy
            dy += 2
        if error > 0:
            x -= 1
            dx += 2
            error += dx - 2 * r
    return points