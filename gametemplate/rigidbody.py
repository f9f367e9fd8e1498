"""Simple rigid body: forces, impulses, gravity and linear drag."""

from __future__ import annotations

import math
from enum import Enum

from .entity import Component
from .vector import Vector2D

GRAVITY_DIR = Vector2D(0.0, 9.8)
LINEAR_DRAG = 0.995
PIXELS_PER_METER = 10.0

DEFAULT_MASS = 100.0


class RigidbodyType(Enum):
    STATIC = 0
    DYNAMIC = 1


class Rigidbody(Component):
    """Integrates forces into velocity and moves the owning object.

    Static bodies and bodies without positive mass are not simulated.
    """

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.body_type = RigidbodyType.DYNAMIC
        self.mass = DEFAULT_MASS
        self.gravity_scale = 0.0
        self.velocity = Vector2D.ZERO
        self.acceleration = Vector2D.ZERO
        self.accumulated_force = Vector2D.ZERO

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        if self.body_type is RigidbodyType.STATIC or self.mass <= 0.0:
            return

        self.accumulated_force = self.accumulated_force + (
            GRAVITY_DIR * self.gravity_scale * self.mass * PIXELS_PER_METER
        )
        self.acceleration = self.accumulated_force / self.mass
        self.velocity = self.velocity + self.acceleration * delta_time
        self.velocity = self.velocity * math.exp(-LINEAR_DRAG * delta_time)
        self._move_object(delta_time)
        self.accumulated_force = Vector2D.ZERO

    def add_force(self, force: Vector2D) -> None:
        """Add a continuous force, applied on the next update."""
        self.accumulated_force = self.accumulated_force + force

    def add_impulse(self, impulse: Vector2D) -> None:
        """Change velocity at once by ``impulse`` over the mass."""
        if self.mass > 0.0:
            self.velocity = self.velocity + impulse / self.mass

    def _move_object(self, delta_time: float) -> None:
        if self.game_object is None:
            raise RuntimeError(f"rigidbody {self.name!r} has no game object")
        transform = self.game_object.transform
        transform.set_relative_pos(transform.relative_pos + self.velocity * delta_time)