"""Component that moves its game object in a requested direction."""

from __future__ import annotations

from .entity import Component
from .vector import Vector2D

DEFAULT_SPEED = 500.0


class MovementComponent(Component):
    """Moves the owning object by the directions requested this frame.

    Requested directions are summed, normalised and applied at ``speed``
    units per second, then cleared.
    """

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.speed = DEFAULT_SPEED
        self.move_dir = Vector2D.ZERO
        self.facing_dir = Vector2D.ZERO

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        self._move(delta_time)

    def add_move_dir(self, direction: Vector2D) -> None:
        """Request movement in ``direction`` for the next update."""
        self.move_dir = self.move_dir + direction

    def _move(self, delta_time: float) -> None:
        if self.move_dir == Vector2D.ZERO:
            return
        if self.game_object is None:
            raise RuntimeError(f"movement component {self.name!r} has no game object")
        transform = self.game_object.transform
        movement = self.move_dir.normalized() * self.speed * delta_time
        transform.set_world_pos(transform.world_pos + movement)
        self.facing_dir = self.move_dir
        self.move_dir = Vector2D.ZERO