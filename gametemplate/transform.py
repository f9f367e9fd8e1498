"""Hierarchical 2D transform with world and parent-relative values."""

from __future__ import annotations

from typing import Iterable, List, Optional, Union

from .vector import Vector2D

VectorLike = Union[Vector2D, Iterable[float]]


def _as_vector(value: VectorLike) -> Vector2D:
    if isinstance(value, Vector2D):
        return value
    x, y = value
    return Vector2D(float(x), float(y))


class Transform:
    """Position, rotation (degrees) and scale, kept in sync with a parent.

    Setting a world value recomputes the relative value against the parent
    and propagates the change to every child.
    """

    def __init__(self) -> None:
        self._parent: Optional[Transform] = None
        self._children: List[Transform] = []
        self._world_pos = Vector2D.ZERO
        self._world_rotation = 0.0
        self._world_scale = Vector2D.ZERO
        self._pivot = Vector2D.ZERO
        self._relative_pos = Vector2D.ZERO
        self._relative_rotation = 0.0
        self._relative_scale = Vector2D.ZERO

    @property
    def parent(self) -> Optional[Transform]:
        return self._parent

    @property
    def children(self) -> List[Transform]:
        """The live list of child transforms."""
        return self._children

    @property
    def world_pos(self) -> Vector2D:
        return self._world_pos

    @property
    def world_rotation(self) -> float:
        return self._world_rotation

    @property
    def world_scale(self) -> Vector2D:
        return self._world_scale

    @property
    def pivot(self) -> Vector2D:
        return self._pivot

    @property
    def relative_pos(self) -> Vector2D:
        return self._relative_pos

    @property
    def relative_rotation(self) -> float:
        return self._relative_rotation

    @property
    def relative_scale(self) -> Vector2D:
        return self._relative_scale

    def add_child(self, child: Transform) -> None:
        child._parent = self
        self._children.append(child)

    def set_world_pos(self, pos: VectorLike) -> None:
        self._world_pos = _as_vector(pos)
        parent = self._parent
        if parent is not None:
            offset = self._world_pos - parent._world_pos
            self._relative_pos = offset.rotated(-parent._world_rotation)
        else:
            self._relative_pos = self._world_pos

        for child in self._children:
            child.set_world_pos(child._relative_pos + self._world_pos)

    def set_world_rotation(self, angle: float) -> None:
        self._world_rotation = angle
        parent = self._parent
        if parent is not None:
            self._relative_rotation = angle - parent._world_rotation
        else:
            self._relative_rotation = angle

        for child in self._children:
            child.set_world_rotation(child._relative_rotation + self._world_rotation)
            child.set_world_pos(
                child._relative_pos.rotated(self._world_rotation) + self._world_pos
            )

    def set_world_scale(self, scale: VectorLike) -> None:
        self._world_scale = _as_vector(scale)
        parent = self._parent
        if parent is not None:
            self._relative_scale = self._world_scale / parent._world_scale
        else:
            self._relative_scale = self._world_scale

        for child in self._children:
            child.set_world_scale(child._relative_scale * self._world_scale)
            child.set_world_pos(child._relative_pos * self._world_scale + self._world_pos)

    def set_pivot(self, pivot: VectorLike) -> None:
        self._pivot = _as_vector(pivot)

    def set_relative_pos(self, pos: VectorLike) -> None:
        self._relative_pos = _as_vector(pos)
        parent = self._parent
        if parent is not None:
            self._world_pos = self._relative_pos + parent._world_pos
        else:
            self._world_pos = self._relative_pos

        for child in self._children:
            child.set_world_pos(child._relative_pos + self._world_pos)

    def set_relative_rotation(self, angle: float) -> None:
        self._relative_rotation = angle
        parent = self._parent
        if parent is not None:
            self._world_rotation = angle + parent._world_rotation
        else:
            self._world_rotation = angle

        for child in self._children:
            child._world_pos = (
                child._relative_pos.rotated(self._world_rotation) + self._world_pos
            )
            total_rotation = child._relative_rotation
            ancestor = self._parent
            while ancestor is not None:
                total_rotation += ancestor._relative_rotation
                ancestor = ancestor._parent
            child.set_world_rotation(total_rotation)

    def set_relative_scale(self, scale: VectorLike) -> None:
        self._relative_scale = _as_vector(scale)
        parent = self._parent
        if parent is not None:
            self._world_scale = self._relative_scale * parent._world_scale
        else:
            self._world_scale = self._relative_scale

        for child in self._children:
            child._world_pos = child._relative_pos * self._world_scale + self._world_pos
            child.set_world_scale(child._relative_scale * self._world_scale)