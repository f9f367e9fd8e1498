"""Push overlapping colliders apart along the minimum translation vector."""

from __future__ import annotations

from .collision import ColliderType
from .colliders import BoxCollider, CircleCollider, Collider
from .vector import Vector2D


def resolve_overlap(
    collider1: Collider, collider2: Collider, push1: bool, push2: bool
) -> None:
    """Separate two overlapping colliders.

    ``push1`` and ``push2`` choose which of the owning objects is moved.
    Pairs of unknown shape types are left alone.
    """
    type1 = collider1.collider_type
    type2 = collider2.collider_type
    box, circle = ColliderType.BOX, ColliderType.CIRCLE

    if type1 is box and type2 is box:
        _resolve_aabb(collider1, collider2, push1, push2)
    elif type1 is circle and type2 is circle:
        _resolve_circle_circle(collider1, collider2, push1, push2)
    elif type1 is box and type2 is circle:
        _resolve_aabb_circle(collider1, collider2, push1, push2)
    elif type1 is circle and type2 is box:
        _resolve_aabb_circle(collider2, collider1, push2, push1)


def move_by(collider: Collider, mtv: Vector2D) -> None:
    """Shift the object owning ``collider`` by ``mtv``."""
    game_object = collider.game_object
    if game_object is None:
        raise ValueError(f"collider {collider.name!r} has no game object")
    transform = game_object.transform
    transform.set_relative_pos(transform.relative_pos + mtv)


def _axis_mtv(delta: Vector2D, overlap_x: float, overlap_y: float) -> Vector2D:
    if overlap_x < overlap_y:
        return Vector2D(-overlap_x if delta.x < 0 else overlap_x, 0.0)
    return Vector2D(0.0, -overlap_y if delta.y < 0 else overlap_y)


def _apply(
    collider1: Collider, collider2: Collider, mtv: Vector2D, push1: bool, push2: bool
) -> None:
    if push1:
        move_by(collider1, mtv)
    if push2:
        move_by(collider2, -mtv)


def _resolve_aabb(
    collider1: BoxCollider, collider2: BoxCollider, push1: bool, push2: bool
) -> None:
    box1, box2 = collider1.rect, collider2.rect
    center1 = Vector2D(box1.x + box1.w * 0.5, box1.y + box1.h * 0.5)
    center2 = Vector2D(box2.x + box2.w * 0.5, box2.y + box2.h * 0.5)
    delta = center1 - center2
    overlap_x = (box1.w + box2.w) * 0.5 - abs(delta.x)
    overlap_y = (box1.h + box2.h) * 0.5 - abs(delta.y)
    _apply(collider1, collider2, _axis_mtv(delta, overlap_x, overlap_y), push1, push2)


def _resolve_circle_circle(
    collider1: CircleCollider, collider2: CircleCollider, push1: bool, push2: bool
) -> None:
    circle1, circle2 = collider1.circle, collider2.circle
    delta = circle1.center - circle2.center
    overlap = circle1.radius + circle2.radius - delta.length()
    # Coincident centres have no separating direction: normalized() raises.
    mtv = delta.normalized() * overlap
    _apply(collider1, collider2, mtv, push1, push2)


def _resolve_aabb_circle(
    box_collider: BoxCollider,
    circle_collider: CircleCollider,
    push_box: bool,
    push_circle: bool,
) -> None:
    box, circle = box_collider.rect, circle_collider.circle
    box_center = Vector2D(box.x + box.w * 0.5, box.y + box.h * 0.5)
    delta = box_center - circle.center
    overlap_x = (box.w * 0.5 + circle.radius) - abs(delta.x)
    overlap_y = (box.h * 0.5 + circle.radius) - abs(delta.y)
    mtv = _axis_mtv(delta, overlap_x, overlap_y)
    _apply(box_collider, circle_collider, mtv, push_box, push_circle)