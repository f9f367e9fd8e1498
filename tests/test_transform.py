import math

import pytest

from gametemplate.transform import Transform
from gametemplate.vector import Vector2D


def assert_close(actual, expected, tol=1e-4):
    assert math.isclose(actual.x, expected.x, abs_tol=tol)
    assert math.isclose(actual.y, expected.y, abs_tol=tol)


def make_pair():
    parent = Transform()
    child = Transform()
    parent.add_child(child)
    return parent, child


def test_new_transform_is_zeroed():
    t = Transform()
    assert t.world_pos == Vector2D.ZERO
    assert t.world_scale == Vector2D.ZERO
    assert t.relative_pos == Vector2D.ZERO
    assert t.pivot == Vector2D.ZERO
    assert t.world_rotation == 0.0
    assert t.parent is None
    assert t.children == []


def test_add_child_links_both_ways():
    parent, child = make_pair()
    assert child.parent is parent
    assert parent.children == [child]


def test_root_world_pos_equals_relative():
    t = Transform()
    t.set_world_pos(Vector2D(12.0, -4.0))
    assert t.relative_pos == t.world_pos
    assert t.world_pos == Vector2D(12.0, -4.0)


def test_accepts_pairs():
    t = Transform()
    t.set_world_pos((3, 4))
    t.set_pivot((0.5, 0.5))
    assert t.world_pos == Vector2D(3.0, 4.0)
    assert t.pivot == Vector2D(0.5, 0.5)


def test_child_relative_pos_is_offset_from_parent():
    parent, child = make_pair()
    parent.set_world_pos(Vector2D(10.0, 5.0))
    child.set_world_pos(Vector2D(15.0, 9.0))
    assert child.relative_pos == child.world_pos - parent.world_pos


def test_moving_parent_keeps_child_offset():
    parent, child = make_pair()
    parent.set_world_pos(Vector2D(10.0, 0.0))
    child.set_world_pos(Vector2D(15.0, 3.0))
    offset = child.relative_pos
    parent.set_world_pos(Vector2D(-20.0, 40.0))
    assert child.relative_pos == offset
    assert child.world_pos == parent.world_pos + offset


def test_rotating_parent_orbits_child():
    parent, child = make_pair()
    parent.set_world_pos(Vector2D(100.0, 100.0))
    child.set_world_pos(Vector2D(105.0, 100.0))
    offset = child.relative_pos
    parent.set_world_rotation(90.0)
    assert child.world_rotation == pytest.approx(90.0)
    assert child.relative_rotation == pytest.approx(0.0)
    assert_close(child.relative_pos, offset)
    assert child.world_pos.distance(parent.world_pos) == pytest.approx(offset.length())


def test_child_rotation_is_relative_to_parent():
    parent, child = make_pair()
    parent.set_world_rotation(30.0)
    child.set_world_rotation(75.0)
    assert child.relative_rotation == pytest.approx(
        child.world_rotation - parent.world_rotation
    )


def test_scaling_parent_scales_child():
    parent = Transform()
    child = Transform()
    child.set_world_scale(Vector2D(3.0, 4.0))
    parent.set_world_scale(Vector2D(1.0, 1.0))
    parent.add_child(child)
    parent.set_world_scale(Vector2D(2.0, 2.0))
    assert child.relative_scale == Vector2D(3.0, 4.0)
    assert child.world_scale == child.relative_scale * parent.world_scale


def test_world_scale_under_zero_scaled_parent_raises():
    parent, child = make_pair()
    with pytest.raises(ZeroDivisionError):
        child.set_world_scale(Vector2D(1.0, 1.0))


def test_relative_pos_with_parent():
    parent, child = make_pair()
    parent.set_world_pos(Vector2D(7.0, -2.0))
    child.set_relative_pos(Vector2D(1.0, 1.0))
    assert child.relative_pos == Vector2D(1.0, 1.0)
    assert child.world_pos == child.relative_pos + parent.world_pos


def test_relative_pos_moves_children():
    parent, child = make_pair()
    child.set_relative_pos(Vector2D(2.0, 3.0))
    parent.set_relative_pos(Vector2D(50.0, 60.0))
    assert child.world_pos == parent.world_pos + child.relative_pos


def test_relative_rotation_updates_children():
    parent, child = make_pair()
    child.set_world_rotation(30.0)
    parent.set_relative_rotation(45.0)
    assert parent.world_rotation == 45.0
    assert child.world_rotation == 30.0
    assert child.relative_rotation == pytest.approx(
        child.world_rotation - parent.world_rotation
    )


def test_relative_scale_updates_children():
    parent = Transform()
    child = Transform()
    child.set_world_scale(Vector2D(3.0, 4.0))
    parent.add_child(child)
    parent.set_relative_scale(Vector2D(2.0, 5.0))
    assert parent.world_scale == Vector2D(2.0, 5.0)
    assert child.world_scale == child.relative_scale * parent.world_scale