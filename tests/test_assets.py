import pytest

from gametemplate.assets import (
    AnimationData,
    AnimationLibrary,
    AnimationState,
    AnimationType,
    FrameRect,
    SpriteFrames,
    UIFrames,
)


def test_enum_values_follow_declaration_order():
    assert AnimationType(1) is AnimationType.TIME
    assert AnimationState(2) is AnimationState.WALK


def test_animation_data_defaults():
    data = AnimationData()
    assert data.type is AnimationType.NONE
    assert data.is_loop is False
    assert data.interval_per_frame == 0.0
    assert data.frames == []
    assert AnimationData().frames is not data.frames


def test_sprite_frames_lookup():
    sprites = SpriteFrames()
    sprites["Bullet"] = FrameRect(1, 2, 3, 4)
    assert sprites.frame("Bullet") == FrameRect(1, 2, 3, 4)
    assert sprites.frame("Missing") is None


def test_ui_frames_lookup():
    ui = UIFrames()
    ui.setdefault("HpBar", []).append(FrameRect(0, 0, 70, 13))
    assert ui.frames("HpBar") == [FrameRect(0, 0, 70, 13)]
    assert ui.frames("Missing") is None


def test_create_animation_once():
    library = AnimationLibrary()
    assert library.create("Imelda") is True
    assert library.create("Imelda") is False
    assert len(library) == 1
    assert "Imelda" in library


def test_get_missing_animation():
    assert AnimationLibrary().get("Imelda") is None


def test_add_state_and_get():
    library = AnimationLibrary()
    library.create("Imelda")
    walk = AnimationData(AnimationType.TIME, True, 0.1, [FrameRect(0, 0, 32, 32)])
    library.add_state("Imelda", AnimationState.WALK, walk)
    states = library.get("Imelda")
    assert states[AnimationState.WALK] is walk
    assert list(states) == [AnimationState.WALK]


def test_get_returns_read_only_view():
    library = AnimationLibrary()
    library.create("Imelda")
    states = library.get("Imelda")
    with pytest.raises(TypeError):
        states[AnimationState.IDLE] = AnimationData()


def test_add_state_replaces_previous():
    library = AnimationLibrary()
    library.create("Imelda")
    first, second = AnimationData(), AnimationData(AnimationType.MOVE)
    library.add_state("Imelda", AnimationState.IDLE, first)
    library.add_state("Imelda", AnimationState.IDLE, second)
    assert library.get("Imelda")[AnimationState.IDLE] is second


def test_add_state_to_unknown_animation():
    with pytest.raises(KeyError):
        AnimationLibrary().add_state("Ghost", AnimationState.IDLE, AnimationData())