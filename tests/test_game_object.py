from gametemplate.entity import Component
from gametemplate.game_object import GameObject
from gametemplate.vector import Vector2D


class Recorder(Component):
    def __init__(self, name=""):
        super().__init__(name)
        self.calls = []

    def update(self, delta_time):
        self.calls.append(("update", delta_time))
        super().update(delta_time)

    def late_update(self, delta_time):
        self.calls.append(("late_update", delta_time))
        super().late_update(delta_time)

    def render(self, renderer):
        self.calls.append(("render", renderer))
        super().render(renderer)


class Failing(Component):
    def init(self):
        return False


class Tagged(Component):
    pass


def test_root_component_is_default_component():
    obj = GameObject("hero")
    root = obj.component()
    assert root.name == "RootComponent"
    assert root.game_object is obj


def test_component_found_by_name():
    obj = GameObject("hero")
    sprite = Component("sprite")
    obj.component().add_child(sprite)
    assert obj.component("sprite") is sprite
    assert obj.component("missing") is None


def test_added_component_knows_its_object():
    obj = GameObject("hero")
    outer = Component("outer")
    inner = Component("inner")
    obj.component().add_child(outer)
    outer.add_child(inner)
    assert inner.game_object is obj
    assert obj.component("inner") is inner


def test_component_of_type():
    obj = GameObject("hero")
    outer = Component("outer")
    tagged = Tagged("tagged")
    obj.component().add_child(outer)
    outer.add_child(tagged)
    assert obj.component_of_type(Tagged) is tagged
    assert obj.component_of_type(Recorder) is None


def test_transform_is_root_transform_and_moves_children():
    obj = GameObject("hero")
    child = Component("child")
    obj.component().add_child(child)
    obj.transform.set_world_pos(Vector2D(3.0, 4.0))
    assert obj.transform is obj.component().transform
    assert child.transform.world_pos == obj.transform.world_pos


def test_init_fails_when_a_component_fails():
    obj = GameObject("hero")
    obj.component().add_child(Failing("bad"))
    assert obj.init() is False


def test_init_succeeds_with_working_components():
    obj = GameObject("hero")
    obj.component().add_child(Component("good"))
    assert obj.init() is True


def test_update_late_update_and_render_reach_components():
    obj = GameObject("hero")
    rec = Recorder("rec")
    obj.component().add_child(rec)
    obj.update(0.25)
    obj.late_update(0.5)
    obj.render("renderer")
    assert rec.calls == [
        ("update", 0.25),
        ("late_update", 0.5),
        ("render", "renderer"),
    ]


def test_disable_and_enable_cascade():
    obj = GameObject("hero")
    child = Recorder("rec")
    obj.component().add_child(child)
    obj.disable()
    assert obj.enabled is False
    assert child.enabled is False
    obj.update(0.1)
    assert child.calls == []
    obj.enable()
    assert obj.enabled is True
    assert child.enabled is True


def test_destroy_marks_everything_and_late_update_removes():
    obj = GameObject("hero")
    child = Component("child")
    obj.component().add_child(child)
    obj.destroy()
    assert obj.active is False
    assert child.active is False
    obj.late_update(0.1)
    assert obj.component().children == []
    assert obj.component("child") is None