"""Game objects: named containers for a tree of components."""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from .entity import Component, Entity
from .transform import Transform

C = TypeVar("C", bound=Component)

ROOT_COMPONENT_NAME = "RootComponent"


class GameObject(Entity):
    """An object in a scene, made of components hung from a root component.

    The root component does no work of its own; it anchors the hierarchy
    and its transform is the object's transform.
    """

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.scene: Any = None
        self.layer: Any = None
        self.root = Component(ROOT_COMPONENT_NAME)
        self.root.game_object = self

    @property
    def transform(self) -> Transform:
        return self.root.transform

    def init(self) -> bool:
        """Initialise every component; False as soon as one fails."""
        return self.root.init()

    def update(self, delta_time: float) -> None:
        self.root.update(delta_time)

    def late_update(self, delta_time: float) -> None:
        self.root.late_update(delta_time)

    def render(self, renderer: Any) -> None:
        self.root.render(renderer)

    def component(self, name: str = "") -> Optional[Component]:
        """The component called ``name``, or the root when ``name`` is empty."""
        if not name:
            return self.root
        return self.root.find(name)

    def component_of_type(self, kind: type[C]) -> Optional[C]:
        """The first component in the tree that is an instance of ``kind``."""
        return self.root.find_by_type(kind)

    def enable(self) -> None:
        self.enabled = True
        self.root.enable()

    def disable(self) -> None:
        self.enabled = False
        self.root.disable()

    def destroy(self) -> None:
        """Mark the object and all its components for removal."""
        self.active = False
        self.root.destroy()

    def __repr__(self) -> str:
        return f"GameObject({self.name!r})"