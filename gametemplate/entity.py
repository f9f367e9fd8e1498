"""Named entities and the hierarchical component tree."""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, TypeVar

from .transform import Transform

C = TypeVar("C", bound="Component")


class Entity:
    """Something with a name that can be deactivated or hidden.

    ``active`` False marks the entity for removal; ``enabled`` False stops
    it from updating and rendering.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.active = True
        self.enabled = True


class Component(Entity):
    """A node in a game object's component tree, owning a transform.

    Children follow their parent's transform and are updated, late-updated
    and rendered after it.
    """

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.transform = Transform()
        self.game_object: Any = None
        self.parent: Optional[Component] = None
        self.pool: Any = None
        self._children: List[Component] = []

    @property
    def children(self) -> List[Component]:
        """A copy of the direct children."""
        return list(self._children)

    def __iter__(self) -> Iterator[Component]:
        return iter(list(self._children))

    def init(self) -> bool:
        """Initialise the children; False as soon as one fails."""
        return all(child.init() for child in list(self._children))

    def update(self, delta_time: float) -> None:
        for child in list(self._children):
            if not child.active:
                child.destroy()
                continue
            if not child.enabled:
                continue
            child.update(delta_time)

    def late_update(self, delta_time: float) -> None:
        """Late-update children, removing and releasing inactive ones."""
        for child in reversed(list(self._children)):
            if not child.active:
                self._detach(child)
                child.release()
                continue
            if not child.enabled:
                continue
            child.late_update(delta_time)

    def render(self, renderer: Any) -> None:
        for child in list(self._children):
            if child.active and child.enabled:
                child.render(renderer)

    def add_child(self, child: Component) -> None:
        self._children.append(child)
        child.game_object = self.find_root().game_object
        child.parent = self
        self.transform.add_child(child.transform)

    def delete_child(self, child: Component) -> bool:
        """Release the component in this subtree named like ``child``."""
        found = self.find(child.name)
        if found is None:
            return False
        if found.parent is not None:
            found.parent._detach(found)
        found.release()
        return True

    def find_root(self) -> Component:
        root = self
        while root.parent is not None:
            root = root.parent
        return root

    def find(self, name: str) -> Optional[Component]:
        """Depth-first search of this subtree for a component called ``name``."""
        if self.name == name:
            return self
        for child in self._children:
            found = child.find(name)
            if found is not None:
                return found
        return None

    def find_by_type(self, kind: type[C]) -> Optional[C]:
        """Depth-first search of this subtree for an instance of ``kind``."""
        if isinstance(self, kind):
            return self
        for child in self._children:
            found = child.find_by_type(kind)
            if found is not None:
                return found
        return None

    def enable(self) -> None:
        for child in self._children:
            child.enable()
        self.enabled = True

    def disable(self) -> None:
        for child in self._children:
            child.disable()
        self.enabled = False

    def destroy(self) -> None:
        """Mark this component and its subtree for removal."""
        for child in self._children:
            child.destroy()
        self.active = False

    def release(self) -> None:
        """Release the subtree and hand this component back to its pool."""
        for child in list(self._children):
            child.release()
        self._children.clear()
        self.transform.children.clear()
        pool, self.pool = self.pool, None
        if pool is not None:
            pool.deallocate(self)

    def _detach(self, child: Component) -> None:
        self._children.remove(child)
        if child.transform in self.transform.children:
            self.transform.children.remove(child.transform)
        child.parent = None