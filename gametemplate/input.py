"""Keyboard and mouse state tracking with named input bindings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Tuple

from .vector import Vector2D

MOUSE_LEFT = 1
MOUSE_MIDDLE = 2
MOUSE_RIGHT = 3

DEFAULT_KEYS = ("w", "a", "s", "d")
DEFAULT_MOUSE_BUTTONS = (MOUSE_LEFT, MOUSE_RIGHT)


class KeyState(Enum):
    """The phase of an input that a binding waits for."""

    PRESS = "press"
    HOLD = "hold"
    RELEASE = "release"


@dataclass
class InputState:
    """Per-frame state of a single key or mouse button."""

    press: bool = False
    hold: bool = False
    release: bool = False

    def update(self, is_pressed: bool) -> None:
        """Advance one frame given whether the input is down now."""
        if is_pressed:
            if not self.hold:
                self.press = True
                self.hold = True
            else:
                self.press = False
        elif self.hold:
            self.press = False
            self.hold = False
            self.release = True
        elif self.release:
            self.release = False

    def matches(self, state: KeyState) -> bool:
        """True when this input is currently in ``state``."""
        if state is KeyState.PRESS:
            return self.press
        if state is KeyState.HOLD:
            return self.hold
        if state is KeyState.RELEASE:
            return self.release
        return False


@dataclass
class Binder:
    """A combination of inputs and the functions it triggers."""

    keys: List[Tuple[Hashable, KeyState]] = field(default_factory=list)
    mouse_buttons: List[Tuple[int, KeyState]] = field(default_factory=list)
    functions: List[Tuple[Any, Callable[[], None]]] = field(default_factory=list)

    def has_inputs(self) -> bool:
        return bool(self.keys or self.mouse_buttons)


class Input:
    """Tracks registered keys and buttons and runs bound functions.

    Only keys and buttons created beforehand are tracked; a binding that
    names an untracked input never fires.
    """

    def __init__(self) -> None:
        self._keys: Dict[Hashable, InputState] = {}
        self._mouse_buttons: Dict[int, InputState] = {}
        self._binders: Dict[str, Binder] = {}
        self._mouse_pos = Vector2D.ZERO

    @property
    def mouse_pos(self) -> Vector2D:
        return self._mouse_pos

    @property
    def keys(self) -> Tuple[Hashable, ...]:
        """Tracked keyboard keys."""
        return tuple(self._keys)

    @property
    def mouse_buttons(self) -> Tuple[int, ...]:
        """Tracked mouse buttons."""
        return tuple(self._mouse_buttons)

    def register_defaults(self) -> None:
        """Track the W, A, S, D keys and the left and right mouse buttons."""
        for key in DEFAULT_KEYS:
            self.create_key(key)
        for button in DEFAULT_MOUSE_BUTTONS:
            self.create_mouse(button)

    def create_key(self, key: Hashable) -> bool:
        """Start tracking ``key``; False if it is already tracked."""
        if key in self._keys:
            return False
        self._keys[key] = InputState()
        return True

    def create_mouse(self, button: int) -> bool:
        """Start tracking mouse ``button``; False if it is already tracked."""
        if button in self._mouse_buttons:
            return False
        self._mouse_buttons[button] = InputState()
        return True

    def update(
        self,
        pressed_keys: Iterable[Hashable] = (),
        pressed_buttons: Iterable[int] = (),
        mouse_pos: Optional[Vector2D] = None,
    ) -> None:
        """Advance one frame from the inputs held down now, then run bindings."""
        down_keys = set(pressed_keys)
        down_buttons = set(pressed_buttons)

        for key, state in self._keys.items():
            state.update(key in down_keys)

        if mouse_pos is not None:
            x, y = mouse_pos
            self._mouse_pos = Vector2D(float(x), float(y))
        for button, state in self._mouse_buttons.items():
            state.update(button in down_buttons)

        self._run_binders()

    def _run_binders(self) -> None:
        for binder in self._binders.values():
            if not binder.has_inputs():
                continue
            if not self._all_match(self._keys, binder.keys):
                continue
            if not self._all_match(self._mouse_buttons, binder.mouse_buttons):
                continue
            for _owner, func in list(binder.functions):
                func()

    @staticmethod
    def _all_match(
        states: Dict[Any, InputState], wanted: List[Tuple[Any, KeyState]]
    ) -> bool:
        for code, state in wanted:
            current = states.get(code)
            if current is None or not current.matches(state):
                return False
        return True

    def mouse_button_state(self, button: int, state: KeyState) -> bool:
        """True when mouse ``button`` is in ``state``; False if untracked."""
        current = self._mouse_buttons.get(button)
        return current is not None and current.matches(state)

    def add_function_to_binder(
        self, name: str, owner: Any, func: Callable[[], None]
    ) -> None:
        """Bind ``func`` (owned by ``owner``) to ``name``, creating the binder."""
        binder = self._binders.setdefault(name, Binder())
        binder.functions.append((owner, func))

    def delete_function_from_binder(self, name: str, owner: Any) -> None:
        """Remove every function bound to ``name`` by ``owner``."""
        binder = self._binders.get(name)
        if binder is None:
            return
        binder.functions = [
            (bound_owner, func)
            for bound_owner, func in binder.functions
            if bound_owner is not owner
        ]

    def add_key_to_binder(self, name: str, key: Hashable, state: KeyState) -> bool:
        """Require ``key`` in ``state`` for ``name``; False if no such binder."""
        binder = self._binders.get(name)
        if binder is None:
            return False
        binder.keys.append((key, state))
        return True

    def add_mouse_to_binder(self, name: str, button: int, state: KeyState) -> bool:
        """Require ``button`` in ``state`` for ``name``; False if no such binder."""
        binder = self._binders.get(name)
        if binder is None:
            return False
        binder.mouse_buttons.append((button, state))
        return True