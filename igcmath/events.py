"""Input event types and the keyboard character mapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class KeyboardAction(IntEnum):
    PRESS = 0
    RELEASE = 1


class Key(IntEnum):
    """Keyboard keys, numbered in a fixed order starting from zero."""

    DIGIT_1 = 0
    DIGIT_2 = 1
    DIGIT_3 = 2
    DIGIT_4 = 3
    DIGIT_5 = 4
    DIGIT_6 = 5
    DIGIT_7 = 6
    DIGIT_8 = 7
    DIGIT_9 = 8
    DIGIT_0 = 9
    Q = 10
    W = 11
    E = 12
    R = 13
    T = 14
    Y = 15
    U = 16
    I = 17  # noqa: E741
    O = 18  # noqa: E741
    P = 19
    A = 20
    S = 21
    D = 22
    F = 23
    G = 24
    H = 25
    J = 26
    K = 27
    L = 28
    Z = 29
    X = 30
    C = 31
    V = 32
    B = 33
    N = 34
    M = 35
    UP_ARROW = 36
    DOWN_ARROW = 37
    LEFT_ARROW = 38
    RIGHT_ARROW = 39
    LEFT_SHIFT = 40
    RIGHT_SHIFT = 41
    SPACE = 42
    PAGE_UP = 43
    PAGE_DOWN = 44


class MouseAction(IntEnum):
    BUTTON_PRESS = 0
    BUTTON_RELEASE = 1
    MOVE = 2
    SCROLL = 3


class MouseButton(IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class WindowEventType(IntEnum):
    FRAMEBUFFER_SIZE = 0


def _char_of(key: Key) -> str | None:
    if len(key.name) == 1:
        return key.name.lower()
    if key.name.startswith("DIGIT_"):
        return key.name[-1]
    return None


_KEY_TO_CHAR: dict[Key, str] = {
    key: char for key in Key if (char := _char_of(key)) is not None
}
_CHAR_TO_KEY: dict[str, Key] = {char: key for key, char in _KEY_TO_CHAR.items()}


def key_to_char(key: Key) -> str:
    """The lower-case character a key types; ValueError for keys without one."""
    try:
        return _KEY_TO_CHAR[Key(key)]
    except (KeyError, ValueError):
        raise ValueError(f"key {key!r} has no character") from None


def key_from_char(c: str) -> Key:
    """The key that types a character, ignoring case; ValueError if there is none."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    try:
        return _CHAR_TO_KEY[c.lower()]
    except KeyError:
        raise ValueError(f"no key types {c!r}") from None


@dataclass(frozen=True)
class KeyboardEvent:
    key: Key
    action: KeyboardAction


@dataclass(frozen=True)
class CursorState:
    """Cursor position and its change since the last movement."""

    x: float = 0.0
    y: float = 0.0
    dx: float = 0.0
    dy: float = 0.0


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event; the cursor state is filled whatever the action."""

    action: MouseAction
    button: MouseButton | None = None
    cursor: CursorState = field(default_factory=CursorState)
    scroll_y: float = 0.0

    def __post_init__(self) -> None:
        if (
            self.action in (MouseAction.BUTTON_PRESS, MouseAction.BUTTON_RELEASE)
            and self.button is None
        ):
            raise ValueError("button events need a button")


@dataclass(frozen=True)
class WindowEvent:
    type: WindowEventType
    width: int
    height: int