"""Keyboard and mouse state tracked from window events."""

from __future__ import annotations

from enum import IntEnum
from typing import List, Union

KEY_SLOTS = 512
MAX_EVENT_KEY = 256
WHEEL_DELTA = 120


class KeyCode(IntEnum):
    """Virtual key codes; keys sharing a code are aliases of one another."""

    # Keyboard row 1
    ESCAPE = 0x1B
    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    F12 = 0x7B

    # Keyboard row 2
    GRAVE = 0xC0
    ONE = ord("1")
    TWO = ord("2")
    THREE = ord("3")
    FOUR = ord("4")
    FIVE = ord("5")
    SIX = ord("6")
    SEVEN = ord("7")
    EIGHT = ord("8")
    NINE = ord("9")
    ZERO = ord("0")
    MINUS = 0xBD
    EQUALS = 0xBB
    BACKSPACE = 0x08

    # Keyboard row 3
    TAB = 0x09
    Q = ord("Q")
    W = ord("W")
    E = ord("E")
    R = ord("R")
    T = ord("T")
    Y = ord("Y")
    U = ord("U")
    I = ord("I")  # noqa: E741
    O = ord("O")  # noqa: E741
    P = ord("P")
    LBRACKET = 0xDB
    RBRACKET = 0xDD
    BACKSLASH = 0xDC

    # Keyboard row 4
    A = ord("A")
    S = ord("S")
    D = ord("D")
    F = ord("F")
    G = ord("G")
    H = ord("H")
    J = ord("J")
    K = ord("K")
    L = ord("L")
    SEMICOLON = 0xBA
    APOSTROPHE = 0xDE
    ENTER = 0x0D

    # Keyboard row 5
    Z = ord("Z")
    X = ord("X")
    C = ord("C")
    V = ord("V")
    B = ord("B")
    N = ord("N")
    M = ord("M")
    COMMA = 0xBC
    PERIOD = 0xBE
    SLASH = 0xBF

    # Lock keys
    CAPSLOCK = 0x14
    NUMLOCK = 0x90
    SCROLLLOCK = 0x91

    # Numpad keys
    NUMPAD1 = 0x61
    NUMPAD2 = 0x62
    NUMPAD3 = 0x63
    NUMPAD4 = 0x64
    NUMPAD5 = 0x65
    NUMPAD6 = 0x66
    NUMPAD7 = 0x67
    NUMPAD8 = 0x68
    NUMPAD9 = 0x69
    NUMPAD0 = 0x60
    NUM_ADD = 0x6B
    NUM_SUB = 0x6D
    NUM_MUL = 0x6A
    NUM_DIV = 0x6F
    NUM_ENTER = 0x0D
    NUM_DECIMAL = 0x6E

    # Navigation keys
    INS = 0x2D
    DEL = 0x2E
    HOME = 0x24
    END = 0x23
    PGUP = 0x21
    PGDN = 0x22

    # Support keys
    LSHIFT = 0x10
    RSHIFT = 0x10
    LCONTROL = 0x11
    RCONTROL = 0x11
    LALT = 0x12
    RALT = 0x12
    LWIN = 0x5B
    RWIN = 0x5C
    SPACE = 0x20

    # Arrow keys
    UP = 0x26
    DOWN = 0x28
    LEFT = 0x25
    RIGHT = 0x27


class MouseButton(IntEnum):
    """Mouse buttons."""

    LBUTTON = 0
    RBUTTON = 1
    MBUTTON = 2


KeyLike = Union[KeyCode, int]


def _key_slot(key: KeyLike) -> int:
    index = int(key)
    if not 0 <= index < KEY_SLOTS:
        raise ValueError(f"key code {index} is out of range")
    return index


class InputSystem:
    """Holds current, previous and newly pressed key and mouse state.

    Window events are fed in through the event methods; ``update`` is called
    once per frame to work out presses and mouse movement.
    """

    def __init__(self) -> None:
        self._curr_keys: List[bool] = [False] * KEY_SLOTS
        self._prev_keys: List[bool] = [False] * KEY_SLOTS
        self._pressed_keys: List[bool] = [False] * KEY_SLOTS

        self.clip_mouse_to_window = False

        self._curr_mouse_x = -1
        self._curr_mouse_y = -1
        self._prev_mouse_x = -1
        self._prev_mouse_y = -1
        self._mouse_move_x = 0
        self._mouse_move_y = 0
        self._mouse_wheel = 0.0

        self._curr_buttons: List[bool] = [False] * len(MouseButton)
        self._prev_buttons: List[bool] = [False] * len(MouseButton)
        self._pressed_buttons: List[bool] = [False] * len(MouseButton)

        self.mouse_left_edge = False
        self.mouse_right_edge = False
        self.mouse_top_edge = False
        self.mouse_bottom_edge = False

    # Window events

    def key_down(self, code: KeyLike) -> None:
        """A key went down; codes outside 0..255 are ignored."""
        index = int(code)
        if 0 <= index < MAX_EVENT_KEY:
            self._curr_keys[index] = True

    def key_up(self, code: KeyLike) -> None:
        """A key went up; codes outside 0..255 are ignored."""
        index = int(code)
        if 0 <= index < MAX_EVENT_KEY:
            self._curr_keys[index] = False

    def mouse_button_down(self, button: MouseButton) -> None:
        self._curr_buttons[MouseButton(button)] = True

    def mouse_button_up(self, button: MouseButton) -> None:
        self._curr_buttons[MouseButton(button)] = False

    def mouse_wheel(self, delta: float) -> None:
        """Add a raw wheel delta, where one notch is ``WHEEL_DELTA`` units."""
        self._mouse_wheel += delta / WHEEL_DELTA

    def mouse_move(self, x: int, y: int, width: int, height: int) -> None:
        """The cursor moved to (x, y) in a client area of the given size."""
        self._curr_mouse_x = x
        self._curr_mouse_y = y
        if self._prev_mouse_x == -1:
            self._prev_mouse_x = x
            self._prev_mouse_y = y
        self.mouse_left_edge = x <= 0
        self.mouse_right_edge = x + 1 >= width
        self.mouse_top_edge = y <= 0
        self.mouse_bottom_edge = y + 1 >= height

    def activate(self, active: bool) -> None:
        """The application gained or lost focus; losing it clears the edge flags."""
        if not active:
            self.mouse_left_edge = False
            self.mouse_right_edge = False
            self.mouse_top_edge = False
            self.mouse_bottom_edge = False

    # Per frame

    def update(self) -> None:
        """Work out newly pressed keys and buttons and the mouse movement."""
        self._pressed_keys = [
            curr and not prev for curr, prev in zip(self._curr_keys, self._prev_keys)
        ]
        self._prev_keys = list(self._curr_keys)

        self._mouse_move_x = self._curr_mouse_x - self._prev_mouse_x
        self._mouse_move_y = self._curr_mouse_y - self._prev_mouse_y
        self._prev_mouse_x = self._curr_mouse_x
        self._prev_mouse_y = self._curr_mouse_y

        self._pressed_buttons = [
            curr and not prev for curr, prev in zip(self._curr_buttons, self._prev_buttons)
        ]
        self._prev_buttons = list(self._curr_buttons)

    # Queries

    def is_key_down(self, key: KeyLike) -> bool:
        return self._curr_keys[_key_slot(key)]

    def is_key_pressed(self, key: KeyLike) -> bool:
        """True if the key went down since the update before the last one."""
        return self._pressed_keys[_key_slot(key)]

    def is_mouse_down(self, button: MouseButton) -> bool:
        return self._curr_buttons[MouseButton(button)]

    def is_mouse_pressed(self, button: MouseButton) -> bool:
        return self._pressed_buttons[MouseButton(button)]

    @property
    def mouse_move_x(self) -> int:
        return self._mouse_move_x

    @property
    def mouse_move_y(self) -> int:
        return self._mouse_move_y

    @property
    def mouse_move_z(self) -> float:
        """Accumulated wheel movement in notches."""
        return self._mouse_wheel

    @property
    def mouse_screen_x(self) -> int:
        return self._curr_mouse_x

    @property
    def mouse_screen_y(self) -> int:
        return self._curr_mouse_y