"""Window input events, the rule for closing and the lines each event reports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

SCANCODE_ESCAPE = 37
KEY_ESCAPE = 36


@dataclass(frozen=True)
class Closed:
    """The window's close button was clicked."""


@dataclass(frozen=True)
class FocusLost:
    """The window lost input focus."""


@dataclass(frozen=True)
class FocusGained:
    """The window gained input focus."""


@dataclass(frozen=True)
class KeyPressed:
    """A key went down; ``scancode`` is physical, ``code`` is the layout key."""

    scancode: int
    code: int
    control: bool = False
    alt: bool = False
    shift: bool = False
    system: bool = False
    description: str = ""


class MouseButton(Enum):
    """Buttons of the mouse."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    EXTRA1 = "extra1"
    EXTRA2 = "extra2"


@dataclass(frozen=True)
class MouseButtonPressed:
    """A mouse button went down at a window position."""

    button: MouseButton
    x: int
    y: int


@dataclass(frozen=True)
class MouseButtonReleased:
    """A mouse button went up at a window position."""

    button: MouseButton
    x: int
    y: int


@dataclass(frozen=True)
class MouseEntered:
    """The cursor entered the window."""


@dataclass(frozen=True)
class MouseLeft:
    """The cursor left the window."""


@dataclass(frozen=True)
class MouseMoved:
    """The cursor moved to a window position."""

    x: int
    y: int


@dataclass(frozen=True)
class MouseMovedRaw:
    """Unaccelerated mouse motion, as a delta."""

    dx: int
    dy: int


class Wheel(Enum):
    """Mouse wheels."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class MouseWheelScrolled:
    """A mouse wheel turned by ``delta`` while the cursor was at a position."""

    wheel: Wheel
    delta: float
    x: int
    y: int


@dataclass(frozen=True)
class Resized:
    """The window took a new size."""

    width: int
    height: int


@dataclass(frozen=True)
class TextEntered:
    """A character was typed; ``unicode`` is its code point."""

    unicode: int


@dataclass(frozen=True)
class JoystickButtonPressed:
    """A joystick button went down."""

    joystick_id: int
    button: int


@dataclass(frozen=True)
class JoystickButtonReleased:
    """A joystick button went up."""

    joystick_id: int
    button: int


@dataclass(frozen=True)
class JoystickMoved:
    """A joystick axis (named ``"X"``, ``"Y"``, ...) moved to a position."""

    joystick_id: int
    axis: str
    position: float


@dataclass(frozen=True)
class JoystickConnected:
    """A joystick was plugged in."""

    joystick_id: int


@dataclass(frozen=True)
class JoystickDisconnected:
    """A joystick was unplugged."""

    joystick_id: int


def _number(value: float) -> str:
    return f"{value:g}"


def should_close(event: object) -> bool:
    """True for a close request or a press of the Escape key."""
    if isinstance(event, Closed):
        return True
    return isinstance(event, KeyPressed) and event.scancode == SCANCODE_ESCAPE


def _describe_key(event: KeyPressed) -> list[str]:
    if event.scancode != SCANCODE_ESCAPE:
        return []
    return [
        "the escape key was pressed",
        f"scancode: {event.scancode}",
        f"code: {event.code}",
        f"control: {int(event.control)}",
        f"alt: {int(event.alt)}",
        f"shift: {int(event.shift)}",
        f"system: {int(event.system)}",
        f"description: {event.description or 'Escape'}",
        f"localize: {event.code}",
        f"delocalize: {event.scancode}",
    ]


def _describe_button(button: MouseButton, x: int, y: int, action: str) -> list[str]:
    lines = []
    if button in (MouseButton.LEFT, MouseButton.MIDDLE, MouseButton.RIGHT):
        lines.append(f"mouse {button.value} button {action}")
    lines += [f"mouse x: {x}", f"mouse y: {y}"]
    return lines


def describe_event(event: object) -> list[str]:
    """The lines reported for an event; empty for events that report nothing."""
    match event:
        case FocusLost():
            return ["Progam sedih ditinggal user:("]
        case FocusGained():
            return ["Progam senang user kembali :)"]
        case KeyPressed():
            return _describe_key(event)
        case MouseButtonPressed(button=button, x=x, y=y):
            return _describe_button(button, x, y, "pressed")
        case MouseButtonReleased(button=button, x=x, y=y):
            return _describe_button(button, x, y, "released")
        case MouseEntered():
            return ["mouse entered the window"]
        case MouseLeft():
            return ["mouse left the window"]
        case MouseMoved(x=x, y=y):
            return [f"mouse x: {x}", f"mouse y: {y}"]
        case MouseMovedRaw(dx=dx, dy=dy):
            return [f"mouse x: {dx}", f"mouse y: {dy}"]
        case MouseWheelScrolled(wheel=wheel, delta=delta, x=x, y=y):
            return [
                f"wheel type: {wheel.value}",
                f"wheel movement: {_number(delta)}",
                f"mouse x: {x}",
                f"mouse y: {y}",
            ]
        case Resized(width=width, height=height):
            return [f"new width: {width}", f"new height: {height}"]
        case TextEntered(unicode=code):
            if code < 128:
                return [f"ASCII character typed: {chr(code)}"]
            return []
        case JoystickButtonPressed(joystick_id=jid, button=button):
            return ["joystick button pressed", f"joystick id: {jid}", f"button: {button}"]
        case JoystickButtonReleased(joystick_id=jid, button=button):
            return ["joystick button released", f"joystick id: {jid}", f"button: {button}"]
        case JoystickMoved(joystick_id=jid, axis=axis, position=position):
            lines = []
            if axis in ("X", "Y"):
                lines += [f"{axis} axis moved", f"joystick id: {jid}"]
            lines.append(f"new position: {_number(position)}")
            return lines
        case JoystickConnected():
            return ["joystick connected"]
        case JoystickDisconnected():
            return ["joystick disconnected"]
    return []