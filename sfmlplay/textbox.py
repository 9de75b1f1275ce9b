"""A small scrolling message log shown in a translucent box."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vector import Vec2

MAX_MESSAGES = 5
TEXT_OFFSET = Vec2(2.0, 2.0)


@dataclass
class Textbox:
    """Keeps the most recent messages and renders them as text lines."""

    visible: int = 5
    char_size: int = 9
    width: int = 200
    screen_pos: Vec2 = field(default_factory=Vec2)
    messages: list[str] = field(default_factory=list)

    @property
    def backdrop_size(self) -> Vec2:
        """Size of the box drawn behind the text."""
        return Vec2(float(self.width), self.visible * (self.char_size * 1.2))

    @property
    def content_position(self) -> Vec2:
        """Where the text itself starts, slightly inside the box."""
        return self.screen_pos + TEXT_OFFSET

    def add(self, message: str) -> None:
        """Append a message, dropping the oldest once the log is full."""
        self.messages.append(message)
        if len(self.messages) > MAX_MESSAGES:
            del self.messages[0]

    def clear(self) -> None:
        """Forget every message."""
        self.messages.clear()

    def render_text(self) -> str:
        """All messages, each followed by a newline; empty when there are none."""
        return "".join(f"{message}\n" for message in self.messages)