"""The snake game application: a window wrapper, the game loop and its entry point."""

from __future__ import annotations

import argparse
import random
import time
from typing import Any, Callable, Iterable, Protocol

from .events import Closed, KeyPressed
from .snake import Direction, Snake
from .textbox import Textbox
from .world import World

SCANCODE_F5 = 56
KEY_F5 = 89

WIDTH = 1024
HEIGHT = 768
BLOCK_SIZE = 16

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
YELLOW = (255, 255, 0)
WALL_COLOR = (150, 0, 0)
BACKDROP_COLOR = (90, 90, 90, 90)

# A frame is a list of drawing commands:
#   ("clear", color)
#   ("rect", (x, y), (w, h), color)
#   ("circle", (x, y), radius, color)      position is the bounding box's top-left
#   ("text", (x, y), text, char_size, color)
Command = tuple[Any, ...]


class Backend(Protocol):
    """What a window needs from a display system."""

    def open(self, title: str, size: tuple[int, int], fullscreen: bool) -> None: ...

    def close(self) -> None: ...

    def poll_events(self) -> Iterable[object]: ...

    def present(self, frame: list[Command]) -> None: ...


class Window:
    """A titled window that collects draw commands into frames."""

    def __init__(
        self,
        title: str = "Window",
        size: tuple[int, int] = (WIDTH, HEIGHT),
        backend: Backend | None = None,
    ) -> None:
        self.title = title
        self.size = size
        self.backend = backend
        self.fullscreen = False
        self.done = False
        self.frame: list[Command] = []
        self.last_frame: list[Command] = []
        self._open()

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _open(self) -> None:
        if self.backend is not None:
            self.backend.open(self.title, self.size, self.fullscreen)

    def begin_draw(self) -> None:
        """Start a new frame cleared to black."""
        self.frame = [("clear", BLACK)]

    def end_draw(self) -> None:
        """Show the frame that was drawn."""
        self.last_frame = self.frame
        if self.backend is not None:
            self.backend.present(self.frame)
        self.frame = []

    def update(self) -> None:
        """Process pending events: close requests and the F5 fullscreen toggle."""
        if self.backend is None:
            return
        for event in self.backend.poll_events():
            if isinstance(event, Closed):
                self.done = True
            elif isinstance(event, KeyPressed) and event.scancode == SCANCODE_F5:
                self.toggle_fullscreen()

    def toggle_fullscreen(self) -> None:
        """Switch between windowed and fullscreen, recreating the window."""
        self.fullscreen = not self.fullscreen
        self.close()
        self._open()

    def close(self) -> None:
        """Close the underlying display window."""
        if self.backend is not None:
            self.backend.close()


class Game:
    """Snake on a walled grid, with a message log."""

    def __init__(
        self,
        backend: Backend | None = None,
        clock: Callable[[], float] = time.monotonic,
        seed: int | None = None,
    ) -> None:
        self.window = Window("Chapter 3", (WIDTH, HEIGHT), backend)
        self._clock = clock
        self._last = clock()
        self.elapsed = 0.0
        if seed is None:
            seed = int(time.time())
        self.textbox = Textbox()
        self.snake = Snake(BLOCK_SIZE, self.textbox)
        self.world = World((WIDTH, HEIGHT), random.Random(seed))
        self.textbox = _setup_log(self.textbox)
        self.textbox.add(f"Seeded random number generator with: {seed}")

    def handle_input(self, pressed: Iterable[Direction]) -> None:
        """Steer the snake from the held arrow keys, never straight back on itself."""
        held = set(pressed)
        physical = self.snake.physical_direction()
        if Direction.UP in held and physical is not Direction.DOWN:
            self.snake.direction = Direction.UP
        elif Direction.DOWN in held and physical is not Direction.UP:
            self.snake.direction = Direction.DOWN
        elif Direction.LEFT in held and physical is not Direction.RIGHT:
            self.snake.direction = Direction.LEFT
        elif Direction.RIGHT in held and physical is not Direction.LEFT:
            self.snake.direction = Direction.RIGHT

    def update(self) -> None:
        """Handle window events and advance the snake once per timestep."""
        self.window.update()
        timestep = 1.0 / self.snake.speed
        if self.elapsed >= timestep:
            self.snake.tick()
            self.world.update(self.snake)
            self.elapsed -= timestep
            if self.snake.lost:
                self.textbox.add(f"GAME OVER! Score: {self.snake.score}")
                self.snake.reset()

    def render(self) -> None:
        """Draw the walls, apple, snake and message log as one frame."""
        self.window.begin_draw()
        self.window.frame.extend(self._world_commands())
        self.window.frame.extend(self._snake_commands())
        self.window.frame.extend(self._textbox_commands())
        self.window.end_draw()

    def restart_clock(self) -> None:
        """Add the time since the last restart to the accumulated elapsed time."""
        now = self._clock()
        self.elapsed += now - self._last
        self._last = now

    def _world_commands(self) -> list[Command]:
        commands: list[Command] = []
        for bound in self.world.bounds:
            corner = bound.top_left()
            commands.append(
                ("rect", (corner.x, corner.y), (bound.size.x, bound.size.y), WALL_COLOR)
            )
        apple = self.world.apple_pixel_position
        commands.append(("circle", (apple.x, apple.y), self.world.apple_radius, RED))
        return commands

    def _snake_commands(self) -> list[Command]:
        size = self.snake.block_size
        extent = (float(size - 1), float(size - 1))
        commands: list[Command] = []
        for index, segment in enumerate(self.snake.body):
            x, y = segment.position
            color = YELLOW if index == 0 else GREEN
            commands.append(("rect", (float(x * size), float(y * size)), extent, color))
        return commands

    def _textbox_commands(self) -> list[Command]:
        text = self.textbox.render_text()
        if not text:
            return []
        box = self.textbox
        backdrop = box.backdrop_size
        content = box.content_position
        return [
            ("rect", (box.screen_pos.x, box.screen_pos.y), (backdrop.x, backdrop.y), BACKDROP_COLOR),
            ("text", (content.x, content.y), text, box.char_size, WHITE),
        ]


def _setup_log(log: Textbox) -> Textbox:
    from .vector import Vec2

    log.visible = 5
    log.char_size = 14
    log.width = 350
    log.screen_pos = Vec2(225.0, 0.0)
    return log


class _PygameBackend:
    """Draws frames with pygame and turns its events into window events."""

    def __init__(self) -> None:
        import pygame

        self._pg = pygame
        pygame.init()
        self._screen: Any = None
        self._fonts: dict[int, Any] = {}

    def open(self, title: str, size: tuple[int, int], fullscreen: bool) -> None:
        pg = self._pg
        flags = pg.FULLSCREEN if fullscreen else 0
        self._screen = pg.display.set_mode(size, flags)
        pg.display.set_caption(title)

    def close(self) -> None:
        if self._screen is not None:
            self._pg.display.quit()
            self._pg.display.init()
            self._screen = None

    def poll_events(self) -> list[object]:
        pg = self._pg
        translated: list[object] = []
        for event in pg.event.get():
            if event.type == pg.QUIT:
                translated.append(Closed())
            elif event.type == pg.KEYDOWN and event.key == pg.K_F5:
                mods = event.mod
                translated.append(
                    KeyPressed(
                        SCANCODE_F5,
                        KEY_F5,
                        control=bool(mods & pg.KMOD_CTRL),
                        alt=bool(mods & pg.KMOD_ALT),
                        shift=bool(mods & pg.KMOD_SHIFT),
                        system=bool(mods & pg.KMOD_META),
                        description="F5",
                    )
                )
        return translated

    def held_directions(self) -> set[Direction]:
        keys = self._pg.key.get_pressed()
        mapping = {
            self._pg.K_UP: Direction.UP,
            self._pg.K_DOWN: Direction.DOWN,
            self._pg.K_LEFT: Direction.LEFT,
            self._pg.K_RIGHT: Direction.RIGHT,
        }
        return {direction for key, direction in mapping.items() if keys[key]}

    def _font(self, size: int) -> Any:
        if size not in self._fonts:
            self._fonts[size] = self._pg.font.Font(None, size)
        return self._fonts[size]

    def present(self, frame: list[Command]) -> None:
        if self._screen is None:
            return
        pg = self._pg
        screen = self._screen
        for command in frame:
            kind = command[0]
            if kind == "clear":
                screen.fill(command[1])
            elif kind == "rect":
                _, (x, y), (w, h), color = command
                surface = pg.Surface((max(int(w), 0), max(int(h), 0)), pg.SRCALPHA)
                surface.fill(color)
                screen.blit(surface, (int(x), int(y)))
            elif kind == "circle":
                _, (x, y), radius, color = command
                pg.draw.circle(screen, color, (int(x + radius), int(y + radius)), int(radius))
            elif kind == "text":
                _, (x, y), text, size, color = command
                font = self._font(size)
                line_y = y
                for line in text.splitlines():
                    screen.blit(font.render(line, True, color), (int(x), int(line_y)))
                    line_y += font.get_linesize()
        pg.display.flip()


def main(argv: list[str] | None = None) -> int:
    """Run the snake game until its window is closed."""
    parser = argparse.ArgumentParser(description="Play snake on a walled grid.")
    parser.add_argument("--seed", type=int, default=None, help="seed for apple placement")
    args = parser.parse_args(argv)

    backend = _PygameBackend()
    game = Game(backend=backend, seed=args.seed)
    try:
        while not game.window.done:
            game.handle_input(backend.held_directions())
            game.update()
            game.render()
            game.restart_clock()
    finally:
        game.window.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())