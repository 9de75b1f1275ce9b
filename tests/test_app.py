import pytest

from sfmlplay.app import BLACK, GREEN, SCANCODE_F5, YELLOW, Game, Window
from sfmlplay.events import Closed, KeyPressed
from sfmlplay.snake import Direction, SnakeSegment


class FakeBackend:
    def __init__(self, events=()):
        self.pending = list(events)
        self.opened = []
        self.closed = 0
        self.presented = []

    def open(self, title, size, fullscreen):
        self.opened.append((title, size, fullscreen))

    def close(self):
        self.closed += 1

    def poll_events(self):
        events, self.pending = self.pending, []
        return events

    def present(self, frame):
        self.presented.append(list(frame))


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def game():
    clock = FakeClock()
    g = Game(backend=FakeBackend(), clock=clock, seed=1)
    g.world.item = (30, 30)
    g._test_clock = clock
    return g


def test_window_opens_with_title_and_size():
    backend = FakeBackend()
    Window("Title", (640, 480), backend)
    assert backend.opened == [("Title", (640, 480), False)]


def test_closed_event_marks_window_done():
    backend = FakeBackend([Closed()])
    window = Window(backend=backend)
    assert window.done is False
    window.update()
    assert window.done is True


def test_f5_toggles_fullscreen_and_recreates():
    backend = FakeBackend([KeyPressed(SCANCODE_F5, 0)])
    window = Window("W", (100, 100), backend)
    window.update()
    assert window.fullscreen is True
    assert backend.closed == 1
    assert backend.opened[-1] == ("W", (100, 100), True)
    window.toggle_fullscreen()
    assert window.fullscreen is False


def test_other_keys_do_nothing():
    backend = FakeBackend([KeyPressed(SCANCODE_F5 + 1, 0)])
    window = Window(backend=backend)
    window.update()
    assert window.fullscreen is False
    assert window.done is False


def test_frame_starts_cleared_to_black():
    backend = FakeBackend()
    window = Window(backend=backend)
    window.begin_draw()
    window.end_draw()
    assert backend.presented == [[("clear", BLACK)]]
    assert window.last_frame == [("clear", BLACK)]


def test_context_manager_closes():
    backend = FakeBackend()
    with Window(backend=backend):
        pass
    assert backend.closed == 1


def test_seed_message_logged(game):
    assert game.textbox.messages[0].startswith("Seeded random number generator with: ")
    assert game.textbox.char_size == 14


def test_handle_input_blocks_reversal(game):
    assert game.snake.physical_direction() is Direction.DOWN
    game.handle_input({Direction.UP})
    assert game.snake.direction is Direction.NONE
    game.handle_input({Direction.DOWN})
    assert game.snake.direction is Direction.DOWN


def test_handle_input_priority(game):
    game.handle_input({Direction.LEFT, Direction.RIGHT})
    assert game.snake.direction is Direction.LEFT


def test_restart_clock_accumulates(game):
    game._test_clock.now = 0.25
    game.restart_clock()
    game._test_clock.now = 0.5
    game.restart_clock()
    assert game.elapsed == pytest.approx(0.5)


def test_update_waits_for_timestep(game):
    game.snake.direction = Direction.DOWN
    start = game.snake.position
    game._test_clock.now = 0.05
    game.restart_clock()
    game.update()
    assert game.snake.position == start


def test_update_ticks_after_timestep(game):
    game.snake.direction = Direction.DOWN
    x, y = game.snake.position
    game._test_clock.now = 0.1
    game.restart_clock()
    game.update()
    assert game.snake.position == (x, y + 1)
    assert game.elapsed == pytest.approx(0.0, abs=1e-12)


def test_game_over_logs_and_resets(game):
    game.snake.body = [SnakeSegment((1, 7)), SnakeSegment((2, 7)), SnakeSegment((3, 7))]
    game.snake.direction = Direction.LEFT
    game._test_clock.now = 0.1
    game.restart_clock()
    game.update()
    assert game.textbox.messages[-1] == "GAME OVER! Score: 0"
    assert game.snake.position == (5, 7)
    assert game.snake.lost is False


def test_render_draws_snake_walls_and_log(game):
    game.render()
    frame = game.window.window_frame if hasattr(game.window, "window_frame") else game.window.last_frame
    assert frame[0] == ("clear", BLACK)
    rects = [c for c in frame if c[0] == "rect"]
    yellow = [c for c in rects if c[3] == YELLOW]
    green = [c for c in rects if c[3] == GREEN]
    assert len(yellow) == 1
    assert len(green) == len(game.snake.body) - 1
    assert sum(1 for c in frame if c[0] == "circle") == 1
    texts = [c for c in frame if c[0] == "text"]
    assert len(texts) == 1
    assert texts[0][2] == game.textbox.render_text()
    assert game.window.backend.presented[-1] == frame


def test_render_without_messages_skips_log(game):
    game.textbox.clear()
    game.render()
    frame = game.window.last_frame
    kinds = [c[0] for c in frame]
    assert "text" not in kinds
    assert frame[0] == ("clear", BLACK)
    assert kinds.count("circle") == 1
    assert game.window.backend.presented[-1] == frame