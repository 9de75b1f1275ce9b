from sfmlplay.pong import Pong, reflect_direction, step_vector
from sfmlplay.vector import Vec2


def test_step_vector_right():
    assert step_vector(0, 2) == Vec2(2.0, 0.0)


def test_step_vector_snaps_tiny_cosine():
    assert step_vector(90, 1) == Vec2(0.0, 1.0)


def test_step_vector_snaps_tiny_sine():
    assert step_vector(180, 1) == Vec2(-1.0, 0.0)


def test_step_vector_length_equals_speed():
    v = step_vector(37, 5)
    assert abs(v.length() - 5) < 1e-9


def test_reflect_right_wall():
    assert reflect_direction(0, Vec2(790.0, 400.0)) == 180
    assert reflect_direction(360, Vec2(790.0, 400.0)) == 180
    assert reflect_direction(45, Vec2(790.0, 400.0)) == 135


def test_reflect_bottom_wall():
    assert reflect_direction(90, Vec2(400.0, 790.0)) == 270


def test_reflect_left_wall():
    assert reflect_direction(180, Vec2(0.0, 400.0)) == 0


def test_reflect_top_wall():
    assert reflect_direction(270, Vec2(400.0, 0.0)) == 90


def test_reflect_inside_keeps_direction():
    assert reflect_direction(45, Vec2(400.0, 400.0)) == 45


def test_reset_centres_paddles_and_heads_right():
    game = Pong()
    assert game.direction == 0
    assert game.ball == Vec2(game.width / 2, game.width / 2)
    assert game.player.x == 0
    assert game.player.y + game.player_size.y / 2 == game.height / 2
    assert game.enemy.x + game.player_size.x == game.width
    assert game.enemy.y == game.player.y


def test_move_player_round_trip():
    game = Pong()
    start = game.player
    game.move_player(True)
    game.move_player(True)
    assert game.player.y == start.y - 2 * game.player_speed
    game.move_player(False)
    game.move_player(False)
    assert game.player == start


def test_move_player_blocked_above_top():
    game = Pong()
    game.player = Vec2(0.0, -1.0)
    game.move_player(True)
    assert game.player == Vec2(0.0, -1.0)


def test_move_player_blocked_below_bottom():
    game = Pong()
    game.player = Vec2(0.0, game.height)
    game.move_player(False)
    assert game.player == Vec2(0.0, game.height)


def test_step_moves_ball_right():
    game = Pong()
    start = game.ball
    game.step()
    assert game.ball == start + Vec2(game.ball_speed, 0.0)


def test_ball_bounces_back_from_right_wall():
    game = Pong()
    for _ in range(1000):
        game.step()
        if game.direction != 0:
            break
    assert game.direction == 180
    assert game.ball.x >= game.width - 2 * game.ball_radius


def test_reset_after_play_restores_start():
    game = Pong()
    for _ in range(50):
        game.step()
    game.move_player(True)
    game.reset()
    fresh = Pong()
    assert game.ball == fresh.ball
    assert game.player == fresh.player
    assert game.direction == fresh.direction