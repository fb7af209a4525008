import dataclasses
import pytest
from tetris_game import Game, State


@pytest.fixture
def game(queue_of):
    return Game(10, 20, queue=queue_of("O"))


def started(g):
    g.start()
    g.tick(16)  # first tick after start only sets the baseline
    return g


def test_idle_ignores_intents_and_ticks(game):
    assert game.state is State.IDLE
    assert game.current is None
    assert not game.move_left()
    assert not game.soft_drop()
    assert not game.rotate()
    assert game.hard_drop() == 0
    assert not game.pause()
    game.tick(5000)
    assert game.state is State.IDLE


def test_start_spawns_current_and_next(game):
    assert game.start()
    assert game.state is State.RUNNING
    assert (game.current.kind, game.current.x, game.current.y) == ("O", 4, 0)
    assert game.next_piece.kind == "O"
    assert not game.start()


def test_gravity_fires_only_past_interval(game):
    started(game)
    game.tick(1000)
    assert game.current.y == 0
    game.tick(1)
    assert game.current.y == 1
    assert game.drop_counter == 0
    game.tick(999)
    assert game.current.y == 1


def test_first_tick_after_start_is_discarded(game):
    game.start()
    game.tick(5000)
    assert game.current.y == 0
    assert game.drop_counter == 0


def test_gravity_locks_grounded_piece(game):
    started(game)
    while game.soft_drop():
        pass
    game.tick(1001)
    assert game.grid[19][4:6] == (2, 2)
    assert game.grid[18][4:6] == (2, 2)
    assert game.current.y == 0
    assert game.drop_counter == 0


def test_soft_drop_scores_one_per_step(game):
    started(game)
    assert game.soft_drop() and game.soft_drop()
    assert game.score == 2


def test_hard_drop_scores_distance_and_locks(game):
    started(game)
    assert game.hard_drop() == 18
    assert game.score == 36
    assert game.current.y == 0
    assert sum(map(sum, game.grid)) == 8


def test_o_piece_scenario(game):
    started(game)
    for _ in range(3):
        assert game.move_left()
    game.hard_drop()
    grid = game.grid
    for y in (18, 19):
        assert grid[y][1:3] == (2, 2)
        assert grid[y][0] == 0 and grid[y][3] == 0
    assert game.state is State.RUNNING
    assert (game.current.x, game.current.y) == (4, 0)


def test_left_stops_at_wall(game):
    started(game)
    moves = [game.move_left() for _ in range(5)]
    assert moves == [True] * 4 + [False]
    assert game.current.x == 0
    assert all(game.move_right() for _ in range(8))
    assert not game.move_right()


def test_rotate_intent(queue_of):
    g = started(Game(10, 20, queue=queue_of("T")))
    before = g.current
    assert g.rotate()
    assert g.current.shape != before.shape
    o = started(Game(10, 20, queue=queue_of("O")))
    assert o.rotate()
    assert o.current.shape == o.next_piece.shape


def test_pause_freezes_play(game):
    started(game)
    assert game.pause()
    assert game.state is State.PAUSED
    game.tick(5000)
    assert not game.move_left()
    assert game.current.y == 0
    assert game.resume()
    game.tick(5000)  # paused wall time is not credited
    assert game.current.y == 0
    game.tick(1001)
    assert game.current.y == 1


def test_toggle_pause(game):
    started(game)
    assert game.toggle_pause() and game.state is State.PAUSED
    assert game.toggle_pause() and game.state is State.RUNNING


def test_line_clear_through_locks(queue_of):
    g = started(Game(4, 4, queue=queue_of("O", cols=4)))
    g.move_left()
    g.hard_drop()
    g.move_right()
    g.hard_drop()
    assert g.session.lines == 2
    assert g.score == 4 + 4 + 300
    assert not any(map(any, g.grid))


def test_spawn_collision_is_game_over(queue_of):
    g = started(Game(4, 4, queue=queue_of("O", cols=4)))
    g.hard_drop()
    assert g.hard_drop() == 0
    assert g.state is State.GAME_OVER
    expected = (
        (0, 2, 2, 0),
        (0, 2, 2, 0),
        (0, 2, 2, 0),
        (0, 2, 2, 0),
    )
    assert g.grid == expected
    assert not g.move_left()
    g.tick(5000)
    assert g.grid == expected
    snap = g.snapshot()
    assert snap.game_over and not snap.running
    assert snap.ghost_y is None


def test_restart_after_game_over(queue_of):
    g = started(Game(4, 4, queue=queue_of("O", cols=4)))
    g.hard_drop()
    g.hard_drop()
    assert g.start()
    assert g.state is State.RUNNING
    assert g.score == 0
    assert not any(map(any, g.grid))


def test_snapshot_is_read_only(game):
    started(game)
    snap = game.snapshot()
    assert snap.running and not snap.paused
    assert snap.ghost_y == 18
    assert (snap.score, snap.level, snap.lines, snap.drop_interval_ms) == (0, 1, 0, 1000)
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.score = 10
    with pytest.raises(TypeError):
        snap.grid[0][0] = 1
    s = game.session
    s.score = 99
    assert game.score == 0


def test_rejects_tiny_board():
    with pytest.raises(ValueError):
        Game(2, 20)


def test_rejects_queue_for_other_width(queue_of):
    with pytest.raises(ValueError):
        Game(4, 4, queue=queue_of("O"))


def test_gravity_lock_can_end_game(queue_of):
    g = started(Game(4, 4, queue=queue_of("O", cols=4)))
    # first O falls two rows then locks, second is blocked at once
    for _ in range(3):
        g.tick(1001)
    assert g.state is State.RUNNING
    g.tick(1001)
    assert g.state is State.GAME_OVER
    assert g.grid == ((0, 2, 2, 0),) * 4
    g.tick(1001)
    assert g.grid == ((0, 2, 2, 0),) * 4


def test_level_up_speeds_up_gravity(queue_of):
    g = started(Game(4, 4, queue=queue_of("O", cols=4)))
    for _ in range(5):
        g.move_left()
        g.hard_drop()
        g.move_right()
        g.hard_drop()
    snap = g.snapshot()
    assert (snap.lines, snap.level, snap.drop_interval_ms) == (10, 2, 950)
    assert g.current.y == 0
    g.tick(950)
    assert g.current.y == 0
    g.tick(1)
    assert g.current.y == 1
