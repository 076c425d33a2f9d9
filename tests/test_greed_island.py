import pytest

from reflexgames.greed_island import (
    GOLD_TARGET,
    HIT_POINTS,
    LOSS_MESSAGE,
    MAP_SIZE,
    WIN_MESSAGE,
    GameOver,
    GreedIsland,
    Layout,
    Tile,
    initial_map,
    render_map,
)


def _run(game, choices):
    return [game.move(choice) for choice in choices]


def _parse_rows(text):
    lines = text.split("\n")
    return [line.split() for line in lines[2 : 2 + MAP_SIZE]]


def test_board_map_features():
    grid = initial_map(Layout.BOARD)
    assert len(grid) == MAP_SIZE
    assert all(len(row) == MAP_SIZE for row in grid)
    assert grid[2][3] is Tile.GOLD_COIN
    assert grid[9][8] is Tile.PADLOCK
    assert grid[15][4] is Tile.MONSTER
    assert grid[0][0] is Tile.GRASS


def test_desktop_map_has_coin_column():
    grid = initial_map(Layout.DESKTOP)
    assert all(row[0] is Tile.GOLD_COIN for row in grid)
    assert grid[6][5] is Tile.ROCK


def test_render_round_trip_and_marker():
    grid = initial_map(Layout.BOARD)
    text = render_map(grid, (2, 3), "\n")
    assert " Your coordinate(2;3)" in text
    rows = _parse_rows(text)
    assert len(rows) == MAP_SIZE
    for i, row in enumerate(rows):
        for j, token in enumerate(row):
            if (i, j) == (2, 3):
                assert token == "X"
            else:
                assert int(token) == grid[i][j]


def test_left_at_start_is_blocked():
    game = GreedIsland(Layout.BOARD)
    out = game.move(4)
    assert "You shall not pass" in out
    assert game.position == (0, 0)


def test_right_edge_is_blocked():
    game = GreedIsland(Layout.BOARD)
    outputs = _run(game, [6] * 20)
    assert game.position == (0, MAP_SIZE - 1)
    assert "You shall not pass" in outputs[-1]


def test_board_collects_and_clears_coin():
    game = GreedIsland(Layout.BOARD)
    outputs = _run(game, [8, 8, 6, 6, 6])
    assert game.position == (2, 3)
    assert game.gold == 1
    assert game.grid[2][3] is Tile.GRASS
    assert "gold coin" in outputs[-1]


def test_obstacle_sends_player_back():
    game = GreedIsland(Layout.BOARD)
    outputs = _run(game, [8] * 4 + [6] * 5)
    assert game.position == (4, 4)
    assert "obstacle" in outputs[-1]
    assert "Your coordinate(4;4)" in outputs[-1]
    assert game.grid[4][5] is Tile.TREE


def test_monster_costs_a_hit_point_and_vanishes():
    game = GreedIsland(Layout.BOARD)
    outputs = _run(game, [8, 8] + [6] * 18)
    assert game.position == (2, 18)
    assert game.hp == HIT_POINTS - 1
    assert game.grid[2][18] is Tile.GRASS
    assert "threat" in outputs[-1]


def test_padlock_blocks_sideways_without_key():
    game = GreedIsland(Layout.BOARD)
    outputs = _run(game, [8] * 9 + [6] * 8)
    assert game.position == (9, 7)
    assert "don't have any keys" in outputs[-1]
    assert game.grid[9][8] is Tile.PADLOCK


def test_padlock_does_not_push_back_when_walking_down():
    game = GreedIsland(Layout.BOARD)
    _run(game, [8] * 8 + [6] * 8)
    assert game.position == (8, 8)
    out = game.move(8)
    assert "don't have any keys" in out
    assert game.position == (9, 8)


def test_board_idle_key_does_nothing():
    game = GreedIsland(Layout.BOARD)
    assert game.move(5) == ""
    assert game.position == (0, 0)


def test_wrong_and_exit_keys():
    game = GreedIsland(Layout.DESKTOP)
    assert game.move(5) == "Wrong number \n"
    assert game.move(0) == "You will exit the game Wrong number \n"
    assert game.position == (0, 0)
    assert not game.finished()


def test_desktop_down_key_clears_coin():
    game = GreedIsland(Layout.DESKTOP)
    game.move(2)
    assert game.position == (1, 0)
    assert game.gold == 1
    assert game.grid[1][0] is Tile.GRASS


def test_desktop_win_by_revisiting_coin():
    game = GreedIsland(Layout.DESKTOP)
    _run(game, [6, 4] * GOLD_TARGET)
    assert game.gold == GOLD_TARGET
    assert game.grid[0][0] is Tile.GOLD_COIN
    assert game.finished()
    assert game.result() == WIN_MESSAGE
    with pytest.raises(GameOver):
        game.move(6)


def test_desktop_loss_by_monster():
    game = GreedIsland(Layout.DESKTOP)
    _run(game, [6] * 17 + [2, 2])
    assert game.position == (2, 17)
    _run(game, [6, 4] * (HIT_POINTS - 1) + [6])
    assert game.hp == 0
    assert game.grid[2][18] is Tile.MONSTER
    assert game.finished()
    assert game.result() == LOSS_MESSAGE


def test_result_is_none_while_playing():
    game = GreedIsland(Layout.BOARD)
    game.move(8)
    assert game.result() is None
    assert not game.finished()


def test_play_transcript_stops_at_end():
    game = GreedIsland(Layout.DESKTOP)
    outputs = list(game.play([6, 4] * GOLD_TARGET + [6, 6, 6]))
    assert outputs[0] == render_map(initial_map(Layout.DESKTOP), (0, 0), "\n")
    assert outputs[1].startswith("Welcome to the greed island")
    assert outputs[-1] == WIN_MESSAGE + "\n"
    assert game.position == (0, 0)
    assert len(outputs) == 2 + 2 * GOLD_TARGET + 1