import io
import random

import pytest

from practicebox.minesweeper import (
    COLS,
    FLAG,
    HIDDEN,
    MINE,
    MINE_COUNT,
    ROWS,
    Game,
    create_mines,
    main,
    render_board,
)


def small_field():
    return [
        ["*", "1", "0"],
        ["1", "1", "0"],
        ["0", "0", "0"],
    ]


@pytest.mark.parametrize("seed", [0, 1, 42, 1234])
def test_create_mines_places_exact_count(seed):
    grid = create_mines(random.Random(seed))
    assert len(grid) == ROWS
    assert all(len(row) == COLS for row in grid)
    assert sum(row.count(MINE) for row in grid) == MINE_COUNT


@pytest.mark.parametrize("seed", [3, 7])
def test_create_mines_counts_match_neighbours(seed):
    grid = create_mines(random.Random(seed))
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == MINE:
                continue
            around = [
                grid[rr][cc]
                for rr in range(max(0, r - 1), min(ROWS, r + 2))
                for cc in range(max(0, c - 1), min(COLS, c + 2))
            ]
            assert int(cell) == around.count(MINE)


def test_click_empty_floods_open_area():
    game = Game(small_field())
    assert game.move(2, 2, False) is True
    assert game.show[0][0] == HIDDEN
    for r in range(3):
        for c in range(3):
            if (r, c) != (0, 0):
                assert game.show[r][c] == small_field()[r][c]


def test_click_number_reveals_single_cell():
    game = Game(small_field())
    game.move(0, 1, False)
    assert game.show[0][1] == "1"
    hidden = sum(row.count(HIDDEN) for row in game.show)
    assert hidden == 8


def test_click_mine_loses_and_exposes_mines():
    game = Game(small_field())
    assert game.move(0, 0, False) is False
    assert game.show[0][0] == MINE


def test_flag_scores_only_on_mine():
    game = Game(small_field())
    game.move(1, 1, True)
    assert game.score == 0
    assert game.show[1][1] == FLAG
    assert game.won is False
    game.move(0, 0, True)
    assert game.score == 1
    assert game.won is True


def test_move_rejects_played_and_off_board_cells():
    game = Game(small_field())
    game.move(0, 1, False)
    with pytest.raises(ValueError):
        game.move(0, 1, True)
    with pytest.raises(ValueError):
        game.move(3, 0, False)


def test_render_board_borders():
    show = [[HIDDEN] * COLS for _ in range(ROWS)]
    lines = render_board(show).splitlines()
    assert lines[0] == "╔═══╦═══╦═══╦═══╦═══╦═══╦═══╦═══╦═══╗"
    assert lines[2] == "╠═══╬═══╬═══╬═══╬═══╬═══╬═══╬═══╬═══╣"
    assert lines[-1] == "╚═══╩═══╩═══╩═══╩═══╩═══╩═══╩═══╩═══╝"
    assert len(lines) == 3 + 2 * ROWS


def test_render_board_shows_flags_and_mines_on_failure():
    game = Game(small_field())
    game.move(1, 1, True)
    plain = render_board(game.show)
    assert "\033[32m P\033[0m ║" in plain
    assert "\033[31m *\033[0m ║" not in plain
    failed = render_board(game.show, game.mines)
    assert "\033[31m *\033[0m ║" in failed


def test_main_stops_on_end_of_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1