"""A console minesweeper game on a small fixed-size board."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterator, Sequence
from typing import Optional

ROWS = 8
COLS = 8
MINE_COUNT = 10
MINE = "*"
FLAG = "P"
HIDDEN = " "

_RED = "\033[31m"
_GREEN = "\033[32m"
_RESET = "\033[0m"

Grid = list[list[str]]


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            r, c = row + dr, col + dc
            if 0 <= r < rows and 0 <= c < cols:
                yield r, c


def create_mines(rng: Optional[random.Random] = None) -> Grid:
    """Lay out the mine field: ``'*'`` for a mine, else the digit of adjacent mines."""
    source = rng if rng is not None else random
    grid = [["0"] * COLS for _ in range(ROWS)]
    placed = 0
    while placed < MINE_COUNT:
        m = source.randrange(ROWS)
        n = source.randrange(COLS)
        if grid[m][n] == MINE:
            continue
        grid[m][n] = MINE
        placed += 1
        for r, c in _neighbours(m, n, ROWS, COLS):
            if grid[r][c] != MINE:
                grid[r][c] = str(int(grid[r][c]) + 1)
    return grid


def _border(left: str, middle: str, right: str, cols: int) -> str:
    return left + middle.join(["═══"] * (cols + 1)) + right


def render_board(show: Grid, mines: Optional[Grid] = None) -> str:
    """Draw the visible board; with ``mines`` given, unflagged mines are shown too."""
    rows = len(show)
    cols = len(show[0]) if rows else 0
    lines = [_border("╔", "╦", "╗", cols)]
    header = "║" + "".join(f"{_RED}{i:2d}{_RESET} ║" for i in range(cols + 1))
    lines.append(header)
    separator = _border("╠", "╬", "╣", cols)
    lines.append(separator)
    for i, row in enumerate(show):
        parts = [f"║{_RED}{i + 1:2d}{_RESET} ║"]
        for j, cell in enumerate(row):
            if cell == FLAG:
                parts.append(f"{_GREEN}{cell:>2}{_RESET} ║")
            elif mines is not None and mines[i][j] == MINE:
                parts.append(f"{_RED}{MINE:>2}{_RESET} ║")
            else:
                parts.append(f"{cell:>2} ║")
        lines.append("".join(parts))
        lines.append(separator if i < rows - 1 else _border("╚", "╩", "╝", cols))
    return "\n".join(lines) + "\n"


class Game:
    """State of one game: the hidden mine field, the visible board and the score."""

    def __init__(self, mines: Grid) -> None:
        self.mines = [list(row) for row in mines]
        self.rows = len(self.mines)
        self.cols = len(self.mines[0]) if self.rows else 0
        self.show: Grid = [[HIDDEN] * self.cols for _ in range(self.rows)]
        self.score = 0
        self.total_mines = sum(row.count(MINE) for row in self.mines)

    @property
    def won(self) -> bool:
        """True once every mine has been flagged."""
        return self.score >= self.total_mines

    def reveal(self, row: int, col: int) -> None:
        """Uncover a cell, spreading over every hidden neighbour of an empty cell."""
        stack = [(row, col)]
        while stack:
            r, c = stack.pop()
            self.show[r][c] = self.mines[r][c]
            if self.mines[r][c] != "0":
                continue
            for nr, nc in _neighbours(r, c, self.rows, self.cols):
                if self.show[nr][nc] == HIDDEN:
                    stack.append((nr, nc))

    def move(self, row: int, col: int, flag: bool) -> bool:
        """Flag or click the 0-based cell; return False when a mine explodes."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise ValueError(f"position ({row}, {col}) is off the board")
        if self.show[row][col] != HIDDEN:
            raise ValueError(f"position ({row}, {col}) has already been played")
        if flag:
            self.show[row][col] = FLAG
            if self.mines[row][col] == MINE:
                self.score += 1
            return True
        if self.mines[row][col] == MINE:
            for i, mine_row in enumerate(self.mines):
                for j, cell in enumerate(mine_row):
                    if cell == MINE:
                        self.show[i][j] = MINE
            return False
        self.reveal(row, col)
        return True


def _digits(prompt: str) -> list[int]:
    print(prompt, end="", flush=True)
    return [int(ch) for ch in input() if ch.isdigit()]


def _read_position(game: Game) -> tuple[int, int]:
    digits = _digits("请输入操作位置:")
    while True:
        if len(digits) < 2 or not (1 <= digits[0] <= game.rows and 1 <= digits[1] <= game.cols):
            digits = _digits("位置不正确请重新输入:")
        elif game.show[digits[0] - 1][digits[1] - 1] != HIDDEN:
            digits = _digits("此位置已操作请重新输入:")
        else:
            return digits[0] - 1, digits[1] - 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play one game of minesweeper on the console."""
    game = Game(create_mines(random.Random()))
    try:
        while True:
            print("\033[2J", end="")
            print(render_board(game.show), end="")
            row, col = _read_position(game)
            op = _digits("请输入操作(1插旗/0点击):")
            alive = game.move(row, col, bool(op) and op[0] == 1)
            if not alive or game.won:
                break
    except EOFError:
        return 1
    if game.won:
        print(f"成功!\n得分:{game.score}")
    else:
        print(render_board(game.show, game.mines), end="")
        print(f"失败...\n得分:{game.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())