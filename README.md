# practicebox

This package holds four small interactive programs that run in a terminal. You can also import each one as a module. It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `practicebox-avl`

This command prompts with `输入数据:` and reads whitespace-separated integers from standard input until it reads `-1` or the input ends. It inserts each integer into an AVL tree. Each insert rebalances the tree with the LL, LR, RL or RR rotation. Equal values go to the right subtree.

- If a token is not an integer, the command reports it on standard error and exits with status 1.
- The command prints nothing else. The tree only exists while the command runs.

From Python:

```python
from practicebox.avl import avl_insert, inorder, node_height

root = None
for value in (3, 2, 1):
    root = avl_insert(root, value)
print(list(inorder(root)))  # [1, 2, 3]
print(root.val, node_height(root))  # 2 2
```

Each `AvlNode` has these fields:

- `val`
- `left`
- `right`
- `parent`
- `height`, the number of nodes on the longest downward path.

`node_height(None)` is 0.

### `practicebox-craps`

This command prints the rules and asks whether you want to play. It then reports the opening roll of two dice:

- A total of 7 or 11 wins.
- A total of 2, 3 or 12 loses.
- Any other total becomes the point. You are asked whether to roll again:
  - Rolling the point wins.
  - Rolling a 7 loses.
  - Answering anything other than `yes` also loses.

From Python:

- `roll_dice(rng=None)` returns a pair of dice values from 1 to 6. You can pass a `random.Random` as `rng`.
- `first_roll_outcome(total)` returns an `Outcome`: `WIN`, `LOSE` or `POINT`.
- `play_point(point, rng, ask_again)` keeps rolling while the callable `ask_again()` returns true. It returns `Outcome.WIN` or `Outcome.LOSE`.

### `practicebox-minesweeper`

This command plays minesweeper on an 8×8 board with 10 mines. The board is drawn with box-drawing characters and ANSI colours.

1. Enter a cell as two digits, row then column, each from 1 to 8 (for example `35`). The command asks again if the cell is off the board or has already been played.
2. Enter `1` to place a flag. Any other answer opens the cell.

Play then goes as follows:

- Opening a cell that shows `0` also opens its hidden neighbours, and keeps spreading over further zeros.
- Opening a mine ends the game. The board is then shown with every mine revealed.
- The game is won once every mine has been flagged. A flag on a cell without a mine does not count towards the score.

From Python:

- `create_mines(rng=None)` returns the 8×8 grid. Each cell holds `"*"` for a mine or the digit of adjacent mines.
- `render_board(show, mines=None)` returns the board drawing as a string. When `mines` is given, unflagged mines are drawn too.
- `Game(mines)` holds the following:
  - `show`, the visible board.
  - `score`.
  - `won`.
  - `move(row, col, flag)`, which takes 0-based positions. It returns `False` when a mine explodes. It raises `ValueError` for a cell off the board or one already played.
  - `reveal(row, col)`.

### `practicebox-inventory`

This command keeps a parts database in memory. It holds at most 100 parts. Names lose their leading white space and are cut to 25 characters. Operation codes:

| code | action                                  |
|------|-----------------------------------------|
| `i`  | insert a new part                       |
| `s`  | search for a part by number             |
| `u`  | change the quantity on hand of a part   |
| `p`  | print all parts in insertion order      |
| `q`  | quit                                    |

The command behaves as follows:

- Any other code prints `Illegal code`.
- A non-numeric number prints `Invalid number`.
- End of input also quits.

Used as a library:

```python
from practicebox.inventory import Inventory, PartNotFoundError

db = Inventory()
db.insert(528, "Disk drive", 10)
db.update(528, -2)
print(db.find(528).on_hand)  # 8
print(528 in db, len(db))    # True 1
print(db.listing())
```

`Inventory.insert`, `find` and `update` raise these errors:

- `DatabaseFullError`
- `DuplicatePartError`
- `PartNotFoundError`, which is also a `KeyError`.

All three are subclasses of `InventoryError`.

## Limits

- The AVL tree supports insertion and in-order traversal only. It has no deletion or lookup, and the command does not print the tree.
- The inventory is not saved anywhere. Its contents are lost when the command exits.
- The minesweeper board size and mine count are fixed.