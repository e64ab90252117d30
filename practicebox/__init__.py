"""Small terminal programs: an AVL tree, craps, minesweeper and a parts inventory."""

__version__ = "0.1.0"
__all__ = ["avl", "craps", "minesweeper", "inventory"]