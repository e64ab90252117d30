"""A console game of craps."""

from __future__ import annotations

import enum
import random
import sys
from collections.abc import Callable, Sequence
from typing import Optional

RULES = (
    "The rule:If the sum is 7 or 11,you will win.\n"
    "If it is 2,3 or 12,you will lost.\n"
    "If it is others,you need try again.\n"
    "If the sum is the same as before,you will win.\n"
    "If it is 7,you will lost.\n"
    "Of course,you can try it again forever utill you win or lost."
)


class Outcome(enum.Enum):
    """Result of a roll: decided either way, or a point to keep rolling for."""

    WIN = "win"
    LOSE = "lose"
    POINT = "point"


def roll_dice(rng: Optional[random.Random] = None) -> tuple[int, int]:
    """Roll two six-sided dice."""
    source = rng if rng is not None else random
    return source.randint(1, 6), source.randint(1, 6)


def first_roll_outcome(total: int) -> Outcome:
    """Classify the sum of the opening roll."""
    if total in (7, 11):
        return Outcome.WIN
    if total in (2, 3, 12):
        return Outcome.LOSE
    return Outcome.POINT


def play_point(
    point: int,
    rng: Optional[random.Random],
    ask_again: Callable[[], bool],
) -> Outcome:
    """Keep rolling while the player agrees; win on ``point``, lose on 7 or on refusal."""
    while ask_again():
        a, b = roll_dice(rng)
        total = a + b
        print(f"Your outcome is:{a} {b}\nYour sum is:{total}")
        if total == point:
            return Outcome.WIN
        if total == 7:
            return Outcome.LOSE
    return Outcome.LOSE


def _ask(prompt: str) -> bool:
    print(prompt)
    try:
        answer = input().strip()
    except EOFError:
        return False
    return answer == "yes"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play one game of craps on the console."""
    rng = random.Random()
    a, b = roll_dice(rng)
    total = a + b
    print(RULES)
    if not _ask("Do you want to play Craps?(yes/no):"):
        print("OK,you don't want.")
        return 0
    print(f"Your outcome is:{a} {b}\nYour sum is :{total}")
    outcome = first_roll_outcome(total)
    if outcome is Outcome.POINT:
        print("You need to keep rolling the dice to win!")
        outcome = play_point(total, rng, lambda: _ask("Hei,gambler,again?(yes/no):"))
    print(" You Win!" if outcome is Outcome.WIN else "You Lost.")
    return 0


if __name__ == "__main__":
    sys.exit(main())