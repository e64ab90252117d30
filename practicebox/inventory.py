"""A small parts database kept in memory, with a console front end."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Optional

NAME_LEN = 25
MAX_PARTS = 100

HEADER = "Part Number   Part Name                  Quantity on Hand"


@dataclass
class Part:
    """One stocked part."""

    number: int
    name: str
    on_hand: int


class InventoryError(Exception):
    """Base class for inventory failures."""


class DatabaseFullError(InventoryError):
    """Raised when no more parts can be stored."""


class DuplicatePartError(InventoryError):
    """Raised when a part number is already in use."""


class PartNotFoundError(InventoryError, KeyError):
    """Raised when a part number is unknown."""


class Inventory:
    """Parts kept in the order they were entered."""

    def __init__(self) -> None:
        self._parts: list[Part] = []

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self) -> Iterator[Part]:
        return iter(self._parts)

    def __contains__(self, number: object) -> bool:
        return any(part.number == number for part in self._parts)

    @property
    def full(self) -> bool:
        return len(self._parts) >= MAX_PARTS

    def find(self, number: int) -> Part:
        """Return the part with ``number``."""
        for part in self._parts:
            if part.number == number:
                return part
        raise PartNotFoundError(number)

    def insert(self, number: int, name: str, on_hand: int) -> Part:
        """Add a part; the name loses leading white space and is cut to NAME_LEN."""
        if self.full:
            raise DatabaseFullError("Database is full; can't add more parts.")
        if number in self:
            raise DuplicatePartError("Part already exists.")
        part = Part(number, name.lstrip()[:NAME_LEN], on_hand)
        self._parts.append(part)
        return part

    def update(self, number: int, change: int) -> Part:
        """Add ``change`` to the quantity on hand of a part."""
        part = self.find(number)
        part.on_hand += change
        return part

    def listing(self) -> str:
        """Table of all parts in entry order."""
        rows = [HEADER]
        rows.extend(f"{p.number:7d}       {p.name:<25s}{p.on_hand:11d}" for p in self._parts)
        return "\n".join(rows) + "\n"


def _prompt(text: str) -> str:
    print(text, end="", flush=True)
    return input()


def _read_int(text: str) -> int:
    return int(_prompt(text).strip())


def _read_name(text: str) -> str:
    line = _prompt(text)
    while not line.strip():
        line = input()
    return line.strip()


def _run(inventory: Inventory, code: str) -> None:
    if code == "i":
        if inventory.full:
            print("Database is full; can't add more parts.")
            return
        number = _read_int("Enter part number: ")
        if number in inventory:
            print("Part already exists.")
            return
        name = _read_name("Enter part name: ")
        on_hand = _read_int("Enter quantity on hand: ")
        inventory.insert(number, name, on_hand)
    elif code == "s":
        number = _read_int("Enter part number: ")
        try:
            part = inventory.find(number)
        except PartNotFoundError:
            print("Part not found.")
            return
        print(f"Part name: {part.name}")
        print(f"Quantity on hand: {part.on_hand}")
    elif code == "u":
        number = _read_int("Enter part number: ")
        if number not in inventory:
            print("Part not found.")
            return
        inventory.update(number, _read_int("Enter change in quantity on hand: "))
    elif code == "p":
        print(inventory.listing(), end="")
    else:
        print("Illegal code")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive loop until 'q' or end of input."""
    inventory = Inventory()
    try:
        while True:
            line = _prompt("Enter operation code: ")
            while not line.strip():
                line = input()
            code = line.strip()[0]
            if code == "q":
                return 0
            try:
                _run(inventory, code)
            except ValueError:
                print("Invalid number")
            print()
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())