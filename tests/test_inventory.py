import io

import pytest

from practicebox.inventory import (
    HEADER,
    MAX_PARTS,
    NAME_LEN,
    DatabaseFullError,
    DuplicatePartError,
    Inventory,
    InventoryError,
    Part,
    PartNotFoundError,
    main,
)


def test_insert_then_find():
    inv = Inventory()
    inv.insert(528, "Disk drive", 10)
    assert inv.find(528) == Part(528, "Disk drive", 10)
    assert len(inv) == 1
    assert 528 in inv


def test_find_missing_raises():
    inv = Inventory()
    with pytest.raises(PartNotFoundError):
        inv.find(1)


def test_duplicate_rejected():
    inv = Inventory()
    inv.insert(5, "Bolt", 3)
    with pytest.raises(DuplicatePartError):
        inv.insert(5, "Nut", 4)
    assert inv.find(5).name == "Bolt"


def test_full_database_rejected():
    inv = Inventory()
    for n in range(MAX_PARTS):
        inv.insert(n, f"part {n}", n)
    with pytest.raises(DatabaseFullError):
        inv.insert(MAX_PARTS, "extra", 1)
    assert len(inv) == MAX_PARTS


def test_errors_share_base_class():
    inv = Inventory()
    with pytest.raises(InventoryError):
        inv.update(9, 1)


def test_name_stripped_and_truncated():
    inv = Inventory()
    part = inv.insert(1, "   " + "x" * (NAME_LEN + 10), 0)
    assert part.name == "x" * NAME_LEN


def test_update_adds_change():
    inv = Inventory()
    inv.insert(7, "Gear", 10)
    inv.update(7, -4)
    inv.update(7, 2)
    assert inv.find(7).on_hand == 8


def test_listing_keeps_entry_order_and_columns():
    inv = Inventory()
    inv.insert(528, "Disk drive", 10)
    inv.insert(3, "Cable", 2)
    lines = inv.listing().splitlines()
    assert lines[0] == HEADER
    assert len(lines) == 3
    assert lines[1].startswith("    528       Disk drive")
    assert lines[1].endswith(" 10")
    assert len(lines[1]) == len(lines[2])
    assert lines[2].lstrip().startswith("3")


def test_main_session(monkeypatch, capsys):
    script = "i\n528\nDisk drive\n10\nu\n528\n5\ns\n528\nx\nq\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Part name: Disk drive" in out
    assert "Quantity on hand: 15" in out
    assert "Illegal code" in out


def test_main_reports_missing_part(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("s\n99\nq\n"))
    assert main([]) == 0
    assert "Part not found." in capsys.readouterr().out