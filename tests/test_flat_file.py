"""Tests for loading and saving the ledger file."""

from decimal import Decimal
from pathlib import Path

import pytest

from bank_ledger.exceptions import PersistenceError
from bank_ledger.models import Account
from bank_ledger.persistence import load, load_store, save, save_store
from bank_ledger.store import AccountStore


class TestLoad:
    """Tests for load."""

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert load(tmp_path / "nope.txt") == []

    def test_missing_file_store_is_empty(self, tmp_path: Path) -> None:
        store = load_store(tmp_path / "nope.txt")
        assert len(store) == 0

    def test_partial_file(self, tmp_path: Path) -> None:
        path = tmp_path / "ledger.txt"
        path.write_text('1 1.00 d1 "A"\n2 2.00 d2 "B\n', encoding="utf-8")

        assert [a.account_number for a in load(path)] == [1]

    def test_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(PersistenceError, match="Cannot read"):
            load(tmp_path)

    def test_bad_encoding_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "ledger.txt"
        path.write_bytes(b'1 1.00 d1 "\xff\xfe"\n')

        with pytest.raises(PersistenceError):
            load(path)


class TestSave:
    """Tests for save."""

    def test_round_trip_through_file(
        self, tmp_path: Path, store: AccountStore, alice_pin: str
    ) -> None:
        path = tmp_path / "ledger.txt"
        store.rename_holder(101, 'Alice "Quote" O\'Neil', alice_pin)

        assert save_store(path, store) == 2
        reloaded = load_store(path)

        assert reloaded.list_all() == store.list_all()
        assert reloaded.authenticate(reloaded.get(101), alice_pin)

    def test_overwrites(self, tmp_path: Path) -> None:
        path = tmp_path / "ledger.txt"
        save(path, [Account(1, "A", Decimal("1.00"), "d1"), Account(2, "B", Decimal("2.00"), "d2")])
        save(path, [Account(3, "C", Decimal("3.00"), "d3")])

        assert path.read_text(encoding="utf-8") == '3 3.00 d3 "C"\n'

    def test_utf8_names(self, tmp_path: Path) -> None:
        path = tmp_path / "ledger.txt"
        accounts = [Account(1, "José Ñúñez 山田", Decimal("1.00"), "d1")]

        save(path, accounts)

        assert load(path) == accounts

    def test_unwritable_destination(self, tmp_path: Path) -> None:
        with pytest.raises(PersistenceError, match="Cannot open") as exc_info:
            save(tmp_path / "missing-dir" / "ledger.txt", [])
        assert isinstance(exc_info.value.__cause__, OSError)
