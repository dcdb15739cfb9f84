import pytest

from keuangan.models import PosAnggaran
from keuangan.pos_store import PosAnggaranStore


@pytest.fixture
def store(tmp_path):
    return PosAnggaranStore(tmp_path / "pos_anggaran.txt")


def test_missing_file_behaviour(store):
    assert store.all() == []
    assert store.exists("Makan") is False
    assert store.nominal_of("Makan") == 0.0
    assert store.edit("Makan", lambda: 1.0) is False
    assert store.remove("Makan") is False


def test_add_writes_line_format(store):
    store.add("Makan", 1500)
    assert store.path.read_text() == "Makan|1500.000000\n"


def test_add_then_all_round_trip(store):
    store.add("Makan", 1500.0)
    store.add("Transport", 250.5)
    assert store.all() == [PosAnggaran("Makan", 1500.0), PosAnggaran("Transport", 250.5)]


def test_exists_and_nominal_of(store):
    store.add("Makan", 1500.0)
    store.add("Kos", 800.0)
    assert store.exists("Kos") is True
    assert store.exists("kos") is False
    assert store.nominal_of("Kos") == 800.0
    assert store.nominal_of("Lain") == 0.0


def test_edit_replaces_nominal(store):
    store.add("Makan", 1500.0)
    store.add("Kos", 800.0)
    calls = []

    def ask():
        calls.append(1)
        return 900.0

    assert store.edit("Kos", ask) is True
    assert len(calls) == 1
    assert store.all() == [PosAnggaran("Makan", 1500.0), PosAnggaran("Kos", 900.0)]
    assert not store.path.with_name("Temp_pos_anggaran.txt").exists()


def test_edit_unknown_keeps_data(store):
    store.add("Makan", 1500.0)
    called = []
    assert store.edit("Lain", lambda: called.append(1) or 1.0) is False
    assert called == []
    assert store.all() == [PosAnggaran("Makan", 1500.0)]


def test_remove_drops_entry(store):
    store.add("Makan", 1500.0)
    store.add("Kos", 800.0)
    assert store.remove("Makan") is True
    assert store.all() == [PosAnggaran("Kos", 800.0)]


def test_remove_last_entry_reports_false(store):
    store.add("Makan", 1500.0)
    assert store.remove("Makan") is False
    assert store.all() == []


def test_all_stops_at_malformed_entry(store):
    store.path.write_text("Makan|10\nrusak\nKos|20\n")
    assert store.all() == [PosAnggaran("Makan", 10.0)]


def test_exists_skips_malformed_lines(store):
    store.path.write_text("Makan|10\nrusak\nKos|20\n")
    assert store.exists("Kos") is True


def test_overlong_name_is_invalid(store):
    store.add("x" * 60, 5.0)
    assert store.all() == []
    assert store.exists("x" * 60) is False
    store.path.write_text("")
    store.add("y" * 49, 5.0)
    assert store.all() == [PosAnggaran("y" * 49, 5.0)]


def test_number_prefix_is_read(store):
    store.path.write_text("Makan|12.5abc\n")
    assert store.nominal_of("Makan") == 12.5