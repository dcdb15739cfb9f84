from keuangan.models import PosAnggaran
from keuangan.views import (
    daftar_pos_anggaran_view,
    header,
    input_pemasukan_view,
    menu_pos_anggaran_view,
    menu_transaksi_view,
    menu_utama_view,
)


def test_header_has_three_framed_lines():
    lines = header().splitlines()
    assert len(lines) == 3
    assert all(line.startswith("|") and line.endswith("|") for line in lines)
    assert "APLIKASI KEUANGAN MAHASISWA" in lines[1]
    assert len({len(line) for line in lines}) == 1


def test_menu_utama_lists_options_and_prompt():
    text = menu_utama_view()
    assert "1. Pencatatan Pos Anggaran" in text
    assert "0. Keluar" in text
    assert text.endswith("Pilih menu (0-5): ")


def test_daftar_table_rows():
    items = [PosAnggaran("Makan", 1500.0), PosAnggaran("Transport", 250.5)]
    text = daftar_pos_anggaran_view(items)
    lines = text.splitlines()
    assert len(lines) == 3 + len(items) + 1
    assert lines[3].startswith("| 1    | Makan ")
    assert lines[3].endswith("1500.00 |")
    assert lines[4].endswith("250.50 |")
    assert len({len(line) for line in lines}) == 1


def test_daftar_empty_table():
    lines = daftar_pos_anggaran_view([]).splitlines()
    assert len(lines) == 4
    assert lines[0] == lines[2] == lines[3]


def test_menu_pos_anggaran_options():
    text = menu_pos_anggaran_view()
    for option in ("1. Tambah Pos Anggaran", "2. Edit Pos Anggaran", "3. Hapus Pos Anggaran"):
        assert option in text


def test_input_pemasukan_banner():
    assert "Pemasukan harus bilangan positif ( >0 )" in input_pemasukan_view()


def test_menu_transaksi_prompt():
    text = menu_transaksi_view()
    assert "1. Pemasukan" in text
    assert "2. Pengeluaran" in text
    assert text.endswith("Pilih menu (0-2): ")