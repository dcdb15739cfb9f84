"""Text screens shown by the application."""

from __future__ import annotations

from typing import Iterable

from keuangan.models import PosAnggaran

_BAR = "=================================================================="


def header() -> str:
    """Return the application banner."""
    return (
        "|==================================================================================================|\n"
        "|                                 APLIKASI KEUANGAN MAHASISWA                                      |\n"
        "|==================================================================================================|\n"
    )


def menu_utama_view() -> str:
    """Return the main menu with its prompt."""
    return (
        "=========================== MENU UTAMA ==========================="
        " \n"
        "     1. Pencatatan Pos Anggaran\n"
        "     2. Pencatatan Transaksi\n"
        "     3. Perhitungan & Analisis Keuangan\n"
        "     4. Kesimpulan Kondisi Mahasiswa\n"
        "     5. Tampilkan laporan keuangan\n"
        "     0. Keluar\n"
        f"{_BAR}"
        "\n \tPilih menu (0-5): "
    )


def daftar_pos_anggaran_view(items: Iterable[PosAnggaran]) -> str:
    """Return a table listing budget categories and their limits."""
    border = "+------+--------------------------------+------------------+\n"
    lines = [
        border,
        "| No   | Pos Anggaran                   | Batas Nominal    |\n",
        border,
    ]
    lines.extend(
        f"| {number:<4d} | {item.pos:<30} | {item.batas_nominal:16.2f} |\n"
        for number, item in enumerate(items, start=1)
    )
    lines.append(border)
    return "".join(lines)


def menu_pos_anggaran_view() -> str:
    """Return the budget category menu."""
    return (
        "======================= MENU POS ANGGARAN ======================="
        " \n"
        "     1. Tambah Pos Anggaran\n"
        "     2. Edit Pos Anggaran\n"
        "     3. Hapus Pos Anggaran\n"
        "     0. Keluar\n"
        f"{_BAR}"
    )


def input_pemasukan_view() -> str:
    """Return the banner shown before entering income."""
    return (
        "\n#____________________________________________Pemasukan____________________________________________#\n"
        "\n+-Silahkan input nominal dari Pemasukan anda-+\n\n"
        "+-Pemasukan harus bilangan positif ( >0 )-+\n"
        "\n#_________________________________________________________________________________________________#\n"
    )


def menu_transaksi_view() -> str:
    """Return the transaction menu with its prompt."""
    return (
        "========================= MENU TRANSAKSI ========================="
        " \n Pilih jenis Transaksi!\n"
        "     1. Pemasukan\n"
        "     2. Pengeluaran\n"
        "     0. Keluar\n"
        f"{_BAR}"
        "\n \tPilih menu (0-2): "
    )