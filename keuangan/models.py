"""Records kept by the budgeting application and helpers for amounts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PosAnggaran:
    """A budget category with its spending limit."""

    pos: str
    batas_nominal: float


@dataclass
class Transaksi:
    """A single income or expense entry."""

    kode: str
    jenis: str
    pos: str
    nominal: float
    tanggal: str
    keterangan: str


@dataclass
class RekapPengeluaran:
    """Summary of spending for one budget category."""

    pos: str
    nominal: float = 0.0
    realisasi: float = 0.0
    sisa: float = 0.0
    jumlah_transaksi: int = 0
    status: str = ""


def validasi_nominal(nominal: float) -> bool:
    """Return True when an amount is strictly positive."""
    return nominal > 0


def format_nominal(nominal: float) -> str:
    """Format an amount the way the data files store it (six decimals)."""
    return f"{nominal:f}"