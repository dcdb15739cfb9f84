"""Totals, balance and per-category spending summaries."""

from __future__ import annotations

from typing import Dict, Iterable, List

from keuangan.models import RekapPengeluaran, Transaksi
from keuangan.pos_store import PosAnggaranStore
from keuangan.transaksi_store import TransaksiStore


def pemasukan_total(transaksi_store: TransaksiStore) -> float:
    """Return the sum of all income."""
    return sum((entry.nominal for entry in transaksi_store.pemasukan()), 0.0)


def pengeluaran_total(transaksi_store: TransaksiStore) -> float:
    """Return the sum of all expenses."""
    return sum((entry.nominal for entry in transaksi_store.pengeluaran()), 0.0)


def calculate_saldo(transaksi_store: TransaksiStore) -> float:
    """Return income minus expenses."""
    return pemasukan_total(transaksi_store) - pengeluaran_total(transaksi_store)


def average_spending(transaksi_store: TransaksiStore) -> float:
    """Return the mean expense, or 0 when the balance is not positive."""
    if calculate_saldo(transaksi_store) <= 0:
        return 0.0
    jumlah = transaksi_store.count_pengeluaran()
    if jumlah == 0:
        return 0.0
    return pengeluaran_total(transaksi_store) / jumlah


def rekap_pengeluaran(
    data: Iterable[Transaksi], pos_store: PosAnggaranStore
) -> List[RekapPengeluaran]:
    """Group expenses by category, in order of first appearance."""
    rekap: Dict[str, RekapPengeluaran] = {}
    for entry in data:
        item = rekap.get(entry.pos)
        if item is None:
            rekap[entry.pos] = RekapPengeluaran(
                pos=entry.pos,
                nominal=pos_store.nominal_of(entry.pos),
                realisasi=entry.nominal,
                jumlah_transaksi=1,
            )
        else:
            item.realisasi += entry.nominal
            item.jumlah_transaksi += 1
    for item in rekap.values():
        item.sisa = item.nominal - item.realisasi
    return list(rekap.values())


def analisis_kondisi_keuangan(saldo: float) -> str:
    """Describe the balance as a deficit, break-even or surplus."""
    if saldo < 0:
        return "Defisit"
    if saldo == 0:
        return "Seimbang"
    return "surplus"