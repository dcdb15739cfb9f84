"""Storage of income and expense entries in a pipe separated text file."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterator, List, Optional, Union

from keuangan.models import Transaksi, format_nominal
from keuangan.utils import file_kosong

JENIS_PEMASUKAN = "Pemasukan"
JENIS_PENGELUARAN = "Pengeluaran"

_FIELD = re.compile(r"([^|]{1,49})\|")
_LAST_FIELD = re.compile(r"[^|]{1,49}")
_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))\|",
    re.IGNORECASE,
)
_KETERANGAN = re.compile(r"[^\n]{1,49}")
_KODE = re.compile(r"[^|]+")
_NOMOR = re.compile(r"\s*([+-]?\d+)")


def _leading_fields(line: str, count: int) -> Optional[List[str]]:
    """Read ``count`` pipe terminated fields from the start of a line."""
    fields: List[str] = []
    position = 0
    for _ in range(count):
        match = _FIELD.match(line, position)
        if match is None:
            return None
        fields.append(match.group(1))
        position = match.end()
    return fields


def parse_line(line: str) -> Optional[Transaksi]:
    """Parse ``kode|tanggal|pos|jenis|nominal|keterangan``.

    Returns None when the line does not hold a complete entry.
    """
    position = 0
    fields: List[str] = []
    for _ in range(4):
        match = _FIELD.match(line, position)
        if match is None:
            return None
        fields.append(match.group(1))
        position = match.end()
    number = _NUMBER.match(line, position)
    if number is None:
        return None
    keterangan = _KETERANGAN.match(line, number.end())
    if keterangan is None:
        return None
    kode, tanggal, pos, jenis = fields
    return Transaksi(
        kode=kode,
        jenis=jenis,
        pos=pos,
        nominal=float(number.group(1)),
        tanggal=tanggal,
        keterangan=keterangan.group(0),
    )


class TransaksiStore:
    """Transactions stored one per line, newest last."""

    def __init__(self, path: Union[str, "os.PathLike[str]"]) -> None:
        self.path = Path(path)

    def _lines(self) -> Iterator[str]:
        try:
            with open(self.path, encoding="utf-8") as handle:
                yield from handle
        except FileNotFoundError:
            return

    def ensure_exists(self) -> None:
        """Create the data file when it is missing or empty."""
        if file_kosong(self.path):
            with open(self.path, "a", encoding="utf-8"):
                pass

    def all(self) -> List[Transaksi]:
        """Return every well-formed entry in file order."""
        return [entry for entry in map(parse_line, self._lines()) if entry is not None]

    def pemasukan(self) -> List[Transaksi]:
        """Return the income entries."""
        return [entry for entry in self.all() if entry.jenis == JENIS_PEMASUKAN]

    def pengeluaran(self) -> List[Transaksi]:
        """Return the expense entries."""
        return [entry for entry in self.all() if entry.jenis == JENIS_PENGELUARAN]

    def count_pengeluaran(self) -> int:
        """Count lines whose type field reads as an expense.

        Only the first four fields have to be readable for a line to count.
        """
        total = 0
        for line in self._lines():
            fields = _leading_fields(line, 3)
            if fields is None:
                continue
            position = sum(len(field) + 1 for field in fields)
            jenis = _LAST_FIELD.match(line, position)
            if jenis is not None and jenis.group(0) == JENIS_PENGELUARAN:
                total += 1
        return total

    def next_id(self) -> str:
        """Return the code following the last one in the file (``T001`` first)."""
        if not self.path.exists():
            return "T001"
        terakhir = "T000"
        for line in self._lines():
            match = _KODE.match(line.split("\n", 1)[0])
            if match is not None:
                terakhir = match.group(0)
        nomor_match = _NOMOR.match(terakhir[1:])
        nomor = int(nomor_match.group(1)) if nomor_match else 0
        return f"T{nomor + 1:03d}"

    def add(
        self,
        pemasukan: bool,
        kode: str,
        tanggal: str,
        pos: str,
        nominal: float,
        deskripsi: str,
    ) -> None:
        """Append an entry; income is always filed under the ``Pemasukan`` category."""
        if pemasukan:
            pos = JENIS_PEMASUKAN
            jenis = JENIS_PEMASUKAN
        else:
            jenis = JENIS_PENGELUARAN
        with open(self.path, "a", encoding="utf-8") as handle:
            handle.write(
                f"{kode}|{tanggal}|{pos}|{jenis}|{format_nominal(nominal)}|{deskripsi}\n"
            )