"""Storage of budget categories in a pipe separated text file."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Union

from keuangan.models import PosAnggaran, format_nominal

MAX_NAME = 49

_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _parse_record(line: str) -> Optional[PosAnggaran]:
    nama, sep, rest = line.partition("|")
    if not sep or not nama or len(nama) > MAX_NAME:
        return None
    match = _NUMBER.match(rest)
    if match is None:
        return None
    return PosAnggaran(nama, float(match.group(1)))


class PosAnggaranStore:
    """Budget categories stored one per line as ``name|limit``."""

    def __init__(self, path: Union[str, "os.PathLike[str]"]) -> None:
        self.path = Path(path)

    def _lines(self) -> Iterator[str]:
        try:
            with open(self.path, encoding="utf-8") as handle:
                yield from (line.rstrip("\n") for line in handle)
        except FileNotFoundError:
            return

    def all(self) -> List[PosAnggaran]:
        """Return the stored categories, stopping at the first malformed entry."""
        items: List[PosAnggaran] = []
        for line in self._lines():
            line = line.lstrip()
            if not line:
                continue
            record = _parse_record(line)
            if record is None:
                break
            items.append(record)
        return items

    def exists(self, nama: str) -> bool:
        """Return True when a category with this exact name is stored."""
        return any(
            record is not None and record.pos == nama
            for record in map(_parse_record, self._lines())
        )

    def add(self, nama: str, nominal: float) -> None:
        """Append a category to the file."""
        with open(self.path, "a", encoding="utf-8") as handle:
            handle.write(f"{nama}|{format_nominal(nominal)}\n")

    def _rewrite(self, items: List[PosAnggaran]) -> None:
        temp = self.path.with_name("Temp_" + self.path.name)
        with open(temp, "w", encoding="utf-8") as handle:
            handle.writelines(f"{item.pos}|{format_nominal(item.batas_nominal)}\n" for item in items)
        os.replace(temp, self.path)

    def edit(self, nama: str, ask_nominal: Callable[[], float]) -> bool:
        """Replace the limit of matching categories with ``ask_nominal()``.

        Returns True when a matching category was found.
        """
        if not self.path.exists():
            return False
        nama = nama.split("\n", 1)[0]
        items = self.all()
        found = False
        for item in items:
            if item.pos == nama:
                found = True
                item.batas_nominal = ask_nominal()
        self._rewrite(items)
        return found

    def remove(self, nama: str) -> bool:
        """Drop categories with this name.

        Returns True when the rewritten file still holds other categories.
        """
        if not self.path.exists():
            return False
        kept = [item for item in self.all() if item.pos != nama]
        self._rewrite(kept)
        return bool(kept)

    def nominal_of(self, nama: str) -> float:
        """Return the limit of the named category, or 0 when it is unknown."""
        return next((item.batas_nominal for item in self.all() if item.pos == nama), 0.0)