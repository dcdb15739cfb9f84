"""Interactive menus for recording budget categories and transactions."""

from __future__ import annotations

import argparse
import os
import re
import sys
from datetime import date
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

from keuangan.models import format_nominal, validasi_nominal
from keuangan.pos_store import PosAnggaranStore
from keuangan.transaksi_store import TransaksiStore
from keuangan.utils import clear_screen, file_kosong
from keuangan.views import (
    daftar_pos_anggaran_view,
    header,
    input_pemasukan_view,
    menu_pos_anggaran_view,
    menu_transaksi_view,
    menu_utama_view,
)

POS_FILE = "pos_anggaran.txt"
TRANSAKSI_FILE = "data_transaksi.txt"

NAMA_POS_MAX = 49
POS_TRANSAKSI_MAX = 19
DESKRIPSI_MAX = 49

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class App:
    """The interactive budgeting application bound to a data directory."""

    def __init__(
        self,
        data_dir: Union[str, "os.PathLike[str]"] = ".",
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        clear: Callable[[], None] = clear_screen,
    ) -> None:
        self.data_dir = Path(data_dir)
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.clear = clear
        self.pos_store = PosAnggaranStore(self.data_dir / POS_FILE)
        self.transaksi_store = TransaksiStore(self.data_dir / TRANSAKSI_FILE)

    # -- input and output -------------------------------------------------

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _read_line(self, limit: Optional[int] = None) -> str:
        line = self.stdin.readline()
        if line == "":
            raise EOFError("input ended")
        line = line.rstrip("\n")
        return line[:limit] if limit is not None else line

    def _read_int(self) -> Optional[int]:
        match = _INT.match(self._read_line())
        return int(match.group(1)) if match else None

    def _read_float(self) -> Optional[float]:
        match = _FLOAT.match(self._read_line())
        return float(match.group(1)) if match else None

    def _screen(self) -> None:
        self.clear()
        self._write(header())

    # -- main menu --------------------------------------------------------

    def run(self) -> None:
        """Show the main menu until the user leaves or input ends."""
        try:
            if file_kosong(self.pos_store.path):
                self.tambah_pos_anggaran(True)
            while True:
                self._screen()
                self._write(menu_utama_view())
                pilihan = self._read_int()
                if pilihan == 0:
                    self._write("____________________")
                    self._write("\n|Program selesai.|\n")
                    return
                if pilihan == 1:
                    self.menu_pos_anggaran()
                elif pilihan == 2:
                    self.menu_transaksi()
                else:
                    self._write("Mohon Pilih menu hanya (0-5): ")
        except EOFError:
            self._write("\n")

    # -- budget categories ------------------------------------------------

    def menu_pos_anggaran(self) -> None:
        """Show the budget category menu until the user goes back."""
        while True:
            self._screen()
            self._write(menu_pos_anggaran_view())
            self._write("\n \tPilih menu (0-3): ")
            pilihan = self._read_int()
            if pilihan == 0:
                return
            if pilihan == 1:
                self.tambah_pos_anggaran(False)
            elif pilihan == 2:
                self.edit_pos_anggaran()
            elif pilihan == 3:
                self.hapus_pos_anggaran()
            else:
                self._write("Mohon Pilih menu hanya (0-3)\n")
                self._read_line()

    def tambah_pos_anggaran(self, message: bool) -> None:
        """Ask for new budget categories until the user answers no."""
        alert = False
        while True:
            self._screen()
            if message:
                self._write(
                    "\tmohon tambahkan pos anggaran, karena data pos anggaran belum ada \n"
                )
            self._write("\tMasukkan Nama pos: ")
            nama = self._read_line(NAMA_POS_MAX)

            if self.pos_store.exists(nama):
                self._write(
                    f"Pos '{nama}' sudah ada di dalam file. Silakan masukkan nama lain.\n"
                )
                self._write("Tekan ENTER untuk melanjutkan...")
                self._read_line()
                continue

            self._write("\tMasukkan batas anggaran: ")
            batas = self._read_float()
            if batas is None:
                batas = 0.0
            if not validasi_nominal(batas):
                self._write(
                    f"Anda menetapkan batas anggaran sebesar '{format_nominal(batas)}', "
                    "batas anggaran harus lebih besar dari nol.\n"
                )
                self._write("Tekan ENTER untuk melanjutkan...")
                self._read_line()
                continue

            self.pos_store.add(nama, batas)
            self._write("Data berhasil ditambahkan!\n")
            message = False

            self._write("=" * 145 + "\n")
            self.clear()

            while True:
                self._write(header())
                if alert:
                    self._screen()
                    self._write("\n mohon hanya menginput (y/n)\n")
                self._write("\tApakah anda masih ingin menambah pos anggaran? \n")
                self._write(
                    "\tmasukkan (y) untuk tetap menambah \n\tmasukkan (n) jika selesai \n="
                )
                jawaban = self._read_line().strip()[:1]
                if jawaban in ("n", "N"):
                    return
                if jawaban in ("y", "Y"):
                    break
                alert = True

    def edit_pos_anggaran(self) -> None:
        """Change the limit of a budget category chosen by name."""
        self._screen()
        self._write(daftar_pos_anggaran_view(self.pos_store.all()))
        self._write("Masukkan nama pos yang nominalnya ingin diubah: ")
        nama = self._read_line(NAMA_POS_MAX)
        current = self.pos_store.nominal_of(nama)

        def ask_nominal() -> float:
            self._write("Masukkan batas nominal baru: ")
            value = self._read_float()
            return current if value is None else value

        if self.pos_store.edit(nama, ask_nominal):
            self._write("\nData berhasil diubah!\n")
        else:
            self._write("\nData tidak ditemukan!\n")
        self._write("Tekan Enter untuk kembali...")
        self._read_line()

    def hapus_pos_anggaran(self) -> None:
        """Delete a budget category chosen by name."""
        self._screen()
        self._write(daftar_pos_anggaran_view(self.pos_store.all()))
        self._write("Masukkan nama pos yang ingin dihapus: ")
        nama = self._read_line(NAMA_POS_MAX)
        if self.pos_store.remove(nama):
            self._write("\nData berhasil dihapus!\n")
        else:
            self._write("\nData gagal di hapus!\n")
        self._write("Tekan Enter untuk kembali...")
        self._read_line()

    # -- transactions -----------------------------------------------------

    def menu_transaksi(self) -> None:
        """Show the transaction menu until the user goes back."""
        self.transaksi_store.ensure_exists()
        while True:
            self._screen()
            self._write(menu_transaksi_view())
            pilihan = self._read_int()
            if pilihan == 0:
                return
            if pilihan == 1:
                self.pencatatan_transaksi(True)
            elif pilihan == 2:
                self.pencatatan_transaksi(False)
            else:
                self._write("Mohon Pilih menu hanya (0-2): ")

    def pencatatan_transaksi(self, pemasukan: bool) -> None:
        """Record one income (``pemasukan`` true) or expense entry dated today."""
        tanggal = date.today().strftime("%d/%m/%Y")
        self._screen()
        daftar = self.pos_store.all()
        if pemasukan:
            self._write(input_pemasukan_view())
        else:
            self._write(daftar_pos_anggaran_view(daftar))

        pos = ""
        if not pemasukan:
            while True:
                self._write("Masukkan Pos Anggaran : ")
                pos = self._read_line(POS_TRANSAKSI_MAX)
                if any(item.pos == pos for item in self.pos_store.all()):
                    break
                self._write(
                    "\nPos Anggaran harus berasal dari data pos anggaran yang diinputkan\n"
                )

        while True:
            self._write("\nMasukkan nominal : ")
            nominal = self._read_float()
            if nominal is not None and validasi_nominal(nominal):
                break
            self._write("Nominal harus bilangan positif (>0).\n")

        self._write("Masukkan deskripsi : ")
        deskripsi = self._read_line(DESKRIPSI_MAX)

        kode = self.transaksi_store.next_id()
        self.transaksi_store.add(pemasukan, kode, tanggal, pos, nominal, deskripsi)


def main(argv: Optional[list] = None) -> int:
    """Start the application in the given (or current) data directory."""
    parser = argparse.ArgumentParser(prog="keuangan", description="Aplikasi keuangan mahasiswa")
    parser.add_argument("--data-dir", default=".", help="directory holding the data files")
    parser.add_argument("--no-clear", action="store_true", help="do not clear the terminal")
    args = parser.parse_args(argv)
    clear = (lambda: None) if args.no_clear else clear_screen
    App(args.data_dir, clear=clear).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())