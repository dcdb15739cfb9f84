# keuangan

A small terminal application for keeping a student's finances in order. You
define budget items (*pos anggaran*), each with a spending limit. You then
record income (*pemasukan*) and spending (*pengeluaran*) against those items.

## Installation

```
pip install .
```

## Usage

```
keuangan [--data-dir DIR] [--no-clear]
```

- `--data-dir DIR`: the directory that holds the data files. The default is
  the current directory.
- `--no-clear`: do not clear the terminal between screens.

If no budget items exist yet, the program asks you to add some first. After
that, the main menu offers:

1. **Pencatatan Pos Anggaran**: add, edit or delete budget items. A new item
   needs a name that is not already in use and a limit greater than zero.
2. **Pencatatan Transaksi**: record income or spending, dated today.
   Spending must name an existing budget item. Amounts must be greater than
   zero. Income is always filed under the item name `Pemasukan`.
0. **Keluar**: quit.

The program also ends quietly when its input runs out.

Input is cut to fixed lengths. Budget item names and descriptions are cut to
49 characters. The budget item typed for a spending entry is cut to 19
characters.

## What it does not do

The main menu lists three more entries: **Perhitungan & Analisis Keuangan**,
**Kesimpulan Kondisi Mahasiswa** and **Tampilkan laporan keuangan**. Choosing
any of them only prints the hint `Mohon Pilih menu hanya (0-5)`. The
application has no analysis screen and no report screen. Totals, balance and
per-item summaries are available only from Python code (see below).

## Data files

All data is kept as plain text in the data directory:

- `pos_anggaran.txt`: one budget item per line, written as `name|limit`.
  Limits are written with six decimals.
- `data_transaksi.txt`: one transaction per line, written as
  `id|date|budget item|type|amount|description`. The type is `Pemasukan` or
  `Pengeluaran`. Transaction ids run `T001`, `T002`, and so on. Dates are
  written as `dd/mm/yyyy`.

Editing or deleting a budget item rewrites `pos_anggaran.txt` through a
temporary file named `Temp_pos_anggaran.txt`. A deletion is reported as
successful only when other budget items remain in the file afterwards.

## Library use

The stores and calculations can also be used from Python code:

```python
from keuangan.pos_store import PosAnggaranStore
from keuangan.transaksi_store import TransaksiStore
from keuangan.analisis import (
    analisis_kondisi_keuangan,
    average_spending,
    calculate_saldo,
    rekap_pengeluaran,
)

pos = PosAnggaranStore("pos_anggaran.txt")
trx = TransaksiStore("data_transaksi.txt")

saldo = calculate_saldo(trx)
print(saldo, analisis_kondisi_keuangan(saldo))  # "Defisit", "Seimbang" or "surplus"
print(average_spending(trx))                    # 0 when the balance is not positive
for row in rekap_pengeluaran(trx.pengeluaran(), pos):
    print(row.pos, row.nominal, row.realisasi, row.sisa, row.jumlah_transaksi)
```

- `keuangan.pos_store.PosAnggaranStore`: `all()`, `exists(nama)`,
  `add(nama, nominal)`, `edit(nama, ask_nominal)`, `remove(nama)`,
  `nominal_of(nama)`.
- `keuangan.transaksi_store.TransaksiStore`: `ensure_exists()`, `all()`,
  `pemasukan()`, `pengeluaran()`, `count_pengeluaran()`, `next_id()`,
  `add(pemasukan, kode, tanggal, pos, nominal, deskripsi)`. The function
  `keuangan.transaksi_store.parse_line(line)` reads one stored line and
  returns `None` when the line is incomplete.
- `keuangan.analisis`: `pemasukan_total`, `pengeluaran_total`,
  `calculate_saldo`, `average_spending`, `rekap_pengeluaran`,
  `analisis_kondisi_keuangan`.
- `keuangan.cli.App(data_dir, stdin, stdout, clear)`: the interactive menus,
  driven from any text streams. Call `run()` to start it.

## Tests

```
pip install .[test]
pytest
```