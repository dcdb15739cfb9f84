"""Small file and terminal helpers."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def file_kosong(path: PathLike) -> bool:
    """Return True when the file is missing, unreadable or empty."""
    try:
        with open(Path(path), "rb") as handle:
            return handle.read(1) == b""
    except OSError:
        return True


def clear_screen() -> None:
    """Clear the terminal using the platform's own command."""
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass