"""
Filesystem Store Adapter

Implements SheetStore port using a local directory of markdown files.
"""
import os
import shutil
from pathlib import Path

from ..core.ports import SheetStore


def file_exists(directory: str | Path, filename: str) -> bool:
    """
    Check whether directory/filename exists.

    Only a missing file (or missing directory) counts as "no". Any other
    stat failure, e.g. permission denied, is raised to the caller.
    """
    try:
        os.stat(Path(directory) / filename)
    except FileNotFoundError:
        return False
    return True


def copy_file(src: str | Path, dest: str | Path) -> None:
    """Copy src to dest byte for byte, truncating dest if it exists"""
    with open(src, "rb") as src_file:
        with open(dest, "wb") as dest_file:
            shutil.copyfileobj(src_file, dest_file)


class LocalSheetStore(SheetStore):
    """Directory of personal cheat-sheets"""

    def __init__(self, sheets_dir: str | Path):
        self.sheets_dir = Path(sheets_dir).absolute()

    def ensure_dir(self) -> Path:
        """Create the store directory if it does not exist yet"""
        self.sheets_dir.mkdir(parents=True, exist_ok=True)
        return self.sheets_dir

    def path(self, filename: str) -> Path:
        return self.sheets_dir / filename

    def exists(self, filename: str) -> bool:
        return file_exists(self.sheets_dir, filename)

    def seed(self, source: Path, filename: str) -> Path:
        dest = self.path(filename)
        copy_file(source, dest)
        return dest
