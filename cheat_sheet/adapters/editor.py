"""
Editor Adapter

Implements Editor port by running an editor executable in the foreground.
"""
import subprocess
from pathlib import Path

from ..core.ports import Editor


class SubprocessEditor(Editor):
    """Runs e.g. `vim <path>`, sharing the terminal with the user"""

    def __init__(self, editor_path: str = "vim"):
        self.editor_path = editor_path

    def edit(self, path: Path) -> None:
        # editor_path is a single executable, never split into words
        subprocess.run([self.editor_path, str(path)], check=True)
