"""
Adapters - External implementations of ports

This package contains implementations of the core ports:
- filesystem.py: Local cheat-sheet directory, file lookup and copy
- tldr.py: tldr client subprocess and its page cache
- editor.py: Interactive editor subprocess
"""
from .filesystem import LocalSheetStore, file_exists, copy_file
from .tldr import TldrClient, TldrPageCache, TOPIC_NOT_FOUND_EXIT_CODE
from .editor import SubprocessEditor

__all__ = [
    "LocalSheetStore",
    "file_exists",
    "copy_file",
    "TldrClient",
    "TldrPageCache",
    "TOPIC_NOT_FOUND_EXIT_CODE",
    "SubprocessEditor",
]
