"""
Domain Models - Pure business entities

No external dependencies. These represent the core business concepts.
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

SHEET_EXTENSION = ".md"


def sheet_filename(topic: tuple[str, ...]) -> str:
    """Join topic tokens into a sheet filename, e.g. ("git", "commit") -> git-commit.md"""
    return "-".join(topic) + SHEET_EXTENSION


class Action(Enum):
    """What the user asked the tool to do"""
    HELP = "help"
    VERSION = "version"
    FIND = "find"
    EDIT = "edit"
    UPDATE = "update"


@dataclass(frozen=True)
class Command:
    """A parsed invocation of the tool"""
    action: Action
    topic: tuple[str, ...] = ()
    verbose: bool = False

    @property
    def filename(self) -> str:
        return sheet_filename(self.topic)


@dataclass(frozen=True)
class Config:
    """Paths and executables, resolved once at startup"""
    sheets_dir: Path
    tldr_cache_dir: Path
    tldr_path: str = "tldr"
    editor_path: str = "vim"
    tldr_pages: tuple[str, ...] = field(default=("common", "linux"))
