"""
Ports - Interfaces for external dependencies

These define HOW the core interacts with the outside world,
but NOT the implementation details.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional


class SheetStore(ABC):
    """Port for the personal sheet directory"""

    @abstractmethod
    def path(self, filename: str) -> Path:
        """Absolute path a sheet lives (or would live) at"""
        pass

    @abstractmethod
    def exists(self, filename: str) -> bool:
        """Check if sheet is stored locally"""
        pass

    @abstractmethod
    def seed(self, source: Path, filename: str) -> Path:
        """Copy an existing page into the store, return its new path"""
        pass


class PageCache(ABC):
    """Port for the reference tool's on-disk page cache"""

    @abstractmethod
    def locate(self, filename: str) -> Optional[Path]:
        """Return the first cache directory holding filename, or None"""
        pass


class ReferenceTool(ABC):
    """Port for the external lookup tool"""

    @abstractmethod
    def find(self, topic: tuple[str, ...]) -> None:
        """Look up a topic by name and print it"""
        pass

    @abstractmethod
    def render(self, path: Path) -> None:
        """Render a markdown page from disk"""
        pass

    @abstractmethod
    def update(self) -> None:
        """Refresh the tool's page cache"""
        pass

    @abstractmethod
    def version(self) -> str:
        """Version string reported by the tool"""
        pass


class Editor(ABC):
    """Port for the interactive editor"""

    @abstractmethod
    def edit(self, path: Path) -> None:
        """Open path and block until the editor exits"""
        pass
