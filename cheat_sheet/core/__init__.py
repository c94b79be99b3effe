"""
Core - Domain logic and ports

This package contains:
- domain.py: Pure domain models
- ports.py: Port interfaces (abstractions for external dependencies)
- services.py: Application services (use cases)
"""
from .domain import Action, Command, Config, sheet_filename
from .ports import SheetStore, PageCache, ReferenceTool, Editor
from .services import (
    FindSheetService,
    EditSheetService,
    UpdateCacheService,
    VersionService,
    HelpService,
    Resolver,
)

__all__ = [
    # Domain models
    "Action",
    "Command",
    "Config",
    "sheet_filename",
    # Ports
    "SheetStore",
    "PageCache",
    "ReferenceTool",
    "Editor",
    # Services
    "FindSheetService",
    "EditSheetService",
    "UpdateCacheService",
    "VersionService",
    "HelpService",
    "Resolver",
]
