"""
Dependency Injection Container

Wires together the hexagonal architecture by creating and injecting dependencies.
"""
from .adapters import LocalSheetStore, TldrClient, TldrPageCache, SubprocessEditor
from .core import (
    Config,
    FindSheetService,
    EditSheetService,
    UpdateCacheService,
    VersionService,
    HelpService,
    Resolver,
)


class Container:
    """Dependency injection container for the application"""

    def __init__(self, config: Config):
        self.config = config

        # Adapters (infrastructure)
        self.store = LocalSheetStore(config.sheets_dir)
        self.cache = TldrPageCache(config.tldr_cache_dir, config.tldr_pages)
        self.tool = TldrClient(config.tldr_path)
        self.editor = SubprocessEditor(config.editor_path)

        # Services (use cases)
        self.find_sheet = FindSheetService(
            store=self.store,
            tool=self.tool
        )

        self.edit_sheet = EditSheetService(
            store=self.store,
            cache=self.cache,
            editor=self.editor,
            find_service=self.find_sheet
        )

        self.update_cache = UpdateCacheService(tool=self.tool)
        self.version = VersionService(tool=self.tool)
        self.help = HelpService()

        self.resolver = Resolver(
            find=self.find_sheet,
            edit=self.edit_sheet,
            update=self.update_cache,
            version=self.version,
            help=self.help
        )
