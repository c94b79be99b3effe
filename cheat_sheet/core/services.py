"""
Application Services - Use cases that orchestrate domain logic

These are the entry points to the core. They coordinate between
domain models and ports, but contain no infrastructure concerns.
"""
import logging

from .. import __version__
from .domain import Action, Command
from .ports import SheetStore, PageCache, ReferenceTool, Editor

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Usage: cs command [options]
Examples:
\tTo list cheat-sheet of `git`
\t$ cs git

\tTo edit cheat-sheet of `git`
\t$ cs -e git

Options:
\t-h\t\tprint usage
\t-v\t\tprint version
\t-u\t\tupdate tldr cache
\t-e NAME\t\tedit cheat-sheet NAME
\t-log\t\tprint log"""


class FindSheetService:
    """Use case: Show a sheet, preferring the local copy over tldr"""

    def __init__(self, store: SheetStore, tool: ReferenceTool):
        self.store = store
        self.tool = tool

    def execute(self, command: Command) -> None:
        """
        Render the local sheet if there is one.

        Otherwise hand the raw topic tokens to tldr so it can do its own matching.
        """
        filename = command.filename
        has_found = self.store.exists(filename)

        if command.verbose:
            logger.info("has found local cheat-sheet: %s", has_found)

        if has_found:
            self.tool.render(self.store.path(filename))
            return

        self.tool.find(command.topic)


class EditSheetService:
    """Use case: Edit a local sheet, seeding it from the tldr cache first"""

    def __init__(
        self,
        store: SheetStore,
        cache: PageCache,
        editor: Editor,
        find_service: FindSheetService
    ):
        self.store = store
        self.cache = cache
        self.editor = editor
        self.find_service = find_service

    def execute(self, command: Command) -> None:
        """
        Open the sheet in the editor, then show the result.

        A sheet missing locally is copied from the first tldr cache page set
        that has it. With no cache hit the editor opens a path that does not
        exist yet, which is how new sheets are written.
        """
        filename = command.filename

        if not self.store.exists(filename):
            cache_dir = self.cache.locate(filename)

            if command.verbose:
                logger.info("find cheat sheet stored in '%s' of tldr cache", cache_dir or "")

            if cache_dir is not None:
                # Copy errors abort the edit
                self.store.seed(cache_dir / filename, filename)

        self.editor.edit(self.store.path(filename))
        self.find_service.execute(command)


class UpdateCacheService:
    """Use case: Refresh tldr's page cache"""

    def __init__(self, tool: ReferenceTool):
        self.tool = tool

    def execute(self, command: Command) -> None:
        self.tool.update()


class VersionService:
    """Use case: Report our version alongside tldr's"""

    def __init__(self, tool: ReferenceTool):
        self.tool = tool

    def execute(self, command: Command) -> None:
        tldr_version = self.tool.version()

        print(f"cheat-sheet:\t{__version__}")
        print(f"tldr:\t{tldr_version}")


class HelpService:
    """Use case: Print usage"""

    def execute(self, command: Command) -> None:
        print(HELP_TEXT)


class Resolver:
    """Dispatches a command to the use case that handles its action"""

    def __init__(
        self,
        find: FindSheetService,
        edit: EditSheetService,
        update: UpdateCacheService,
        version: VersionService,
        help: HelpService
    ):
        self.services = {
            Action.FIND: find,
            Action.EDIT: edit,
            Action.UPDATE: update,
            Action.VERSION: version,
            Action.HELP: help,
        }

    def execute(self, command: Command) -> None:
        service = self.services.get(command.action)
        if service is None:
            raise ValueError(f"unrecognized command: '{command.action}'")
        service.execute(command)
