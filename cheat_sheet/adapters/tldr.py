"""
tldr Adapter

Implements ReferenceTool port by running the tldr client as a subprocess,
and PageCache port on top of the client's page cache directory.
"""
import logging
import subprocess
from pathlib import Path
from typing import Optional

from ..core.ports import PageCache, ReferenceTool
from .filesystem import file_exists

logger = logging.getLogger(__name__)

# tldr exits with 3 when it has no page for the topic
TOPIC_NOT_FOUND_EXIT_CODE = 3


class TldrClient(ReferenceTool):
    """tldr command line client"""

    def __init__(self, cmd_path: str = "tldr"):
        self.cmd_path = cmd_path

    def _run(self, *args: str) -> None:
        """Run tldr with our stdout/stderr so output streams straight to the user"""
        try:
            subprocess.run([self.cmd_path, *args], check=True)
        except subprocess.CalledProcessError as e:
            if e.returncode == TOPIC_NOT_FOUND_EXIT_CODE:
                logger.debug("tldr has no page for %s", args)
                return
            raise

    def find(self, topic: tuple[str, ...]) -> None:
        self._run(*topic)

    def render(self, path: Path) -> None:
        self._run("--render", str(path))

    def update(self) -> None:
        self._run("--update")

    def version(self) -> str:
        result = subprocess.run(
            [self.cmd_path, "--version"],
            capture_output=True,
            text=True,
            check=True
        )
        return result.stdout.strip()


class TldrPageCache(PageCache):
    """tldr's downloaded pages, one subdirectory per page set"""

    def __init__(self, cache_dir: str | Path, pages: tuple[str, ...] = ("common", "linux")):
        self.cache_dir = Path(cache_dir)
        self.pages = tuple(pages)

    def locate(self, filename: str) -> Optional[Path]:
        """Search page sets in configured order, first hit wins"""
        for page in self.pages:
            page_dir = self.cache_dir / page
            if file_exists(page_dir, filename):
                return page_dir
        return None
