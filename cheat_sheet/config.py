"""
Configuration

Resolves paths and executables once at startup. Defaults hang off the
user's home directory and can be overridden through the environment:

- CHEAT_SHEET_DIR: personal sheet directory (default: ~/.cheat-sheet)
- TLDR_PATH: tldr executable (default: tldr)
- TLDR_CACHE_DIR: tldr page cache (default: ~/.tldr/cache/pages)
- TLDR_PAGES: comma-separated page sets, searched in order (default: common,linux)
- CHEAT_SHEET_EDITOR / EDITOR: editor executable (default: vim)
"""
import os
from pathlib import Path
from typing import Mapping, Optional

from .core.domain import Config

DEFAULT_SHEETS_DIRNAME = ".cheat-sheet"
DEFAULT_TLDR_CACHE = Path(".tldr") / "cache" / "pages"
DEFAULT_TLDR_PATH = "tldr"
DEFAULT_TLDR_PAGES = ("common", "linux")
DEFAULT_EDITOR = "vim"


class ConfigError(Exception):
    """Configuration could not be resolved"""


def get_home_dir() -> Path:
    """Get the user's home directory"""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise ConfigError(f"cannot determine home directory: {e}") from e


def parse_pages(value: str) -> tuple[str, ...]:
    """Split "common, linux" into ("common", "linux")"""
    return tuple(p.strip() for p in value.split(",") if p.strip())


def load_config(environ: Optional[Mapping[str, str]] = None) -> Config:
    """Build the run's configuration from the home directory and environment"""
    env = os.environ if environ is None else environ
    home = get_home_dir()

    pages = parse_pages(env.get("TLDR_PAGES", "")) or DEFAULT_TLDR_PAGES
    editor = env.get("CHEAT_SHEET_EDITOR") or env.get("EDITOR") or DEFAULT_EDITOR

    return Config(
        sheets_dir=Path(env.get("CHEAT_SHEET_DIR") or home / DEFAULT_SHEETS_DIRNAME),
        tldr_cache_dir=Path(env.get("TLDR_CACHE_DIR") or home / DEFAULT_TLDR_CACHE),
        tldr_path=env.get("TLDR_PATH") or DEFAULT_TLDR_PATH,
        editor_path=editor,
        tldr_pages=pages,
    )
