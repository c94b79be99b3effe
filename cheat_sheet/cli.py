#!/usr/bin/env python3
"""
CLI for cheat-sheet - personal overrides on top of tldr

Usage:
  cs git                  # Show ~/.cheat-sheet/git.md if present, else `tldr git`
  cs git commit           # Multi-word topic, local file is git-commit.md
  cs -e git               # Edit git.md (seeded from the tldr cache if missing)
  cs -e git commit        # Edit git-commit.md
  cs -u                   # Update tldr cache
  cs -v                   # Print cheat-sheet and tldr versions
  cs -log git             # Same as `cs git`, with log lines

Topic words go after -e NAME (`cs commit -e git` is rejected) and flags are
never abbreviated (`-l` is not `-log`).

Errors are printed as "error occurred: ..." and do not change the exit status.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import load_config
from .container import Container
from .core.domain import Action, Command

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y/%m/%d %H:%M:%S"


class UsageError(Exception):
    """Command line could not be parsed"""


class ArgumentParser(argparse.ArgumentParser):
    """argparse that raises instead of printing usage and exiting"""

    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="cs",
        description="cheat-sheet - personal overrides on top of tldr",
        add_help=False,
        allow_abbrev=False
    )
    parser.add_argument("-h", dest="help", action="store_true", help="print usage")
    parser.add_argument("-v", dest="version", action="store_true", help="print version")
    parser.add_argument("-log", dest="log", action="store_true", help="print log")
    parser.add_argument("-u", dest="update", action="store_true", help="update tldr cache")
    parser.add_argument("-e", dest="edit", metavar="NAME", default="", help="edit cheat-sheet name")
    parser.add_argument("topic", nargs="*", help="Topic to look up (e.g., git, or git commit)")
    return parser


def topic_before_edit(argv: Sequence[str]) -> bool:
    """True if a topic word appears ahead of the -e flag"""
    for arg in argv:
        if arg == "-log":
            continue
        if arg.startswith("-") and not arg.startswith("--") and "e" in arg[1:]:
            return False
        if not arg.startswith("-"):
            return True
    return False


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse flags and topic words; words after -e NAME extend the topic"""
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()

    # Older argparse matches single-dash prefixes even with allow_abbrev=False
    for arg in argv:
        if len(arg) > 1 and arg != "-log" and "-log".startswith(arg):
            parser.error(f"unrecognized arguments: {arg}")

    args = parser.parse_intermixed_args(argv)

    if args.edit and topic_before_edit(argv):
        parser.error("topic words must follow -e NAME")
    return args


def build_command(args: argparse.Namespace) -> Command:
    """Pick the action from parsed flags: help, version, update, edit, then find"""
    verbose = args.log

    if args.help:
        return Command(Action.HELP, verbose=verbose)
    if args.version:
        return Command(Action.VERSION, verbose=verbose)
    if args.update:
        return Command(Action.UPDATE, verbose=verbose)
    if args.edit:
        return Command(Action.EDIT, topic=(args.edit, *args.topic), verbose=verbose)
    if args.topic:
        return Command(Action.FIND, topic=tuple(args.topic), verbose=verbose)

    # No topic at all
    return Command(Action.HELP, verbose=verbose)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT
    )


def run(argv: Optional[Sequence[str]] = None) -> None:
    """Parse argv and execute the resulting command"""
    args = parse_args(argv)
    command = build_command(args)

    configure_logging(command.verbose)
    if command.verbose:
        logger.info("create a new command %s", command)

    container = Container(load_config())
    container.store.ensure_dir()
    container.resolver.execute(command)


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        run(argv)
    except Exception as e:
        print(f"error occurred: {e}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
