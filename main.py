#!/usr/bin/env python3
"""
Bookmark Folder Dump

Print every bookmark folder with a given name from a Chrome/Chromium
bookmarks file as JSON.
"""

import argparse
import logging
import sys
from typing import List, Optional

from folderdump import (
    BookmarksLocator,
    FolderDumpError,
    NoMatchError,
    PlatformConfig,
    dump_nodes,
    find_folders,
    setup_logging,
)
from folderdump.console import error_line


def build_parser(config: PlatformConfig) -> argparse.ArgumentParser:
    """Create the command line parser with platform defaults."""
    parser = argparse.ArgumentParser(
        prog="folder-dump",
        description="Print bookmark folders with a given name as JSON.",
    )
    parser.add_argument(
        "-f", "--file",
        default=config.path_template,
        help="Bookmarks file path; {edition} is replaced by each browser channel "
             "(default: %(default)s)",
    )
    parser.add_argument("name", help="Exact (case-sensitive) folder name to look for")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    verbosity.add_argument("-s", "--silent", action="store_true", help="Hide progress output")
    return parser


def dump_folders(path_template: str, variants, name: str) -> str:
    """Locate the bookmarks file and return matching folders as JSON."""
    document = BookmarksLocator(path_template, variants).resolve()
    selected = find_folders(document.forest(), name)
    if not selected:
        raise NoMatchError(name)
    logging.debug(f"Found {len(selected)} folder(s) named {name!r}")
    return dump_nodes(selected)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    config = PlatformConfig.detect()
    args = build_parser(config).parse_args(argv)
    setup_logging(verbose=args.verbose, silent=args.silent)

    try:
        output = dump_folders(args.file, config.variants, args.name)
    except FolderDumpError as e:
        print(error_line(str(e)), file=sys.stderr)
        return 1

    print(output)
    return 0


def run():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    run()
