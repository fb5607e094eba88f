"""Core modules for extracting bookmark folders from Chromium bookmark files."""

from .models import (
    Entry,
    Folder,
    BookmarkNode,
    BookmarksDocument,
    node_from_dict,
    node_to_dict,
    dump_nodes,
)
from .errors import (
    FolderDumpError,
    BookmarksNotFoundError,
    DecodeError,
    NoMatchError,
)
from .platforms import PLACEHOLDER, PlatformConfig
from .locator import BookmarksLocator, expand_env, resolve
from .search import find_folders
from .console import Colors, setup_logging

__all__ = [
    # Models
    "Entry",
    "Folder",
    "BookmarkNode",
    "BookmarksDocument",
    "node_from_dict",
    "node_to_dict",
    "dump_nodes",
    # Errors
    "FolderDumpError",
    "BookmarksNotFoundError",
    "DecodeError",
    "NoMatchError",
    # Locating
    "PLACEHOLDER",
    "PlatformConfig",
    "BookmarksLocator",
    "expand_env",
    "resolve",
    # Searching
    "find_folders",
    # Console
    "Colors",
    "setup_logging",
]
