"""Errors raised while locating, decoding and searching bookmarks."""

from typing import List, Optional


class FolderDumpError(Exception):
    """Base class for all folder-dump failures."""
    pass


class BookmarksNotFoundError(FolderDumpError):
    """No candidate bookmarks file could be read."""

    def __init__(self, paths: List[str]):
        self.paths = list(paths)
        tried = "\n".join(f"  {path}" for path in self.paths)
        super().__init__(f"Couldn't find a readable bookmarks file. Tried:\n{tried}")


class DecodeError(FolderDumpError):
    """A bookmarks file was read but does not match the expected layout."""

    def __init__(self, reason: str, path: Optional[str] = None):
        self.reason = reason
        self.path = path
        super().__init__(self._message())

    def _message(self) -> str:
        if self.path is None:
            return f"Failed to parse bookmarks: {self.reason}"
        return f"Failed to parse {self.path}: {self.reason}"

    def with_path(self, path: str) -> "DecodeError":
        return DecodeError(self.reason, path=path)


class NoMatchError(FolderDumpError):
    """The bookmarks decoded fine but no folder carries the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Couldn't find any folder named {name!r}")
