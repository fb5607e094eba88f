#!/usr/bin/env python3
"""Data models for Chromium bookmark files."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Union

from .errors import DecodeError


@dataclass
class Entry:
    """Represents a single bookmark."""
    name: str
    url: str


@dataclass
class Folder:
    """Represents a bookmark folder containing other bookmarks or folders."""
    name: str
    children: List[Union["Folder", "Entry"]] = field(default_factory=list)


BookmarkNode = Union[Folder, Entry]


def node_from_dict(data: Any, where: str = "node") -> BookmarkNode:
    """Build a Folder or Entry from its JSON object.

    A node with ``name`` and ``children`` is a folder, otherwise one with
    ``name`` and ``url`` is an entry. Any other keys Chromium writes
    (``id``, ``guid``, ``type``, ``date_added``...) are ignored.
    """
    if not isinstance(data, dict):
        raise DecodeError(f"{where}: expected an object, got {type(data).__name__}")

    name = data.get("name")
    if not isinstance(name, str):
        raise DecodeError(f"{where}: missing string field 'name'")

    children = data.get("children")
    if isinstance(children, list):
        return Folder(
            name=name,
            children=[
                node_from_dict(child, f"{where}.children[{index}]")
                for index, child in enumerate(children)
            ],
        )

    url = data.get("url")
    if isinstance(url, str):
        return Entry(name=name, url=url)

    raise DecodeError(f"{where}: neither a folder (children) nor a bookmark (url)")


def node_to_dict(node: BookmarkNode) -> Dict[str, Any]:
    """Convert a node back into the JSON shape it was read from."""
    if isinstance(node, Folder):
        return {
            "name": node.name,
            "children": [node_to_dict(child) for child in node.children],
        }
    return {"name": node.name, "url": node.url}


def dump_nodes(nodes: Sequence[BookmarkNode]) -> str:
    """Pretty-print a list of nodes as a JSON array."""
    return json.dumps([node_to_dict(node) for node in nodes], indent=2, ensure_ascii=False)


@dataclass(frozen=True)
class BookmarksDocument:
    """Top level of a Chromium ``Bookmarks`` file."""
    checksum: str
    roots: Dict[str, BookmarkNode]

    @classmethod
    def from_dict(cls, data: Any) -> "BookmarksDocument":
        if not isinstance(data, dict):
            raise DecodeError("top level is not an object")

        checksum = data.get("checksum")
        if not isinstance(checksum, str):
            raise DecodeError("missing string field 'checksum'")

        roots = data.get("roots")
        if not isinstance(roots, dict):
            raise DecodeError("missing object field 'roots'")

        return cls(
            checksum=checksum,
            roots={key: node_from_dict(value, f"roots.{key}") for key, value in roots.items()},
        )

    @classmethod
    def from_json(cls, text: str) -> "BookmarksDocument":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeError(f"invalid JSON ({e})") from e
        return cls.from_dict(data)

    def forest(self) -> List[BookmarkNode]:
        """Root nodes in the order they appear in the file."""
        return list(self.roots.values())
