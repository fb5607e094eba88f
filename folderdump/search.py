"""Search a bookmark forest for folders by name."""

import copy
from typing import List, Sequence

from .models import BookmarkNode, Folder


def find_folders(forest: Sequence[BookmarkNode], target_name: str) -> List[Folder]:
    """Collect every folder named exactly ``target_name``, in document order.

    A matching folder is returned as a deep copy and its children are not
    searched further; non-matching folders are searched recursively.
    Bookmarks (entries) never match.
    """
    found = []
    for node in forest:
        if not isinstance(node, Folder):
            continue
        if node.name == target_name:
            found.append(copy.deepcopy(node))
        else:
            found.extend(find_folders(node.children, target_name))
    return found
