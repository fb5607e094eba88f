#!/usr/bin/env python3
"""Find and read the bookmarks file of an installed Chromium-family browser."""

import logging
import os
import re
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from .errors import BookmarksNotFoundError, DecodeError
from .models import BookmarksDocument
from .platforms import PLACEHOLDER

# ${NAME}, $NAME or %NAME%
_ENV_PATTERN = re.compile(r"\$\{(\w+)\}|\$(\w+)|%(\w+)%")


def expand_env(text: str, env: Optional[Mapping[str, str]] = None) -> str:
    """Expand environment variable references in ``text``.

    Undefined variables expand to an empty string.
    """
    if env is None:
        env = os.environ

    def replace(match: "re.Match[str]") -> str:
        name = next(group for group in match.groups() if group is not None)
        return env.get(name, "")

    return _ENV_PATTERN.sub(replace, text)


class BookmarksLocator:
    """Probes candidate paths in priority order and decodes the first one found."""

    def __init__(
        self,
        path_template: str,
        variants: Sequence[str],
        placeholder: str = PLACEHOLDER,
        env: Optional[Mapping[str, str]] = None,
    ):
        if not variants:
            raise ValueError("at least one variant is required")
        self.path_template = path_template
        self.variants = list(variants)
        self.placeholder = placeholder
        self.env = env

    def candidates(self) -> List[str]:
        """Concrete paths to try, in order, without duplicates."""
        paths = []
        for variant in self.variants:
            path = expand_env(self.path_template.replace(self.placeholder, variant), self.env)
            if path not in paths:
                paths.append(path)
        return paths

    def resolve(self) -> BookmarksDocument:
        """Read and decode the first existing candidate.

        Raises:
            DecodeError: the first readable file is not a bookmarks file.
            BookmarksNotFoundError: none of the candidates could be read.
        """
        attempted = []
        for path in self.candidates():
            attempted.append(path)
            logging.info(f"trying {path}..")
            try:
                with Path(path).open("r", encoding="utf-8") as f:
                    text = f.read()
            except (OSError, UnicodeDecodeError) as e:
                logging.debug(f"skipping {path}: {e}")
                continue

            logging.info(f"found {path}")
            try:
                return BookmarksDocument.from_json(text)
            except DecodeError as e:
                raise e.with_path(path) from e

        raise BookmarksNotFoundError(attempted)


def resolve(
    path_template: str,
    variants: Sequence[str],
    env: Optional[Mapping[str, str]] = None,
) -> BookmarksDocument:
    """Shortcut for ``BookmarksLocator(path_template, variants, env=env).resolve()``."""
    return BookmarksLocator(path_template, variants, env=env).resolve()
