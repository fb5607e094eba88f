"""Default bookmark locations for each operating system."""

import sys
from dataclasses import dataclass
from typing import Optional, Tuple

PLACEHOLDER = "{edition}"


@dataclass(frozen=True)
class PlatformConfig:
    """Path template and browser channels to probe on one platform."""
    name: str
    path_template: str
    # Highest priority first
    variants: Tuple[str, ...]

    @classmethod
    def detect(cls, platform: Optional[str] = None) -> "PlatformConfig":
        """Pick the configuration for ``platform`` (defaults to ``sys.platform``)."""
        platform = platform or sys.platform
        if platform.startswith(("win32", "cygwin")):
            return WINDOWS
        if platform == "darwin":
            return MACOS
        return LINUX


LINUX = PlatformConfig(
    name="linux",
    path_template=f"$HOME/.config/{PLACEHOLDER}/Default/Bookmarks",
    variants=(
        "google-chrome",
        "google-chrome-beta",
        "google-chrome-unstable",
        "chromium",
    ),
)

MACOS = PlatformConfig(
    name="macos",
    path_template=f"$HOME/Library/Application Support/Google/{PLACEHOLDER}/Default/Bookmarks",
    variants=("Chrome", "Chrome Beta", "Chromium", "Chrome Canary"),
)

WINDOWS = PlatformConfig(
    name="windows",
    path_template=f"%LOCALAPPDATA%\\Google\\{PLACEHOLDER}\\Default\\Bookmarks",
    variants=("Chrome", "Chrome Beta", "Chromium", "Chrome SxS"),
)
