"""Terminal colours and logging setup for diagnostics on stderr."""

import logging
import sys


class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    GREY = "\033[90m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"

    @staticmethod
    def background(color: str) -> str:
        """Convert foreground color to background color."""
        return color.replace("[3", "[4", 1)

    @staticmethod
    def enabled(stream=None) -> bool:
        """Whether ``stream`` (stderr by default) is a terminal."""
        stream = stream or sys.stderr
        return hasattr(stream, "isatty") and stream.isatty()


class CustomFormatter(logging.Formatter):
    """Formatter that prefixes each record with a short level tag."""

    TAGS = {
        logging.DEBUG: ("DEBG", Colors.CYAN),
        logging.INFO: ("INFO", Colors.GREEN),
        logging.WARNING: ("WARN", Colors.YELLOW),
        logging.ERROR: ("ERRR", Colors.RED),
        logging.CRITICAL: ("CRIT", Colors.background(Colors.RED)),
    }

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.FORMATS = {}
        for level, (tag, color) in self.TAGS.items():
            if use_color:
                self.FORMATS[level] = (
                    f"{Colors.GREY}%(asctime)s{Colors.RESET} "
                    f"{Colors.BOLD}{color}{tag}{Colors.RESET} %(message)s"
                )
            else:
                self.FORMATS[level] = f"%(asctime)s {tag} %(message)s"

    def format(self, record: logging.LogRecord) -> str:
        log_fmt = self.FORMATS.get(record.levelno, "%(asctime)s %(message)s")
        formatter = logging.Formatter(log_fmt, datefmt="%H:%M")
        return formatter.format(record)


def setup_logging(verbose: bool = False, silent: bool = False):
    """Configure logging to stderr with custom formatting."""
    if silent:
        logging.disable(logging.CRITICAL)
        return
    logging.disable(logging.NOTSET)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(CustomFormatter(use_color=Colors.enabled(sys.stderr)))

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, handlers=[handler], force=True)


def error_line(message: str) -> str:
    """Format a final error message for stderr."""
    if Colors.enabled(sys.stderr):
        return f"{Colors.RED}Error:{Colors.RESET} {message}"
    return f"Error: {message}"
