"""ANSI colour helpers for terminal output."""

COLOR_DEFAULT = "\x1b[39m"
COLOR_RED = "\x1b[91m"
COLOR_GREEN = "\x1b[32m"
COLOR_BLUE = "\x1b[94m"
COLOR_GRAY = "\x1b[90m"


def _paint(color: str, s: str) -> str:
    return f"{color}{s}{COLOR_DEFAULT}"


def red(s: str) -> str:
    """Wrap *s* in bright red, resetting to the default foreground after."""
    return _paint(COLOR_RED, s)


def green(s: str) -> str:
    """Wrap *s* in green, resetting to the default foreground after."""
    return _paint(COLOR_GREEN, s)


def blue(s: str) -> str:
    """Wrap *s* in bright blue, resetting to the default foreground after."""
    return _paint(COLOR_BLUE, s)


def gray(s: str) -> str:
    """Wrap *s* in gray, resetting to the default foreground after."""
    return _paint(COLOR_GRAY, s)