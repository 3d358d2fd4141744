"""Terminal colouring helpers and stderr message printers."""

import sys

_RESET = "\x1b[0m"

_GREEN = "32"
_YELLOW = "33"
_BLUE = "34"
_MAGENTA = "35"
_RED = "31"
_WARN = "1;33"


def _render(code: str, value: str) -> str:
    return f"\x1b[{code}m{value}{_RESET}"


def _format(msg: str, args: tuple) -> str:
    return msg % args if args else msg


def green(value: str) -> str:
    """Return *value* wrapped in green ANSI codes."""
    return _render(_GREEN, value)


def yellow(value: str) -> str:
    """Return *value* wrapped in yellow ANSI codes."""
    return _render(_YELLOW, value)


def orange(value: str) -> str:
    """Return *value* in the closest terminal colour to orange (yellow)."""
    return _render(_YELLOW, value)


def blue(value: str) -> str:
    """Return *value* wrapped in blue ANSI codes."""
    return _render(_BLUE, value)


def magenta(value: str) -> str:
    """Return *value* wrapped in magenta ANSI codes."""
    return _render(_MAGENTA, value)


def red(value: str) -> str:
    """Return *value* wrapped in red ANSI codes."""
    return _render(_RED, value)


def error(msg: str, *args) -> None:
    """Print an error line to stderr."""
    print(f"{red('Error')}: {_format(msg, args)}", file=sys.stderr)


def info(msg: str, *args) -> None:
    """Print an informational line to stderr."""
    print(f"{blue('Info')}: {_format(msg, args)}", file=sys.stderr)


def warning(msg: str, *args) -> None:
    """Print a warning line to stderr."""
    print(f"{yellow('Warning')}: {_format(msg, args)}", file=sys.stderr)


def yellow_confirm(msg: str, *args) -> None:
    """Print a warning prompt to stderr without a trailing newline."""
    sys.stderr.write(f"{_render(_WARN, 'Warning')}: {_format(msg, args)}")
    sys.stderr.flush()


def red_confirm(msg: str, *args) -> None:
    """Print an important notice to stderr without a trailing newline."""
    sys.stderr.write(f"{red('IMPORTANT')}: {_format(msg, args)}")
    sys.stderr.flush()


_STATUS_COLORS = {
    "ACTIVE": green,
    "SHUTOFF": red,
    "REBOOTING": yellow,
    "BUILDING": yellow,
    "INSTANCE-CREATE": blue,
    "INSTALLING": blue,
    "SCALING": magenta,
    "STOPPING": yellow,
}


def color_status(status: str) -> str:
    """Colour an instance or cluster status; unknown ones become a red 'Unknown'."""
    painter = _STATUS_COLORS.get(status)
    if painter is None:
        return red("Unknown")
    return painter(status)