"""Interactive yes/no confirmation prompts."""

import sys
from typing import Optional, TextIO

from civokit.colors import error, green, yellow_confirm

_ACCEPTED = ("y", "ye", "yes")


def _read_line(stream: TextIO) -> str:
    line = stream.readline()
    if not line.endswith("\n"):
        raise EOFError("end of input reached before a full line was read")
    return line.rstrip("\r\n")


def read_user_input(stream: TextIO, message: str) -> str:
    """Prompt on stderr and return the user's answer, lower-cased.

    Raises EOFError when the input ends before a newline.
    """
    yellow_confirm("Are you sure you want to " + message + " (y/N) ? ")
    return _read_line(stream).lower()


def ask_for_confirm(message: str, stream: Optional[TextIO] = None) -> None:
    """Ask the user to confirm *message*.

    Raises ValueError unless the answer is 'y', 'ye' or 'yes'.
    """
    try:
        answer = read_user_input(sys.stdin if stream is None else stream, message)
    except (EOFError, OSError) as exc:
        error("Unable to parse users input: %s", exc)
        answer = ""
    if answer not in _ACCEPTED:
        raise ValueError("invalid user input")


def _confirmed(message: str, ignoring_confirmed: bool, stream: Optional[TextIO]) -> bool:
    if ignoring_confirmed:
        return True
    try:
        ask_for_confirm(message, stream)
    except ValueError:
        return False
    return True


def user_confirmed_deletion(
    resource_type: str,
    ignoring_confirmed: bool,
    object_to_delete: str,
    stream: Optional[TextIO] = None,
) -> bool:
    """Ask the user to confirm deleting a resource."""
    message = f"delete the {green(object_to_delete)} {resource_type}"
    return _confirmed(message, ignoring_confirmed, stream)


def user_confirmed_unassign(
    resource_type: str,
    ignoring_confirmed: bool,
    object_to_delete: str,
    stream: Optional[TextIO] = None,
) -> bool:
    """Ask the user to confirm unassigning a resource."""
    message = f"unassign {green(object_to_delete)} {resource_type} from Civo resource"
    return _confirmed(message, ignoring_confirmed, stream)


def user_confirmed_overwrite(
    resource_type: str,
    ignoring_confirmed: bool,
    stream: Optional[TextIO] = None,
) -> bool:
    """Ask the user to confirm overwriting a configuration."""
    return _confirmed(f"overwrite the {resource_type}", ignoring_confirmed, stream)


def user_accepts(stream: TextIO) -> bool:
    """Read one line and return True if it is an exact yes answer.

    The answer is compared case-sensitively. Raises EOFError when the input
    ends before a newline and ValueError for any other answer.
    """
    answer = _read_line(stream)
    if answer not in _ACCEPTED:
        raise ValueError("invalid user input")
    return True