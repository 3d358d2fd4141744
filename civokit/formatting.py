"""Small data-formatting helpers."""

import math
import time
from dataclasses import dataclass


@dataclass
class ObjectList:
    """A pair of identifier and name."""

    id: str = ""
    name: str = ""


def bool_to_yes_no(d: bool) -> str:
    """Return 'Yes' or 'No' for a boolean."""
    if d:
        return "Yes"
    return "No"


def get_string_map(s: str) -> dict[str, str]:
    """Parse 'a:1,b:2,c:3' into a dict of stripped keys and values.

    Raises ValueError when an entry has no ':' separator.
    """
    result: dict[str, str] = {}
    for entry in s.split(","):
        tokens = entry.split(":")
        if len(tokens) < 2:
            raise ValueError(f"entry {entry!r} is not in key:value form")
        result[tokens[0].strip()] = tokens[1].strip()
    return result


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def start_time() -> float:
    """Return a monotonic timestamp to pass to track_time."""
    return time.monotonic()


def track_time(start: float) -> str:
    """Describe the time elapsed since *start* as 'M min S sec'."""
    elapsed = time.monotonic() - start
    return seconds_to_minutes(_round_half_away(elapsed))


def seconds_to_minutes(in_seconds: float) -> str:
    """Format a number of seconds as 'M min S sec'."""
    total = _round_half_away(in_seconds)
    minutes = math.trunc(total / 60)
    seconds = total - minutes * 60
    return f"{minutes} min {seconds} sec"