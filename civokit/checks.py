"""Environment, quota and input validation checks."""

import math
import platform

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.serialization import load_ssh_public_key

from civokit.colors import green, orange, red

_KNOWN_OS = ("windows", "darwin", "linux")


def check_os() -> str:
    """Return 'windows', 'darwin' or 'linux', or '' for anything else."""
    system = platform.system().lower()
    if system in _KNOWN_OS:
        return system
    print(f"{system}.")
    return ""


def check_quota_percent(limit: int, usage: int) -> str:
    """Render 'usage/limit' coloured by how close usage is to the limit."""
    text = f"{usage}/{limit}"
    if limit == 0:
        return green(text)
    calculation = usage / limit * 100
    percent = math.copysign(math.floor(abs(calculation) + 0.5), calculation)
    if 80 <= percent < 100:
        return orange(text)
    if percent == 100:
        return red(text)
    return green(text)


def valid_name_length(name: str) -> bool:
    """Return True when the name is longer than 63 bytes."""
    return len(name.encode("utf-8")) > 63


def can_manage_volume(volume) -> bool:
    """Return True when the volume is not attached to a cluster."""
    return not volume.cluster_id


def validate_ssh_key(key) -> None:
    """Check that *key* holds an authorized_keys style public key.

    Raises ValueError when no valid key is found.
    """
    text = key.decode("utf-8", errors="replace") if isinstance(key, (bytes, bytearray)) else key
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        fields = line.split()
        for kind, blob in zip(fields, fields[1:]):
            try:
                load_ssh_public_key(f"{kind} {blob}".encode("ascii", errors="replace"))
            except (ValueError, UnsupportedAlgorithm):
                continue
            return
    raise ValueError("ssh: no key found")