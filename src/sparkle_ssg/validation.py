"""
Input validation for generator adapters.

Every caller-supplied string passes through these predicates before it
reaches process creation or a URL/network option. They are pure and
total: any input yields a bool, nothing raises.

The checks ban the narrow set of characters that carry shell or process
meaning rather than allow-listing a character set, since the invoker
never hands arguments to a shell interpreter.
"""

from __future__ import annotations

import ipaddress
import re
from urllib.parse import urlsplit

MAX_PATH_LENGTH = 4096
MAX_ARGUMENT_LENGTH = 1024
MAX_URL_LENGTH = 2048
MAX_INTERFACE_LENGTH = 253

MIN_PORT = 1
MAX_PORT = 65535

ALLOWED_URL_SCHEMES = frozenset({"http", "https"})

# Paths additionally reject globbing, history and home-expansion characters
PATH_METACHARS = re.compile(r"[;&|`$(){}\[\]<>!#*?~]")
ARGUMENT_METACHARS = re.compile(r"[;&|`$(){}\[\]<>]")

_SEGMENT_SPLIT = re.compile(r"[/\\]")

HOSTNAME_PATTERN = re.compile(
    r"[a-zA-Z0-9]([a-zA-Z0-9-]*[a-zA-Z0-9])?(\.[a-zA-Z0-9]([a-zA-Z0-9-]*[a-zA-Z0-9])?)*"
)
IPV4_PATTERN = re.compile(r"([0-9]{1,3}\.){3}[0-9]{1,3}")
IPV6_PATTERN = re.compile(r"[a-fA-F0-9:]+")


def is_valid_path(path: object) -> bool:
    """Return True if ``path`` is safe to use as a filesystem path.

    Rejects empty and overlong strings, NUL bytes and shell
    metacharacters, then walks the segments with a depth counter and
    rejects the path as soon as a ``..`` would climb above the root it
    started from. Absolute paths are accepted.
    """
    if not isinstance(path, str):
        return False
    if not path or len(path) > MAX_PATH_LENGTH:
        return False
    if "\0" in path:
        return False
    if PATH_METACHARS.search(path):
        return False

    depth = 0
    for segment in _SEGMENT_SPLIT.split(path):
        if segment == "..":
            depth -= 1
            if depth < 0:
                return False
        elif segment not in (".", ""):
            depth += 1
    return True


def is_valid_argument(arg: object) -> bool:
    """Return True if ``arg`` is safe to pass as a single process argument.

    ``! # * ? ~`` are allowed here; generators use them in flags and
    file names, and no shell ever sees the argument vector.
    """
    if not isinstance(arg, str):
        return False
    if len(arg) > MAX_ARGUMENT_LENGTH:
        return False
    if "\0" in arg:
        return False
    return ARGUMENT_METACHARS.search(arg) is None


def is_valid_url(url: object) -> bool:
    """Return True for a well-formed http(s) URL with a valid host.

    The host must be a hostname, an IPv4 address, or a bracketed IPv6
    address.
    """
    if not isinstance(url, str):
        return False
    if len(url) > MAX_URL_LENGTH:
        return False

    try:
        parsed = urlsplit(url)
        # .port raises ValueError for non-numeric or out-of-range ports
        parsed.port
    except ValueError:
        return False

    if parsed.scheme.lower() not in ALLOWED_URL_SCHEMES:
        return False
    return _is_valid_host(parsed.hostname, bracketed="[" in parsed.netloc)


def _is_valid_host(host: str | None, bracketed: bool) -> bool:
    if not host:
        return False
    if bracketed:
        try:
            ipaddress.ip_address(host)
        except ValueError:
            return False
        return True
    return HOSTNAME_PATTERN.fullmatch(host) is not None or IPV4_PATTERN.fullmatch(host) is not None


def is_valid_port(port: object) -> bool:
    """Return True for an ``int`` in [1, 65535]. ``bool`` is not a port."""
    if isinstance(port, bool) or not isinstance(port, int):
        return False
    return MIN_PORT <= port <= MAX_PORT


def is_valid_interface(iface: object) -> bool:
    """Return True for localhost, a hostname, an IPv4 or IPv6 address."""
    if not isinstance(iface, str):
        return False
    if len(iface) > MAX_INTERFACE_LENGTH:
        return False

    return (
        iface == "localhost"
        or HOSTNAME_PATTERN.fullmatch(iface) is not None
        or IPV4_PATTERN.fullmatch(iface) is not None
        or IPV6_PATTERN.fullmatch(iface) is not None
    )


def is_valid_binary(binary: object, *, strict: bool = True) -> bool:
    """Return True if ``binary`` names an executable on the search path.

    Path separators are always rejected so a caller can never point the
    invoker at an arbitrary file. ``strict`` also applies the argument
    character ban and rejects whitespace.
    """
    if not isinstance(binary, str) or not binary:
        return False
    if "/" in binary or "\\" in binary:
        return False
    if strict:
        if not is_valid_argument(binary):
            return False
        if any(ch.isspace() for ch in binary):
            return False
    return True


def _normalize(path: str) -> str:
    normalized = path.replace("\\", "/")
    normalized = re.sub(r"/+", "/", normalized)
    normalized = re.sub(r"/\.\Z", "", normalized)
    return normalized.replace("/./", "/")


def _collapse(path: str) -> list[str]:
    """Lexically resolve ``.`` and ``..`` segments without touching disk."""
    parts: list[str] = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if parts:
                parts.pop()
            continue
        parts.append(segment)
    return parts


def sanitize_path(base_path: str, user_path: object, *, confine: bool = False) -> str | None:
    """Resolve ``user_path`` against ``base_path`` and normalize separators.

    Returns None when ``user_path`` fails ``is_valid_path``. Absolute user
    paths are kept as-is. The traversal check runs on ``user_path`` only;
    pass ``confine=True`` to also require the joined result to stay under
    ``base_path`` once ``.`` and ``..`` are collapsed. A confined result is
    absolute exactly when ``base_path`` is.
    """
    if not isinstance(user_path, str) or not is_valid_path(user_path):
        return None

    if user_path.startswith("/"):
        resolved = user_path
    else:
        resolved = f"{base_path}/{user_path}"

    normalized = _normalize(resolved)

    if confine:
        base = _normalize(base_path)
        if normalized.startswith("/") != base.startswith("/"):
            return None
        base_parts = _collapse(base)
        result_parts = _collapse(normalized)
        if result_parts[: len(base_parts)] != base_parts:
            return None

    return normalized


def command_rejection(
    binary: object,
    args: object,
    cwd: object = None,
    *,
    strict_binary: bool = True,
) -> str | None:
    """Return why a command must not be spawned, or None if it may be.

    Checks run in a fixed order (binary, each argument, working
    directory) and only the first failure is reported.
    """
    if not isinstance(binary, str) or not binary or "/" in binary or "\\" in binary:
        return "Invalid binary path"
    if strict_binary and not is_valid_binary(binary, strict=True):
        return "Invalid binary name"

    if isinstance(args, (str, bytes)) or not isinstance(args, (list, tuple)):
        return "Invalid argument list"
    for arg in args:
        if not is_valid_argument(arg):
            return f"Invalid argument: {arg}"

    if cwd is not None and not is_valid_path(cwd):
        return "Invalid working directory"

    return None
