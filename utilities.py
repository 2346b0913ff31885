# utilities.py
from __future__ import annotations

import re

# ────────────────────────────────────────────────────────────────────────
#  0. Regex & constants
# ────────────────────────────────────────────────────────────────────────

GARBLE = "-"
KEY_EXAMPLE = "9-1,24,6-23"

_int_re = re.compile(r"^\d+$")

KeyParts = tuple[int, tuple[int, int, int], int, int]


class KeyFormatError(ValueError):
    """A key string that is not of the form S-A,B,C-PM."""


def _to_int(field: str, what: str) -> int:
    field = field.strip()
    if not _int_re.match(field):
        raise KeyFormatError(f"{what} {field!r} is not a number (key form {KEY_EXAMPLE})")
    return int(field)


# ────────────────────────────────────────────────────────────────────────
#  1. Key strings
# ────────────────────────────────────────────────────────────────────────


def parse_key(key: str) -> KeyParts:
    """Split a key such as ``9-1,24,6-23`` into its numbers.

    Returns ``(sixes, (tw1, tw2, tw3), fast, middle)``. The three twenties
    positions belong to switches #1, #2 and #3 whatever their roles; the
    last field is two digits, the fast switch number then the middle one.
    Only the shape is checked here; ranges are the machine's business.
    """
    parts = key.strip().split("-")
    if len(parts) != 3:
        raise KeyFormatError(f"key {key!r} was not of the form {KEY_EXAMPLE}")
    sixes, twenties, roles = parts

    tparts = twenties.split(",")
    if len(tparts) != 3:
        raise KeyFormatError(f"key {key!r} needs three twenties positions")

    six_pos = _to_int(sixes, "sixes position")
    tw_pos = tuple(_to_int(p, "twenties position") for p in tparts)

    roles = roles.strip()
    if len(roles) != 2:
        raise KeyFormatError(f"switch roles {roles!r} must be two digits")
    fast = _to_int(roles[0], "fast switch")
    middle = _to_int(roles[1], "middle switch")
    return six_pos, tw_pos, fast, middle


def format_key(sixes: int, twenties: tuple[int, int, int], fast: int, middle: int) -> str:
    """Inverse of parse_key."""
    return f"{sixes}-{','.join(str(p) for p in twenties)}-{fast}{middle}"


# ────────────────────────────────────────────────────────────────────────
#  2. Text preprocessing
# ────────────────────────────────────────────────────────────────────────


def preprocess_message(msg: str, keep: str = GARBLE) -> str:
    """Upper-case and drop everything that is not A-Z or in *keep*."""
    text = msg.upper()
    return "".join(ch for ch in text if ("A" <= ch <= "Z") or ch in keep)


def group(text: str, size: int = 5) -> str:
    """Break *text* into space-separated blocks of *size*; 0 leaves it alone."""
    if size <= 0:
        return text
    return " ".join(text[i : i + size] for i in range(0, len(text), size))


__all__ = [
    "GARBLE",
    "KeyFormatError",
    "parse_key",
    "format_key",
    "preprocess_message",
    "group",
]
