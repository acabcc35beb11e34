"""Map text handling: splitting map strings into rows and the built-in map."""

from __future__ import annotations

DEFAULT_MAP = (
    "1111111111111111 1000110110111101 1000000100000001 1000010000100001 "
    "1000100010000001 1000000001000001 1001101110010001 1111111111111111"
)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in s.split(sep) if word]


def default_map() -> list[str]:
    """Return the rows of the built-in map."""
    return split(DEFAULT_MAP, " ")