"""Identifier to prose conversion."""

import re

_UPPERCASE = re.compile(r"([A-Z])")

ACCESSOR_MARKERS: tuple[str, ...] = ("get_", "set_")


def humanize(identifier: str) -> str:
    """Split an identifier on every capital letter and lower-case it.

    Each capital is treated on its own, so acronyms are not grouped:
    ``"UserName"`` becomes ``"user name"`` and ``"IsValidURL"`` becomes
    ``"is valid u r l"``.
    """
    return _UPPERCASE.sub(r" \1", identifier).strip().lower()


def is_accessor_name(name: str) -> bool:
    """True for compiler-style accessor names such as ``get_Count`` or ``set_Name``."""
    return any(marker in name for marker in ACCESSOR_MARKERS)
