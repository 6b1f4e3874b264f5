"""Category resolution with a designated default.

Category keys arrive from request bodies and query strings and are never
validated at the boundary.  A key that is missing, empty or simply not
one of the table's entries resolves to the table's default record instead
of raising.  Keys are matched exactly: no trimming and no case folding.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import TypeVar

R = TypeVar("R")
E = TypeVar("E", bound=StrEnum)


def resolve(table: Mapping[str, R], key: str | None, default_key: str) -> R:
    """Return ``table[key]``, or ``table[default_key]`` when *key* is not present.

    Only a *default_key* that is itself missing raises (``KeyError``);
    loaded tables are checked for that at startup.
    """
    if key is not None and key in table:
        return table[key]
    return table[default_key]


def parse_category(enum_cls: type[E], key: str | None) -> E | None:
    """Parse an untrusted key into a member of *enum_cls*, or ``None``."""
    if key is None:
        return None
    try:
        return enum_cls(key)
    except ValueError:
        return None
