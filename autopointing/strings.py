"""Look-ups of a name within a list of names."""

from __future__ import annotations

from typing import Iterable


def find_string_list_id(name: str, names: Iterable[str]) -> int:
    """Return the position of ``name`` in ``names`` (exact match), or -1."""
    for index, candidate in enumerate(names):
        if candidate == name:
            return index
    return -1


def find_string_list_id_nocase(name: str, names: Iterable[str]) -> int:
    """Return the position of ``name`` in ``names`` ignoring case, or -1."""
    wanted = name.casefold()
    for index, candidate in enumerate(names):
        if candidate.casefold() == wanted:
            return index
    return -1