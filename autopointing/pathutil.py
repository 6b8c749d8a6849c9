"""Pure string handling of file paths: parent lookup, joining and wildcard matching."""

from __future__ import annotations

from typing import Optional

_SEPARATORS = ("\\", "/")


def _char_at(text: str, index: int) -> str:
    """Return the character at ``index``, or '' past the end of ``text``."""
    return text[index] if 0 <= index < len(text) else ""


def base_directory(
    path: str, last: Optional[int] = None, strip_trailing: bool = True
) -> Optional[int]:
    """Return the index of the separator that ends the parent directory of ``path``.

    ``last`` limits the search to ``path[:last + 1]``; when omitted the whole
    string is searched. With ``strip_trailing`` a separator at ``last`` itself
    is skipped. When a drive colon is reached first, or no separator is found,
    ``last`` is returned unchanged. An empty ``path`` gives None.
    """
    if not path:
        return None

    pos = last if last is not None else len(path)

    if strip_trailing and _char_at(path, pos) in _SEPARATORS and _char_at(path, pos):
        pos -= 1

    while pos > 0:
        ch = _char_at(path, pos)
        if ch == ":":
            return last
        if ch in _SEPARATORS and ch:
            return pos
        pos -= 1

    return last


def to_absolute_path(current: str, path: str) -> str:
    """Resolve ``path`` against the directory ``current``.

    Leading ``./`` and ``../`` parts of ``path`` are folded into ``current``;
    a path that starts at the root keeps only the drive or host of
    ``current``; a path holding a drive colon is returned unchanged.
    """
    sep = "\\" if "\\" in current else "/"

    if path.startswith(sep):
        first = current.find(sep)
        if first < 0:
            raise ValueError(f"cannot find a root in {current!r}")
        if _char_at(current, first + 1) == sep:
            # scheme://host form
            host_end = current.find(sep, first + 3)
            if host_end >= 0:
                return current[:host_end] + path
            return current + path
        return current[:first] + path

    if ":" in path or path.startswith(sep * 2):
        return path

    end = len(current)
    if current and current[-1] in _SEPARATORS:
        end -= 1

    pos = 0
    while pos < len(path) and path[pos] == ".":
        if path[pos:pos + 3] in ("..\\", "../"):
            pos += 3
            end = _parent_end(current, end)
        elif path[pos:pos + 2] in (".\\", "./"):
            pos += 2
        elif path[pos:] == "..":
            pos += 2
            end = _parent_end(current, end)
        else:
            break

    return current[:end] + sep + path[pos:]


def _parent_end(current: str, end: int) -> int:
    found = base_directory(current, end)
    return 0 if found is None else found


def comp_path(path: Optional[str], ref: Optional[str]) -> bool:
    """Match ``path`` against ``ref`` ignoring case.

    ``ref`` may hold ``*`` (any run of characters) and ``?`` (any single
    character); backslash and slash are treated as the same separator.
    """
    if path is None or ref is None:
        return False
    return _match(path, 0, ref, 0)


def _match(path: str, pi: int, ref: str, ri: int) -> bool:
    while True:
        if ri >= len(ref):
            return pi >= len(path)

        if ref[ri] == "*":
            while ri < len(ref) and ref[ri] == "*":
                ri += 1
            if ri >= len(ref):
                return True
            return any(_match(path, start, ref, ri) for start in range(pi, len(path)))

        if pi >= len(path):
            return False

        p_ch = path[pi]
        r_ch = ref[ri]
        same = p_ch.lower() == r_ch.lower()
        both_separators = p_ch in _SEPARATORS and r_ch in _SEPARATORS
        if not (same or both_separators or r_ch == "?"):
            return False
        pi += 1
        ri += 1