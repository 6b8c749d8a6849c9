"""File system helpers around the running program's location."""

from __future__ import annotations

import os
import shutil
import sys

from .pathutil import base_directory, to_absolute_path


def module_file_path() -> str:
    """Return the absolute path of the running program."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    return os.path.abspath(program)


def module_attachment_file_path(file_name: str) -> str:
    """Resolve ``file_name`` against the directory holding the running program."""
    program = module_file_path()
    end = base_directory(program)
    if end is None:
        raise FileNotFoundError(f"cannot find the directory of {program!r}")
    return to_absolute_path(program[:end], file_name)


def is_directory(path: str) -> bool:
    """Return True when ``path`` names an existing directory."""
    return os.path.isdir(path)


def copy_file(src: str, dst: str, fail_if_exists: bool) -> None:
    """Copy ``src`` to ``dst``; with ``fail_if_exists`` an existing ``dst`` is an error."""
    if fail_if_exists and os.path.exists(dst):
        raise FileExistsError(dst)
    shutil.copy2(src, dst)


def delete_file(path: str) -> None:
    """Delete the file ``path``."""
    os.remove(path)


def move_file(src: str, dst: str) -> None:
    """Move ``src`` to ``dst``; an existing ``dst`` is an error."""
    if os.path.exists(dst):
        raise FileExistsError(dst)
    shutil.move(src, dst)