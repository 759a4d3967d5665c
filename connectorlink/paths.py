"""Path joining and file and directory helpers."""

from __future__ import annotations

import os
import stat
from typing import Any, Callable, Iterable

FilterFunc = Callable[[str, Any], bool]


def path_join(parts: Iterable[str]) -> str:
    """Join path parts with the platform separator.

    At least one part is required; raises ValueError otherwise.
    """
    items = list(parts)
    if not items:
        raise ValueError("at least one path part is required")
    return os.sep.join(items)


def _default_filter(name: str, data: Any) -> bool:
    """Accept every entry that is not hidden."""
    return bool(name) and not name.startswith(".")


def list_directory(
    path: str | os.PathLike[str],
    filter_op: FilterFunc | None = None,
    data: Any = None,
) -> list[str]:
    """Return the names in a directory accepted by filter_op(name, data).

    Without a filter, hidden entries (starting with '.') are left out.
    Raises OSError if the directory cannot be read.
    """
    accept = filter_op if filter_op is not None else _default_filter
    with os.scandir(path) as entries:
        return [entry.name for entry in entries if accept(entry.name, data)]


def _has_mode(path: str | os.PathLike[str], test: Callable[[int], bool]) -> bool:
    if path is None:
        return False
    try:
        mode = os.stat(path).st_mode
    except (OSError, ValueError):
        return False
    return test(mode)


def is_directory(path: str | os.PathLike[str]) -> bool:
    return _has_mode(path, stat.S_ISDIR)


def is_unix_socket(path: str | os.PathLike[str]) -> bool:
    if os.name == "nt":
        return False
    return _has_mode(path, stat.S_ISSOCK)


def is_file(path: str | os.PathLike[str]) -> bool:
    return _has_mode(path, stat.S_ISREG)


def make_directory(path: str | os.PathLike[str]) -> None:
    """Create a directory open to every user; raises OSError on failure."""
    if path is None:
        raise ValueError("path is required")
    os.mkdir(path)
    if os.name != "nt":
        os.chmod(path, 0o777)


def remove_directory(path: str | os.PathLike[str]) -> None:
    """Remove an empty directory; raises OSError on failure."""
    os.rmdir(path)


def remove_file(path: str | os.PathLike[str]) -> None:
    """Remove a file; raises OSError on failure."""
    os.unlink(path)