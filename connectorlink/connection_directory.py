"""Default directories where open connector endpoints announce themselves."""

from __future__ import annotations

import os
from pathlib import Path

from connectorlink.paths import is_directory, is_file, make_directory, path_join, remove_file

UNIX_DIRECTORY_BASE = "/tmp"
UNIX_SUBDIRECTORY = "substanceconnectoropenunix"
TCP_DIRECTORY_BASE = "/tmp"
TCP_SUBDIRECTORY = "substanceconnectoropentcp"


def default_unix_directory() -> str | None:
    """Return the directory holding unix sockets, or None where unsupported."""
    if os.name == "nt":
        return None
    return f"{UNIX_DIRECTORY_BASE}/{UNIX_SUBDIRECTORY}"


def default_tcp_directory() -> str:
    """Return the directory holding one empty file per open TCP port.

    On Windows this lives in the roaming application data folder.
    """
    if os.name == "nt":
        appdata = os.environ.get("APPDATA")
        if not appdata:
            raise OSError("the roaming application data folder is unknown")
        return path_join([appdata, TCP_SUBDIRECTORY])
    return f"{TCP_DIRECTORY_BASE}/{TCP_SUBDIRECTORY}"


def _ensure_directory(path: str | os.PathLike[str] | None) -> str:
    if path is None:
        raise OSError("no default directory on this platform")
    try:
        make_directory(path)
    except OSError:
        # The directory usually exists already; what matters is the check below.
        pass
    if not is_directory(path):
        raise NotADirectoryError(f"not a directory: {os.fspath(path)}")
    return os.fspath(path)


def ensure_default_unix_directory(directory: str | os.PathLike[str] | None = None) -> str:
    """Create the unix socket directory if needed and return its path."""
    return _ensure_directory(directory if directory is not None else default_unix_directory())


def ensure_default_tcp_directory(directory: str | os.PathLike[str] | None = None) -> str:
    """Create the TCP port directory if needed and return its path."""
    return _ensure_directory(directory if directory is not None else default_tcp_directory())


def _tcp_port_path(port: int, directory: str | os.PathLike[str] | None) -> str:
    base = os.fspath(directory) if directory is not None else default_tcp_directory()
    return path_join([base, str(port)])


def commit_open_tcp_port(port: int, directory: str | os.PathLike[str] | None = None) -> str:
    """Record port as open by creating an empty file named after it.

    Returns the path of the file; raises OSError if it cannot be written.
    """
    location = _tcp_port_path(port, directory)
    Path(location).write_bytes(b"")
    return location


def remove_open_tcp_port(port: int, directory: str | os.PathLike[str] | None = None) -> None:
    """Delete the file recording port; raise FileNotFoundError if there is none."""
    location = _tcp_port_path(port, directory)
    if not is_file(location):
        raise FileNotFoundError(f"no open port file: {location}")
    remove_file(location)