"""Finding and connecting to other endpoints announced on this machine."""

from __future__ import annotations

import contextlib
import os
import re
import socket
from typing import Any, Callable, Collection, Iterable

from connectorlink.connection_directory import default_tcp_directory, default_unix_directory
from connectorlink.network import OpenConnectionError, connect_tcp
from connectorlink.paths import is_directory, is_file, is_unix_socket, list_directory, path_join, remove_file

_MAX_PORT = 65535
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def broadcast_connect(
    directory: str | os.PathLike[str],
    test_file_type: Callable[[str], bool],
    connect_path: Callable[[str], Any],
) -> list[Any]:
    """Try connect_path on every visible entry of directory passing test_file_type.

    An entry whose connection fails with OSError is taken to be stale and
    removed. Returns the non-None results of the successful connections.
    """
    if not is_directory(directory):
        raise NotADirectoryError(f"not a directory: {os.fspath(directory)}")

    connected = []
    for name in list_directory(directory):
        filepath = path_join([os.fspath(directory), name])
        if not test_file_type(filepath):
            continue
        try:
            result = connect_path(filepath)
        except OSError:
            with contextlib.suppress(OSError):
                remove_file(filepath)
            continue
        if result is not None:
            connected.append(result)
    return connected


def tcp_port_is_free(port: int, open_ports: Iterable[int] = ()) -> bool:
    """Whether port is a valid port not already used by an open connection."""
    return 0 <= port <= _MAX_PORT and port not in set(open_ports)


def _port_from_path(path: str) -> int:
    """Read the leading integer of the file name, 0 when there is none."""
    match = _LEADING_INT.match(os.path.basename(path))
    return int(match.group(1)) if match else 0


def broadcast_connect_tcp(
    connect: Callable[[int], Any] = connect_tcp,
    open_ports: Collection[int] = (),
    directory: str | os.PathLike[str] | None = None,
) -> list[Any]:
    """Connect to every announced TCP port not already in open_ports."""
    taken = set(open_ports)

    def connect_path(path: str) -> Any:
        port = _port_from_path(path)
        if not tcp_port_is_free(port, taken):
            # Ports already in use are skipped, not treated as stale.
            return None
        return connect(port)

    target = directory if directory is not None else default_tcp_directory()
    return broadcast_connect(target, is_file, connect_path)


def _connect_unix(path: str) -> socket.socket:
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        sock.connect(path)
    except OSError as error:
        sock.close()
        raise OpenConnectionError(f"cannot connect to {path}: {error}") from error
    return sock


def broadcast_connect_unix(
    connect: Callable[[str], Any] | None = None,
    directory: str | os.PathLike[str] | None = None,
) -> list[Any]:
    """Connect to every unix socket in the socket directory."""
    if os.name == "nt":
        raise NotImplementedError("unix sockets are not supported on this platform")
    target = directory if directory is not None else default_unix_directory()
    return broadcast_connect(target, is_unix_socket, connect if connect is not None else _connect_unix)