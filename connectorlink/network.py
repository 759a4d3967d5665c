"""Opening and connecting local TCP endpoints."""

from __future__ import annotations

import contextlib
import os
import socket

from connectorlink.connection_directory import commit_open_tcp_port, ensure_default_tcp_directory

LOOPBACK = "127.0.0.1"
SOCKET_BACKLOG = 10


class OpenConnectionError(OSError):
    """Raised when a connection cannot be opened or established."""


def open_tcp(
    port: int = 0, directory: str | os.PathLike[str] | None = None
) -> tuple[socket.socket, int]:
    """Listen on the loopback address at port and announce it in directory.

    Passing 0 as the port number lets the system choose a free one.
    Returns the listening socket and the number it is bound to.
    """
    try:
        announce_dir = ensure_default_tcp_directory(directory)
    except OSError as error:
        raise OpenConnectionError(f"cannot prepare port directory: {error}") from error

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as error:
        raise OpenConnectionError(f"cannot create socket: {error}") from error

    try:
        sock.bind((LOOPBACK, port))
        bound_port = sock.getsockname()[1]
        sock.listen(SOCKET_BACKLOG)
    except OSError as error:
        sock.close()
        raise OpenConnectionError(f"cannot listen on port {port}: {error}") from error

    # Announcing the listener is best effort; it works without it.
    with contextlib.suppress(OSError):
        commit_open_tcp_port(bound_port, announce_dir)

    return sock, bound_port


def connect_tcp(port: int) -> socket.socket:
    """Connect to a listener on the loopback address at port."""
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as error:
        raise OpenConnectionError(f"cannot create socket: {error}") from error
    try:
        sock.connect((LOOPBACK, port))
    except (OSError, OverflowError) as error:
        sock.close()
        raise OpenConnectionError(f"cannot connect to port {port}: {error}") from error
    return sock