# connectorlink

Building blocks for applications on the same machine. The applications find
each other through announcement directories, connect over loopback TCP or
unix sockets, and label their messages with 128-bit type identifiers.

## Modules

### `connectorlink.uuid`

- `ConnectorUuid` is a frozen, ordered dataclass holding four unsigned 32-bit
  `elements`. Building one with the wrong number of elements, or with an
  element out of range, raises `ValueError`. `ConnectorUuid.from_elements`
  builds one from any iterable. `str()` gives its text form.
- `compare_uuid(first, second)` returns `-1`, `0` or `1`. It compares the
  elements in order.
- `uuid_to_string(uuid)` formats a uuid as
  `00000000-00000000-00000000-00000000`, with lower-case hex digits.
- `uuid_from_string(text)` parses a uuid and ignores dashes. Digits past the
  32nd are ignored. When the string is short, the remaining elements are
  zero. A character that is not a hex digit raises `ValueError`.

### `connectorlink.strings`

- `memrchr(buffer, value)` returns the index of the last byte equal to
  `value`, or `None` if there is none.
- `strndup(text, count)` returns at most the first `count` characters. A
  negative `count` raises `ValueError`.
- `chomp(text, delim)` strips trailing `delim` characters. It returns
  `(stripped_text, number_removed)`.
- `untrusted_strlen(buffer)` returns the position of the last NUL byte. It
  raises `ValueError` if the buffer has no NUL byte.
- `fnv1a_hash(text, bits=64)` returns the FNV-1a hash of the UTF-8 encoding of
  `text`. `bits` must be 32 or 64.
- `StringMap(bucket_size=512, bits=64)` maps strings to strings. It hashes
  keys with FNV-1a into a fixed number of buckets. `insert(key, value)`
  replaces any earlier value for that key. `search(key)` returns the value or
  `None`. The map also supports `len()` and `in`.

### `connectorlink.message`

- `Message` is a dataclass with three fields: `context` (an integer connection
  id), `message_type` (a `ConnectorUuid`) and `payload` (a `str`).
  `message_length` is the payload length in UTF-8 bytes. `encoded_payload()`
  returns those bytes.
- `build_message(context, message_type, payload)` creates a `Message`. It
  raises `ValueError` if the type or payload is `None`. It raises `TypeError`
  if either has the wrong type.

### `connectorlink.paths`

- `path_join(parts)` joins the parts with the platform separator. It raises
  `ValueError` if there are no parts.
- `list_directory(path, filter_op=None, data=None)` returns the entry names
  for which `filter_op(name, data)` is true. With no filter, it leaves out
  hidden names, which are those starting with `.`.
- `is_directory`, `is_file` and `is_unix_socket` return `False` when the path
  cannot be read. On Windows, `is_unix_socket` always returns `False`.
- `make_directory(path)` creates a directory and makes it readable and
  writable by every user (mode `0o777`; this step is skipped on Windows).
  `remove_directory(path)` and `remove_file(path)` remove paths. All three
  raise `OSError` on failure.

### `connectorlink.connection_directory`

- `default_unix_directory()` returns `/tmp/substanceconnectoropenunix`. On
  Windows it returns `None`.
- `default_tcp_directory()` returns `/tmp/substanceconnectoropentcp`. On
  Windows it returns `%APPDATA%\substanceconnectoropentcp`.
- `ensure_default_unix_directory(directory=None)` and
  `ensure_default_tcp_directory(directory=None)` create the directory if it is
  missing and return its path. They raise `NotADirectoryError` if the path
  still is not a directory afterwards.
- `commit_open_tcp_port(port, directory=None)` announces an open port. It
  writes an empty file named after the port and returns that file's path.
- `remove_open_tcp_port(port, directory=None)` deletes the announcement file.
  It raises `FileNotFoundError` if there is none.

### `connectorlink.network`

- `open_tcp(port=0, directory=None)` listens on `127.0.0.1` with a backlog
  of 10. It announces the port in the TCP directory and returns
  `(socket, bound_port)`. Port `0` lets the system choose a port. The
  announcement is best effort: if the file cannot be written, the listener is
  still returned.
- `connect_tcp(port)` connects to a loopback listener and returns the socket.
- Both functions raise `OpenConnectionError`, a subclass of `OSError`, on
  failure.

### `connectorlink.autoconnect`

- `broadcast_connect(directory, test_file_type, connect_path)` calls
  `connect_path` on every visible entry of `directory` that passes
  `test_file_type`. If a connection raises `OSError`, the entry is treated as
  stale and removed. The function returns the results of the connections
  that succeeded, leaving out `None` results.
- `tcp_port_is_free(port, open_ports=())` is true when the port is in
  `0..65535` and not in `open_ports`.
- `broadcast_connect_tcp(connect=connect_tcp, open_ports=(), directory=None)`
  reads the port number from each announcement file name. It connects to
  every free port. Ports listed in `open_ports` are skipped and their files
  are kept.
- `broadcast_connect_unix(connect=None, directory=None)` connects to every
  unix socket in the socket directory. It raises `NotImplementedError` on
  Windows.

## Example

```python
import tempfile

from connectorlink.autoconnect import broadcast_connect_tcp
from connectorlink.message import build_message
from connectorlink.network import open_tcp
from connectorlink.uuid import uuid_from_string

kind = uuid_from_string("12345678-9abcdef0-0fedcba9-87654321")
message = build_message(1, kind, "hello")
print(message.message_length, str(message.message_type))

with tempfile.TemporaryDirectory() as announce_dir:
    listener, port = open_tcp(0, announce_dir)
    clients = broadcast_connect_tcp(directory=announce_dir)
    print(port, len(clients))
    for client in clients:
        client.close()
    listener.close()
```

## What it does not do

The package supplies the pieces only. It does not:

- run background threads that read from or write to connections;
- keep inbound or outbound message queues;
- encode messages for the wire or read them back;
- dispatch received messages to callbacks;
- accept incoming connections on the listener that `open_tcp` returns. The
  caller does that with the socket.

## Tests

```
pip install -e .[test]
pytest
```