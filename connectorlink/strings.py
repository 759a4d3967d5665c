"""String helpers and a string-keyed hash map."""

from __future__ import annotations

_FNV_PARAMS = {
    64: (0xCBF29CE484222325, 0x100000001B3),
    32: (0x811C9DC5, 0x1000193),
}

DEFAULT_BUCKET_SIZE = 512


def memrchr(buffer: bytes, value: int) -> int | None:
    """Return the index of the last byte equal to value, or None."""
    index = bytes(buffer).rfind(bytes([value]))
    return None if index < 0 else index


def strndup(text: str, count: int) -> str:
    """Return at most the first count characters of text."""
    if count < 0:
        raise ValueError("count must not be negative")
    return text[:count]


def chomp(text: str, delim: str) -> tuple[str, int]:
    """Strip trailing delim characters; return the text and how many were removed."""
    if len(delim) != 1:
        raise ValueError("delim must be a single character")
    stripped = text.rstrip(delim)
    return stripped, len(text) - len(stripped)


def untrusted_strlen(buffer: bytes) -> int:
    """Return the position of the last NUL byte in an untrusted buffer.

    Raises ValueError if the buffer holds no NUL terminator.
    """
    found = memrchr(buffer, 0)
    if found is None:
        raise ValueError("buffer is not NUL terminated")
    return found


def fnv1a_hash(text: str, bits: int = 64) -> int:
    """Compute the FNV-1a hash of the UTF-8 encoding of text."""
    try:
        offset_basis, prime = _FNV_PARAMS[bits]
    except KeyError:
        raise ValueError(f"unsupported hash width: {bits}") from None
    mask = (1 << bits) - 1
    value = offset_basis
    for byte in text.encode("utf-8"):
        value ^= byte
        value = (value * prime) & mask
    return value


class StringMap:
    """A fixed-bucket hash map from strings to strings, keyed by FNV-1a."""

    def __init__(self, bucket_size: int = DEFAULT_BUCKET_SIZE, bits: int = 64) -> None:
        if bucket_size <= 0:
            raise ValueError("bucket_size must be positive")
        if bits not in _FNV_PARAMS:
            raise ValueError(f"unsupported hash width: {bits}")
        self._bits = bits
        self._buckets: list[list[tuple[str, str]]] = [[] for _ in range(bucket_size)]

    @property
    def bucket_size(self) -> int:
        return len(self._buckets)

    def _bucket(self, key: str) -> list[tuple[str, str]]:
        return self._buckets[fnv1a_hash(key, self._bits) % len(self._buckets)]

    def insert(self, key: str, value: str) -> None:
        """Store value under key, replacing any earlier value."""
        bucket = self._bucket(key)
        for position, (existing, _) in enumerate(bucket):
            if existing == key:
                bucket[position] = (key, value)
                return
        bucket.append((key, value))

    def search(self, key: str) -> str | None:
        """Return the value stored under key, or None."""
        return next((value for existing, value in self._bucket(key) if existing == key), None)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and any(existing == key for existing, _ in self._bucket(key))