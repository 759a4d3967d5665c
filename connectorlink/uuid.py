"""Connector UUID values: ordering and string conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

_ELEMENT_COUNT = 4
_ELEMENT_DIGITS = 8
_ELEMENT_MAX = 0xFFFFFFFF


@dataclass(frozen=True, order=True)
class ConnectorUuid:
    """A 128-bit identifier made of four unsigned 32-bit elements."""

    elements: tuple[int, int, int, int] = (0, 0, 0, 0)

    def __post_init__(self) -> None:
        elements = tuple(self.elements)
        if len(elements) != _ELEMENT_COUNT:
            raise ValueError(f"a uuid has {_ELEMENT_COUNT} elements, got {len(elements)}")
        for element in elements:
            if not isinstance(element, int) or not 0 <= element <= _ELEMENT_MAX:
                raise ValueError(f"uuid element out of range: {element!r}")
        object.__setattr__(self, "elements", elements)

    @classmethod
    def from_elements(cls, elements: Iterable[int]) -> "ConnectorUuid":
        return cls(tuple(elements))

    def __str__(self) -> str:
        return uuid_to_string(self)


def compare_uuid(first: ConnectorUuid, second: ConnectorUuid) -> int:
    """Return -1, 0 or 1 comparing the elements in order."""
    for left, right in zip(first.elements, second.elements):
        if left < right:
            return -1
        if left > right:
            return 1
    return 0


def uuid_to_string(uuid: ConnectorUuid) -> str:
    """Format as four dash-separated groups of eight hex digits."""
    return "-".join(f"{element:08x}" for element in uuid.elements)


def uuid_from_string(text: str) -> ConnectorUuid:
    """Parse a uuid string, ignoring dashes.

    Characters beyond the 32 hex digits are ignored; a short string yields
    whatever digits it holds, with the remaining elements left at zero.
    """
    elements = [0] * _ELEMENT_COUNT
    digits = [char for char in text if char != "-"][: _ELEMENT_COUNT * _ELEMENT_DIGITS]
    for position, char in enumerate(digits):
        try:
            nibble = int(char, 16)
        except ValueError:
            raise ValueError(f"invalid hex digit in uuid string: {char!r}") from None
        slot = position // _ELEMENT_DIGITS
        elements[slot] = (elements[slot] << 4) | nibble
    return ConnectorUuid(tuple(elements))