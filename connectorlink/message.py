"""Messages exchanged between connector endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from connectorlink.uuid import ConnectorUuid


@dataclass
class Message:
    """A message bound to a connection context, typed by a uuid."""

    context: int
    message_type: ConnectorUuid
    payload: str

    @property
    def message_length(self) -> int:
        """Length of the encoded payload in bytes."""
        return len(self.payload.encode("utf-8"))

    def encoded_payload(self) -> bytes:
        return self.payload.encode("utf-8")


def build_message(context: int, message_type: ConnectorUuid, payload: str) -> Message:
    """Create a message for the given context, type and payload.

    Raises ValueError when the type or the payload is missing.
    """
    if message_type is None:
        raise ValueError("a message needs a type")
    if payload is None:
        raise ValueError("a message needs a payload")
    if not isinstance(message_type, ConnectorUuid):
        raise TypeError(f"message type must be a ConnectorUuid, got {type(message_type).__name__}")
    if not isinstance(payload, str):
        raise TypeError(f"payload must be a string, got {type(payload).__name__}")
    return Message(context=context, message_type=message_type, payload=payload)