import pytest

from connectorlink.message import Message, build_message
from connectorlink.uuid import ConnectorUuid

TYPE_ID = ConnectorUuid((1, 2, 3, 4))


def test_build_message_keeps_fields():
    message = build_message(7, TYPE_ID, "hello")
    assert message.context == 7
    assert message.message_type == TYPE_ID
    assert message.payload == "hello"


def test_message_length_matches_payload():
    message = build_message(0, TYPE_ID, "hello")
    assert message.message_length == len("hello")


def test_message_length_counts_encoded_bytes():
    text = "caf\u00e9"
    message = build_message(0, TYPE_ID, text)
    assert message.message_length == len(text.encode("utf-8"))
    assert message.encoded_payload() == text.encode("utf-8")


def test_empty_payload_is_allowed():
    message = build_message(3, TYPE_ID, "")
    assert message.message_length == 0


def test_missing_payload_raises():
    with pytest.raises(ValueError):
        build_message(0, TYPE_ID, None)


def test_missing_type_raises():
    with pytest.raises(ValueError):
        build_message(0, None, "hello")


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        build_message(0, "not-a-uuid", "hello")


def test_messages_compare_by_value():
    assert build_message(1, TYPE_ID, "x") == Message(1, TYPE_ID, "x")