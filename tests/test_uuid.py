import pytest

from connectorlink.uuid import (
    ConnectorUuid,
    compare_uuid,
    uuid_from_string,
    uuid_to_string,
)


def test_zero_uuid_string_format():
    assert uuid_to_string(ConnectorUuid()) == "00000000-00000000-00000000-00000000"


def test_str_matches_uuid_to_string():
    uuid = ConnectorUuid((1, 2, 3, 4))
    assert str(uuid) == uuid_to_string(uuid)


@pytest.mark.parametrize(
    "elements",
    [(0, 0, 0, 0), (1, 2, 3, 4), (0xFFFFFFFF, 0, 0xDEADBEEF, 0x12345678)],
)
def test_round_trip(elements):
    uuid = ConnectorUuid(elements)
    assert uuid_from_string(uuid_to_string(uuid)) == uuid


def test_from_string_ignores_dashes():
    with_dashes = uuid_from_string("0000000a-0000000b-0000000c-0000000d")
    without = uuid_from_string("0000000a0000000b0000000c0000000d")
    assert with_dashes == without
    assert with_dashes.elements == (0xA, 0xB, 0xC, 0xD)


def test_from_string_ignores_extra_characters():
    base = "00000001-00000002-00000003-00000004"
    assert uuid_from_string(base + "ffff") == uuid_from_string(base)


def test_from_string_short_input():
    assert uuid_from_string("ab").elements == (0xAB, 0, 0, 0)


def test_from_string_rejects_non_hex():
    with pytest.raises(ValueError):
        uuid_from_string("0000000g")


def test_compare_equal():
    assert compare_uuid(ConnectorUuid((1, 2, 3, 4)), ConnectorUuid((1, 2, 3, 4))) == 0


def test_compare_first_differing_element_decides():
    low = ConnectorUuid((1, 9, 9, 9))
    high = ConnectorUuid((2, 0, 0, 0))
    assert compare_uuid(low, high) == -1
    assert compare_uuid(high, low) == 1


def test_ordering_agrees_with_compare():
    uuids = [ConnectorUuid((a, b, 0, 0)) for a in range(3) for b in range(3)]
    for left in uuids:
        for right in uuids:
            assert (left < right) == (compare_uuid(left, right) < 0)
            assert (left == right) == (compare_uuid(left, right) == 0)


def test_invalid_element_count():
    with pytest.raises(ValueError):
        ConnectorUuid((1, 2, 3))


def test_element_out_of_range():
    with pytest.raises(ValueError):
        ConnectorUuid((0x100000000, 0, 0, 0))


def test_hashable_in_sets():
    uuid = ConnectorUuid.from_elements([5, 6, 7, 8])
    assert uuid in {ConnectorUuid((5, 6, 7, 8))}