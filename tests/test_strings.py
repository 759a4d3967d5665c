import pytest

from connectorlink.strings import (
    DEFAULT_BUCKET_SIZE,
    StringMap,
    chomp,
    fnv1a_hash,
    memrchr,
    strndup,
    untrusted_strlen,
)


def test_memrchr_finds_last_occurrence():
    buffer = b"a\0b\0c"
    index = memrchr(buffer, 0)
    assert buffer[index] == 0
    assert 0 not in buffer[index + 1 :]


def test_memrchr_missing():
    assert memrchr(b"abc", ord("z")) is None


def test_strndup_truncates():
    assert strndup("hello", 3) + "lo" == "hello"


def test_strndup_longer_than_text():
    assert strndup("hello", 10) == "hello"


def test_strndup_negative():
    with pytest.raises(ValueError):
        strndup("hello", -1)


def test_chomp_removes_trailing_delims():
    assert chomp("path///", "/") == ("path", 3)


def test_chomp_nothing_to_remove():
    assert chomp("/path", "/") == ("/path", 0)


def test_chomp_all_delims():
    assert chomp("///", "/") == ("", 3)


def test_untrusted_strlen_terminated():
    buffer = b"abc\0"
    assert untrusted_strlen(buffer) == len(buffer) - 1


def test_untrusted_strlen_unterminated():
    with pytest.raises(ValueError):
        untrusted_strlen(b"abc")


def test_fnv_empty_is_offset_basis():
    assert fnv1a_hash("") == 0xCBF29CE484222325
    assert fnv1a_hash("", 32) == 0x811C9DC5


def test_fnv_known_value():
    assert fnv1a_hash("a") == 0xAF63DC4C8601EC8C


def test_fnv_fits_width():
    for text in ["alpha", "beta", "gamma"]:
        assert fnv1a_hash(text, 32) < 2**32
        assert fnv1a_hash(text, 64) < 2**64


def test_fnv_bad_width():
    with pytest.raises(ValueError):
        fnv1a_hash("a", 16)


def test_map_default_bucket_size():
    assert StringMap().bucket_size == DEFAULT_BUCKET_SIZE


def test_map_insert_and_search():
    mapping = StringMap()
    mapping.insert("key", "value")
    assert mapping.search("key") == "value"
    assert "key" in mapping


def test_map_search_missing():
    assert StringMap().search("absent") is None


def test_map_overwrite():
    mapping = StringMap()
    mapping.insert("key", "first")
    mapping.insert("key", "second")
    assert mapping.search("key") == "second"
    assert len(mapping) == 1


def test_map_collisions_keep_all_keys():
    mapping = StringMap(bucket_size=1)
    keys = ["one", "two", "three"]
    for key in keys:
        mapping.insert(key, key.upper())
    assert [mapping.search(key) for key in keys] == ["ONE", "TWO", "THREE"]


def test_map_rejects_bad_bucket_size():
    with pytest.raises(ValueError):
        StringMap(bucket_size=0)