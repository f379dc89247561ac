import pytest

from entropynet.property_hash import PropertyHash128, compute_property_hash


def test_hash_is_deterministic():
    a = compute_property_hash(42, "com.example.app", "Player", "position")
    b = compute_property_hash(42, "com.example.app", "Player", "position")
    assert a == b
    assert hash(a) == hash(b)


def test_hash_differs_per_entity_and_field():
    base = compute_property_hash(42, "com.example.app", "Player", "position")
    assert base != compute_property_hash(43, "com.example.app", "Player", "position")
    assert base != compute_property_hash(42, "com.example.app", "Player", "rotation")
    assert base != compute_property_hash(42, "com.other.app", "Player", "position")


def test_components_are_concatenated_without_separator():
    assert compute_property_hash(1, "ab", "c", "d") == compute_property_hash(
        1, "a", "bc", "d"
    )


def test_hash_halves_are_64_bit():
    h = compute_property_hash(2**64 - 1, "app", "Type", "field")
    assert 0 <= h.high < 2**64
    assert 0 <= h.low < 2**64
    assert not h.is_null()


def test_entity_id_out_of_range():
    with pytest.raises(ValueError):
        compute_property_hash(-1, "app", "Type", "field")
    with pytest.raises(ValueError):
        compute_property_hash(2**64, "app", "Type", "field")


def test_null_hash():
    assert PropertyHash128().is_null()
    assert PropertyHash128(0, 0).is_null()
    assert not PropertyHash128(0, 1).is_null()
    assert not PropertyHash128(1, 0).is_null()


def test_ordering_high_then_low():
    assert PropertyHash128(1, 5) < PropertyHash128(2, 0)
    assert PropertyHash128(1, 1) < PropertyHash128(1, 2)
    assert not PropertyHash128(2, 0) < PropertyHash128(1, 99)
    assert sorted([PropertyHash128(2, 0), PropertyHash128(1, 9), PropertyHash128(1, 3)]) == [
        PropertyHash128(1, 3),
        PropertyHash128(1, 9),
        PropertyHash128(2, 0),
    ]


def test_usable_as_dict_key():
    h = compute_property_hash(7, "app", "Type", "field")
    table = {h: "value"}
    assert table[PropertyHash128(h.high, h.low)] == "value"


def test_invalid_halves_rejected():
    with pytest.raises(ValueError):
        PropertyHash128(-1, 0)
    with pytest.raises(ValueError):
        PropertyHash128(0, 2**64)