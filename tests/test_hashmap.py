import pytest

from hwkit.hashmap import MAX_KEY_LENGTH, DuplicateKeyError, StrIntMap


def test_insert_and_lookup():
    m = StrIntMap()
    m.insert("apple", 3)
    m.insert("pear", 5)
    assert m["apple"] == 3
    assert m["pear"] == 5
    assert len(m) == 2


def test_duplicate_insert_raises():
    m = StrIntMap()
    m.insert("key", 1)
    with pytest.raises(DuplicateKeyError):
        m.insert("key", 2)
    assert m["key"] == 1


def test_missing_key_raises():
    m = StrIntMap()
    with pytest.raises(KeyError):
        m["absent"]
    assert "absent" not in m


def test_delete_then_missing():
    m = StrIntMap()
    m.insert("a", 1)
    m.insert("b", 2)
    del m["a"]
    assert len(m) == 1
    with pytest.raises(KeyError):
        m["a"]
    with pytest.raises(KeyError):
        del m["a"]
    assert m["b"] == 2


def test_reinsert_after_delete_reuses_slot():
    m = StrIntMap(lambda key: 0)
    for word in ("x", "y", "z"):
        m.insert(word, 1)
    del m["x"]
    m.insert("w", 7)
    assert dict(m) == {"y": 1, "z": 1, "w": 7}
    assert list(m)[0] == "w"


def test_setitem_updates_and_inserts():
    m = StrIntMap()
    m["k"] = 1
    m["k"] = m["k"] + 1
    assert m["k"] == 2
    assert len(m) == 1


def test_growth_keeps_all_entries():
    m = StrIntMap()
    keys = [f"word{n}" for n in range(500)]
    for n, key in enumerate(keys):
        m.insert(key, n)
    assert len(m) == len(keys)
    assert all(m[key] == n for n, key in enumerate(keys))
    assert sorted(m) == sorted(keys)


def test_heavy_collisions_still_work():
    m = StrIntMap(lambda key: 12345)
    keys = [str(n) for n in range(100)]
    for key in keys:
        m.insert(key, int(key))
    assert dict(m) == {key: int(key) for key in keys}


def test_iteration_follows_slot_order():
    m = StrIntMap(lambda key: ord(key[0]))
    for key in ("c", "b", "a"):
        m.insert(key, 1)
    assert list(m) == ["a", "b", "c"]


def test_many_deletes_and_inserts():
    m = StrIntMap()
    for n in range(200):
        m.insert(str(n), n)
        if n % 2:
            del m[str(n)]
    assert len(m) == 100
    assert set(m) == {str(n) for n in range(0, 200, 2)}


def test_long_keys_are_truncated():
    m = StrIntMap()
    m.insert("a" * (MAX_KEY_LENGTH + 10), 4)
    assert m["a" * MAX_KEY_LENGTH] == 4
    assert list(m) == ["a" * MAX_KEY_LENGTH]


def test_hash_func_must_be_callable():
    with pytest.raises(TypeError):
        StrIntMap(None)