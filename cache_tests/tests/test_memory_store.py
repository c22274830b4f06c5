from stores.memory_store import CallbackStore, DictStore, NullStore


def test_null_store():
    s = NullStore()
    assert s.read("k") is None
    assert s.write("k", "v") is None


def test_dict_store_records_traffic():
    s = DictStore({"a": "1"})

    assert s.read("a") == "1"
    assert s.read("b") is None
    s.write("b", "2")

    assert s.reads == ["a", "b"]
    assert s.writes == [("b", "2")]
    assert s.data == {"a": "1", "b": "2"}


def test_callback_store_defaults_and_delegation():
    empty = CallbackStore()
    assert empty.read("k") is None
    empty.write("k", "v")

    seen = []
    s = CallbackStore(read=lambda k: k * 2, write=lambda k, v: seen.append((k, v)))
    assert s.read(21) == 42
    s.write("k", "v")
    assert seen == [("k", "v")]
