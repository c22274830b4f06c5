from core.iteration import SnapshotCursor


def test_cursor_pops_in_order_then_ends():
    cur = SnapshotCursor(["a", "b"])
    assert cur.remaining() == 2
    assert cur.next() == "a"
    assert cur.next() == "b"
    assert cur.next() is None


def test_cursor_is_detached_from_source():
    keys = [1, 2, 3]
    cur = SnapshotCursor(keys)
    keys.clear()
    assert list(cur) == [1, 2, 3]
    assert list(cur) == []


def test_cursor_close_discards_remaining():
    cur = SnapshotCursor([1, 2])
    cur.close()
    assert cur.next() is None
