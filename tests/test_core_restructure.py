"""Tests for deletion passes, pairwise swap and reversal."""

import pytest

from sentinelq import StringQueue


def _make(*values: str) -> StringQueue:
    queue = StringQueue()
    for value in values:
        assert queue.insert_tail(value)
    return queue


def _elements(queue: StringQueue) -> list[object]:
    """Collect element identities in order, to tell relinking from payload copying."""
    result = []
    link = queue._head.next
    while link is not queue._head:
        result.append(link.owner)
        link = link.next
    return result


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        (["v0", "v1", "v2", "v3", "v4", "v5"], ["v0", "v1", "v2", "v4", "v5"]),
        (["v0", "v1", "v2", "v3", "v4"], ["v0", "v1", "v3", "v4"]),
        (["v0", "v1"], ["v0"]),
        (["v0", "v1", "v2"], ["v0", "v2"]),
        (["v0"], []),
    ],
)
def test_delete_middle(values: list[str], expected: list[str]) -> None:
    """Test that the element at index n // 2 is deleted."""
    queue = _make(*values)
    assert queue.delete_middle()
    assert queue.values() == expected
    assert queue.check_invariant() == len(expected)


def test_delete_middle_releases_element() -> None:
    """Test that the deleted middle element is released."""
    queue = _make("a", "b", "c")
    middle = _elements(queue)[1]
    queue.delete_middle()
    assert middle.released  # type: ignore[attr-defined]


def test_delete_middle_empty() -> None:
    """Test deleting the middle of an empty queue."""
    queue = StringQueue()
    assert queue.delete_middle() is False
    assert queue.check_invariant() == 0


def test_delete_duplicates_runs() -> None:
    """Test that every member of each duplicate run is deleted."""
    queue = _make("a", "a", "b", "c", "c", "c")
    assert queue.delete_duplicates()
    assert queue.values() == ["b"]
    assert queue.check_invariant() == 1


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        (["a", "b", "c"], ["a", "b", "c"]),
        (["a"], ["a"]),
        (["a", "a"], []),
        (["a", "b", "b"], ["a"]),
        (["a", "a", "b"], ["b"]),
        (["a", "b", "b", "c", "d", "d", "d", "e"], ["a", "c", "e"]),
        (["x", "x", "x", "x"], []),
    ],
)
def test_delete_duplicates_cases(values: list[str], expected: list[str]) -> None:
    """Test duplicate removal at the start, middle and end of the queue."""
    queue = _make(*values)
    assert queue.delete_duplicates()
    assert queue.values() == expected
    assert queue.check_invariant() == len(expected)


def test_delete_duplicates_releases_all_run_members() -> None:
    """Test that deleted duplicates are released and unique ones are kept."""
    queue = _make("a", "a", "b")
    first, second, keep = _elements(queue)
    queue.delete_duplicates()
    assert first.released  # type: ignore[attr-defined]
    assert second.released  # type: ignore[attr-defined]
    assert not keep.released  # type: ignore[attr-defined]


def test_delete_duplicates_empty() -> None:
    """Test duplicate removal on an empty queue."""
    assert StringQueue().delete_duplicates() is False


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        (["1", "2", "3", "4", "5"], ["2", "1", "4", "3", "5"]),
        (["1", "2", "3", "4"], ["2", "1", "4", "3"]),
        (["1", "2"], ["2", "1"]),
        (["1"], ["1"]),
        ([], []),
    ],
)
def test_swap_pairs(values: list[str], expected: list[str]) -> None:
    """Test pairwise swapping including the odd trailing element."""
    queue = _make(*values)
    queue.swap_pairs()
    assert queue.values() == expected
    assert queue.check_invariant() == len(expected)


def test_swap_pairs_relinks_elements() -> None:
    """Test that swapping moves elements instead of exchanging payloads."""
    queue = _make("1", "2", "3")
    one, two, three = _elements(queue)
    queue.swap_pairs()
    assert _elements(queue) == [two, one, three]
    # The odd element stays last, linked to its new predecessor and the sentinel
    assert queue._head.prev is three.link  # type: ignore[attr-defined]
    assert three.link.prev is one.link  # type: ignore[attr-defined]


def test_swap_pairs_twice_restores() -> None:
    """Test that swapping twice restores the original order."""
    values = [str(i) for i in range(7)]
    queue = _make(*values)
    queue.swap_pairs()
    queue.swap_pairs()
    assert queue.values() == values


def test_reverse() -> None:
    """Test reversing a queue."""
    queue = _make("1", "2", "3")
    queue.reverse()
    assert queue.values() == ["3", "2", "1"]
    assert queue.check_invariant() == 3


def test_reverse_reuses_elements() -> None:
    """Test that reversal relinks the existing elements."""
    queue = _make("1", "2", "3", "4")
    before = _elements(queue)
    queue.reverse()
    assert _elements(queue) == before[::-1]
    assert not any(element.released for element in before)  # type: ignore[attr-defined]


@pytest.mark.parametrize("count", [0, 1, 2, 5, 10])
def test_reverse_twice_restores(count: int) -> None:
    """Test that reversing twice restores the original order."""
    values = [f"v{i}" for i in range(count)]
    queue = _make(*values)
    queue.reverse()
    queue.reverse()
    assert queue.values() == values
    assert queue.check_invariant() == count


def test_reverse_then_insert() -> None:
    """Test that head/tail inserts follow the reversed orientation."""
    queue = _make("1", "2")
    queue.reverse()
    queue.insert_head("0")
    queue.insert_tail("3")
    assert queue.values() == ["0", "2", "1", "3"]
    assert queue.check_invariant() == 4
