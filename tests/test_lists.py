import pytest

from wirefdf.lists import LinkedList, Node


def test_empty_list():
    items = LinkedList()
    assert len(items) == 0
    assert list(items) == []
    assert items.last() is None


def test_add_back_keeps_order():
    items = LinkedList()
    items.add_back("a")
    items.add_back("b")
    items.add_back("c")
    assert list(items) == ["a", "b", "c"]
    assert len(items) == 3


def test_add_front_prepends():
    items = LinkedList(["b", "c"])
    node = items.add_front("a")
    assert items.head is node
    assert list(items) == ["a", "b", "c"]


def test_last_returns_tail_node():
    items = LinkedList([1, 2, 3])
    tail = items.last()
    assert isinstance(tail, Node)
    assert tail.content == 3
    assert tail.next is None


def test_add_back_returns_new_tail():
    items = LinkedList([1])
    node = items.add_back(2)
    assert items.last() is node


def test_remove_first_calls_delete_and_returns_content():
    deleted = []
    items = LinkedList(["x", "y"])
    assert items.remove_first(deleted.append) == "x"
    assert deleted == ["x"]
    assert list(items) == ["y"]


def test_remove_first_on_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().remove_first()


def test_clear_deletes_every_content_in_order():
    deleted = []
    items = LinkedList([1, 2, 3])
    items.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(items) == 0
    assert items.head is None


def test_iterate_visits_every_content():
    seen = []
    LinkedList(["p", "q"]).iterate(seen.append)
    assert seen == ["p", "q"]