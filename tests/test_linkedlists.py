import pytest

from dsadrills.linkedlists import (
    CircularLinkedList,
    DoublyLinkedList,
    ListNode,
    SinglyLinkedList,
    detect_loop,
    floyd_detect_loop,
    is_circular,
    loop_start,
    remove_loop,
)


def _nodes(head):
    seen = []
    node = head
    while node is not None and node not in seen:
        seen.append(node)
        node = node.next
    return seen


def _looped_list():
    """10 -> 12 -> 15 -> 22 -> back to 12."""
    lst = SinglyLinkedList([10, 12, 15])
    lst.insert_at_position(4, 22)
    lst.tail.next = lst.head.next
    return lst


# ---- singly linked list -------------------------------------------------

def test_singly_build_matches_example():
    lst = SinglyLinkedList([10])
    lst.insert_at_tail(12)
    lst.insert_at_tail(15)
    lst.insert_at_position(4, 22)
    assert list(lst) == [10, 12, 15, 22]
    assert lst.tail.value == 22
    assert len(lst) == 4


def test_singly_insert_at_head_on_empty_sets_tail():
    lst = SinglyLinkedList()
    lst.insert_at_head(5)
    assert lst.head is lst.tail
    assert list(lst) == [5]


def test_singly_insert_in_middle():
    lst = SinglyLinkedList([1, 2, 3])
    lst.insert_at_position(2, 9)
    assert list(lst) == [1, 9, 2, 3]
    assert lst.tail.value == 3


def test_singly_insert_at_position_one():
    lst = SinglyLinkedList([1, 2])
    lst.insert_at_position(1, 0)
    assert list(lst) == [0, 1, 2]


def test_singly_insert_out_of_range():
    lst = SinglyLinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.insert_at_position(5, 7)
    with pytest.raises(IndexError):
        lst.insert_at_position(0, 7)


def test_singly_delete_positions():
    lst = SinglyLinkedList([10, 12, 15, 22])
    assert lst.delete_at(4) == 22
    assert lst.tail.value == 15
    assert lst.delete_at(1) == 10
    assert list(lst) == [12, 15]


def test_singly_delete_last_remaining():
    lst = SinglyLinkedList([1])
    assert lst.delete_at(1) == 1
    assert lst.head is None and lst.tail is None
    assert len(lst) == 0


def test_singly_delete_errors():
    with pytest.raises(IndexError):
        SinglyLinkedList().delete_at(1)
    with pytest.raises(IndexError):
        SinglyLinkedList([1, 2]).delete_at(3)


# ---- doubly linked list -------------------------------------------------

def test_doubly_worked_example():
    lst = DoublyLinkedList()
    assert list(lst) == []
    lst.insert_at_head(11)
    assert lst.head.value == 11 and lst.tail.value == 11
    lst.insert_at_head(13)
    lst.insert_at_head(8)
    assert list(lst) == [8, 13, 11]
    lst.insert_at_tail(25)
    assert list(lst) == [8, 13, 11, 25]
    lst.insert_at_position(2, 100)
    assert list(lst) == [8, 100, 13, 11, 25]
    lst.insert_at_position(1, 101)
    assert list(lst) == [101, 8, 100, 13, 11, 25]
    lst.insert_at_position(7, 102)
    assert list(lst) == [101, 8, 100, 13, 11, 25, 102]
    assert lst.tail.value == 102
    assert lst.delete_at(7) == 102
    assert list(lst) == [101, 8, 100, 13, 11, 25]
    assert lst.tail.value == 25


def test_doubly_backward_links_consistent():
    lst = DoublyLinkedList([1, 2, 3, 4])
    lst.insert_at_position(3, 9)
    lst.delete_at(2)
    assert list(reversed(lst)) == list(lst)[::-1]


def test_doubly_delete_head_and_only():
    lst = DoublyLinkedList([1, 2])
    assert lst.delete_at(1) == 1
    assert lst.head.prev is None
    assert lst.delete_at(1) == 2
    assert lst.head is None and lst.tail is None


def test_doubly_errors():
    with pytest.raises(IndexError):
        DoublyLinkedList().delete_at(1)
    with pytest.raises(IndexError):
        DoublyLinkedList([1]).insert_at_position(3, 5)


# ---- circular linked list -----------------------------------------------

def test_circular_insert_sequence():
    lst = CircularLinkedList()
    lst.insert_after(5, 3)
    assert list(lst) == [3]
    lst.insert_after(3, 5)
    lst.insert_after(5, 7)
    lst.insert_after(7, 9)
    lst.insert_after(5, 6)
    lst.insert_after(9, 10)
    lst.insert_after(3, 4)
    assert list(lst) == [3, 4, 5, 6, 7, 9, 10]
    lst.delete(5)
    assert list(lst) == [3, 4, 6, 7, 9, 10]


def test_circular_delete_tail_moves_tail():
    lst = CircularLinkedList()
    lst.insert_after(None, 1)
    lst.insert_after(1, 2)
    lst.delete(1)
    assert lst.tail.value == 2
    assert list(lst) == [2]
    lst.delete(2)
    assert lst.tail is None
    assert list(lst) == []


def test_circular_errors():
    lst = CircularLinkedList()
    with pytest.raises(ValueError):
        lst.delete(1)
    lst.insert_after(None, 1)
    with pytest.raises(ValueError):
        lst.insert_after(42, 2)
    with pytest.raises(ValueError):
        lst.delete(42)


def test_is_circular():
    assert is_circular(None) is True
    lst = CircularLinkedList()
    lst.insert_after(None, 1)
    lst.insert_after(1, 2)
    assert is_circular(lst.tail) is True
    assert is_circular(SinglyLinkedList([1, 2]).head) is False


# ---- loop helpers -------------------------------------------------------

def test_detect_loop():
    assert detect_loop(None) is False
    assert detect_loop(SinglyLinkedList([1, 2, 3]).head) is False
    assert detect_loop(_looped_list().head) is True


def test_floyd_meets_inside_loop():
    lst = _looped_list()
    meeting = floyd_detect_loop(lst.head)
    assert meeting in _nodes(lst.head)[1:]
    assert floyd_detect_loop(SinglyLinkedList([1, 2]).head) is None
    assert floyd_detect_loop(None) is None


def test_loop_start_example():
    lst = _looped_list()
    start = loop_start(lst.head)
    assert start is lst.head.next
    assert start.value == 12
    assert loop_start(SinglyLinkedList([1]).head) is None


def test_self_loop():
    node = ListNode(7)
    node.next = node
    assert loop_start(node) is node
    remove_loop(node)
    assert node.next is None


def test_remove_loop_restores_list():
    lst = _looped_list()
    remove_loop(lst.head)
    assert detect_loop(lst.head) is False
    assert list(lst) == [10, 12, 15, 22]


def test_remove_loop_without_loop_is_noop():
    lst = SinglyLinkedList([1, 2, 3])
    remove_loop(lst.head)
    assert list(lst) == [1, 2, 3]