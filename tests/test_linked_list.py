import pytest

from dsalgo.linked_list import (
    LinkedList,
    Node,
    from_iterable,
    has_cycle,
    is_palindrome,
    link_tail_to,
    merge_sort,
    merge_sorted,
    middle,
    reverse,
    to_list,
)


def test_source_example_sequence():
    lst = LinkedList()
    lst.push_back(7)
    lst.push_front(5)
    lst.push_front(6)
    lst.push_back(9)
    assert list(lst) == [6, 5, 7, 9]
    lst.insert(1, 8)
    assert list(lst) == [6, 8, 5, 7, 9]
    assert lst.format() == "[ 6, 8, 5, 7, 9 ]"


def test_format_empty():
    assert LinkedList().format() == "List Empty"


def test_len_and_init():
    lst = LinkedList([1, 2, 3])
    assert len(lst) == 3
    assert list(lst) == [1, 2, 3]


def test_pop_front_and_back():
    lst = LinkedList([1, 2, 3])
    assert lst.pop_front() == 1
    assert lst.pop_back() == 3
    assert list(lst) == [2]
    assert lst.pop_back() == 2
    assert list(lst) == []


@pytest.mark.parametrize("method", ["pop_front", "pop_back"])
def test_pop_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(LinkedList(), method)()


def test_insert_into_empty_and_at_end():
    lst = LinkedList()
    lst.insert(0, 4)
    lst.insert(1, 5)
    assert list(lst) == [4, 5]


def test_insert_out_of_bound():
    lst = LinkedList([1])
    with pytest.raises(IndexError):
        lst.insert(3, 9)
    assert list(lst) == [1]


def test_assign():
    lst = LinkedList([8, 5, 7, 9])
    lst.assign(2, 2)
    assert list(lst) == [8, 5, 2, 9]


def test_assign_errors():
    with pytest.raises(IndexError):
        LinkedList().assign(0, 1)
    with pytest.raises(IndexError):
        LinkedList([1, 2]).assign(2, 1)


def test_remove_duplicates():
    lst = LinkedList([1, 1, 2, 3, 3, 3, 4])
    lst.remove_duplicates()
    assert list(lst) == [1, 2, 3, 4]


def test_round_trip():
    values = [5, 3, 9, 1]
    assert to_list(from_iterable(values)) == values
    assert from_iterable([]) is None


def test_merge_sorted():
    first = from_iterable([1, 2, 4, 6])
    second = from_iterable([-1, 0, 1, 3, 5])
    merged = to_list(merge_sorted(first, second))
    assert merged == sorted([1, 2, 4, 6, -1, 0, 1, 3, 5])


@pytest.mark.parametrize(
    "values", [[], [1], [2, 1], [5, 3, 8, 1, 9, 2], [4, 4, 1, 4, 0]]
)
def test_merge_sort(values):
    assert to_list(merge_sort(from_iterable(values))) == sorted(values)


@pytest.mark.parametrize("n", [2, 3, 4, 5, 6])
def test_middle_splits(n):
    head = from_iterable(range(n))
    mid = middle(head)
    assert to_list(head) + to_list(mid) == list(range(n))
    assert len(to_list(head)) == n // 2


def test_middle_too_short():
    with pytest.raises(ValueError):
        middle(Node(1))


def test_reverse():
    assert to_list(reverse(from_iterable([1, 2, 3, 4]))) == [4, 3, 2, 1]
    assert reverse(None) is None


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3, 2, 1], True),
        ([1, 2, 2, 1], True),
        ([1], True),
        ([1, 2, 3], False),
        ([1, 2, 3, 4, 5, 6], False),
    ],
)
def test_is_palindrome_keeps_list(values, expected):
    head = from_iterable(values)
    assert is_palindrome(head) is expected
    assert to_list(head) == values


@pytest.mark.parametrize("position", [1, 2, 3])
def test_detect_loop(position):
    head = from_iterable([1, 3, 4])
    link_tail_to(head, position)
    assert has_cycle(head) is True


def test_no_loop():
    head = from_iterable([1, 8, 3, 4])
    link_tail_to(head, 0)
    assert has_cycle(head) is False
    assert has_cycle(None) is False


def test_to_list_rejects_cycle():
    head = from_iterable([1, 2])
    link_tail_to(head, 1)
    with pytest.raises(ValueError):
        to_list(head)


def test_link_tail_out_of_bound():
    with pytest.raises(IndexError):
        link_tail_to(from_iterable([1, 2]), 3)