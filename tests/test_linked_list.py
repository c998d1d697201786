from dsakit.linked_list import LinkedList, merge_lists


def test_str_worked_example():
    linked = LinkedList([-5, 8, 9, 7, -22])
    assert str(linked) == "-5 -> 8 -> 9 -> 7 -> -22 -> NULL"


def test_empty_list_str():
    assert str(LinkedList()) == "NULL"


def test_empty_list_len_and_iter():
    linked = LinkedList()
    assert len(linked) == 0
    assert list(linked) == []


def test_append_preserves_order():
    linked = LinkedList()
    for value in [3, 1, 2]:
        linked.append(value)
    assert list(linked) == [3, 1, 2]
    assert len(linked) == 3


def test_append_after_construction():
    linked = LinkedList([1, 2])
    linked.append(9)
    assert list(linked) == [1, 2, 9]


def test_iteration_round_trip():
    data = [10, -1, 10, 0]
    assert list(LinkedList(data)) == data


def test_len_matches_input():
    data = range(17)
    assert len(LinkedList(data)) == len(data)


def test_equality():
    assert LinkedList([1, 2]) == LinkedList([1, 2])
    assert not LinkedList([1, 2]) == LinkedList([2, 1])


def test_merge_lists_worked_example():
    assert merge_lists([3, 1, 5], [8, 2, 6, 4]) == [3, 1, 5, 8, 2, 6, 4]


def test_merge_lists_with_empty():
    assert merge_lists([], [1, 2]) == [1, 2]
    assert merge_lists([1, 2], []) == [1, 2]
    assert merge_lists([], []) == []


def test_merge_lists_keeps_inputs():
    first, second = [1], [2]
    merged = merge_lists(first, second)
    assert first == [1] and second == [2]
    assert len(merged) == len(first) + len(second)


def test_merge_lists_accepts_linked_lists():
    merged = merge_lists(LinkedList([1, 2]), LinkedList([3]))
    assert merged == [1, 2, 3]