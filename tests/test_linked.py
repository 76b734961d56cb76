import pytest

from dsadrills.linked import LinkedList, Node, delete_node, merge_sorted


def test_construction_keeps_order():
    assert list(LinkedList([1, 2, 3, 4, 5])) == [1, 2, 3, 4, 5]


def test_empty_list_iterates_nothing():
    assert list(LinkedList()) == []


def test_str_joins_with_spaces():
    assert str(LinkedList([1, 2, 3])) == "1 2 3"


def test_append_adds_to_end():
    lst = LinkedList()
    for value in [1, 2, 3, 4, 5]:
        lst.append(value)
    assert list(lst) == [1, 2, 3, 4, 5]


def test_append_returns_tail_node():
    lst = LinkedList([7])
    node = lst.append(9)
    assert node.value == 9
    assert node.next is None
    assert lst.head.next is node


def test_reverse():
    lst = LinkedList([1, 2, 3, 4, 5])
    lst.reverse()
    assert list(lst) == [5, 4, 3, 2, 1]


@pytest.mark.parametrize("values", [[], [4], [3, 8], [1, 2, 2, 9, 0]])
def test_reverse_twice_is_identity(values):
    lst = LinkedList(values)
    lst.reverse()
    assert list(lst) == values[::-1]
    lst.reverse()
    assert list(lst) == values


def test_has_cycle_when_tail_points_to_head():
    lst = LinkedList([1, 2, 3, 4, 5])
    lst.head.next.next.next.next.next = lst.head
    assert lst.has_cycle() is True


def test_has_cycle_self_loop():
    lst = LinkedList([1])
    lst.head.next = lst.head
    assert lst.has_cycle() is True


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5]])
def test_no_cycle(values):
    assert LinkedList(values).has_cycle() is False


def test_merge_sorted_example():
    merged = merge_sorted(LinkedList([1, 2, 3, 4, 5]), LinkedList([1, 2, 13, 14, 15]))
    assert list(merged) == sorted([1, 2, 3, 4, 5, 1, 2, 13, 14, 15])


@pytest.mark.parametrize(
    "first, second",
    [([], []), ([1, 3], []), ([], [2, 4]), ([5], [1, 2, 3]), ([-3, 0, 7], [-1, 7, 8])],
)
def test_merge_sorted_is_sorted_union(first, second):
    merged = merge_sorted(LinkedList(first), LinkedList(second))
    assert list(merged) == sorted(first + second)


def test_merge_sorted_leaves_inputs_intact():
    a = LinkedList([1, 4])
    b = LinkedList([2, 3])
    merge_sorted(a, b)
    assert list(a) == [1, 4]
    assert list(b) == [2, 3]


def test_delete_node_second():
    lst = LinkedList([1, 2, 3, 4, 5])
    delete_node(lst.head.next)
    assert list(lst) == [1, 3, 4, 5]


def test_delete_node_head():
    lst = LinkedList([1, 2, 3])
    delete_node(lst.head)
    assert list(lst) == [2, 3]


def test_delete_last_node_raises():
    lst = LinkedList([1, 2])
    with pytest.raises(ValueError):
        delete_node(lst.head.next)


def test_delete_lone_node_raises():
    with pytest.raises(ValueError):
        delete_node(Node(5))


def test_maximum():
    assert LinkedList([3, -1, 9, 2]).maximum() == 9


def test_maximum_of_negatives():
    assert LinkedList([-5, -2, -8]).maximum() == -2


def test_maximum_empty_raises():
    with pytest.raises(ValueError):
        LinkedList().maximum()


def test_remove_duplicates_example():
    lst = LinkedList([1, 1, 1, 2, 2])
    lst.remove_duplicates()
    assert list(lst) == [1, 2]


@pytest.mark.parametrize(
    "values", [[], [4], [3, 1, 3, 2, 1], [-1, 5, -1, 5, 0], [7, 7, 7]]
)
def test_remove_duplicates_keeps_first_occurrences(values):
    lst = LinkedList(values)
    lst.remove_duplicates()
    assert list(lst) == list(dict.fromkeys(values))


def test_sort_012_example():
    lst = LinkedList([0, 1, 0, 2, 1])
    lst.sort_012()
    assert list(lst) == [0, 0, 1, 1, 2]


@pytest.mark.parametrize("values", [[], [2, 2, 0], [1, 0, 2, 1, 0, 2, 2]])
def test_sort_012_matches_sorted(values):
    lst = LinkedList(values)
    lst.sort_012()
    assert list(lst) == sorted(values)


def test_sort_012_rejects_other_values():
    with pytest.raises(ValueError):
        LinkedList([0, 3, 1]).sort_012()


def test_to_number_reads_digits():
    assert LinkedList([9, 4, 6]).to_number() == 946
    assert LinkedList([8, 4]).to_number() == 84


@pytest.mark.parametrize("digits", [[0], [5], [1, 0, 0], [0, 0, 7], [3, 1, 4, 1, 5]])
def test_to_number_agrees_with_decimal_text(digits):
    text = "".join(str(d) for d in digits)
    assert LinkedList(digits).to_number() == int(text)


def test_to_number_empty_raises():
    with pytest.raises(ValueError):
        LinkedList().to_number()