import pytest

from algokit.linked import LinkedList, TreeNode, postorder


def test_round_trip():
    values = [9, 8, 7, 6, 5]
    ll = LinkedList(values)
    assert list(ll) == values
    assert len(ll) == len(values)


def test_empty_list():
    ll = LinkedList()
    assert list(ll) == []
    assert len(ll) == 0


def test_push_front_and_back():
    ll = LinkedList([2, 3])
    ll.push_front(1)
    ll.push_back(4)
    assert list(ll) == [1, 2, 3, 4]


def test_push_back_on_empty():
    ll = LinkedList()
    ll.push_back("a")
    assert list(ll) == ["a"]


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_insert_at_places_value(position):
    values = [10, 20, 30]
    ll = LinkedList(values)
    ll.insert_at(position, 99)
    result = list(ll)
    assert len(result) == len(values) + 1
    assert result[position - 1] == 99
    assert [v for v in result if v != 99] == values


@pytest.mark.parametrize("position", [0, 5])
def test_insert_at_out_of_range(position):
    ll = LinkedList([10, 20, 30])
    with pytest.raises(IndexError):
        ll.insert_at(position, 99)


def test_remove_front_and_back():
    ll = LinkedList([1, 2, 3])
    assert ll.remove_front() == 1
    assert ll.remove_back() == 3
    assert list(ll) == [2]
    assert ll.remove_back() == 2
    assert list(ll) == []


def test_remove_from_empty():
    with pytest.raises(IndexError):
        LinkedList().remove_front()
    with pytest.raises(IndexError):
        LinkedList().remove_back()


@pytest.mark.parametrize("position", [1, 2, 3])
def test_remove_at(position):
    values = ["a", "b", "c"]
    ll = LinkedList(values)
    assert ll.remove_at(position) == values[position - 1]
    assert list(ll) == values[: position - 1] + values[position:]


def test_remove_at_out_of_range():
    with pytest.raises(IndexError):
        LinkedList([1, 2]).remove_at(3)


@pytest.mark.parametrize("values", [[], [1], [9, 8, 7, 6, 5]])
def test_reverse(values):
    ll = LinkedList(values)
    ll.reverse()
    assert list(ll) == values[::-1]


@pytest.mark.parametrize("values", [[], [1], [9, 8, 7, 6, 5]])
def test_reverse_recursive(values):
    ll = LinkedList(values)
    ll.reverse_recursive()
    assert list(ll) == values[::-1]


def test_postorder_example():
    root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
    assert list(postorder(root)) == [4, 5, 2, 3, 1]


def test_postorder_root_last_and_empty():
    root = TreeNode("r", None, TreeNode("x"))
    assert list(postorder(root))[-1] == "r"
    assert list(postorder(None)) == []