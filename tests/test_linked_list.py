import pytest

from algosandbox.linked_list import LinkedListNode, build


def chain(*values):
    nodes = [LinkedListNode(v) for v in values]
    for a, b in zip(nodes, nodes[1:]):
        a.next = b
        b.prev = a
    return nodes


def layout(node):
    """Return (forward values, backward values, position of node)."""
    first = node
    while first.prev is not None:
        first = first.prev
    forward, position, current, last = [], None, first, first
    while current is not None:
        if current is node:
            position = len(forward)
        forward.append(current.value)
        last = current
        current = current.next
    backward = []
    current = last
    while current is not None:
        backward.append(current.value)
        current = current.prev
    return forward, backward, position


def expect(values, position):
    return list(values), list(reversed(values)), position


def test_build():
    head = build([LinkedListNode(v) for v in (0, 1, 2, 3)])
    assert layout(head) == expect([0, 1, 2, 3], 0)


def test_build_empty():
    assert build([]) is None


def test_is_head():
    nodes = chain(0, 1, 2, 3)
    assert nodes[0].is_head() is True
    assert nodes[3].is_head() is False


def test_is_tail():
    nodes = chain(0, 1, 2, 3)
    assert nodes[3].is_tail() is True
    assert nodes[0].is_tail() is False


def test_head_and_tail():
    nodes = chain(0, 1, 2, 3)
    assert nodes[2].head() is nodes[0]
    assert nodes[2].head().value == 0
    assert nodes[2].tail() is nodes[3]
    assert nodes[2].tail().value == 3


def test_append():
    middle = chain(0, 1, 2, 3)[2]
    middle.append(LinkedListNode(-1))
    middle.append(LinkedListNode(4))
    assert layout(middle) == expect([0, 1, 2, 3, -1, 4], 2)


def test_prepend():
    middle = chain(0, 1, 2, 3)[2]
    middle.prepend(LinkedListNode(8))
    middle.prepend(LinkedListNode(-0.5))
    assert layout(middle) == expect([-0.5, 8, 0, 1, 2, 3], 4)


@pytest.mark.parametrize(
    "start, needle, found",
    [(2, 0, 0), (2, 3, 3), (0, 3, 3), (3, 0, 0)],
)
def test_search(start, needle, found):
    nodes = chain(0, 1, 2, 3)
    assert nodes[start].search(needle) is nodes[found]


def test_search_missing():
    assert chain(0, 1, 2, 3)[1].search(42) is None


def test_remove_from_head():
    head = chain(0, 1, 2, 3)[0]
    head.remove(2)
    assert layout(head) == expect([0, 1, 3], 0)


def test_remove_from_tail():
    tail = chain(0, 1, 2, 3)[3]
    tail.remove(1)
    assert layout(tail) == expect([0, 2, 3], 2)


def test_remove_missing_leaves_list():
    head = chain(0, 1, 2, 3)[0]
    head.remove(9)
    assert layout(head) == expect([0, 1, 2, 3], 0)


def test_insert_after_middle():
    head = chain(0, 1, 2, 3)[0]
    head.insert_after(LinkedListNode(11), 1)
    assert layout(head) == expect([0, 1, 11, 2, 3], 0)


def test_insert_after_tail():
    head = chain(0, 1, 2, 3)[0]
    head.insert_after(LinkedListNode(0.8), 3)
    assert layout(head) == expect([0, 1, 2, 3, 0.8], 0)


def test_insert_after_missing_mount_point():
    head = chain(0, 1, 2, 3)[0]
    head.insert_after(LinkedListNode(5), 99)
    assert layout(head) == expect([0, 1, 2, 3], 0)