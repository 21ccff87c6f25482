from algokit.linked_list import ListNode, demonstrate_linked_list


def test_demonstration_text():
    text = demonstrate_linked_list()
    assert text == "Linked list demonstration:\nNode 1: 100\nNode 2: 200\n"


def test_demonstration_prints_same_text(capsys):
    text = demonstrate_linked_list()
    assert capsys.readouterr().out == text


def test_iteration_follows_links():
    head = ListNode(100, ListNode(200, ListNode(300)))
    assert list(head) == [100, 200, 300]


def test_single_node_has_no_next():
    node = ListNode(7)
    assert node.next is None
    assert list(node) == [7]


def test_linking_after_creation():
    first = ListNode("a")
    second = ListNode("b")
    first.next = second
    assert first.next is second
    assert list(first) == ["a", "b"]