"""Intrusive doubly linked list of resting orders."""

from typing import Iterator, Optional


class Node:
    """A resting order: its user reference number and remaining quantity."""

    __slots__ = ("user_ref_num", "quantity", "prev_node", "next_node", "_owner")

    def __init__(self, user_ref_num: int, quantity: int) -> None:
        self.user_ref_num = user_ref_num
        self.quantity = quantity
        self.prev_node: Optional[Node] = None
        self.next_node: Optional[Node] = None
        self._owner: Optional[LinkedList] = None

    def nullify_links(self) -> None:
        """Detach this node from its neighbours."""
        self.prev_node = None
        self.next_node = None

    def __repr__(self) -> str:
        return f"Node(user_ref_num={self.user_ref_num}, quantity={self.quantity})"


class LinkedList:
    """Doubly linked list whose nodes are removed in constant time by reference."""

    def __init__(self) -> None:
        self._size = 0
        self.first_node: Optional[Node] = None
        self.last_node: Optional[Node] = None

    def push_back(self, node: Node) -> None:
        """Append ``node`` at the end of the list."""
        if node._owner is not None:
            raise ValueError("node already belongs to a list")
        last = self.last_node
        if last is None:
            self.first_node = node
        else:
            last.next_node = node
            node.prev_node = last
        self.last_node = node
        node._owner = self
        self._size += 1

    def remove_node(self, node: Optional[Node]) -> None:
        """Unlink ``node`` from the list; ``None`` is ignored."""
        if node is None:
            return
        if node._owner is not self:
            raise ValueError("node does not belong to this list")
        prev_node, next_node = node.prev_node, node.next_node
        if node is self.first_node:
            self.first_node = next_node
        if node is self.last_node:
            self.last_node = prev_node
        if prev_node is not None:
            prev_node.next_node = next_node
        if next_node is not None:
            next_node.prev_node = prev_node
        node.nullify_links()
        node._owner = None
        self._size -= 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Node]:
        node = self.first_node
        while node is not None:
            following = node.next_node
            yield node
            node = following