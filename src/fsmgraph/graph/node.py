from __future__ import annotations

from typing import Dict, Generic, List

from fsmgraph.errors import EdgeNotFoundError
from fsmgraph.graph.graph_schema import E, V, VertexType


class Node(Generic[V, E]):
    """
    Per-vertex record: the vertex value, its outgoing transition table and
    the vertex type that decides how a missing edge is resolved.

    Children are plain references to nodes owned by the graph. Nodes compare
    by identity.
    """

    __slots__ = ("_value", "_type", "_children")

    def __init__(self, value: V, vertex_type: VertexType) -> None:
        self._value = value
        self._type = vertex_type
        self._children: Dict[E, Node[V, E]] = {}

    @staticmethod
    def create(value: V, vertex_type: VertexType = VertexType.BASIC) -> "Node[V, E]":
        return Node(value, vertex_type)

    # -------------------- Accessors --------------------

    @property
    def value(self) -> V:
        return self._value

    @property
    def type(self) -> VertexType:
        return self._type

    @property
    def child_count(self) -> int:
        return len(self._children)

    def children(self) -> List["Node[V, E]"]:
        return list(self._children.values())

    def edges(self) -> Dict[E, "Node[V, E]"]:
        return dict(self._children)

    # -------------------- Children --------------------

    def add_child(self, edge: E, node: "Node[V, E]") -> None:
        self._children[edge] = node

    def has_child(self, edge: E) -> bool:
        return edge in self._children

    def get_child(self, edge: E) -> "Node[V, E]":
        """
        Resolve one edge.

        A looped node treats every undefined edge as a self-loop; a basic
        node raises EdgeNotFoundError.
        """
        child = self._children.get(edge)
        if child is not None:
            return child
        if self._type is VertexType.LOOPED:
            return self
        raise EdgeNotFoundError(self._value, edge)

    def remove_child(self, edge: E) -> None:
        self._children.pop(edge, None)

    def remove_child_node(self, node: "Node[V, E]") -> int:
        stale = [edge for edge, child in self._children.items() if child is node]
        for edge in stale:
            del self._children[edge]
        return len(stale)

    def references(self, node: "Node[V, E]") -> bool:
        return any(child is node for child in self._children.values())

    def __repr__(self) -> str:
        return (
            f"Node(value={self._value!r}, type={self._type.name}, "
            f"children={self.child_count})"
        )
