from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from fsmgraph.errors import InvalidArgumentError, TransitionExistsError
from fsmgraph.graph.graph_schema import E, V, VertexType
from fsmgraph.graph.graph_store import TransitionGraph
from fsmgraph.graph.node import Node

if TYPE_CHECKING:
    from fsmgraph.config.settings import GraphConfig


class TransitionTree(TransitionGraph[V, E]):
    """
    Rooted transition graph that grows from a single root vertex.

    Targets of new transitions are created on demand, and a vertex left
    without any outgoing or incoming transition after a transition removal
    is pruned. The root always stays.
    """

    def __init__(
        self,
        root: V,
        default_vertex_type: VertexType = VertexType.BASIC,
        *,
        strict_iteration: bool = True,
    ) -> None:
        super().__init__(default_vertex_type, strict_iteration=strict_iteration)
        self._require(root, "root vertex")
        self._root = root
        self._insert_node(root, self.default_vertex_type)

    @classmethod
    def from_config(cls, root: V, config: "GraphConfig") -> "TransitionTree[V, E]":  # type: ignore[override]
        return cls(
            root,
            config.default_vertex_type,
            strict_iteration=config.strict_iteration,
        )

    @property
    def root(self) -> V:
        return self._root

    # -------------------- Transitions --------------------

    def add_transition(
        self,
        source: V,
        target: V,
        edge: E,
        vertex_type: Optional[VertexType] = None,
    ) -> None:
        """
        Add a transition, creating ``target`` with ``vertex_type`` (or the
        default type) when it is not in the tree yet.
        """
        self._require(source, "source vertex")
        self._require(target, "target vertex")
        self._require(edge, "edge")
        vertex_type = self._resolve_type(vertex_type)

        source_node = self._get_node(source)
        if source_node.has_child(edge):
            raise TransitionExistsError(source, edge)

        source_node.add_child(edge, self._get_or_create(target, vertex_type))

    def add_transitions(
        self,
        source: V,
        target: V,
        edges: Iterable[E],
        vertex_type: Optional[VertexType] = None,
    ) -> None:
        self._require(source, "source vertex")
        self._require(target, "target vertex")
        self._require(edges, "edges")
        vertex_type = self._resolve_type(vertex_type)

        source_node = self._get_node(source)
        target_node: Optional[Node[V, E]] = None

        for edge in edges:
            self._require(edge, "edge")
            if source_node.has_child(edge):
                raise TransitionExistsError(source, edge)
            if target_node is None:
                target_node = self._get_or_create(target, vertex_type)
            source_node.add_child(edge, target_node)

    def remove_transition(self, source: V, target: V, edge: E) -> None:
        super().remove_transition(source, target, edge)

        if target == self._root:
            return

        target_node = self._nodes[target]
        if target_node.child_count == 0 and not self._is_referenced(target_node):
            self.remove_vertex(target)
            logging.getLogger("fsmgraph.tree").debug("pruned orphan vertex=%r", target)

    # -------------------- Vertices --------------------

    def remove_vertex(self, vertex: V) -> None:
        self._require(vertex, "vertex")
        if vertex == self._root:
            raise InvalidArgumentError(f"root vertex [{vertex}] cannot be removed")
        super().remove_vertex(vertex)

    def clear(self) -> None:
        root_type = self._nodes[self._root].type
        super().clear()
        self._insert_node(self._root, root_type)

    # -------------------- Traversal --------------------

    def traverse_from_root(self, edges: Iterable[E]) -> V:
        return self._walk(self._nodes[self._root], edges)

    # -------------------- Internals --------------------

    def _get_or_create(self, vertex: V, vertex_type: VertexType) -> Node[V, E]:
        node = self._nodes.get(vertex)
        if node is None:
            node = self._insert_node(vertex, vertex_type)
        return node

    def _is_referenced(self, node: Node[V, E]) -> bool:
        return any(
            other.references(node)
            for other in self._nodes.values()
            if other is not node
        )
