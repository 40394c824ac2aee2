from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable, Iterator, List, Optional

import networkx as nx

from fsmgraph.errors import (
    ConcurrentModificationError,
    InvalidArgumentError,
    TransitionExistsError,
    TransitionNotFoundError,
    VertexExistsError,
    VertexNotFoundError,
)
from fsmgraph.graph.graph_schema import E, Transition, V, VertexType
from fsmgraph.graph.machine import MutableFiniteStateMachine
from fsmgraph.graph.node import Node

if TYPE_CHECKING:
    from fsmgraph.config.settings import GraphConfig


class TransitionGraph(MutableFiniteStateMachine[V, E]):
    """
    Authoritative in-memory transition graph.

    Vertices are keyed by their value; each one owns a Node holding its
    outgoing transitions. Vertices added without an explicit type get the
    graph's default vertex type.

    Removing a vertex scans every remaining vertex to drop transitions that
    point at it, which is O(V * out-degree) on dense graphs. No reverse index
    is kept.

    Not thread-safe: concurrent mutation needs external locking.
    """

    def __init__(
        self,
        default_vertex_type: VertexType = VertexType.BASIC,
        *,
        strict_iteration: bool = True,
    ) -> None:
        self._default_vertex_type = self._validate_type(default_vertex_type)
        self._strict_iteration = strict_iteration
        self._nodes: Dict[V, Node[V, E]] = {}
        # bumped whenever the vertex set changes; iterators compare against it
        self._mod_count = 0

    @classmethod
    def from_config(cls, config: "GraphConfig") -> "TransitionGraph[V, E]":
        return cls(
            config.default_vertex_type,
            strict_iteration=config.strict_iteration,
        )

    @property
    def default_vertex_type(self) -> VertexType:
        return self._default_vertex_type

    # -------------------- Vertices --------------------

    def add_vertex(self, vertex: V, vertex_type: Optional[VertexType] = None) -> None:
        self._require(vertex, "vertex")
        vertex_type = self._resolve_type(vertex_type)

        if vertex in self._nodes:
            raise VertexExistsError(vertex)

        self._insert_node(vertex, vertex_type)

    def remove_vertex(self, vertex: V) -> None:
        node = self._get_node(vertex)

        scrubbed = 0
        for other in self._nodes.values():
            if other is not node and other.child_count:
                scrubbed += other.remove_child_node(node)

        del self._nodes[vertex]
        self._mod_count += 1

        logging.getLogger("fsmgraph.graph").debug(
            "removed vertex=%r inbound_transitions_dropped=%d", vertex, scrubbed
        )

    def has_vertex(self, vertex: V) -> bool:
        self._require(vertex, "vertex")
        return vertex in self._nodes

    def get_vertex_type(self, vertex: V) -> VertexType:
        return self._get_node(vertex).type

    def vertices(self) -> Iterator[V]:
        return iter(self)

    # -------------------- Transitions --------------------

    def add_transition(self, source: V, target: V, edge: E) -> None:
        self._require(source, "source vertex")
        self._require(target, "target vertex")
        self._require(edge, "edge")

        source_node = self._get_node(source)
        if source_node.has_child(edge):
            raise TransitionExistsError(source, edge)

        source_node.add_child(edge, self._get_node(target))

        logging.getLogger("fsmgraph.graph").debug(
            "added transition %r -[%r]-> %r", source, edge, target
        )

    def add_transitions(self, source: V, target: V, edges: Iterable[E]) -> None:
        """
        Add one transition per edge from source to target.

        Edges are applied in order. A duplicate aborts the call but edges
        added before it stay in the graph.
        """
        self._require(source, "source vertex")
        self._require(target, "target vertex")
        self._require(edges, "edges")

        source_node = self._get_node(source)
        target_node = self._get_node(target)

        for edge in edges:
            self._require(edge, "edge")
            if source_node.has_child(edge):
                raise TransitionExistsError(source, edge)
            source_node.add_child(edge, target_node)

    def remove_transition(self, source: V, target: V, edge: E) -> None:
        if not self.has_transition(source, target, edge):
            raise TransitionNotFoundError(source, target, edge)

        self._nodes[source].remove_child(edge)

        logging.getLogger("fsmgraph.graph").debug(
            "removed transition %r -[%r]-> %r", source, edge, target
        )

    def has_transition(self, source: V, target: V, edge: E) -> bool:
        self._require(source, "source vertex")
        self._require(target, "target vertex")
        self._require(edge, "edge")

        source_node = self._get_node(source)
        target_node = self._get_node(target)

        return source_node.has_child(edge) and source_node.get_child(edge) is target_node

    def has_any_transition(self, source: V, target: V) -> bool:
        self._require(source, "source vertex")
        self._require(target, "target vertex")

        source_node = self._get_node(source)
        target_node = self._get_node(target)

        return source_node.references(target_node)

    def transitions(self) -> Iterator[Transition[V, E]]:
        return self._iter_transitions(list(self._nodes), self._mod_count)

    def _iter_transitions(
        self, snapshot: List[V], expected: int
    ) -> Iterator[Transition[V, E]]:
        for vertex in snapshot:
            self._check_unchanged(expected)
            if vertex not in self._nodes:
                continue
            yield from self.transitions_from(vertex)
        self._check_unchanged(expected)

    def transitions_from(self, source: V) -> Iterator[Transition[V, E]]:
        source_node = self._get_node(source)
        for edge, child in source_node.edges().items():
            yield Transition(source=source, target=child.value, edge=edge)

    def successors(self, vertex: V) -> List[V]:
        node = self._get_node(vertex)
        seen: Dict[V, None] = {}
        for child in node.children():
            seen.setdefault(child.value, None)
        return list(seen)

    # -------------------- Traversal --------------------

    def traverse(self, start: V, edges: Iterable[E]) -> V:
        """
        Follow edges one at a time from start and return the vertex reached.

        A basic vertex without a transition for the current edge raises
        EdgeNotFoundError; a looped vertex stays where it is.
        """
        return self._walk(self._get_node(start), edges)

    def _walk(self, current: Node[V, E], edges: Iterable[E]) -> V:
        self._require(edges, "edges")
        for edge in edges:
            current = current.get_child(edge)
        return current.value

    # -------------------- Analytics --------------------

    def size(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return sum(node.child_count for node in self._nodes.values())

    # -------------------- Whole graph --------------------

    def clear(self) -> None:
        if self._nodes:
            self._mod_count += 1
        logging.getLogger("fsmgraph.graph").debug(
            "cleared graph vertices=%d", len(self._nodes)
        )
        self._nodes.clear()

    def clone(self) -> "TransitionGraph[V, E]":
        g = copy.copy(self)
        g._nodes = {}
        g._mod_count = 0
        for vertex, node in self._nodes.items():
            g._nodes[vertex] = Node.create(vertex, node.type)
        for vertex, node in self._nodes.items():
            twin = g._nodes[vertex]
            for edge, child in node.edges().items():
                twin.add_child(edge, g._nodes[child.value])
        return g

    def to_networkx(self) -> nx.MultiDiGraph:
        """
        Build a networkx view: one node per vertex with a ``vertex_type``
        attribute, one edge per transition keyed by its label.
        """
        view = nx.MultiDiGraph()
        for vertex, node in self._nodes.items():
            view.add_node(vertex, vertex_type=node.type)
        for transition in self.transitions():
            view.add_edge(transition.source, transition.target, key=transition.edge)
        return view

    # -------------------- Iteration --------------------

    def __iter__(self) -> Iterator[V]:
        return self._iter_vertices(list(self._nodes), self._mod_count)

    def _iter_vertices(self, snapshot: List[V], expected: int) -> Iterator[V]:
        for vertex in snapshot:
            self._check_unchanged(expected)
            yield vertex
        self._check_unchanged(expected)

    def _check_unchanged(self, expected: int) -> None:
        if self._strict_iteration and self._mod_count != expected:
            raise ConcurrentModificationError("graph vertices changed during iteration")

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(vertices={self.size()}, "
            f"transitions={self.edge_count()}, "
            f"default_vertex_type={self.default_vertex_type.name})"
        )

    # -------------------- Internals --------------------

    def _insert_node(self, vertex: V, vertex_type: VertexType) -> Node[V, E]:
        node: Node[V, E] = Node.create(vertex, vertex_type)
        logging.getLogger("fsmgraph.graph").debug(
            "added vertex=%r type=%s", vertex, vertex_type.name
        )

        self._nodes[vertex] = node
        self._mod_count += 1
        return node

    def _get_node(self, vertex: V) -> Node[V, E]:
        self._require(vertex, "vertex")
        node = self._nodes.get(vertex)
        if node is None:
            raise VertexNotFoundError(vertex)
        return node

    def _resolve_type(self, vertex_type: Optional[VertexType]) -> VertexType:
        if vertex_type is None:
            return self._default_vertex_type
        return self._validate_type(vertex_type)

    @staticmethod
    def _validate_type(vertex_type: Any) -> VertexType:
        if not isinstance(vertex_type, VertexType):
            raise InvalidArgumentError(f"vertex type must be a VertexType, got {vertex_type!r}")
        return vertex_type

    @staticmethod
    def _require(value: Any, name: str) -> None:
        if value is None:
            raise InvalidArgumentError(f"{name} cannot be None")
