from __future__ import annotations

from typing import Generic, Iterable, Tuple, Union

from fsmgraph.graph.graph_schema import E, Transition, V, VertexType
from fsmgraph.graph.graph_store import TransitionGraph


class GraphBuilder(Generic[V, E]):
    """
    Populates a transition graph from structured inputs.

    Vertices are given either as plain values (default vertex type) or as
    ``(value, VertexType)`` pairs.
    """

    def __init__(self, graph: TransitionGraph[V, E]) -> None:
        self.graph = graph

    def add_vertices(self, vertices: Iterable[Union[V, Tuple[V, VertexType]]]) -> "GraphBuilder[V, E]":
        for item in vertices:
            if isinstance(item, tuple) and len(item) == 2 and isinstance(item[1], VertexType):
                self.graph.add_vertex(item[0], item[1])
            else:
                self.graph.add_vertex(item)  # type: ignore[arg-type]
        return self

    def add_transitions(self, transitions: Iterable[Transition[V, E]]) -> "GraphBuilder[V, E]":
        for transition in transitions:
            self.graph.add_transition(transition.source, transition.target, transition.edge)
        return self

    def build(self) -> TransitionGraph[V, E]:
        return self.graph
