from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Iterator, Optional

from fsmgraph.graph.graph_schema import E, V, VertexType


class FiniteStateMachine(ABC, Generic[V, E]):
    """
    Read-only view of a finite state machine.

    States are vertices, transitions are directed labelled edges. How an
    undefined edge is resolved during traversal depends on the vertex type
    of the vertex it is resolved from.
    """

    @abstractmethod
    def has_vertex(self, vertex: V) -> bool:
        raise NotImplementedError

    @abstractmethod
    def get_vertex_type(self, vertex: V) -> VertexType:
        raise NotImplementedError

    @abstractmethod
    def has_transition(self, source: V, target: V, edge: E) -> bool:
        raise NotImplementedError

    @abstractmethod
    def has_any_transition(self, source: V, target: V) -> bool:
        raise NotImplementedError

    @abstractmethod
    def traverse(self, start: V, edges: Iterable[E]) -> V:
        raise NotImplementedError

    @abstractmethod
    def size(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def __iter__(self) -> Iterator[V]:
        raise NotImplementedError

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, vertex: object) -> bool:
        if vertex is None:
            return False
        return self.has_vertex(vertex)  # type: ignore[arg-type]


class MutableFiniteStateMachine(FiniteStateMachine[V, E]):
    """
    Finite state machine whose vertices and transitions can be changed.
    """

    @abstractmethod
    def add_vertex(self, vertex: V, vertex_type: Optional[VertexType] = None) -> None:
        raise NotImplementedError

    @abstractmethod
    def remove_vertex(self, vertex: V) -> None:
        raise NotImplementedError

    @abstractmethod
    def add_transition(self, source: V, target: V, edge: E) -> None:
        raise NotImplementedError

    @abstractmethod
    def add_transitions(self, source: V, target: V, edges: Iterable[E]) -> None:
        raise NotImplementedError

    @abstractmethod
    def remove_transition(self, source: V, target: V, edge: E) -> None:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError
