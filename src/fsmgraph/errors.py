from __future__ import annotations

from typing import Any


class TransitionGraphError(Exception):
    """Base exception for transition graph operations."""


class InvalidArgumentError(TransitionGraphError, ValueError):
    """Raised when a required vertex, edge or vertex type argument is missing or malformed."""


# ---------------------------------------------------------------------
# Not found
# ---------------------------------------------------------------------


class NotFoundError(TransitionGraphError, LookupError):
    """Raised when an operation references something absent from the graph."""


class VertexNotFoundError(NotFoundError):
    """Raised when a vertex is not in the graph."""

    def __init__(self, vertex: Any) -> None:
        self.vertex = vertex
        super().__init__(f"Graph does not contain the vertex: [{vertex}]")


class EdgeNotFoundError(NotFoundError):
    """Raised when a basic vertex has no outgoing transition on the requested edge."""

    def __init__(self, vertex: Any, edge: Any) -> None:
        self.vertex = vertex
        self.edge = edge
        super().__init__(f"Vertex [{vertex}] has no transition on edge: [{edge}]")


class TransitionNotFoundError(NotFoundError):
    """Raised when no transition on the given edge leads from source to target."""

    def __init__(self, source: Any, target: Any, edge: Any) -> None:
        self.source = source
        self.target = target
        self.edge = edge
        super().__init__(
            f"Transition not found from [{source}] to [{target}] on edge [{edge}]"
        )


# ---------------------------------------------------------------------
# Already exists
# ---------------------------------------------------------------------


class AlreadyExistsError(TransitionGraphError, ValueError):
    """Raised when adding a vertex or transition that is already present."""


class VertexExistsError(AlreadyExistsError):
    """Raised when adding a vertex that is already in the graph."""

    def __init__(self, vertex: Any) -> None:
        self.vertex = vertex
        super().__init__(f"Vertex [{vertex}] is already added to the graph")


class TransitionExistsError(AlreadyExistsError):
    """Raised when the source vertex already has a transition on the edge."""

    def __init__(self, source: Any, edge: Any) -> None:
        self.source = source
        self.edge = edge
        super().__init__(
            f"Transition already exists from: [{source}] on edge: [{edge}]"
        )


# ---------------------------------------------------------------------
# Iteration
# ---------------------------------------------------------------------


class ConcurrentModificationError(TransitionGraphError, RuntimeError):
    """Raised when the graph is mutated while one of its iterators is active."""
