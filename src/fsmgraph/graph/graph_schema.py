from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Hashable, TypeVar, Union

from fsmgraph.errors import InvalidArgumentError

V = TypeVar("V", bound=Hashable)
E = TypeVar("E", bound=Hashable)


class VertexType(Enum):
    """
    Decides how a vertex resolves an edge it has no transition for.

    BASIC  - an undefined edge is a lookup failure.
    LOOPED - an undefined edge resolves back to the vertex itself.
    """

    BASIC = "basic"
    LOOPED = "looped"

    @classmethod
    def parse(cls, value: Union["VertexType", str]) -> "VertexType":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidArgumentError(f"Unknown vertex type: {value!r}")


@dataclass(frozen=True)
class Transition(Generic[V, E]):
    """
    Directed, labelled transition between two vertices.
    """

    source: V
    target: V
    edge: E
