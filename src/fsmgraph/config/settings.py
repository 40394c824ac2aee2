from __future__ import annotations

from dataclasses import dataclass

from fsmgraph.graph.graph_schema import VertexType

# ---------------------------------------------------------------------
# Transition graph behaviour
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Controls how a transition graph treats vertices added without an
    explicit type and how its iterators react to concurrent mutation.
    """

    default_vertex_type: VertexType = VertexType.BASIC
    strict_iteration: bool = True
