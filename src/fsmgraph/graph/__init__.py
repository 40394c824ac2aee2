"""
Graph subsystem for fsmgraph.

Defines the transition store and traversal engine:
- per-vertex nodes with basic or looped miss behaviour
- the mutable transition graph and its rooted tree variant
- builders and abstract machine interfaces
"""

from fsmgraph.graph.graph_schema import Transition, VertexType
from fsmgraph.graph.node import Node
from fsmgraph.graph.machine import FiniteStateMachine, MutableFiniteStateMachine
from fsmgraph.graph.graph_store import TransitionGraph
from fsmgraph.graph.graph_tree import TransitionTree
from fsmgraph.graph.graph_builder import GraphBuilder

__all__ = [
    "Transition",
    "VertexType",
    "Node",
    "FiniteStateMachine",
    "MutableFiniteStateMachine",
    "TransitionGraph",
    "TransitionTree",
    "GraphBuilder",
]
