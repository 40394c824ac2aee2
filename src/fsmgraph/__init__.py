"""
fsmgraph
========

A generic, mutable labelled transition graph used as the engine behind
finite state machines.

Core idea:
- States are vertices, inputs are edge labels, and replaying a sequence
  of labels walks the graph to a final state.

Public API:
- TransitionGraph
- TransitionTree
- GraphBuilder
- VertexType
- load_graph_config
"""

from fsmgraph.graph.graph_schema import Transition, VertexType
from fsmgraph.graph.graph_store import TransitionGraph
from fsmgraph.graph.graph_tree import TransitionTree
from fsmgraph.graph.graph_builder import GraphBuilder
from fsmgraph.config.loader import load_graph_config

__all__ = [
    "Transition",
    "VertexType",
    "TransitionGraph",
    "TransitionTree",
    "GraphBuilder",
    "load_graph_config",
]

__version__ = "0.1.0"
