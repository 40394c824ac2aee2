"""
Configuration layer for fsmgraph.

Configuration is explicit: a GraphConfig is built once (directly or via
load_graph_config) and handed to TransitionGraph.from_config.
"""

from fsmgraph.config.settings import GraphConfig
from fsmgraph.config.loader import load_graph_config

__all__ = [
    "GraphConfig",
    "load_graph_config",
]
