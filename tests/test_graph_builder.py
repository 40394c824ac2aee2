import networkx as nx
import pytest

from fsmgraph.errors import VertexExistsError
from fsmgraph.graph.graph_builder import GraphBuilder
from fsmgraph.graph.graph_schema import Transition, VertexType
from fsmgraph.graph.graph_store import TransitionGraph
from fsmgraph.graph.machine import FiniteStateMachine, MutableFiniteStateMachine


def _player() -> TransitionGraph:
    return (
        GraphBuilder(TransitionGraph())
        .add_vertices(["Stop", "Play", ("Pause", VertexType.LOOPED)])
        .add_transitions(
            [
                Transition("Stop", "Play", 1),
                Transition("Play", "Pause", 1),
                Transition("Play", "Stop", 2),
                Transition("Pause", "Play", 1),
                Transition("Pause", "Stop", 2),
            ]
        )
        .build()
    )


def test_builder_populates_graph():
    graph = _player()

    assert graph.size() == 3
    assert graph.edge_count() == 5
    assert graph.get_vertex_type("Pause") is VertexType.LOOPED
    assert graph.get_vertex_type("Stop") is VertexType.BASIC
    assert graph.traverse("Stop", [1, 1, 9]) == "Pause"


def test_builder_accepts_tuple_vertices_without_type():
    graph = GraphBuilder(TransitionGraph()).add_vertices([(1, 2), (3, 4)]).build()

    assert graph.has_vertex((1, 2))
    assert graph.get_vertex_type((3, 4)) is VertexType.BASIC


def test_builder_propagates_errors():
    builder = GraphBuilder(TransitionGraph())

    with pytest.raises(VertexExistsError):
        builder.add_vertices(["A", "A"])


def test_transition_is_hashable_value():
    assert Transition("A", "B", 1) == Transition("A", "B", 1)
    assert len({Transition("A", "B", 1), Transition("A", "B", 1)}) == 1


def test_graph_implements_machine_interfaces():
    graph = _player()

    assert isinstance(graph, MutableFiniteStateMachine)
    assert isinstance(graph, FiniteStateMachine)


def test_to_networkx_view():
    graph = _player()

    view = graph.to_networkx()

    assert isinstance(view, nx.MultiDiGraph)
    assert set(view.nodes) == {"Stop", "Play", "Pause"}
    assert view.nodes["Pause"]["vertex_type"] is VertexType.LOOPED
    assert view.number_of_edges() == 5
    assert view.has_edge("Play", "Stop", key=2)
    assert view.has_edge("Pause", "Play", key=1)
    assert not view.has_edge("Stop", "Pause")


def test_to_networkx_keeps_parallel_labels():
    graph: TransitionGraph = TransitionGraph()
    graph.add_vertex("A")
    graph.add_vertex("B")
    graph.add_transitions("A", "B", ["x", "y"])

    view = graph.to_networkx()

    assert view.number_of_edges("A", "B") == 2
    assert set(view["A"]["B"]) == {"x", "y"}
