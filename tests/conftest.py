from __future__ import annotations

import pytest

from fsmgraph.graph.graph_store import TransitionGraph

from graph_states import END, MID, START


@pytest.fixture()
def graph() -> TransitionGraph:
    return TransitionGraph()


@pytest.fixture()
def player() -> TransitionGraph:
    g: TransitionGraph = TransitionGraph()
    for state in ("Stop", "Play", "Pause"):
        g.add_vertex(state)

    g.add_transition("Stop", "Play", 1)
    g.add_transition("Play", "Pause", 1)
    g.add_transition("Play", "Stop", 2)
    g.add_transition("Pause", "Play", 1)
    g.add_transition("Pause", "Stop", 2)
    return g


@pytest.fixture()
def cascade() -> TransitionGraph:
    g: TransitionGraph = TransitionGraph()
    for state in (START, MID, END):
        g.add_vertex(state)

    g.add_transition(START, END, 1)
    g.add_transition(START, MID, 2)
    g.add_transition(MID, MID, 2)
    g.add_transition(MID, END, 3)
    g.add_transition(START, END, 10)
    return g
