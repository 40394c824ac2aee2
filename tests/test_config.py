import logging

import pytest

from fsmgraph.config.loader import load_graph_config
from fsmgraph.config.settings import GraphConfig
from fsmgraph.errors import ConcurrentModificationError, InvalidArgumentError
from fsmgraph.graph.graph_schema import VertexType
from fsmgraph.graph.graph_store import TransitionGraph


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    monkeypatch.delenv("FSMGRAPH_DEFAULT_VERTEX_TYPE", raising=False)
    monkeypatch.delenv("FSMGRAPH_STRICT_ITERATION", raising=False)
    # keep a stray .env in the working directory out of the picture
    monkeypatch.chdir(tmp_path)


def test_defaults():
    config = load_graph_config()

    assert config == GraphConfig()
    assert config.default_vertex_type is VertexType.BASIC
    assert config.strict_iteration is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FSMGRAPH_DEFAULT_VERTEX_TYPE", "LOOPED")
    monkeypatch.setenv("FSMGRAPH_STRICT_ITERATION", "false")

    config = load_graph_config()

    assert config.default_vertex_type is VertexType.LOOPED
    assert config.strict_iteration is False


def test_settings_file(tmp_path):
    settings_file = tmp_path / "fsmgraph.toml"
    settings_file.write_text('default_vertex_type = "looped"\n')

    config = load_graph_config([str(settings_file)])

    assert config.default_vertex_type is VertexType.LOOPED
    assert config.strict_iteration is True


def test_unknown_vertex_type_is_rejected(monkeypatch):
    monkeypatch.setenv("FSMGRAPH_DEFAULT_VERTEX_TYPE", "sticky")

    with pytest.raises(InvalidArgumentError):
        load_graph_config()


def test_loading_is_logged(caplog):
    caplog.set_level(logging.INFO, logger="fsmgraph.config")

    load_graph_config()

    assert "default_vertex_type=BASIC" in caplog.text


def test_vertex_type_parse():
    assert VertexType.parse("Basic") is VertexType.BASIC
    assert VertexType.parse(" looped ") is VertexType.LOOPED
    assert VertexType.parse(VertexType.LOOPED) is VertexType.LOOPED
    with pytest.raises(InvalidArgumentError):
        VertexType.parse(3)


def test_graph_from_config():
    graph: TransitionGraph = TransitionGraph.from_config(
        GraphConfig(default_vertex_type=VertexType.LOOPED, strict_iteration=False)
    )
    graph.add_vertex("A")

    assert graph.get_vertex_type("A") is VertexType.LOOPED
    assert graph.traverse("A", ["anything"]) == "A"

    it = iter(graph)
    graph.add_vertex("B")
    assert list(it) == ["A"]


def test_strict_graph_from_config():
    graph: TransitionGraph = TransitionGraph.from_config(GraphConfig())
    graph.add_vertex("A")
    graph.add_vertex("B")

    it = iter(graph)
    next(it)
    graph.remove_vertex("A")

    with pytest.raises(ConcurrentModificationError):
        next(it)
