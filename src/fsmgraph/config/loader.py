from __future__ import annotations

import logging
from typing import Iterable, Optional

from dynaconf import Dynaconf

from fsmgraph.config.constants import DEFAULTS
from fsmgraph.config.settings import GraphConfig
from fsmgraph.errors import InvalidArgumentError
from fsmgraph.graph.graph_schema import VertexType


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off"}:
            return False
    if isinstance(value, int):
        return bool(value)
    raise InvalidArgumentError(f"Expected a boolean setting, got {value!r}")


def load_graph_config(settings_files: Optional[Iterable[str]] = None) -> GraphConfig:
    """
    Load graph settings from FSMGRAPH_* environment variables, a .env file
    and the given settings files, falling back to DEFAULTS.
    """
    settings = Dynaconf(
        envvar_prefix="FSMGRAPH",
        load_dotenv=True,
        settings_files=list(settings_files or []),
    )

    config = GraphConfig(
        default_vertex_type=VertexType.parse(
            settings.get("DEFAULT_VERTEX_TYPE", DEFAULTS["DEFAULT_VERTEX_TYPE"])
        ),
        strict_iteration=_parse_bool(
            settings.get("STRICT_ITERATION", DEFAULTS["STRICT_ITERATION"])
        ),
    )

    logging.getLogger("fsmgraph.config").info(
        "loaded graph config default_vertex_type=%s strict_iteration=%s",
        config.default_vertex_type.name,
        config.strict_iteration,
    )
    return config
