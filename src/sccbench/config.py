"""sccbench runtime configuration helpers."""

from __future__ import annotations

import os
import logging

from .core.graph import MATERIALIZED, REVERSE_STRATEGIES
from .core.scc import ITERATIVE, TRAVERSALS

_REVERSE_ENV = "SCCBENCH_REVERSE_STRATEGY"
_TRAVERSAL_ENV = "SCCBENCH_TRAVERSAL"
_VERTICES_ENV = "SCCBENCH_VERTICES"
_EDGES_ENV = "SCCBENCH_EDGES"
_LOG_LEVEL_ENV = "SCCBENCH_LOG_LEVEL"

DEFAULT_VERTICES = 10
DEFAULT_EDGES = 20

LOGGER = logging.getLogger(__name__)


def _env_choice(env_name: str) -> str | None:
    value = os.getenv(env_name)
    if not value:
        return None
    return value.strip().lower() or None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got '{raw}'.") from exc


def resolve_reverse_strategy(preferred: str | None) -> str:
    """Resolve the reverse-adjacency strategy requested by CLI/env."""

    strategy = (preferred or _env_choice(_REVERSE_ENV) or MATERIALIZED).lower()
    if strategy not in REVERSE_STRATEGIES:
        raise ValueError(f"Unknown reverse strategy '{strategy}'. Expected one of: {', '.join(REVERSE_STRATEGIES)}.")
    LOGGER.debug("resolve_reverse_strategy strategy=%s env=%s", strategy, _env_choice(_REVERSE_ENV))
    return strategy


def resolve_traversal(preferred: str | None) -> str:
    traversal = (preferred or _env_choice(_TRAVERSAL_ENV) or ITERATIVE).lower()
    if traversal not in TRAVERSALS:
        raise ValueError(f"Unknown traversal '{traversal}'. Expected one of: {', '.join(TRAVERSALS)}.")
    LOGGER.debug("resolve_traversal traversal=%s env=%s", traversal, _env_choice(_TRAVERSAL_ENV))
    return traversal


def default_graph_size() -> tuple[int, int]:
    """Vertex and edge counts used when the CLI gets no positional arguments."""

    vertices = _env_int(_VERTICES_ENV, DEFAULT_VERTICES)
    edges = _env_int(_EDGES_ENV, DEFAULT_EDGES)
    LOGGER.debug("default_graph_size vertices=%s edges=%s", vertices, edges)
    return vertices, edges


def resolve_log_level(preferred: str | None) -> int:
    name = (preferred or os.getenv(_LOG_LEVEL_ENV) or "WARNING").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{name}'.")
    return level


__all__ = [
    "resolve_reverse_strategy",
    "resolve_traversal",
    "default_graph_size",
    "resolve_log_level",
    "DEFAULT_VERTICES",
    "DEFAULT_EDGES",
    "_REVERSE_ENV",
    "_TRAVERSAL_ENV",
    "_VERTICES_ENV",
    "_EDGES_ENV",
    "_LOG_LEVEL_ENV",
]
