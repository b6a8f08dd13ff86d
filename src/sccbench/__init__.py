"""sccbench core package."""

from importlib import metadata

try:  # pragma: no cover - metadata only at runtime
    __version__ = metadata.version("sccbench")
except metadata.PackageNotFoundError:  # pragma: no cover - source tree / editable installs
    __version__ = "0.0.0"

from . import core  # noqa: E402
from .core.graph import DirectedGraph, GraphError, UnknownVertexError, build_graph  # noqa: E402
from .core.scc import SCCSolver, component_index, strongly_connected_components  # noqa: E402

__all__ = [
    "core",
    "DirectedGraph",
    "GraphError",
    "UnknownVertexError",
    "build_graph",
    "SCCSolver",
    "component_index",
    "strongly_connected_components",
    "__version__",
]
