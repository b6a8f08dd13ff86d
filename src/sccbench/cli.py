"""Command line entry point: build a random graph and time Kosaraju against networkx."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, Sequence

from . import __version__
from .benchmark import ComparisonResult, collect_benchmark_env, run_comparison
from .config import default_graph_size, resolve_log_level, resolve_reverse_strategy, resolve_traversal
from .core.graph import REVERSE_STRATEGIES
from .core.scc import TRAVERSALS
from .generate import random_graph
from .report import format_components, format_out_neighbors, format_reference_components, format_timings

LOGGER = logging.getLogger(__name__)


def _resolve_counts(counts: Sequence[int]) -> tuple[int, int]:
    if not counts:
        vertices, edges = default_graph_size()
    elif len(counts) == 2:
        vertices, edges = counts
    else:
        raise ValueError(f"Expected no positional arguments or exactly two (VERTICES EDGES), got {len(counts)}.")
    if vertices <= 1:
        raise ValueError(f"Vertex count must be greater than 1, got {vertices}.")
    if edges <= 0:
        raise ValueError(f"Edge count must be greater than 0, got {edges}.")
    return vertices, edges


def _summary_payload(args: argparse.Namespace, result: ComparisonResult) -> Dict[str, Any]:
    return {
        "sccbench_version": __version__,
        "seed": args.seed,
        "comparison": result.to_dict(),
        "env": collect_benchmark_env(),
    }


def command_compare(args: argparse.Namespace) -> None:
    vertices, edges = _resolve_counts(args.counts)
    reverse = resolve_reverse_strategy(args.reverse)
    traversal = resolve_traversal(args.traversal)
    if args.repeat < 1:
        raise ValueError(f"--repeat must be at least 1, got {args.repeat}.")

    graph, edge_list = random_graph(vertices, edges, seed=args.seed, reverse=reverse)
    result = run_comparison(graph, edge_list, traversal=traversal, repeat=args.repeat)

    if not args.quiet:
        print("Graph edges:")
        print(format_out_neighbors(graph))
        print()
        print("Components (own implementation):")
        print(format_components(result.components))
        print()
        print("Components (networkx):")
        print(format_reference_components(result.reference_components))
        print()
    print(f"Vertices: {vertices}, edges: {edges}, components: {len(result.components)}")
    print(format_timings(result))

    if args.json:
        args.json.write_text(json.dumps(_summary_payload(args, result), indent=2) + "\n", encoding="utf-8")
        print(f"JSON summary saved to {args.json}.")


def build_parser() -> argparse.ArgumentParser:
    description = (
        "Generate a random directed graph, compute its strongly connected components with "
        "Kosaraju's algorithm, and compare the running time against networkx.\n\n"
        "Run with no positional arguments to use the default graph size, or pass VERTICES EDGES."
    )
    parser = argparse.ArgumentParser(
        prog="sccbench",
        description=description,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "counts",
        nargs="*",
        type=int,
        metavar="N",
        help="Vertex count (> 1) followed by edge count (> 0).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for graph generation.")
    parser.add_argument(
        "--reverse",
        choices=REVERSE_STRATEGIES,
        default=None,
        help="Reverse adjacency strategy (default: materialized; 'scan' is O(V+E) per lookup).",
    )
    parser.add_argument(
        "--traversal",
        choices=TRAVERSALS,
        default=None,
        help="DFS formulation (default: iterative).",
    )
    parser.add_argument("--repeat", type=int, default=1, help="Time each implementation this many times, keep the best.")
    parser.add_argument("--json", type=Path, help="Optional path to write a JSON summary.")
    parser.add_argument("--quiet", action="store_true", help="Only print counts and timings.")
    parser.add_argument("--log-level", default=None, help="Logging level (default: WARNING or $SCCBENCH_LOG_LEVEL).")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.set_defaults(func=command_compare)
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        logging.basicConfig(
            level=resolve_log_level(args.log_level),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        args.func(args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":  # pragma: no cover - manual invocation path
    main()
