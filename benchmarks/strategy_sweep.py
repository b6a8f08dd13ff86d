"""Sweep graph sizes and time every reverse-adjacency strategy and traversal."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Sequence

from sccbench.benchmark import collect_benchmark_env, run_comparison
from sccbench.core.graph import REVERSE_STRATEGIES
from sccbench.core.scc import TRAVERSALS
from sccbench.generate import random_graph


def run_shapes(shapes: Sequence[tuple[int, int]], seed: int, repeat: int) -> list[dict[str, Any]]:
    results: list[dict[str, Any]] = []
    for vertices, edges in shapes:
        for reverse in REVERSE_STRATEGIES:
            graph, edge_list = random_graph(vertices, edges, seed=seed, reverse=reverse)
            for traversal in TRAVERSALS:
                try:
                    result = run_comparison(graph, edge_list, traversal=traversal, repeat=repeat)
                except RecursionError:
                    print(f"[warn] {traversal} traversal exceeded the recursion limit at {vertices}x{edges}")
                    continue
                entry = result.to_dict()
                entry["shape"] = f"{vertices}x{edges}"
                results.append(entry)
                print(
                    f"shape={vertices}x{edges} reverse={reverse} traversal={traversal} "
                    f"-> {entry['elapsed_seconds'] * 1000:.3f} ms "
                    f"(networkx {entry['reference_elapsed_seconds'] * 1000:.3f} ms)"
                )
    return results


def main() -> None:
    parser = argparse.ArgumentParser(description="Kosaraju strategy sweep")
    parser.add_argument(
        "--shapes",
        nargs="*",
        default=["100x300", "1000x3000", "3000x9000"],
        help="List of VxE pairs",
    )
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--repeat", type=int, default=3)
    parser.add_argument("--json", type=Path, help="Optional path to write the results.")
    args = parser.parse_args()
    shapes = []
    for token in args.shapes:
        v, e = token.split("x")
        shapes.append((int(v), int(e)))
    results = run_shapes(shapes, args.seed, args.repeat)
    if args.json:
        payload = {"seed": args.seed, "env": collect_benchmark_env(), "cases": results}
        args.json.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")


if __name__ == "__main__":
    main()
