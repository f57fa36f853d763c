"""Directed graph construction, bounded simple-path enumeration and metrics."""

from __future__ import annotations

from typing import Any

import networkx as nx

from posture.defaults import MAX_PATH_DEPTH
from posture.models import Graph


def build_graph(graph: Graph) -> nx.DiGraph:
    """Build a networkx digraph from a diagram snapshot.

    Nodes carry ``type_id``; edges carry ``risk``.  Insertion order follows
    the snapshot so path enumeration is deterministic.
    """
    G = nx.DiGraph()
    for n in graph.nodes:
        G.add_node(n.id, type_id=n.type_id)
    for e in graph.edges:
        G.add_edge(e.source, e.target, risk=e.risk.value)
    return G


def find_paths(
    G: nx.DiGraph,
    source: str,
    target: str,
    max_depth: int = MAX_PATH_DEPTH,
) -> list[list[str]]:
    """All simple directed paths from source to target of at most ``max_depth`` hops.

    The visited set is scoped to the current branch, so a node may appear on
    several paths but never twice on one.  The list is complete up to the
    bound; anything longer is silently left out.
    """
    if source not in G or target not in G:
        return []
    if source == target:
        return [[source]]
    return [list(p) for p in nx.all_simple_paths(G, source, target, cutoff=max_depth)]


def type_path(G: nx.DiGraph, path: list[str]) -> list[str]:
    return [G.nodes[n].get("type_id", "") for n in path]


def graph_metrics(G: nx.DiGraph) -> dict[str, Any]:
    """Summary metrics of the diagram graph."""
    if len(G) == 0:
        return {"nodes": 0, "edges": 0, "components": 0, "density": 0.0,
                "isolated": [], "cyclic": False}

    return {
        "nodes": len(G),
        "edges": G.number_of_edges(),
        "components": nx.number_weakly_connected_components(G),
        "density": round(nx.density(G), 4),
        "isolated": sorted(nx.isolates(G)),
        "cyclic": not nx.is_directed_acyclic_graph(G),
    }
