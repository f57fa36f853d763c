"""Diagram export document: the JSON artifact a user downloads, and its loader."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from posture.catalog import find_component
from posture.defaults import EXPORT_FILENAME
from posture.models import Graph

log = logging.getLogger("posture.exports")


def export_document(graph: Graph) -> dict[str, Any]:
    """Build the export document: nodes, edges and the catalog entry of each node.

    Field names and nesting are stable so the document can be read back by
    ``load_diagram``.
    """
    components = []
    for n in graph.nodes:
        component = find_component(n.type_id)
        components.append({
            "id": n.id,
            "type": n.type_id,
            "position": n.position.to_dict(),
            "component": component.to_dict() if component else None,
        })
    return {
        "nodes": [n.to_dict() for n in graph.nodes],
        "edges": [e.to_dict() for e in graph.edges],
        "components": components,
    }


def export_diagram(graph: Graph, output_path: str | Path | None = None) -> dict[str, Any]:
    """Write the export document to disk and report where it went."""
    path = Path(output_path or EXPORT_FILENAME)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(export_document(graph), f, indent=2)

    log.info("Exported %d nodes, %d edges to %s", len(graph.nodes), len(graph.edges), path)
    return {
        "nodes": len(graph.nodes),
        "edges": len(graph.edges),
        "output_path": str(path),
    }


def load_document(data: dict[str, Any]) -> Graph:
    """Rebuild a graph from an export document.

    Raises ``ValueError`` for documents that are not exports or that carry
    edges pointing at missing nodes.
    """
    if not isinstance(data, dict) or "nodes" not in data:
        raise ValueError("Not a diagram export: missing 'nodes'")
    try:
        return Graph.from_dict(data)
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed diagram export: {e}") from e


def load_diagram(path: str | Path) -> Graph:
    with open(path) as f:
        data = json.load(f)
    return load_document(data)
