"""Diagram session: the in-memory owner of the current component graph.

All mutations build a new ``Graph`` snapshot and swap it in whole, so readers
never observe a half-applied change.  Connection risk is computed against
the snapshot as it was before the new edge is added.
"""

from __future__ import annotations

import logging
import threading

from posture.catalog import get_component
from posture.models import (
    Assessment,
    ConnectionVerdict,
    Edge,
    Graph,
    Node,
    Position,
)
from posture.risk import evaluate_connection
from posture.scoring import assess
from posture.templates import get_template

log = logging.getLogger("posture.diagram")


class Diagram:
    """Ephemeral diagram session: nodes, edges and the operations that change them."""

    def __init__(self, graph: Graph | None = None) -> None:
        self._graph = graph or Graph()
        self._lock = threading.Lock()

    @property
    def graph(self) -> Graph:
        return self._graph

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_node(self, type_id: str, position: Position | None = None) -> Node:
        """Place a new instance of a catalog component.

        Raises ``UnknownComponentError`` for ids not in the catalog.
        """
        get_component(type_id)
        node = Node.create(type_id, position)
        with self._lock:
            self._graph = Graph(nodes=self._graph.nodes + (node,), edges=self._graph.edges)
        log.info("Added node %s", node.id, extra={"node_id": node.id})
        return node

    def connect(self, source_id: str, target_id: str) -> Edge | None:
        """Draw a source->target edge, classify it, and mark both endpoints.

        Returns None (and changes nothing) when either node is absent.
        Connecting an already connected pair re-classifies the existing edge.
        """
        with self._lock:
            graph = self._graph
            if not graph.has_node(source_id) or not graph.has_node(target_id):
                log.warning("Ignoring connection %s -> %s: node not in diagram",
                            source_id, target_id)
                return None

            verdict = evaluate_connection(graph, source_id, target_id)
            edge = Edge(source=source_id, target=target_id,
                        risk=verdict.risk, message=verdict.message)

            edges = tuple(e for e in graph.edges
                          if not (e.source == source_id and e.target == target_id))
            nodes = tuple(
                n.with_status(verdict.risk) if n.id in (source_id, target_id) else n
                for n in graph.nodes
            )
            self._graph = Graph(nodes=nodes, edges=edges + (edge,))

        log.info("Connected %s -> %s: %s", source_id, target_id, edge.risk.value,
                 extra={"edge_id": edge.id, "risk": edge.risk.value})
        return edge

    def delete_node(self, node_id: str) -> bool:
        """Remove a node and every edge touching it.  False if absent."""
        with self._lock:
            graph = self._graph
            if not graph.has_node(node_id):
                return False
            self._graph = Graph(
                nodes=tuple(n for n in graph.nodes if n.id != node_id),
                edges=tuple(e for e in graph.edges if not e.touches(node_id)),
            )
        log.info("Deleted node %s", node_id, extra={"node_id": node_id})
        return True

    def clear(self) -> None:
        with self._lock:
            self._graph = Graph()
        log.info("Cleared diagram")

    def load_template(self, template_id: str) -> Graph:
        """Replace the diagram with a predefined architecture.

        The whole template graph is built off to the side and swapped in
        at once.  Nodes go at their template positions and stay unconnected
        and offline; each connection is classified by the static rule alone,
        against the bare nodes.  Connections to component types the template
        does not place are skipped.
        """
        template = get_template(template_id)

        nodes: list[Node] = []
        placed: dict[str, str] = {}
        for cfg in template.nodes:
            get_component(cfg.type_id)
            node = Node.create(cfg.type_id, cfg.position)
            nodes.append(node)
            placed[cfg.type_id] = node.id
        bare = Graph(nodes=tuple(nodes))

        edges: list[Edge] = []
        for cfg in template.nodes:
            for target_type in cfg.connections:
                target_id = placed.get(target_type)
                if target_id is None:
                    log.debug("Template %s: no %s node for %s", template_id, target_type, cfg.type_id)
                    continue
                verdict = evaluate_connection(bare, placed[cfg.type_id], target_id)
                edges.append(Edge(source=placed[cfg.type_id], target=target_id,
                                  risk=verdict.risk, message=verdict.message))

        graph = Graph(nodes=bare.nodes, edges=tuple(edges))
        with self._lock:
            self._graph = graph
        log.info("Loaded template %s: %d nodes, %d edges", template_id,
                 len(graph.nodes), len(graph.edges))
        return graph

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def evaluate(self, source_id: str, target_id: str) -> ConnectionVerdict:
        """Classify a candidate connection without drawing it."""
        return evaluate_connection(self._graph, source_id, target_id)

    def assess(self) -> Assessment:
        return assess(self._graph)
