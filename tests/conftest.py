"""Shared fixtures for posture tests."""

import logging

import pytest

from posture.diagram import Diagram
from posture.models import ConnectionRisk, Edge, Graph, Node, Position


# ---------------------------------------------------------------------------
# Auto-use fixtures: cleanup global state between tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _reset_metrics():
    """Reset in-process metric counters after every test."""
    yield
    from posture.observability import reset_metrics
    reset_metrics()


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """main() installs a JSON handler on the root logger; undo it per test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# Graph builders
# ---------------------------------------------------------------------------

def make_node(node_id: str, type_id: str | None = None, x: float = 0.0, y: float = 0.0) -> Node:
    """Node with a fixed id; the type defaults to the id's prefix before '-'."""
    return Node(id=node_id, type_id=type_id or node_id.split("-")[0], position=Position(x, y))


def make_graph(node_ids: list[str], edges: list[tuple[str, str]] | None = None) -> Graph:
    """Graph from node ids like 'firewall-1' and (source, target) pairs."""
    nodes = tuple(make_node(n) for n in node_ids)
    return Graph(
        nodes=nodes,
        edges=tuple(Edge(s, t, ConnectionRisk.SECURE) for s, t in (edges or [])),
    )


def make_chain(*node_ids: str) -> Graph:
    """Graph whose nodes form one directed chain in argument order."""
    pairs = list(zip(node_ids, node_ids[1:]))
    return make_graph(list(node_ids), pairs)


@pytest.fixture
def diagram():
    return Diagram()


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from posture.api import create_app
    return TestClient(create_app())
