"""Core data types for posture."""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from posture.defaults import EDGE_STROKE_DEFAULT, EDGE_STROKE_WIDTH, EDGE_STROKES


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def new_id() -> str:
    return uuid.uuid4().hex[:12]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Tier(str, Enum):
    INFRASTRUCTURE = "Infrastructure Layer"
    APPLICATION = "Application & Software Layer"
    SECURITY_CONTROLS = "Security Controls Layer"
    HUMAN_GOVERNANCE = "Human & Governance Layer"


class ConnectionRisk(str, Enum):
    SECURE = "secure"
    WARNING = "warning"
    ERROR = "error"
    OFFLINE = "offline"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class PostureLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ComponentType:
    id: str
    name: str
    short_name: str
    category: str
    section: str
    tier: Tier
    description: str
    benefits: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "short_name": self.short_name,
            "category": self.category,
            "section": self.section,
            "tier": self.tier.value,
            "description": self.description,
            "benefits": list(self.benefits),
        }


# ---------------------------------------------------------------------------
# Diagram elements
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Position:
    x: float = 0.0
    y: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, d: dict[str, Any] | None) -> Position:
        d = d or {}
        return cls(x=float(d.get("x", 0.0)), y=float(d.get("y", 0.0)))


@dataclass(frozen=True)
class Node:
    id: str
    type_id: str
    position: Position = field(default_factory=Position)
    connected: bool = False
    status: ConnectionRisk = ConnectionRisk.OFFLINE

    @classmethod
    def create(cls, type_id: str, position: Position | None = None) -> Node:
        return cls(id=f"{type_id}-{new_id()}", type_id=type_id,
                   position=position or Position())

    def with_status(self, status: ConnectionRisk) -> Node:
        return replace(self, connected=True, status=status)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type_id,
            "position": self.position.to_dict(),
            "connections": {
                "connected": self.connected,
                "status": self.status.value,
            },
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Node:
        conn = d.get("connections", {})
        return cls(
            id=d["id"],
            type_id=d["type"],
            position=Position.from_dict(d.get("position")),
            connected=bool(conn.get("connected", False)),
            status=ConnectionRisk(conn.get("status", "offline")),
        )


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    risk: ConnectionRisk = ConnectionRisk.OFFLINE
    message: str = ""

    @property
    def id(self) -> str:
        return f"e-{self.source}-{self.target}"

    @property
    def style(self) -> dict[str, Any]:
        return {
            "stroke": EDGE_STROKES.get(self.risk.value, EDGE_STROKE_DEFAULT),
            "strokeWidth": EDGE_STROKE_WIDTH,
        }

    def touches(self, node_id: str) -> bool:
        return node_id in (self.source, self.target)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "risk": self.risk.value,
            "message": self.message,
            "animated": True,
            "style": self.style,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Edge:
        return cls(
            source=d["source"],
            target=d["target"],
            risk=ConnectionRisk(d.get("risk", "offline")),
            message=d.get("message", ""),
        )


# ---------------------------------------------------------------------------
# Graph snapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Graph:
    """Immutable snapshot of placed nodes and the edges between them.

    Every edge endpoint must name a node in ``nodes``; ``from_dict`` rejects
    documents that violate this.
    """

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()

    def node(self, node_id: str) -> Node | None:
        for n in self.nodes:
            if n.id == node_id:
                return n
        return None

    def has_node(self, node_id: str) -> bool:
        return self.node(node_id) is not None

    def type_of(self, node_id: str) -> str | None:
        n = self.node(node_id)
        return n.type_id if n else None

    def type_ids(self) -> set[str]:
        return {n.type_id for n in self.nodes}

    def edge(self, source: str, target: str) -> Edge | None:
        for e in self.edges:
            if e.source == source and e.target == target:
                return e
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Graph:
        nodes = tuple(Node.from_dict(n) for n in d.get("nodes", []))
        edges = tuple(Edge.from_dict(e) for e in d.get("edges", []))
        ids = {n.id for n in nodes}
        if len(ids) != len(nodes):
            raise ValueError("Duplicate node ids in diagram")
        for e in edges:
            if e.source not in ids or e.target not in ids:
                raise ValueError(f"Edge {e.id} references a node that does not exist")
        return cls(nodes=nodes, edges=edges)


# ---------------------------------------------------------------------------
# Evaluation results
# ---------------------------------------------------------------------------

@dataclass
class ConnectionVerdict:
    risk: ConnectionRisk
    message: str
    valid: bool = True
    paths: list[list[str]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "risk": self.risk.value,
            "message": self.message,
            "paths": self.paths,
        }


@dataclass(frozen=True)
class Gap:
    id: str
    name: str
    description: str
    severity: Severity
    recommendation: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "severity": self.severity.value,
            "recommendation": self.recommendation,
        }


@dataclass
class Assessment:
    score: int
    level: PostureLevel
    color: str
    gaps: list[Gap] = field(default_factory=list)
    compliance: dict[str, int] = field(default_factory=dict)
    factors: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "level": self.level.value,
            "color": self.color,
            "gaps": [g.to_dict() for g in self.gaps],
            "compliance": dict(self.compliance),
            "factors": dict(self.factors),
        }
