"""Predefined architectures for common organisation profiles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from posture.models import Position


class UnknownTemplateError(KeyError):
    """Raised when a template id is not defined."""


@dataclass(frozen=True)
class NodeConfig:
    type_id: str
    position: Position
    connections: tuple[str, ...] = ()


@dataclass(frozen=True)
class Template:
    id: str
    name: str
    description: str
    nodes: tuple[NodeConfig, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "nodes": [
                {"type": n.type_id, "position": n.position.to_dict(),
                 "connections": list(n.connections)}
                for n in self.nodes
            ],
        }


def _n(type_id: str, x: float, y: float, *connections: str) -> NodeConfig:
    return NodeConfig(type_id=type_id, position=Position(x, y), connections=connections)


TEMPLATES: tuple[Template, ...] = (
    Template("small-startup", "Small Startup", "Cloud-native, minimal security controls", (
        _n("firewall", 250, 50),
        _n("waf", 400, 150, "firewall"),
        _n("webapp", 250, 150, "waf"),
        _n("api", 250, 250, "webapp"),
        _n("database", 250, 350, "api"),
        _n("iam", 100, 150, "webapp"),
        _n("mfa", 100, 250, "iam"),
    )),
    Template("mid-size", "Mid-size Business", "Hybrid infrastructure, maturing security", (
        _n("firewall", 250, 50),
        _n("router", 250, 150, "firewall"),
        _n("switch", 250, 250, "router"),
        _n("waf", 400, 250, "firewall"),
        _n("server", 150, 350, "switch"),
        _n("webapp", 400, 350, "waf"),
        _n("api", 400, 450, "webapp"),
        _n("database", 250, 450, "api", "server"),
        _n("iam", 550, 150, "firewall"),
        _n("mfa", 550, 250, "iam"),
        _n("endpoint", 150, 450, "switch"),
        _n("siem", 550, 350, "firewall", "waf"),
        _n("ids", 550, 450, "switch", "firewall"),
    )),
    Template("enterprise", "Enterprise", "Complex infrastructure, advanced security", (
        _n("firewall", 300, 50),
        _n("router", 300, 150, "firewall"),
        _n("switch", 300, 250, "router"),
        _n("waf", 450, 250, "firewall"),
        _n("server", 150, 350, "switch"),
        _n("storage", 150, 450, "server"),
        _n("webapp", 450, 350, "waf"),
        _n("api", 450, 450, "webapp"),
        _n("database", 300, 550, "api", "server"),
        _n("iam", 600, 150, "firewall"),
        _n("pam", 600, 250, "iam"),
        _n("mfa", 600, 350, "iam"),
        _n("siem", 750, 250, "firewall", "waf"),
        _n("soar", 750, 350, "siem"),
        _n("dlp", 450, 550, "database"),
        _n("edr", 150, 550, "server", "endpoint"),
        _n("ids", 750, 450, "switch", "firewall"),
        _n("encryption", 300, 650, "database", "storage"),
    )),
    Template("healthcare", "Healthcare", "HIPAA-focused, patient data protection", (
        _n("firewall", 300, 50),
        _n("router", 300, 150, "firewall"),
        _n("switch", 300, 250, "router"),
        _n("waf", 450, 250, "firewall"),
        _n("server", 150, 350, "switch"),
        _n("webapp", 450, 350, "waf"),
        _n("api", 450, 450, "webapp"),
        _n("database", 300, 450, "api", "server"),
        _n("iam", 600, 150, "firewall"),
        _n("pam", 600, 250, "iam"),
        _n("mfa", 600, 350, "iam"),
        _n("dlp", 450, 550, "database"),
        _n("encryption", 150, 450, "database"),
        _n("siem", 750, 350, "firewall", "waf"),
        _n("ids", 750, 450, "switch", "firewall"),
    )),
)

_BY_ID = {t.id: t for t in TEMPLATES}


def get_template(template_id: str) -> Template:
    try:
        return _BY_ID[template_id]
    except KeyError:
        raise UnknownTemplateError(template_id) from None


def list_templates() -> list[Template]:
    return list(TEMPLATES)
