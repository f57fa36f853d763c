"""Per-type connection rules as data, plus the single function that applies them.

A rule is an ordered list of clauses and a default.  The first clause whose
targets include the target type decides the outcome; when the clause names
required controls, its level only applies if one of them is on the type path.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from posture.models import ConnectionRisk
from posture.risk._constants import _ALWAYS_SECURE_CONTROLS

SECURE = ConnectionRisk.SECURE
WARNING = ConnectionRisk.WARNING

ANY_TARGET = None


@dataclass(frozen=True)
class RuleClause:
    targets: frozenset[str] | None
    level: ConnectionRisk
    requires: frozenset[str] = frozenset()
    otherwise: ConnectionRisk = WARNING

    def matches(self, target_type: str) -> bool:
        return self.targets is ANY_TARGET or target_type in self.targets

    def apply(self, type_path: Iterable[str]) -> ConnectionRisk:
        if not self.requires:
            return self.level
        return self.level if self.requires.intersection(type_path) else self.otherwise


@dataclass(frozen=True)
class ConnectionRule:
    clauses: tuple[RuleClause, ...] = ()
    default: ConnectionRisk = WARNING


def _clause(targets: Iterable[str] | None, level: ConnectionRisk,
            requires: Iterable[str] = ()) -> RuleClause:
    return RuleClause(
        targets=frozenset(targets) if targets is not None else ANY_TARGET,
        level=level,
        requires=frozenset(requires),
    )


DEFAULT_RULE = ConnectionRule()

RULES: dict[str, ConnectionRule] = {
    # Infrastructure
    "firewall": ConnectionRule((
        _clause({"webapp", "api"}, WARNING),            # should pass through a WAF first
        _clause({"router", "switch", "waf"}, SECURE),
    )),
    "router": ConnectionRule((
        _clause({"firewall", "switch"}, SECURE),
        _clause({"server"}, WARNING),                   # servers belong behind a firewall
    )),
    "switch": ConnectionRule((
        _clause({"server", "endpoint", "wap"}, SECURE),
    )),
    "server": ConnectionRule((
        _clause({"database", "storage"}, SECURE),
        _clause({"webapp", "api"}, WARNING),
    )),
    "wap": ConnectionRule((
        _clause({"switch", "firewall"}, SECURE),
    )),
    "endpoint": ConnectionRule((
        _clause({"wap"}, WARNING),
        _clause({"switch"}, SECURE),
    )),
    # Application
    "webapp": ConnectionRule((
        _clause({"api"}, SECURE),
        _clause({"database"}, SECURE, requires={"waf"}),
        _clause({"waf"}, SECURE),
    )),
    "api": ConnectionRule((
        _clause({"database", "storage"}, SECURE, requires={"waf", "firewall"}),
    )),
    "database": ConnectionRule((
        _clause({"storage"}, SECURE),
        _clause(ANY_TARGET, SECURE, requires={"waf", "firewall"}),
    )),
    "storage": ConnectionRule((
        _clause(ANY_TARGET, SECURE, requires={"encryption"}),
    )),
    "microservices": ConnectionRule((
        _clause({"api", "database"}, SECURE, requires={"waf"}),
    )),
    # Security controls
    "waf": ConnectionRule((
        _clause({"webapp", "api", "database"}, SECURE),
    )),
    **{control: ConnectionRule(default=SECURE) for control in sorted(_ALWAYS_SECURE_CONTROLS)},
}


def rule_for(type_id: str | None) -> ConnectionRule:
    """Rule for a source type; unknown or missing types get the warning default."""
    if type_id is None:
        return DEFAULT_RULE
    return RULES.get(type_id, DEFAULT_RULE)


def has_rule(type_id: str | None) -> bool:
    return type_id is not None and type_id in RULES


def apply_rule(rule: ConnectionRule, target_type: str | None,
               type_path: Iterable[str] = ()) -> ConnectionRisk:
    path = tuple(type_path)
    if target_type is not None:
        for clause in rule.clauses:
            if clause.matches(target_type):
                return clause.apply(path)
    return rule.default


def classify_direct(source_type: str | None, target_type: str | None) -> ConnectionRisk:
    """Risk of a fresh source->target edge with no existing path between them."""
    if target_type in _ALWAYS_SECURE_CONTROLS:
        return SECURE
    type_path = [t for t in (source_type, target_type) if t is not None]
    return apply_rule(rule_for(source_type), target_type, type_path)
