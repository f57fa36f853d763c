"""Connection risk evaluation: evaluate_path, evaluate_connection."""

from __future__ import annotations

import logging

from posture.defaults import MAX_PATH_DEPTH
from posture.models import ConnectionRisk, ConnectionVerdict, Graph
from posture.risk._constants import (
    _ALWAYS_SECURE_CONTROLS,
    _APPLICATION_ENTRYPOINTS,
    _AUTH_CONTROLS,
    _DATA_STORES,
    _PERIMETER_CONTROLS,
    _RISK_RANK,
)
from posture.risk.graph import build_graph, find_paths, type_path
from posture.risk.rules import classify_direct, has_rule

log = logging.getLogger("posture.risk")

_MSG_DATABASE_EXPOSED = "Database access without proper security controls (WAF/Firewall)"
_MSG_UNAUTHENTICATED = "Application access without proper authentication controls"
_MSG_PATH_SECURE = "Path includes necessary security controls"
_MSG_SECURE_PATH_EXISTS = "Secure path exists through security controls"
_MSG_NO_RULES = "No specific security rules defined for this connection"


def evaluate_path(types: list[str]) -> tuple[ConnectionRisk, str]:
    """Judge one path by the component types along it."""
    present = set(types)
    if present & _DATA_STORES and not present & _PERIMETER_CONTROLS:
        return ConnectionRisk.WARNING, _MSG_DATABASE_EXPOSED
    if types and types[-1] in _APPLICATION_ENTRYPOINTS and not present & _AUTH_CONTROLS:
        return ConnectionRisk.WARNING, _MSG_UNAUTHENTICATED
    return ConnectionRisk.SECURE, _MSG_PATH_SECURE


def risk_message(source_type: str, target_type: str, risk: ConnectionRisk) -> str:
    if risk == ConnectionRisk.SECURE:
        return f"Secure connection from {source_type} to {target_type} following security best practices"
    if risk == ConnectionRisk.WARNING:
        return f"Connection from {source_type} to {target_type} may need additional security controls"
    if risk == ConnectionRisk.ERROR:
        return f"Insecure connection from {source_type} to {target_type} - consider adding security controls"
    return "Connection status unknown"


def best_result(results: list[tuple[ConnectionRisk, str]]) -> tuple[ConnectionRisk, str]:
    """Most secure result; ties keep the earliest path."""
    best = results[0]
    for r in results[1:]:
        if _RISK_RANK[r[0].value] < _RISK_RANK[best[0].value]:
            best = r
    return best


def evaluate_connection(
    graph: Graph,
    source_id: str,
    target_id: str,
    max_depth: int = MAX_PATH_DEPTH,
) -> ConnectionVerdict:
    """Classify the risk of a source->target connection against the current graph.

    Source types without a rule are a warning outright unless the target is
    a security control.  Otherwise existing paths between the endpoints take
    precedence over the static per-type rule.  The verdict is advisory:
    ``valid`` is always True.
    """
    source_type = graph.type_of(source_id)
    target_type = graph.type_of(target_id)

    if not has_rule(source_type) and target_type not in _ALWAYS_SECURE_CONTROLS:
        log.debug("No rule for %s -> %s", source_type, target_type,
                  extra={"risk": ConnectionRisk.WARNING.value})
        return ConnectionVerdict(risk=ConnectionRisk.WARNING, message=_MSG_NO_RULES)

    G = build_graph(graph)
    paths = find_paths(G, source_id, target_id, max_depth=max_depth)

    if paths:
        results = [evaluate_path(type_path(G, p)) for p in paths]
        if any(risk == ConnectionRisk.SECURE for risk, _ in results):
            risk, message = ConnectionRisk.SECURE, _MSG_SECURE_PATH_EXISTS
        else:
            risk, message = best_result(results)
        log.debug("Evaluated %d path(s) %s -> %s: %s", len(paths), source_id, target_id,
                  risk.value, extra={"risk": risk.value})
        return ConnectionVerdict(risk=risk, message=message, paths=paths)

    risk = classify_direct(source_type, target_type)
    message = risk_message(source_type or "unknown", target_type or "unknown", risk)
    log.debug("Direct rule %s -> %s: %s", source_type, target_type, risk.value,
              extra={"risk": risk.value})
    return ConnectionVerdict(risk=risk, message=message)
