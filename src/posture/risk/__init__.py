"""Connection risk: rule table, bounded path search, path-aware classification.

Uses NetworkX to enumerate every simple directed path (up to 10 hops)
between the endpoints of a connection.  Each path is judged on the
component types it traverses:
  - a database on the path needs a firewall or WAF somewhere on it
  - a path ending at a web app or API needs IAM somewhere on it
The most secure path wins.  With no existing path the static per-type
rule decides.  Source types with no rule at all are a warning before any
path search, unless the target is a security control.
"""

from posture.risk.eval import evaluate_connection, evaluate_path, risk_message
from posture.risk.graph import build_graph, find_paths, graph_metrics
from posture.risk.rules import (
    RULES,
    ConnectionRule,
    RuleClause,
    apply_rule,
    classify_direct,
    rule_for,
)

__all__ = [
    "RULES",
    "ConnectionRule",
    "RuleClause",
    "apply_rule",
    "build_graph",
    "classify_direct",
    "evaluate_connection",
    "evaluate_path",
    "find_paths",
    "graph_metrics",
    "risk_message",
    "rule_for",
]
