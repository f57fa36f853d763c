"""Posture scoring: tier coverage, connectivity, gaps, composite score, level."""

from __future__ import annotations

import logging
from typing import Iterable

from posture.catalog import find_component
from posture.compliance import compliance_scores
from posture.defaults import (
    BASELINE_SCORE,
    CONNECTIVITY_MULTIPLIER,
    CONNECTIVITY_REDUCTION_CAP,
    CONNECTIVITY_SCORE_CAP,
    GAP_PENALTY_CAP,
    GAP_PENALTY_DIVISOR,
    GAP_SEVERITY_POINTS,
    LEVEL_COLORS,
    LEVEL_THRESHOLDS,
    MAX_SCORE,
    MIN_SCORE,
    TIER_POINTS,
    TIER_REDUCTION_CAP,
)
from posture.models import Assessment, Gap, Graph, PostureLevel, Severity, Tier, round_half_up

log = logging.getLogger("posture.scoring")


# Security-critical component types, in reporting order.
GAP_CHECKLIST: tuple[Gap, ...] = (
    Gap("firewall", "Missing Perimeter Security",
        "No firewall or perimeter security detected", Severity.HIGH,
        "Add a Next-Gen Firewall to protect your network perimeter"),
    Gap("iam", "Missing Identity Management",
        "No identity and access management solution detected", Severity.HIGH,
        "Add an IAM solution to manage user identities and access"),
    Gap("mfa", "Missing Multi-Factor Authentication",
        "No MFA solution detected", Severity.MEDIUM,
        "Implement MFA to strengthen authentication security"),
    Gap("siem", "Missing Security Monitoring",
        "No SIEM or monitoring solution detected", Severity.HIGH,
        "Add a SIEM solution for comprehensive security monitoring"),
    Gap("edr", "Missing Endpoint Protection",
        "No endpoint detection and response solution detected", Severity.MEDIUM,
        "Implement EDR to protect endpoints from threats"),
    Gap("dlp", "Missing Data Protection",
        "No data loss prevention solution detected", Severity.MEDIUM,
        "Add DLP to prevent data exfiltration"),
    Gap("waf", "Missing Web Application Protection",
        "No web application firewall detected", Severity.HIGH,
        "Implement a WAF to protect web applications from attacks"),
    Gap("awareness", "Missing Security Awareness",
        "No security awareness training program detected", Severity.MEDIUM,
        "Implement security awareness training for all employees"),
)


def tiers_present(graph: Graph) -> list[Tier]:
    """Distinct catalog tiers among placed nodes, in tier declaration order."""
    found = set()
    for n in graph.nodes:
        component = find_component(n.type_id)
        if component is not None:
            found.add(component.tier)
    return [t for t in Tier if t in found]


def tier_coverage_reduction(tier_count: int) -> int:
    return min(TIER_REDUCTION_CAP, tier_count * TIER_POINTS)


def connectivity_score(node_count: int, edge_count: int) -> int:
    """0-100 sub-score from the nodes/edges ratio (0 with no edges)."""
    ratio = node_count / edge_count if edge_count > 0 else 0
    return min(CONNECTIVITY_SCORE_CAP, round_half_up(ratio * CONNECTIVITY_MULTIPLIER))


def connectivity_reduction(score: int) -> int:
    return min(CONNECTIVITY_REDUCTION_CAP, score)


def detect_gaps(type_ids: Iterable[str]) -> list[Gap]:
    """Checklist entries with no placed component, in checklist order."""
    present = set(type_ids)
    return [g for g in GAP_CHECKLIST if g.id not in present]


def gap_penalty(gaps: Iterable[Gap]) -> float:
    total = sum(GAP_SEVERITY_POINTS[g.severity.value] for g in gaps)
    return min(GAP_PENALTY_CAP, total / GAP_PENALTY_DIVISOR)


def classify_level(score: float) -> PostureLevel:
    if score < LEVEL_THRESHOLDS["Low"]:
        return PostureLevel.LOW
    if score < LEVEL_THRESHOLDS["Medium"]:
        return PostureLevel.MEDIUM
    if score < LEVEL_THRESHOLDS["High"]:
        return PostureLevel.HIGH
    return PostureLevel.CRITICAL


def level_color(level: PostureLevel) -> str:
    return LEVEL_COLORS[level.value]


def assess(graph: Graph) -> Assessment:
    """Aggregate a diagram into a risk score, level, gaps and compliance readiness.

    Pure function of the snapshot: positions and node status play no part,
    and calling it twice on the same graph gives equal results.
    """
    type_ids = graph.type_ids()

    tiers = tiers_present(graph)
    tier_reduction = tier_coverage_reduction(len(tiers))

    conn_score = connectivity_score(len(graph.nodes), len(graph.edges))
    conn_reduction = connectivity_reduction(conn_score)

    gaps = detect_gaps(type_ids)
    penalty = gap_penalty(gaps)

    raw = BASELINE_SCORE - tier_reduction - conn_reduction + penalty
    raw = max(MIN_SCORE, min(MAX_SCORE, raw))
    score = round_half_up(raw)
    level = classify_level(score)

    log.debug("Assessed %d nodes / %d edges: score=%d level=%s",
              len(graph.nodes), len(graph.edges), score, level.value,
              extra={"score": score})

    return Assessment(
        score=score,
        level=level,
        color=level_color(level),
        gaps=gaps,
        compliance=compliance_scores(type_ids),
        factors={
            "tiers_present": [t.value for t in tiers],
            "tier_reduction": tier_reduction,
            "connectivity_score": conn_score,
            "connectivity_reduction": conn_reduction,
            "gap_penalty": penalty,
        },
    )
