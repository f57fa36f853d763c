"""Compliance readiness: per-framework share of required components present."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from posture.models import round_half_up


@dataclass(frozen=True)
class Framework:
    key: str
    name: str
    required: tuple[str, ...]


# Required component ids per framework.  "privacy" has no catalog entry, so
# GDPR readiness tops out below 100.
FRAMEWORKS: tuple[Framework, ...] = (
    Framework("hipaa", "HIPAA", ("dlp", "iam", "audit", "encryption", "mfa", "firewall")),
    Framework("pci", "PCI-DSS", ("firewall", "iam", "mfa", "dlp", "waf", "encryption", "ids")),
    Framework("gdpr", "GDPR", ("dlp", "privacy", "audit", "iam", "encryption")),
    Framework("nist", "NIST-CSF", ("firewall", "iam", "mfa", "siem", "edr", "dlp", "ids", "awareness", "policy")),
)


def get_framework(key_or_name: str) -> Framework | None:
    for f in FRAMEWORKS:
        if key_or_name in (f.key, f.name):
            return f
    return None


def readiness(framework: Framework, type_ids: Iterable[str]) -> int:
    """Percentage of the framework's required ids present, rounded half up."""
    if not framework.required:
        return 0
    present = set(type_ids)
    count = sum(1 for r in framework.required if r in present)
    return round_half_up(count / len(framework.required) * 100)


def compliance_scores(type_ids: Iterable[str]) -> dict[str, int]:
    """Framework name -> readiness percentage, in fixed framework order."""
    present = set(type_ids)
    return {f.name: readiness(f, present) for f in FRAMEWORKS}


def framework_breakdown(type_ids: Iterable[str]) -> list[dict[str, Any]]:
    """Per-framework readiness with the present and missing component ids."""
    present = set(type_ids)
    report = []
    for f in FRAMEWORKS:
        report.append({
            "key": f.key,
            "name": f.name,
            "readiness": readiness(f, present),
            "required": list(f.required),
            "present": [r for r in f.required if r in present],
            "missing": [r for r in f.required if r not in present],
        })
    return report
