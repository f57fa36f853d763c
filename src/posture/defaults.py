"""Single source of truth for the constants of the posture model.

Every weight, threshold and cap the engines use is defined here.  They are
fixed properties of the scoring model, not runtime configuration: changing
one changes every score the engine has ever reported.
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Path search
# ---------------------------------------------------------------------------

MAX_PATH_DEPTH = 10             # hops; longer paths are never enumerated

# ---------------------------------------------------------------------------
# Tier coverage
# ---------------------------------------------------------------------------

TIER_POINTS = 15
TIER_REDUCTION_CAP = 60

# ---------------------------------------------------------------------------
# Connectivity
# ---------------------------------------------------------------------------

CONNECTIVITY_MULTIPLIER = 50
CONNECTIVITY_SCORE_CAP = 100
CONNECTIVITY_REDUCTION_CAP = 20

# ---------------------------------------------------------------------------
# Gap penalty
# ---------------------------------------------------------------------------

GAP_SEVERITY_POINTS: dict[str, int] = {
    "low": 10,
    "medium": 25,
    "high": 50,
    "critical": 100,
}
GAP_PENALTY_DIVISOR = 10
GAP_PENALTY_CAP = 80

# ---------------------------------------------------------------------------
# Score composition
# ---------------------------------------------------------------------------

BASELINE_SCORE = 100
MIN_SCORE = 0
MAX_SCORE = 100

# ---------------------------------------------------------------------------
# Level classification (score < threshold -> level)
# ---------------------------------------------------------------------------

LEVEL_THRESHOLDS: dict[str, int] = {
    "Low": 25,
    "Medium": 50,
    "High": 75,
}

LEVEL_COLORS: dict[str, str] = {
    "Low": "text-green-500",
    "Medium": "text-yellow-500",
    "High": "text-orange-500",
    "Critical": "text-red-500",
}

# ---------------------------------------------------------------------------
# Edge styling by connection risk
# ---------------------------------------------------------------------------

EDGE_STROKES: dict[str, str] = {
    "secure": "#22c55e",
    "warning": "#facc15",
    "error": "#ef4444",
}
EDGE_STROKE_DEFAULT = "#6b7280"
EDGE_STROKE_WIDTH = 2

# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------

EXPORT_FILENAME = "security-architecture.json"
