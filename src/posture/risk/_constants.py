"""Shared constants for connection risk evaluation."""

# Controls that make any fresh connection into them secure
_ALWAYS_SECURE_CONTROLS = frozenset({"iam", "dlp", "ids", "siem", "edr", "encryption"})

# Path-level requirements
_DATA_STORES = frozenset({"database"})
_PERIMETER_CONTROLS = frozenset({"firewall", "waf"})
_APPLICATION_ENTRYPOINTS = frozenset({"webapp", "api"})
_AUTH_CONTROLS = frozenset({"iam"})

_RISK_RANK = {"secure": 0, "warning": 1, "error": 2, "offline": 3}
