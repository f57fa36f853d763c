"""Runtime settings from environment (POSTURE_*).

Only operational knobs live here; scoring constants are in ``defaults``.
"""

from __future__ import annotations

import os

from posture.defaults import EXPORT_FILENAME


class Settings:
    """Service and CLI configuration from environment."""

    def __init__(self) -> None:
        self.log_level = os.environ.get("POSTURE_LOG_LEVEL", "INFO")
        self.host = os.environ.get("POSTURE_HOST", "127.0.0.1")
        self.port = int(os.environ.get("POSTURE_PORT", "8000"))
        self.export_path = os.environ.get("POSTURE_EXPORT_PATH", EXPORT_FILENAME)
        raw_origins = os.environ.get("POSTURE_CORS_ORIGINS", "*")
        self.cors_origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
