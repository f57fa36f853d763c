"""Shared CLI helpers."""

from __future__ import annotations

import argparse
import json
from typing import Any

from posture.diagram import Diagram
from posture.exports import load_diagram


def _out(data: Any) -> int:
    print(json.dumps(data, indent=2, default=str))
    if isinstance(data, dict) and "error" in data:
        return 1
    return 0


def _load_session(args: argparse.Namespace) -> Diagram:
    """Diagram from --template or --file; empty when neither is given."""
    template = getattr(args, "template", None)
    path = getattr(args, "file", None)
    if template:
        diagram = Diagram()
        diagram.load_template(template)
        return diagram
    if path:
        return Diagram(load_diagram(path))
    return Diagram()
