"""Argparse parser definition for the posture CLI."""

from __future__ import annotations

import argparse

from posture.config import Settings
from posture.models import Tier


def build_parser() -> argparse.ArgumentParser:
    settings = Settings()
    parser = argparse.ArgumentParser(
        prog="posture",
        description="Security posture evaluation for component architecture diagrams",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Log level (default: INFO)")
    sub = parser.add_subparsers(dest="command")

    _register_catalog_commands(sub)
    _register_template_commands(sub)
    _register_assessment_commands(sub)
    _register_server_commands(sub, settings)

    return parser


def _add_source_args(p: argparse.ArgumentParser) -> None:
    group = p.add_mutually_exclusive_group()
    group.add_argument("--template", help="Load a predefined architecture")
    group.add_argument("--file", help="Load a diagram export JSON file")


def _register_catalog_commands(sub: argparse._SubParsersAction) -> None:
    catalog_p = sub.add_parser("catalog", help="Component catalog")
    catalog_sub = catalog_p.add_subparsers(dest="catalog_cmd")

    p = catalog_sub.add_parser("list", help="List component types")
    p.add_argument("--tier", choices=[t.value for t in Tier])

    p = catalog_sub.add_parser("show", help="Show one component type")
    p.add_argument("type_id")


def _register_template_commands(sub: argparse._SubParsersAction) -> None:
    template_p = sub.add_parser("template", help="Predefined architectures")
    template_sub = template_p.add_subparsers(dest="template_cmd")

    template_sub.add_parser("list", help="List templates")

    p = template_sub.add_parser("show", help="Show one template")
    p.add_argument("template_id")


def _register_assessment_commands(sub: argparse._SubParsersAction) -> None:
    # -- assess --
    p = sub.add_parser("assess", help="Risk score, gaps and compliance readiness of a diagram")
    _add_source_args(p)
    p.add_argument("--compliance", action="store_true",
                   help="Include per-framework present/missing components")

    # -- evaluate --
    p = sub.add_parser("evaluate", help="Classify a connection between two component types")
    _add_source_args(p)
    p.add_argument("--source-type", required=True)
    p.add_argument("--target-type", required=True)

    # -- export --
    p = sub.add_parser("export", help="Write a diagram export JSON file")
    _add_source_args(p)
    p.add_argument("--output", help="Output path (default: security-architecture.json)")


def _register_server_commands(sub: argparse._SubParsersAction, settings: Settings) -> None:
    p = sub.add_parser("serve", help="Start the HTTP API")
    p.add_argument("--host", default=settings.host)
    p.add_argument("--port", type=int, default=settings.port)
