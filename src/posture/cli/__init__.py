"""CLI for posture: grouped subcommands.

Commands:
  posture catalog {list, show}
  posture template {list, show}
  posture assess [--template ID | --file PATH] [--compliance]
  posture evaluate --source-type T --target-type T [--template ID | --file PATH]
  posture export [--template ID | --file PATH] [--output PATH]
  posture serve
"""

from __future__ import annotations

import sys

from posture.cli._helpers import _out  # noqa: F401 (re-exported for tests)
from posture.cli._parser import build_parser
from posture.cli.commands import (
    cmd_assess,
    cmd_catalog_list,
    cmd_catalog_show,
    cmd_evaluate,
    cmd_export,
    cmd_serve,
    cmd_template_list,
    cmd_template_show,
)
from posture.observability import setup_logging


# ===================================================================
# Dispatch
# ===================================================================

_DISPATCH = {
    ("catalog", "list"): cmd_catalog_list,
    ("catalog", "show"): cmd_catalog_show,
    ("template", "list"): cmd_template_list,
    ("template", "show"): cmd_template_show,
    ("assess", None): cmd_assess,
    ("evaluate", None): cmd_evaluate,
    ("export", None): cmd_export,
    ("serve", None): cmd_serve,
}

# Map subcmd attr names to the dispatch key
_SUBCMD_ATTR = {
    "catalog": "catalog_cmd",
    "template": "template_cmd",
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.log_level)

    subcmd_attr = _SUBCMD_ATTR.get(args.command)
    subcmd = getattr(args, subcmd_attr, None) if subcmd_attr else None
    handler = _DISPATCH.get((args.command, subcmd))
    if handler is None:
        parser.print_help()
        return 1

    return handler(args)
