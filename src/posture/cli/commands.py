"""CLI commands: catalog, templates, assessment, evaluation, export, serve."""

from __future__ import annotations

import argparse

from posture import catalog, templates
from posture.catalog import UnknownComponentError
from posture.cli._helpers import _load_session, _out
from posture.templates import UnknownTemplateError


def cmd_catalog_list(args: argparse.Namespace) -> int:
    return _out([c.to_dict() for c in catalog.list_components(args.tier)])


def cmd_catalog_show(args: argparse.Namespace) -> int:
    component = catalog.find_component(args.type_id)
    if component is None:
        return _out({"error": f"Unknown component type: {args.type_id}"})
    return _out(component.to_dict())


def cmd_template_list(args: argparse.Namespace) -> int:
    return _out([{"id": t.id, "name": t.name, "description": t.description}
                 for t in templates.list_templates()])


def cmd_template_show(args: argparse.Namespace) -> int:
    try:
        return _out(templates.get_template(args.template_id).to_dict())
    except UnknownTemplateError:
        return _out({"error": f"Unknown template: {args.template_id}"})


def cmd_assess(args: argparse.Namespace) -> int:
    from posture.compliance import framework_breakdown
    try:
        session = _load_session(args)
    except UnknownTemplateError:
        return _out({"error": f"Unknown template: {args.template}"})
    except (OSError, ValueError) as e:
        return _out({"error": f"Cannot load diagram: {e}"})
    result = session.assess().to_dict()
    if args.compliance:
        result["frameworks"] = framework_breakdown(session.graph.type_ids())
    return _out(result)


def cmd_evaluate(args: argparse.Namespace) -> int:
    """Classify source-type -> target-type against the loaded diagram.

    Uses the first placed node of each type, placing a new one when the
    diagram has none (or when both ends are the same type).
    """
    try:
        session = _load_session(args)
    except UnknownTemplateError:
        return _out({"error": f"Unknown template: {args.template}"})
    except (OSError, ValueError) as e:
        return _out({"error": f"Cannot load diagram: {e}"})

    def _node_of(type_id: str, exclude: str | None = None) -> str:
        for n in session.graph.nodes:
            if n.type_id == type_id and n.id != exclude:
                return n.id
        return session.add_node(type_id).id

    try:
        source_id = _node_of(args.source_type)
        target_id = _node_of(args.target_type, exclude=source_id)
    except UnknownComponentError as e:
        return _out({"error": f"Unknown component type: {e.args[0]}"})

    verdict = session.evaluate(source_id, target_id)
    return _out({"source": source_id, "target": target_id, **verdict.to_dict()})


def cmd_export(args: argparse.Namespace) -> int:
    from posture.config import Settings
    from posture.exports import export_diagram
    try:
        session = _load_session(args)
    except UnknownTemplateError:
        return _out({"error": f"Unknown template: {args.template}"})
    except (OSError, ValueError) as e:
        return _out({"error": f"Cannot load diagram: {e}"})
    return _out(export_diagram(session.graph, args.output or Settings().export_path))


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn
    from posture.api import create_app
    uvicorn.run(create_app(), host=args.host, port=args.port, log_config=None)
    return 0
