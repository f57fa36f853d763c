"""Diagram session endpoints: nodes, edges, templates, export."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from posture.api.schemas import AddNodeBody, ConnectBody, TemplateBody
from posture.diagram import Diagram
from posture.exports import export_document
from posture.observability import record_connection

router = APIRouter(tags=["diagram"])


def _diagram(request: Request) -> Diagram:
    return request.app.state.diagram


@router.get("/diagram")
def diagram_get(request: Request):
    return _diagram(request).graph.to_dict()


@router.post("/diagram/nodes", status_code=201)
def diagram_add_node(body: AddNodeBody, request: Request):
    position = body.position.to_position() if body.position else None
    node = _diagram(request).add_node(body.type, position)
    return node.to_dict()


@router.delete("/diagram/nodes/{node_id}")
def diagram_delete_node(node_id: str, request: Request):
    if not _diagram(request).delete_node(node_id):
        raise HTTPException(status_code=404, detail=f"Node {node_id} not found")
    return {"deleted": node_id}


@router.post("/diagram/edges", status_code=201)
def diagram_connect(body: ConnectBody, request: Request):
    diagram = _diagram(request)
    edge = diagram.connect(body.source, body.target)
    if edge is None:
        raise HTTPException(status_code=404, detail="Source or target node not found")
    record_connection(edge.risk.value)
    return {
        "edge": edge.to_dict(),
        "nodes": [diagram.graph.node(body.source).to_dict(),
                  diagram.graph.node(body.target).to_dict()],
    }


@router.post("/diagram/evaluate")
def diagram_evaluate(body: ConnectBody, request: Request):
    """Classify a candidate connection without drawing it."""
    return _diagram(request).evaluate(body.source, body.target).to_dict()


@router.post("/diagram/template")
def diagram_load_template(body: TemplateBody, request: Request):
    graph = _diagram(request).load_template(body.template_id)
    for e in graph.edges:
        record_connection(e.risk.value)
    return graph.to_dict()


@router.delete("/diagram")
def diagram_clear(request: Request):
    _diagram(request).clear()
    return {"cleared": True}


@router.get("/diagram/export")
def diagram_export(request: Request):
    return export_document(_diagram(request).graph)
