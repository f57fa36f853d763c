"""Posture assessment and compliance endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request

from posture.compliance import framework_breakdown
from posture.observability import record_assessment
from posture.risk import build_graph, graph_metrics

router = APIRouter(tags=["assessment"])


@router.get("/assessment")
def assessment_get(request: Request):
    result = request.app.state.diagram.assess()
    record_assessment(result.level.value)
    return result.to_dict()


@router.get("/assessment/compliance")
def assessment_compliance(request: Request):
    graph = request.app.state.diagram.graph
    return framework_breakdown(graph.type_ids())


@router.get("/assessment/graph")
def assessment_graph(request: Request):
    return graph_metrics(build_graph(request.app.state.diagram.graph))
