"""Component catalog and template endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from posture import catalog, templates
from posture.models import Tier

router = APIRouter(tags=["catalog"])


@router.get("/catalog")
def catalog_list(tier: str | None = None):
    if tier is not None and tier not in {t.value for t in Tier}:
        raise HTTPException(status_code=400, detail=f"Unknown tier: {tier}")
    return [c.to_dict() for c in catalog.list_components(tier)]


@router.get("/catalog/tiers")
def catalog_tiers():
    return [t.value for t in catalog.tiers()]


@router.get("/catalog/{type_id}")
def catalog_get(type_id: str):
    return catalog.get_component(type_id).to_dict()


@router.get("/templates")
def template_list():
    return [t.to_dict() for t in templates.list_templates()]


@router.get("/templates/{template_id}")
def template_get(template_id: str):
    return templates.get_template(template_id).to_dict()
