"""Pydantic request models for strict input validation."""

from __future__ import annotations

from pydantic import BaseModel, Field

from posture.models import Position


class PositionBody(BaseModel):
    x: float = 0.0
    y: float = 0.0

    def to_position(self) -> Position:
        return Position(x=self.x, y=self.y)


# ---------------------------------------------------------------------------
# Diagram
# ---------------------------------------------------------------------------

class AddNodeBody(BaseModel):
    type: str = Field(..., min_length=1, description="Catalog component type id")
    position: PositionBody | None = None


class ConnectBody(BaseModel):
    source: str = Field(..., min_length=1, description="Source node instance id")
    target: str = Field(..., min_length=1, description="Target node instance id")


class TemplateBody(BaseModel):
    template_id: str = Field(..., min_length=1)
