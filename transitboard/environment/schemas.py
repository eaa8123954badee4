"""Pydantic schemas for the documents Transitboard consumes.

These models mirror the external JSON documents (graph export and board
layout) and validate individual elements. The runtime graph in ``graph.py``
is built from them by the loader.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GraphNodeState(BaseModel):
    """A node entry of a graph document."""

    id: str = Field(..., min_length=1, description="Positional node id, e.g. SIDEWALKS_R6C6_TL_null")


class GraphEdgeState(BaseModel):
    """A directed edge entry of a graph document."""

    source: str = Field(..., min_length=1)
    target: str = Field(..., min_length=1)


class GraphDocument(BaseModel):
    """Validated graph document. Only well-formed elements survive loading."""

    nodes: List[GraphNodeState] = Field(default_factory=list)
    edges: List[GraphEdgeState] = Field(default_factory=list)


class Coordinates(BaseModel):
    row: int = Field(..., ge=1)
    column: int = Field(..., ge=1)


class MoveData(BaseModel):
    """Placement of one tile on the board."""

    model_config = ConfigDict(populate_by_name=True)

    coordinates: Coordinates
    element_definition_name: str = Field(..., alias="elementDefinitionName")
    rotation: str = Field("ZERO", description="ZERO | ONE | TWO | THREE quarter turns")

    @field_validator("rotation", mode="before")
    @classmethod
    def _default_rotation(cls, value):
        return "ZERO" if value is None else value


class MoveEntry(BaseModel):
    move: MoveData


class BoardLayoutState(BaseModel):
    """Board layout as a flat list of tile placements."""

    moves: List[MoveEntry] = Field(default_factory=list)
