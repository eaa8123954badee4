"""Notifications emitted by the pawn controller.

Rendering and UI collaborators subscribe to these instead of reading or
mutating pawn state directly. Every accepted transition produces a
``PositionChanged``; every refused request produces exactly one rejection
event carrying a ``RejectionReason``.
"""

from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import RejectionReason


class _Event(BaseModel):
    model_config = ConfigDict(frozen=True)


class PositionChanged(_Event):
    kind: Literal["position_changed"] = "position_changed"
    node_id: str
    layer: str
    inside_building: bool = False


class LayerChanged(_Event):
    kind: Literal["layer_changed"] = "layer_changed"
    from_layer: str
    to_layer: str


class MoveRejected(_Event):
    kind: Literal["move_rejected"] = "move_rejected"
    direction: str
    reason: RejectionReason


class BuildingTransitionRejected(_Event):
    kind: Literal["building_transition_rejected"] = "building_transition_rejected"
    reason: RejectionReason


class LayerChangeRejected(_Event):
    kind: Literal["layer_change_rejected"] = "layer_change_rejected"
    reason: RejectionReason


class SessionReset(_Event):
    kind: Literal["session_reset"] = "session_reset"
    previous_node_id: Optional[str] = Field(None, description="Where the pawn stood before the reset")


PawnEvent = Union[
    PositionChanged,
    LayerChanged,
    MoveRejected,
    BuildingTransitionRejected,
    LayerChangeRejected,
    SessionReset,
]
