"""
Transitboard - pawn movement over a multi-layer city transit graph.

Load a graph export, start a session and move a pawn across sidewalks,
roads, rails, tunnels, ferries and building interiors.

No rendering and no input handling: a UI subscribes to PawnController
events and draws whatever it likes.
"""

__version__ = "0.1.0"

# Main session component
from .movement import MovementState, PawnController, SessionPhase

# Errors and notifications
from .errors import (
    InvalidDocumentError,
    MalformedIdError,
    NoStartingNodeError,
    RejectionReason,
    TransitBoardError,
)
from .events import (
    BuildingTransitionRejected,
    LayerChanged,
    LayerChangeRejected,
    MoveRejected,
    PawnEvent,
    PositionChanged,
    SessionReset,
)

# Layers and lookup tables
from .layers import (
    BUILDING_LAYER,
    DEFAULT_LAYER_POLICY,
    PAWN_TEXTURES,
    TILE_KEYS,
    Layer,
    LayerPolicy,
    Rotation,
    texture_for_layer,
)

# Environment helpers
from .environment import (
    BoardLayoutState,
    GridGeometry,
    ParsedNode,
    TilePlacement,
    TransitGraph,
    format_node_id,
    parse_node_id,
    pick_random_start,
    resolve_building_transition,
    resolve_direction,
    resolve_layer_change,
    tile_placements,
)

# Document loading
from .loader import BoardLoader, load_board_layout, load_graph

__all__ = [
    # Session
    "PawnController",
    "MovementState",
    "SessionPhase",
    # Errors
    "TransitBoardError",
    "MalformedIdError",
    "InvalidDocumentError",
    "NoStartingNodeError",
    "RejectionReason",
    # Events
    "PawnEvent",
    "PositionChanged",
    "LayerChanged",
    "MoveRejected",
    "BuildingTransitionRejected",
    "LayerChangeRejected",
    "SessionReset",
    # Layers
    "Layer",
    "LayerPolicy",
    "DEFAULT_LAYER_POLICY",
    "BUILDING_LAYER",
    "PAWN_TEXTURES",
    "TILE_KEYS",
    "Rotation",
    "texture_for_layer",
    # Environment
    "TransitGraph",
    "ParsedNode",
    "parse_node_id",
    "format_node_id",
    "resolve_direction",
    "resolve_building_transition",
    "resolve_layer_change",
    "pick_random_start",
    "GridGeometry",
    "TilePlacement",
    "tile_placements",
    "BoardLayoutState",
    # Loading
    "BoardLoader",
    "load_graph",
    "load_board_layout",
]
