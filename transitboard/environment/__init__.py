"""Transit graph environment: node ids, graph store, resolver and board geometry."""

from .codec import (
    ParsedNode,
    QUARTERS,
    encode_node,
    format_node_id,
    parse_node_id,
    try_parse_node_id,
)
from .graph import GraphEdge, TransitGraph
from .schemas import (
    BoardLayoutState,
    Coordinates,
    GraphDocument,
    GraphEdgeState,
    GraphNodeState,
    MoveData,
    MoveEntry,
)
from .resolver import (
    DIRECTIONS,
    is_in_direction,
    pick_random_start,
    resolve_building_transition,
    resolve_direction,
    resolve_layer_change,
)
from .geometry import GridGeometry, TilePlacement, tile_placements

__all__ = [
    "ParsedNode",
    "QUARTERS",
    "encode_node",
    "format_node_id",
    "parse_node_id",
    "try_parse_node_id",
    "GraphEdge",
    "TransitGraph",
    "BoardLayoutState",
    "Coordinates",
    "GraphDocument",
    "GraphEdgeState",
    "GraphNodeState",
    "MoveData",
    "MoveEntry",
    "DIRECTIONS",
    "is_in_direction",
    "pick_random_start",
    "resolve_building_transition",
    "resolve_direction",
    "resolve_layer_change",
    "GridGeometry",
    "TilePlacement",
    "tile_placements",
]
