"""One-step movement resolution over a transit graph.

Every function here answers "where would the pawn end up?" for a single hop
and returns None when there is no legal move. A missing adjacency is ordinary
gameplay, so malformed ids and dangling edges never raise past this module.
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Protocol, Sequence

from ..errors import NoStartingNodeError
from ..layers import BUILDING_LAYER, DEFAULT_LAYER_POLICY, Layer, LayerPolicy, layer_name
from ..logging_utils import log_debug
from .codec import ParsedNode, try_parse_node_id
from .graph import TransitGraph

DIRECTIONS = ("up", "down", "left", "right")


class ChoiceSource(Protocol):
    """Anything with ``random.Random.choice`` semantics."""

    def choice(self, seq: Sequence[str]) -> str: ...


def is_in_direction(current: ParsedNode, candidate: ParsedNode, direction: str) -> bool:
    """Check whether ``candidate`` lies in ``direction`` from ``current``.

    The test is tolerant: the candidate may drift sideways as long as the
    requested axis dominates, so a diagonal step resolves to its main axis.
    Row numbers grow downwards.
    """
    row_diff = candidate.row - current.row
    col_diff = candidate.col - current.col

    if direction == "up":
        return row_diff < 0 and abs(col_diff) <= abs(row_diff)
    if direction == "down":
        return row_diff > 0 and abs(col_diff) <= abs(row_diff)
    if direction == "left":
        return col_diff < 0 and abs(row_diff) <= abs(col_diff)
    if direction == "right":
        return col_diff > 0 and abs(row_diff) <= abs(col_diff)
    return False


def _decoded_neighbors(
    graph: TransitGraph, node_id: str, bidirectional: bool
) -> List[tuple[str, ParsedNode]]:
    decoded = []
    for neighbor_id in graph.neighbors(node_id, bidirectional=bidirectional):
        parsed = try_parse_node_id(neighbor_id)
        if parsed is not None:
            decoded.append((neighbor_id, parsed))
    return decoded


def resolve_direction(
    graph: TransitGraph,
    current_node_id: str,
    direction: str,
    current_layer: str | Layer,
    *,
    policy: LayerPolicy = DEFAULT_LAYER_POLICY,
    bidirectional: bool = True,
) -> Optional[str]:
    """Return the best neighbour of ``current_node_id`` in ``direction``.

    Candidates must decode, be reachable from ``current_layer`` under
    ``policy`` and pass the directional tolerance test. The closest one by
    Manhattan distance wins; ties go to the earliest neighbour.
    """
    current = try_parse_node_id(current_node_id)
    if current is None:
        return None

    best_id: Optional[str] = None
    best_distance: Optional[int] = None
    for neighbor_id, parsed in _decoded_neighbors(graph, current_node_id, bidirectional):
        if not policy.allows(current_layer, parsed.layer):
            continue
        if not is_in_direction(current, parsed, direction):
            continue
        distance = current.manhattan_distance(parsed)
        # Strict comparison keeps the first candidate on ties
        if best_distance is None or distance < best_distance:
            best_id, best_distance = neighbor_id, distance

    log_debug(f"[Resolver] {current_node_id} {direction} -> {best_id}")
    return best_id


def resolve_building_transition(
    graph: TransitGraph,
    current_node_id: str,
    inside_building: bool,
    *,
    bidirectional: bool = True,
) -> Optional[str]:
    """Find the neighbour to enter (when outside) or leave to (when inside) a building."""
    for neighbor_id, parsed in _decoded_neighbors(graph, current_node_id, bidirectional):
        is_building = parsed.layer == BUILDING_LAYER
        if is_building != inside_building:
            return neighbor_id
    return None


def resolve_layer_change(
    graph: TransitGraph,
    current_node_id: str,
    current_layer: str | Layer,
    *,
    bidirectional: bool = True,
) -> Optional[str]:
    """Return the first neighbour on a layer other than ``current_layer``."""
    current = layer_name(current_layer)
    for neighbor_id, parsed in _decoded_neighbors(graph, current_node_id, bidirectional):
        if parsed.layer != current:
            return neighbor_id
    return None


def pick_random_start(
    graph: TransitGraph,
    preferred_layers: Iterable[str | Layer],
    rng: Optional[ChoiceSource] = None,
) -> str:
    """Pick a random starting node, preferring ``preferred_layers``.

    Falls back to any node outside a building when no preferred node exists.

    Raises:
        NoStartingNodeError: if the graph has no eligible node at all.
    """
    preferred = [layer_name(layer) for layer in preferred_layers]
    chooser = rng or random

    decoded = []
    for node_id in graph.node_ids:
        parsed = try_parse_node_id(node_id)
        if parsed is not None:
            decoded.append((node_id, parsed))

    wanted = set(preferred)
    pool = [node_id for node_id, parsed in decoded if parsed.layer in wanted]
    if not pool:
        pool = [node_id for node_id, parsed in decoded if parsed.layer != BUILDING_LAYER]
    if not pool:
        raise NoStartingNodeError(preferred)

    return chooser.choice(pool)
