"""Tests for one-step movement resolution."""

import random

import pytest

from transitboard.environment import (
    TransitGraph,
    parse_node_id,
    pick_random_start,
    resolve_building_transition,
    resolve_direction,
    resolve_layer_change,
)
from transitboard.errors import NoStartingNodeError
from transitboard.layers import Layer, LayerPolicy

CENTER = "SIDEWALKS_R6C6"


class RecordingChoice:
    """Stand-in rng that remembers the pool and returns its first element."""

    def __init__(self):
        self.pool = None

    def choice(self, seq):
        self.pool = list(seq)
        return seq[0]


def star(*neighbors, center=CENTER, extra_nodes=()):
    """Graph with edges from ``center`` to each neighbour, in order."""
    return TransitGraph.build(
        [center, *neighbors, *extra_nodes],
        [(center, neighbor) for neighbor in neighbors],
    )


def test_resolves_each_direction():
    graph = star("SIDEWALKS_R5C6", "SIDEWALKS_R7C6", "SIDEWALKS_R6C5", "SIDEWALKS_R6C7")

    assert resolve_direction(graph, CENTER, "up", "SIDEWALKS") == "SIDEWALKS_R5C6"
    assert resolve_direction(graph, CENTER, "down", "SIDEWALKS") == "SIDEWALKS_R7C6"
    assert resolve_direction(graph, CENTER, "left", "SIDEWALKS") == "SIDEWALKS_R6C5"
    assert resolve_direction(graph, CENTER, "right", "SIDEWALKS") == "SIDEWALKS_R6C7"


def test_direction_tolerates_lateral_drift():
    graph = star("SIDEWALKS_R4C7", "SIDEWALKS_R5C8")

    # Two rows up, one column right: still "up"
    assert resolve_direction(graph, CENTER, "up", "SIDEWALKS") == "SIDEWALKS_R4C7"
    # One row up, two columns right: "right", never "up"
    assert resolve_direction(graph, CENTER, "right", "SIDEWALKS") == "SIDEWALKS_R5C8"
    assert resolve_direction(graph, CENTER, "down", "SIDEWALKS") is None


def test_picks_closest_candidate():
    graph = star("SIDEWALKS_R3C6", "SIDEWALKS_R4C7", "SIDEWALKS_R5C6")

    result = resolve_direction(graph, CENTER, "up", "SIDEWALKS")
    assert result == "SIDEWALKS_R5C6"

    current = parse_node_id(CENTER)
    chosen = current.manhattan_distance(parse_node_id(result))
    for other in ("SIDEWALKS_R3C6", "SIDEWALKS_R4C7"):
        assert chosen <= current.manhattan_distance(parse_node_id(other))


def test_ties_go_to_first_neighbor():
    graph = star("SIDEWALKS_R5C7", "SIDEWALKS_R5C5")
    assert resolve_direction(graph, CENTER, "up", "SIDEWALKS") == "SIDEWALKS_R5C7"

    flipped = star("SIDEWALKS_R5C5", "SIDEWALKS_R5C7")
    assert resolve_direction(flipped, CENTER, "up", "SIDEWALKS") == "SIDEWALKS_R5C5"


def test_resolution_is_deterministic():
    graph = star("SIDEWALKS_R5C7", "SIDEWALKS_R5C5", "METRO_R4C6")
    first = resolve_direction(graph, CENTER, "up", "SIDEWALKS")
    assert all(resolve_direction(graph, CENTER, "up", "SIDEWALKS") == first for _ in range(5))


def test_layer_gate_from_sidewalks():
    assert resolve_direction(star("TRACKS_R5C6"), CENTER, "up", "SIDEWALKS") == "TRACKS_R5C6"
    assert resolve_direction(star("ROADS_R5C6"), CENTER, "up", "SIDEWALKS") is None


def test_layer_gate_from_roads_and_other_layers():
    center = "ROADS_R6C6"
    graph = star("TUNEL_R5C6", "OBJECTS_R7C6", "SIDEWALKS_R6C7", center=center)

    assert resolve_direction(graph, center, "up", Layer.ROADS) == "TUNEL_R5C6"
    assert resolve_direction(graph, center, "down", Layer.ROADS) == "OBJECTS_R7C6"
    assert resolve_direction(graph, center, "right", Layer.ROADS) is None

    metro = "METRO_R6C6"
    graph = star("SIDEWALKS_R5C6", "METRO_R7C6", center=metro)
    assert resolve_direction(graph, metro, "up", "METRO") is None
    assert resolve_direction(graph, metro, "down", "METRO") == "METRO_R7C6"


def test_custom_policy_widens_compatibility():
    metro = "METRO_R6C6"
    graph = star("SIDEWALKS_R5C6", center=metro)
    policy = LayerPolicy(compatible={"METRO": frozenset({"SIDEWALKS"})})

    assert resolve_direction(graph, metro, "up", "METRO", policy=policy) == "SIDEWALKS_R5C6"


def test_incoming_edges_count_only_when_bidirectional():
    graph = TransitGraph.build([CENTER, "SIDEWALKS_R5C6"], [("SIDEWALKS_R5C6", CENTER)])

    assert resolve_direction(graph, CENTER, "up", "SIDEWALKS") == "SIDEWALKS_R5C6"
    assert resolve_direction(graph, CENTER, "up", "SIDEWALKS", bidirectional=False) is None


def test_malformed_ids_resolve_to_none():
    graph = TransitGraph.build(
        ["SIDEWALKS_X6Y6", CENTER, "SIDEWALKS_Q5C6", "SIDEWALKS_R4C6"],
        [("SIDEWALKS_X6Y6", CENTER), (CENTER, "SIDEWALKS_Q5C6"), (CENTER, "SIDEWALKS_R4C6")],
    )

    assert resolve_direction(graph, "SIDEWALKS_X6Y6", "down", "SIDEWALKS") is None
    # Undecodable neighbour is dropped, the valid one further away still wins
    assert resolve_direction(graph, CENTER, "up", "SIDEWALKS") == "SIDEWALKS_R4C6"


def test_unknown_direction_and_isolated_node():
    graph = star("SIDEWALKS_R5C6", extra_nodes=("SIDEWALKS_R1C1",))
    assert resolve_direction(graph, CENTER, "north", "SIDEWALKS") is None
    assert resolve_direction(graph, "SIDEWALKS_R1C1", "up", "SIDEWALKS") is None


def test_building_transition_enter_and_exit():
    graph = star("ROADS_R6C7", "OBJECTS_R6C5", "OBJECTS_R5C6", center="ROADS_R6C6")
    assert resolve_building_transition(graph, "ROADS_R6C6", inside_building=False) == "OBJECTS_R6C5"

    graph = star("OBJECTS_R6C5", "ROADS_R6C6", "SIDEWALKS_R6C7", center="OBJECTS_R6C6")
    assert resolve_building_transition(graph, "OBJECTS_R6C6", inside_building=True) == "ROADS_R6C6"


def test_building_transition_without_match():
    graph = star("ROADS_R6C7", center="ROADS_R6C6")
    assert resolve_building_transition(graph, "ROADS_R6C6", inside_building=False) is None

    graph = star("OBJECTS_R6C7", center="OBJECTS_R6C6")
    assert resolve_building_transition(graph, "OBJECTS_R6C6", inside_building=True) is None


def test_layer_change_picks_first_other_layer():
    graph = star("SIDEWALKS_R5C6", "METRO_R6C6", "ROADS_R6C6")
    assert resolve_layer_change(graph, CENTER, "SIDEWALKS") == "METRO_R6C6"

    same_layer = star("SIDEWALKS_R5C6", "SIDEWALKS_R7C6")
    assert resolve_layer_change(same_layer, CENTER, Layer.SIDEWALKS) is None


def test_random_start_prefers_layers_in_graph_order():
    graph = TransitGraph.build(
        ["ROADS_R1C1", "SIDEWALKS_R2C2", "OBJECTS_R3C3", "SIDEWALKS_R4C4", "METRO_R5C5"],
        [],
    )
    rng = RecordingChoice()

    assert pick_random_start(graph, ["SIDEWALKS"], rng=rng) == "SIDEWALKS_R2C2"
    assert rng.pool == ["SIDEWALKS_R2C2", "SIDEWALKS_R4C4"]

    pick_random_start(graph, [Layer.METRO, Layer.ROADS], rng=rng)
    assert rng.pool == ["ROADS_R1C1", "METRO_R5C5"]


def test_random_start_falls_back_to_outdoor_nodes():
    graph = TransitGraph.build(["OBJECTS_R1C1", "ROADS_R2C2", "BAD_ID", "TUNEL_R3C3"], [])
    rng = RecordingChoice()

    pick_random_start(graph, ["SIDEWALKS"], rng=rng)
    assert rng.pool == ["ROADS_R2C2", "TUNEL_R3C3"]


def test_random_start_without_eligible_nodes():
    with pytest.raises(NoStartingNodeError):
        pick_random_start(TransitGraph.build(["OBJECTS_R1C1"], []), ["SIDEWALKS"])
    with pytest.raises(NoStartingNodeError):
        pick_random_start(TransitGraph.build([], []), ["SIDEWALKS"])


def test_random_start_is_reproducible_with_seeded_rng():
    graph = TransitGraph.build([f"SIDEWALKS_R{row}C1" for row in range(1, 12)], [])

    first = pick_random_start(graph, ["SIDEWALKS"], rng=random.Random(7))
    second = pick_random_start(graph, ["SIDEWALKS"], rng=random.Random(7))
    assert first == second
    assert first in graph
