"""Transit layers, layer compatibility and the lookup tables built on them.

A layer is a transit mode forming its own traversal plane. A pawn may step
onto a neighbour on another layer without an explicit transition only when
the neighbour's layer belongs to the compatibility set of the current layer.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Mapping


class Layer(str, Enum):
    SIDEWALKS = "SIDEWALKS"
    METRO = "METRO"
    TRACKS = "TRACKS"
    RIVERFERRY = "RIVERFERRY"
    RIVERBOAT = "RIVERBOAT"
    ROADS = "ROADS"
    TUNEL = "TUNEL"
    OBJECTS = "OBJECTS"  # building interiors


BUILDING_LAYER = Layer.OBJECTS.value

PEDESTRIAN_LAYERS: FrozenSet[str] = frozenset(
    {
        Layer.SIDEWALKS.value,
        Layer.METRO.value,
        Layer.TRACKS.value,
        Layer.RIVERFERRY.value,
        Layer.RIVERBOAT.value,
    }
)
VEHICLE_LAYERS: FrozenSet[str] = frozenset(
    {Layer.ROADS.value, Layer.TUNEL.value, Layer.OBJECTS.value}
)


def layer_name(layer: str | Layer) -> str:
    """Return the plain tag for a layer given either an enum member or a string."""
    return layer.value if isinstance(layer, Layer) else str(layer)


@dataclass(frozen=True)
class LayerPolicy:
    """Which layers a pawn may step onto from a given layer.

    ``compatible`` maps a current layer to the set of layers reachable by a
    plain directional move. Layers missing from the mapping (including layer
    tags the graph uses but the enum doesn't know) only reach themselves.
    """

    compatible: Mapping[str, FrozenSet[str]] = field(
        default_factory=lambda: {
            Layer.SIDEWALKS.value: PEDESTRIAN_LAYERS,
            Layer.ROADS.value: VEHICLE_LAYERS,
        }
    )

    def allows(self, current_layer: str | Layer, target_layer: str | Layer) -> bool:
        current = layer_name(current_layer)
        target = layer_name(target_layer)
        if current == target:
            return True
        return target in self.compatible.get(current, frozenset())


DEFAULT_LAYER_POLICY = LayerPolicy()


# Pawn sprite per layer. Unknown layers fall back to DEFAULT_PAWN_TEXTURE.
PAWN_TEXTURES: Dict[str, str] = {
    Layer.SIDEWALKS.value: "pieszy",
    Layer.METRO.value: "pieszy-metro",
    Layer.TRACKS.value: "pieszy-pociag",
    Layer.RIVERFERRY.value: "samochod-prom",
    Layer.RIVERBOAT.value: "pieszy-prom",
    Layer.ROADS.value: "samochod",
    Layer.TUNEL.value: "samochod-tunel",
    Layer.OBJECTS.value: "dom",
}
DEFAULT_PAWN_TEXTURE = "pieszy"


def texture_for_layer(layer: str | Layer, table: Mapping[str, str] | None = None) -> str:
    """Return the pawn texture key for ``layer`` using ``table`` (defaults to PAWN_TEXTURES)."""
    textures = PAWN_TEXTURES if table is None else table
    return textures.get(layer_name(layer), DEFAULT_PAWN_TEXTURE)


class Rotation(str, Enum):
    """Quarter-turn rotation codes used by board-layout documents."""

    ZERO = "ZERO"
    ONE = "ONE"
    TWO = "TWO"
    THREE = "THREE"

    @property
    def radians(self) -> float:
        return _ROTATION_RADIANS[self]

    @classmethod
    def to_radians(cls, code: str | None) -> float:
        """Convert a rotation code to radians; unknown codes render unrotated."""
        try:
            return cls(code).radians
        except ValueError:
            return 0.0


_ROTATION_RADIANS: Dict[Rotation, float] = {
    Rotation.ZERO: 0.0,
    Rotation.ONE: math.pi / 2,
    Rotation.TWO: math.pi,
    Rotation.THREE: 3 * math.pi / 2,
}


# Tile definitions known to the board renderer
TILE_KEYS: FrozenSet[str] = frozenset(
    {
        "bridge",
        "buildings",
        "buildings_metro",
        "double_turn",
        "intersection",
        "parking",
        "partial_intersection",
        "river",
        "river_bridge",
        "river_port",
        "river_train_bridge",
        "river_walk_bridge",
        "road",
        "road_crosswalk",
        "road_parkings",
        "road_tunel",
        "train",
        "train_road_bridge",
        "train_station",
        "train_walk_bridge",
        "turn",
    }
)
