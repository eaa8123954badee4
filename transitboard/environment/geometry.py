"""Board geometry for the rendering collaborator.

Converts 1-based grid cells and quarter offsets into pixel anchors. Nothing
here draws; a renderer takes the anchors and places sprites.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..layers import TILE_KEYS, Rotation
from ..logging_utils import log_warning
from .codec import ParsedNode
from .schemas import BoardLayoutState

# Unit shift per quarter code as (dx, dy); y grows downwards
_QUARTER_SHIFTS: Dict[str, Tuple[int, int]] = {
    "TL": (-1, -1),
    "TR": (1, -1),
    "BL": (-1, 1),
    "BR": (1, 1),
}

TILE_SCALE = 0.985
PAWN_SCALE = 0.5


@dataclass(frozen=True)
class GridGeometry:
    """Square cells of ``size`` pixels starting at (offset_x, offset_y)."""

    size: float
    offset_x: float = 0.0
    offset_y: float = 0.0

    @classmethod
    def for_canvas(cls, width: float, height: float, grid_size: int, margin: float) -> "GridGeometry":
        """Fit a ``grid_size`` x ``grid_size`` board into a canvas, centred, leaving ``margin``."""
        if grid_size < 1:
            raise ValueError("grid_size must be positive")
        usable = max(min(width, height) - 2 * margin, 0)
        size = usable / grid_size
        board = size * grid_size
        return cls(size=size, offset_x=(width - board) / 2, offset_y=(height - board) / 2)

    def cell_center(self, row: int, column: int) -> Tuple[float, float]:
        x = self.offset_x + (column - 1) * self.size + self.size / 2
        y = self.offset_y + (row - 1) * self.size + self.size / 2
        return x, y

    def pawn_anchor(self, node: ParsedNode) -> Tuple[float, float]:
        """Pixel position of a pawn standing on ``node``.

        Quarters shift by a quarter cell, sub-quarters by a further eighth.
        Unrecognised quarter codes leave the position unchanged.
        """
        x, y = self.cell_center(node.row, node.col)
        for code, divisor in ((node.quarter, 4), (node.sub_quarter, 8)):
            dx, dy = _QUARTER_SHIFTS.get(code or "", (0, 0))
            x += dx * self.size / divisor
            y += dy * self.size / divisor
        return x, y

    @property
    def pawn_display_size(self) -> float:
        return self.size * PAWN_SCALE

    @property
    def tile_display_size(self) -> float:
        return self.size * TILE_SCALE


@dataclass(frozen=True)
class TilePlacement:
    x: float
    y: float
    texture: str
    rotation: float
    row: int
    column: int


def tile_placements(layout: BoardLayoutState, geometry: GridGeometry) -> List[TilePlacement]:
    """Turn a board layout into positioned, rotated tiles ready to draw."""
    placements: List[TilePlacement] = []
    for entry in layout.moves:
        move = entry.move
        row, column = move.coordinates.row, move.coordinates.column
        if move.element_definition_name not in TILE_KEYS:
            log_warning(
                f"[Board] Unknown tile '{move.element_definition_name}' at R{row}C{column}; "
                "renderer needs a matching texture"
            )
        x, y = geometry.cell_center(row, column)
        placements.append(
            TilePlacement(
                x=x,
                y=y,
                texture=move.element_definition_name,
                rotation=Rotation.to_radians(move.rotation),
                row=row,
                column=column,
            )
        )
    return placements
