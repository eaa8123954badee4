"""Node identifier codec.

Node ids carry their own position: ``<LAYER>_R<row>C<column>[_<QUARTER>][_<SUBQUARTER>]``.
Segment 0 is the layer tag (accepted verbatim), segment 1 the coordinates,
segments 2 and 3 the optional quarter and sub-quarter offsets within a cell.
The literal ``null`` in an optional segment means the value is absent.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ..errors import MalformedIdError
from ..logging_utils import log_warning

QUARTERS = ("TL", "TR", "BL", "BR")
NULL_TOKEN = "null"

_COORDINATE_PATTERN = re.compile(r"R(\d+)C(\d+)")


@dataclass(frozen=True)
class ParsedNode:
    """Structured form of a node id."""

    layer: str
    row: int
    col: int
    quarter: Optional[str] = None
    sub_quarter: Optional[str] = None

    @property
    def cell(self) -> tuple[int, int]:
        return self.row, self.col

    def manhattan_distance(self, other: "ParsedNode") -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)


def _optional_segment(parts: list[str], index: int) -> Optional[str]:
    if index >= len(parts):
        return None
    value = parts[index]
    if not value or value == NULL_TOKEN:
        return None
    return value


def parse_node_id(node_id: str) -> ParsedNode:
    """Decode ``node_id`` into a ``ParsedNode``.

    Raises:
        MalformedIdError: if the coordinate segment is missing or is not
            exactly ``R<digits>C<digits>``.
    """
    if not isinstance(node_id, str):
        raise MalformedIdError(repr(node_id), "node id must be a string")

    parts = node_id.split("_")
    if len(parts) < 2:
        raise MalformedIdError(node_id, "missing coordinate segment")

    match = _COORDINATE_PATTERN.fullmatch(parts[1])
    if match is None:
        raise MalformedIdError(node_id)

    return ParsedNode(
        layer=parts[0],
        row=int(match.group(1)),
        col=int(match.group(2)),
        quarter=_optional_segment(parts, 2),
        sub_quarter=_optional_segment(parts, 3),
    )


def try_parse_node_id(node_id: str) -> Optional[ParsedNode]:
    """Like ``parse_node_id`` but logs and returns None for malformed ids."""
    try:
        return parse_node_id(node_id)
    except MalformedIdError as exc:
        log_warning(f"[Codec] Ignoring malformed node id {exc.node_id}: {exc.reason}")
        return None


def format_node_id(
    layer: str,
    row: int,
    col: int,
    quarter: Optional[str] = None,
    sub_quarter: Optional[str] = None,
) -> str:
    """Encode a position as a node id. Inverse of ``parse_node_id``.

    A sub-quarter without a quarter is written with a ``null`` quarter
    placeholder so the sub-quarter stays in segment 3.
    """
    if row < 1 or col < 1:
        raise ValueError(f"row and column are 1-based, got R{row}C{col}")

    segments = [str(layer), f"R{row}C{col}"]
    if quarter is not None or sub_quarter is not None:
        segments.append(quarter if quarter is not None else NULL_TOKEN)
    if sub_quarter is not None:
        segments.append(sub_quarter)
    return "_".join(segments)


def encode_node(node: ParsedNode) -> str:
    return format_node_id(node.layer, node.row, node.col, node.quarter, node.sub_quarter)
