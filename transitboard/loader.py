"""
Graph and board-layout document loading.

This module turns the two external JSON documents a session needs into
runtime objects:
- the transit graph export (nodes + directed edges) -> TransitGraph
- the board layout (tile placements) -> BoardLayoutState

Design philosophy:
- Permissive on load, strict on use: malformed elements are skipped and
  reported, only a document without the required top-level shape is rejected
- Documents can come from already-decoded data (fetched by a UI layer) or
  from files in a board directory

Board directory structure:
```
examples/boards/
  downtown/
    graph.json   {"nodes": [{"id": "SIDEWALKS_R6C6"}], "edges": [{"source": ..., "target": ...}]}
    moves.json   [{"move": {"coordinates": {"row": 1, "column": 1}, ...}}]
```

Usage:
    loader = BoardLoader()
    graph = loader.load_graph("downtown")
    layout = loader.load_layout("downtown")
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from .config import Config
from .environment.graph import GraphEdge, TransitGraph
from .environment.schemas import (
    BoardLayoutState,
    GraphEdgeState,
    GraphNodeState,
    MoveEntry,
)
from .errors import InvalidDocumentError
from .logging_utils import log_debug, log_warning

GRAPH_FILENAME = "graph.json"
LAYOUT_FILENAME = "moves.json"


def _require_sequence(data: Dict[str, Any], key: str, kind: str) -> List[Any]:
    value = data.get(key)
    if not isinstance(value, (list, tuple)):
        raise InvalidDocumentError(kind, f"'{key}' must be a list, got {type(value).__name__}")
    return list(value)


def load_graph(document: Any) -> TransitGraph:
    """Build a TransitGraph from a decoded graph document.

    Raises:
        InvalidDocumentError: if ``document`` is not a mapping with ``nodes``
            and ``edges`` lists.
    """
    if not isinstance(document, dict):
        raise InvalidDocumentError("graph", f"expected an object, got {type(document).__name__}")

    raw_nodes = _require_sequence(document, "nodes", "graph")
    raw_edges = _require_sequence(document, "edges", "graph")

    node_ids: List[str] = []
    skipped_nodes = 0
    for item in raw_nodes:
        try:
            node_ids.append(GraphNodeState.model_validate(item).id)
        except ValidationError:
            skipped_nodes += 1

    edges: List[GraphEdge] = []
    skipped_edges = 0
    for item in raw_edges:
        try:
            edge = GraphEdgeState.model_validate(item)
        except ValidationError:
            skipped_edges += 1
            continue
        edges.append(GraphEdge(source=edge.source, target=edge.target))

    if skipped_nodes or skipped_edges:
        log_warning(
            f"[Loader] Skipped {skipped_nodes} malformed node(s) and "
            f"{skipped_edges} malformed edge(s) in graph document"
        )

    graph = TransitGraph(node_ids=tuple(node_ids), edges=tuple(edges))

    dangling = graph.dangling_edges()
    if dangling:
        log_debug(f"[Loader] {len(dangling)} edge(s) reference unknown nodes and will be ignored")

    return graph


def load_board_layout(document: Any) -> BoardLayoutState:
    """Parse a board-layout document (bare list or ``{"moves": [...]}``).

    Raises:
        InvalidDocumentError: if the document is neither form.
    """
    if isinstance(document, list):
        raw_moves = document
    elif isinstance(document, dict) and isinstance(document.get("moves"), list):
        raw_moves = document["moves"]
    else:
        raise InvalidDocumentError(
            "board layout", "expected a list of moves or an object with a 'moves' list"
        )

    moves: List[MoveEntry] = []
    skipped = 0
    for item in raw_moves:
        try:
            moves.append(MoveEntry.model_validate(item))
        except ValidationError:
            skipped += 1

    if skipped:
        log_warning(f"[Loader] Skipped {skipped} malformed tile placement(s) in board layout")

    return BoardLayoutState(moves=moves)


class BoardLoader:
    """Load graph and layout documents from board directories.

    Directory structure:
    - Default: Config.DATA_DIR ({PROJECT_ROOT}/examples/boards unless DATA_DIR is set)
    - Override via constructor: BoardLoader(Path("/custom/boards"))
    - One sub-directory per board holding graph.json and moves.json
    """

    def __init__(self, boards_dir: Optional[Path] = None):
        self.boards_dir = Path(boards_dir) if boards_dir is not None else Config.DATA_DIR

    def _read_json(self, board_name: str, filename: str) -> Any:
        path = self.boards_dir / board_name / filename
        if not path.exists():
            raise FileNotFoundError(f"Board '{board_name}' has no {filename} at {path}")
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise InvalidDocumentError(filename, f"not valid JSON ({exc})") from exc

    def load_graph(self, board_name: str) -> TransitGraph:
        return load_graph(self._read_json(board_name, GRAPH_FILENAME))

    def load_layout(self, board_name: str) -> BoardLayoutState:
        return load_board_layout(self._read_json(board_name, LAYOUT_FILENAME))

    def load(self, board_name: str) -> Tuple[TransitGraph, BoardLayoutState]:
        """Load both documents of a board.

        Raises:
            FileNotFoundError: If either document is missing
            InvalidDocumentError: If either document is malformed
        """
        return self.load_graph(board_name), self.load_layout(board_name)

    def list_boards(self) -> List[str]:
        """List board directories that contain a graph document."""
        if not self.boards_dir.exists():
            return []

        return sorted(
            entry.name
            for entry in self.boards_dir.iterdir()
            if entry.is_dir() and (entry / GRAPH_FILENAME).exists()
        )
