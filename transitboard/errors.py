"""Exceptions and rejection reasons shared across Transitboard.

Exceptions are raised only for broken external contracts (a malformed graph
document, a graph with nowhere to start). Ordinary gameplay outcomes such as
"there is no road to the north" are reported as ``RejectionReason`` values
through the notification channel instead.
"""

from enum import Enum


class TransitBoardError(Exception):
    """Base class for all Transitboard errors."""


class MalformedIdError(TransitBoardError):
    """Raised when a node identifier has no parseable ``R<row>C<col>`` segment."""

    def __init__(self, node_id: str, reason: str = "missing row or column group") -> None:
        self.node_id = node_id
        self.reason = reason
        super().__init__(
            f"Malformed node id {node_id!r}: {reason}\n"
            "Expected format: <LAYER>_R<row>C<column>[_<QUARTER>][_<SUBQUARTER>], "
            "e.g. SIDEWALKS_R6C6_TL_null"
        )


class InvalidDocumentError(TransitBoardError):
    """Raised when a graph or board-layout document does not have the required shape."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        message = (
            f"Invalid {kind} document: {reason}\n\n"
            "Remediation tips:\n"
            "  - Graph documents look like {\"nodes\": [{\"id\": ...}], \"edges\": [{\"source\": ..., \"target\": ...}]}\n"
            "  - Board layouts are a list of {\"move\": {...}} entries or {\"moves\": [...]}\n"
            "  - Check that the file is the exported JSON, not an HTML error page"
        )
        super().__init__(message)


class NoStartingNodeError(TransitBoardError):
    """Raised when a graph has no node a new session could start on."""

    def __init__(self, preferred_layers: list[str]) -> None:
        self.preferred_layers = preferred_layers
        layers = ", ".join(preferred_layers) or "<none>"
        message = (
            f"No starting node available (preferred layers: {layers}).\n\n"
            "The graph contains no node on a preferred layer and no node outside "
            "a building. Load a graph with at least one outdoor node."
        )
        super().__init__(message)


class RejectionReason(str, Enum):
    """Why a requested transition left the pawn where it was."""

    NOT_READY = "not ready"
    NO_CANDIDATE = "no candidate"
    NO_BUILDING_ADJACENT = "no building adjacent"
    NO_EXIT_AVAILABLE = "no exit available"
    NO_ALTERNATE_LAYER = "no alternate layer adjacent"
    UNKNOWN_NODE = "unknown node"
