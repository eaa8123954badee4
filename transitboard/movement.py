"""
Pawn movement state machine.

PawnController is the single owner of the pawn's position. It consults the
resolver for every request, applies accepted transitions atomically and
notifies subscribed listeners. Listeners (board renderer, HUD, debug log)
never mutate the state; they only react to events.

Lifecycle:
- UNINITIALIZED: no node selected, every movement request is refused (NOT_READY)
- IDLE: the pawn stands on a node and accepts move / toggle_building /
  change_layer / teleport requests; each success loops back to IDLE
- reset() returns to UNINITIALIZED from anywhere

Usage:
    controller = PawnController(graph, listeners=[renderer.on_event])
    controller.start()
    controller.move("up")
    controller.toggle_building()
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, List, Optional

from pydantic import BaseModel, Field

from .config import Config
from .environment.codec import try_parse_node_id
from .environment.graph import TransitGraph
from .environment.resolver import (
    ChoiceSource,
    pick_random_start,
    resolve_building_transition,
    resolve_direction,
    resolve_layer_change,
)
from .errors import RejectionReason
from .events import (
    BuildingTransitionRejected,
    LayerChanged,
    LayerChangeRejected,
    MoveRejected,
    PawnEvent,
    PositionChanged,
    SessionReset,
)
from .layers import BUILDING_LAYER, DEFAULT_LAYER_POLICY, Layer, LayerPolicy
from .logging_utils import log_debug, log_error, log_success

PawnListener = Callable[[PawnEvent], None]


class SessionPhase(str, Enum):
    UNINITIALIZED = "uninitialized"
    IDLE = "idle"


class MovementState(BaseModel):
    """Snapshot of where the pawn is and whether it may move."""

    current_node_id: Optional[str] = Field(None, description="Node the pawn stands on")
    current_layer: str = Field(default_factory=lambda: Config.DEFAULT_LAYER)
    inside_building: bool = False
    can_move: bool = False


class PawnController:
    """Owns MovementState and applies validated transitions to it."""

    def __init__(
        self,
        graph: Optional[TransitGraph] = None,
        *,
        policy: LayerPolicy = DEFAULT_LAYER_POLICY,
        bidirectional: Optional[bool] = None,
        rng: Optional[ChoiceSource] = None,
        listeners: Optional[Iterable[PawnListener]] = None,
    ) -> None:
        self.graph = graph
        self.policy = policy
        self.bidirectional = Config.BIDIRECTIONAL if bidirectional is None else bidirectional
        self.rng = rng
        self._listeners: List[PawnListener] = list(listeners or [])
        self._state = MovementState()
        self._phase = SessionPhase.UNINITIALIZED

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    @property
    def state(self) -> MovementState:
        """Copy of the current state; mutating it has no effect on the controller."""
        return self._state.model_copy()

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def ready(self) -> bool:
        return self._phase is SessionPhase.IDLE and self._state.can_move

    def subscribe(self, listener: PawnListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: PawnListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, *events: PawnEvent) -> None:
        # A broken listener must not leave the session half-updated
        for event in events:
            for listener in list(self._listeners):
                try:
                    listener(event)
                except Exception as exc:  # pragma: no cover - diagnostic hook
                    log_error(f"[Pawn] Listener failed on {event.kind}: {exc}")

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _place(self, node_id: str) -> List[PawnEvent]:
        """Move the pawn onto ``node_id`` and return the events describing it."""
        parsed = try_parse_node_id(node_id)
        # Callers only pass ids that already decoded
        assert parsed is not None, node_id

        previous_layer = self._state.current_layer
        was_placed = self._phase is SessionPhase.IDLE
        self._state = MovementState(
            current_node_id=node_id,
            current_layer=parsed.layer,
            inside_building=parsed.layer == BUILDING_LAYER,
            can_move=True,
        )
        self._phase = SessionPhase.IDLE

        events: List[PawnEvent] = [
            PositionChanged(
                node_id=node_id,
                layer=parsed.layer,
                inside_building=self._state.inside_building,
            )
        ]
        if was_placed and previous_layer != parsed.layer:
            events.append(LayerChanged(from_layer=previous_layer, to_layer=parsed.layer))
        return events

    def start(
        self,
        graph: Optional[TransitGraph] = None,
        preferred_layers: Optional[Iterable[str | Layer]] = None,
    ) -> bool:
        """Begin (or restart) a session on a random node.

        Raises:
            ValueError: if no graph was given here or at construction.
            NoStartingNodeError: if the graph has no eligible starting node.
        """
        if graph is not None:
            self.graph = graph
        if self.graph is None:
            raise ValueError("PawnController.start() needs a graph; load one with load_graph() first")

        layers = list(preferred_layers) if preferred_layers is not None else list(Config.START_LAYERS)
        node_id = pick_random_start(self.graph, layers, rng=self.rng)

        # A restart is a fresh placement, not a layer change
        self._state = MovementState()
        self._phase = SessionPhase.UNINITIALIZED
        events = self._place(node_id)
        log_success(f"[Pawn] Session started on {node_id}")
        self._emit(*events)
        return True

    def teleport(self, node_id: str) -> bool:
        """Place the pawn directly on ``node_id`` (must exist in the graph)."""
        if self.graph is None:
            self._reject(MoveRejected(direction="teleport", reason=RejectionReason.NOT_READY))
            return False
        if not self.graph.has_node(node_id) or try_parse_node_id(node_id) is None:
            self._reject(MoveRejected(direction="teleport", reason=RejectionReason.UNKNOWN_NODE))
            return False

        self._emit(*self._place(node_id))
        return True

    def move(self, direction: str) -> bool:
        """Step one hop in ``direction`` (up / down / left / right)."""
        if not self.ready:
            self._reject(MoveRejected(direction=direction, reason=RejectionReason.NOT_READY))
            return False

        target = resolve_direction(
            self.graph,
            self._state.current_node_id,
            direction,
            self._state.current_layer,
            policy=self.policy,
            bidirectional=self.bidirectional,
        )
        if target is None:
            self._reject(MoveRejected(direction=direction, reason=RejectionReason.NO_CANDIDATE))
            return False

        self._emit(*self._place(target))
        return True

    def toggle_building(self) -> bool:
        """Enter the adjacent building, or leave the one the pawn is in."""
        if not self.ready:
            self._reject(BuildingTransitionRejected(reason=RejectionReason.NOT_READY))
            return False

        inside = self._state.inside_building
        target = resolve_building_transition(
            self.graph,
            self._state.current_node_id,
            inside,
            bidirectional=self.bidirectional,
        )
        if target is None:
            reason = RejectionReason.NO_EXIT_AVAILABLE if inside else RejectionReason.NO_BUILDING_ADJACENT
            self._reject(BuildingTransitionRejected(reason=reason))
            return False

        # The target is picked by its layer tag, so placing it flips inside_building
        self._emit(*self._place(target))
        return True

    def change_layer(self) -> bool:
        """Switch to the first adjacent node on a different layer."""
        if not self.ready:
            self._reject(LayerChangeRejected(reason=RejectionReason.NOT_READY))
            return False

        target = resolve_layer_change(
            self.graph,
            self._state.current_node_id,
            self._state.current_layer,
            bidirectional=self.bidirectional,
        )
        if target is None:
            self._reject(LayerChangeRejected(reason=RejectionReason.NO_ALTERNATE_LAYER))
            return False

        self._emit(*self._place(target))
        return True

    def reset(self) -> None:
        """Clear the session back to its initial, immobile state."""
        previous = self._state.current_node_id
        self._state = MovementState()
        self._phase = SessionPhase.UNINITIALIZED
        log_debug(f"[Pawn] Session reset (was on {previous})")
        self._emit(SessionReset(previous_node_id=previous))

    def _reject(self, event: PawnEvent) -> None:
        log_debug(f"[Pawn] Rejected: {event.model_dump()}")
        self._emit(event)
