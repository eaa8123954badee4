"""Transit graph store.

The graph is loaded once per session and never mutated afterwards. Nodes are
positional ids; edges are directed, but traversal treats them as usable in
both directions unless told otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Iterator, List, Tuple


@dataclass(frozen=True)
class GraphEdge:
    source: str
    target: str


@dataclass(frozen=True)
class TransitGraph:
    """Immutable adjacency structure over positional node ids."""

    node_ids: Tuple[str, ...] = ()
    edges: Tuple[GraphEdge, ...] = ()
    _known: FrozenSet[str] = field(init=False, repr=False, compare=False)
    _outgoing: Dict[str, List[str]] = field(init=False, repr=False, compare=False)
    _incoming: Dict[str, List[str]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Deduplicate ids but keep first-seen order for deterministic iteration
        ordered = tuple(dict.fromkeys(self.node_ids))
        object.__setattr__(self, "node_ids", ordered)
        object.__setattr__(self, "edges", tuple(self.edges))
        object.__setattr__(self, "_known", frozenset(ordered))

        outgoing: Dict[str, List[str]] = {}
        incoming: Dict[str, List[str]] = {}
        for edge in self.edges:
            outgoing.setdefault(edge.source, []).append(edge.target)
            incoming.setdefault(edge.target, []).append(edge.source)
        object.__setattr__(self, "_outgoing", outgoing)
        object.__setattr__(self, "_incoming", incoming)

    @classmethod
    def build(cls, node_ids: Iterable[str], edges: Iterable[Tuple[str, str]]) -> "TransitGraph":
        """Convenience constructor from plain ids and (source, target) pairs."""
        return cls(
            node_ids=tuple(node_ids),
            edges=tuple(GraphEdge(source, target) for source, target in edges),
        )

    def has_node(self, node_id: str) -> bool:
        return node_id in self._known

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._known

    def __len__(self) -> int:
        return len(self.node_ids)

    def __iter__(self) -> Iterator[str]:
        return iter(self.node_ids)

    def neighbors(self, node_id: str, bidirectional: bool = True) -> List[str]:
        """Return node ids one edge hop away from ``node_id``.

        Outgoing targets come first in edge order, followed by incoming
        sources when ``bidirectional`` is set. The result is deduplicated and
        only contains ids present in the node set, so dangling edges are
        ignored. Unknown ids simply have no neighbours.
        """
        candidates = list(self._outgoing.get(node_id, []))
        if bidirectional:
            candidates.extend(self._incoming.get(node_id, []))
        return [nid for nid in dict.fromkeys(candidates) if nid in self._known]

    def dangling_edges(self) -> List[GraphEdge]:
        """Edges with at least one endpoint missing from the node set."""
        return [
            edge
            for edge in self.edges
            if edge.source not in self._known or edge.target not in self._known
        ]
