"""Crossing constraints between slots."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from ..core.models import Constraint, Slot
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

# (other slot id, index in this slot, index in the other slot)
Neighbor = Tuple[int, int, int]


@dataclass
class ConstraintGraph:
    constraints: List[Constraint] = field(default_factory=list)
    uncrossed: List[int] = field(default_factory=list)
    _neighbors: Dict[int, List[Neighbor]] = field(default_factory=lambda: defaultdict(list))

    @classmethod
    def build(cls, slots: Sequence[Slot]) -> "ConstraintGraph":
        """Link every pair of slots sharing a cell.

        Cells owned by a single slot are collected in ``uncrossed``; a valid
        layout never produces them.
        """

        owners: Dict[int, List[Tuple[int, int]]] = defaultdict(list)
        for slot in slots:
            for offset, cell in enumerate(slot.indices):
                owners[cell].append((slot.id, offset))

        graph = cls()
        for cell in sorted(owners):
            owned = owners[cell]
            if len(owned) == 2:
                (slot_a, index_a), (slot_b, index_b) = owned
                graph.constraints.append(Constraint(slot_a, index_a, slot_b, index_b))
                graph._neighbors[slot_a].append((slot_b, index_a, index_b))
                graph._neighbors[slot_b].append((slot_a, index_b, index_a))
            else:
                graph.uncrossed.append(cell)

        if graph.uncrossed:
            LOGGER.warning("%d white cells are not crossed by two slots", len(graph.uncrossed))
        LOGGER.debug("Built %d constraints for %d slots", len(graph.constraints), len(slots))
        return graph

    def neighbors(self, slot_id: int) -> List[Neighbor]:
        return self._neighbors.get(slot_id, [])

    def crossing_count(self, slot_id: int) -> int:
        return len(self.neighbors(slot_id))


__all__ = ["ConstraintGraph", "Neighbor"]
