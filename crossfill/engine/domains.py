"""Candidate domains per slot and the AC-3 pre-pass."""

from __future__ import annotations

import random
from collections import deque
from typing import Collection, Deque, Dict, List, Sequence, Set, Tuple

from ..core.constants import UNKNOWN
from ..core.exceptions import PreconditionFailure
from ..core.models import ScoredWord, Slot
from ..data.lexicon import Lexicon
from ..utils.logger import get_logger
from .constraints import ConstraintGraph
from .grid import CellGrid

LOGGER = get_logger(__name__)

Domains = Dict[int, List[ScoredWord]]


def initialize_domains(
    grid: CellGrid,
    slots: Sequence[Slot],
    lexicon: Lexicon,
    min_score: int,
    rng: random.Random,
    prefer_quality: bool = False,
    pinned: Collection[int] = (),
) -> Domains:
    """Compute the shuffled candidate list of every slot.

    A slot whose pattern has no match at ``min_score`` is retried at score 0.
    Slots listed in ``pinned`` keep exactly their pinned word; any other slot,
    even one whose letters are all fixed by crossings, must match the lexicon.
    """

    domains: Domains = {}
    for slot in slots:
        pattern = grid.pattern(slot)
        if slot.id in pinned:
            if UNKNOWN in pattern:
                raise PreconditionFailure(f"Pinned slot {slot.id} is incomplete: {pattern}")
            domains[slot.id] = [ScoredWord(pattern, lexicon.score(pattern))]
            continue

        candidates = lexicon.match_pattern(pattern, min_score)
        if not candidates and min_score > 0:
            LOGGER.debug(
                "Slot %d (%s) empty at min score %d; retrying at 0", slot.id, pattern, min_score
            )
            candidates = lexicon.match_pattern(pattern, 0)
        if not candidates:
            raise PreconditionFailure(
                f"No words fit slot {slot.id} ({slot.direction.value} at "
                f"{slot.start.x},{slot.start.y}) with pattern {pattern}"
            )

        rng.shuffle(candidates)
        if prefer_quality:
            candidates.sort(key=lambda item: -item.score)
        domains[slot.id] = candidates
    return domains


def _revise(domains: Domains, slot_id: int, other_id: int, index: int, other_index: int) -> bool:
    supported: Set[str] = {item.word[other_index] for item in domains[other_id]}
    kept = [item for item in domains[slot_id] if item.word[index] in supported]
    if len(kept) == len(domains[slot_id]):
        return False
    domains[slot_id] = kept
    return True


def arc_consistency(domains: Domains, graph: ConstraintGraph) -> bool:
    """Narrow ``domains`` in place until every arc is consistent.

    Returns False as soon as a domain is wiped out.
    """

    queue: Deque[Tuple[int, int, int, int]] = deque()
    for slot_id in domains:
        for other_id, index, other_index in graph.neighbors(slot_id):
            queue.append((slot_id, other_id, index, other_index))

    revisions = 0
    while queue:
        slot_id, other_id, index, other_index = queue.popleft()
        if not _revise(domains, slot_id, other_id, index, other_index):
            continue
        revisions += 1
        if not domains[slot_id]:
            LOGGER.debug("AC-3 emptied slot %d", slot_id)
            return False
        for neighbor_id, n_index, n_other_index in graph.neighbors(slot_id):
            if neighbor_id != other_id:
                queue.append((neighbor_id, slot_id, n_other_index, n_index))
    LOGGER.debug("AC-3 finished after %d revisions", revisions)
    return True


__all__ = ["Domains", "arc_consistency", "initialize_domains"]
