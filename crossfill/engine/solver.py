"""Backtracking CSP search with MRV, forward checking and retries."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Set

from ..core.constants import UNKNOWN, FillStrategy
from ..core.exceptions import PreconditionFailure, SearchExhausted, SearchTimeout
from ..core.models import FilledGrid, FilledSlot, GridSpec, Slot, ThemeEntry
from ..data.lexicon import Lexicon
from ..data.normalization import clean_word
from ..utils.logger import get_logger
from .constraints import ConstraintGraph
from .cpsat import solve_with_cpsat
from .domains import Domains, arc_consistency, initialize_domains
from .grid import CellGrid, extract_slots
from .patterns import validate_pattern

LOGGER = get_logger(__name__)

Clock = Callable[[], float]


@dataclass
class FillConfig:
    """Knobs for one call to :meth:`GridFiller.fill`."""

    max_retries: int = 10
    attempt_timeout_seconds: float = 30.0
    use_arc_consistency: bool = True
    prefer_quality: bool = False
    strategy: FillStrategy = FillStrategy.BACKTRACKING


@dataclass
class SearchStats:
    nodes: int = 0
    backtracks: int = 0
    prunes: int = 0


class BacktrackingSolver:
    """Depth-first search over slot assignments for a single attempt.

    The grid is mutated in place and restored from a snapshot on every
    backtrack. Domains are never mutated; forward checking works on a copy.
    """

    def __init__(
        self,
        grid: CellGrid,
        slots: Sequence[Slot],
        graph: ConstraintGraph,
        lexicon: Lexicon,
        rng: random.Random,
        deadline: float,
        clock: Clock = time.monotonic,
    ) -> None:
        self.grid = grid
        self.slots = {slot.id: slot for slot in slots}
        self.graph = graph
        self.lexicon = lexicon
        self.rng = rng
        self.deadline = deadline
        self.clock = clock
        self.stats = SearchStats()
        self._rank: Dict[int, int] = {}

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------
    def _is_edge(self, slot: Slot) -> bool:
        last_x = self.grid.width - 1
        last_y = self.grid.height - 1
        return any(pos.x in (0, last_x) or pos.y in (0, last_y) for pos in slot.cells)

    def _initial_order(self, domains: Domains) -> List[int]:
        """Edge slots first, then most crossings, then smallest domain."""

        order = list(self.slots)
        self.rng.shuffle(order)
        order.sort(
            key=lambda slot_id: (
                not self._is_edge(self.slots[slot_id]),
                -self.graph.crossing_count(slot_id),
                len(domains[slot_id]),
            )
        )
        return order

    def _select(self, domains: Domains, assignment: Dict[int, str]) -> Optional[Slot]:
        best: Optional[int] = None
        for slot_id in self.slots:
            if slot_id in assignment:
                continue
            if best is None or (len(domains[slot_id]), self._rank[slot_id]) < (
                len(domains[best]),
                self._rank[best],
            ):
                best = slot_id
        return self.slots[best] if best is not None else None

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def solve(self, domains: Domains, assignment: Optional[Dict[int, str]] = None) -> List[FilledSlot]:
        """Assign a word to every slot or raise.

        ``assignment`` holds slots that are already fully pinned in the grid.
        Raises :class:`SearchTimeout` once the deadline passes and
        :class:`SearchExhausted` when every branch failed.
        """

        assignment = dict(assignment or {})
        used: Set[str] = set(assignment.values())
        self._rank = {slot_id: rank for rank, slot_id in enumerate(self._initial_order(domains))}

        try:
            found = self._search(domains, assignment, used)
        finally:
            LOGGER.info(
                "Search stats: %d nodes, %d backtracks, %d forward-check prunes",
                self.stats.nodes,
                self.stats.backtracks,
                self.stats.prunes,
            )
        if not found:
            raise SearchExhausted(f"No fill found after {self.stats.nodes} search nodes")

        return [
            FilledSlot(
                slot=self.slots[slot_id],
                word=assignment[slot_id],
                score=self.lexicon.score(assignment[slot_id]),
            )
            for slot_id in sorted(self.slots)
        ]

    def _search(self, domains: Domains, assignment: Dict[int, str], used: Set[str]) -> bool:
        if self.clock() > self.deadline:
            raise SearchTimeout(
                f"Attempt exceeded its deadline after {self.stats.nodes} search nodes"
            )
        self.stats.nodes += 1

        slot = self._select(domains, assignment)
        if slot is None:
            return True

        for candidate in domains[slot.id]:
            word = candidate.word
            if len(word) != slot.length or word in used or self.grid.conflicts(slot, word):
                continue

            snapshot = self.grid.snapshot()
            self.grid.place(slot, word)
            narrowed = self._forward_check(slot, word, domains, assignment)
            if narrowed is None:
                self.stats.prunes += 1
                self.grid.restore(snapshot)
                continue

            assignment[slot.id] = word
            used.add(word)
            if self._search(narrowed, assignment, used):
                return True

            self.stats.backtracks += 1
            del assignment[slot.id]
            used.discard(word)
            self.grid.restore(snapshot)
        return False

    def _forward_check(
        self,
        slot: Slot,
        word: str,
        domains: Domains,
        assignment: Dict[int, str],
    ) -> Optional[Domains]:
        """Filter crossing domains to the letters of ``word``.

        Returns the narrowed copy, or None when a crossing domain empties.
        """

        narrowed = dict(domains)
        narrowed[slot.id] = [item for item in domains[slot.id] if item.word == word]
        for other_id, index, other_index in self.graph.neighbors(slot.id):
            if other_id in assignment:
                continue
            letter = word[index]
            remaining = [item for item in narrowed[other_id] if item.word[other_index] == letter]
            if not remaining:
                return None
            narrowed[other_id] = remaining
        return narrowed


class GridFiller:
    """Fill a :class:`GridSpec` from a lexicon, retrying with fresh seeds."""

    def __init__(
        self,
        lexicon: Lexicon,
        config: Optional[FillConfig] = None,
        clock: Clock = time.monotonic,
    ) -> None:
        self.lexicon = lexicon
        self.config = config or FillConfig()
        self.clock = clock

    def fill(self, spec: GridSpec, seed: Optional[int] = None) -> FilledGrid:
        """Return a completely filled grid or raise a :class:`FillError`.

        Layouts with short runs, asymmetry or disconnected white cells are
        rejected with :class:`PreconditionFailure` before any search runs.
        """

        layout = validate_pattern(spec.width, spec.height, spec.black_squares)
        if not layout.ok:
            raise PreconditionFailure("Invalid layout: " + "; ".join(layout.messages))

        base = CellGrid.from_spec(spec)
        slots = extract_slots(base)
        graph = ConstraintGraph.build(slots)
        pinned = self._place_theme_entries(base, slots, spec.theme_entries)

        master = random.Random(seed)
        last_error: Optional[Exception] = None
        attempts = max(1, self.config.max_retries)
        for attempt in range(1, attempts + 1):
            attempt_seed = master.randrange(2**32)
            rng = random.Random(attempt_seed)
            grid = CellGrid(spec.width, spec.height)
            grid.restore(base.snapshot())
            LOGGER.info(
                "Fill attempt %d/%d for %dx%d grid (%d slots, seed=%d)",
                attempt,
                attempts,
                spec.width,
                spec.height,
                len(slots),
                attempt_seed,
            )

            domains = initialize_domains(
                grid,
                slots,
                self.lexicon,
                spec.min_word_score,
                rng,
                self.config.prefer_quality,
                pinned=pinned,
            )
            if self.config.use_arc_consistency and not arc_consistency(domains, graph):
                raise SearchExhausted("Arc consistency emptied a slot domain before search")

            assignment = {slot.id: grid.pattern(slot) for slot in slots if slot.id in pinned}
            try:
                filled_slots = self._run_search(grid, slots, graph, domains, assignment, rng, attempt_seed)
            except SearchExhausted as exc:
                if self.config.strategy == FillStrategy.CPSAT:
                    raise
                last_error = exc
                LOGGER.warning("Attempt %d exhausted: %s", attempt, exc)
                continue
            except SearchTimeout as exc:
                last_error = exc
                LOGGER.warning("Attempt %d timed out: %s", attempt, exc)
                continue

            if not grid.is_complete():
                raise PreconditionFailure(
                    f"Fill left {grid.cells.count(UNKNOWN)} cells outside every slot"
                )
            LOGGER.info("Grid filled on attempt %d", attempt)
            return FilledGrid(
                width=spec.width,
                height=spec.height,
                letters=grid.letter_matrix(),
                slots=filled_slots,
                seed=seed,
            )

        raise last_error or SearchExhausted(f"No fill found in {attempts} attempts")

    def _run_search(
        self,
        grid: CellGrid,
        slots: Sequence[Slot],
        graph: ConstraintGraph,
        domains: Domains,
        assignment: Dict[int, str],
        rng: random.Random,
        attempt_seed: int,
    ) -> List[FilledSlot]:
        timeout = self.config.attempt_timeout_seconds
        if self.config.strategy == FillStrategy.CPSAT:
            open_slots = [slot for slot in slots if slot.id not in assignment]
            words = solve_with_cpsat(
                grid, open_slots, domains, set(assignment.values()), timeout, attempt_seed
            )
            words.update(assignment)
            for slot in slots:
                grid.place(slot, words[slot.id])
            return [
                FilledSlot(slot=slot, word=words[slot.id], score=self.lexicon.score(words[slot.id]))
                for slot in slots
            ]

        solver = BacktrackingSolver(
            grid, slots, graph, self.lexicon, rng, self.clock() + timeout, self.clock
        )
        return solver.solve(domains, assignment)

    def _place_theme_entries(
        self,
        grid: CellGrid,
        slots: Sequence[Slot],
        entries: Sequence[ThemeEntry],
    ) -> Set[int]:
        """Write theme answers into ``grid``; return the ids of their slots."""

        by_key = {(slot.direction, slot.start): slot for slot in slots}
        placed: Set[str] = set()
        pinned: Set[int] = set()
        for entry in entries:
            answer = clean_word(entry.answer)
            slot = by_key.get((entry.direction, entry.start))
            if slot is None or slot.length != len(answer):
                raise PreconditionFailure(
                    f"Theme entry {answer} has no {entry.direction.value} slot of length "
                    f"{len(answer)} at ({entry.start.x},{entry.start.y})"
                )
            if answer in placed:
                raise PreconditionFailure(f"Theme entry {answer} is pinned twice")
            if grid.conflicts(slot, answer):
                raise PreconditionFailure(f"Theme entry {answer} conflicts with another pinned entry")
            grid.place(slot, answer)
            placed.add(answer)
            pinned.add(slot.id)
            LOGGER.debug("Pinned theme entry %s in slot %d", answer, slot.id)
        return pinned


__all__ = ["BacktrackingSolver", "FillConfig", "GridFiller", "SearchStats"]
