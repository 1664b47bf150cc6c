"""CP-SAT fill backend using OR-Tools."""

from __future__ import annotations

from collections import defaultdict
from itertools import combinations
from typing import Dict, List, Sequence, Set, Union

from ortools.sat.python import cp_model

from ..core.constants import UNKNOWN
from ..core.exceptions import SearchExhausted, SearchTimeout
from ..core.models import Slot
from ..utils.logger import get_logger
from .domains import Domains
from .grid import CellGrid

LOGGER = get_logger(__name__)

CellValue = Union[cp_model.IntVar, int]


def _letter_value(letter: str) -> int:
    return ord(letter) - ord("A")


def solve_with_cpsat(
    grid: CellGrid,
    slots: Sequence[Slot],
    domains: Domains,
    used_words: Set[str],
    timeout: float = 30.0,
    seed: int = 0,
    num_workers: int = 4,
) -> Dict[int, str]:
    """Fill ``slots`` via CP-SAT and return ``slot id -> word``.

    Args:
        grid: Cell arena; letters already present are treated as constants.
        slots: Slots still to be filled.
        domains: Candidate words per slot id.
        used_words: Words already placed elsewhere, forbidden for ``slots``.
        timeout: Solver time limit in seconds.
        seed: CP-SAT random seed, so retries explore differently.
        num_workers: Parallel CP-SAT search workers.

    Raises:
        SearchExhausted: the model is proven infeasible.
        SearchTimeout: no solution was found within ``timeout``.
    """
    if not slots:
        return {}

    model = cp_model.CpModel()

    # ------------------------------------------------------------------
    # Step 1: Cell letter variables
    # ------------------------------------------------------------------
    cell_vars: Dict[int, CellValue] = {}
    for slot in slots:
        for idx in slot.indices:
            if idx in cell_vars:
                continue
            existing = grid.cells[idx]
            if existing != UNKNOWN:
                cell_vars[idx] = _letter_value(existing)
            else:
                cell_vars[idx] = model.new_int_var(0, 25, f"L_{idx}")

    # ------------------------------------------------------------------
    # Step 2: Per-slot table constraints
    # ------------------------------------------------------------------
    for slot in slots:
        words = [item.word for item in domains[slot.id] if item.word not in used_words]
        if not words:
            raise SearchExhausted(f"Slot {slot.id} has no unused candidates")
        cell_list = [cell_vars[idx] for idx in slot.indices]
        if not any(isinstance(v, cp_model.IntVar) for v in cell_list):
            continue
        model.add_allowed_assignments(
            cell_list, [[_letter_value(ch) for ch in word] for word in words]
        )

    # ------------------------------------------------------------------
    # Step 3: Uniqueness constraints
    # ------------------------------------------------------------------
    by_length: Dict[int, List[Slot]] = defaultdict(list)
    for slot in slots:
        by_length[slot.length].append(slot)
    for group in by_length.values():
        for first, second in combinations(group, 2):
            _add_differ_constraint(model, cell_vars, first, second)

    # ------------------------------------------------------------------
    # Step 4: Solve
    # ------------------------------------------------------------------
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.num_workers = num_workers
    solver.parameters.random_seed = seed % (2**31)

    LOGGER.info(
        "CP-SAT: %d slots, %d cell vars, solving (timeout=%0.1fs)...",
        len(slots),
        sum(1 for v in cell_vars.values() if isinstance(v, cp_model.IntVar)),
        timeout,
    )
    status = solver.solve(model)

    if status == cp_model.INFEASIBLE:
        raise SearchExhausted("CP-SAT proved the grid cannot be filled")
    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        raise SearchTimeout(f"CP-SAT found no solution (status={solver.status_name(status)})")

    LOGGER.info("CP-SAT: solution found in %.2fs", solver.wall_time)

    # ------------------------------------------------------------------
    # Step 5: Extract solution
    # ------------------------------------------------------------------
    return {
        slot.id: "".join(chr(_resolve_var(solver, cell_vars[idx]) + ord("A")) for idx in slot.indices)
        for slot in slots
    }


def _resolve_var(solver: cp_model.CpSolver, var_or_const: CellValue) -> int:
    if isinstance(var_or_const, cp_model.IntVar):
        return solver.value(var_or_const)
    return var_or_const


def _add_differ_constraint(
    model: cp_model.CpModel,
    cell_vars: Dict[int, CellValue],
    first: Slot,
    second: Slot,
) -> None:
    """Ensure two same-length slots cannot contain identical words."""
    diffs = []
    for pos, (idx1, idx2) in enumerate(zip(first.indices, second.indices)):
        v1 = cell_vars[idx1]
        v2 = cell_vars[idx2]
        if not isinstance(v1, cp_model.IntVar) and not isinstance(v2, cp_model.IntVar):
            if v1 != v2:
                return  # constants already differ
            continue
        if not isinstance(v1, cp_model.IntVar):
            v1, v2 = v2, v1
        b = model.new_bool_var(f"d_{first.id}_{second.id}_{pos}")
        model.add(v1 != v2).only_enforce_if(b)
        model.add(v1 == v2).only_enforce_if(~b)
        diffs.append(b)
    if diffs:
        model.add_bool_or(diffs)


__all__ = ["solve_with_cpsat"]
