import math
from dataclasses import replace
from typing import Hashable, List, Optional, Sequence

from logic.growth.models import CONTRIBUTE, Phase, total_years  # noqa: F401 (re-exported)


def month_to_year(month: int) -> int:
    """Map a 1-based elapsed month to its 1-based year (months 1-12 -> year 1)."""
    return math.ceil(month / 12)


def resolve_phase(phases: Sequence[Phase], month: int) -> Optional[Phase]:
    """
    Find the phase that applies to an elapsed month.

    The first phase in list order whose inclusive year range contains the
    month's year wins, so overlapping phases resolve by position. Returns None
    when no phase covers the year (that month has no cash flow).
    """
    year = month_to_year(month)
    for phase in phases:
        if phase.covers(year):
            return phase
    return None


def monthly_flow(phases: Sequence[Phase], month: int) -> float:
    """Signed cash flow for a month: positive contribution, negative withdrawal."""
    phase = resolve_phase(phases, month)
    return phase.signed_amount if phase else 0.0


def append_phase(
    phases: Sequence[Phase],
    phase_id: Hashable,
    length: int = 10,
    amount: float = 5000.0,
    kind: str = CONTRIBUTE
) -> List[Phase]:
    """Return a new list with a phase starting the year after the current last phase."""
    start = phases[-1].end_year + 1 if phases else 1
    new_phase = Phase(
        id=phase_id,
        start_year=start,
        end_year=start + length - 1,
        monthly_amount=amount,
        kind=kind,
    )
    return list(phases) + [new_phase]


def remove_phase(phases: Sequence[Phase], phase_id: Hashable) -> List[Phase]:
    return [p for p in phases if p.id != phase_id]


def edit_phase(phases: Sequence[Phase], phase_id: Hashable, **changes) -> List[Phase]:
    """Return a new list where the phase with `phase_id` has `changes` applied."""
    return [replace(p, **changes) if p.id == phase_id else p for p in phases]
