"""
Investment growth projection package.

This package projects a portfolio month by month from an initial balance,
a constant gross return and a schedule of contribution / withdrawal phases,
under three fee scenarios (no fees, management fee only, management plus
performance fee with optional high-water mark), and summarizes the result
including capital-gains tax.

All public names are re-exported here.
"""

# Models
from logic.growth.models import (
    CONTRIBUTE,
    WITHDRAW,
    PHASE_KINDS,
    InvalidInput,
    Phase,
    SimulationConfig,
    LedgerState,
    YearRow,
    SummaryResult,
    ProjectionResult,
)

# Phase schedule
from logic.growth.schedule import (
    month_to_year,
    resolve_phase,
    monthly_flow,
    total_years,
    append_phase,
    remove_phase,
    edit_phase,
)

# Engine
from logic.growth.engine import (
    GrowthEngine,
    simulate,
    round_currency,
)

# Summary
from logic.growth.summary import (
    summarize,
)

__all__ = [
    # Models
    "CONTRIBUTE",
    "WITHDRAW",
    "PHASE_KINDS",
    "InvalidInput",
    "Phase",
    "SimulationConfig",
    "LedgerState",
    "YearRow",
    "SummaryResult",
    "ProjectionResult",
    # Schedule
    "month_to_year",
    "resolve_phase",
    "monthly_flow",
    "total_years",
    "append_phase",
    "remove_phase",
    "edit_phase",
    # Engine
    "GrowthEngine",
    "simulate",
    "round_currency",
    # Summary
    "summarize",
]
