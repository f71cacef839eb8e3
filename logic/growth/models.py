import pandas as pd
from typing import Hashable, List, Optional, Tuple
from dataclasses import dataclass, field

CONTRIBUTE = "contribute"
WITHDRAW = "withdraw"
PHASE_KINDS = (CONTRIBUTE, WITHDRAW)

MIN_HORIZON_YEARS = 5


class InvalidInput(ValueError):
    """Raised when a configuration cannot be summarized (no rows, no elapsed years)."""


def total_years(phases, minimum: int = MIN_HORIZON_YEARS) -> int:
    """Projection horizon: the latest phase end year, never shorter than `minimum`."""
    return max([p.end_year for p in phases] + [minimum])


@dataclass(frozen=True)
class Phase:
    """A whole-year interval with a fixed monthly contribution or withdrawal."""
    id: Hashable
    start_year: int
    end_year: int
    monthly_amount: float
    kind: str = CONTRIBUTE  # 'contribute' or 'withdraw'

    @property
    def is_withdrawal(self) -> bool:
        return self.kind == WITHDRAW

    @property
    def signed_amount(self) -> float:
        """Monthly amount, negative for withdrawals."""
        return -self.monthly_amount if self.is_withdrawal else self.monthly_amount

    def covers(self, year: int) -> bool:
        return self.start_year <= year <= self.end_year


@dataclass(frozen=True)
class SimulationConfig:
    """Bundles every input of one projection run. All rates are fractions (0.08 = 8%)."""
    initial: float
    annual_return: float
    management_fee: float = 0.0
    performance_fee: float = 0.0
    use_high_water_mark: bool = True
    apply_tax: bool = False
    tax_rate: float = 0.0
    time_test_exempt: bool = False
    phases: Tuple[Phase, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable of phases but store an immutable tuple
        object.__setattr__(self, "phases", tuple(self.phases))

    @property
    def total_years(self) -> int:
        return total_years(self.phases)

    @property
    def tax_applies(self) -> bool:
        return self.apply_tax and not self.time_test_exempt


@dataclass(frozen=True)
class LedgerState:
    """Balances and running totals carried from one simulated month to the next."""
    net: float  # management + performance fees
    gross: float  # no fees at all
    no_perf: float  # management fee only
    contributed: float
    withdrawn: float
    high_water_mark: float
    year_start: float  # net balance at the last year close
    performance_fees: float = 0.0

    @classmethod
    def opening(cls, initial: float) -> "LedgerState":
        return cls(
            net=initial,
            gross=initial,
            no_perf=initial,
            contributed=initial,
            withdrawn=0.0,
            high_water_mark=initial,
            year_start=initial,
        )


@dataclass(frozen=True)
class YearRow:
    """One annual snapshot of the projection (the chart time series)."""
    year: int
    value: float  # full fees
    gross: float  # zero fees
    no_perf: float  # management fee only
    invested: float  # cumulative contributed, including the initial balance
    net_invested: float  # invested - out
    gains: float  # unrealized gains over net invested
    after_tax: float
    out: float  # cumulative withdrawn
    annual_flow: float  # signed monthly cash flow of the row's month


@dataclass(frozen=True)
class SummaryResult:
    """Headline figures derived from the final YearRow."""
    final_value: float
    after_tax: float
    total_in: float
    total_out: float
    gains: float
    fees_cost: float
    tax_paid: float
    years: int


@dataclass
class ProjectionResult:
    """Contains all outputs from a projection run."""
    rows: List[YearRow]
    summary: SummaryResult
    frame: Optional[pd.DataFrame] = None  # Rows: years, Cols: YearRow fields
