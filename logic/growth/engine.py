import logging
import math
from typing import List, Tuple

from logic.tax import CapitalGainsTax
from logic.growth.ledger import apply_cash_flow, close_year, floor_balances, grow, monthly_rates
from logic.growth.models import LedgerState, SimulationConfig, YearRow
from logic.growth.schedule import resolve_phase

logger = logging.getLogger(__name__)


def round_currency(amount: float) -> float:
    """Round to the nearest whole currency unit, halves rounding up."""
    return float(math.floor(amount + 0.5))


class GrowthEngine:
    """
    Projects a portfolio month by month under three fee scenarios.

    Tracks a gross balance (no fees), a balance paying only the management
    fee, and the fully-net balance that also pays the annual performance fee.
    The ledger is an immutable LedgerState threaded through each month, so a
    run holds no state outside its own loop and the same config always gives
    the same rows.
    """

    def __init__(self, config: SimulationConfig):
        self.config = config
        self.gross_rate, self.net_rate = monthly_rates(config)
        self.tax = CapitalGainsTax.from_config(config)

    def step(self, state: LedgerState, month: int) -> Tuple[LedgerState, float]:
        """
        Advance the ledger by one month.

        Returns:
            Tuple of (new_state, signed_flow) where signed_flow is the month's
            requested cash flow (negative for withdrawals)
        """
        phase = resolve_phase(self.config.phases, month)
        amount = phase.monthly_amount if phase else 0.0
        withdraw = phase.is_withdrawal if phase else False

        # 1. Grow
        state = grow(state, self.gross_rate, self.net_rate)

        # 2. Cash flow
        state = apply_cash_flow(state, amount, withdraw)

        # 3. Performance fee & high-water mark (year close only)
        if month % 12 == 0:
            state = close_year(state, self.config.performance_fee, self.config.use_high_water_mark)

        state = floor_balances(state)
        return state, (-amount if withdraw else amount)

    def _snapshot(self, year: int, state: LedgerState, flow: float) -> YearRow:
        net_invested = state.contributed - state.withdrawn
        return YearRow(
            year=year,
            value=round_currency(state.net),
            gross=round_currency(state.gross),
            no_perf=round_currency(state.no_perf),
            invested=round_currency(state.contributed),
            net_invested=round_currency(net_invested),
            gains=round_currency(max(0.0, state.net - net_invested)),
            after_tax=round_currency(max(0.0, self.tax.after_tax(state.net, state.contributed))),
            out=round_currency(state.withdrawn),
            annual_flow=flow,
        )

    def run(self) -> List[YearRow]:
        """Run the full projection. Always returns year 0 plus one row per simulated year."""
        years = self.config.total_years
        logger.debug(
            "Projecting %d years (%d phases, return=%.4f, mgmt=%.4f, perf=%.4f)",
            years, len(self.config.phases), self.config.annual_return,
            self.config.management_fee, self.config.performance_fee
        )

        state = LedgerState.opening(self.config.initial)
        rows = [self._snapshot(0, state, 0.0)]

        for month in range(1, years * 12 + 1):
            state, flow = self.step(state, month)
            if month % 12 == 0:
                rows.append(self._snapshot(month // 12, state, flow))

        logger.debug(
            "Projection done: net=%.2f gross=%.2f performance fees=%.2f",
            state.net, state.gross, state.performance_fees
        )
        return rows


def simulate(config: SimulationConfig) -> List[YearRow]:
    """Project `config` and return the YearRow series (year 0 .. total_years)."""
    return GrowthEngine(config).run()
