from dataclasses import replace
from typing import Tuple

from logic.growth.models import LedgerState, SimulationConfig


def monthly_rates(config: SimulationConfig) -> Tuple[float, float]:
    """
    Monthly gross and net growth rates.

    The management fee is a continuous drag: it is taken out of the monthly
    rate rather than deducted as a separate charge.

    Returns:
        Tuple of (gross_rate, net_rate)
    """
    gross_rate = config.annual_return / 12
    net_rate = gross_rate - config.management_fee / 12
    return gross_rate, net_rate


def grow(state: LedgerState, gross_rate: float, net_rate: float) -> LedgerState:
    """Apply one month of compounding to the three tracked balances."""
    return replace(
        state,
        net=state.net * (1 + net_rate),
        gross=state.gross * (1 + gross_rate),
        no_perf=state.no_perf * (1 + net_rate),
    )


def apply_cash_flow(state: LedgerState, amount: float, withdraw: bool) -> LedgerState:
    """
    Add a contribution to, or take a withdrawal from, all three balances.

    Withdrawals are capped at the fully-net balance, so a request larger than
    what is available only takes what is there.
    """
    if not withdraw:
        return replace(
            state,
            net=state.net + amount,
            gross=state.gross + amount,
            no_perf=state.no_perf + amount,
            contributed=state.contributed + amount,
        )

    taken = max(0.0, min(amount, state.net))
    return replace(
        state,
        net=state.net - taken,
        gross=state.gross - taken,
        no_perf=state.no_perf - taken,
        withdrawn=state.withdrawn + taken,
    )


def performance_fee_base(state: LedgerState, use_high_water_mark: bool) -> float:
    """Gain the performance fee is charged on at a year close."""
    reference = state.high_water_mark if use_high_water_mark else state.year_start
    return max(0.0, state.net - reference)


def close_year(state: LedgerState, performance_fee: float, use_high_water_mark: bool) -> LedgerState:
    """
    Year-close bookkeeping: charge the performance fee on the net balance,
    then roll the high-water mark and the year-start reference forward.
    """
    fee = 0.0
    if performance_fee > 0:
        fee = performance_fee_base(state, use_high_water_mark) * performance_fee

    net = max(0.0, state.net - fee)
    return replace(
        state,
        net=net,
        high_water_mark=max(state.high_water_mark, net),
        year_start=net,
        performance_fees=state.performance_fees + fee,
    )


def floor_balances(state: LedgerState) -> LedgerState:
    """No tracked balance is ever allowed below zero."""
    return replace(
        state,
        net=max(0.0, state.net),
        gross=max(0.0, state.gross),
        no_perf=max(0.0, state.no_perf),
    )
