import logging
from typing import Sequence

from logic.tax import CapitalGainsTax
from logic.growth.engine import round_currency
from logic.growth.models import InvalidInput, SimulationConfig, SummaryResult, YearRow

logger = logging.getLogger(__name__)


def summarize(rows: Sequence[YearRow], config: SimulationConfig) -> SummaryResult:
    """
    Headline figures for a finished projection.

    Everything is read off the final row. Fee cost is the whole gap between
    the zero-fee and the fully-net trajectories (management and performance
    fees together). Tax is the capital-gains tax due if the final balance
    were liquidated.

    Raises:
        InvalidInput: if there are no rows or the projection covers less than a year
    """
    if not rows:
        raise InvalidInput("Cannot summarize a projection with no rows")

    final = rows[-1]
    if final.year < 1:
        raise InvalidInput(f"Projection must cover at least one year, got {final.year}")

    tax = CapitalGainsTax.from_config(config)
    tax_paid = tax.tax_on(final.value, final.invested)
    logger.debug("Summarizing %d years: value=%.0f tax=%.2f", final.year, final.value, tax_paid)

    return SummaryResult(
        final_value=final.value,
        after_tax=final.after_tax,
        total_in=final.invested,
        total_out=final.out,
        gains=final.gains,
        fees_cost=round_currency(final.gross - final.value),
        tax_paid=round_currency(tax_paid),
        years=final.year,
    )
