import streamlit as st
from logic import tax_rules
from logic.growth import SummaryResult


def _money(value: float) -> str:
    return f"{value:,.0f} {tax_rules.CURRENCY}"


def render_summary(summary: SummaryResult, annual_return_pct: float, tax_applies: bool):
    """Headline metrics for a finished projection."""
    st.info(f"Over {summary.years} years fees and taxes cost you "
            f"**{_money(summary.fees_cost + summary.tax_paid)}**.")

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Portfolio Value", _money(summary.final_value),
              help=f"After {summary.years} years at {annual_return_pct}% p.a.")
    c2.metric("After Tax", _money(summary.after_tax),
              help=f"Tax: {_money(summary.tax_paid)}" if tax_applies else "Tax: 0 (exempt)")
    c3.metric("Total Invested", _money(summary.total_in),
              help=f"Withdrawn: {_money(summary.total_out)}" if summary.total_out > 0 else "No withdrawals")
    c4.metric("Net Gain", _money(summary.gains),
              help=f"Fees: {_money(summary.fees_cost)}")
