import pandas as pd
import numpy as np
from dataclasses import asdict, fields
from typing import Sequence
from logic.growth import YearRow

ROW_COLUMNS = [f.name for f in fields(YearRow) if f.name != "year"]


def rows_to_frame(rows: Sequence[YearRow]) -> pd.DataFrame:
    """
    Converts the projection rows into a DataFrame indexed by year,
    one column per YearRow field. This is the chart time series.
    """
    if not rows:
        return pd.DataFrame(columns=ROW_COLUMNS, index=pd.Index([], name="year"))

    df = pd.DataFrame([asdict(r) for r in rows])
    df.set_index("year", inplace=True)
    return df


def fee_breakdown(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Splits the fee drag per year:
    - management_fee_cost: gross - no_perf
    - performance_fee_cost: no_perf - value
    - total_fee_cost: gross - value
    """
    if frame.empty:
        return pd.DataFrame(columns=["management_fee_cost", "performance_fee_cost", "total_fee_cost"])

    gross = frame["gross"].to_numpy(dtype=float)
    no_perf = frame["no_perf"].to_numpy(dtype=float)
    value = frame["value"].to_numpy(dtype=float)

    return pd.DataFrame({
        "management_fee_cost": np.maximum(0.0, gross - no_perf),
        "performance_fee_cost": np.maximum(0.0, no_perf - value),
        "total_fee_cost": np.maximum(0.0, gross - value),
    }, index=frame.index)


def annual_cash_flow(frame: pd.DataFrame) -> pd.Series:
    """Annualized signed cash flow per year (twelve times the row's monthly flow)."""
    return (frame["annual_flow"] * 12).rename("annual_cash_flow")


def year_table(frame: pd.DataFrame) -> pd.DataFrame:
    """Year-by-year table: the rows with their fee breakdown and annualized cash flow."""
    return frame.join(fee_breakdown(frame)).join(annual_cash_flow(frame))
