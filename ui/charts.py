import numpy as np
import pandas as pd
import plotly.graph_objects as go
from typing import Sequence
from logic.growth import Phase

CHART_MODES = {
    "value": "Portfolio Value",
    "compare": "Compare (with / without fees)",
    "flow": "Cash Flows (contributions vs withdrawals)",
}


def build_value_figure(frame: pd.DataFrame, show_after_tax: bool = True) -> go.Figure:
    """Invested capital vs. portfolio value, optionally with the after-tax line."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=frame.index, y=frame["invested"], mode='lines', fill='tozeroy',
        name='Total Invested', line=dict(color='slateblue', width=2)
    ))
    fig.add_trace(go.Scatter(
        x=frame.index, y=frame["value"], mode='lines', fill='tonexty',
        name='Portfolio Value', line=dict(color='goldenrod', width=2.5)
    ))
    if show_after_tax:
        fig.add_trace(go.Scatter(
            x=frame.index, y=frame["after_tax"], mode='lines',
            name='After Tax', line=dict(color='teal', width=2, dash='dash')
        ))
    fig.update_layout(
        title="Portfolio Value Over Time",
        xaxis_title="Year",
        yaxis_title="Value",
        hovermode='x unified'
    )
    return fig


def build_compare_figure(frame: pd.DataFrame) -> go.Figure:
    """The three fee scenarios side by side."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=frame.index, y=frame["gross"], mode='lines',
        name='No Fees', line=dict(color='darkorange', width=1.5, dash='dash')
    ))
    fig.add_trace(go.Scatter(
        x=frame.index, y=frame["no_perf"], mode='lines',
        name='Management Fee Only', line=dict(color='goldenrod', width=1.5, dash='dot')
    ))
    fig.add_trace(go.Scatter(
        x=frame.index, y=frame["value"], mode='lines',
        name='Management + Performance Fee', line=dict(color='teal', width=2.5)
    ))
    fig.update_layout(
        title="Fee Impact",
        xaxis_title="Year",
        yaxis_title="Value",
        hovermode='x unified'
    )
    return fig


def build_flow_figure(frame: pd.DataFrame) -> go.Figure:
    """Monthly cash flow bars (right axis) against portfolio value (left axis)."""
    flows = frame["annual_flow"].to_numpy(dtype=float)
    colors = np.where(flows >= 0, 'teal', 'indianred')

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=frame.index, y=flows, name='Monthly Flow',
        marker_color=colors, opacity=0.6, yaxis='y2'
    ))
    fig.add_trace(go.Scatter(
        x=frame.index, y=frame["value"], mode='lines',
        name='Portfolio Value', line=dict(color='goldenrod', width=2.5)
    ))
    fig.update_layout(
        title="Contributions vs Withdrawals",
        xaxis_title="Year",
        yaxis=dict(title="Value"),
        yaxis2=dict(title="Monthly Flow", overlaying='y', side='right', zeroline=True, zerolinecolor='gray'),
        hovermode='x unified'
    )
    return fig


def build_timeline_figure(phases: Sequence[Phase], total_years: int) -> go.Figure:
    """Horizontal bar per phase spanning its years."""
    fig = go.Figure()
    for phase in phases:
        sign = "-" if phase.is_withdrawal else "+"
        fig.add_trace(go.Bar(
            x=[phase.end_year - phase.start_year + 1],
            base=[phase.start_year - 1],
            y=["Phases"],
            orientation='h',
            name=f"{phase.start_year}-{phase.end_year}y | {sign}{phase.monthly_amount:,.0f}",
            marker_color='indianred' if phase.is_withdrawal else 'teal',
            opacity=0.5
        ))
    fig.update_layout(
        barmode='overlay',
        height=160,
        xaxis=dict(title="Year", range=[0, total_years]),
        showlegend=True
    )
    return fig
