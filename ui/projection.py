import streamlit as st
from logic import analytics
from logic.growth import ProjectionResult, SimulationConfig
from ui import charts


def render_projection(result: ProjectionResult, config: SimulationConfig):
    """Chart mode switch, the selected chart, phase timeline and the yearly table."""
    mode = st.radio(
        "Chart",
        list(charts.CHART_MODES.keys()),
        format_func=lambda m: charts.CHART_MODES[m],
        horizontal=True,
        key="chart_mode"
    )

    frame = result.frame
    if mode == "value":
        fig = charts.build_value_figure(frame, show_after_tax=config.tax_applies)
    elif mode == "compare":
        fig = charts.build_compare_figure(frame)
    else:
        fig = charts.build_flow_figure(frame)
    st.plotly_chart(fig, use_container_width=True)

    st.plotly_chart(charts.build_timeline_figure(config.phases, config.total_years), use_container_width=True)

    with st.expander("Year by Year", expanded=False):
        table = analytics.year_table(frame)
        st.dataframe(table.style.format("{:,.0f}"))
