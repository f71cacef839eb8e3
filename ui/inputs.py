import time
import streamlit as st
from logic import growth, tax_rules
from logic.simulation_bridge import CalculatorInputs


def _render_phase_editor(phases):
    """Edit, add and remove phases. Returns the updated phase list."""
    st.caption("Different monthly contributions or withdrawals per period. "
               "The first phase covering a year wins.")

    to_remove = []
    for ph in list(phases):
        with st.container(border=True):
            c1, c2, c3, c4, c5 = st.columns([1, 1, 1.5, 1.5, 0.5])
            start = c1.number_input("From", min_value=1, value=int(ph.start_year), key=f"ph_sy_{ph.id}")
            # Keyed on start so the widget is rebuilt with a valid minimum when start moves
            end = c2.number_input("To", min_value=int(start), value=max(int(start), int(ph.end_year)),
                                  key=f"ph_ey_{ph.id}_{start}")
            amount = c3.number_input("Monthly", 0.0, value=float(ph.monthly_amount), step=500.0, key=f"ph_amt_{ph.id}")
            kind = c4.selectbox("Type", growth.PHASE_KINDS,
                                index=growth.PHASE_KINDS.index(ph.kind), key=f"ph_kind_{ph.id}")
            if c5.button("X", key=f"ph_del_{ph.id}"):
                to_remove.append(ph.id)
            phases = growth.edit_phase(phases, ph.id, start_year=start, end_year=end,
                                       monthly_amount=amount, kind=kind)

    for phase_id in to_remove:
        phases = growth.remove_phase(phases, phase_id)

    if st.button("Add Phase"):
        phases = growth.append_phase(phases, phase_id=int(time.time() * 1000))
    return phases


def render_inputs(current: CalculatorInputs) -> CalculatorInputs:
    """Sidebar widgets. Starts from `current` and returns the edited inputs."""
    with st.sidebar:
        st.subheader("Basics")
        initial = st.slider("Initial Deposit", 0.0, 2_000_000.0, float(current.initial), 5000.0)
        annual_return = st.slider("Annual Return (gross, %)", 0.0, 30.0, float(current.annual_return_pct), 0.5)

        st.subheader("Fund Fees")
        mgmt_fee = st.slider("Management Fee (p.a., %)", 0.0, 3.0, float(current.mgmt_fee_pct), 0.05,
                             help="Taken continuously from the portfolio every month")
        perf_fee = st.slider("Performance Fee (%)", 0.0, 50.0, float(current.perf_fee_pct), 1.0,
                             help="Share of the fund's annual gain")
        use_hwm = st.checkbox("High-water mark (fee only on new highs)", value=current.use_hwm)

        st.subheader("Tax on Withdrawal")
        apply_tax = st.checkbox("Include capital gains tax", value=current.apply_tax)
        tax_rate = current.tax_rate_pct
        time_test = current.time_test
        if apply_tax:
            tax_rate = st.slider("Tax Rate (%)", 0.0, 40.0, float(current.tax_rate_pct), 1.0)
            time_test = st.checkbox(f"Time test met ({tax_rules.TIME_TEST_YEARS} years), gains exempt",
                                    value=current.time_test)

        st.subheader("Contribution & Withdrawal Phases")
        phases = _render_phase_editor(list(current.phases))

    return CalculatorInputs(
        initial=initial,
        annual_return_pct=annual_return,
        mgmt_fee_pct=mgmt_fee,
        perf_fee_pct=perf_fee,
        use_hwm=use_hwm,
        apply_tax=apply_tax,
        tax_rate_pct=tax_rate,
        time_test=time_test,
        phases=phases,
    )
