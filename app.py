import logging
import streamlit as st
from logic import persistence, simulation_bridge
from ui import inputs, projection, summary

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title="Invest Calc", layout="wide")
st.title("Compound Growth Simulator")

# --- SESSION STATE INITIALIZATION ---
# Load calculator inputs from disk if not already in session
if "calculator_inputs" not in st.session_state:
    st.session_state.calculator_inputs = persistence.load_calculator_inputs()

previous = st.session_state.calculator_inputs
current = inputs.render_inputs(previous)

# --- SAVE INPUTS ON CHANGE ---
if current != previous:
    st.session_state.calculator_inputs = current
    persistence.save_calculator_inputs(current)
    # Phase list changed shape (added / removed): redraw the editor with the new rows
    if [p.id for p in current.phases] != [p.id for p in previous.phases]:
        st.rerun()

# --- PROJECTION (recomputed from scratch on every run) ---
config = simulation_bridge.build_config(current)
result = simulation_bridge.run_projection(current)

summary.render_summary(result.summary, current.annual_return_pct, config.tax_applies)
projection.render_projection(result, config)
