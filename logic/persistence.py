import json
import logging
import os
from typing import Any, Dict

from logic import simulation_bridge
from logic.simulation_bridge import CalculatorInputs

logger = logging.getLogger(__name__)

DATA_FILE = "data/invest_calc.json"
INPUTS_KEY = "calculator_inputs"


def load_calculator_inputs(filepath: str = DATA_FILE) -> CalculatorInputs:
    """Loads calculator inputs from JSON file if exists, else returns defaults."""
    defaults = simulation_bridge.inputs_to_dict(CalculatorInputs())

    if os.path.exists(filepath):
        try:
            with open(filepath, "r") as f:
                data = json.load(f)
            saved_inputs = data.get(INPUTS_KEY, {})
            # Merge saved values with defaults (so new keys get default values)
            merged = defaults.copy()
            merged.update(saved_inputs)
            return simulation_bridge.inputs_from_dict(merged)
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error("Error loading calculator inputs from %s: %s", filepath, e)
    return simulation_bridge.inputs_from_dict(defaults)


def save_calculator_inputs(inputs: CalculatorInputs, filepath: str = DATA_FILE) -> None:
    """Saves calculator inputs to JSON file, preserving other data."""
    existing_data: Dict[str, Any] = {}
    if os.path.exists(filepath):
        try:
            with open(filepath, "r") as f:
                existing_data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Error loading existing data from %s: %s", filepath, e)

    existing_data[INPUTS_KEY] = simulation_bridge.inputs_to_dict(inputs)

    # Ensure directory exists
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    try:
        with open(filepath, "w") as f:
            json.dump(existing_data, f, indent=2)
    except OSError as e:
        logger.error("Error saving calculator inputs to %s: %s", filepath, e)
        raise
