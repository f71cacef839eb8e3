from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List
from logic import analytics, growth, tax_rules


def _default_phases() -> List[growth.Phase]:
    return [
        growth.Phase(id=i + 1, start_year=start, end_year=end, monthly_amount=amount, kind=kind)
        for i, (start, end, amount, kind) in enumerate(tax_rules.DEFAULT_PHASES)
    ]


@dataclass
class CalculatorInputs:
    """Calculator inputs as the UI edits them (rates in percent, 8.0 = 8%)."""
    initial: float = tax_rules.DEFAULT_INITIAL_BALANCE
    annual_return_pct: float = tax_rules.DEFAULT_ANNUAL_RETURN_PCT
    mgmt_fee_pct: float = tax_rules.DEFAULT_MANAGEMENT_FEE_PCT
    perf_fee_pct: float = tax_rules.DEFAULT_PERFORMANCE_FEE_PCT
    use_hwm: bool = True
    apply_tax: bool = True
    tax_rate_pct: float = tax_rules.DEFAULT_TAX_RATE_PCT
    time_test: bool = False
    phases: List[growth.Phase] = field(default_factory=_default_phases)


def phase_from_dict(data: Dict[str, Any], default_id: int) -> growth.Phase:
    return growth.Phase(
        id=data.get("id", default_id),
        start_year=int(data["start_year"]),
        end_year=int(data["end_year"]),
        monthly_amount=float(data["monthly_amount"]),
        kind=data.get("kind", growth.CONTRIBUTE),
    )


def inputs_from_dict(data: Dict[str, Any]) -> CalculatorInputs:
    """
    Builds CalculatorInputs from a plain dict (e.g. a persisted snapshot).
    Unknown keys are ignored and missing keys take their defaults.
    """
    known = {k: v for k, v in data.items() if k in CalculatorInputs.__dataclass_fields__}
    raw_phases = known.pop("phases", None)

    inputs = CalculatorInputs(**known)
    if raw_phases is not None:
        inputs.phases = [phase_from_dict(p, i + 1) for i, p in enumerate(raw_phases)]
    return inputs


def inputs_to_dict(inputs: CalculatorInputs) -> Dict[str, Any]:
    return asdict(inputs)


def build_config(inputs: CalculatorInputs) -> growth.SimulationConfig:
    """
    Constructs a SimulationConfig from UI inputs, converting percentages to fractions.
    """
    return growth.SimulationConfig(
        initial=inputs.initial,
        annual_return=inputs.annual_return_pct / 100.0,
        management_fee=inputs.mgmt_fee_pct / 100.0,
        performance_fee=inputs.perf_fee_pct / 100.0,
        use_high_water_mark=inputs.use_hwm,
        apply_tax=inputs.apply_tax,
        tax_rate=inputs.tax_rate_pct / 100.0,
        time_test_exempt=inputs.time_test,
        phases=inputs.phases,
    )


def run_projection(inputs: CalculatorInputs) -> growth.ProjectionResult:
    """
    Runs the whole flow: inputs -> config -> rows -> summary + chart frame.
    """
    config = build_config(inputs)
    rows = growth.simulate(config)
    summary = growth.summarize(rows, config)
    return growth.ProjectionResult(
        rows=rows,
        summary=summary,
        frame=analytics.rows_to_frame(rows),
    )
