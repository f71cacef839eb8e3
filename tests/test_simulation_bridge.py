import unittest
from logic import simulation_bridge
from logic.growth import Phase, WITHDRAW, CONTRIBUTE
from logic.simulation_bridge import CalculatorInputs


class TestSimulationBridge(unittest.TestCase):

    def test_should_convert_percentages_to_fractions(self):
        # Precondition
        inputs = CalculatorInputs()

        # Under test
        config = simulation_bridge.build_config(inputs)

        # Postcondition
        self.assertEqual(config.initial, 100000.0)
        self.assertAlmostEqual(config.annual_return, 0.08)
        self.assertAlmostEqual(config.management_fee, 0.005)
        self.assertAlmostEqual(config.performance_fee, 0.10)
        self.assertAlmostEqual(config.tax_rate, 0.15)
        self.assertTrue(config.use_high_water_mark)
        self.assertTrue(config.tax_applies)
        self.assertEqual(len(config.phases), 4)
        self.assertEqual(config.total_years, 35)

    def test_should_default_to_four_phases(self):
        phases = CalculatorInputs().phases
        self.assertEqual([(p.start_year, p.end_year) for p in phases], [(1, 5), (6, 15), (16, 25), (26, 35)])
        self.assertEqual(phases[-1].kind, WITHDRAW)
        self.assertEqual(phases[-1].monthly_amount, 4000.0)

    def test_should_run_full_projection(self):
        # Under test
        result = simulation_bridge.run_projection(CalculatorInputs())

        # Postcondition
        self.assertEqual(len(result.rows), 36)
        self.assertEqual(len(result.frame), 36)
        self.assertEqual(result.summary.years, 35)
        self.assertEqual(result.summary.final_value, result.rows[-1].value)
        # 100k + 5y*1k + 10y*3k + 10y*8k monthly contributions
        self.assertEqual(result.summary.total_in, 100000.0 + 12 * (5 * 1000 + 10 * 3000 + 10 * 8000))
        self.assertEqual(result.summary.total_out, 10 * 12 * 4000.0)

    def test_should_build_inputs_from_partial_dict(self):
        # Precondition: unknown key and a subset of fields
        data = {
            "initial": 5000.0,
            "use_hwm": False,
            "theme": "dark",
            "phases": [
                {"id": 7, "start_year": 2, "end_year": 4, "monthly_amount": 300, "kind": "withdraw"},
                {"start_year": 5, "end_year": 9, "monthly_amount": 100},
            ],
        }

        # Under test
        inputs = simulation_bridge.inputs_from_dict(data)

        # Postcondition
        self.assertEqual(inputs.initial, 5000.0)
        self.assertFalse(inputs.use_hwm)
        self.assertEqual(inputs.annual_return_pct, 8.0)
        self.assertEqual(inputs.phases, [
            Phase(id=7, start_year=2, end_year=4, monthly_amount=300.0, kind=WITHDRAW),
            Phase(id=2, start_year=5, end_year=9, monthly_amount=100.0, kind=CONTRIBUTE),
        ])

    def test_should_round_trip_through_dict(self):
        inputs = CalculatorInputs(initial=42000.0, perf_fee_pct=0.0, time_test=True)

        restored = simulation_bridge.inputs_from_dict(simulation_bridge.inputs_to_dict(inputs))

        self.assertEqual(restored, inputs)


if __name__ == '__main__':
    unittest.main()
