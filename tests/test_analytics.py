import unittest
import pandas as pd
from logic import analytics
from logic.growth import Phase, SimulationConfig, WITHDRAW, YearRow, simulate


def make_row(year: int, value: float, gross: float, no_perf: float, flow: float = 0.0) -> YearRow:
    return YearRow(year=year, value=value, gross=gross, no_perf=no_perf, invested=100.0,
                   net_invested=100.0, gains=max(0.0, value - 100.0), after_tax=value,
                   out=0.0, annual_flow=flow)


class TestRowsToFrame(unittest.TestCase):

    def test_should_index_frame_by_year(self):
        # Precondition
        rows = simulate(SimulationConfig(initial=1000.0, annual_return=0.05))

        # Under test
        df = analytics.rows_to_frame(rows)

        # Postcondition
        self.assertEqual(list(df.index), [0, 1, 2, 3, 4, 5])
        self.assertEqual(df.index.name, "year")
        self.assertEqual(list(df.columns), analytics.ROW_COLUMNS)
        self.assertEqual(df.loc[0, "value"], 1000.0)
        self.assertEqual(df.loc[5, "value"], rows[5].value)

    def test_should_return_empty_frame_given_no_rows(self):
        df = analytics.rows_to_frame([])
        self.assertTrue(df.empty)
        self.assertIn("value", df.columns)


class TestFeeBreakdown(unittest.TestCase):

    def test_should_split_management_and_performance_costs(self):
        # Precondition
        df = analytics.rows_to_frame([
            make_row(0, 100.0, 100.0, 100.0),
            make_row(1, 110.0, 120.0, 115.0),
        ])

        # Under test
        fees = analytics.fee_breakdown(df)

        # Postcondition
        self.assertEqual(fees.loc[1, "management_fee_cost"], 5.0)
        self.assertEqual(fees.loc[1, "performance_fee_cost"], 5.0)
        self.assertEqual(fees.loc[1, "total_fee_cost"], 10.0)
        self.assertEqual(fees.loc[0, "total_fee_cost"], 0.0)

    def test_should_sum_to_total_fee_cost(self):
        config = SimulationConfig(
            initial=100000.0, annual_return=0.07, management_fee=0.01, performance_fee=0.2,
            phases=[Phase(id=1, start_year=4, end_year=8, monthly_amount=1500.0, kind=WITHDRAW)],
        )
        df = analytics.rows_to_frame(simulate(config))

        fees = analytics.fee_breakdown(df)

        pd.testing.assert_series_equal(
            fees["management_fee_cost"] + fees["performance_fee_cost"],
            fees["total_fee_cost"],
            check_names=False,
        )
        self.assertTrue((fees["total_fee_cost"] >= 0).all())


class TestAnnualCashFlow(unittest.TestCase):

    def test_should_annualize_monthly_flow(self):
        df = analytics.rows_to_frame([
            make_row(0, 100.0, 100.0, 100.0),
            make_row(1, 100.0, 100.0, 100.0, flow=500.0),
            make_row(2, 100.0, 100.0, 100.0, flow=-250.0),
        ])

        flows = analytics.annual_cash_flow(df)

        self.assertEqual(list(flows), [0.0, 6000.0, -3000.0])
        self.assertEqual(flows.name, "annual_cash_flow")

    def test_should_join_fees_and_annual_flow_into_year_table(self):
        # Precondition
        df = analytics.rows_to_frame([
            make_row(0, 100.0, 100.0, 100.0),
            make_row(1, 110.0, 130.0, 120.0, flow=-50.0),
        ])

        # Under test
        table = analytics.year_table(df)

        # Postcondition
        self.assertEqual(list(table.index), [0, 1])
        self.assertEqual(table.loc[1, "value"], 110.0)
        self.assertEqual(table.loc[1, "management_fee_cost"], 10.0)
        self.assertEqual(table.loc[1, "performance_fee_cost"], 10.0)
        self.assertEqual(table.loc[1, "annual_cash_flow"], -600.0)


if __name__ == '__main__':
    unittest.main()
