import unittest
from logic import analytics
from logic.growth import Phase, SimulationConfig, WITHDRAW, CONTRIBUTE, simulate
from ui import charts


def make_frame():
    config = SimulationConfig(
        initial=100000.0, annual_return=0.07, management_fee=0.005, performance_fee=0.1,
        phases=[
            Phase(id=1, start_year=1, end_year=4, monthly_amount=1000.0, kind=CONTRIBUTE),
            Phase(id=2, start_year=5, end_year=6, monthly_amount=2000.0, kind=WITHDRAW),
        ],
    )
    return config, analytics.rows_to_frame(simulate(config))


class TestCharts(unittest.TestCase):

    def test_should_build_value_figure_with_after_tax_line(self):
        _, frame = make_frame()

        fig = charts.build_value_figure(frame, show_after_tax=True)

        self.assertEqual([t.name for t in fig.data], ["Total Invested", "Portfolio Value", "After Tax"])
        self.assertEqual(list(fig.data[1].y), list(frame["value"]))

    def test_should_hide_after_tax_line_given_no_tax(self):
        _, frame = make_frame()
        fig = charts.build_value_figure(frame, show_after_tax=False)
        self.assertEqual(len(fig.data), 2)

    def test_should_compare_three_fee_scenarios(self):
        _, frame = make_frame()

        fig = charts.build_compare_figure(frame)

        self.assertEqual(len(fig.data), 3)
        self.assertEqual(list(fig.data[0].y), list(frame["gross"]))
        self.assertEqual(list(fig.data[1].y), list(frame["no_perf"]))
        self.assertEqual(list(fig.data[2].y), list(frame["value"]))

    def test_should_color_flow_bars_by_direction(self):
        _, frame = make_frame()

        fig = charts.build_flow_figure(frame)

        bars = fig.data[0]
        self.assertEqual(bars.type, "bar")
        colors = list(bars.marker.color)
        self.assertEqual(colors[1], "teal")
        self.assertEqual(colors[6], "indianred")

    def test_should_draw_one_bar_per_phase(self):
        config, _ = make_frame()

        fig = charts.build_timeline_figure(config.phases, config.total_years)

        self.assertEqual(len(fig.data), 2)
        self.assertEqual(list(fig.data[1].base), [4])
        self.assertEqual(list(fig.data[1].x), [2])
        self.assertEqual(fig.data[1].name, "5-6y | -2,000")

    def test_should_list_all_chart_modes(self):
        self.assertEqual(list(charts.CHART_MODES.keys()), ["value", "compare", "flow"])


if __name__ == '__main__':
    unittest.main()
