"""Tests for the plotly figure builders."""

from zurich_perspectives import charts
from zurich_perspectives.config import COLOR_BLUE, COLOR_RED
from zurich_perspectives.tax import compare_personas, compute_tax


class TestHighlightColors:
    def test_accent_on_match_only(self):
        colors = charts.highlight_colors(["a", "b", "c"], "b")
        assert colors == [COLOR_BLUE, COLOR_RED, COLOR_BLUE]

    def test_no_highlight(self):
        assert charts.highlight_colors(["a", "b"], None) == [COLOR_BLUE, COLOR_BLUE]


class TestTaxCharts:
    def test_components_pie(self, schedule):
        breakdown = compute_tax(85_000, "Zurich City", schedule)
        fig = charts.tax_components_pie(breakdown)
        assert list(fig.data[0].values) == [breakdown.federal, breakdown.cantonal, breakdown.municipal]

    def test_effective_rate_comparison_highlights_selected(self, personas, schedule):
        rows = compare_personas(personas, schedule)
        fig = charts.effective_rate_comparison(rows, "leo")
        bar = fig.data[0]
        assert list(bar.x) == [row["Persona"] for row in rows]
        assert bar.marker.color[1] == COLOR_RED
        assert fig.layout.yaxis.range[0] == 0
        assert fig.layout.yaxis.range[1] >= max(row["Effective Rate"] for row in rows)

    def test_effective_rate_comparison_all_zero(self):
        rows = [{"id": "a", "Persona": "A", "Effective Rate": 0.0}]
        fig = charts.effective_rate_comparison(rows, "a")
        assert tuple(fig.layout.yaxis.range) == (0, 1)

    def test_municipal_multipliers_sorted(self, schedule):
        fig = charts.municipal_multipliers(schedule.municipalities(), "Küsnacht")
        bar = fig.data[0]
        assert list(bar.x) == sorted(bar.x)
        assert bar.marker.color[list(bar.y).index("Küsnacht")] == COLOR_RED


class TestPercentageBars:
    def test_fixed_axis(self):
        items = [{"group": "Low income", "turnout": 32}, {"group": "High income", "turnout": 64}]
        fig = charts.percentage_bars(items, "group", "turnout", "Turnout", highlight="High income")
        assert tuple(fig.layout.yaxis.range) == (0, 100)
        assert list(fig.data[0].marker.color) == [COLOR_BLUE, COLOR_RED]

    def test_spending_pie(self):
        categories = [{"name": "Education", "percentage": 60}, {"name": "Other", "percentage": 40}]
        fig = charts.spending_pie(categories, "Canton")
        assert list(fig.data[0].labels) == ["Education", "Other"]
