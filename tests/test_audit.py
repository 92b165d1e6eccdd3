"""The audit trail must agree with the numbers compute_tax reports."""

import pytest

from zurich_perspectives.audit import bracket_steps, component_steps, deduction_steps
from zurich_perspectives.tax import apply_brackets, compute_tax


@pytest.fixture
def breakdown(schedule):
    return compute_tax(85_000, "Zurich City", schedule)


class TestAuditSteps:
    def test_deduction_steps_end_with_taxable_income(self, breakdown, schedule):
        steps = deduction_steps(breakdown, schedule)
        assert steps[-2][2] == pytest.approx(breakdown.deductions.total)
        assert steps[-1][2] == pytest.approx(breakdown.taxable_income)

    def test_third_pillar_not_applied_below_threshold(self, schedule):
        steps = deduction_steps(compute_tax(50_000, "Zurich City", schedule), schedule)
        pillar = next(step for step in steps if step[0].startswith("Third pillar"))
        assert pillar[2] == 0
        assert "not applied" in pillar[1]

    def test_bracket_slices_sum_to_federal_tax(self, breakdown, schedule):
        steps = bracket_steps(breakdown.taxable_income, schedule)
        slices = [step[2] for step in steps[:-1]]
        assert sum(slices) == pytest.approx(steps[-1][2])
        assert steps[-1][2] == pytest.approx(
            apply_brackets(breakdown.taxable_income, schedule.federal_brackets)
        )

    def test_bracket_steps_stop_at_taxable_income(self, schedule):
        steps = bracket_steps(5_000, schedule)
        assert len(steps) == 2
        assert steps[0][3] == "partial"

    def test_component_steps_total(self, breakdown, schedule):
        steps = component_steps(breakdown, schedule)
        total = next(step for step in steps if step[0] == "**Total tax**")
        assert total[2] == breakdown.total

    def test_unknown_municipality_noted(self, schedule):
        breakdown = compute_tax(85_000, "Atlantis", schedule)
        steps = component_steps(breakdown, schedule)
        municipal = next(step for step in steps if step[0] == "Municipal tax")
        assert "unknown municipality" in municipal[3]

    def test_component_steps_use_calculator_amounts(self, schedule):
        breakdown = compute_tax(85_000, "Winterthur", schedule)
        rows = {step[0]: step for step in component_steps(breakdown, schedule)}
        assert rows["Cantonal tax"][2] == breakdown.exact.cantonal
        assert rows["Municipal tax"][2] == breakdown.exact.municipal
        assert "Winterthur" in rows["Municipal tax"][3]

    def test_effective_rate_formula_uses_unrounded_total(self, breakdown, schedule):
        rows = {step[0]: step for step in component_steps(breakdown, schedule)}
        # 1,654 + 827 + 984.13 = 3,465.13
        assert rows["**Effective rate**"][1].startswith("3,465.13 / 85,000.00")
        assert rows["**Effective rate**"][2] == "4.1%"
