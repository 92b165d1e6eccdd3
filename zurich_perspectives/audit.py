"""Step-by-step audit trail of a tax computation, for the "How is this calculated?" view."""

from zurich_perspectives.config import THIRD_PILLAR_THRESHOLD
from zurich_perspectives.schedule import TaxSchedule
from zurich_perspectives.tax import TaxBreakdown, apply_brackets


def _fmt(v: float) -> str:
    """Format a number as CHF with thousands separator."""
    return f"{v:,.2f}"


def deduction_steps(breakdown: TaxBreakdown, schedule: TaxSchedule) -> list[tuple]:
    rules = schedule.deductions
    income = max(0.0, breakdown.income)
    itemised = breakdown.deductions

    raw_professional = income * rules.professional_expenses
    if income > THIRD_PILLAR_THRESHOLD:
        pillar_formula = f"{_fmt(income)} > {_fmt(THIRD_PILLAR_THRESHOLD)} -> {_fmt(rules.third_pillar)}"
    else:
        pillar_formula = f"{_fmt(income)} <= {_fmt(THIRD_PILLAR_THRESHOLD)} -> not applied"

    return [
        ("Standard deduction", "flat", itemised.standard, ""),
        ("Professional expenses",
         f"min({_fmt(income)} x {rules.professional_expenses:.0%} = {_fmt(raw_professional)}, "
         f"{_fmt(rules.max_professional_expenses)})",
         itemised.professional_expenses, "capped"),
        ("Health insurance", "flat", itemised.health_insurance, ""),
        ("Third pillar (3a)", pillar_formula, itemised.third_pillar, "all-or-nothing"),
        ("**Total deductions**",
         f"{_fmt(itemised.standard)} + {_fmt(itemised.professional_expenses)} + "
         f"{_fmt(itemised.health_insurance)} + {_fmt(itemised.third_pillar)}",
         itemised.total, ""),
        ("**Taxable income**",
         f"max(0, {_fmt(breakdown.income)} - {_fmt(itemised.total)})",
         breakdown.taxable_income, "floored at 0"),
    ]


def bracket_steps(taxable: float, schedule: TaxSchedule) -> list[tuple]:
    """One row per federal bracket the taxable income reaches."""
    steps = []
    for bracket in schedule.federal_brackets:
        if taxable <= bracket.lower_bound:
            break
        portion = min(taxable - bracket.lower_bound, bracket.width)
        upper = "∞" if bracket.upper_bound is None else _fmt(bracket.upper_bound)
        steps.append((
            f"Bracket {_fmt(bracket.lower_bound)} – {upper}",
            f"{_fmt(portion)} x {bracket.rate}%",
            portion * bracket.rate / 100,
            "full bracket" if portion == bracket.width else "partial",
        ))
    steps.append((
        "**Federal tax**",
        "sum of bracket slices",
        apply_brackets(taxable, schedule.federal_brackets),
        "",
    ))
    return steps


def component_steps(breakdown: TaxBreakdown, schedule: TaxSchedule) -> list[tuple]:
    """Cantonal, municipal and total rows, read from the calculator's unrounded amounts."""
    exact = breakdown.exact
    known = schedule.known_municipality(breakdown.municipality)

    return [
        ("Cantonal tax",
         f"{_fmt(exact.federal)} x {schedule.cantonal_base_rate}%",
         exact.cantonal, "derived from federal tax"),
        ("Municipal tax",
         f"{_fmt(exact.cantonal)} x {breakdown.multiplier}%",
         exact.municipal,
         breakdown.municipality if known else "unknown municipality, neutral 100%"),
        ("**Total tax**",
         f"{_fmt(exact.federal)} + {_fmt(exact.cantonal)} + {_fmt(exact.municipal)} = {_fmt(exact.total)}",
         float(breakdown.total), "rounded to CHF 1"),
        ("**Effective rate**",
         f"{_fmt(exact.total)} / {_fmt(breakdown.income)} x 100" if breakdown.income > 0
         else "no income -> 0%",
         f"{breakdown.effective_rate}%", "rounded to 0.1"),
    ]
