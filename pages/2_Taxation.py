"""Taxation & income inequality — the persona's tax breakdown and how it compares."""

import streamlit as st

from zurich_perspectives import audit, charts
from zurich_perspectives.config import PROFILE_PAGE, SECTION_PAGES
from zurich_perspectives.data import load_tax_schedule
from zurich_perspectives.formatting import format_chf, format_number, format_percentage
from zurich_perspectives.logging_config import setup_logger
from zurich_perspectives.narratives import (
    COMMON_TAX_INSIGHT,
    burden_wording,
    narrative_for,
    narrative_values,
    render,
)
from zurich_perspectives.personas import PersonaContext
from zurich_perspectives.schedule import ScheduleError, TaxSchedule
from zurich_perspectives.tax import TaxBreakdown, compare_personas, component_shares, compute_tax
from zurich_perspectives.ui import (
    page_setup,
    render_footer_links,
    render_navigation,
    render_page_header,
    require_context,
)

logger = setup_logger(__name__)


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------

def render_steps(steps: list[tuple], title: str, expanded: bool = False):
    """Render audit steps as a markdown table inside an expander."""
    with st.expander(title, expanded=expanded):
        header = "| # | Step | Formula | Result | Note |\n"
        header += "|--:|------|---------|-------:|------|\n"
        rows = ""
        for i, (step, formula, result, note) in enumerate(steps, 1):
            res_str = f"{result:,.2f}" if isinstance(result, float) else str(result)
            formula_safe = formula.replace("|", "\\|")
            rows += f"| {i} | {step} | {formula_safe} | {res_str} | {note} |\n"
        st.markdown(header + rows)


def render_breakdown(context: PersonaContext, breakdown: TaxBreakdown):
    persona = context.persona
    st.subheader(f"{persona.name}'s Tax Breakdown")

    summary = {
        "Annual Income": format_chf(persona.income),
        "Municipality": f"{persona.municipality} ({format_number(breakdown.multiplier)}%)",
        "Total Tax": format_chf(breakdown.total),
        "Effective Tax Rate": format_percentage(breakdown.effective_rate),
    }
    for label, value in summary.items():
        c1, c2 = st.columns([2, 1])
        c1.write(f"{label}:")
        c2.write(f"**{value}**")

    st.markdown("#### Tax Components")
    amounts = {
        "Federal": breakdown.federal,
        "Cantonal": breakdown.cantonal,
        "Municipal": breakdown.municipal,
    }
    shares = component_shares(breakdown)
    for label, amount in amounts.items():
        c1, c2 = st.columns([2, 1])
        c1.write(f"{label} Tax:")
        c2.write(format_chf(amount))
        st.progress(min(shares[label] / 100, 1.0))


def render_burden_analysis(context: PersonaContext, breakdown: TaxBreakdown):
    persona = context.persona
    narrative = narrative_for(persona.id)
    values = narrative_values(persona, breakdown)

    st.subheader("Tax Burden Analysis")
    st.write(
        f"{persona.name}'s effective tax rate of {breakdown.effective_rate}% means that "
        f"{burden_wording(breakdown.effective_rate)} of income goes to taxes. "
        + render(narrative.tax_analysis, values)
    )

    st.markdown("#### Key Insights")
    insights = [narrative.tax_insights[0], COMMON_TAX_INSIGHT, narrative.tax_insights[1]]
    st.markdown("\n".join(f"- {render(text, values)}" for text in insights))


def render_comparison(context: PersonaContext, schedule: TaxSchedule):
    st.subheader("Compare Tax Burden Across Personas")
    rows = compare_personas(context.personas, schedule)

    table = [
        {
            "Persona": ("▶ " if context.is_selected(row["id"]) else "") + row["Persona"],
            "Income": format_chf(row["Income"]),
            "Municipality": row["Municipality"],
            "Tax Multiplier": f"{format_number(row['Tax Multiplier'])}%",
            "Total Tax": format_chf(row["Total Tax"]),
            "Effective Rate": format_percentage(row["Effective Rate"]),
        }
        for row in rows
    ]
    st.dataframe(table, use_container_width=True, hide_index=True)

    left, right = st.columns(2)
    with left:
        st.plotly_chart(
            charts.effective_rate_comparison(rows, context.persona.id),
            use_container_width=True,
        )
    with right:
        st.plotly_chart(
            charts.municipal_multipliers(schedule.municipalities(), context.persona.municipality),
            use_container_width=True,
        )

    lowest = min(rows, key=lambda row: row["Tax Multiplier"])
    highest = max(rows, key=lambda row: row["Tax Multiplier"])
    st.markdown(
        f"**Key Observation:** While the absolute tax amount increases with income, the "
        f"difference in tax multipliers between municipalities creates significant disparities. "
        f"Residents of {lowest['Municipality']} benefit from a tax multiplier "
        f"({format_number(lowest['Tax Multiplier'])}%) well below that of "
        f"{highest['Municipality']} ({format_number(highest['Tax Multiplier'])}%), despite "
        f"having very different incomes."
    )
    st.write(
        "This system creates a situation where middle-income residents bear a proportionally "
        "higher tax burden compared to their disposable income, while wealthy residents can "
        "optimize their tax situation by living in low-tax municipalities."
    )


# ---------------------------------------------------------------------------
# Main page
# ---------------------------------------------------------------------------

def main():
    page_setup("Taxation")
    context = require_context()
    render_navigation(context)
    persona = context.persona

    try:
        schedule = load_tax_schedule()
    except ScheduleError as exc:
        logger.exception("Tax schedule unavailable")
        st.error(f"Error loading tax data: {exc}")
        st.stop()

    breakdown = compute_tax(persona.income, persona.municipality, schedule)
    logger.debug(f"{persona.id}: total={breakdown.total} effective={breakdown.effective_rate}%")

    render_page_header(
        context,
        "Taxation & Income Inequality",
        f"This section explores how {persona.name} experiences taxation in Zurich. With an "
        f"annual income of {format_chf(persona.income)}, living in {persona.municipality} "
        f"(tax multiplier: {format_number(breakdown.multiplier)}%), see how {persona.name}'s "
        f"tax burden compares to others across the socioeconomic spectrum.",
    )

    left, right = st.columns(2)
    with left, st.container(border=True):
        render_breakdown(context, breakdown)
        st.plotly_chart(charts.tax_components_pie(breakdown), use_container_width=True)
    with right, st.container(border=True):
        render_burden_analysis(context, breakdown)

    st.markdown("#### How is this calculated?")
    render_steps(audit.deduction_steps(breakdown, schedule), "1. Deductions & taxable income")
    render_steps(
        audit.bracket_steps(breakdown.taxable_income, schedule),
        "2. Federal tax — progressive brackets",
    )
    render_steps(audit.component_steps(breakdown, schedule), "3. Cantonal, municipal & total tax")

    with st.container(border=True):
        render_comparison(context, schedule)

    render_footer_links((PROFILE_PAGE, "Back to Profile"), SECTION_PAGES[1])


if __name__ == "__main__":
    main()
