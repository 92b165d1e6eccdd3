"""Synthesis & reflection — bringing the four perspectives together."""

import streamlit as st

from zurich_perspectives.config import HOME_PAGE, SECTION_PAGES
from zurich_perspectives.data import load_tax_schedule
from zurich_perspectives.logging_config import setup_logger
from zurich_perspectives.narratives import (
    INEQUALITY_CYCLE,
    REFLECTION_QUESTIONS,
    narrative_for,
    narrative_values,
    render,
)
from zurich_perspectives.schedule import ScheduleError
from zurich_perspectives.tax import compute_tax
from zurich_perspectives.ui import (
    open_persona,
    page_setup,
    render_footer_links,
    render_navigation,
    render_page_header,
    require_context,
)

logger = setup_logger(__name__)


def main():
    page_setup("Synthesis")
    context = require_context()
    render_navigation(context)
    persona = context.persona
    narrative = narrative_for(persona.id)

    # The effective rate quoted in the taxation insight comes from the calculator
    breakdown = None
    try:
        schedule = load_tax_schedule()
        breakdown = compute_tax(persona.income, persona.municipality, schedule)
    except ScheduleError as exc:
        logger.warning(f"Synthesis without tax figures: {exc}")
        st.warning("Tax figures are unavailable; effective rates are omitted.")
    values = narrative_values(persona, breakdown)

    render_page_header(
        context,
        "Synthesis & Reflection",
        f"You've now explored Zurich's democratic systems through {persona.name}'s eyes. This "
        f"section brings together key insights and invites you to reflect on the relationship "
        f"between economic inequality and democratic participation in Zurich.",
    )

    with st.container(border=True):
        st.subheader(f"Key Insights from {persona.name}'s Perspective")
        columns = st.columns(2)
        for i, (heading, template) in enumerate(narrative.synthesis.items()):
            with columns[i % 2]:
                st.markdown(f"#### {heading}")
                st.write(render(template, values))

    with st.container(border=True):
        st.subheader("The Cycle of Economic and Political Inequality")
        st.write(
            f"Through {persona.name}'s journey, we've seen how economic inequality translates "
            f"into political inequality through multiple reinforcing mechanisms:"
        )
        steps = st.columns(len(INEQUALITY_CYCLE))
        for i, (column, (title, caption)) in enumerate(zip(steps, INEQUALITY_CYCLE)):
            following = INEQUALITY_CYCLE[(i + 1) % len(INEQUALITY_CYCLE)][0]
            with column:
                st.markdown(f"**{title}**")
                st.caption(caption)
                st.caption(f"→ {following}")

        st.markdown(f"#### {persona.name}'s Position in This Cycle")
        st.write(render(narrative.cycle_position, values))

    with st.container(border=True):
        st.subheader("Reflection Questions")
        st.write(
            f"Consider these questions as you reflect on what you've learned through "
            f"{persona.name}'s perspective:"
        )
        for question in REFLECTION_QUESTIONS:
            st.markdown(f"- **{question}**")

    with st.container(border=True):
        st.subheader("Explore Other Perspectives")
        st.write(
            f"You've explored Zurich's democratic systems through {persona.name}'s eyes. Now "
            f"consider how the experience might differ for residents in other socioeconomic "
            f"positions:"
        )
        columns = st.columns(len(context.personas))
        for column, other in zip(columns, context.personas):
            with column:
                st.markdown(f"**{other.name}**")
                st.caption(narrative_for(other.id).explore_blurb)
                if context.is_selected(other.id):
                    st.caption("Current perspective")
                elif st.button(f"Explore {other.name}", key=f"explore_{other.id}"):
                    open_persona(other.id)

    st.subheader("About This Project")
    st.write(
        "“Zurich Perspectives: Economy, Equity, and Influence” is an interactive web pilot "
        "exploring how residents with different incomes experience taxation, benefit from "
        "public spending, and navigate the political system in Zurich, Switzerland."
    )
    st.write(
        "Data sources include the Federal Tax Administration (ESTV), Canton Zurich "
        "Finanzdirektion, Swiss Federal Statistical Office, and academic research on political "
        "participation and representation."
    )

    render_footer_links(SECTION_PAGES[3], (HOME_PAGE, "Return to Home"))


if __name__ == "__main__":
    main()
