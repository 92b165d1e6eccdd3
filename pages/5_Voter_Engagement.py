"""Voter engagement — turnout, participation barriers and representation."""

import streamlit as st

from zurich_perspectives import charts
from zurich_perspectives.config import COLOR_NAVY, SECTION_PAGES
from zurich_perspectives.data import DataError, load_engagement_data
from zurich_perspectives.logging_config import setup_logger
from zurich_perspectives.narratives import narrative_for, narrative_values, render
from zurich_perspectives.personas import PersonaContext
from zurich_perspectives.ui import (
    page_setup,
    render_footer_links,
    render_navigation,
    render_page_header,
    require_context,
)

logger = setup_logger(__name__)

DATA_SOURCE = "Data source: Swiss Federal Statistical Office, Selects Survey"


def render_turnout(context: PersonaContext, turnout: dict):
    persona = context.persona
    values = narrative_values(persona)
    left, right = st.columns(2)

    with left, st.container(border=True):
        st.subheader("Voter Turnout by Education Level")
        st.write(
            "Education level is one of the strongest predictors of voter participation. In "
            "Zurich, those with tertiary education are more than twice as likely to vote as "
            "those with only primary education."
        )
        st.plotly_chart(
            charts.percentage_bars(
                turnout.get("byEducation", []), "level", "turnout",
                "Voter Turnout by Education Level",
            ),
            use_container_width=True,
        )
        st.caption(DATA_SOURCE)

    with right, st.container(border=True):
        st.subheader("Voter Turnout by Income Level")
        st.write(
            "Income level strongly correlates with voter participation. High-income residents "
            "in Zurich are twice as likely to vote as low-income residents, creating a "
            "significant representation gap. "
            + render(narrative_for(persona.id).turnout_income_note, values)
        )
        st.plotly_chart(
            charts.percentage_bars(
                turnout.get("byIncome", []), "group", "turnout",
                "Voter Turnout by Income Level",
                highlight=persona.income_group,
            ),
            use_container_width=True,
        )
        st.caption(DATA_SOURCE)

    by_age = turnout.get("byAge") or []
    if by_age:
        with st.expander("Turnout by age group"):
            st.plotly_chart(
                charts.percentage_bars(by_age, "group", "turnout", "Voter Turnout by Age"),
                use_container_width=True,
            )


def render_barriers(context: PersonaContext, barriers: list[dict]):
    persona = context.persona
    narrative = narrative_for(persona.id)
    values = narrative_values(persona)

    st.subheader(f"{persona.name}'s Participation Barriers")
    st.write(render(narrative.barriers_intro, values))

    for barrier in barriers:
        c1, c2 = st.columns([3, 1])
        c1.markdown(f"**{barrier['barrier']}:**")
        c2.write(f"Impact: {barrier['impact']}/10")
        st.progress(min(max(barrier["impact"], 0), 10) / 10)
        st.caption(barrier["description"])

    if narrative.participation_patterns:
        st.markdown("#### Participation Patterns")
        st.markdown(
            "\n".join(
                f"- **{election}:** {pattern}"
                for election, pattern in narrative.participation_patterns.items()
            )
        )


def render_representation(context: PersonaContext, effects: dict):
    persona = context.persona
    values = narrative_values(persona)

    st.subheader("Representation Effects")
    st.write(
        'Differential turnout by socioeconomic status creates a "participation gap" that skews '
        "democratic representation. Research shows that policies tend to align more closely "
        "with the preferences of higher-income voters who participate at higher rates."
    )
    st.plotly_chart(
        charts.percentage_bars(
            effects.get("policyAlignment", []), "incomeGroup", "alignment",
            "Policy Alignment with Voter Preferences",
            highlight=persona.income_group,
            base=COLOR_NAVY,
        ),
        use_container_width=True,
    )

    findings = effects.get("keyFindings") or []
    if findings:
        st.markdown("#### Key Research Findings")
        st.markdown("\n".join(f"- {finding}" for finding in findings))

    st.markdown(f"#### What This Means for {persona.name}")
    st.write(render(narrative_for(persona.id).representation_meaning, values))


def main():
    page_setup("Voter Engagement")
    context = require_context()
    render_navigation(context)
    persona = context.persona

    try:
        engagement = load_engagement_data()
    except DataError as exc:
        logger.exception("Engagement data unavailable")
        st.error(f"Error loading data: {exc}")
        st.stop()

    render_page_header(
        context,
        "Voter Engagement",
        f"This section explores how voter participation varies across different socioeconomic "
        f"groups in Zurich. See how factors like education, income, and age affect democratic "
        f"participation, and understand the barriers that {persona.name} might face when "
        f"engaging with the political system.",
    )

    zurich = engagement.get("turnoutRates", {}).get("zurich", {})
    if "nationalCouncil2023" in zurich:
        c1, c2 = st.columns(2)
        c1.metric("National Council 2023 turnout (Zurich)", f"{zurich['nationalCouncil2023']}%")
        if "federalAverage" in zurich:
            c2.metric("Federal average", f"{zurich['federalAverage']}%")

    render_turnout(context, zurich)

    with st.container(border=True):
        barriers = engagement.get("participationBarriers", {}).get(persona.id) or []
        render_barriers(context, barriers)

    with st.container(border=True):
        render_representation(context, engagement.get("representationEffects", {}))

    render_footer_links(SECTION_PAGES[2], SECTION_PAGES[4])


if __name__ == "__main__":
    main()
