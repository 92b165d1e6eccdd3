"""Persona profile — who they are and where to go next."""

import streamlit as st

from zurich_perspectives.config import APP_TITLE, HOME_PAGE, SECTION_PAGES
from zurich_perspectives.formatting import format_chf, format_number
from zurich_perspectives.ui import open_persona, page_setup, render_navigation, require_context


def main():
    page_setup("Profile")
    context = require_context()
    render_navigation(context)
    persona = context.persona

    top_left, top_right = st.columns([3, 1])
    top_left.page_link(HOME_PAGE, label="← Back to Persona Selection")
    top_right.caption(APP_TITLE)

    with st.container(border=True):
        picture, details = st.columns([1, 2])
        with picture:
            st.markdown(
                f"<h1 style='text-align:center;font-weight:300;padding:3rem 0'>{persona.name}</h1>",
                unsafe_allow_html=True,
            )
        with details:
            st.title(persona.full_name)
            st.subheader(persona.occupation)

            c1, c2 = st.columns(2)
            c1.metric("Age", persona.age)
            c2.metric("Location", persona.location)
            c1.metric("Annual Income", format_chf(persona.income))
            c2.metric("Tax Multiplier", f"{format_number(persona.tax_multiplier)}%")

            st.write(persona.short_bio)
            if persona.assets:
                st.caption(f"Assets: {persona.assets}")

            st.markdown("**Key Characteristics:**")
            st.markdown("\n".join(f"- {c}" for c in persona.characteristics))

    left, right = st.columns(2)

    with left, st.container(border=True):
        st.subheader(f"Explore {persona.name}'s Experience")
        st.write(
            f"Follow {persona.name}'s journey through Zurich's economic and political systems. "
            f"Discover how taxation, public spending, political influence, and voter engagement "
            f"shape {persona.name}'s experience of democracy."
        )
        # Synthesis is reached from the end of the journey
        for page, label in SECTION_PAGES[:-1]:
            st.page_link(page, label=label, use_container_width=True)

    with right, st.container(border=True):
        st.subheader("Compare with Other Personas")
        st.write(
            f"See how {persona.name}'s experience compares with others across the socioeconomic "
            f"spectrum. Understanding these differences helps illustrate how economic inequality "
            f"translates into political inequality in Zurich."
        )
        for other in context.others:
            if st.button(f"Compare with {other.name}", key=f"compare_{other.id}", use_container_width=True):
                open_persona(other.id)


if __name__ == "__main__":
    main()
