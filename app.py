"""Zurich Perspectives — persona selection (home page)."""

import streamlit as st

from zurich_perspectives.config import APP_SUBTITLE, APP_TITLE
from zurich_perspectives.data import DataError, load_personas
from zurich_perspectives.logging_config import setup_logger
from zurich_perspectives.formatting import format_chf
from zurich_perspectives.narratives import narrative_for
from zurich_perspectives.ui import current_context, open_persona, page_setup, render_navigation

logger = setup_logger(__name__)


def render_persona_cards(personas) -> None:
    columns = st.columns(len(personas))
    for column, persona in zip(columns, personas):
        narrative = narrative_for(persona.id)
        with column, st.container(border=True):
            st.markdown(
                f"<h1 style='text-align:center;font-weight:300'>{persona.name}</h1>",
                unsafe_allow_html=True,
            )
            st.subheader(narrative.card_title)
            st.write(narrative.card_summary)
            st.caption(f"{persona.municipality} · {format_chf(persona.income)} / year")
            if st.button(
                f"SELECT {persona.name.upper()}",
                key=f"select_{persona.id}",
                type="primary",
                use_container_width=True,
            ):
                logger.info(f"Persona selected: {persona.id}")
                open_persona(persona.id)


def main():
    page_setup("Home")
    render_navigation(current_context())

    st.markdown(
        f"<h1 style='text-align:center'>{APP_TITLE.upper()}</h1>"
        f"<h3 style='text-align:center'>{APP_SUBTITLE}</h3>",
        unsafe_allow_html=True,
    )
    st.write(
        "Explore how Zurich residents with different incomes experience taxation, "
        "benefit from public spending, and navigate the political system. "
        "Choose a persona below to begin your journey."
    )

    try:
        personas = load_personas()
    except DataError as exc:
        logger.exception("Unable to load personas")
        st.error(f"Error loading personas: {exc}")
        return

    render_persona_cards(personas)

    st.divider()
    st.subheader("About This Project")
    st.write(
        "This interactive web pilot explores how economic inequality translates into "
        "political inequality in Zurich, Switzerland. By following the experiences of three "
        "personas with different socioeconomic backgrounds, you'll discover how taxation, "
        "public spending, political influence, and voter engagement vary across income levels."
    )
    st.write(
        "The data presented is based on research from official sources including the Federal "
        "Tax Administration, Canton Zurich statistics, and academic studies on political "
        "participation and influence."
    )


if __name__ == "__main__":
    main()
