"""Streamlit helpers shared by every page: setup, navigation and persona context."""

import streamlit as st

from zurich_perspectives.config import (
    APP_TITLE,
    COLOR_CREAM,
    COLOR_NAVY,
    HOME_PAGE,
    PERSONA_QUERY_PARAM,
    PROFILE_PAGE,
    SECTION_PAGES,
)
from zurich_perspectives.data import DataError, load_personas
from zurich_perspectives.logging_config import setup_logger
from zurich_perspectives.personas import PersonaContext, resolve_context

logger = setup_logger(__name__)

SESSION_PERSONA_KEY = "persona_id"


def page_setup(title: str) -> None:
    st.set_page_config(page_title=f"{title} — {APP_TITLE}", layout="wide")
    st.markdown(
        f"""
        <style>
            .block-container {{ padding-top: 2rem; }}
            h1, h2, h3 {{ color: {COLOR_NAVY}; }}
            .zp-card {{
                background: {COLOR_CREAM};
                border-radius: 0.5rem;
                padding: 1rem 1.25rem;
                margin-bottom: 1rem;
            }}
        </style>
        """,
        unsafe_allow_html=True,
    )


def select_persona(persona_id: str) -> None:
    st.session_state[SESSION_PERSONA_KEY] = persona_id


def open_persona(persona_id: str, page: str = PROFILE_PAGE) -> None:
    select_persona(persona_id)
    st.switch_page(page)


def current_context() -> PersonaContext | None:
    """Resolve the persona for this run from the URL, else the session's last choice."""
    try:
        personas = load_personas()
    except DataError as exc:
        logger.exception("Unable to load personas")
        st.error(f"Error loading personas: {exc}")
        st.stop()

    context = resolve_context(personas, st.query_params, st.session_state.get(SESSION_PERSONA_KEY))
    if context is not None:
        select_persona(context.persona.id)
        st.query_params[PERSONA_QUERY_PARAM] = context.persona.id
    return context


def require_context() -> PersonaContext:
    """Like current_context, but stops the page with an error when no persona is chosen."""
    context = current_context()
    if context is None:
        requested = st.query_params.get(PERSONA_QUERY_PARAM)
        logger.warning(f"No persona resolved (requested={requested!r})")
        st.error("Persona not found. Please choose a persona to begin.")
        st.page_link(HOME_PAGE, label="← Back to Persona Selection")
        st.stop()
    return context


def render_navigation(context: PersonaContext | None) -> None:
    """Sidebar menu: personas always, section pages once a persona is chosen."""
    with st.sidebar:
        st.page_link(HOME_PAGE, label=APP_TITLE, icon="🏠")

        st.markdown("**Personas**")
        try:
            personas = context.personas if context else load_personas()
        except DataError:
            personas = []
        for persona in personas:
            selected = context is not None and context.is_selected(persona.id)
            if st.button(
                persona.name,
                key=f"nav_{persona.id}",
                type="primary" if selected else "secondary",
                use_container_width=True,
            ):
                open_persona(persona.id)

        if context is not None:
            st.divider()
            st.markdown(f"**Explore {context.persona.name}'s Zurich**")
            st.page_link(PROFILE_PAGE, label="Profile")
            for page, label in SECTION_PAGES:
                st.page_link(page, label=label)


def render_page_header(context: PersonaContext, title: str, intro: str) -> None:
    persona = context.persona
    top_left, top_right = st.columns([3, 1])
    with top_left:
        st.page_link(PROFILE_PAGE, label=f"← Back to {persona.name}'s Profile")
    with top_right:
        st.caption(APP_TITLE)

    st.title(title)
    avatar, who = st.columns([1, 11])
    avatar.markdown(f"## {persona.initial}")
    with who:
        st.markdown(f"**{persona.name}**  \n{persona.occupation}")
    st.write(intro)


def render_footer_links(previous: tuple[str, str] | None, following: tuple[str, str] | None) -> None:
    st.divider()
    left, right = st.columns(2)
    if previous:
        with left:
            st.page_link(previous[0], label=f"← {previous[1]}")
    if following:
        with right:
            st.page_link(following[0], label=f"{following[1]} →")
