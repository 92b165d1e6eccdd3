"""Political influence — how wealth translates into access."""

import streamlit as st

from zurich_perspectives import charts
from zurich_perspectives.config import SECTION_PAGES
from zurich_perspectives.data import DataError, load_influence_data
from zurich_perspectives.formatting import format_chf
from zurich_perspectives.logging_config import setup_logger
from zurich_perspectives.ui import (
    page_setup,
    render_footer_links,
    render_navigation,
    render_page_header,
    require_context,
)

logger = setup_logger(__name__)


def main():
    page_setup("Political Influence")
    context = require_context()
    render_navigation(context)
    persona = context.persona

    try:
        influence = load_influence_data()
    except DataError as exc:
        logger.exception("Influence data unavailable")
        st.error(f"Error: Unable to load data ({exc})")
        st.stop()

    render_page_header(
        context,
        f"Political Influence for {persona.name}",
        "Wealth is distributed very unevenly in Switzerland, and with it the means to shape "
        "political decisions through access, campaign money and lobbying.",
    )

    st.header("Wealth Distribution in Switzerland")
    distribution = influence.get("wealthDistribution", {}).get("switzerland") or []
    if distribution:
        left, right = st.columns([1, 2])
        with left:
            for group in distribution:
                st.markdown(f"- **{group['group']}:** {group['wealthShare']}%")
        with right:
            st.plotly_chart(charts.wealth_distribution(distribution), use_container_width=True)
    else:
        st.info("No wealth distribution data available.")

    st.header("Political Access")
    access = (influence.get("politicalAccess") or {}).get(persona.id) or {}
    st.write(access.get("description") or "No political access data available.")

    st.header("Campaign Financing")
    examples = (influence.get("campaignFinancing") or {}).get("examples") or []
    if examples:
        for example in examples:
            st.markdown(
                f"- **{example['donor']}:** {format_chf(example['amount'])} to {example['recipient']}"
            )
    else:
        st.info("No campaign financing data available.")

    st.header("Lobbying Mechanisms")
    mechanisms = influence.get("lobbyingMechanisms") or []
    if mechanisms:
        for mechanism in mechanisms:
            name = mechanism.get("mechanism") or "Unknown Mechanism"
            description = mechanism.get("description") or "No description available"
            st.markdown(f"- **{name}:** {description}")
    else:
        st.info("No lobbying mechanisms data available.")

    render_footer_links(SECTION_PAGES[1], SECTION_PAGES[3])


if __name__ == "__main__":
    main()
