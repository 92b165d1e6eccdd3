"""Public spending — where tax money goes and what the persona gets back."""

import streamlit as st

from zurich_perspectives import charts
from zurich_perspectives.config import SECTION_PAGES
from zurich_perspectives.data import DataError, load_spending_data
from zurich_perspectives.formatting import format_large_chf
from zurich_perspectives.logging_config import setup_logger
from zurich_perspectives.ui import (
    page_setup,
    render_footer_links,
    render_navigation,
    render_page_header,
    require_context,
)

logger = setup_logger(__name__)


def render_categories(categories: list[dict], title: str, empty_message: str):
    st.subheader(title)
    if not categories:
        st.info(empty_message)
        return
    for category in categories:
        st.markdown(
            f"- **{category['name']}:** {category['percentage']}% "
            f"({format_large_chf(category['amount'])})"
        )
    st.plotly_chart(charts.spending_pie(categories, title), use_container_width=True)


def main():
    page_setup("Public Spending")
    context = require_context()
    render_navigation(context)
    persona = context.persona

    try:
        spending = load_spending_data()
    except DataError as exc:
        logger.exception("Spending data unavailable")
        st.error(f"Error loading data: {exc}")
        st.stop()

    render_page_header(
        context,
        "Public Spending",
        f"Explore how tax money is allocated and how {persona.name} benefits from public "
        f"spending in Zurich. Learn about spending categories and the public services most "
        f"relevant to {persona.name}.",
    )

    left, right = st.columns(2)
    with left, st.container(border=True):
        render_categories(
            spending.get("canton", {}).get("categories") or [],
            "Canton Spending Categories",
            "No canton spending data available.",
        )
    with right, st.container(border=True):
        st.subheader(f"Public Services Used by {persona.name}")
        benefits = spending.get("personaBenefits", {}).get(persona.id) or []
        if benefits:
            for benefit in benefits:
                st.markdown(f"- **{benefit['category']}:** {benefit['description']}")
        else:
            st.info(f"No data available for {persona.name}.")

    federal = spending.get("federal", {}).get("categories") or []
    if federal:
        with st.expander("Federal spending categories"):
            render_categories(federal, "Federal Spending Categories", "No federal spending data available.")

    render_footer_links(SECTION_PAGES[0], SECTION_PAGES[2])


if __name__ == "__main__":
    main()
