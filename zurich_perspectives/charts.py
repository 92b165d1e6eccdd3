"""Plotly figures used across the pages."""

from __future__ import annotations

from typing import Sequence

import plotly.graph_objects as go

from zurich_perspectives.config import (
    COLOR_BLUE,
    COLOR_LIGHT_BLUE,
    COLOR_NAVY,
    COLOR_RED,
)
from zurich_perspectives.tax import TaxBreakdown

COMPONENT_COLORS = [COLOR_NAVY, COLOR_BLUE, COLOR_LIGHT_BLUE]

CATEGORY_COLORS = [
    COLOR_NAVY, COLOR_BLUE, COLOR_LIGHT_BLUE, COLOR_RED,
    "#F4A261", "#2A9D8F", "#8D99AE", "#E9C46A",
]


def highlight_colors(
    labels: Sequence[str],
    highlight: str | None,
    base: str = COLOR_BLUE,
    accent: str = COLOR_RED,
) -> list[str]:
    """One color per bar, the accent on the bar whose label matches ``highlight``."""
    return [accent if highlight is not None and label == highlight else base for label in labels]


def _layout(fig: go.Figure, title: str, height: int = 320) -> go.Figure:
    fig.update_layout(
        title=title,
        height=height,
        margin={"t": 50, "b": 40, "l": 40, "r": 20},
        showlegend=False,
    )
    return fig


# ---------------------------------------------------------------------------
# Taxation
# ---------------------------------------------------------------------------

def tax_components_pie(breakdown: TaxBreakdown) -> go.Figure:
    labels = ["Federal", "Cantonal", "Municipal"]
    values = [breakdown.federal, breakdown.cantonal, breakdown.municipal]
    fig = go.Figure(
        go.Pie(
            labels=labels,
            values=values,
            hole=0.45,
            marker={"colors": COMPONENT_COLORS},
            texttemplate="%{label}<br>CHF %{value:,.0f}",
            sort=False,
        )
    )
    return _layout(fig, "Tax components")


def effective_rate_comparison(rows: list[dict], selected_id: str | None) -> go.Figure:
    """Effective rate per persona; the selected persona is drawn in the accent color."""
    names = [row["Persona"] for row in rows]
    rates = [row["Effective Rate"] for row in rows]
    selected_name = next((row["Persona"] for row in rows if row["id"] == selected_id), None)

    fig = go.Figure(
        go.Bar(
            x=names,
            y=rates,
            marker_color=highlight_colors(names, selected_name, base=COLOR_NAVY),
            text=[f"{rate:.1f}%" for rate in rates],
            textposition="outside",
        )
    )
    top = max(rates, default=0)
    fig.update_yaxes(range=[0, max(top * 1.2, 1)], ticksuffix="%", title="Effective rate")
    return _layout(fig, "Effective tax rate by persona")


def municipal_multipliers(multipliers: dict[str, float], selected: str | None) -> go.Figure:
    ordered = sorted(multipliers.items(), key=lambda item: item[1])
    names = [name for name, _ in ordered]
    values = [value for _, value in ordered]
    fig = go.Figure(
        go.Bar(
            x=values,
            y=names,
            orientation="h",
            marker_color=highlight_colors(names, selected),
            text=[f"{value:.0f}%" for value in values],
            textposition="outside",
        )
    )
    fig.update_xaxes(range=[0, max(values, default=100) * 1.15], ticksuffix="%")
    return _layout(fig, "Municipal tax multipliers", height=300)


# ---------------------------------------------------------------------------
# Public spending & influence
# ---------------------------------------------------------------------------

def spending_pie(categories: list[dict], title: str) -> go.Figure:
    fig = go.Figure(
        go.Pie(
            labels=[c["name"] for c in categories],
            values=[c["percentage"] for c in categories],
            marker={"colors": CATEGORY_COLORS},
            textinfo="label+percent",
            sort=False,
        )
    )
    return _layout(fig, title, height=380)


def wealth_distribution(groups: list[dict]) -> go.Figure:
    labels = [g["group"] for g in groups]
    shares = [g["wealthShare"] for g in groups]
    fig = go.Figure(
        go.Bar(
            x=labels,
            y=shares,
            marker_color=COLOR_NAVY,
            text=[f"{share}%" for share in shares],
            textposition="outside",
        )
    )
    fig.update_yaxes(range=[0, 100], ticksuffix="%", title="Share of total wealth")
    return _layout(fig, "Wealth distribution in Switzerland")


# ---------------------------------------------------------------------------
# Voter engagement
# ---------------------------------------------------------------------------

def percentage_bars(
    items: list[dict],
    label_key: str,
    value_key: str,
    title: str,
    highlight: str | None = None,
    base: str = COLOR_BLUE,
) -> go.Figure:
    """Bar chart on a fixed 0-100% axis, used for turnout and policy alignment."""
    labels = [item.get(label_key) or "" for item in items]
    values = [item[value_key] for item in items]
    fig = go.Figure(
        go.Bar(
            x=labels,
            y=values,
            marker_color=highlight_colors(labels, highlight, base=base),
            text=[f"{value}%" for value in values],
            textposition="outside",
        )
    )
    fig.update_yaxes(range=[0, 100], dtick=20, ticksuffix="%")
    return _layout(fig, title)
