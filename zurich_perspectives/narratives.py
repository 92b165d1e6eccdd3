"""Per-persona narrative text.

Every piece of persona-specific prose lives in NARRATIVES, keyed by persona
id. Templates are ``str.format`` strings; ``narrative_values`` supplies the
placeholders (``{name}``, ``{municipality}``, ``{multiplier}``, ``{income}``
and, where a tax breakdown is available, ``{effective_rate}``).
"""

from __future__ import annotations

from dataclasses import dataclass

from zurich_perspectives.config import BURDEN_MODERATE_ABOVE, BURDEN_SIGNIFICANT_ABOVE
from zurich_perspectives.formatting import format_number


@dataclass(frozen=True)
class NarrativeSet:
    card_title: str
    card_summary: str
    tax_analysis: str
    tax_insights: tuple[str, str]
    turnout_income_note: str
    barriers_intro: str
    participation_patterns: dict[str, str]
    representation_meaning: str
    synthesis: dict[str, str]
    cycle_position: str
    explore_blurb: str


NARRATIVES: dict[str, NarrativeSet] = {
    "anna": NarrativeSet(
        card_title="Middle-Class Employee",
        card_summary=(
            "Office administrator living in Zurich City, earning CHF 85,000 annually. "
            "Educated and politically aware but time-constrained."
        ),
        tax_analysis=(
            "Living in {municipality} means paying a higher municipal tax multiplier ({multiplier}%) "
            "compared to wealthy suburbs, creating a proportionally higher tax burden for "
            "middle-income residents."
        ),
        tax_insights=(
            "Middle-income residents bear a proportionally higher tax burden compared to the "
            "wealthiest residents.",
            "While able to benefit from some tax deductions like third pillar contributions, "
            "the overall tax burden remains significant.",
        ),
        turnout_income_note=(
            "As a middle-income resident, {name} falls in the middle range of voter participation."
        ),
        barriers_intro=(
            "As a middle-income resident with a full-time job, {name} faces moderate barriers to "
            "political participation, primarily related to time constraints."
        ),
        participation_patterns={
            "Federal Elections": "Votes in most federal elections",
            "Cantonal Elections": "Votes in some cantonal elections",
            "Referendums": "Participates in approximately half of referendums",
            "Local Politics": "Limited engagement with local political issues",
        },
        representation_meaning=(
            "As a middle-income resident with moderate political participation, {name}'s "
            "preferences are somewhat represented in policy outcomes, but not as strongly as those "
            "of higher-income voters. The policies that affect her daily life may not fully align "
            "with her interests."
        ),
        synthesis={
            "Taxation & Income": (
                "As a middle-income resident living in {municipality}, {name} pays a moderate tax "
                "rate with a municipal multiplier of {multiplier}%. Her effective tax rate is "
                "approximately {effective_rate}% of her income, placing her in the middle of the "
                "tax burden spectrum."
            ),
            "Public Spending Benefits": (
                "{name} receives moderate benefits from public spending, particularly in "
                "transportation and healthcare. Her tax-to-benefit ratio is relatively balanced, "
                "though she may not fully utilize all services her taxes support."
            ),
            "Political Influence": (
                "{name} has limited direct access to politicians and moderate indirect access "
                "through professional associations. Her ability to influence policy is constrained "
                "by both financial limitations and time constraints."
            ),
            "Voter Engagement": (
                "As a middle-income resident, {name} votes in most federal elections and "
                "approximately half of referendums. Her political participation is moderate, "
                "limited primarily by time constraints due to work and family responsibilities."
            ),
        },
        cycle_position=(
            "As a middle-income resident, {name} occupies an intermediate position in this cycle. "
            "She has moderate political influence and participation, but faces significant "
            "constraints compared to higher-income residents. Her experience illustrates the "
            "'middle squeeze' in Zurich's democracy."
        ),
        explore_blurb="Middle-income employee living in Zurich City",
    ),
    "leo": NarrativeSet(
        card_title="Lower-Income Service Worker",
        card_summary=(
            "Hospitality worker living in Schlieren, earning CHF 55,000 annually. Works multiple "
            "jobs with limited time for political engagement."
        ),
        tax_analysis=(
            "Despite having a lower income, the tax burden is still significant relative to "
            "disposable income, and living in {municipality} ({multiplier}%) provides only a "
            "modest tax advantage compared to Zurich City."
        ),
        tax_insights=(
            "Lower-income residents have less flexibility to optimize their tax situation through "
            "relocation.",
            "Limited ability to take advantage of tax deductions due to lower income.",
        ),
        turnout_income_note=(
            "As a lower-income resident, {name} is in the demographic group with the lowest voter "
            "participation rates."
        ),
        barriers_intro=(
            "As a lower-income resident working multiple jobs, {name} faces significant barriers "
            "to political participation, including severe time constraints and limited access to "
            "political information."
        ),
        participation_patterns={
            "Federal Elections": "Votes occasionally in major federal elections",
            "Cantonal Elections": "Rarely votes in cantonal elections",
            "Referendums": "Participates in few referendums",
            "Local Politics": "Minimal engagement with local political issues",
        },
        representation_meaning=(
            "As a lower-income resident with limited political participation, {name}'s preferences "
            "are significantly underrepresented in policy outcomes. The political system is less "
            "responsive to his needs and interests compared to higher-income voters."
        ),
        synthesis={
            "Taxation & Income": (
                "As a lower-income resident living in {municipality}, {name} pays a lower absolute "
                "amount in taxes but faces a municipal multiplier of {multiplier}%. Despite his "
                "lower income, his effective tax rate is approximately {effective_rate}% of his "
                "income."
            ),
            "Public Spending Benefits": (
                "{name} receives significant benefits from public spending, particularly in "
                "healthcare, transportation, and occasionally social welfare. His tax-to-benefit "
                "ratio shows he receives more in services than he contributes in taxes."
            ),
            "Political Influence": (
                "{name} has very limited direct access to politicians and minimal indirect access "
                "through unions or community organizations. His ability to influence policy is "
                "severely constrained by financial limitations, time constraints, and information "
                "barriers."
            ),
            "Voter Engagement": (
                "As a lower-income resident, {name} votes occasionally in major federal elections "
                "but rarely participates in referendums. His political participation is low, "
                "limited by severe time constraints, information barriers, and skepticism about "
                "his ability to influence outcomes."
            ),
        },
        cycle_position=(
            "As a lower-income resident, {name} is disadvantaged at every point in this cycle. He "
            "faces higher effective tax rates in his municipality, receives limited political "
            "access, participates less in voting, and sees policies that often don't align with "
            "his preferences. His experience illustrates the compounding nature of economic and "
            "political inequality."
        ),
        explore_blurb="Lower-income service worker living in Schlieren",
    ),
    "millionaire": NarrativeSet(
        card_title="Finance Executive",
        card_summary=(
            "Finance executive living in Küsnacht, earning CHF 750,000 annually. Well-connected, "
            "politically active and influential."
        ),
        tax_analysis=(
            "Despite having a much higher income, the effective tax rate benefits from the low tax "
            "multiplier in {municipality} ({multiplier}%), showing how wealthy residents can "
            "optimize their tax situation by living in low-tax municipalities."
        ),
        tax_insights=(
            "Wealthy residents benefit significantly from Switzerland's regressive tax system and "
            "can choose to live in low-tax municipalities.",
            "Access to tax optimization strategies (like third pillar contributions) provides "
            "additional advantages to high-income residents.",
        ),
        turnout_income_note=(
            "As a high-income resident, {name} is in the demographic group with the highest voter "
            "participation rates."
        ),
        barriers_intro=(
            "As a high-income resident with a flexible schedule and extensive networks, {name} "
            "faces few barriers to political participation."
        ),
        participation_patterns={
            "Federal Elections": "Votes consistently in federal elections",
            "Cantonal Elections": "Votes regularly in cantonal elections",
            "Referendums": "Participates in most referendums",
            "Local Politics": "Active engagement with local political issues",
        },
        representation_meaning=(
            "As a high-income resident with high political participation, {name}'s preferences are "
            "strongly represented in policy outcomes. The political system is highly responsive to "
            "his needs and interests."
        ),
        synthesis={
            "Taxation & Income": (
                "As a high-income resident living in {municipality}, {name} benefits from one of "
                "the canton's lowest municipal multipliers at {multiplier}%. Despite his high "
                "income, this favorable rate means his effective tax rate is approximately "
                "{effective_rate}% of his income, only slightly higher than middle-income "
                "residents in less wealthy municipalities."
            ),
            "Public Spending Benefits": (
                "{name} contributes significantly in taxes but utilizes relatively few public "
                "services directly, often opting for private alternatives in education and "
                "healthcare. His tax-to-benefit ratio shows he contributes more than he directly "
                "receives in benefits."
            ),
            "Political Influence": (
                "{name} has significant direct access to politicians through business networks and "
                "strong indirect access through industry associations. His financial resources "
                "allow him to make political donations and participate in exclusive events with "
                "decision-makers."
            ),
            "Voter Engagement": (
                "As a high-income resident, {name} votes consistently in federal elections and "
                "most referendums. His political participation is high, facilitated by greater "
                "control over his schedule, excellent access to information, and confidence in his "
                "ability to influence outcomes."
            ),
        },
        cycle_position=(
            "As a high-income resident, {name} benefits at every point in this cycle. He enjoys "
            "lower tax rates in his wealthy municipality, has significant political access, "
            "participates actively in voting, and sees policies that generally align with his "
            "preferences. His experience illustrates how economic advantages translate into "
            "political advantages."
        ),
        explore_blurb="High-income finance professional living in Küsnacht",
    ),
}

FALLBACK_NARRATIVE = NarrativeSet(
    card_title="Zurich Resident",
    card_summary="A resident of the canton of Zurich.",
    tax_analysis="Living in {municipality} applies a municipal multiplier of {multiplier}%.",
    tax_insights=(
        "Municipal tax multipliers differ widely across the canton.",
        "Deductions reduce taxable income before the progressive brackets apply.",
    ),
    turnout_income_note="Turnout for {name}'s income group is shown in the chart.",
    barriers_intro="These are the barriers {name} faces when taking part in politics.",
    participation_patterns={},
    representation_meaning=(
        "How strongly {name}'s preferences are represented depends on how often people in "
        "similar circumstances vote."
    ),
    synthesis={
        "Taxation & Income": (
            "{name} lives in {municipality} with a multiplier of {multiplier}% and an effective "
            "tax rate of approximately {effective_rate}%."
        ),
    },
    cycle_position="{name}'s position in this cycle depends on income, residence and participation.",
    explore_blurb="Zurich resident",
)

# Shared across personas
COMMON_TAX_INSIGHT = (
    "Municipal tax multipliers create significant differences in tax burden based on location, "
    "with wealthy municipalities often having the lowest rates."
)

REFLECTION_QUESTIONS = [
    "How does economic inequality affect the functioning of democracy in Zurich?",
    "What mechanisms could help reduce the translation of economic inequality into political "
    "inequality?",
    "How might the experience of democracy differ for residents across different socioeconomic "
    "positions?",
    "What responsibility do higher-income residents have in addressing systemic inequalities?",
    "How can democratic systems better account for differential participation rates?",
]

INEQUALITY_CYCLE = [
    ("Differential Tax Burden", "Wealthy areas have lower tax rates"),
    ("Unequal Political Access", "Wealth provides greater influence"),
    ("Differential Participation", "Higher-income voters participate more"),
    ("Policy Alignment", "Policies favor higher-income preferences"),
]


def narrative_for(persona_id: str) -> NarrativeSet:
    return NARRATIVES.get(persona_id, FALLBACK_NARRATIVE)


def narrative_values(persona, breakdown=None) -> dict:
    """Placeholder values for a persona, optionally with its tax breakdown."""
    values = {
        "name": persona.name,
        "municipality": persona.municipality,
        "multiplier": format_number(persona.tax_multiplier),
        "income": format_number(persona.income),
        "effective_rate": "n/a",
    }
    if breakdown is not None:
        values["effective_rate"] = f"{breakdown.effective_rate:.1f}"
        values["multiplier"] = format_number(breakdown.multiplier)
    return values


def render(template: str, values: dict) -> str:
    return template.format_map(values)


def burden_wording(effective_rate: float) -> str:
    if effective_rate > BURDEN_SIGNIFICANT_ABOVE:
        return "a significant portion"
    if effective_rate > BURDEN_MODERATE_ABOVE:
        return "a moderate portion"
    return "a relatively small portion"
