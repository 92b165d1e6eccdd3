"""Progressive tax calculator: deductions, federal brackets, cantonal and municipal tax."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from zurich_perspectives.config import THIRD_PILLAR_THRESHOLD
from zurich_perspectives.logging_config import setup_logger
from zurich_perspectives.schedule import DeductionSchedule, TaxBracket, TaxSchedule

logger = setup_logger(__name__)


def round_half_up(value: float, decimals: int = 0) -> float:
    """Commercial rounding (0.5 rounds away from zero), unlike the builtin round()."""
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class DeductionBreakdown:
    standard: float
    professional_expenses: float
    health_insurance: float
    third_pillar: float

    @property
    def total(self) -> float:
        return self.standard + self.professional_expenses + self.health_insurance + self.third_pillar


@dataclass(frozen=True)
class TaxComponents:
    """Unrounded federal, cantonal and municipal tax in CHF."""

    federal: float
    cantonal: float
    municipal: float

    @property
    def total(self) -> float:
        return self.federal + self.cantonal + self.municipal


@dataclass(frozen=True)
class TaxBreakdown:
    """Result of one tax computation. Amounts in whole CHF, rate in percent (1 decimal)."""

    federal: int
    cantonal: int
    municipal: int
    total: int
    effective_rate: float
    income: float
    taxable_income: float
    deductions: DeductionBreakdown
    municipality: str | None
    multiplier: float
    exact: TaxComponents


# ---------------------------------------------------------------------------
# Deductions & taxable income
# ---------------------------------------------------------------------------

def compute_deductions(income: float, deductions: DeductionSchedule) -> DeductionBreakdown:
    """Itemised deductions for a gross income.

    Professional expenses are a fraction of income up to a cap. The third
    pillar deduction is all-or-nothing: only incomes strictly above
    THIRD_PILLAR_THRESHOLD get it.
    """
    income = max(0.0, income)

    professional = min(
        income * deductions.professional_expenses,
        deductions.max_professional_expenses,
    )
    third_pillar = deductions.third_pillar if income > THIRD_PILLAR_THRESHOLD else 0.0

    return DeductionBreakdown(
        standard=deductions.standard,
        professional_expenses=professional,
        health_insurance=deductions.health_insurance,
        third_pillar=third_pillar,
    )


def taxable_income(income: float, deductions: DeductionBreakdown) -> float:
    return max(0.0, income - deductions.total)


# ---------------------------------------------------------------------------
# Federal tax
# ---------------------------------------------------------------------------

def apply_brackets(taxable: float, brackets: Sequence[TaxBracket]) -> float:
    """Marginal bracket sum: each bracket taxes only the slice of income inside it."""
    tax = 0.0
    for bracket in brackets:
        if taxable <= bracket.lower_bound:
            continue
        amount_in_bracket = min(taxable - bracket.lower_bound, bracket.width)
        tax += amount_in_bracket * bracket.rate / 100
    return tax


# ---------------------------------------------------------------------------
# Full computation
# ---------------------------------------------------------------------------

def tax_components(taxable: float, multiplier: float, schedule: TaxSchedule) -> TaxComponents:
    """Federal tax from the brackets, cantonal from federal, municipal from cantonal."""
    federal = apply_brackets(taxable, schedule.federal_brackets)
    cantonal = federal * schedule.cantonal_base_rate / 100
    return TaxComponents(federal=federal, cantonal=cantonal, municipal=cantonal * multiplier / 100)


def compute_tax(income: float, municipality: str | None, schedule: TaxSchedule) -> TaxBreakdown:
    """Federal, cantonal and municipal tax plus the effective rate for one income."""
    itemised = compute_deductions(income, schedule.deductions)
    taxable = taxable_income(income, itemised)

    if not schedule.known_municipality(municipality):
        logger.debug(f"No multiplier for municipality {municipality!r}, using neutral multiplier")
    multiplier = schedule.municipal_multiplier(municipality)
    exact = tax_components(taxable, multiplier, schedule)
    effective_rate = exact.total / income * 100 if income > 0 else 0.0

    return TaxBreakdown(
        federal=int(round_half_up(exact.federal)),
        cantonal=int(round_half_up(exact.cantonal)),
        municipal=int(round_half_up(exact.municipal)),
        total=int(round_half_up(exact.total)),
        effective_rate=round_half_up(effective_rate, 1),
        income=income,
        taxable_income=taxable,
        deductions=itemised,
        municipality=municipality,
        multiplier=multiplier,
        exact=exact,
    )


def component_shares(breakdown: TaxBreakdown) -> dict[str, float]:
    """Share of the total (percent) for each tax component."""
    components = {
        "Federal": breakdown.federal,
        "Cantonal": breakdown.cantonal,
        "Municipal": breakdown.municipal,
    }
    if breakdown.total <= 0:
        return {label: 0.0 for label in components}
    return {label: amount / breakdown.total * 100 for label, amount in components.items()}


def compare_personas(personas: Iterable, schedule: TaxSchedule) -> list[dict]:
    """One comparison row per persona, in the given order."""
    rows = []
    for persona in personas:
        breakdown = compute_tax(persona.income, persona.municipality, schedule)
        rows.append({
            "id": persona.id,
            "Persona": persona.name,
            "Income": persona.income,
            "Municipality": persona.municipality,
            "Tax Multiplier": breakdown.multiplier,
            "Total Tax": breakdown.total,
            "Effective Rate": breakdown.effective_rate,
        })
    return rows
