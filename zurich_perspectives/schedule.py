"""Pydantic models for the rate and deduction schedule documents."""

from __future__ import annotations

import math
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from zurich_perspectives.config import DEFAULT_MUNICIPAL_MULTIPLIER


class ScheduleError(ValueError):
    """Raised when a tax schedule document is missing or malformed."""


class ScheduleModel(BaseModel):
    """Frozen base model accepting both the camelCase JSON keys and field names."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


# ---------------------------------------------------------------------------
# Federal brackets
# ---------------------------------------------------------------------------

class TaxBracket(ScheduleModel):
    """A contiguous income range taxed at one marginal rate (percent).

    ``upper_bound`` of None marks the open-ended top bracket.
    """

    lower_bound: float = Field(alias="lowerBound")
    upper_bound: float | None = Field(default=None, alias="upperBound")
    rate: float

    @model_validator(mode="after")
    def _validate_values(self) -> TaxBracket:
        if self.lower_bound < 0:
            raise ScheduleError("Bracket lower bounds must be non-negative")
        if self.upper_bound is not None and self.upper_bound <= self.lower_bound:
            raise ScheduleError(
                f"Bracket upper bound {self.upper_bound} must exceed lower bound {self.lower_bound}"
            )
        if self.rate < 0:
            raise ScheduleError("Tax rates must be non-negative")
        return self

    @property
    def width(self) -> float:
        if self.upper_bound is None:
            return math.inf
        return self.upper_bound - self.lower_bound


# ---------------------------------------------------------------------------
# Cantonal and municipal rates
# ---------------------------------------------------------------------------

class MunicipalityMultiplier(ScheduleModel):
    municipality: str
    multiplier: float


class CantonalRates(ScheduleModel):
    """Cantonal tax is derived from federal tax: ``federal * base_rate / 100``."""

    base_rate: float = Field(alias="baseRate")
    multipliers: list[MunicipalityMultiplier] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_rate(self) -> CantonalRates:
        if self.base_rate < 0:
            raise ScheduleError("Cantonal base rate must be non-negative")
        return self


class TaxRates(ScheduleModel):
    federal: list[TaxBracket]
    cantonal: CantonalRates
    municipal: dict[str, float] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _validate_brackets(self) -> TaxRates:
        brackets = self.federal
        if not brackets:
            raise ScheduleError("Federal bracket schedule is empty")
        if brackets[0].lower_bound != 0:
            raise ScheduleError("Federal brackets must start at an income of 0")

        for previous, current in zip(brackets, brackets[1:]):
            if previous.upper_bound is None:
                raise ScheduleError("Only the last federal bracket may be open-ended")
            if current.lower_bound != previous.upper_bound:
                raise ScheduleError(
                    f"Federal brackets must be contiguous and sorted: bracket starting at "
                    f"{current.lower_bound} follows one ending at {previous.upper_bound}"
                )

        listed = [(m.municipality, m.multiplier) for m in self.cantonal.multipliers]
        for name, multiplier in listed + list(self.municipal.items()):
            if multiplier < 0:
                raise ScheduleError(f"Municipal multiplier for {name} must be non-negative")
        return self


# ---------------------------------------------------------------------------
# Deductions
# ---------------------------------------------------------------------------

class DeductionSchedule(ScheduleModel):
    """Flat deductions in CHF, except ``professional_expenses`` (a fraction of income)."""

    standard: float
    professional_expenses: float = Field(alias="professionalExpenses")
    max_professional_expenses: float = Field(alias="maxProfessionalExpenses")
    health_insurance: float = Field(alias="healthInsurance")
    third_pillar: float = Field(alias="thirdPillar")

    @model_validator(mode="after")
    def _validate_amounts(self) -> DeductionSchedule:
        amounts = {
            "standard": self.standard,
            "maxProfessionalExpenses": self.max_professional_expenses,
            "healthInsurance": self.health_insurance,
            "thirdPillar": self.third_pillar,
        }
        for key, value in amounts.items():
            if value < 0:
                raise ScheduleError(f"Deduction {key} must be non-negative")
        if not 0 <= self.professional_expenses <= 1:
            raise ScheduleError("professionalExpenses must be a fraction between 0 and 1")
        return self


# ---------------------------------------------------------------------------
# Full schedule
# ---------------------------------------------------------------------------

class TaxSchedule(ScheduleModel):
    """Both schedule documents, parsed and validated together."""

    tax_rates: TaxRates = Field(alias="taxRates")
    deductions: DeductionSchedule

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> TaxSchedule:
        """Validate a parsed tax-data document, raising ScheduleError on any problem."""
        try:
            return cls.model_validate(document)
        except ValidationError as exc:
            raise ScheduleError(f"Invalid tax schedule: {exc}") from exc

    @property
    def federal_brackets(self) -> list[TaxBracket]:
        return self.tax_rates.federal

    @property
    def cantonal_base_rate(self) -> float:
        return self.tax_rates.cantonal.base_rate

    def municipal_multiplier(self, municipality: str | None) -> float:
        """Multiplier (percent) for a municipality; neutral when unknown."""
        return self.municipalities().get(municipality or "", DEFAULT_MUNICIPAL_MULTIPLIER)

    def known_municipality(self, municipality: str | None) -> bool:
        return bool(municipality) and municipality in self.municipalities()

    def municipalities(self) -> dict[str, float]:
        """All multipliers, the municipal table taking precedence over the cantonal list."""
        merged = {m.municipality: m.multiplier for m in self.tax_rates.cantonal.multipliers}
        merged.update(self.tax_rates.municipal)
        return merged
