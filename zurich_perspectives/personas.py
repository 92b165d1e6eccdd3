"""Persona model and the explicit context object passed to every page renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field

from zurich_perspectives.config import PERSONA_QUERY_PARAM


class Persona(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    full_name: str = Field(alias="fullName")
    occupation: str
    age: int
    location: str
    income: float
    assets: str = ""
    tax_multiplier: float = Field(alias="taxMultiplier")
    municipality: str
    short_bio: str = Field(default="", alias="shortBio")
    characteristics: list[str] = Field(default_factory=list)
    image_path: str | None = Field(default=None, alias="imagePath")
    income_group: str | None = Field(default=None, alias="incomeGroup")

    @property
    def initial(self) -> str:
        return self.name[:1]


def parse_personas(document: Mapping[str, Any]) -> list[Persona]:
    return [Persona.model_validate(item) for item in document.get("personas", [])]


def find_persona(personas: Iterable[Persona], persona_id: str | None) -> Persona | None:
    if not persona_id:
        return None
    return next((p for p in personas if p.id == persona_id), None)


@dataclass(frozen=True)
class PersonaContext:
    """The selected persona plus the roster, handed explicitly to renderers."""

    persona: Persona
    personas: tuple[Persona, ...]

    @property
    def others(self) -> list[Persona]:
        return [p for p in self.personas if p.id != self.persona.id]

    def is_selected(self, persona_id: str) -> bool:
        return self.persona.id == persona_id


def resolve_context(
    personas: Iterable[Persona],
    query_params: Mapping[str, Any],
    remembered_id: str | None = None,
) -> PersonaContext | None:
    """Build the context from the URL query parameter, else the remembered choice.

    Returns None when neither names a known persona.
    """
    roster = tuple(personas)
    requested = query_params.get(PERSONA_QUERY_PARAM)
    if isinstance(requested, list):
        requested = requested[0] if requested else None

    persona = find_persona(roster, requested) or find_persona(roster, remembered_id)
    if persona is None:
        return None
    return PersonaContext(persona=persona, personas=roster)
