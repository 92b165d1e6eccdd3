"""Tests for persona lookup and context resolution."""

import pytest

from zurich_perspectives.personas import Persona, find_persona, resolve_context


class TestPersonaModel:
    def test_camel_case_aliases(self, personas):
        thomas = find_persona(personas, "millionaire")
        assert thomas.full_name.startswith("Thomas")
        assert thomas.income_group == "High income"
        assert thomas.initial == "T"

    def test_is_frozen(self, personas):
        with pytest.raises(Exception):
            personas[0].income = 1

    def test_optional_fields_default(self):
        persona = Persona.model_validate({
            "id": "x", "name": "X", "fullName": "X Y", "occupation": "Tester", "age": 30,
            "location": "Zurich", "income": 1, "taxMultiplier": 100, "municipality": "Zurich City",
        })
        assert persona.characteristics == []
        assert persona.image_path is None


class TestResolveContext:
    def test_query_param_selects_persona(self, personas):
        context = resolve_context(personas, {"persona": "leo"})
        assert context.persona.id == "leo"
        assert [p.id for p in context.others] == ["anna", "millionaire"]

    def test_query_param_wins_over_remembered(self, personas):
        context = resolve_context(personas, {"persona": "anna"}, remembered_id="leo")
        assert context.persona.id == "anna"

    def test_falls_back_to_remembered(self, personas):
        context = resolve_context(personas, {}, remembered_id="millionaire")
        assert context.persona.id == "millionaire"
        assert context.is_selected("millionaire")
        assert not context.is_selected("anna")

    def test_unknown_id_falls_back_to_remembered(self, personas):
        context = resolve_context(personas, {"persona": "ghost"}, remembered_id="anna")
        assert context.persona.id == "anna"

    def test_list_valued_param(self, personas):
        assert resolve_context(personas, {"persona": ["leo"]}).persona.id == "leo"

    @pytest.mark.parametrize("params", [{}, {"persona": "ghost"}, {"persona": []}, {"persona": ""}])
    def test_nothing_resolves(self, personas, params):
        assert resolve_context(personas, params) is None

    def test_context_keeps_full_roster(self, personas):
        context = resolve_context(personas, {"persona": "anna"})
        assert len(context.personas) == len(personas)
