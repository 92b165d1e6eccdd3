"""Tests for the shipped JSON documents and the loaders around them."""

import json

import pytest

from zurich_perspectives.data import (
    DataError,
    load_engagement_data,
    load_influence_data,
    load_json,
    load_personas,
    load_spending_data,
    load_tax_schedule,
)
from zurich_perspectives.schedule import ScheduleError
from zurich_perspectives.tax import compute_tax

PERSONA_IDS = ["anna", "leo", "millionaire"]


class TestLoaders:
    def test_missing_file(self, tmp_path):
        with pytest.raises(DataError, match="not found"):
            load_json("nope.json", tmp_path)

    def test_invalid_json(self, tmp_path):
        (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(DataError, match="not valid JSON"):
            load_json("broken.json", tmp_path)

    def test_directory_instead_of_file(self, tmp_path):
        (tmp_path / "folder.json").mkdir()
        with pytest.raises(DataError):
            load_json("folder.json", tmp_path)

    def test_non_utf8_file(self, tmp_path):
        (tmp_path / "latin1.json").write_bytes('{"name": "K\xfcsnacht"}'.encode("latin-1"))
        with pytest.raises(DataError, match="UTF-8"):
            load_json("latin1.json", tmp_path)

    def test_malformed_personas_is_data_error(self, tmp_path):
        (tmp_path / "personas.json").write_text(
            json.dumps({"personas": [{"id": "x"}]}), encoding="utf-8"
        )
        with pytest.raises(DataError, match="Invalid persona data"):
            load_personas(tmp_path)

    def test_missing_tax_schedule_is_schedule_error(self, tmp_path):
        with pytest.raises(ScheduleError):
            load_tax_schedule(tmp_path)

    def test_malformed_tax_schedule_is_schedule_error(self, tmp_path, document):
        document["taxRates"]["federal"] = []
        (tmp_path / "tax-data.json").write_text(json.dumps(document), encoding="utf-8")
        with pytest.raises(ScheduleError):
            load_tax_schedule(tmp_path)


class TestShippedPersonas:
    def test_three_personas_in_order(self, personas):
        assert [p.id for p in personas] == PERSONA_IDS

    def test_persona_fields(self, personas):
        anna = personas[0]
        assert anna.name == "Anna"
        assert anna.income == 85_000
        assert anna.municipality == "Zurich City"
        assert anna.tax_multiplier == 119
        assert anna.characteristics

    def test_multiplier_matches_schedule(self, personas):
        schedule = load_tax_schedule()
        for persona in personas:
            assert schedule.municipal_multiplier(persona.municipality) == persona.tax_multiplier

    def test_income_groups_exist_in_engagement_data(self, personas):
        turnout = load_engagement_data()["turnoutRates"]["zurich"]["byIncome"]
        groups = {row["group"] for row in turnout}
        for persona in personas:
            assert persona.income_group in groups


class TestShippedTaxSchedule:
    def test_loads_and_validates(self):
        schedule = load_tax_schedule()
        assert schedule.federal_brackets[0].lower_bound == 0
        assert schedule.federal_brackets[-1].upper_bound is None

    def test_anna_worked_example(self, personas):
        schedule = load_tax_schedule()
        anna = personas[0]
        breakdown = compute_tax(anna.income, anna.municipality, schedule)
        assert breakdown.deductions.total == pytest.approx(13_650)
        assert breakdown.taxable_income == pytest.approx(71_350)
        assert breakdown.multiplier == 119
        assert 0 < breakdown.effective_rate < 100

    def test_effective_rate_rises_with_income(self, personas):
        schedule = load_tax_schedule()
        by_income = sorted(personas, key=lambda p: p.income)
        rates = [compute_tax(p.income, p.municipality, schedule).effective_rate for p in by_income]
        assert rates == sorted(rates)


class TestShippedContent:
    def test_spending_has_benefits_per_persona(self):
        spending = load_spending_data()
        assert spending["canton"]["categories"]
        for persona_id in PERSONA_IDS:
            assert spending["personaBenefits"][persona_id]

    def test_canton_percentages_sum_to_100(self):
        categories = load_spending_data()["canton"]["categories"]
        assert sum(c["percentage"] for c in categories) == pytest.approx(100, abs=0.5)

    def test_influence_access_per_persona(self):
        access = load_influence_data()["politicalAccess"]
        for persona_id in PERSONA_IDS:
            assert access[persona_id]["description"]

    def test_barrier_impacts_within_scale(self):
        barriers = load_engagement_data()["participationBarriers"]
        for persona_id in PERSONA_IDS:
            for barrier in barriers[persona_id]:
                assert 0 <= barrier["impact"] <= 10
