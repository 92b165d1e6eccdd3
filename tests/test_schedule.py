"""Tests for schedule validation: malformed documents must fail at load time."""

import pytest

from zurich_perspectives.schedule import ScheduleError, TaxSchedule


class TestValidSchedule:
    def test_parses_camel_case_document(self, schedule):
        assert len(schedule.federal_brackets) == 3
        assert schedule.federal_brackets[1].lower_bound == 10_000
        assert schedule.federal_brackets[-1].upper_bound is None
        assert schedule.cantonal_base_rate == 50
        assert schedule.deductions.max_professional_expenses == 4_000

    def test_open_ended_bracket_has_infinite_width(self, schedule):
        assert schedule.federal_brackets[-1].width == float("inf")

    def test_known_municipality_multiplier(self, schedule):
        assert schedule.municipal_multiplier("Küsnacht") == 73
        assert schedule.known_municipality("Küsnacht")

    @pytest.mark.parametrize("name", ["Atlantis", "", None])
    def test_unknown_municipality_is_neutral(self, schedule, name):
        assert schedule.municipal_multiplier(name) == 100
        assert not schedule.known_municipality(name)

    def test_municipalities_merge_cantonal_list(self, schedule):
        merged = schedule.municipalities()
        assert merged["Winterthur"] == 125
        assert merged["Zurich City"] == 119

    def test_cantonal_list_entry_resolves_like_municipal_table(self, schedule):
        assert schedule.known_municipality("Winterthur")
        assert schedule.municipal_multiplier("Winterthur") == schedule.municipalities()["Winterthur"]

    def test_municipal_table_wins_over_cantonal_list(self, document):
        document["taxRates"]["cantonal"]["multipliers"].append(
            {"municipality": "Küsnacht", "multiplier": 90}
        )
        schedule = TaxSchedule.from_document(document)
        assert schedule.municipal_multiplier("Küsnacht") == 73
        assert schedule.municipalities()["Küsnacht"] == 73

    def test_schedule_is_immutable(self, schedule):
        with pytest.raises(Exception):
            schedule.deductions.standard = 0


class TestMalformedSchedule:
    def test_empty_brackets(self, document):
        document["taxRates"]["federal"] = []
        with pytest.raises(ScheduleError, match="empty"):
            TaxSchedule.from_document(document)

    def test_unsorted_brackets(self, document):
        federal = document["taxRates"]["federal"]
        federal[0], federal[1] = federal[1], federal[0]
        with pytest.raises(ScheduleError):
            TaxSchedule.from_document(document)

    def test_gap_between_brackets(self, document):
        document["taxRates"]["federal"][1]["lowerBound"] = 12_000
        with pytest.raises(ScheduleError, match="contiguous"):
            TaxSchedule.from_document(document)

    def test_open_ended_bracket_not_last(self, document):
        document["taxRates"]["federal"][1]["upperBound"] = None
        with pytest.raises(ScheduleError, match="open-ended"):
            TaxSchedule.from_document(document)

    def test_upper_not_above_lower(self, document):
        document["taxRates"]["federal"][1]["upperBound"] = 10_000
        with pytest.raises(ScheduleError):
            TaxSchedule.from_document(document)

    def test_negative_rate(self, document):
        document["taxRates"]["federal"][2]["rate"] = -1
        with pytest.raises(ScheduleError, match="non-negative"):
            TaxSchedule.from_document(document)

    def test_professional_fraction_out_of_range(self, document):
        document["deductions"]["professionalExpenses"] = 3
        with pytest.raises(ScheduleError, match="fraction"):
            TaxSchedule.from_document(document)

    def test_missing_deductions(self, document):
        del document["deductions"]
        with pytest.raises(ScheduleError):
            TaxSchedule.from_document(document)

    def test_missing_deduction_field(self, document):
        del document["deductions"]["thirdPillar"]
        with pytest.raises(ScheduleError):
            TaxSchedule.from_document(document)

    def test_negative_cantonal_list_multiplier(self, document):
        document["taxRates"]["cantonal"]["multipliers"][0]["multiplier"] = -5
        with pytest.raises(ScheduleError, match="Winterthur"):
            TaxSchedule.from_document(document)

    def test_unexpected_key_rejected(self, document):
        document["taxRates"]["cantonal"]["baseRates"] = 10
        with pytest.raises(ScheduleError):
            TaxSchedule.from_document(document)
