import pytest

from zurich_perspectives.schedule import TaxSchedule

SIMPLE_DOCUMENT = {
    "taxRates": {
        "federal": [
            {"lowerBound": 0, "upperBound": 10000, "rate": 0},
            {"lowerBound": 10000, "upperBound": 50000, "rate": 2},
            {"lowerBound": 50000, "upperBound": None, "rate": 4},
        ],
        "cantonal": {
            "baseRate": 50,
            "multipliers": [{"municipality": "Winterthur", "multiplier": 125}],
        },
        "municipal": {"Zurich City": 119, "Schlieren": 111, "Küsnacht": 73},
    },
    "deductions": {
        "standard": 2600,
        "professionalExpenses": 0.03,
        "maxProfessionalExpenses": 4000,
        "healthInsurance": 1700,
        "thirdPillar": 6800,
    },
}


@pytest.fixture
def document():
    """A fresh copy of the hand-checkable schedule document."""
    import copy
    return copy.deepcopy(SIMPLE_DOCUMENT)


@pytest.fixture
def schedule(document):
    return TaxSchedule.from_document(document)


@pytest.fixture(scope="session")
def personas():
    """The personas shipped in zurich_perspectives/data/personas.json."""
    from zurich_perspectives.data import load_personas
    return load_personas()
