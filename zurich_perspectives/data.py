"""Loading the static JSON documents behind every page."""

import json
from pathlib import Path

import streamlit as st
from pydantic import ValidationError

from zurich_perspectives.config import (
    DATA_DIR,
    ENGAGEMENT_DATA_FILE,
    INFLUENCE_DATA_FILE,
    PERSONAS_FILE,
    SPENDING_DATA_FILE,
    TAX_DATA_FILE,
)
from zurich_perspectives.logging_config import setup_logger
from zurich_perspectives.personas import Persona, parse_personas
from zurich_perspectives.schedule import ScheduleError, TaxSchedule

logger = setup_logger(__name__)


class DataError(RuntimeError):
    """Raised when a data document is missing, unreadable or malformed."""


@st.cache_data
def load_json(filename: str, data_dir: Path = DATA_DIR) -> dict:
    path = Path(data_dir) / filename
    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except FileNotFoundError as exc:
        raise DataError(f"Data file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise DataError(f"Data file {path} is not valid JSON: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise DataError(f"Data file {path} is not UTF-8 text: {exc}") from exc
    except OSError as exc:
        raise DataError(f"Data file {path} could not be read: {exc}") from exc

    logger.info(f"Loaded {path.name}")
    return document


@st.cache_data
def load_tax_schedule(data_dir: Path = DATA_DIR) -> TaxSchedule:
    """Parse and validate tax-data.json. Raises ScheduleError if unusable."""
    try:
        document = load_json(TAX_DATA_FILE, data_dir)
    except DataError as exc:
        raise ScheduleError(str(exc)) from exc
    schedule = TaxSchedule.from_document(document)
    logger.info(
        f"Tax schedule: {len(schedule.federal_brackets)} federal brackets, "
        f"cantonal base rate {schedule.cantonal_base_rate}%, "
        f"{len(schedule.municipalities())} municipalities"
    )
    return schedule


@st.cache_data
def load_personas(data_dir: Path = DATA_DIR) -> list[Persona]:
    """Parse personas.json. Raises DataError if it is missing or malformed."""
    document = load_json(PERSONAS_FILE, data_dir)
    try:
        return parse_personas(document)
    except ValidationError as exc:
        raise DataError(f"Invalid persona data in {PERSONAS_FILE}: {exc}") from exc


def load_spending_data(data_dir: Path = DATA_DIR) -> dict:
    return load_json(SPENDING_DATA_FILE, data_dir).get("governmentSpending", {})


def load_influence_data(data_dir: Path = DATA_DIR) -> dict:
    return load_json(INFLUENCE_DATA_FILE, data_dir).get("wealthInfluence", {})


def load_engagement_data(data_dir: Path = DATA_DIR) -> dict:
    return load_json(ENGAGEMENT_DATA_FILE, data_dir).get("voterEngagement", {})
