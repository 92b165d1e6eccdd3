"""Paths, constants and environment-driven settings."""

import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).parent

DATA_DIR = Path(os.getenv("ZURICH_PERSPECTIVES_DATA_DIR", PACKAGE_DIR / "data"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

APP_TITLE = "Zurich Perspectives"
APP_SUBTITLE = "Economy, Equity, and Influence"

# ---------------------------------------------------------------------------
# Tax rules
# ---------------------------------------------------------------------------

# Third pillar (3a) contributions are assumed only above this gross income
THIRD_PILLAR_THRESHOLD = 80_000

# Applied when a municipality is missing from the multiplier table
DEFAULT_MUNICIPAL_MULTIPLIER = 100.0

# Effective rate thresholds (%) for the burden wording
BURDEN_SIGNIFICANT_ABOVE = 15
BURDEN_MODERATE_ABOVE = 10

# ---------------------------------------------------------------------------
# Data files
# ---------------------------------------------------------------------------

PERSONAS_FILE = "personas.json"
TAX_DATA_FILE = "tax-data.json"
SPENDING_DATA_FILE = "spending-data.json"
INFLUENCE_DATA_FILE = "influence-data.json"
ENGAGEMENT_DATA_FILE = "engagement-data.json"

# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------

PERSONA_QUERY_PARAM = "persona"

# (page path, label) in reading order
SECTION_PAGES = [
    ("pages/2_Taxation.py", "Taxation"),
    ("pages/3_Public_Spending.py", "Public Spending"),
    ("pages/4_Political_Influence.py", "Political Influence"),
    ("pages/5_Voter_Engagement.py", "Voter Engagement"),
    ("pages/6_Synthesis.py", "Synthesis"),
]
PROFILE_PAGE = "pages/1_Profile.py"
HOME_PAGE = "app.py"

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------

COLOR_NAVY = "#1D3557"
COLOR_BLUE = "#457B9D"
COLOR_LIGHT_BLUE = "#A8DADC"
COLOR_RED = "#E63946"
COLOR_CREAM = "#F1FAEE"
