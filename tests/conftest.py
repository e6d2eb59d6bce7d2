"""Pytest configuration to make the project root importable.

This ensures that ``import apps`` and ``import core`` work when tests are run
from the repository root or other locations.
"""

import os
import sys

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


HEADER = "soup_name,difficulty,ingredients,cook_time_minutes,instructions,source"


def csv_row(name, difficulty="Easy", ingredients="water, salt", minutes="30",
            instructions="Boil. Simmer.", source="Test"):
    return f'{name},{difficulty},"{ingredients}",{minutes},"{instructions}",{source}'


@pytest.fixture
def sample_csv(tmp_path):
    rows = [
        HEADER,
        csv_row("Herbal Chicken Soup", "Medium", "chicken, goji berries", "45", "1) Rinse herbs. 2) Simmer."),
        csv_row("Hot and Sour Soup"),
        csv_row("ABC Soup", "Easy", "pork ribs, corn, carrots", "90", "1) Boil. 2) Simmer."),
        csv_row("Watercress Soup", "easy", "watercress, pork ribs", "120", "Blanch ribs. Add watercress. Simmer"),
    ]
    path = tmp_path / "soups.csv"
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path
