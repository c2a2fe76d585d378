"""
Demo fixtures for seeding the in-memory state.

Edit the JSON files to update demo data:
- students.json: Verified students shown to donors on startup
"""

import json
from pathlib import Path

FIXTURES_DIR = Path(__file__).parent


def load_students() -> list[dict]:
    """Load demo students from JSON file."""
    with open(FIXTURES_DIR / "students.json", "r", encoding="utf-8") as f:
        return json.load(f)
