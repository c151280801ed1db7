"""Integration test fixtures and mock infrastructure."""

import json
from pathlib import Path
from typing import Dict, List

import pytest

from grant_matcher.models import MatchRecord

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class MockMatchStore:
    """In-memory stand-in for the match history store."""

    def __init__(self):
        self.records: List[MatchRecord] = []

    async def save_matches(self, records: List[MatchRecord]) -> int:
        self.records.extend(records)
        return len(records)

    async def get_matches_by_business_profile(self, business_profile_id: str) -> List[MatchRecord]:
        return [r for r in self.records if r.business_profile_id == business_profile_id]

    async def get_matches_by_grant_program(self, grant_program_id: str) -> List[MatchRecord]:
        return [r for r in self.records if r.grant_program_id == grant_program_id]


@pytest.fixture
def match_store():
    return MockMatchStore()


def _load_json(name: str):
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def catalog_snapshot() -> Dict:
    return _load_json("catalog_snapshot.json")


@pytest.fixture
def profiles_snapshot() -> Dict:
    return _load_json("profiles_snapshot.json")
