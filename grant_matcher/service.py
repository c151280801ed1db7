"""Matching service - ties a catalog provider to the matcher."""

import logging
import uuid
from datetime import datetime, timezone
from typing import List

from .catalog import BaseCatalogProvider
from .matcher import DEFAULT_WEIGHTS, ScoringWeights, find_matches
from .models import BusinessProfile, MatchRecord, MatchResult

logger = logging.getLogger(__name__)


class MatchingService:
    """Loads the full catalog for every request and ranks it for a profile."""

    def __init__(self, provider: BaseCatalogProvider, weights: ScoringWeights = DEFAULT_WEIGHTS):
        self.provider = provider
        self.weights = weights

    async def find_matches(self, profile: BusinessProfile) -> List[MatchResult]:
        """Rank the current catalog for a business profile.

        Raises:
            CatalogError: If the catalog cannot be loaded
        """
        programs = await self.provider.load_programs()
        matches = find_matches(profile, programs, self.weights)
        logger.info(f"Found {len(matches)} matching programs")
        return matches


def build_match_records(business_profile_id: str, results: List[MatchResult]) -> List[MatchRecord]:
    """Snapshot ranked results as records for a persistence collaborator.

    All records from one call share a creation timestamp.
    """
    created_at = datetime.now(timezone.utc)
    return [
        MatchRecord(
            id=str(uuid.uuid4()),
            business_profile_id=business_profile_id,
            grant_program_id=result.program_id,
            match_score=result.match_score,
            reasons=list(result.reasons),
            created_at=created_at,
        )
        for result in results
    ]
