"""Rule-based matching engine for business profiles and grant programs.

Implements five-criterion weighted scoring with explainable reasons.
"""

import logging
import math
from typing import Iterable, List
from ..models import BusinessProfile, GrantProgram, MatchResult, ProgramScore
from .buckets import is_employee_count_in_range, is_revenue_in_range
from .weights import DEFAULT_WEIGHTS, ScoringWeights

logger = logging.getLogger(__name__)


def score_program(
    profile: BusinessProfile,
    program: GrantProgram,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> ProgramScore:
    """Score a grant program against a business profile.

    Criteria (default points):
    1. Industry (40): program lists the profile's industry
    2. Business stage (25): program lists the profile's stage
    3. Funding purpose (20): share of the profile's purposes the program funds
    4. Revenue range (10): revenue bucket within the program's bounds
    5. Employee range (5): employee bucket within the program's bounds

    Args:
        profile: Business profile to match
        program: Catalog program to score
        weights: Points per criterion

    Returns:
        ProgramScore with the rounded total and one reason per criterion
        that contributed points
    """

    score = 0.0
    reasons: List[str] = []

    if weights.industry > 0 and profile.industry in program.industry:
        score += weights.industry
        reasons.append(f"Industry match: {profile.industry}")

    if weights.business_stage > 0 and profile.stage in program.business_stage:
        score += weights.business_stage
        reasons.append(f"Business stage match: {profile.stage}")

    # An empty purpose list contributes nothing rather than dividing by zero
    wanted = profile.funding_purpose
    if wanted:
        fundable = set(program.funding_purpose)
        overlap = sum(1 for purpose in wanted if purpose in fundable)
        purpose_score = weights.funding_purpose * overlap / len(wanted)
        if purpose_score > 0:
            score += purpose_score
            reasons.append(f"Funding purpose match: {overlap}/{len(wanted)} purposes")

    if weights.revenue > 0 and is_revenue_in_range(
        profile.revenue, program.min_revenue, program.max_revenue
    ):
        score += weights.revenue
        reasons.append(f"Revenue range match: {profile.revenue}")

    if weights.employees > 0 and is_employee_count_in_range(
        profile.employees, program.min_employees, program.max_employees
    ):
        score += weights.employees
        reasons.append(f"Employee count match: {profile.employees}")

    return ProgramScore(score=_round_half_up(score), reasons=reasons)


def find_matches(
    profile: BusinessProfile,
    catalog: Iterable[GrantProgram],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> List[MatchResult]:
    """Rank catalog programs for a business profile.

    Programs scoring 0 are dropped. The rest are ordered by score,
    highest first; equal scores keep catalog order.

    Args:
        profile: Business profile to match
        catalog: Complete set of programs to consider
        weights: Points per criterion

    Returns:
        Ranked MatchResult list, possibly empty
    """

    matches: List[MatchResult] = []
    scored = 0

    for program in catalog:
        scored += 1
        result = score_program(profile, program, weights)
        logger.debug(
            "scored program=%s score=%d criteria=%d",
            program.id,
            result.score,
            len(result.reasons),
        )
        if result.score > 0:
            matches.append(
                MatchResult(program=program, match_score=result.score, reasons=result.reasons)
            )

    # sorted() is stable, so ties stay in catalog order
    ranked = sorted(matches, key=lambda m: m.match_score, reverse=True)

    logger.info(f"Matching: {len(ranked)} of {scored} programs matched")
    return ranked


def _round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up, clamped to 0-100."""
    return max(0, min(100, math.floor(value + 0.5)))
