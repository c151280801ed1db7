"""Weighted rule-based matcher for business profiles and grant programs."""

from .engine import score_program, find_matches
from .weights import DEFAULT_WEIGHTS, load_weights, ScoringWeights
from .buckets import EMPLOYEE_BUCKETS, REVENUE_BUCKETS, is_in_range, representative_value

__all__ = [
    "score_program",
    "find_matches",
    "DEFAULT_WEIGHTS",
    "load_weights",
    "ScoringWeights",
    "EMPLOYEE_BUCKETS",
    "REVENUE_BUCKETS",
    "is_in_range",
    "representative_value",
]
