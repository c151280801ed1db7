"""Shared Pydantic models for grant matching - contract between matcher and collaborators."""

from .business_profile import BusinessProfile
from .grant_program import GrantProgram
from .match_result import MatchResult, MatchRecord, ProgramScore

__all__ = [
    "BusinessProfile",
    "GrantProgram",
    "MatchResult",
    "MatchRecord",
    "ProgramScore",
]
