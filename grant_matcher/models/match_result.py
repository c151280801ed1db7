"""MatchResult and MatchRecord - Matcher output models."""

from datetime import datetime, timezone
from pydantic import BaseModel, Field

from .grant_program import GrantProgram


class ProgramScore(BaseModel):
    """Score of one program against one profile, before ranking."""

    score: int = Field(..., ge=0, le=100, description="Rounded weighted score")
    reasons: list[str] = Field(default_factory=list, description="Satisfied criteria in evaluation order")


class MatchResult(BaseModel):
    """A ranked program with its score and the reasons behind it."""

    program: GrantProgram = Field(..., description="Matched catalog program")
    match_score: int = Field(..., ge=0, le=100, description="Weighted match score 0-100")
    reasons: list[str] = Field(default_factory=list, description="One entry per satisfied criterion")

    model_config = {"frozen": True}

    @property
    def program_id(self) -> str:
        return self.program.id


class MatchRecord(BaseModel):
    """Persistable snapshot of a MatchResult for one business profile."""

    id: str = Field(..., description="Record identifier (uuid4)")
    business_profile_id: str = Field(..., description="Links to BusinessProfile.id")
    grant_program_id: str = Field(..., description="Links to GrantProgram.id")
    match_score: int = Field(..., ge=0, le=100)
    reasons: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
