"""Scoring weight configuration.

Weights are expressed in points and must total 100 so that a program
satisfying every criterion scores exactly 100.
"""

import json
import yaml
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, field_validator


class ScoringWeights(BaseModel):
    """Points awarded per matching criterion."""

    industry: float = 40
    business_stage: float = 25
    funding_purpose: float = 20
    revenue: float = 10
    employees: float = 5
    version: str = "1.0"

    model_config = {"frozen": True}

    @field_validator('industry', 'business_stage', 'funding_purpose', 'revenue', 'employees')
    @classmethod
    def non_negative(cls, v: float) -> float:
        """Ensure weights are not negative."""
        if v < 0:
            raise ValueError(f"Weight must be non-negative, got {v}")
        return v

    def model_post_init(self, __context) -> None:
        """Validate that weights sum to 100."""
        total = self.total()

        if abs(total - 100.0) > 0.001:
            raise ValueError(
                f"Weights must sum to 100, got {total:.3f}. "
                f"(I:{self.industry}, S:{self.business_stage}, "
                f"FP:{self.funding_purpose}, R:{self.revenue}, E:{self.employees})"
            )

    def total(self) -> float:
        return (
            self.industry +
            self.business_stage +
            self.funding_purpose +
            self.revenue +
            self.employees
        )


DEFAULT_WEIGHTS = ScoringWeights(
    industry=40,
    business_stage=25,
    funding_purpose=20,
    revenue=10,
    employees=5,
    version="1.0"
)


def load_weights(filepath: Optional[str] = None) -> ScoringWeights:
    """Load scoring weights from file or return defaults.

    Supports JSON and YAML formats.

    Args:
        filepath: Optional path to weights configuration file

    Returns:
        ScoringWeights instance

    Raises:
        FileNotFoundError: If filepath provided but doesn't exist
        ValueError: If the format is unsupported or weights are invalid
    """

    if not filepath:
        return DEFAULT_WEIGHTS

    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Weights file not found: {filepath}")

    if path.suffix == '.json':
        with open(path, 'r') as f:
            data = json.load(f)
    elif path.suffix in ['.yaml', '.yml']:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}. Use .json, .yaml, or .yml")

    return ScoringWeights(**(data or {}))
