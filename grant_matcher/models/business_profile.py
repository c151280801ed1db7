"""BusinessProfile - Input model describing the business being matched."""

from typing import Optional
from pydantic import BaseModel, Field, field_validator


class BusinessProfile(BaseModel):
    """Business profile as collected by the questionnaire.

    Industry, stage, employees, revenue and funding_purpose are scored.
    Location is collected but no criterion reads it yet. The remaining
    fields are carried for callers.
    """

    # Matching fields
    industry: str = Field(..., description="Industry, e.g. 'Technology & IT'")
    stage: str = Field(..., description="Lifecycle stage, e.g. 'Startup (0-2 years)'")
    employees: str = Field(..., description="Employee bucket label: 1-5, 6-30, 31-75, 76-200, 200+")
    revenue: str = Field(..., description="Revenue bucket label: <300k, 300k-3m, 3m-20m, 20m-50m, 50m+")
    funding_purpose: list[str] = Field(
        default_factory=list,
        alias="fundingPurpose",
        description="Purposes the funding is needed for",
    )
    location: str = Field(default="", description="State or region")

    # Descriptive fields, ignored by the matcher
    id: Optional[str] = Field(None, description="Profile identifier")
    company_name: Optional[str] = Field(None, alias="companyName")
    registration_number: Optional[str] = Field(None, alias="registrationNumber")
    established_year: Optional[str] = Field(None, alias="establishedYear")
    business_model: Optional[str] = Field(None, alias="businessModel")
    funding_amount: Optional[str] = Field(None, alias="fundingAmount")
    timeline: Optional[str] = Field(None, description="When funding is needed")
    description: Optional[str] = Field(None, description="Free-text business description")
    challenges: Optional[str] = Field(None, description="Current business challenges")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "industry": "Technology & IT",
                "stage": "Startup (0-2 years)",
                "employees": "1-5",
                "revenue": "300k-3m",
                "fundingPurpose": ["Digital Transformation"],
                "location": "Selangor",
                "companyName": "Acme Sdn Bhd",
            }
        },
    }

    @field_validator("funding_purpose")
    @classmethod
    def unique_purposes(cls, v: list[str]) -> list[str]:
        """Collapse duplicate purposes, keeping first occurrence order."""
        return list(dict.fromkeys(v))
