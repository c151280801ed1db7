"""GrantProgram - Catalog record for a funding program."""

from typing import Optional
from pydantic import BaseModel, Field


class GrantProgram(BaseModel):
    """Funding program from the catalog.

    The matcher reads industry, business_stage, funding_purpose and the
    revenue/employee bounds. Everything else is presentation metadata and
    passes through untouched.
    """

    id: str = Field(..., description="Unique program identifier")

    # Eligibility attributes used for matching
    industry: list[str] = Field(default_factory=list, description="Eligible industries")
    business_stage: list[str] = Field(
        default_factory=list, alias="businessStage", description="Eligible lifecycle stages"
    )
    funding_purpose: list[str] = Field(
        default_factory=list, alias="fundingPurpose", description="Fundable purposes"
    )
    min_revenue: Optional[str] = Field(None, alias="minRevenue", description="Revenue floor bucket")
    max_revenue: Optional[str] = Field(None, alias="maxRevenue", description="Revenue ceiling bucket")
    min_employees: Optional[str] = Field(None, alias="minEmployees", description="Employee floor bucket")
    max_employees: Optional[str] = Field(None, alias="maxEmployees", description="Employee ceiling bucket")

    # Presentation metadata
    name: str = Field(default="", description="Program name")
    provider: str = Field(default="", description="Administering agency or bank")
    type: Optional[str] = Field(
        None, description="Government Grant, Bank Financing, Special Scheme, Private Funding"
    )
    funding_amount: Optional[str] = Field(None, alias="fundingAmount")
    description: Optional[str] = Field(None)
    eligibility: list[str] = Field(default_factory=list, description="Eligibility statements")
    benefits: list[str] = Field(default_factory=list, description="Program benefits")
    application_link: Optional[str] = Field(None, alias="applicationLink")
    deadline: Optional[str] = Field(None)
    processing_time: Optional[str] = Field(None, alias="processingTime")
    status: Optional[str] = Field(None)
    location: list[str] = Field(default_factory=list, description="Regions served")
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")

    model_config = {"frozen": True, "populate_by_name": True}
