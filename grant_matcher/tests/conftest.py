"""Pytest configuration and fixtures."""

import pytest

from grant_matcher.models import BusinessProfile, GrantProgram


def make_program(program_id: str, **kwargs) -> GrantProgram:
    """Build a GrantProgram with nothing eligible unless overridden."""
    fields = {
        "id": program_id,
        "name": kwargs.pop("name", f"Program {program_id}"),
        "industry": [],
        "business_stage": [],
        "funding_purpose": [],
    }
    fields.update(kwargs)
    return GrantProgram(**fields)


def make_profile(**kwargs) -> BusinessProfile:
    """Build the reference startup profile, with overrides."""
    fields = {
        "industry": "Technology & IT",
        "stage": "Startup (0-2 years)",
        "employees": "1-5",
        "revenue": "300k-3m",
        "funding_purpose": ["Digital Transformation"],
        "location": "Selangor",
    }
    fields.update(kwargs)
    return BusinessProfile(**fields)


@pytest.fixture
def startup_profile():
    """Technology startup, 1-5 staff, RM300k-3m revenue, digitalising."""
    return make_profile()


@pytest.fixture
def full_match_program():
    """Program that satisfies every criterion for startup_profile."""
    return make_program(
        "full-match",
        industry=["Technology & IT", "Manufacturing"],
        business_stage=["Startup (0-2 years)", "Early Growth (2-5 years)"],
        funding_purpose=["Digital Transformation", "Equipment Purchase", "Working Capital"],
        min_revenue="300k-3m",
        max_revenue="3m-20m",
        min_employees="1-5",
        max_employees="76-200",
    )


@pytest.fixture
def no_match_program():
    """Program that satisfies no criterion for startup_profile."""
    return make_program(
        "no-match",
        industry=["Agriculture"],
        business_stage=["Established Enterprise"],
        funding_purpose=["Export Development"],
        min_revenue="20m-50m",
        max_revenue="50m+",
        min_employees="76-200",
        max_employees="200+",
    )


@pytest.fixture
def catalog_payload():
    """Catalog records as served by the catalog API (camelCase keys)."""
    return [
        {
            "id": "prog-001",
            "name": "SME Digitalization Grant",
            "provider": "MDEC",
            "type": "Government Grant",
            "fundingAmount": "Up to RM 50,000",
            "industry": ["Technology & IT", "Manufacturing"],
            "businessStage": ["Startup (0-2 years)"],
            "fundingPurpose": ["Digital Transformation"],
            "minRevenue": "300k-3m",
            "maxRevenue": "3m-20m",
            "minEmployees": "1-5",
            "maxEmployees": "76-200",
        },
        {
            "id": "prog-002",
            "name": "Agri Export Scheme",
            "provider": "Ministry of Agriculture",
            "industry": ["Agriculture"],
            "businessStage": ["Expansion (5+ years)"],
            "fundingPurpose": ["Export Development"],
            "minRevenue": "20m-50m",
            "minEmployees": "200+",
        },
    ]
