"""In-memory catalog provider and the default seed catalog."""

from typing import Iterable, List, Optional

from ..models import GrantProgram
from .base import BaseCatalogProvider


SEED_PROGRAMS: tuple[GrantProgram, ...] = (
    GrantProgram(
        id="sme-digitalization-grant",
        name="SME Digitalization Grant",
        provider="Malaysia Digital Economy Corporation (MDEC)",
        type="Government Grant",
        funding_amount="Up to RM 50,000",
        description=(
            "Funding to help SMEs adopt digital technologies and improve operational "
            "efficiency through digitalization initiatives."
        ),
        eligibility=[
            "Malaysian-owned SME with at least 51% local shareholding",
            "Annual sales turnover between RM 300,000 to RM 20 million",
            "Valid SSM registration",
            "Minimum 1 year in operation",
        ],
        benefits=[
            "Up to 70% co-funding for digital adoption",
            "Technical consultation and support",
            "Access to certified digital solution providers",
            "Post-implementation monitoring and support",
        ],
        application_link="https://www.mdec.my/what-we-offer/grants-programs/sme-digitalization-grant/",
        deadline="31 December 2024",
        processing_time="8-12 weeks",
        status="Open for Applications",
        industry=[
            "Technology & IT", "Manufacturing", "Retail & E-commerce",
            "Food & Beverage", "Healthcare", "Education",
        ],
        business_stage=["Startup (0-2 years)", "Early Growth (2-5 years)", "Expansion (5+ years)"],
        funding_purpose=["Digital Transformation", "Equipment Purchase", "Working Capital"],
        min_revenue="300k-3m",
        max_revenue="3m-20m",
        min_employees="1-5",
        max_employees="76-200",
        location=["Kuala Lumpur", "Selangor", "Penang", "Johor"],
    ),
    GrantProgram(
        id="sme-bank-micro-financing",
        name="SME Bank Micro Financing Scheme",
        provider="SME Bank",
        type="Bank Financing",
        funding_amount="RM 5,000 - RM 50,000",
        description=(
            "Micro financing scheme designed to provide easy access to funding for "
            "micro enterprises and small businesses."
        ),
        eligibility=[
            "Malaysian citizen aged 18 and above",
            "Valid business registration (SSM/Local Council)",
            "Business operational for at least 6 months",
            "Good credit standing",
        ],
        benefits=[
            "Competitive profit rates starting from 6% per annum",
            "Flexible repayment period up to 5 years",
            "Minimal documentation required",
            "Quick approval process",
        ],
        application_link="https://www.smebank.com.my/financing/micro-financing",
        deadline="Ongoing",
        processing_time="2-4 weeks",
        status="Always Available",
        industry=[
            "Technology & IT", "Manufacturing", "Retail & E-commerce", "Food & Beverage",
            "Healthcare", "Education", "Agriculture", "Construction",
        ],
        business_stage=["Idea Stage", "Startup (0-2 years)", "Early Growth (2-5 years)"],
        funding_purpose=["Working Capital", "Equipment Purchase", "Market Expansion"],
        min_revenue="<300k",
        max_revenue="300k-3m",
        min_employees="1-5",
        max_employees="6-30",
    ),
    GrantProgram(
        id="bumiputera-entrepreneur-development",
        name="Bumiputera Entrepreneur Development Scheme",
        provider="SME Corporation Malaysia",
        type="Special Scheme",
        funding_amount="Up to RM 500,000",
        description=(
            "Comprehensive development program for Bumiputera entrepreneurs including "
            "funding, training, and business development support."
        ),
        eligibility=[
            "100% Bumiputera-owned business",
            "SME classification based on SME Corp definition",
            "Business plan and feasibility study required",
            "Attended entrepreneur development program",
        ],
        benefits=[
            "Soft loan with subsidized interest rate",
            "Business advisory and mentoring services",
            "Market linkage opportunities",
            "Capacity building programs",
        ],
        application_link="https://www.smecorp.gov.my/index.php/en/programmes/financial-assistance",
        deadline="Quarterly intake",
        processing_time="12-16 weeks",
        status="Next Intake: Q1 2024",
        industry=[
            "Technology & IT", "Manufacturing", "Retail & E-commerce", "Food & Beverage",
            "Healthcare", "Education", "Agriculture", "Construction", "Financial Services",
        ],
        business_stage=["Startup (0-2 years)", "Early Growth (2-5 years)", "Expansion (5+ years)"],
        funding_purpose=[
            "Research & Development", "Equipment Purchase", "Working Capital",
            "Market Expansion", "Digital Transformation",
        ],
        min_revenue="300k-3m",
        max_revenue="3m-20m",
        min_employees="6-30",
        max_employees="76-200",
    ),
)


class InMemoryCatalogProvider(BaseCatalogProvider):
    """Serves a fixed list of programs. Defaults to the seed catalog."""

    def __init__(self, programs: Optional[Iterable[GrantProgram]] = None):
        self._programs = list(SEED_PROGRAMS if programs is None else programs)

    @property
    def source_name(self) -> str:
        return "memory"

    async def fetch_programs(self) -> List[GrantProgram]:
        return list(self._programs)
