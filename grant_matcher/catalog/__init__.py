"""Catalog providers for grant programs."""

from .base import BaseCatalogProvider, CatalogError
from .file_catalog import FileCatalogProvider
from .http_catalog import HttpCatalogProvider
from .memory import InMemoryCatalogProvider, SEED_PROGRAMS
from .queries import (
    find_by_business_stage,
    find_by_funding_purpose,
    find_by_industry,
    get_program_by_id,
)

__all__ = [
    "BaseCatalogProvider",
    "CatalogError",
    "FileCatalogProvider",
    "HttpCatalogProvider",
    "InMemoryCatalogProvider",
    "SEED_PROGRAMS",
    "find_by_business_stage",
    "find_by_funding_purpose",
    "find_by_industry",
    "get_program_by_id",
]
