"""Base provider interface for grant program catalogs."""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError

from ..models import GrantProgram

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when a catalog cannot be loaded completely."""


class BaseCatalogProvider(ABC):
    """Abstract base class for grant program catalog providers."""

    @abstractmethod
    async def fetch_programs(self) -> List[GrantProgram]:
        """Fetch every program known to this source.

        Returns:
            List of GrantProgram records in source order.
        """
        pass

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Source identifier (memory, file, http)."""
        pass

    async def load_programs(self) -> List[GrantProgram]:
        """Fetch the complete catalog with timing and error translation.

        This is the entry point callers should use. Failures are logged and
        re-raised as CatalogError so that callers never score a partial
        catalog.
        """
        start = time.monotonic()
        try:
            results = await self.fetch_programs()
        except Exception as exc:
            duration_ms = (time.monotonic() - start) * 1000
            logger.error(
                "catalog_load source=%s result=failure error=%s duration_ms=%.0f",
                self.source_name,
                exc,
                duration_ms,
            )
            if isinstance(exc, CatalogError):
                raise
            raise CatalogError(f"[{self.source_name}] catalog unavailable: {exc}") from exc

        duration_ms = (time.monotonic() - start) * 1000
        logger.info(
            "catalog_load source=%s result=success count=%d duration_ms=%.0f",
            self.source_name,
            len(results),
            duration_ms,
        )
        return results


def normalize_programs(records: Iterable[Any], source_name: str) -> List[GrantProgram]:
    """Validate raw catalog records, skipping the ones that don't parse.

    Args:
        records: Raw dicts from a file or HTTP payload
        source_name: Source identifier for log lines

    Returns:
        Valid GrantProgram records in input order
    """
    programs = []
    for index, record in enumerate(records):
        program = _normalize_program(record, index, source_name)
        if program:
            programs.append(program)
    return programs


def unwrap_records(payload: Any, source_name: str) -> list:
    """Extract the program list from a catalog payload.

    Accepts a bare list, or an object carrying the list under "programs" or
    "data". An envelope with "success": false is treated as a failure.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        if payload.get("success") is False:
            raise CatalogError(
                f"[{source_name}] catalog request failed: {payload.get('error', 'unknown error')}"
            )
        for key in ("programs", "data"):
            if isinstance(payload.get(key), list):
                return payload[key]
    raise CatalogError(f"[{source_name}] unrecognized catalog payload: {type(payload).__name__}")


def _normalize_program(record: Any, index: int, source_name: str) -> Optional[GrantProgram]:
    if not isinstance(record, dict):
        logger.warning(f"[{source_name}] record {index} is not an object, skipping")
        return None
    try:
        return GrantProgram.model_validate(record)
    except ValidationError as e:
        logger.warning(f"[{source_name}] record {index} ({record.get('id', '?')}) invalid, skipping: {e}")
        return None
