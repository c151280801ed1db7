"""HTTP catalog provider - GET a JSON program list from a catalog service."""

import logging
import time
from typing import Any, List, Optional

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from ..models import GrantProgram
from .base import BaseCatalogProvider, normalize_programs, unwrap_records

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


def _is_retryable(exc: BaseException) -> bool:
    """Transport failures, 429 and 5xx responses are worth another attempt."""
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        return status == 429 or status >= 500
    return isinstance(exc, httpx.TransportError)


class HttpCatalogProvider(BaseCatalogProvider):
    """Fetches the program catalog from an HTTP endpoint.

    The endpoint returns either a bare JSON list of programs or the
    {"success": bool, "data": [...], "error": str} envelope used by the
    catalog API. Transport errors, 429 and 5xx responses are retried
    with exponential backoff; other 4xx responses fail on the first attempt.
    """

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        max_attempts: int = 3,
        wait: Optional[wait_base] = None,
    ):
        """Initialize provider.

        Args:
            url: Catalog endpoint URL
            timeout: Read timeout in seconds
            max_attempts: Total attempts before giving up
            wait: Tenacity wait strategy between attempts
        """
        self.url = url
        self.timeout = httpx.Timeout(timeout, connect=min(timeout, 10.0))
        self.max_attempts = max_attempts
        self.wait = wait or wait_exponential(multiplier=1, min=1, max=10)

    @property
    def source_name(self) -> str:
        return "http"

    async def fetch_programs(self) -> List[GrantProgram]:
        payload = None
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=self.wait,
            retry=retry_if_exception(_is_retryable),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                payload = await self._get_payload()

        records = unwrap_records(payload, self.source_name)
        programs = normalize_programs(records, self.source_name)
        logger.info(f"Normalized {len(programs)} of {len(records)} programs from {self.source_name}")
        return programs

    async def _get_payload(self) -> Any:
        start = time.monotonic()
        status_code = None

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.url, headers={"Accept": "application/json"})
                status_code = response.status_code
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            duration = time.monotonic() - start
            logger.error(
                f"[{self.source_name}] url={self.url} status={status_code or 'error'} "
                f"duration={duration:.2f}s result=failure error='{e}'"
            )
            raise

        duration = time.monotonic() - start
        logger.info(
            f"[{self.source_name}] url={self.url} status={status_code} "
            f"duration={duration:.2f}s result=success"
        )
        return data
