"""Exchange rate resolution: live provider with a static fallback.

One GET per request against exchangerate-api.com when an API key is
configured. Any failure is logged and answered with the fallback table, so
callers always get a snapshot.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
import structlog
from pydantic import SecretStr

from api.features.rates.fallback import fallback_snapshot
from api.shared.exceptions import ExternalServiceError
from api.shared.utils import normalize_currency_code

logger = structlog.get_logger("currency.rates")


class ExchangeRateService:
    """Resolve exchange rate snapshots for a base currency."""

    def __init__(
        self,
        api_key: SecretStr | str | None = None,
        base_url: str = "https://v6.exchangerate-api.com/v6",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if isinstance(api_key, SecretStr):
            api_key = api_key.get_secret_value()
        self.api_key = api_key or ""
        self.base_url = base_url.rstrip("/")
        self.transport = transport

    @property
    def is_live(self) -> bool:
        return bool(self.api_key)

    async def fetch_live(self, base_currency: str) -> Dict[str, Any]:
        """Single attempt against the provider; raises ExternalServiceError on failure."""
        url = f"{self.base_url}/{self.api_key}/latest/{base_currency}"
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                resp = await client.get(url)
                resp.raise_for_status()
                return resp.json()
        except httpx.HTTPStatusError as e:
            raise ExternalServiceError(
                "exchangerate-api",
                f"HTTP {e.response.status_code}",
                {"status_code": e.response.status_code},
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise ExternalServiceError("exchangerate-api", str(e)) from e

    async def resolve(self, base_currency: Optional[str] = "USD") -> Dict[str, Any]:
        base = normalize_currency_code(base_currency)

        if not self.is_live:
            logger.debug("No exchange rate API key configured, serving fallback", base=base)
            return fallback_snapshot(base).model_dump()

        try:
            return await self.fetch_live(base)
        except ExternalServiceError as e:
            logger.error("Error fetching exchange rates", base=base, error=e.message)
            return fallback_snapshot(base).model_dump()
