"""Controller for the exchange rates feature."""
from typing import Any, Dict, Optional

import structlog
from fastapi import HTTPException

from api.features.rates.service import ExchangeRateService

logger = structlog.get_logger("currency.rates")


class ExchangeRateController:
    def __init__(self, exchange_rate_service: ExchangeRateService):
        self.exchange_rate_service = exchange_rate_service

    async def get_rates(self, base: Optional[str]) -> Dict[str, Any]:
        try:
            return await self.exchange_rate_service.resolve(base)
        except Exception:
            logger.exception("Unexpected error resolving exchange rates", base=base)
            raise HTTPException(status_code=500, detail="Failed to fetch exchange rates")
