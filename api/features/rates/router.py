"""Router for the exchange rates feature."""
from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query

from api.features.rates.controller import ExchangeRateController
from di.container import ApplicationContainer as DependencyContainer

router = APIRouter()


# No response_model: live provider payloads are passed through untouched
@router.get("/exchange-rates")
@inject
async def get_exchange_rates(
    base: Optional[str] = Query("USD", description="Base currency code"),
    controller: ExchangeRateController = Depends(
        Provide[DependencyContainer.controllers.exchange_rate_controller]
    ),
):
    """Return ``{base_code, conversion_rates, time_last_update_utc}`` for ``base``."""
    return await controller.get_rates(base)
