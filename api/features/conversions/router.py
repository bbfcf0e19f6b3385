"""Router for the Conversions feature."""
from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.features.conversions.controller import ConversionController
from api.features.conversions.dtos import (
    ConversionDTO,
    ConversionPage,
    CreateConversionRequest,
)
from api.shared.db import get_db_session
from di.container import ApplicationContainer as DependencyContainer

router = APIRouter()


@router.post("/conversions", response_model=ConversionDTO, status_code=status.HTTP_201_CREATED)
@inject
async def create_conversion(
    request: CreateConversionRequest,
    controller: ConversionController = Depends(
        Provide[DependencyContainer.controllers.conversion_controller]
    ),
    db_session: AsyncSession = Depends(get_db_session),
):
    return await controller.create_conversion(request, db_session)


@router.get("/conversions", response_model=ConversionPage)
@inject
async def list_conversions(
    user_id: Optional[str] = Query(None, alias="userId"),
    page: Optional[str] = Query(None),
    page_size: Optional[str] = Query(None, alias="pageSize"),
    controller: ConversionController = Depends(
        Provide[DependencyContainer.controllers.conversion_controller]
    ),
    db_session: AsyncSession = Depends(get_db_session),
):
    """List a user's conversions, newest first.

    Query values are coerced leniently: unparseable ``page``/``pageSize`` fall
    back to 1 and 10.
    """
    return await controller.list_conversions(user_id, page, page_size, db_session)
