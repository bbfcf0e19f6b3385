"""Controller for the Conversions feature."""
from typing import Any, Optional

import structlog
from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from api.features.conversions.dtos import (
    ConversionDTO,
    ConversionPage,
    CreateConversionRequest,
)
from api.features.conversions.service import ConversionService
from api.shared.dtos import MAX_PAGE, MAX_PAGE_SIZE, PaginationRequest
from api.shared.utils import int_or_default, parse_int

logger = structlog.get_logger("currency.conversions")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


class ConversionController:
    """Controller for saving and listing conversions."""

    def __init__(self, conversion_service: ConversionService):
        self.conversion_service = conversion_service

    async def create_conversion(
        self, request: CreateConversionRequest, db_session: AsyncSession
    ) -> ConversionDTO:
        try:
            conversion = await self.conversion_service.save_conversion(request, db_session)
            return ConversionDTO.model_validate(conversion)
        except Exception:
            logger.exception("Unexpected error saving conversion", user_id=request.user_id)
            raise HTTPException(status_code=500, detail="Failed to save conversion")

    async def list_conversions(
        self,
        user_id: Optional[Any],
        page: Optional[Any],
        page_size: Optional[Any],
        db_session: AsyncSession,
    ) -> ConversionPage:
        parsed_user_id = parse_int(user_id)
        if parsed_user_id is None:
            raise HTTPException(status_code=400, detail="userId must be an integer")

        pagination = PaginationRequest(
            page=int_or_default(page, DEFAULT_PAGE, maximum=MAX_PAGE),
            page_size=int_or_default(page_size, DEFAULT_PAGE_SIZE, maximum=MAX_PAGE_SIZE),
        )
        try:
            return await self.conversion_service.get_conversions(
                parsed_user_id, pagination, db_session
            )
        except Exception:
            logger.exception("Unexpected error listing conversions", user_id=parsed_user_id)
            raise HTTPException(status_code=500, detail="Failed to fetch conversions")
