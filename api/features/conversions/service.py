"""Service layer for the Conversions feature."""
import math

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from api.features.conversions.dtos import (
    ConversionDTO,
    ConversionPage,
    CreateConversionRequest,
)
from api.features.conversions.entities.conversion import Conversion
from api.features.conversions.repository import ConversionRepository
from api.shared.dtos import PaginationRequest
from api.shared.exceptions import DatabaseError

logger = structlog.get_logger("currency.conversions.service")


class ConversionService:
    """Persists conversions and pages through a user's history."""

    async def save_conversion(
        self, request: CreateConversionRequest, db_session: AsyncSession
    ) -> Conversion:
        repository = ConversionRepository(db_session)
        try:
            conversion = await repository.save_conversion(
                Conversion(
                    user_id=request.user_id,
                    from_currency=request.from_currency,
                    to_currency=request.to_currency,
                    amount=request.amount,
                    result=request.result,
                    rate=request.rate,
                )
            )
            await db_session.commit()
        except SQLAlchemyError as e:
            await db_session.rollback()
            raise DatabaseError("Failed to save conversion", {"user_id": request.user_id}) from e

        logger.info("Conversion saved", conversion_id=conversion.id, user_id=conversion.user_id)
        return conversion

    async def get_conversions(
        self, user_id: int, pagination: PaginationRequest, db_session: AsyncSession
    ) -> ConversionPage:
        repository = ConversionRepository(db_session)
        conversions, total = await repository.get_conversions(
            user_id, offset=pagination.offset, limit=pagination.page_size
        )
        return ConversionPage(
            items=[ConversionDTO.model_validate(c) for c in conversions],
            total=total,
            page=pagination.page,
            page_size=pagination.page_size,
            total_pages=math.ceil(total / pagination.page_size) if total else 0,
        )
