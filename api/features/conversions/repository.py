"""Conversion repository using base repository pattern."""
from typing import List, Tuple

from api.features.conversions.entities.conversion import Conversion
from api.shared.base import BaseRepository


class ConversionRepository(BaseRepository[Conversion]):
    """Repository for conversion records."""

    model = Conversion

    async def save_conversion(self, conversion: Conversion) -> Conversion:
        return await self.create(conversion)

    async def get_conversions(
        self, user_id: int, *, offset: int, limit: int
    ) -> Tuple[List[Conversion], int]:
        """Page through a user's conversions, most recent first."""
        return await self.list(
            offset=offset, limit=limit, order_by="-created_at", user_id=user_id
        )
