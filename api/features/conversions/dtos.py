"""DTOs for the Conversions feature."""
from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from api.shared.dtos import BaseDTO, PaginationResponse
from api.shared.utils import parse_int


class CreateConversionRequest(BaseDTO):
    """Fields accepted when saving a conversion.

    ``userId`` is read leniently: ``"12abc"`` and ``12.7`` both give 12.
    """

    user_id: int = Field(alias="userId", description="Owner of the conversion")
    from_currency: str = Field(alias="fromCurrency", description="Source currency code")
    to_currency: str = Field(alias="toCurrency", description="Target currency code")
    amount: float = Field(description="Amount in the source currency")
    result: float = Field(description="Converted amount in the target currency")
    rate: Optional[float] = Field(default=None, description="Rate applied, if known")

    @field_validator("user_id", mode="before")
    @classmethod
    def coerce_user_id(cls, value: Any) -> int:
        parsed = parse_int(value)
        if parsed is None:
            raise ValueError("userId must be an integer")
        return parsed


class ConversionDTO(BaseDTO):
    """Stored conversion."""

    id: int = Field(description="Conversion identifier")
    user_id: int = Field(alias="userId", description="Owner of the conversion")
    from_currency: str = Field(alias="fromCurrency", description="Source currency code")
    to_currency: str = Field(alias="toCurrency", description="Target currency code")
    amount: float = Field(description="Amount in the source currency")
    result: float = Field(description="Converted amount in the target currency")
    rate: Optional[float] = Field(default=None, description="Rate applied, if known")
    created_at: Optional[datetime] = Field(
        default=None, alias="createdAt", description="When the conversion was saved"
    )


ConversionPage = PaginationResponse[ConversionDTO]
