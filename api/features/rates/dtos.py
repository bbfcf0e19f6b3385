"""DTOs for the exchange rates feature."""
from typing import Dict

from pydantic import ConfigDict, Field

from api.shared.dtos import BaseDTO


class ExchangeRateSnapshot(BaseDTO):
    """Rates relative to ``base_code`` at a point in time.

    Live provider responses carry more keys (``result``, ``documentation``, ...);
    they are kept as-is.
    """

    model_config = ConfigDict(extra="allow")

    base_code: str = Field(description="Base currency code")
    conversion_rates: Dict[str, float] = Field(description="Currency code to rate")
    time_last_update_utc: str = Field(description="RFC 1123 timestamp of the rates")
