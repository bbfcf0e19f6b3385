"""Static exchange rates served when the live provider is unavailable."""
from email.utils import formatdate
from typing import Dict, Mapping, Optional

from api.features.rates.dtos import ExchangeRateSnapshot

# Baseline rates relative to USD
FALLBACK_RATES: Dict[str, float] = {
    "USD": 1.0,
    "EUR": 0.85,
    "GBP": 0.73,
    "JPY": 110.45,
    "CAD": 1.25,
    "AUD": 1.32,
    "CHF": 0.92,
    "CNY": 6.45,
    "INR": 74.5,
    "RUB": 73.2,
}


def cross_rates(base_currency: str, table: Mapping[str, float] = FALLBACK_RATES) -> Dict[str, float]:
    """Re-express every rate in ``table`` relative to ``base_currency``.

    A base missing from the table is treated as worth one USD.
    """
    base_value = table.get(base_currency) or 1.0
    return {currency: rate / base_value for currency, rate in table.items()}


def fallback_snapshot(
    base_currency: str, *, timestamp: Optional[float] = None
) -> ExchangeRateSnapshot:
    return ExchangeRateSnapshot(
        base_code=base_currency,
        conversion_rates=cross_rates(base_currency),
        time_last_update_utc=formatdate(timestamp, usegmt=True),
    )
