from typing import Dict, List

from finance_dashboard.constants.currencies import CURRENCY_OPTIONS
from finance_dashboard.models.enums import Currency


def rate(from_currency: Currency, to_currency: Currency) -> float:
    """Multiplier that turns an amount in `from_currency` into `to_currency`."""
    if from_currency == to_currency:
        return 1.0
    return CURRENCY_OPTIONS[to_currency]["per_usd"] / CURRENCY_OPTIONS[from_currency]["per_usd"]


def convert(amount: float, from_currency: Currency, to_currency: Currency) -> float:
    if from_currency == to_currency:
        return amount
    return round(amount * rate(from_currency, to_currency), 2)


def symbol(currency: Currency) -> str:
    return CURRENCY_OPTIONS[currency]["symbol"]


def format_amount(amount: float, currency: Currency) -> str:
    """`$1,234.50` style: symbol, thousands separators, two decimals."""
    return f"{symbol(currency)}{amount:,.2f}"


def currency_options() -> List[Dict[str, str]]:
    return [
        {"value": code.value, "label": f"{code.value} ({info['symbol']})", "name": info["name"]}
        for code, info in CURRENCY_OPTIONS.items()
    ]
