from finance_dashboard.models.enums import Currency

# Units of each currency per one US dollar. Pairwise rates are derived from
# these so that converting A -> B -> A returns to A within rounding.
CURRENCY_OPTIONS = {
    Currency.USD: {"symbol": "$", "name": "US Dollar", "per_usd": 1.0},
    Currency.EUR: {"symbol": "€", "name": "Euro", "per_usd": 0.95},
    Currency.LKR: {"symbol": "Rs", "name": "Sri Lankan Rupee", "per_usd": 300.0},
}

_missing = set(Currency) - set(CURRENCY_OPTIONS)
if _missing:
    raise RuntimeError(f"Currency table has no entry for: {sorted(c.value for c in _missing)}")
