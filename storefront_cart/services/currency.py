"""Currency conversion between the primary and working currencies"""

from decimal import Decimal
from typing import Optional

from ..core.config import Settings
from ..engine.errors import UnknownCurrencyError
from ..engine.money import Currency, Money


CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}

ZERO_DECIMAL_CURRENCIES = {"JPY"}


class CurrencyService:
    """Converts amounts using the configured exchange rates"""

    def __init__(self, settings: Settings):
        rates = dict(settings.currency_rates)
        rates.setdefault(settings.primary_currency_code, Decimal("1"))

        self._currencies = {
            code.upper(): Currency(
                code=code.upper(),
                rate=Decimal(rate),
                symbol=CURRENCY_SYMBOLS.get(code.upper(), ""),
                decimal_digits=0 if code.upper() in ZERO_DECIMAL_CURRENCIES else 2,
            )
            for code, rate in rates.items()
        }
        self._primary = self._currencies[settings.primary_currency_code.upper()]

    def primary_currency(self) -> Currency:
        return self._primary

    def get_currency(self, code: Optional[str] = None) -> Currency:
        """Get a currency by code, the primary currency when no code is given"""
        if not code:
            return self._primary

        currency = self._currencies.get(code.upper())
        if currency is None:
            raise UnknownCurrencyError(code)
        return currency

    def convert_from_primary(self, amount: Decimal, target: Currency) -> Money:
        """Convert a primary currency amount into the target currency"""
        return Money(target.round(amount * target.rate), target)

    def convert_to_primary(self, money: Money) -> Money:
        """Convert an amount back into the primary currency"""
        if money.currency.rate == 0:
            raise ValueError(f"Currency {money.currency.code} has no exchange rate")
        return Money(self._primary.round(money.amount / money.currency.rate), self._primary)
