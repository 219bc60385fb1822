"""Money and currency value types"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP


@dataclass(frozen=True)
class Currency:
    """Currency with its exchange rate relative to the primary currency"""
    code: str
    rate: Decimal = Decimal("1")
    symbol: str = ""
    decimal_digits: int = 2

    def round(self, amount: Decimal) -> Decimal:
        return amount.quantize(Decimal(1).scaleb(-self.decimal_digits), rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Money:
    """An amount in a specific currency"""
    amount: Decimal
    currency: Currency

    def __add__(self, other: "Money") -> "Money":
        self._check_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: "Money") -> "Money":
        self._check_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def __mul__(self, factor) -> "Money":
        return Money(self.amount * Decimal(factor), self.currency)

    def __str__(self) -> str:
        return format_money(self.amount, self.currency)

    def _check_currency(self, other: "Money") -> None:
        if other.currency.code != self.currency.code:
            raise ValueError(
                f"Currency mismatch: {self.currency.code} vs {other.currency.code}"
            )


def format_money(amount: Decimal, currency: Currency) -> str:
    """Format an amount for display, e.g. '$1,234.50' or '12.00 CHF'"""
    rounded = currency.round(amount)
    sign = "-" if rounded < 0 else ""
    digits = f"{abs(rounded):,.{currency.decimal_digits}f}"
    if currency.symbol:
        return f"{sign}{currency.symbol}{digits}"
    return f"{sign}{digits} {currency.code}"
