"""Integer arithmetic utilities for centavo-based money.

All prices, bids and settlement components are int (centavos). Floats never
touch stored amounts; fractional inputs (peso strings, weights) go through
Decimal and are rounded half-up to a whole centavo.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from src.fa_common.errors import InvalidMoneyFormatError

_CENTS_PER_PESO = 100
_STRIP_PATTERN = re.compile(r"(₱|\$|PHP|,|\s)", re.IGNORECASE)


def _to_decimal(value: int | float | str | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() first so 0.1 becomes Decimal("0.1"), not its binary expansion
    return Decimal(str(value))


def round_half_up(value: Decimal) -> int:
    """Round a Decimal to the nearest integer, .5 away from zero."""
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def pesos_to_centavos(amount: int | float | str | Decimal) -> int:
    """Convert pesos to centavos: 123.45 -> 12345."""
    return round_half_up(_to_decimal(amount) * _CENTS_PER_PESO)


def centavos_to_pesos(amount: int) -> Decimal:
    """Convert centavos to an exact peso Decimal: 12345 -> Decimal('123.45')."""
    return Decimal(amount) / _CENTS_PER_PESO


def format_money(amount: int, symbol: str = "₱") -> str:
    """Format centavos for display: 123456 -> '₱1,234.56', -1200 -> '-₱12.00'."""
    if amount < 0:
        abs_cents = -amount
        return f"-{symbol}{abs_cents // 100:,}.{abs_cents % 100:02d}"
    return f"{symbol}{amount // 100:,}.{amount % 100:02d}"


def parse_money_string(text: str) -> int:
    """Parse '₱1,234.56' / '1234.56' / 'PHP 25' into centavos.

    Raises InvalidMoneyFormatError if what remains after stripping the
    currency symbol, commas and whitespace is not a finite number.
    """
    cleaned = _STRIP_PATTERN.sub("", text)
    try:
        pesos = Decimal(cleaned)
    except InvalidOperation:
        raise InvalidMoneyFormatError(text) from None
    if not pesos.is_finite():
        raise InvalidMoneyFormatError(text)
    try:
        return pesos_to_centavos(pesos)
    except InvalidOperation:
        # beyond the decimal context precision
        raise InvalidMoneyFormatError(text) from None


def is_valid_money_amount(amount: object) -> bool:
    """True iff amount is a non-negative int centavo value."""
    return isinstance(amount, int) and not isinstance(amount, bool) and amount >= 0


def add_money(*amounts: int) -> int:
    return sum(amounts, 0)


def subtract_money(minuend: int, *subtrahends: int) -> int:
    result = minuend
    for amount in subtrahends:
        result -= amount
    return result
