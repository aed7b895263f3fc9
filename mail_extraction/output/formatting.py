"""
Display helpers for extracted entities.
"""
import re
from decimal import Decimal

from mail_extraction.config.constants import CURRENCY_SYMBOLS

_NON_DIGIT = re.compile(r"\D")

_SYMBOL_BY_CODE = {code: symbol for symbol, code in CURRENCY_SYMBOLS.items()}


def phone_digits(phone: str) -> str:
    """Digits of a phone value, extension excluded."""
    base = re.split(r"ext\.?", phone, maxsplit=1, flags=re.IGNORECASE)[0]
    return _NON_DIGIT.sub("", base)


def format_phone(phone: str) -> str:
    """
    Format a North-American number as ``(AAA) EEE-LLLL``.

    A leading country code ``1`` is dropped; other shapes are returned
    unchanged.
    """
    digits = phone_digits(phone)
    if len(digits) == 11 and digits.startswith("1"):
        digits = digits[1:]
    if len(digits) != 10:
        return phone
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"


def format_currency(amount: Decimal, currency: str) -> str:
    """``$1,234.56`` for known symbols, ``CAD 1,234.56`` otherwise."""
    grouped = f"{amount:,.2f}"
    symbol = _SYMBOL_BY_CODE.get(currency)
    if symbol:
        return f"{symbol}{grouped}"
    return f"{currency} {grouped}"
