"""
Financial Extractor — labelled monetary figures.

One label-anchored pattern per kind: a label ("Net Price", "Clean Profit",
"Service Fee", "Total", ...), a colon, an optional currency symbol or ISO
code and a numeric amount. Kinds may overlap on the same text; no
cross-kind deduplication is attempted.
"""
import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional

from mail_extraction.config.constants import (
    CURRENCY_CODES,
    CURRENCY_SYMBOLS,
    FEE_CODES,
    FEE_LABELS,
    PRICE_LABELS,
    PROFIT_LABELS,
    TOTAL_LABELS,
)
from mail_extraction.config.settings import DEFAULT_CURRENCY
from mail_extraction.models.parsed_content import FinancialItem, FinancialKind

logger = logging.getLogger(__name__)

_CODES = "|".join(CURRENCY_CODES)
_SYMBOLS = "".join(re.escape(s) for s in CURRENCY_SYMBOLS)

_AMOUNT_TAIL = (
    r"\s*:\s*\**\s*"
    rf"(?:(?P<pre_code>{_CODES})\s*)?"
    rf"(?P<symbol>[{_SYMBOLS}])?\s*"
    r"(?P<amount>[\d,]+\.?\d*)"
    rf"(?:\s*(?P<code>{_CODES})\b)?"
    r"\s*\**"
)


def _label_group(labels: List[str]) -> str:
    return "|".join(re.escape(label) for label in labels)


def _build_pattern(labels: List[str], codes: Optional[List[str]] = None) -> re.Pattern:
    alternatives = _label_group(labels)
    if codes:
        # short agent codes are only recognised in upper case
        alternatives += "|(?-i:" + _label_group(codes) + ")"
    return re.compile(rf"\b(?:{alternatives}){_AMOUNT_TAIL}", re.IGNORECASE)


FINANCIAL_PATTERNS: Dict[FinancialKind, re.Pattern] = {
    FinancialKind.PRICE: _build_pattern(PRICE_LABELS),
    FinancialKind.PROFIT: _build_pattern(PROFIT_LABELS),
    FinancialKind.FEE: _build_pattern(FEE_LABELS, FEE_CODES),
    FinancialKind.TOTAL: _build_pattern(TOTAL_LABELS),
}


def parse_amount(raw: str) -> Optional[Decimal]:
    """
    Parse a captured amount, dropping thousands separators.

    Returns None for captures that are not a finite number.
    """
    try:
        amount = Decimal(raw.replace(",", ""))
    except InvalidOperation:
        return None
    if not amount.is_finite():
        return None
    return amount


def _currency(match: re.Match) -> str:
    code = match.group("code") or match.group("pre_code")
    if code:
        return code.upper()
    symbol = match.group("symbol")
    if symbol:
        return CURRENCY_SYMBOLS[symbol]
    return DEFAULT_CURRENCY


def extract_financial(text: str) -> List[FinancialItem]:
    """
    Extract labelled prices, profits, fees and totals.

    Args:
        text: Normalized e-mail text.

    Returns:
        Items grouped by kind (price, profit, fee, total), each group in
        text order. Unparsable amounts are dropped.
    """
    items: List[FinancialItem] = []

    for kind, pattern in FINANCIAL_PATTERNS.items():
        for match in pattern.finditer(text):
            amount = parse_amount(match.group("amount"))
            if amount is None:
                logger.debug("Dropping unparsable %s amount %r", kind.value, match.group("amount"))
                continue
            items.append(
                FinancialItem(
                    kind=kind,
                    amount=amount,
                    currency=_currency(match),
                    label=match.group(0).strip(),
                )
            )

    return items
