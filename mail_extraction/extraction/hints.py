"""
Structured-data hints — coarse document-level signals.

Flags that the e-mail confirms a booking ("Booked", "Reservation") or a
completed sale ("Sale Closed", "Charged"), looking at subject and body.
"""
from typing import List

from mail_extraction.config.constants import (
    BOOKING_HINT_CONFIDENCE,
    BOOKING_SIGNALS,
    SALE_HINT_CONFIDENCE,
    SALE_SIGNALS,
)
from mail_extraction.models.parsed_content import HintKind, StructuredHint


def _first_signal(haystack: str, signals: List[str]) -> str | None:
    for signal in signals:
        if signal in haystack:
            return signal
    return None


def extract_structured_hints(text: str, subject: str = "") -> List[StructuredHint]:
    """
    Detect booking and sale signals (case-sensitive, as agents write them).

    Returns:
        At most one hint per kind: booking first, then financial.
    """
    haystack = f"{subject}\n{text}"
    hints: List[StructuredHint] = []

    booking = _first_signal(haystack, BOOKING_SIGNALS)
    if booking:
        hints.append(StructuredHint(HintKind.BOOKING, booking, BOOKING_HINT_CONFIDENCE))

    sale = _first_signal(haystack, SALE_SIGNALS)
    if sale:
        hints.append(StructuredHint(HintKind.FINANCIAL, sale, SALE_HINT_CONFIDENCE))

    return hints
