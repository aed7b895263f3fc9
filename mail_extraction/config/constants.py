"""
Constants used across the extraction engine.
Keyword vocabularies are pinned so that extraction stays deterministic.
"""
from typing import Dict, List

# =============================================================================
# Currency
# =============================================================================
CURRENCY_CODES: List[str] = ["USD", "EUR", "GBP", "JPY", "CAD"]

CURRENCY_SYMBOLS: Dict[str, str] = {
    "$": "USD",
    "€": "EUR",
    "£": "GBP",
    "¥": "JPY",
}

# =============================================================================
# Financial labels (case-insensitive, matched as whole words)
# =============================================================================
PRICE_LABELS: List[str] = ["Net Price", "Selling Price", "Amount", "Price"]
PROFIT_LABELS: List[str] = ["Clean Profit", "Profit After Fees", "Profit After", "Profit"]
FEE_LABELS: List[str] = ["Service Fee", "Tips", "Fee"]
TOTAL_LABELS: List[str] = ["Grand Total", "Total"]

# Short fee codes used by agents ("IF: 50", "CFAR: 120"); matched case-sensitively.
FEE_CODES: List[str] = ["CFAR", "IF", "CK", "TP", "FT"]

# =============================================================================
# Booking reference labels
# =============================================================================
BOOKING_LABELS: List[str] = ["EK #", "Booking", "PNR", "Reference", "Confirmation", "Conf"]

# =============================================================================
# Signature vocabularies
# =============================================================================
CLOSING_PHRASES: List[str] = [
    "best regards",
    "kind regards",
    "warm regards",
    "regards",
    "sincerely",
    "thank you",
    "thanks",
    "cheers",
]

ROLE_KEYWORDS: List[str] = [
    "expert",
    "agent",
    "manager",
    "specialist",
    "consultant",
]

COMPANY_KEYWORDS: List[str] = [
    "travel",
    "tours",
    "agency",
    "airlines",
    "vacations",
    "inc",
    "llc",
    "ltd",
    "corp",
    "group",
]

ADDRESS_KEYWORDS: List[str] = [
    "street",
    "avenue",
    "suite",
    "blvd",
    "boulevard",
    "miami",
    "beach",
]

MAX_NAME_LENGTH: int = 50
MAX_TITLE_LENGTH: int = 100
MAX_COMPANY_LENGTH: int = 100
MAX_ADDRESS_LENGTH: int = 200

# =============================================================================
# Structured-data hints
# =============================================================================
BOOKING_SIGNALS: List[str] = ["Booked", "Reservation"]
SALE_SIGNALS: List[str] = ["Sale Closed", "Charged"]

BOOKING_HINT_CONFIDENCE: float = 0.8
SALE_HINT_CONFIDENCE: float = 0.9

# =============================================================================
# Thread defaults
# =============================================================================
UNKNOWN_SENDER: str = "Unknown"
