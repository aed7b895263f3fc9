"""
Flight / Booking Extractor.

Three independent mechanisms, in increasing specificity:
    1. Token scan   — "EK 203" / "AA1234": airline + flight number
    2. Route scan   — "JFK-LAX" / "JFK LAX" / "JFKLAX": origin + destination
    3. Segment decoder — one fixed-width reservation-system line per leg

Tokens, routes and labelled booking references are merged positionally:
each route (and each labelled booking reference) attaches to the most
recently opened flight item that does not have one yet. Segment lines are
decoded field by field and never partially.
"""
import logging
import re
from dataclasses import dataclass, replace
from typing import List, Optional

from mail_extraction.config.constants import BOOKING_LABELS
from mail_extraction.models.parsed_content import FlightItem

logger = logging.getLogger(__name__)

FLIGHT_TOKEN_PATTERN = re.compile(r"\b([A-Z]{2,3}) ?(\d{1,4})\b")

ROUTE_PATTERN = re.compile(r"\b([A-Z]{3})(?:-| ?)([A-Z]{3})\b")

# <seats><airline><number><origin><destination><date><depart><arrive><day offset>(<class>)
# e.g. "1EK203JFKDXB15MAR08451905N(Y)"
SEGMENT_PATTERN = re.compile(
    r"(?P<seats>\d+)"
    r"(?P<airline>[A-Z]{2,3})"
    r"(?P<number>\d+)"
    r"(?P<origin>[A-Z]{3})"
    r"(?P<destination>[A-Z]{3})"
    r"(?P<date>\d{2}[A-Z]{3})"
    r"(?P<depart>\d{4})"
    r"(?P<arrive>\d{4})"
    r"(?P<offset>[A-Z])"
    r"\((?P<service_class>[A-Z])\)"
)

LABELLED_BOOKING_PATTERN = re.compile(
    r"(?i:" + "|".join(re.escape(label) for label in BOOKING_LABELS) + r")"
    r"\s*:\s*([A-Z0-9]{4,8})\b"
)
BARE_BOOKING_PATTERN = re.compile(r"\b([A-Z]{6})\b")
BOOKED_CODE_PATTERN = re.compile(r"\b([A-Z0-9]{5,7})\b(?=\s*-\s*(?i:booked))")


@dataclass
class _Hit:
    """A positioned match produced by one of the heuristic scans."""

    kind: str           # "flight" | "route" | "booking" | "segment"
    start: int
    end: int
    value: tuple

    def overlaps(self, other: "_Hit") -> bool:
        return not (self.end <= other.start or other.end <= self.start)


def decode_segment(line: str) -> Optional[FlightItem]:
    """
    Decode one fixed-format segment line.

    Returns:
        A fully populated FlightItem, or None when the line does not have
        the exact segment shape.
    """
    match = SEGMENT_PATTERN.search(line)
    if match is None:
        return None

    airline = match.group("airline")
    origin = match.group("origin")
    destination = match.group("destination")
    return FlightItem(
        flight_number=f"{airline}{match.group('number')}",
        airline=airline,
        route=f"{origin}-{destination}",
        departure=origin,
        arrival=destination,
        departure_time=match.group("depart"),
        arrival_time=match.group("arrive"),
        day_offset=match.group("offset"),
        seat_count=int(match.group("seats")),
        date=match.group("date"),
        service_class=match.group("service_class"),
    )


def _segment_line_spans(text: str) -> List[_Hit]:
    spans: List[_Hit] = []
    offset = 0
    for line in text.split("\n"):
        if SEGMENT_PATTERN.search(line):
            spans.append(_Hit("segment", offset, offset + len(line), ()))
        offset += len(line) + 1
    return spans


def _heuristic_hits(text: str) -> List[_Hit]:
    """Collect booking, flight and route hits in text order, dropping overlaps."""
    blocked = _segment_line_spans(text)
    bookings = [
        _Hit("booking", m.start(1), m.end(1), (m.group(1),))
        for m in LABELLED_BOOKING_PATTERN.finditer(text)
    ]
    blocked.extend(bookings)

    hits = list(bookings)
    for m in FLIGHT_TOKEN_PATTERN.finditer(text):
        hit = _Hit("flight", m.start(), m.end(), (m.group(1), m.group(2)))
        if not any(hit.overlaps(b) for b in blocked):
            hits.append(hit)
    for m in ROUTE_PATTERN.finditer(text):
        hit = _Hit("route", m.start(), m.end(), (m.group(1), m.group(2)))
        if not any(hit.overlaps(b) for b in blocked):
            hits.append(hit)

    hits.sort(key=lambda h: h.start)
    return hits


def _merge_hits(hits: List[_Hit]) -> List[FlightItem]:
    items: List[FlightItem] = []

    for hit in hits:
        if hit.kind == "flight":
            airline, number = hit.value
            items.append(FlightItem(flight_number=f"{airline}{number}", airline=airline))
        elif hit.kind == "route":
            route = f"{hit.value[0]}-{hit.value[1]}"
            if items and items[-1].route is None:
                items[-1] = replace(items[-1], route=route)
            else:
                items.append(FlightItem(route=route))
        elif items and items[-1].booking_ref is None:
            items[-1] = replace(items[-1], booking_ref=hit.value[0])

    return items


def extract_flights(text: str) -> List[FlightItem]:
    """
    Extract flight items from normalized text.

    Returns:
        Heuristic items (token/route/booking merge) in text order,
        followed by decoded segment lines in line order.
    """
    items = _merge_hits(_heuristic_hits(text))

    for line in text.split("\n"):
        segment = decode_segment(line)
        if segment is not None:
            items.append(segment)

    logger.debug("Extracted %d flight items", len(items))
    return items


def extract_booking_references(text: str) -> List[str]:
    """
    Extract booking reference codes.

    Labelled codes ("PNR: ABC123"), bare six-letter upper-case codes and
    codes right before "- Booked" are merged into one list.

    Returns:
        Deduplicated codes in order of first occurrence in the text.
    """
    found = []
    for pattern in (LABELLED_BOOKING_PATTERN, BARE_BOOKING_PATTERN, BOOKED_CODE_PATTERN):
        for match in pattern.finditer(text):
            found.append((match.start(1), match.group(1)))

    refs: List[str] = []
    for _, ref in sorted(found, key=lambda pair: pair[0]):
        if ref not in refs:
            refs.append(ref)
    return refs
