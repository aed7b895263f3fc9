"""
Extraction result records.

Every record is created fresh by one call to the engine and is immutable;
collections are tuples so a ParsedEmailContent can be cached and shared
between threads as-is. ``to_dict`` emits the camelCase transport keys
consumed by the rendering layer.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple


class ContactKind(str, Enum):
    PHONE = "phone"
    EMAIL = "email"
    WEBSITE = "website"


class FinancialKind(str, Enum):
    PRICE = "price"
    PROFIT = "profit"
    FEE = "fee"
    TOTAL = "total"


class ImageKind(str, Enum):
    PHOTO = "photo"
    ICON = "icon"
    LOGO = "logo"
    ATTACHMENT = "attachment"


class HintKind(str, Enum):
    BOOKING = "booking"
    FINANCIAL = "financial"


@dataclass(frozen=True)
class ContactInfo:
    """A phone number, e-mail address or website found in the text."""

    kind: ContactKind
    value: str              # raw matched string
    label: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "value": self.value,
            "label": self.label,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ContactInfo":
        return cls(ContactKind(data["kind"]), data["value"], data.get("label"))


@dataclass(frozen=True)
class FinancialItem:
    """A labelled monetary figure."""

    kind: FinancialKind
    amount: Decimal
    currency: str           # ISO-4217
    label: str              # matched source phrase

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "amount": format(self.amount, "f"),
            "currency": self.currency,
            "label": self.label,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FinancialItem":
        return cls(
            kind=FinancialKind(data["kind"]),
            amount=Decimal(str(data["amount"])),
            currency=data["currency"],
            label=data["label"],
        )


@dataclass(frozen=True)
class FlightItem:
    """
    A (possibly partial) flight record.

    Heuristic passes fill only some fields; the segment decoder fills
    all of them except ``booking_ref``.
    """

    flight_number: Optional[str] = None
    airline: Optional[str] = None
    route: Optional[str] = None             # "XXX-YYY"
    departure: Optional[str] = None         # origin airport code
    arrival: Optional[str] = None           # destination airport code
    departure_time: Optional[str] = None    # "HHMM"
    arrival_time: Optional[str] = None      # "HHMM"
    day_offset: Optional[str] = None
    seat_count: Optional[int] = None
    date: Optional[str] = None              # "15MAR"
    booking_ref: Optional[str] = None
    service_class: Optional[str] = None

    _KEYS = (
        ("flight_number", "flightNumber"),
        ("airline", "airline"),
        ("route", "route"),
        ("departure", "departure"),
        ("arrival", "arrival"),
        ("departure_time", "departureTime"),
        ("arrival_time", "arrivalTime"),
        ("day_offset", "dayOffset"),
        ("seat_count", "seatCount"),
        ("date", "date"),
        ("booking_ref", "bookingRef"),
        ("service_class", "serviceClass"),
    )

    def to_dict(self) -> dict:
        return {key: getattr(self, attr) for attr, key in self._KEYS}

    @classmethod
    def from_dict(cls, data: dict) -> "FlightItem":
        return cls(**{attr: data.get(key) for attr, key in cls._KEYS})


@dataclass(frozen=True)
class BusinessSignature:
    """Trailing signature block; only exists when a person's name was found."""

    name: str
    title: Optional[str] = None
    company: Optional[str] = None
    phones: Tuple[str, ...] = ()
    email: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "title": self.title,
            "company": self.company,
            "phones": list(self.phones),
            "email": self.email,
            "website": self.website,
            "address": self.address,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BusinessSignature":
        return cls(
            name=data["name"],
            title=data.get("title"),
            company=data.get("company"),
            phones=tuple(data.get("phones", ())),
            email=data.get("email"),
            website=data.get("website"),
            address=data.get("address"),
        )


@dataclass(frozen=True)
class QuotedSection:
    level: int
    content: str
    original_sender: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "level": self.level,
            "content": self.content,
            "originalSender": self.original_sender,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "QuotedSection":
        return cls(data["level"], data["content"], data.get("originalSender"))


@dataclass(frozen=True)
class ThreadMessage:
    content: str
    is_quoted: bool
    sender: str = "Unknown"
    date: str = ""

    def to_dict(self) -> dict:
        return {
            "from": self.sender,
            "date": self.date,
            "content": self.content,
            "isQuoted": self.is_quoted,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ThreadMessage":
        return cls(
            content=data["content"],
            is_quoted=data["isQuoted"],
            sender=data.get("from", "Unknown"),
            date=data.get("date", ""),
        )


@dataclass(frozen=True)
class ImageInfo:
    kind: ImageKind
    description: str
    alt: Optional[str] = None
    inline: bool = True
    src: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "description": self.description,
            "alt": self.alt,
            "inline": self.inline,
            "src": self.src,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ImageInfo":
        return cls(
            kind=ImageKind(data["kind"]),
            description=data["description"],
            alt=data.get("alt"),
            inline=data.get("inline", True),
            src=data.get("src"),
        )


@dataclass(frozen=True)
class StructuredHint:
    """Coarse document-level signal (a booking was made, a sale closed)."""

    kind: HintKind
    signal: str
    confidence: float

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "signal": self.signal,
            "confidence": self.confidence,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "StructuredHint":
        return cls(HintKind(data["kind"]), data["signal"], data["confidence"])


@dataclass(frozen=True)
class ParsedEmailContent:
    """Root result of one extraction call."""

    cleaned_text: str
    contact_info: Tuple[ContactInfo, ...] = ()
    financial_items: Tuple[FinancialItem, ...] = ()
    flight_items: Tuple[FlightItem, ...] = ()
    signature: Optional[BusinessSignature] = None
    booking_references: Tuple[str, ...] = ()
    quoted_sections: Tuple[QuotedSection, ...] = ()
    thread_messages: Tuple[ThreadMessage, ...] = ()
    images: Tuple[ImageInfo, ...] = ()
    structured_data: Tuple[StructuredHint, ...] = ()
    warnings: Tuple[str, ...] = field(default=())

    @property
    def has_structured_content(self) -> bool:
        return bool(
            self.contact_info
            or self.financial_items
            or self.flight_items
            or self.signature is not None
            or self.booking_references
            or self.images
        )

    def to_dict(self) -> dict:
        return {
            "cleanedText": self.cleaned_text,
            "contactInfo": [c.to_dict() for c in self.contact_info],
            "financialItems": [f.to_dict() for f in self.financial_items],
            "flightItems": [f.to_dict() for f in self.flight_items],
            "signature": self.signature.to_dict() if self.signature else None,
            "bookingReferences": list(self.booking_references),
            "quotedSections": [q.to_dict() for q in self.quoted_sections],
            "threadMessages": [t.to_dict() for t in self.thread_messages],
            "images": [i.to_dict() for i in self.images],
            "structuredData": [s.to_dict() for s in self.structured_data],
            "hasStructuredContent": self.has_structured_content,
            "warnings": list(self.warnings),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ParsedEmailContent":
        signature = data.get("signature")
        return cls(
            cleaned_text=data["cleanedText"],
            contact_info=tuple(ContactInfo.from_dict(c) for c in data.get("contactInfo", [])),
            financial_items=tuple(FinancialItem.from_dict(f) for f in data.get("financialItems", [])),
            flight_items=tuple(FlightItem.from_dict(f) for f in data.get("flightItems", [])),
            signature=BusinessSignature.from_dict(signature) if signature else None,
            booking_references=tuple(data.get("bookingReferences", [])),
            quoted_sections=tuple(QuotedSection.from_dict(q) for q in data.get("quotedSections", [])),
            thread_messages=tuple(ThreadMessage.from_dict(t) for t in data.get("threadMessages", [])),
            images=tuple(ImageInfo.from_dict(i) for i in data.get("images", [])),
            structured_data=tuple(StructuredHint.from_dict(s) for s in data.get("structuredData", [])),
            warnings=tuple(data.get("warnings", [])),
        )

    def __repr__(self) -> str:
        return (
            f"ParsedEmailContent(chars={len(self.cleaned_text)}, "
            f"contacts={len(self.contact_info)}, financial={len(self.financial_items)}, "
            f"flights={len(self.flight_items)}, refs={len(self.booking_references)})"
        )
