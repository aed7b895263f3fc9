"""
Extraction Pipeline — main entry point of the engine.

Flow:
    1. Normalize the raw body once (text + images)
    2. Raw-view mode: stop here, every entity collection empty
    3. Run each extractor on the normalized text, isolated:
       contacts, financial, flights, booking references,
       signature, quoted sections, thread, hints
    4. Assemble an immutable ParsedEmailContent

The call is pure and never raises: an extractor failure is logged, counted
and replaced by an empty result for that entity kind only.
"""
import logging
from typing import Any, Callable, List, Optional

from mail_extraction.errors import ExtractorFailure
from mail_extraction.extraction.contacts import extract_contacts
from mail_extraction.extraction.financial import extract_financial
from mail_extraction.extraction.flights import extract_booking_references, extract_flights
from mail_extraction.extraction.hints import extract_structured_hints
from mail_extraction.extraction.normalizer import normalize_body
from mail_extraction.extraction.quotes import extract_quoted_sections, parse_thread
from mail_extraction.extraction.signature import extract_signature
from mail_extraction.models.email_input import EmailInput
from mail_extraction.models.parsed_content import ParsedEmailContent
from mail_extraction.output.metrics import record_extractor_failure, timed_parse

logger = logging.getLogger(__name__)


def _run_isolated(
    name: str,
    extractor: Callable[[], Any],
    empty: Any,
    warnings: List[str],
) -> Any:
    """Run one extractor; on failure return *empty* and record a warning."""
    try:
        return extractor()
    except Exception as e:
        failure = ExtractorFailure(name, e)
        logger.error("%s", failure)
        record_extractor_failure(name)
        warnings.append(str(failure))
        return empty


def parse_email_content(
    raw_body: Optional[str],
    subject: str = "",
    extraction_enabled: bool = True,
) -> ParsedEmailContent:
    """
    Parse a raw e-mail body into clean text and structured entities.

    Args:
        raw_body: Raw body, HTML or plain text.
        subject: E-mail subject (only used for document-level hints).
        extraction_enabled: False selects raw-view mode (text only).

    Returns:
        A fresh ParsedEmailContent; identical inputs give equal results.
    """
    with timed_parse():
        if not raw_body:
            return ParsedEmailContent(cleaned_text="")

        cleaned_text, images = normalize_body(raw_body)

        if not extraction_enabled:
            return ParsedEmailContent(cleaned_text=cleaned_text)

        warnings: List[str] = []
        subject = subject or ""

        contacts = _run_isolated("contacts", lambda: extract_contacts(cleaned_text), [], warnings)
        financial = _run_isolated("financial", lambda: extract_financial(cleaned_text), [], warnings)
        flights = _run_isolated("flights", lambda: extract_flights(cleaned_text), [], warnings)
        booking_refs = _run_isolated(
            "booking_references", lambda: extract_booking_references(cleaned_text), [], warnings
        )
        signature = _run_isolated("signature", lambda: extract_signature(cleaned_text), None, warnings)
        quoted = _run_isolated("quoted_sections", lambda: extract_quoted_sections(cleaned_text), [], warnings)
        thread = _run_isolated("thread", lambda: parse_thread(cleaned_text), [], warnings)
        hints = _run_isolated(
            "structured_hints", lambda: extract_structured_hints(cleaned_text, subject), [], warnings
        )

        parsed = ParsedEmailContent(
            cleaned_text=cleaned_text,
            contact_info=tuple(contacts),
            financial_items=tuple(financial),
            flight_items=tuple(flights),
            signature=signature,
            booking_references=tuple(booking_refs),
            quoted_sections=tuple(quoted),
            thread_messages=tuple(thread),
            images=tuple(images),
            structured_data=tuple(hints),
            warnings=tuple(warnings),
        )

    logger.debug("Parsed e-mail content: %r", parsed)
    return parsed


def parse_email_input(email_input: EmailInput) -> ParsedEmailContent:
    """Run :func:`parse_email_content` on a validated EmailInput."""
    return parse_email_content(
        email_input.body,
        subject=email_input.subject,
        extraction_enabled=email_input.extraction_enabled,
    )
