"""
Signature Extractor — trailing name / title / company / contact block.

The candidate region starts at the last boundary marker ("--", a closing
phrase) or name-shaped line within the final lines of the document.
Each line of the region is classified once, first match wins:

    name → title → company → phone → email → website → address

A block without a person's name is not a signature.
"""
import logging
import re
from typing import List, Optional

from mail_extraction.config.constants import (
    ADDRESS_KEYWORDS,
    CLOSING_PHRASES,
    COMPANY_KEYWORDS,
    MAX_ADDRESS_LENGTH,
    MAX_COMPANY_LENGTH,
    MAX_NAME_LENGTH,
    MAX_TITLE_LENGTH,
    ROLE_KEYWORDS,
)
from mail_extraction.config.settings import SIGNATURE_FALLBACK_LINES, SIGNATURE_SCAN_LINES
from mail_extraction.extraction.contacts import EMAIL_PATTERN, PHONE_PATTERN, WEBSITE_PATTERN
from mail_extraction.models.parsed_content import BusinessSignature

logger = logging.getLogger(__name__)

# Two or more capitalised words, optional middle initial: "Anna Maria Lopez", "John A. Smith".
NAME_PATTERN = re.compile(r"^[A-Z][a-z'-]+(?: [A-Z]\.)?(?: [A-Z][a-z'-]+)+$")

_SEPARATOR = re.compile(r"^-{2,}\s*$")


def _contains_word(line: str, keywords: List[str]) -> bool:
    lower = line.lower()
    return any(re.search(rf"\b{re.escape(k)}\b", lower) for k in keywords)


def _contains_substring(line: str, keywords: List[str]) -> bool:
    lower = line.lower()
    return any(k in lower for k in keywords)


def is_closing_phrase(line: str) -> bool:
    lower = line.lower()
    return any(phrase in lower for phrase in CLOSING_PHRASES)


def looks_like_name(line: str) -> bool:
    trimmed = line.strip()
    if not 2 < len(trimmed) < MAX_NAME_LENGTH:
        return False
    if "@" in trimmed or "www" in trimmed.lower():
        return False
    return NAME_PATTERN.match(trimmed) is not None


def looks_like_title(line: str) -> bool:
    return len(line) < MAX_TITLE_LENGTH and _contains_substring(line, ROLE_KEYWORDS)


def looks_like_company(line: str) -> bool:
    return len(line) < MAX_COMPANY_LENGTH and _contains_word(line, COMPANY_KEYWORDS)


def looks_like_address(line: str) -> bool:
    return len(line) < MAX_ADDRESS_LENGTH and _contains_substring(line, ADDRESS_KEYWORDS)


def find_signature_start(lines: List[str]) -> int:
    """
    Index of the first line of the signature region.

    Scans the last SIGNATURE_SCAN_LINES lines from the end; falls back to
    the last SIGNATURE_FALLBACK_LINES lines when no marker is found.
    """
    lower_bound = max(0, len(lines) - SIGNATURE_SCAN_LINES)
    for i in range(len(lines) - 1, lower_bound - 1, -1):
        line = lines[i]
        if _SEPARATOR.match(line) or is_closing_phrase(line) or looks_like_name(line):
            return i
    return max(0, len(lines) - SIGNATURE_FALLBACK_LINES)


def extract_signature(text: str) -> Optional[BusinessSignature]:
    """
    Locate and classify the trailing signature block.

    Returns:
        BusinessSignature, or None when no name-shaped line was found.
    """
    lines = [line.strip() for line in text.split("\n") if line.strip()]
    if not lines:
        return None

    name = title = company = email = website = address = None
    phones: List[str] = []

    for line in lines[find_signature_start(lines):]:
        if name is None and looks_like_name(line):
            name = line
        elif title is None and looks_like_title(line):
            title = line
        elif company is None and looks_like_company(line):
            company = line
        elif PHONE_PATTERN.search(line):
            for match in PHONE_PATTERN.finditer(line):
                phone = match.group(0).strip()
                if phone not in phones:
                    phones.append(phone)
        elif email is None and EMAIL_PATTERN.search(line):
            email = EMAIL_PATTERN.search(line).group(0)
        elif website is None and WEBSITE_PATTERN.search(line):
            website = WEBSITE_PATTERN.search(line).group(1)
        elif address is None and looks_like_address(line):
            address = line

    if name is None:
        logger.debug("No name-shaped line in signature region, no signature")
        return None

    return BusinessSignature(
        name=name,
        title=title,
        company=company,
        phones=tuple(phones),
        email=email,
        website=website,
        address=address,
    )
