"""
Contact Extractor — phone numbers, e-mail addresses and websites.

Every match in the document is returned; deduplication is left to the
consumers (the signature extractor dedups its own phones).
"""
import re
from typing import List

from mail_extraction.models.parsed_content import ContactInfo, ContactKind

# North-American numbers: optional +1, area code, exchange, line, extension.
PHONE_PATTERN = re.compile(
    r"(?<!\d)(?:\+?1[-.\s]?)?\(?(\d{3})\)?[-.\s]?(\d{3})[-.\s]?(\d{4})(?!\d)"
    r"(?:\s*-?\s*ext\.?\s*(\d+))?",
    re.IGNORECASE,
)

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

# Bare or http(s)-prefixed domain-like tokens; the host part of an e-mail
# address is excluded by the look-arounds.
WEBSITE_PATTERN = re.compile(
    r"(?<![@\w.])((?:https?://)?(?:www\.)?(?:[a-zA-Z0-9-]+\.)+[a-zA-Z]{2,})(?![\w@])",
    re.IGNORECASE,
)


def extract_contacts(text: str) -> List[ContactInfo]:
    """
    Find every phone number, e-mail address and website in *text*.

    Returns:
        Phones first, then e-mails, then websites, each in text order.
        Phones with an extension carry ``label="ext. N"``.
    """
    contacts: List[ContactInfo] = []

    for match in PHONE_PATTERN.finditer(text):
        extension = match.group(4)
        contacts.append(
            ContactInfo(
                kind=ContactKind.PHONE,
                value=match.group(0).strip(),
                label=f"ext. {extension}" if extension else None,
            )
        )

    for match in EMAIL_PATTERN.finditer(text):
        contacts.append(ContactInfo(kind=ContactKind.EMAIL, value=match.group(0)))

    for match in WEBSITE_PATTERN.finditer(text):
        contacts.append(ContactInfo(kind=ContactKind.WEBSITE, value=match.group(1)))

    return contacts
