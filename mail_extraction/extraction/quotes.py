"""
Quoted-section and thread extraction.

Quoted sections: a line-oriented state machine over ``>`` quote markers.
Thread messages: a coarse split of the whole text on reply separators.
"""
import re
from typing import List, Optional

from mail_extraction.config.constants import UNKNOWN_SENDER
from mail_extraction.models.parsed_content import QuotedSection, ThreadMessage

QUOTE_PREFIX = re.compile(r"^[ \t]*((?:>[ \t]?)+)")

ATTRIBUTION_PATTERNS = [
    re.compile(r"^On\s+.+,\s*(?P<sender>[^,]+?)\s+wrote:\s*$"),
    re.compile(r"^On\s+.+?\s+(?P<sender>\S+@\S+)\s+wrote:\s*$"),
    re.compile(r"^From:\s*(?P<sender>.+?)\s*$"),
]

THREAD_SEPARATOR = re.compile(r"On [^\n]+? wrote:|^From:|^[ \t]*>+", re.MULTILINE)


def quote_level(line: str) -> int:
    """Number of leading ``>`` markers (spaces between markers allowed)."""
    match = QUOTE_PREFIX.match(line)
    return match.group(1).count(">") if match else 0


def _strip_markers(line: str) -> str:
    return QUOTE_PREFIX.sub("", line, count=1).strip()


def _attributed_sender(line: str) -> Optional[str]:
    for pattern in ATTRIBUTION_PATTERNS:
        match = pattern.match(line.strip())
        if match:
            return match.group("sender").strip()
    return None


def extract_quoted_sections(text: str) -> List[QuotedSection]:
    """
    Split *text* into contiguous quoted blocks.

    A block ends at every change of quote level (including a return to
    unquoted text) and at end of input; it is stored at the level it was
    accumulated at, with markers stripped.
    """
    sections: List[QuotedSection] = []
    buffer: List[str] = []
    current_level = 0
    sender: Optional[str] = None
    previous_line = ""

    def flush() -> None:
        if buffer and current_level > 0:
            sections.append(
                QuotedSection(
                    level=current_level,
                    content="\n".join(buffer).strip(),
                    original_sender=sender,
                )
            )
        buffer.clear()

    for line in text.split("\n"):
        level = quote_level(line)
        if level != current_level:
            flush()
            current_level = level
            sender = _attributed_sender(_strip_markers(previous_line)) if level > 0 else None
        if level > 0:
            buffer.append(_strip_markers(line))
        previous_line = line

    flush()
    return sections


def parse_thread(text: str) -> List[ThreadMessage]:
    """
    Split *text* into thread messages on reply separators.

    Sender and date are not resolved. The first fragment is the new
    message; every later fragment is quoted. Text without any separator
    is not a thread and yields no messages.
    """
    if THREAD_SEPARATOR.search(text) is None:
        return []

    messages: List[ThreadMessage] = []
    for index, part in enumerate(THREAD_SEPARATOR.split(text)):
        content = part.strip()
        if content:
            messages.append(
                ThreadMessage(
                    content=content,
                    is_quoted=index > 0,
                    sender=UNKNOWN_SENDER,
                    date="",
                )
            )
    return messages
