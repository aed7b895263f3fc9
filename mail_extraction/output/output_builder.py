"""
Output Normalization — ParsedEmailContent to its transport payload.

Builds the camelCase dict for the rendering layer, validates it against
PARSED_EMAIL_CONTENT_SCHEMA, and prepares the pre-parsed request for the
external summarization service.
"""
import logging
from typing import List

from jsonschema import Draft202012Validator

from mail_extraction.config.schemas import PARSED_EMAIL_CONTENT_SCHEMA
from mail_extraction.errors import OutputSchemaError
from mail_extraction.models.email_input import EmailInput, SummarizationRequest
from mail_extraction.models.parsed_content import ParsedEmailContent

logger = logging.getLogger(__name__)

_VALIDATOR = Draft202012Validator(PARSED_EMAIL_CONTENT_SCHEMA)


def schema_errors(payload: dict) -> List[str]:
    """Return human-readable schema violations of *payload* (empty if valid)."""
    return [
        f"{'/'.join(str(p) for p in error.absolute_path) or '<root>'}: {error.message}"
        for error in sorted(_VALIDATOR.iter_errors(payload), key=lambda e: str(list(e.absolute_path)))
    ]


def build_output(parsed: ParsedEmailContent) -> dict:
    """
    Build and validate the transport payload.

    Raises:
        OutputSchemaError: If the payload does not conform to the schema.
    """
    payload = parsed.to_dict()
    errors = schema_errors(payload)
    if errors:
        logger.error("Parsed content payload failed schema validation: %s", errors)
        raise OutputSchemaError(errors)
    return payload


def build_summarization_request(
    email_input: EmailInput,
    parsed: ParsedEmailContent,
    sender_email: str,
) -> SummarizationRequest:
    """
    Build the summarization service input from an already parsed e-mail.

    The cleaned text is forwarded instead of the raw body; ``isHtml``
    still describes the original body.
    """
    return SummarizationRequest(
        subject=email_input.subject,
        body=parsed.cleaned_text,
        sender_email=sender_email,
        is_html=email_input.is_html,
    )
