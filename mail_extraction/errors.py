"""
Exception types of the extraction engine.

None of these escape ``parse_email_content``: the normalizer and the
aggregator recover from them locally.
"""


class ExtractionError(Exception):
    """Base class for extraction engine errors."""


class MalformedInputError(ExtractionError):
    """Raised when a raw body cannot be normalized into text."""


class ExtractorFailure(ExtractionError):
    """Raised (and caught) when one entity extractor fails."""

    def __init__(self, extractor: str, cause: Exception) -> None:
        self.extractor = extractor
        self.cause = cause
        super().__init__(f"{extractor} extractor failed: {type(cause).__name__}: {cause}")


class OutputSchemaError(ExtractionError):
    """Raised when a transport payload does not conform to its JSON schema."""

    def __init__(self, errors: list) -> None:
        self.errors = errors
        super().__init__(f"Output schema validation failed: {errors}")
