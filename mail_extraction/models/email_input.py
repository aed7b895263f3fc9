"""
Typed Pydantic models for the engine's I/O contracts.

Covers the caller → engine input and the pre-parsed payload forwarded to
the external summarization service.
"""
from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

_HTML_HINT = re.compile(r"<\s*(html|body|div|p|br|table|span|a|img)\b", re.IGNORECASE)


class EmailInput(BaseModel):
    """A raw e-mail body as handed to the engine."""

    body: str = Field(..., description="Raw body, HTML or plain text.")
    subject: str = Field("", description="E-mail subject line.")
    extraction_enabled: bool = Field(True, description="False selects raw-view mode.")

    @field_validator("subject", mode="before")
    @classmethod
    def none_subject_is_empty(cls, v):
        return "" if v is None else v

    @property
    def is_html(self) -> bool:
        return _HTML_HINT.search(self.body) is not None


class SummarizationRequest(BaseModel):
    """
    Input expected by the external summarization service.

    Field names follow the service's camelCase wire format.
    """

    model_config = ConfigDict(populate_by_name=True)

    subject: str
    body: str = Field(..., description="Cleaned text produced by the engine.")
    sender_email: str = Field(..., alias="senderEmail")
    is_html: bool = Field(..., alias="isHtml")
