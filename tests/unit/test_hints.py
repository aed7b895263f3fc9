"""
Unit tests for structured-data hints.
"""
from mail_extraction.extraction.hints import extract_structured_hints
from mail_extraction.models.parsed_content import HintKind, StructuredHint


class TestStructuredHints:
    def test_booking_signal_in_body(self):
        hints = extract_structured_hints("Your Reservation is Booked")
        assert hints == [StructuredHint(HintKind.BOOKING, "Booked", 0.8)]

    def test_sale_signal_in_subject(self):
        hints = extract_structured_hints("Payment received.", subject="Sale Closed - Smith family")
        assert hints == [StructuredHint(HintKind.FINANCIAL, "Sale Closed", 0.9)]

    def test_both_kinds_booking_first(self):
        hints = extract_structured_hints("Card Charged, Reservation attached")
        assert [h.kind for h in hints] == [HintKind.BOOKING, HintKind.FINANCIAL]

    def test_case_sensitive(self):
        assert extract_structured_hints("we booked and charged it") == []
