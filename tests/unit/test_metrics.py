"""
Unit tests for mail_extraction.output.metrics.

Counters are process-global, so assertions compare before / after values
read from the default prometheus registry.
"""
from __future__ import annotations

from prometheus_client import REGISTRY

from mail_extraction.extraction.pipeline import parse_email_content


def _value(name: str, labels: dict | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestMetricsAvailability:
    def test_all_public_helpers_present(self):
        from mail_extraction.output import metrics as m
        for name in (
            "record_extractor_failure",
            "record_normalizer_fallback",
            "record_cache_lookup",
            "timed_parse",
            "EXTRACTOR_FAILURES",
            "NORMALIZER_FALLBACKS",
            "CACHE_LOOKUPS",
            "PARSE_LATENCY",
        ):
            assert hasattr(m, name), f"Missing public symbol: {name}"


class TestMetricHelpers:
    def test_record_extractor_failure(self):
        from mail_extraction.output.metrics import record_extractor_failure
        labels = {"extractor": "signature"}
        before = _value("mail_extraction_extractor_failures_total", labels)
        record_extractor_failure("signature")
        assert _value("mail_extraction_extractor_failures_total", labels) == before + 1

    def test_record_cache_lookup(self):
        from mail_extraction.output.metrics import record_cache_lookup
        hits = _value("mail_extraction_cache_lookups_total", {"result": "hit"})
        misses = _value("mail_extraction_cache_lookups_total", {"result": "miss"})
        record_cache_lookup(hit=True)
        record_cache_lookup(hit=False)
        record_cache_lookup(hit=False)
        assert _value("mail_extraction_cache_lookups_total", {"result": "hit"}) == hits + 1
        assert _value("mail_extraction_cache_lookups_total", {"result": "miss"}) == misses + 2

    def test_normalizer_fallback_counted(self):
        before = _value("mail_extraction_normalizer_fallbacks_total")
        parse_email_content(b"<p>not a str</p>")
        assert _value("mail_extraction_normalizer_fallbacks_total") == before + 1

    def test_parse_latency_observed(self):
        before = _value("mail_extraction_parse_seconds_count")
        parse_email_content("Hello")
        parse_email_content("")
        assert _value("mail_extraction_parse_seconds_count") == before + 2
