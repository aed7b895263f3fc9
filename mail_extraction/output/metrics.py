"""
Prometheus Metrics — extraction engine observability.

Exposes counters and a histogram for:
- Extractor failures (isolated, recovered) per extractor
- Normalizer fallbacks to the raw body
- Result cache lookups (hit / miss)
- End-to-end parse latency

Usage
-----
    from mail_extraction.output.metrics import record_extractor_failure, timed_parse

    with timed_parse():
        parsed = parse_email_content(body, subject)

    record_extractor_failure("signature")
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Extractor calls that raised and were replaced by an empty result.
EXTRACTOR_FAILURES: Counter = Counter(
    "mail_extraction_extractor_failures_total",
    "Extractor failures recovered with an empty result, by extractor",
    ["extractor"],
)

# Normalizations that fell back to the raw body.
NORMALIZER_FALLBACKS: Counter = Counter(
    "mail_extraction_normalizer_fallbacks_total",
    "Bodies whose normalization failed and were kept raw",
)

# Result cache lookups.
CACHE_LOOKUPS: Counter = Counter(
    "mail_extraction_cache_lookups_total",
    "Parse result cache lookups by outcome (hit / miss)",
    ["result"],
)

# Parse latency (seconds); calls take micro- to milliseconds.
PARSE_LATENCY: Histogram = Histogram(
    "mail_extraction_parse_seconds",
    "End-to-end parse time in seconds",
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.5),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_extractor_failure(extractor: str) -> None:
    """Increment the failure counter for *extractor*."""
    EXTRACTOR_FAILURES.labels(extractor=extractor).inc()


def record_normalizer_fallback() -> None:
    NORMALIZER_FALLBACKS.inc()


def record_cache_lookup(hit: bool) -> None:
    """Increment the cache lookup counter with ``hit`` or ``miss``."""
    CACHE_LOOKUPS.labels(result="hit" if hit else "miss").inc()


@contextmanager
def timed_parse() -> Generator[None, None, None]:
    """
    Context manager that records parse latency.

    Usage::

        with timed_parse():
            parsed = parse_email_content(body)
    """
    with PARSE_LATENCY.time():
        yield
