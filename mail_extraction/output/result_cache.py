"""
Redis Result Cache — parse results keyed by their inputs.

The engine is a pure function of (body, subject, extraction_enabled), so a
result can be cached under a digest of those inputs. Only payloads that
pass output-schema validation are stored; Redis errors never fail a parse.

Key scheme
----------
  mail_extraction:parsed:{sha256(body, subject, extraction_enabled)}
"""
from __future__ import annotations

import hashlib
import json
import logging
from typing import Any, Optional

import redis

from mail_extraction.config.settings import CACHE_TTL_SECONDS, REDIS_URL
from mail_extraction.errors import OutputSchemaError
from mail_extraction.extraction.pipeline import parse_email_content
from mail_extraction.models.parsed_content import ParsedEmailContent
from mail_extraction.output.metrics import record_cache_lookup
from mail_extraction.output.output_builder import build_output

logger = logging.getLogger(__name__)

KEY_PREFIX = "mail_extraction:parsed"


def cache_key(raw_body: str, subject: str = "", extraction_enabled: bool = True) -> str:
    """Deterministic Redis key for one set of parse inputs."""
    digest = hashlib.sha256()
    for part in (raw_body or "", subject or "", "1" if extraction_enabled else "0"):
        encoded = part.encode("utf-8")
        digest.update(len(encoded).to_bytes(8, "big"))
        digest.update(encoded)
    return f"{KEY_PREFIX}:{digest.hexdigest()}"


def get_cached(redis_client: Any, key: str) -> Optional[ParsedEmailContent]:
    """Return the cached result under *key*, or None if absent or unreadable."""
    try:
        data = redis_client.get(key)
    except Exception as exc:  # noqa: BLE001
        logger.warning("ResultCache read failed for %s: %s", key, exc)
        return None
    if not data:
        return None
    try:
        return ParsedEmailContent.from_dict(json.loads(data))
    except (ValueError, KeyError, TypeError) as exc:
        logger.warning("ResultCache entry %s is corrupt, ignoring: %s", key, exc)
        return None


def parse_with_cache(
    redis_client: Any,
    raw_body: str,
    subject: str = "",
    extraction_enabled: bool = True,
    ttl: int = CACHE_TTL_SECONDS,
) -> ParsedEmailContent:
    """
    Parse through the cache.

    Flow
    ----
    1. Look up the input digest; return the cached result on a hit.
    2. On a miss, parse and build the validated transport payload.
    3. Store the payload with *ttl*; schema or Redis failures only log.
    """
    key = cache_key(raw_body, subject, extraction_enabled)

    cached = get_cached(redis_client, key)
    record_cache_lookup(hit=cached is not None)
    if cached is not None:
        logger.debug("ResultCache hit %s", key)
        return cached

    parsed = parse_email_content(raw_body, subject, extraction_enabled)

    try:
        payload = build_output(parsed)
    except OutputSchemaError as exc:
        logger.error("ResultCache refusing to store invalid payload for %s: %s", key, exc.errors)
        return parsed

    try:
        redis_client.set(key, json.dumps(payload, ensure_ascii=False), ex=ttl)
        logger.debug("ResultCache stored %s (ttl=%ds)", key, ttl)
    except Exception as exc:  # noqa: BLE001
        logger.warning("ResultCache write failed for %s: %s", key, exc)

    return parsed


def build_redis_client(url: Optional[str] = None) -> redis.Redis:
    """
    Build and return a redis.Redis client.

    Falls back to REDIS_URL from settings if *url* is not provided.
    """
    target_url = url or REDIS_URL
    client = redis.Redis.from_url(target_url, decode_responses=True)
    logger.debug("Redis client created for URL: %s", target_url)
    return client


# ---------------------------------------------------------------------------
# Null / no-op client (for running without a live Redis instance)
# ---------------------------------------------------------------------------

class NullRedisClient:
    """
    Drop-in replacement that discards all writes and returns None on reads.
    Every lookup is a miss, so parsing always runs.
    """

    def set(self, key: str, value: str, **kwargs: Any) -> None:  # noqa: ARG002
        pass

    def get(self, key: str) -> None:  # noqa: ARG002
        return None
