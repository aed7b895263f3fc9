"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
MAX_BODY_LOG_CHARS: int = int(os.getenv("MAX_BODY_LOG_CHARS", "200"))

# --- Extraction ---
DEFAULT_CURRENCY: str = os.getenv("DEFAULT_CURRENCY", "USD")
SIGNATURE_SCAN_LINES: int = int(os.getenv("SIGNATURE_SCAN_LINES", "15"))
SIGNATURE_FALLBACK_LINES: int = int(os.getenv("SIGNATURE_FALLBACK_LINES", "10"))

# --- Redis result cache ---
REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
CACHE_TTL_SECONDS: int = int(os.getenv("CACHE_TTL_SECONDS", "3600"))
