"""
Script di esecuzione dell'Email Content Extraction engine.

Uso:
  python run_extraction.py <body_file> [subject]

Legge il corpo dell'e-mail (HTML o testo) da <body_file> e produce:
  - extraction_io/parsed_email_content.json
"""
import json
import logging
import sys
from pathlib import Path

from mail_extraction.config.settings import LOG_LEVEL

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("run_extraction")

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
ROOT = Path(__file__).parent
IO_DIR = ROOT / "extraction_io"
OUTPUT_FILE = IO_DIR / "parsed_email_content.json"

if len(sys.argv) < 2:
    print("usage: python run_extraction.py <body_file> [subject]", file=sys.stderr)
    sys.exit(2)

BODY_FILE = Path(sys.argv[1])
SUBJECT = sys.argv[2] if len(sys.argv) > 2 else ""

# ---------------------------------------------------------------------------
# Load input
# ---------------------------------------------------------------------------
from mail_extraction.models.email_input import EmailInput

logger.info("Caricamento input: %s", BODY_FILE)
email_input = EmailInput(body=BODY_FILE.read_text(encoding="utf-8"), subject=SUBJECT)
logger.info("body              : %d chars (html=%s)", len(email_input.body), email_input.is_html)

# ---------------------------------------------------------------------------
# Esecuzione pipeline
# ---------------------------------------------------------------------------
from mail_extraction.extraction.pipeline import parse_email_input
from mail_extraction.output.output_builder import build_output

parsed = parse_email_input(email_input)
result = build_output(parsed)

logger.info("Contatti          : %d", len(parsed.contact_info))
logger.info("Voci finanziarie  : %d", len(parsed.financial_items))
logger.info("Voli              : %d", len(parsed.flight_items))
if parsed.warnings:
    logger.warning("Warning: %s", list(parsed.warnings))

# ---------------------------------------------------------------------------
# Salvataggio output
# ---------------------------------------------------------------------------
IO_DIR.mkdir(exist_ok=True)
with open(OUTPUT_FILE, "w", encoding="utf-8") as f:
    json.dump(result, f, ensure_ascii=False, indent=2)

logger.info("Output salvato in: %s", OUTPUT_FILE)

# ---------------------------------------------------------------------------
# Stampa riepilogo a video
# ---------------------------------------------------------------------------
from mail_extraction.output.formatting import format_currency, format_phone

print("\n" + "=" * 70)
print("EMAIL CONTENT EXTRACTION — RIEPILOGO")
print("=" * 70)
print(f"structured  : {result['hasStructuredContent']}")

for contact in parsed.contact_info:
    value = format_phone(contact.value) if contact.kind.value == "phone" else contact.value
    suffix = f" ({contact.label})" if contact.label else ""
    print(f"  {contact.kind.value:8s} → {value}{suffix}")

for item in parsed.financial_items:
    print(f"  {item.kind.value:8s} → {format_currency(item.amount, item.currency)}")

for flight in parsed.flight_items:
    print(f"  flight   → {flight.flight_number or '-'} {flight.route or ''} {flight.date or ''}".rstrip())

if parsed.booking_references:
    print(f"\nBooking refs: {', '.join(parsed.booking_references)}")

if parsed.signature:
    print(f"Signature   : {parsed.signature.name} / {parsed.signature.title or '-'}")

print("=" * 70)
print(f"Output: {OUTPUT_FILE}")
print("=" * 70 + "\n")
