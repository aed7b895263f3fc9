"""
JSON Schema for the ParsedEmailContent transport payload.

The rendering layer and the result cache both consume this shape
(camelCase keys, amounts as exact decimal strings).
"""
_NULLABLE_STRING: dict = {"type": ["string", "null"]}

CONTACT_INFO_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["kind", "value"],
    "properties": {
        "kind": {"type": "string", "enum": ["phone", "email", "website"]},
        "value": {"type": "string", "minLength": 1},
        "label": _NULLABLE_STRING,
    },
}

FINANCIAL_ITEM_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["kind", "amount", "currency", "label"],
    "properties": {
        "kind": {"type": "string", "enum": ["price", "profit", "fee", "total"]},
        "amount": {"type": "string", "pattern": "^\\d+(\\.\\d+)?$"},
        "currency": {"type": "string", "pattern": "^[A-Z]{3}$"},
        "label": {"type": "string"},
    },
}

FLIGHT_ITEM_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "flightNumber": _NULLABLE_STRING,
        "airline": _NULLABLE_STRING,
        "route": {"type": ["string", "null"], "pattern": "^[A-Z]{3}-[A-Z]{3}$"},
        "departure": _NULLABLE_STRING,
        "arrival": _NULLABLE_STRING,
        "departureTime": _NULLABLE_STRING,
        "arrivalTime": _NULLABLE_STRING,
        "dayOffset": _NULLABLE_STRING,
        "seatCount": {"type": ["integer", "null"], "minimum": 0},
        "date": _NULLABLE_STRING,
        "bookingRef": _NULLABLE_STRING,
        "serviceClass": _NULLABLE_STRING,
    },
}

SIGNATURE_SCHEMA: dict = {
    "type": ["object", "null"],
    "additionalProperties": False,
    "required": ["name", "phones"],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "title": _NULLABLE_STRING,
        "company": _NULLABLE_STRING,
        "phones": {"type": "array", "items": {"type": "string"}},
        "email": _NULLABLE_STRING,
        "website": _NULLABLE_STRING,
        "address": _NULLABLE_STRING,
    },
}

QUOTED_SECTION_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["level", "content"],
    "properties": {
        "level": {"type": "integer", "minimum": 1},
        "content": {"type": "string"},
        "originalSender": _NULLABLE_STRING,
    },
}

THREAD_MESSAGE_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["from", "date", "content", "isQuoted"],
    "properties": {
        "from": {"type": "string"},
        "date": {"type": "string"},
        "content": {"type": "string"},
        "isQuoted": {"type": "boolean"},
    },
}

IMAGE_INFO_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["kind", "description", "inline"],
    "properties": {
        "kind": {"type": "string", "enum": ["photo", "icon", "logo", "attachment"]},
        "description": {"type": "string"},
        "alt": _NULLABLE_STRING,
        "inline": {"type": "boolean"},
        "src": _NULLABLE_STRING,
    },
}

STRUCTURED_HINT_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["kind", "signal", "confidence"],
    "properties": {
        "kind": {"type": "string", "enum": ["booking", "financial"]},
        "signal": {"type": "string"},
        "confidence": {"type": "number", "minimum": 0, "maximum": 1},
    },
}

PARSED_EMAIL_CONTENT_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": [
        "cleanedText",
        "contactInfo",
        "financialItems",
        "flightItems",
        "signature",
        "bookingReferences",
        "quotedSections",
        "threadMessages",
        "images",
        "hasStructuredContent",
    ],
    "properties": {
        "cleanedText": {"type": "string"},
        "contactInfo": {"type": "array", "items": CONTACT_INFO_SCHEMA},
        "financialItems": {"type": "array", "items": FINANCIAL_ITEM_SCHEMA},
        "flightItems": {"type": "array", "items": FLIGHT_ITEM_SCHEMA},
        "signature": SIGNATURE_SCHEMA,
        "bookingReferences": {
            "type": "array",
            "uniqueItems": True,
            "items": {"type": "string", "minLength": 1},
        },
        "quotedSections": {"type": "array", "items": QUOTED_SECTION_SCHEMA},
        "threadMessages": {"type": "array", "items": THREAD_MESSAGE_SCHEMA},
        "images": {"type": "array", "items": IMAGE_INFO_SCHEMA},
        "structuredData": {"type": "array", "items": STRUCTURED_HINT_SCHEMA},
        "hasStructuredContent": {"type": "boolean"},
        "warnings": {"type": "array", "items": {"type": "string"}},
    },
}
