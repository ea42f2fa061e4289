"""Encoding and tolerant decoding of proposed `(field, newValue)` pairs.

The encoded form is a compact JSON object ``{"field": ..., "newValue": ...}``
stored verbatim on the change request.

Stored payloads sometimes pass through layers that wrap lines or pad
separators with whitespace. ``decode`` runs a fixed defect-repair pass before
strict JSON parsing:

1. drop line breaks
2. collapse ``"  ,  "`` between quoted tokens to ``","``
3. drop whitespace around ``:``

The repair is purely textual. A ``newValue`` that legitimately contains line
breaks, or spaced ``:`` / ``","`` sequences, comes back altered. This is a
known limitation; the repair must not grow into a general fuzzy parser.
"""

from __future__ import annotations

import json
import re
from uuid import UUID

from employee_profile.core.logging import get_logger
from employee_profile.services.change_requests.errors import MalformedPayloadError

logger = get_logger(__name__)

FIELD_KEY = "field"
NEW_VALUE_KEY = "newValue"

ChangeValue = str | int | float

_LINE_BREAKS = re.compile(r"(\r\n|\n|\r)")
_QUOTED_SEPARATOR = re.compile(r'"\s*,\s*"')
_KEY_VALUE_SEPARATOR = re.compile(r"\s*:\s*")


def encode(field: str, new_value: str | int | float | UUID) -> str:
    """Serialize a proposed change; no allow-list check happens here."""
    value: ChangeValue = str(new_value) if isinstance(new_value, UUID) else new_value
    return json.dumps(
        {FIELD_KEY: field, NEW_VALUE_KEY: value},
        separators=(",", ":"),
        ensure_ascii=False,
    )


def strip_line_breaks(raw: str) -> str:
    return _LINE_BREAKS.sub("", raw).strip()


def collapse_quoted_separators(raw: str) -> str:
    return _QUOTED_SEPARATOR.sub('","', raw)


def collapse_key_value_separators(raw: str) -> str:
    return _KEY_VALUE_SEPARATOR.sub(":", raw)


def repair(raw: str) -> str:
    """Apply the formatting repairs in their fixed order."""
    return collapse_key_value_separators(collapse_quoted_separators(strip_line_breaks(raw)))


def _is_change_value(value: object) -> bool:
    # bool is an int subclass but never a valid proposed value.
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def decode(raw: str) -> tuple[str, ChangeValue]:
    """Repair and parse an encoded change into `(field, new_value)`."""
    repaired = repair(raw)
    try:
        parsed = json.loads(repaired)
    except json.JSONDecodeError as exc:
        logger.warning(
            "change_request.decode.invalid_json",
            extra={"raw_length": len(raw), "error": str(exc)},
        )
        raise MalformedPayloadError from exc

    if not isinstance(parsed, dict):
        raise MalformedPayloadError("Encoded change must be a JSON object")
    field = parsed.get(FIELD_KEY)
    if not isinstance(field, str):
        raise MalformedPayloadError(f"Encoded change is missing a string '{FIELD_KEY}'")
    if NEW_VALUE_KEY not in parsed or not _is_change_value(parsed[NEW_VALUE_KEY]):
        raise MalformedPayloadError(
            f"Encoded change is missing a string or number '{NEW_VALUE_KEY}'",
        )
    return field, parsed[NEW_VALUE_KEY]
