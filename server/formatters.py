"""JSON formatting of decoded sentences and decode errors."""

import json
from dataclasses import fields
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Any

from navcodec import NMEAError, Sentence, encode

__all__ = ["format_error", "format_sentence", "sentence_to_dict"]


def _to_json_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, float):
        return float(value)
    if isinstance(value, tuple):
        return [_to_json_value(item) for item in value]
    return value


def sentence_to_dict(record: Sentence) -> dict[str, Any]:
    """Flatten a record into JSON-compatible values.

    The result carries the sentence ``type``, every record attribute, the
    record's ``valid`` flag and its canonical wire ``line``.
    """
    payload: dict[str, Any] = {"type": record.sentence_type.value}
    for item in fields(record):
        payload[item.name] = _to_json_value(getattr(record, item.name))
    payload["valid"] = record.valid
    payload["line"] = encode(record)
    return payload


def format_sentence(record: Sentence) -> str:
    """Serialize a decoded record into a JSON string for WebSocket transmission."""
    return json.dumps(sentence_to_dict(record))


def format_error(error: NMEAError) -> dict[str, Any]:
    """Describe a decode failure as a JSON-compatible mapping."""
    return {
        "error": type(error).__name__,
        "detail": str(error),
        "field": getattr(error, "field", None),
    }
