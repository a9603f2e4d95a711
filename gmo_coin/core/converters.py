"""
Field converters for the public API payloads.

The exchange sends prices, sizes and page counters as JSON strings and
timestamps as `YYYY-MM-DDTHH:MM:SS.fffZ`. Each converter raises ValueError on
bad input so pydantic can report the field that failed.
"""
import math
import re
from datetime import datetime, timezone
from typing import Any

# ASCII only: int()/float() would also take "1_000" and full-width digits.
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")
_TIMESTAMP_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}(\.[0-9]{1,6})?Z")

_TIMESTAMP_FORMATS = (
    "%Y-%m-%dT%H:%M:%S.%fZ",
    "%Y-%m-%dT%H:%M:%SZ",
)


def str_to_int(value: Any) -> int:
    # bool is a subclass of int; "true" is never a valid count or price
    if isinstance(value, bool):
        raise ValueError(f"expected an integer string, got boolean {value!r}")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected an integer string, got {type(value).__name__}")
    text = value.strip()
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"could not parse {value!r} as an integer")
    return int(text, 10)


def str_to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"expected a numeric string, got boolean {value!r}")
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not _FLOAT_RE.fullmatch(text):
            raise ValueError(f"could not parse {value!r} as a number")
        result = float(text)
    else:
        raise ValueError(f"expected a numeric string, got {type(value).__name__}")

    if not math.isfinite(result):
        raise ValueError(f"{value!r} is not a finite number")
    return result


def parse_exchange_timestamp(value: Any) -> datetime:
    """
    Converts an exchange timestamp string into an aware UTC datetime.

    Aware datetimes are accepted as-is (normalised to UTC) so models can also
    be built directly from Python values.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise ValueError("naive datetime has no timezone")
        return value.astimezone(timezone.utc)
    if not isinstance(value, str):
        raise ValueError(f"expected a timestamp string, got {type(value).__name__}")
    # strptime alone accepts unpadded fields such as "2019-3-8T9:8:7Z"
    if not _TIMESTAMP_RE.fullmatch(value):
        raise ValueError(f"could not parse {value!r} as an exchange timestamp")

    for fmt in _TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(value, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            continue
    raise ValueError(f"could not parse {value!r} as an exchange timestamp")


def format_exchange_timestamp(value: datetime) -> str:
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
