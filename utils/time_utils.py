"""
utils/time_utils.py

Purpose: Timestamp helpers

- Current UTC time for document defaults
- Parsing of stored timestamps (ISO-8601, JavaScript date strings, epoch ms)
- ISO-8601 rendering matching JavaScript's Date.toISOString()
"""

from datetime import datetime, timedelta, timezone
from typing import Union
import re

from dateutil import parser as date_parser

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Date.toString() output: "Mon Apr 01 2024 08:30:00 GMT+0530 (India Standard Time)"
_JS_ZONE_NAME = re.compile(r"\s*\([^)]*\)\s*$")
_JS_GMT_OFFSET = re.compile(r"\bGMT(?=[+-]\d{4}\b)")


def utc_now() -> datetime:
    """
    Returns the current UTC time truncated to milliseconds.

    MongoDB stores dates with millisecond precision, so truncating here
    keeps freshly created documents identical to what a later read returns.
    """
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def to_utc(value: Union[datetime, str, int, float]) -> datetime:
    """
    Normalizes a stored timestamp into an aware UTC datetime.

    Accepts native datetimes (naive ones are UTC, as returned by pymongo),
    ISO-8601 strings and epoch milliseconds.

    Raises:
        ValueError: If the value cannot be interpreted as a timestamp
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, bool):
        raise ValueError(f"Not a timestamp: {value!r}")
    elif isinstance(value, (int, float)):
        dt = EPOCH + timedelta(milliseconds=value)
    elif isinstance(value, str):
        dt = _parse_timestamp_text(value)
    else:
        raise ValueError(f"Not a timestamp: {value!r}")

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_iso8601(value: Union[datetime, str, int, float]) -> str:
    """
    Formats a timestamp as YYYY-MM-DDTHH:MM:SS.mmmZ.
    """
    dt = to_utc(value)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def _parse_timestamp_text(value: str) -> datetime:
    """
    Parses ISO-8601 first, then free-form text such as JavaScript's
    Date.toString().

    dateutil reads "GMT+0530" with POSIX sign inversion, so the GMT
    prefix is dropped to keep the offset as written.
    """
    text = value.strip()
    iso_text = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return datetime.fromisoformat(iso_text)
    except ValueError:
        pass

    text = _JS_GMT_OFFSET.sub("", _JS_ZONE_NAME.sub("", text))
    try:
        return date_parser.parse(text)
    except OverflowError as e:
        raise ValueError(f"Not a timestamp: {value!r}") from e
