"""
Input parsers for raw GraphQL arguments.

The parsers return ``None`` instead of raising so that each caller can
pick the API error (and wording) that fits its field.
"""
import re

# ASCII digits only; ``\d`` would also accept other Unicode digit classes.
_INTEGER_ID_RE = re.compile(r"[0-9]+")

# Scheme, an optional host of letters/digits/``:``/``.``, then a path that
# must start with ``/``.  ``http://example.com`` without a path is rejected.
_HTTP_URL_RE = re.compile(r"https?://[A-Za-z0-9:.]*(/.*/?)")

# Largest value of the 32-bit INTEGER primary keys of links and comments.
MAX_RECORD_ID = 2**31 - 1


def parse_integer_id(raw: str) -> int | None:
    """Return *raw* as a non-negative int, or None if it is not all digits."""
    if _INTEGER_ID_RE.fullmatch(raw):
        return int(raw, 10)
    return None


def parse_record_id(raw: str) -> int | None:
    """
    Like ``parse_integer_id``, but also None for ids past ``MAX_RECORD_ID``.

    Such ids can never match a row, and the drivers reject them as bind
    parameters for an INTEGER column.
    """
    value = parse_integer_id(raw)
    if value is None or value > MAX_RECORD_ID:
        return None
    return value


def parse_http_url(raw: str) -> str | None:
    """Return *raw* unchanged if it is an http(s) URL with a path, else None."""
    if _HTTP_URL_RE.fullmatch(raw):
        return raw
    return None
