"""Percent-encoding profile required by OAuth 1.0a.

OAuth base strings are compared byte for byte by the server, so every value
is encoded with the unreserved-only profile of RFC 3986 and then run through
a fixed substitution table that closes the gaps some URL encoders leave open.
"""

from __future__ import annotations

from typing import Any, List, Union
from urllib.parse import quote

_SUBSTITUTIONS = (
    ("+", " "),
    ("!", "%21"),
    ("*", "%2A"),
    ("'", "%27"),
    ("(", "%28"),
    (")", "%29"),
)

Encoded = Union[str, List[str]]


def encode(value: Any) -> Encoded:
    """Encode a scalar, or each element of a list/tuple of scalars."""

    if isinstance(value, (list, tuple)):
        return [_encode_scalar(item) for item in value]
    return _encode_scalar(value)


def _encode_scalar(value: Any) -> str:
    if isinstance(value, bool):
        text = "1" if value else ""
    elif isinstance(value, (str, bytes)):
        text = value
    elif isinstance(value, (int, float)):
        text = str(value)
    else:
        return ""
    encoded = quote(text, safe="")
    for raw, replacement in _SUBSTITUTIONS:
        encoded = encoded.replace(raw, replacement)
    return encoded
