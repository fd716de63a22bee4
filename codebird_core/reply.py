"""Normalize raw HTTP replies into a uniform result shape.

Bodies are JSON for most endpoints. The OAuth handshake endpoints and some
legacy error replies use ``key=value&...`` instead, and a few endpoints answer
with a redirect whose ``Location`` header carries the result.
"""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field
from types import SimpleNamespace
from typing import Any, Dict, Mapping, Optional, Tuple, Union


class ReturnFormat(enum.Enum):
    """Container shape for decoded replies."""

    OBJECT = "object"
    ARRAY = "array"


_RESERVED = frozenset({"httpstatus", "data", "headers"})


@dataclass(frozen=True)
class NormalizedReply:
    """Decoded reply fields plus the HTTP status code.

    Fields are reachable as items (``reply["id"]``) and as attributes
    (``reply.id``); ``httpstatus`` is always present.
    """

    httpstatus: int
    data: Any
    headers: Mapping[str, str] = field(default_factory=dict)

    def __getitem__(self, key: Any) -> Any:
        if key == "httpstatus":
            return self.httpstatus
        if isinstance(self.data, SimpleNamespace):
            try:
                return vars(self.data)[key]
            except KeyError:
                raise KeyError(key) from None
        return self.data[key]

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name in _RESERVED:
            raise AttributeError(name)
        try:
            return self[name]
        except (KeyError, IndexError, TypeError):
            raise AttributeError(name) from None

    def __contains__(self, key: Any) -> bool:
        if key == "httpstatus":
            return True
        if isinstance(self.data, SimpleNamespace):
            return key in vars(self.data)
        if isinstance(self.data, list):
            return isinstance(key, int) and -len(self.data) <= key < len(self.data)
        return key in self.data

    def get(self, key: Any, default: Any = None) -> Any:
        try:
            return self[key]
        except (KeyError, IndexError, TypeError):
            return default

    def to_dict(self) -> Dict[Any, Any]:
        """Return the fields and ``httpstatus`` as one flat mapping."""

        if isinstance(self.data, SimpleNamespace):
            fields: Dict[Any, Any] = dict(vars(self.data))
        elif isinstance(self.data, list):
            fields = dict(enumerate(self.data))
        else:
            fields = dict(self.data)
        fields["httpstatus"] = self.httpstatus
        return fields


def split_response(raw: Union[str, bytes]) -> Tuple[str, bytes]:
    """Split a raw response into header block and body at the first blank line."""

    data = raw.encode("latin-1") if isinstance(raw, str) else raw
    head, separator, body = data.partition(b"\r\n\r\n")
    if not separator:
        return head.decode("latin-1"), b""
    return head.decode("latin-1"), body


def parse_headers(block: str) -> Dict[str, str]:
    """Parse a header block; the first colon splits, the last duplicate wins."""

    headers: Dict[str, str] = {}
    for line in block.split("\r\n"):
        if not line:
            continue
        name, _, value = line.partition(":")
        headers[name.strip()] = value.strip()
    return headers


def normalize_reply(
    *,
    template: str,
    status: int,
    header_block: str,
    body: Union[str, bytes],
    return_format: ReturnFormat = ReturnFormat.OBJECT,
    redirects: Optional[Mapping[str, str]] = None,
) -> NormalizedReply:
    headers = parse_headers(header_block)
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body

    redirect_field = (redirects or {}).get(template)
    if text == "[]":
        fields: Any = {}
    elif redirect_field is not None:
        location = _header(headers, "Location")
        fields = {redirect_field: location} if location is not None else {}
    else:
        fields = _decode_json(text, return_format)
        if fields is None:
            fields = parse_urlencoded(text)

    if return_format is ReturnFormat.OBJECT and isinstance(fields, dict):
        fields = SimpleNamespace(**fields)
    return NormalizedReply(httpstatus=status, data=fields, headers=headers)


def parse_urlencoded(text: str) -> Dict[str, str]:
    """Recover ``key=value&...`` pairs; bare elements become ``message``."""

    parsed: Dict[str, str] = {}
    if not text:
        return parsed
    for element in text.split("&"):
        if "=" in element:
            key, _, value = element.partition("=")
            parsed[key] = value
        else:
            parsed["message"] = element
    return parsed


def _decode_json(text: str, return_format: ReturnFormat) -> Any:
    hook = _namespace if return_format is ReturnFormat.OBJECT else None
    try:
        decoded = json.loads(text, object_hook=hook)
    except ValueError:
        return None
    if isinstance(decoded, (dict, list, SimpleNamespace)):
        return decoded
    return None


def _namespace(values: Dict[str, Any]) -> SimpleNamespace:
    return SimpleNamespace(**values)


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None
