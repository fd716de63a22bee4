"""Transport collaborator: sends a signed request, returns the raw reply."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Protocol, Tuple

import httpx

from .config import ClientSettings
from .request import SignedRequest

logger = logging.getLogger(__name__)

MultipartField = Tuple[str, Tuple[Optional[str], bytes, Optional[str]]]


@dataclass(frozen=True)
class TransportResponse:
    """Status code, verbatim header block and body of one HTTP exchange."""

    status: int
    header_block: str
    body: bytes


class Transport(Protocol):
    def execute(self, request: SignedRequest) -> TransportResponse:
        ...


class HTTPXTransport:
    """Blocking transport on top of :class:`httpx.Client`.

    Redirects are never followed; some endpoints answer with a redirect whose
    ``Location`` header is the actual result.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        *,
        settings: Optional[ClientSettings] = None,
    ):
        settings = settings or ClientSettings()
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=settings.timeout,
            follow_redirects=False,
            headers={"User-Agent": settings.user_agent},
        )

    def execute(self, request: SignedRequest) -> TransportResponse:
        kwargs: dict[str, Any] = {"headers": dict(request.headers)}
        if request.multipart:
            kwargs["files"] = multipart_fields(request.body or {})
        elif request.body is not None:
            kwargs["content"] = str(request.body).encode("utf-8")

        response = self._client.request(
            request.verb, request.url, follow_redirects=False, **kwargs
        )
        logger.debug("%s %s answered %s", request.verb, response.url.path, response.status_code)
        return TransportResponse(
            status=response.status_code,
            header_block=header_block(response),
            body=response.content,
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HTTPXTransport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def multipart_fields(params: Mapping[str, Any]) -> List[MultipartField]:
    """Turn body parameters into ``files=`` parts; bytes become file parts."""

    fields: List[MultipartField] = []
    for name, value in params.items():
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            if isinstance(item, bytes):
                fields.append((name, (name, item, "application/octet-stream")))
            else:
                fields.append((name, (None, _text(item).encode("utf-8"), None)))
    return fields


def header_block(response: httpx.Response) -> str:
    """Rebuild the raw header block, status line first, names in wire case."""

    lines = [f"{response.http_version} {response.status_code} {response.reason_phrase}"]
    for name, value in response.headers.raw:
        lines.append(f"{name.decode('latin-1')}: {value.decode('latin-1')}")
    return "\r\n".join(lines)


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else ""
    if value is None:
        return ""
    return str(value)
