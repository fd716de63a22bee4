"""Assemble signed requests from resolved method calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from .endpoints import ApiBase, EndpointTable
from .resolver import Resolution
from .signing import OAuthSigner

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

Body = Union[str, Mapping[str, Any], None]


@dataclass(frozen=True)
class SignedRequest:
    """A request ready for the transport; sent exactly once."""

    verb: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Body = None
    multipart: bool = False


def endpoint_url(resolution: Resolution, base: ApiBase, table: EndpointTable) -> str:
    """Pick the base URL for a resolved call and append the format suffix."""

    if resolution.path.startswith(base.oauth_prefix):
        return base.oauth + resolution.path
    if table.is_legacy(resolution.template) and base.legacy:
        return base.legacy + resolution.path + base.suffix
    return base.rest + resolution.path + base.suffix


def build_request(
    resolution: Resolution,
    *,
    signer: OAuthSigner,
    base: ApiBase,
    table: EndpointTable,
    headers: Optional[Mapping[str, str]] = None,
) -> SignedRequest:
    url = endpoint_url(resolution, base, table)
    extra = dict(headers or {})

    if resolution.verb == "GET":
        return SignedRequest(
            verb="GET",
            url=signer.sign("GET", url, resolution.params),
            headers=extra,
        )

    if resolution.multipart:
        # multipart parts stay out of the base string; only OAuth params are signed
        extra["Authorization"] = signer.sign(resolution.verb, url, {}, multipart=True)
        return SignedRequest(
            verb=resolution.verb,
            url=url,
            headers=extra,
            body=dict(resolution.params),
            multipart=True,
        )

    extra["Content-Type"] = FORM_CONTENT_TYPE
    return SignedRequest(
        verb=resolution.verb,
        url=url,
        headers=extra,
        body=signer.sign(resolution.verb, url, resolution.params),
    )
