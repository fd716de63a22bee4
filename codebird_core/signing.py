"""OAuth 1.0a request signing.

The signature is computed once over a canonical base string and then placed
in one of three spots depending on the request:

1. GET requests carry it in the query string of a signed URL.
2. Other urlencoded requests carry it in a signed body string.
3. Multipart requests carry it in an ``Authorization: OAuth`` header.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import itertools
import os
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple

from .config import ConsumerCredentials, TokenCredentials
from .encoding import encode
from .errors import InvalidArgument, MissingCapability, MissingCredential

Pair = Tuple[str, str]

SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"

_nonce_counter = itertools.count()


def nonce(length: int = 8) -> str:
    """Return a hex token that is unique across threads and close calls."""

    if length < 1:
        raise InvalidArgument("Invalid nonce length.")
    seed = (
        f"{time.time_ns()}:{threading.get_ident()}:"
        f"{next(_nonce_counter)}:{os.urandom(8).hex()}"
    )
    token = ""
    block = seed
    while len(token) < length:
        block = hashlib.sha256(block.encode("ascii")).hexdigest()
        token += block
    return token[:length]


@dataclass(frozen=True)
class SignatureBase:
    """Canonical material a signature was computed from."""

    oauth_params: Tuple[Pair, ...]
    params: Tuple[Pair, ...]
    base_string: str
    signature: str

    @property
    def parameter_string(self) -> str:
        return _join(self.params)


class OAuthSigner:
    """Sign requests with consumer and (optionally) token credentials."""

    def __init__(
        self,
        *,
        consumer: Optional[ConsumerCredentials],
        token: Optional[TokenCredentials] = None,
        clock: Callable[[], float] = time.time,
        nonce_factory: Callable[[], str] = nonce,
    ):
        self.consumer = consumer
        self.token = token
        self._clock = clock
        self._nonce_factory = nonce_factory

    def sign(
        self,
        verb: str,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        multipart: bool = False,
    ) -> str:
        """Return a signed URL, a signed body or an Authorization header value."""

        signed = self.signature_base(verb, url, params)
        if multipart:
            return self.authorization_header(signed)
        query = f"{signed.parameter_string}&oauth_signature={encode(signed.signature)}"
        if verb.upper() == "GET":
            return f"{url}?{query}"
        return query

    def signature_base(
        self,
        verb: str,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        *,
        timestamp: Optional[int] = None,
        nonce: Optional[str] = None,
    ) -> SignatureBase:
        oauth_params = self.oauth_parameters(timestamp=timestamp, nonce=nonce)
        pairs = sorted(oauth_params + _flatten(params or {}))
        base_string = "&".join((verb.upper(), encode(url), encode(_join(pairs))))
        return SignatureBase(
            oauth_params=tuple(sorted(oauth_params)),
            params=tuple(pairs),
            base_string=base_string,
            signature=self.digest(base_string),
        )

    def oauth_parameters(
        self, *, timestamp: Optional[int] = None, nonce: Optional[str] = None
    ) -> List[Pair]:
        if self.consumer is None or not self.consumer.key:
            raise MissingCredential("To generate a signature, the consumer key must be set.")
        values = {
            "oauth_consumer_key": self.consumer.key,
            "oauth_version": OAUTH_VERSION,
            "oauth_timestamp": int(self._clock()) if timestamp is None else timestamp,
            "oauth_nonce": self._nonce_factory() if nonce is None else nonce,
            "oauth_signature_method": SIGNATURE_METHOD,
        }
        if self.token is not None and self.token.token:
            values["oauth_token"] = self.token.token
        return [(key, encode(value)) for key, value in values.items()]

    def digest(self, base_string: str) -> str:
        """Base64 HMAC-SHA1 of ``base_string`` keyed by both secrets."""

        if self.consumer is None or not self.consumer.secret:
            raise MissingCredential("To generate a hash, the consumer secret must be set.")
        token_secret = self.token.secret if self.token is not None else ""
        key = f"{encode(self.consumer.secret)}&{encode(token_secret or '')}"
        raw = _hmac_sha1(key.encode("utf-8"), base_string.encode("utf-8"))
        return base64.b64encode(raw).decode("ascii")

    def authorization_header(self, signed: SignatureBase) -> str:
        pairs = sorted(signed.oauth_params + (("oauth_signature", encode(signed.signature)),))
        return "OAuth " + ", ".join(f'{key}="{value}"' for key, value in pairs)


def _hmac_sha1(key: bytes, message: bytes) -> bytes:
    if "sha1" not in hashlib.algorithms_available:
        raise MissingCapability("To generate a hash, HMAC-SHA1 must be available.")
    try:
        return hmac.new(key, message, hashlib.sha1).digest()
    except ValueError as exc:
        # FIPS-restricted OpenSSL builds reject SHA-1 at call time
        raise MissingCapability("To generate a hash, HMAC-SHA1 must be available.") from exc


def _flatten(params: Mapping[str, Any]) -> List[Pair]:
    pairs: List[Pair] = []
    for key, value in params.items():
        encoded_key = encode(str(key))
        encoded = encode(value)
        if isinstance(encoded, list):
            pairs.extend((encoded_key, item) for item in encoded)
        else:
            pairs.append((encoded_key, encoded))
    return pairs


def _join(pairs: Iterable[Pair]) -> str:
    return "&".join(f"{key}={value}" for key, value in pairs)
