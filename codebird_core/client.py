"""Dispatcher: the single entry point every API method goes through."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Mapping, Optional, Union
from urllib.parse import parse_qsl

from . import config
from .config import ClientSettings, ConsumerCredentials, TokenCredentials
from .encoding import encode
from .endpoints import ApiBase, EndpointTable
from .errors import MissingCredential
from .media import MediaLoader
from .reply import NormalizedReply, ReturnFormat, normalize_reply
from .request import build_request
from .resolver import MethodResolver, Resolution
from .signing import OAuthSigner, nonce
from .transport import HTTPXTransport, Transport

logger = logging.getLogger(__name__)

Params = Union[Mapping[str, Any], str, None]


class Client:
    """Sign and send calls for any API surface described by an endpoint table."""

    def __init__(
        self,
        *,
        endpoints: EndpointTable,
        base: ApiBase,
        consumer: Optional[ConsumerCredentials] = None,
        transport: Optional[Transport] = None,
        settings: Optional[ClientSettings] = None,
        return_format: ReturnFormat = ReturnFormat.OBJECT,
        media: Optional[MediaLoader] = None,
        clock: Callable[[], float] = time.time,
        nonce_factory: Callable[[], str] = nonce,
    ):
        self.endpoints = endpoints
        self.base = base
        self._consumer = consumer
        self._token: Optional[TokenCredentials] = None
        self._return_format = return_format
        self._transport = transport or HTTPXTransport(settings=settings)
        self._resolver = MethodResolver(endpoints, media=media)
        self._clock = clock
        self._nonce_factory = nonce_factory

    @staticmethod
    def set_consumer_key(key: str, secret: str) -> None:
        """Set the consumer credentials shared by clients built without their own."""

        config.set_consumer_key(key, secret)

    @property
    def consumer(self) -> Optional[ConsumerCredentials]:
        return self._consumer or config.get_consumer_key()

    @property
    def token(self) -> Optional[TokenCredentials]:
        return self._token

    @property
    def return_format(self) -> ReturnFormat:
        return self._return_format

    def set_token(self, token: str, secret: str) -> None:
        self._token = TokenCredentials(token=token, secret=secret)

    def set_return_format(self, return_format: Union[ReturnFormat, str]) -> None:
        self._return_format = ReturnFormat(return_format)

    def get_version(self) -> str:
        return config.VERSION

    def signer(self) -> OAuthSigner:
        return OAuthSigner(
            consumer=self.consumer,
            token=self._token,
            clock=self._clock,
            nonce_factory=self._nonce_factory,
        )

    def resolve(self, identifier: str, params: Params = None) -> Resolution:
        return self._resolver.resolve(identifier, parse_params(params))

    def call(self, identifier: str, params: Params = None) -> NormalizedReply:
        """Resolve, sign and send ``identifier`` and return the normalized reply."""

        resolution = self.resolve(identifier, params)
        request = build_request(
            resolution,
            signer=self.signer(),
            base=self.base,
            table=self.endpoints,
        )
        response = self._transport.execute(request)
        reply = normalize_reply(
            template=resolution.template,
            status=response.status,
            header_block=response.header_block,
            body=response.body,
            return_format=self._return_format,
            redirects=self.endpoints.redirects,
        )
        logger.info("%s %s -> %s", resolution.verb, resolution.template, reply.httpstatus)
        return reply

    def authenticate_url(self) -> str:
        return self._handshake_url("authenticate")

    def authorize_url(self) -> str:
        return self._handshake_url("authorize")

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _handshake_url(self, action: str) -> str:
        if self._token is None or not self._token.token:
            raise MissingCredential(f"To get the {action} URL, the OAuth token must be set.")
        return f"{self.base.oauth}{self.base.oauth_prefix}{action}?oauth_token={encode(self._token.token)}"


def parse_params(params: Params) -> Dict[str, Any]:
    if params is None:
        return {}
    if isinstance(params, str):
        return dict(parse_qsl(params, keep_blank_values=True))
    return dict(params)
