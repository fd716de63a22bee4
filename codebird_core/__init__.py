"""Codebird core: OAuth 1.0a signing and method routing for REST APIs.

This package holds the generic engine. API surfaces (see ``codebird_twitter``)
contribute an :class:`EndpointTable` and base URLs and reuse everything else.
"""

from .cache import ReplyCache
from .client import Client
from .config import (
    ClientSettings,
    ConsumerCredentials,
    TokenCredentials,
    VERSION,
    clear_consumer_key,
    get_consumer_key,
    set_consumer_key,
)
from .encoding import encode
from .endpoints import ApiBase, EndpointTable
from .errors import (
    CodebirdError,
    InvalidArgument,
    MissingCapability,
    MissingCredential,
    MissingParameter,
    UnknownMethod,
    UnsupportedParameterShape,
)
from .media import SUPPORTED_IMAGE_FORMATS, LocalMediaLoader, MediaLoader, load_media
from .reply import NormalizedReply, ReturnFormat, normalize_reply, parse_headers, split_response
from .request import SignedRequest, build_request, endpoint_url
from .resolver import MethodResolver, Resolution
from .signing import OAuthSigner, SignatureBase, nonce
from .transport import HTTPXTransport, Transport, TransportResponse

__version__ = VERSION

__all__ = [
    "ApiBase",
    "Client",
    "ClientSettings",
    "CodebirdError",
    "ConsumerCredentials",
    "EndpointTable",
    "HTTPXTransport",
    "InvalidArgument",
    "LocalMediaLoader",
    "MediaLoader",
    "MethodResolver",
    "MissingCapability",
    "MissingCredential",
    "MissingParameter",
    "NormalizedReply",
    "OAuthSigner",
    "ReplyCache",
    "Resolution",
    "ReturnFormat",
    "SUPPORTED_IMAGE_FORMATS",
    "SignatureBase",
    "SignedRequest",
    "TokenCredentials",
    "Transport",
    "TransportResponse",
    "UnknownMethod",
    "UnsupportedParameterShape",
    "build_request",
    "clear_consumer_key",
    "encode",
    "endpoint_url",
    "get_consumer_key",
    "load_media",
    "nonce",
    "normalize_reply",
    "parse_headers",
    "set_consumer_key",
    "split_response",
]
