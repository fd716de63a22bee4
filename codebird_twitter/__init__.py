"""Twitter REST API surface for the codebird engine."""

from .client import PUBLIC_TIMELINE_TTL, Codebird
from .endpoints import GET_METHODS, POST_METHODS, TWITTER_BASE, TWITTER_ENDPOINTS

__all__ = [
    "Codebird",
    "GET_METHODS",
    "POST_METHODS",
    "PUBLIC_TIMELINE_TTL",
    "TWITTER_BASE",
    "TWITTER_ENDPOINTS",
]
