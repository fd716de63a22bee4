"""Credential and client configuration.

Consumer credentials identify the application and are usually shared by every
client in a process; token credentials identify the acting user and belong to
one client. A process-wide consumer default can be registered once with
:func:`set_consumer_key`, or each client can be handed its own
:class:`ConsumerCredentials`.
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import MissingCredential

VERSION = "0.1.0"

_default_consumer: Optional["ConsumerCredentials"] = None
_default_lock = threading.Lock()


@dataclass(frozen=True)
class ConsumerCredentials:
    """OAuth consumer key and secret of a registered application."""

    key: str
    secret: str

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ConsumerCredentials":
        """Load credentials from ``CODEBIRD_CONSUMER_KEY``/``CODEBIRD_CONSUMER_SECRET``."""

        env = os.environ if environ is None else environ
        key = env.get("CODEBIRD_CONSUMER_KEY", "")
        secret = env.get("CODEBIRD_CONSUMER_SECRET", "")
        if not key or not secret:
            raise MissingCredential(
                "CODEBIRD_CONSUMER_KEY and CODEBIRD_CONSUMER_SECRET must both be set."
            )
        return cls(key=key, secret=secret)


@dataclass(frozen=True)
class TokenCredentials:
    """OAuth request or access token with its secret."""

    token: str
    secret: str = ""


@dataclass(frozen=True)
class ClientSettings:
    """Transport settings for the default HTTP client."""

    timeout: float = 30.0
    user_agent: str = f"codebird-python/{VERSION}"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientSettings":
        env = os.environ if environ is None else environ
        return cls(
            timeout=float(env.get("CODEBIRD_TIMEOUT", cls.timeout)),
            user_agent=env.get("CODEBIRD_USER_AGENT", cls.user_agent),
        )


def set_consumer_key(key: str, secret: str) -> None:
    """Register the process-wide consumer credentials."""

    global _default_consumer
    with _default_lock:
        _default_consumer = ConsumerCredentials(key=key, secret=secret)


def get_consumer_key() -> Optional[ConsumerCredentials]:
    with _default_lock:
        return _default_consumer


def clear_consumer_key() -> None:
    global _default_consumer
    with _default_lock:
        _default_consumer = None
