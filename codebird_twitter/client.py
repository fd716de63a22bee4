"""Twitter client with attribute-style method dispatch.

Any attribute that is not defined on the client is treated as a method
identifier, so ``cb.statuses_update(status="hi")`` is the same as
``cb.call("statuses_update", {"status": "hi"})``.
"""

from __future__ import annotations

import threading
from functools import partial
from typing import Any, Callable, Optional

from codebird_core import Client, NormalizedReply, ReplyCache
from codebird_core.client import Params, parse_params

from .endpoints import TWITTER_BASE, TWITTER_ENDPOINTS

PUBLIC_TIMELINE_TTL = 60.0


class Codebird(Client):
    """Client for the Twitter REST API."""

    _instance: Optional["Codebird"] = None
    _instance_lock = threading.Lock()

    def __init__(self, *, public_timeline_cache: Optional[ReplyCache] = None, **kwargs: Any):
        kwargs.setdefault("endpoints", TWITTER_ENDPOINTS)
        kwargs.setdefault("base", TWITTER_BASE)
        super().__init__(**kwargs)
        self._public_timeline: ReplyCache[NormalizedReply] = (
            public_timeline_cache or ReplyCache(ttl=PUBLIC_TIMELINE_TTL)
        )

    @classmethod
    def get_instance(cls) -> "Codebird":
        """Return the shared instance, for processes acting as a single user."""

        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def __getattr__(self, name: str) -> Callable[..., NormalizedReply]:
        if name.startswith("_"):
            raise AttributeError(name)
        return partial(self._dispatch, name)

    def statuses_publicTimeline(self, params: Params = None, **kwargs: Any) -> NormalizedReply:
        """Call ``statuses/public_timeline``; successful replies are reused for a minute."""

        cached = self._public_timeline.get()
        if cached is not None:
            return cached
        reply = self._dispatch("statuses_publicTimeline", params, **kwargs)
        if reply.httpstatus == 200:
            self._public_timeline.put(reply)
        return reply

    def oauth_authenticate(self) -> str:
        return self.authenticate_url()

    def oauth_authorize(self) -> str:
        return self.authorize_url()

    def _dispatch(self, identifier: str, params: Params = None, **kwargs: Any) -> NormalizedReply:
        merged = parse_params(params)
        merged.update(kwargs)
        return self.call(identifier, merged)
