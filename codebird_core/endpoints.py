"""Static endpoint metadata consulted by the resolver and request builder.

An API surface is described entirely by data: which templated paths answer to
which HTTP verb, which of them take multipart bodies, which live on the legacy
base URL, which parameters may name image files to upload, and which replies
are synthesized from a redirect instead of a body. Templated paths spell
placeholders as ``:name`` (``statuses/retweets/:id``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Mapping, Optional, Tuple


@dataclass(frozen=True)
class ApiBase:
    """Base URLs an API surface is served from."""

    rest: str
    oauth: str
    legacy: Optional[str] = None
    oauth_prefix: str = "oauth/"
    suffix: str = ".json"


@dataclass(frozen=True)
class EndpointTable:
    """Verb, transfer-mode and upload metadata keyed by templated path."""

    verbs: Mapping[str, FrozenSet[str]]
    polymorphic: Mapping[str, str] = field(default_factory=dict)
    multipart: FrozenSet[str] = frozenset()
    legacy: FrozenSet[str] = frozenset()
    file_params: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    redirects: Mapping[str, str] = field(default_factory=dict)
    underscore_params: Tuple[str, ...] = ("screen_name",)

    def detect_verb(self, template: str, params: Mapping[str, Any]) -> Optional[str]:
        """Return the HTTP verb for ``template`` or ``None`` when unknown.

        Polymorphic endpoints switch verb when any parameter is supplied, e.g.
        ``account/settings`` reads with GET and writes with POST.
        """

        if params and template in self.polymorphic:
            return self.polymorphic[template]
        for verb, templates in self.verbs.items():
            if template in templates:
                return verb
        return None

    def is_multipart(self, template: str) -> bool:
        return template in self.multipart

    def is_legacy(self, template: str) -> bool:
        return template in self.legacy

    def files_for(self, template: str) -> Tuple[str, ...]:
        return self.file_params.get(template, ())

    def redirect_field(self, template: str) -> Optional[str]:
        return self.redirects.get(template)
