"""Resolve method identifiers into concrete API calls.

A method identifier spells an API path with ``_`` (or ``.``) in place of
``/``, camel case in place of ``_`` and an all-capitals segment for a path
placeholder::

    statuses_update                  -> POST statuses/update
    statuses_retweets_ID {id: 42}    -> GET  statuses/retweets/42
    users_profileImage_SCREEN_NAME   -> GET  users/profile_image/<screen_name>

Identifiers that already contain ``/`` are taken as slash-delimited paths.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .encoding import encode
from .endpoints import EndpointTable
from .errors import MissingParameter, UnknownMethod, UnsupportedParameterShape
from .media import LocalMediaLoader, MediaLoader, load_media

logger = logging.getLogger(__name__)

_TEMPLATED = re.compile(r"[A-Z_]{2,}")
_CAPITAL = re.compile(r"[A-Z]")
_DELIMITERS = re.compile(r"[_.]")

_SCALARS = (str, bytes, int, float)


@dataclass
class Resolution:
    """Outcome of resolving one method identifier."""

    verb: str
    path: str
    template: str
    params: Dict[str, Any]
    multipart: bool = False


class MethodResolver:
    """Map method identifiers to verb, path and body parameters."""

    def __init__(
        self,
        table: EndpointTable,
        *,
        media: Optional[MediaLoader] = None,
        underscore_params: Optional[Sequence[str]] = None,
    ):
        self.table = table
        self.media = media or LocalMediaLoader()
        self.underscore_params = tuple(
            table.underscore_params if underscore_params is None else underscore_params
        )

    def resolve(self, identifier: str, params: Optional[Mapping[str, Any]] = None) -> Resolution:
        bag: Dict[str, Any] = dict(params or {})
        segments = self.split_identifier(identifier)
        if not segments:
            raise UnknownMethod(identifier)

        templated = [bool(_TEMPLATED.fullmatch(segment)) for segment in segments]
        template = "/".join(
            f":{segment.lower()}" if is_template else _uncamel(segment)
            for segment, is_template in zip(segments, templated)
        )

        path_segments = []
        consumed = set()
        for segment, is_template in zip(segments, templated):
            if not is_template:
                path_segments.append(_uncamel(segment))
                continue
            name = segment.lower()
            value = bag.get(name)
            if not isinstance(value, _SCALARS) or isinstance(value, bool):
                raise MissingParameter(template, name)
            path_segments.append(encode(value))
            consumed.add(name)
        for name in consumed:
            del bag[name]
        path = "/".join(path_segments)

        verb = self.table.detect_verb(template, bag)
        if verb is None:
            raise UnknownMethod(template)
        multipart = self.table.is_multipart(template)
        if multipart:
            self._load_files(template, bag)

        logger.debug("resolved %s to %s %s", identifier, verb, template)
        return Resolution(verb=verb, path=path, template=template, params=bag, multipart=multipart)

    def split_identifier(self, identifier: str) -> List[str]:
        if "/" in identifier:
            return [segment for segment in identifier.split("/") if segment]
        method = "/".join(segment for segment in _DELIMITERS.split(identifier) if segment)
        # parameter names containing "_" stay one templated segment
        for name in self.underscore_params:
            templated = name.upper()
            method = method.replace(templated.replace("_", "/"), templated)
        return [segment for segment in method.split("/") if segment]

    def _load_files(self, template: str, params: Dict[str, Any]) -> None:
        for name in self.table.files_for(template):
            if name not in params:
                continue
            value = params[name]
            if isinstance(value, (list, tuple)):
                raise UnsupportedParameterShape(
                    f'Using array parameters is not supported for uploading media ("{name}").'
                )
            content = load_media(value, self.media)
            if content is not None:
                params[name] = content


def _uncamel(segment: str) -> str:
    return _CAPITAL.sub(lambda match: "_" + match.group(0).lower(), segment)
