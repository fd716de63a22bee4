"""Best-effort loading of image files named by upload parameters."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, FrozenSet, Optional, Protocol, Union

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

SUPPORTED_IMAGE_FORMATS: FrozenSet[str] = frozenset({"GIF", "JPEG", "PNG"})


class MediaLoader(Protocol):
    def exists(self, path: PathLike) -> bool:
        ...

    def is_readable(self, path: PathLike) -> bool:
        ...

    def read_all(self, path: PathLike) -> bytes:
        ...

    def sniff_format(self, path: PathLike) -> Optional[str]:
        ...


class LocalMediaLoader:
    """Read media from the local file system and sniff it with Pillow."""

    def exists(self, path: PathLike) -> bool:
        try:
            return Path(path).is_file()
        except (OSError, ValueError):
            # over-long names or embedded NUL bytes
            return False

    def is_readable(self, path: PathLike) -> bool:
        return os.access(path, os.R_OK)

    def read_all(self, path: PathLike) -> bytes:
        return Path(path).read_bytes()

    def sniff_format(self, path: PathLike) -> Optional[str]:
        try:
            with Image.open(path) as image:
                return image.format
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError):
            return None


def load_media(
    value: Any,
    loader: MediaLoader,
    formats: FrozenSet[str] = SUPPORTED_IMAGE_FORMATS,
) -> Optional[bytes]:
    """Return the file content ``value`` points to, or ``None`` to keep ``value``.

    Anything that is not a readable, non-empty image in one of ``formats`` is
    left for the remote API to reject.
    """

    if not isinstance(value, (str, os.PathLike)):
        return None
    if not loader.exists(value) or not loader.is_readable(value):
        logger.debug("upload parameter is not a readable file: %r", value)
        return None
    image_format = loader.sniff_format(value)
    if image_format not in formats:
        logger.debug("upload file %r has unsupported format %s", value, image_format)
        return None
    content = loader.read_all(value)
    if not content:
        return None
    return content
