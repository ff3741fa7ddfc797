"""Output formats: names, Pillow codec ids and HTTP content types."""

from __future__ import annotations

import enum
import os
from typing import Union

from ._errors import EncodingError


class ImageFormat(enum.Enum):
    JPEG = "jpeg"
    PNG = "png"

    @property
    def content_type(self) -> str:
        return _CONTENT_TYPES[self]

    @property
    def pillow_format(self) -> str:
        return self.name

    @classmethod
    def parse(cls, value: Union["ImageFormat", str]) -> "ImageFormat":
        """Accept a member or a case-insensitive name (``jpg`` is an alias)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().lstrip(".")
            key = _ALIASES.get(key, key)
            for fmt in cls:
                if fmt.value == key:
                    return fmt
        raise EncodingError(f"unsupported image format {value!r} (expected jpeg or png)")

    @classmethod
    def from_path(cls, path: str) -> "ImageFormat":
        _, ext = os.path.splitext(path)
        if not ext:
            raise EncodingError(f"cannot infer an image format from {path!r}")
        return cls.parse(ext)


_CONTENT_TYPES = {
    ImageFormat.JPEG: "image/jpeg",
    ImageFormat.PNG: "image/png",
}

_ALIASES = {"jpg": "jpeg", "jpe": "jpeg"}
