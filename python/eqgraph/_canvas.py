"""Canvas port and the Pillow-backed implementation.

The renderer only talks to :class:`Canvas`. A canvas factory is any callable
``(width, height) -> Canvas``; :class:`PillowCanvas` is the default.
"""

from __future__ import annotations

import abc
import io
from typing import Any, Callable, List, Tuple, Union

from PIL import Image as PILImage
from PIL import ImageDraw, ImageFont

from ._codec import ImageFormat
from ._errors import EncodingError

Color = Tuple[int, int, int]


class Canvas(abc.ABC):
    """A fixed-size raster that the scene is drawn onto."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @abc.abstractmethod
    def allocate_color(self, r: int, g: int, b: int) -> Any:
        """Return a color handle. The first color allocated is the background."""

    @abc.abstractmethod
    def line(self, x1: int, y1: int, x2: int, y2: int, color: Any) -> None:
        ...

    @abc.abstractmethod
    def text(self, x: int, y: int, text: str, color: Any) -> None:
        ...

    @abc.abstractmethod
    def encode(self, fmt: Union[ImageFormat, str]) -> bytes:
        """Encode the raster; raise EncodingError on failure."""

    @property
    @abc.abstractmethod
    def raw(self) -> Any:
        """Underlying image object."""


CanvasFactory = Callable[[int, int], Canvas]


class PillowCanvas(Canvas):
    """RGB canvas drawn with ``PIL.ImageDraw``."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height)
        self._image = PILImage.new("RGB", (width, height), (255, 255, 255))
        self._draw = ImageDraw.Draw(self._image)
        self._font = ImageFont.load_default()
        self._palette: List[Color] = []

    def allocate_color(self, r: int, g: int, b: int) -> Color:
        color = (int(r), int(g), int(b))
        if not self._palette:
            self._draw.rectangle((0, 0, self._width, self._height), fill=color)
        self._palette.append(color)
        return color

    @property
    def palette(self) -> List[Color]:
        return list(self._palette)

    def line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        self._draw.line((x1, y1, x2, y2), fill=color, width=1)

    def text(self, x: int, y: int, text: str, color: Color) -> None:
        self._draw.text((x, y), text, fill=color, font=self._font)

    def encode(self, fmt: Union[ImageFormat, str]) -> bytes:
        fmt = ImageFormat.parse(fmt)
        buf = io.BytesIO()
        try:
            self._image.save(buf, format=fmt.pillow_format)
        except (OSError, ValueError, KeyError) as exc:
            raise EncodingError(f"{fmt.name} encoding failed: {exc}") from exc
        return buf.getvalue()

    @property
    def raw(self) -> PILImage.Image:
        return self._image
