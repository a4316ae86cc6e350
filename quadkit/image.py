"""RGBA images held in CPU memory and per-pixel manipulation."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Iterator, Sequence

from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from .primitives import Color, Rect


def _pixels(buffer: bytes | bytearray, count: int) -> Iterator[tuple[int, int, int, int]]:
    view = memoryview(buffer)
    for start in range(0, count * 4, 4):
        yield tuple(view[start:start + 4])


@dataclass
class Image:
    """An RGBA8 image: width * height pixels of four bytes each, row by row."""

    bytes: bytearray = field(default_factory=bytearray)
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        self.bytes = bytearray(self.bytes)

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height}, bytes.len()={len(self.bytes)})"

    @property
    def _pixel_count(self) -> int:
        return self.width * self.height

    @staticmethod
    def empty() -> Image:
        """An image with no pixels."""
        return Image(bytearray(), 0, 0)

    @staticmethod
    def gen_image_color(width: int, height: int, color: Color) -> Image:
        """An image of the given size filled with one colour."""
        return Image(bytearray(color.to_bytes() * (width * height)), width, height)

    @staticmethod
    def from_file_with_format(data: bytes, format: str | None = None) -> Image:
        """Decode an encoded image; the format is guessed when not given."""
        formats = [format.upper()] if format else None
        try:
            with PILImage.open(io.BytesIO(data), formats=formats) as decoded:
                rgba = decoded.convert("RGBA")
        except (UnidentifiedImageError, OSError, ValueError) as exc:
            raise ValueError(f"cannot decode image: {exc}") from exc
        return Image(bytearray(rgba.tobytes()), rgba.width, rgba.height)

    def update(self, colors: Sequence[Color]) -> None:
        """Replace every pixel from a sequence of colours, one per pixel."""
        if len(colors) != self._pixel_count:
            raise ValueError(
                f"expected {self._pixel_count} colours, got {len(colors)}"
            )
        self.bytes[: len(colors) * 4] = b"".join(color.to_bytes() for color in colors)

    def get_image_data(self) -> list[tuple[int, int, int, int]]:
        """The pixels as a list of RGBA tuples."""
        return list(_pixels(self.bytes, self._pixel_count))

    def _offset(self, x: int, y: int) -> int:
        index = y * self.width + x
        if x < 0 or y < 0 or index >= self._pixel_count:
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        return index * 4

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Set one pixel."""
        offset = self._offset(x, y)
        self.bytes[offset:offset + 4] = color.to_bytes()

    def get_pixel(self, x: int, y: int) -> Color:
        """Read one pixel."""
        offset = self._offset(x, y)
        return Color.from_bytes(self.bytes[offset:offset + 4])

    def sub_image(self, rect: Rect) -> Image:
        """Copy the pixels covered by a rectangle into a new image."""
        width, height = int(rect.w), int(rect.h)
        left, top = int(rect.x), int(rect.y)
        stride = self.width * 4
        out = bytearray()
        for row in range(top, top + height):
            start = row * stride + left * 4
            chunk = self.bytes[start:start + width * 4]
            if len(chunk) != width * 4:
                raise IndexError("sub image rectangle exceeds the image")
            out += chunk
        return Image(out, width, height)

    def _combine(self, other: Image, mix: Callable[[Color, Color], Color]) -> None:
        if self._pixel_count != other._pixel_count:
            raise ValueError("images must have the same number of pixels")
        count = len(self.bytes) // 4
        mixed = b"".join(
            mix(Color.from_bytes(mine), Color.from_bytes(theirs)).to_bytes()
            for mine, theirs in zip(_pixels(self.bytes, count), _pixels(other.bytes, count))
        )
        self.bytes[: len(mixed)] = mixed

    def blend(self, other: Image) -> None:
        """Saturated additive blend with another image of the same size."""

        def mix(c1: Color, c2: Color) -> Color:
            high, low = max(c1.a, c2.a), min(c1.a, c2.a)
            return Color(
                min(c1.r * c1.a + c2.r * c2.a, 1.0),
                min(c1.g * c1.a + c2.g * c2.a, 1.0),
                min(c1.b * c1.a + c2.b * c2.a, 1.0),
                high + (1.0 - high) * low,
            )

        self._combine(other, mix)

    def overlay(self, other: Image) -> None:
        """Draw another image of the same size on top of this one."""

        def mix(c1: Color, c2: Color) -> Color:
            return Color(
                min(c1.r * (1.0 - c2.a) + c2.r * c2.a, 1.0),
                min(c1.g * (1.0 - c2.a) + c2.g * c2.a, 1.0),
                min(c1.b * (1.0 - c2.a) + c2.b * c2.a, 1.0),
                min(c1.a + c2.a, 1.0),
            )

        self._combine(other, mix)

    def export_png(self, path: str | Path) -> None:
        """Save as PNG, flipped vertically."""
        stride = self.width * 4
        rows: Iterable[bytes] = (
            bytes(self.bytes[row * stride:(row + 1) * stride])
            for row in reversed(range(self.height))
        )
        flipped = b"".join(rows)
        PILImage.frombytes("RGBA", (self.width, self.height), flipped).save(path, format="PNG")


def load_image(path: str | Path) -> Image:
    """Read and decode an image file."""
    return Image.from_file_with_format(Path(path).read_bytes(), None)