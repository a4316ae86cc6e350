"""A growable sprite atlas that packs small images into one large RGBA image."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Hashable

from .image import Image
from .primitives import BLANK, Rect

GAP = 2
UNIQUENESS_OFFSET = 100000
DEFAULT_SIZE = 512


class FilterMode(enum.Enum):
    """How a texture is sampled when scaled."""

    LINEAR = "linear"
    NEAREST = "nearest"


@dataclass(frozen=True)
class Sprite:
    """The place of one packed image inside the atlas."""

    rect: Rect


class Atlas:
    """Packs sprites row by row, doubling its size when it runs out of room."""

    def __init__(
        self,
        filter: FilterMode = FilterMode.LINEAR,
        width: int = DEFAULT_SIZE,
        height: int = DEFAULT_SIZE,
    ) -> None:
        self.image = Image.gen_image_color(width, height, BLANK)
        self.sprites: dict[Hashable, Sprite] = {}
        self.filter = filter
        self.dirty = False
        self._cursor_x = 0
        self._cursor_y = 0
        self._max_line_height = 0
        self._unique_id = UNIQUENESS_OFFSET

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def new_unique_id(self) -> int:
        """A fresh key that no other call has returned."""
        self._unique_id += 1
        return self._unique_id

    def set_filter(self, filter_mode: FilterMode) -> None:
        """Change the sampling filter of the atlas texture."""
        self.filter = filter_mode

    def texture(self) -> Image:
        """The packed image, marking pending changes as taken."""
        self.dirty = False
        return self.image

    def get(self, key: Hashable) -> Sprite | None:
        """The sprite stored under a key, if any."""
        return self.sprites.get(key)

    def get_uv_rect(self, key: Hashable) -> Rect | None:
        """The sprite's rectangle in normalised 0..1 texture coordinates."""
        sprite = self.get(key)
        if sprite is None:
            return None
        w, h = self.image.width, self.image.height
        rect = sprite.rect
        return Rect(rect.x / w, rect.y / h, rect.w / w, rect.h / h)

    def cache_sprite(self, key: Hashable, sprite: Image) -> None:
        """Pack an image into the atlas under a key, growing the atlas if needed."""
        width, height = sprite.width, sprite.height

        if self._cursor_x + width < self.image.width:
            self._max_line_height = max(self._max_line_height, height)
            x = self._cursor_x + GAP
            self._cursor_x += width + GAP * 2
        else:
            self._cursor_y += self._max_line_height + GAP * 2
            self._cursor_x = width + GAP
            self._max_line_height = height
            x = GAP
        y = self._cursor_y

        if self._cursor_y + height > self.image.height:
            self._grow()
            self.cache_sprite(key, sprite)
            return

        self.dirty = True
        self._blit(sprite, x, y)
        self.sprites[key] = Sprite(Rect(float(x), float(y), float(width), float(height)))

    def _grow(self) -> None:
        sprites = list(self.sprites.items())
        self.sprites.clear()
        self._cursor_x = 0
        self._cursor_y = 0
        self._max_line_height = 0

        old_image = self.image
        self.image = Image.gen_image_color(old_image.width * 2, old_image.height * 2, BLANK)

        for key, placed in sprites:
            self.cache_sprite(key, old_image.sub_image(placed.rect))

    def _blit(self, sprite: Image, x: int, y: int) -> None:
        row_bytes = sprite.width * 4
        target = self.image.bytes
        for row in range(sprite.height):
            start = ((y + row) * self.image.width + x) * 4
            if start + row_bytes > len(target):
                raise IndexError("sprite does not fit in the atlas image")
            source_start = row * row_bytes
            target[start:start + row_bytes] = sprite.bytes[source_start:source_start + row_bytes]