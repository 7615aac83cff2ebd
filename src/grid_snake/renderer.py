"""Board rendering: cached background, food sprites and oriented snake pieces."""

from __future__ import annotations

import logging
from typing import Sequence

import pygame

from .config import COLOR_PRESETS, FOOD_OPTIONS, PALETTE, ColorPreset
from .grid import Cell, Direction
from .sprites import Sprite, snake_sprites

logger = logging.getLogger(__name__)

# Counter-clockwise rotation applied to the base piece of each family.
_ROTATIONS: dict[Sprite, tuple[str, int]] = {
    Sprite.HEAD_UP: ("head", 0),
    Sprite.HEAD_LEFT: ("head", 90),
    Sprite.HEAD_DOWN: ("head", 180),
    Sprite.HEAD_RIGHT: ("head", -90),
    Sprite.TAIL_UP: ("tail", 0),
    Sprite.TAIL_LEFT: ("tail", 90),
    Sprite.TAIL_DOWN: ("tail", 180),
    Sprite.TAIL_RIGHT: ("tail", -90),
    Sprite.BODY_VERTICAL: ("straight", 0),
    Sprite.BODY_HORIZONTAL: ("straight", 90),
    Sprite.BODY_TOP_LEFT: ("corner", 0),
    Sprite.BODY_BOTTOM_LEFT: ("corner", 90),
    Sprite.BODY_BOTTOM_RIGHT: ("corner", 180),
    Sprite.BODY_TOP_RIGHT: ("corner", -90),
}


def find_preset(preset_id: str) -> ColorPreset:
    for preset in COLOR_PRESETS:
        if preset.id == preset_id:
            return preset
    raise ValueError(f"unknown color preset {preset_id!r}")


def apply_preset(color: pygame.Color, preset: ColorPreset) -> pygame.Color:
    """Run one color through the preset's contrast, hue, saturation and brightness."""
    out = pygame.Color(color)
    if preset.contrast != 1.0:
        out.r, out.g, out.b = [
            max(0, min(255, int((channel - 128) * preset.contrast + 128)))
            for channel in (out.r, out.g, out.b)
        ]
    if preset.hue or preset.saturation != 1.0 or preset.brightness != 1.0:
        h, s, v, a = out.hsva
        out.hsva = (
            (h + preset.hue) % 360,
            min(100.0, s * preset.saturation),
            min(100.0, v * preset.brightness),
            a,
        )
    return out


class Renderer:
    """Draws a frame from snake, heading and food; never touches game state."""

    def __init__(
        self, grid_size: int, *, preset_id: str = "cyan", food_id: str = "apple"
    ) -> None:
        self.grid_size = grid_size
        self.preset = find_preset(preset_id)
        self.set_food(food_id)
        self.background_builds = 0
        self._background: pygame.Surface | None = None
        self._snake_cache: dict[tuple[Sprite, int, str], pygame.Surface] = {}
        self._food_cache: dict[tuple[str, int], pygame.Surface] = {}

    # --- Customization ------------------------------------------------

    def set_preset(self, preset_id: str) -> None:
        self.preset = find_preset(preset_id)

    def set_food(self, food_id: str) -> None:
        if food_id not in FOOD_OPTIONS:
            raise ValueError(f"unknown food sprite {food_id!r}")
        self.food_id = food_id

    def cycle_preset(self) -> ColorPreset:
        idx = COLOR_PRESETS.index(self.preset)
        self.preset = COLOR_PRESETS[(idx + 1) % len(COLOR_PRESETS)]
        return self.preset

    def cycle_food(self) -> str:
        idx = FOOD_OPTIONS.index(self.food_id)
        self.food_id = FOOD_OPTIONS[(idx + 1) % len(FOOD_OPTIONS)]
        return self.food_id

    # --- Geometry -----------------------------------------------------

    def tile_size(self, size: tuple[int, int]) -> int:
        return max(1, min(size) // self.grid_size)

    def board_origin(self, size: tuple[int, int]) -> tuple[int, int]:
        """Top-left pixel of the board, centred inside ``size``."""
        board = self.tile_size(size) * self.grid_size
        return (size[0] - board) // 2, (size[1] - board) // 2

    def cell_rect(self, cell: Cell, size: tuple[int, int]) -> pygame.Rect:
        tile = self.tile_size(size)
        ox, oy = self.board_origin(size)
        return pygame.Rect(ox + cell[0] * tile, oy + cell[1] * tile, tile, tile)

    # --- Draw ---------------------------------------------------------

    def draw(
        self,
        surface: pygame.Surface,
        snake: Sequence[Cell],
        direction: Direction,
        food: Cell | None,
    ) -> None:
        """Render background, food and snake onto ``surface``."""
        size = surface.get_size()
        surface.blit(self.background(size), (0, 0))
        tile = self.tile_size(size)

        if food is not None:
            surface.blit(self._food_sprite(tile), self.cell_rect(food, size))

        for cell, sprite in zip(snake, snake_sprites(snake, direction)):
            surface.blit(self._snake_sprite(sprite, tile), self.cell_rect(cell, size))

    def background(self, size: tuple[int, int]) -> pygame.Surface:
        """Gradient plus grid lines, rebuilt only when the size changes."""
        if self._background is not None and self._background.get_size() == size:
            return self._background
        self._background = self._build_background(size)
        self.background_builds += 1
        logger.debug("Background rebuilt for %dx%d", *size)
        return self._background

    def _build_background(self, size: tuple[int, int]) -> pygame.Surface:
        width, height = size
        surface = pygame.Surface(size)
        top, bottom = PALETTE["bg_top"], PALETTE["bg_bottom"]
        for y in range(height):
            t = y / max(1, height)
            r = int(top.r + (bottom.r - top.r) * t)
            g = int(top.g + (bottom.g - top.g) * t)
            b = int(top.b + (bottom.b - top.b) * t)
            pygame.draw.line(surface, (r, g, b), (0, y), (width, y))

        tile = self.tile_size(size)
        ox, oy = self.board_origin(size)
        board = tile * self.grid_size
        for i in range(self.grid_size + 1):
            pos = i * tile
            pygame.draw.line(
                surface, PALETTE["grid"], (ox + pos, oy), (ox + pos, oy + board), 1
            )
            pygame.draw.line(
                surface, PALETTE["grid"], (ox, oy + pos), (ox + board, oy + pos), 1
            )
        return surface

    # --- Snake sprites ------------------------------------------------

    def _snake_sprite(self, sprite: Sprite, tile: int) -> pygame.Surface:
        key = (sprite, tile, self.preset.id)
        cached = self._snake_cache.get(key)
        if cached is None:
            family, angle = _ROTATIONS[sprite]
            base = self._build_piece(family, tile)
            cached = pygame.transform.rotate(base, angle) if angle else base
            self._snake_cache[key] = cached
        return cached

    def _build_piece(self, family: str, tile: int) -> pygame.Surface:
        """Draw the upward-facing (or top-left) base piece for a family."""
        body = apply_preset(PALETTE["snake"], self.preset)
        dark = apply_preset(PALETTE["snake_dark"], self.preset)
        belly = apply_preset(PALETTE["snake_belly"], self.preset)

        surface = pygame.Surface((tile, tile), pygame.SRCALPHA)
        pad = max(1, tile // 6)
        width = tile - pad * 2
        stripe = max(1, width // 4)
        center = tile // 2

        if family == "straight":
            pygame.draw.rect(surface, dark, (pad, 0, width, tile))
            pygame.draw.rect(surface, body, (pad + 1, 0, width - 2, tile))
            pygame.draw.rect(surface, belly, (center - stripe // 2, 0, stripe, tile))
        elif family == "corner":
            # Joins the top edge to the left edge.
            pygame.draw.rect(surface, dark, (pad, 0, width, tile - pad))
            pygame.draw.rect(surface, dark, (0, pad, tile - pad, width))
            pygame.draw.rect(surface, body, (pad + 1, 0, width - 2, tile - pad - 1))
            pygame.draw.rect(surface, body, (0, pad + 1, tile - pad - 1, width - 2))
            pygame.draw.rect(surface, belly, (center - stripe // 2, 0, stripe, center))
            pygame.draw.rect(surface, belly, (0, center - stripe // 2, center, stripe))
        elif family == "tail":
            # Tip points up, body attaches along the bottom edge.
            points = [(pad, tile), (tile - pad, tile), (center, pad)]
            pygame.draw.polygon(surface, dark, points)
            inner = [(pad + 2, tile), (tile - pad - 2, tile), (center, pad + 3)]
            pygame.draw.polygon(surface, body, inner)
        elif family == "head":
            # Faces up, neck attaches along the bottom edge.
            rect = pygame.Rect(pad, pad, width, tile - pad)
            radius = max(2, width // 2)
            pygame.draw.rect(
                surface,
                dark,
                rect,
                border_top_left_radius=radius,
                border_top_right_radius=radius,
            )
            pygame.draw.rect(
                surface,
                body,
                rect.inflate(-2, -1).move(0, 1),
                border_top_left_radius=radius,
                border_top_right_radius=radius,
            )
            eye = apply_preset(PALETTE["eye"], self.preset)
            pupil = apply_preset(PALETTE["pupil"], self.preset)
            eye_radius = max(1, tile // 8)
            eye_y = pad + width // 3
            for eye_x in (center - width // 4, center + width // 4):
                pygame.draw.circle(surface, eye, (eye_x, eye_y), eye_radius)
                pygame.draw.circle(
                    surface, pupil, (eye_x, eye_y - 1), max(1, eye_radius // 2)
                )
        else:
            raise ValueError(f"unknown piece family {family!r}")
        return surface

    # --- Food sprites -------------------------------------------------

    def _food_sprite(self, tile: int) -> pygame.Surface:
        key = (self.food_id, tile)
        cached = self._food_cache.get(key)
        if cached is None:
            cached = _FOOD_BUILDERS[self.food_id](tile)
            self._food_cache[key] = cached
        return cached


def _draw_apple(tile: int) -> pygame.Surface:
    sprite = pygame.Surface((tile, tile), pygame.SRCALPHA)
    center = tile // 2
    radius = max(2, tile * 3 // 8)
    base = pygame.Color(235, 64, 82)
    rim = pygame.Color(max(0, base.r - 40), max(0, base.g - 30), max(0, base.b - 30))
    pygame.draw.circle(sprite, rim, (center, center + 1), radius)
    pygame.draw.circle(sprite, base, (center, center + 1), max(1, radius - 1))

    stem = pygame.Rect(0, 0, max(1, tile // 12), max(2, tile // 5))
    stem.midbottom = (center, center - radius + 3)
    pygame.draw.rect(sprite, pygame.Color(80, 50, 25), stem)
    leaf = pygame.Surface((max(2, tile // 3), max(2, tile // 6)), pygame.SRCALPHA)
    pygame.draw.ellipse(leaf, pygame.Color(60, 200, 110), leaf.get_rect())
    leaf = pygame.transform.rotate(leaf, 25)
    sprite.blit(leaf, (center, stem.top - leaf.get_height() // 3))

    shine = max(1, radius // 3)
    highlight = (center - radius // 2, center - radius // 3)
    pygame.draw.circle(sprite, pygame.Color(255, 200, 205), highlight, shine)
    return sprite


def _draw_banana(tile: int) -> pygame.Surface:
    sprite = pygame.Surface((tile, tile), pygame.SRCALPHA)
    pad = max(1, tile // 8)
    outer = pygame.Rect(pad, pad - tile // 3, tile - pad * 2, tile)
    thickness = max(2, tile // 5)
    pygame.draw.arc(sprite, pygame.Color(170, 130, 20), outer, 3.5, 6.0, thickness + 2)
    pygame.draw.arc(sprite, pygame.Color(250, 218, 70), outer, 3.6, 5.9, thickness)
    tip = pygame.Rect(0, 0, max(2, tile // 10), max(2, tile // 10))
    tip.center = (pad + 1, tile // 2)
    pygame.draw.rect(sprite, pygame.Color(90, 60, 20), tip)
    return sprite


def _draw_cherry(tile: int) -> pygame.Surface:
    sprite = pygame.Surface((tile, tile), pygame.SRCALPHA)
    radius = max(2, tile // 5)
    left = (tile // 3, tile - radius - 1)
    right = (tile * 2 // 3, tile - radius - 2)
    top = (tile // 2 + 1, max(1, tile // 8))
    stem_color = pygame.Color(70, 140, 60)
    pygame.draw.line(sprite, stem_color, left, top, max(1, tile // 16))
    pygame.draw.line(sprite, stem_color, right, top, max(1, tile // 16))
    for pos in (left, right):
        pygame.draw.circle(sprite, pygame.Color(150, 10, 40), pos, radius)
        pygame.draw.circle(sprite, pygame.Color(215, 30, 60), pos, max(1, radius - 1))
        pygame.draw.circle(
            sprite,
            pygame.Color(255, 170, 180),
            (pos[0] - radius // 3, pos[1] - radius // 3),
            max(1, radius // 4),
        )
    return sprite


_FOOD_BUILDERS = {
    "apple": _draw_apple,
    "banana": _draw_banana,
    "cherry": _draw_cherry,
}
