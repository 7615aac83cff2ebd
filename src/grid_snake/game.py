"""pygame shell: window, input events, HUD and the frame loop."""

from __future__ import annotations

import logging

import pygame

from .config import (
    FONT_NAME,
    FONT_SIZE,
    FPS,
    HIGHSCORE_FILE,
    HUD_HEIGHT,
    KEY_TO_DIRECTION,
    PALETTE,
    START_KEYS,
    WINDOW_SIZE,
    GameSettings,
)
from .controller import GameController
from .highscore import HighScoreStore
from .hud import overlay_lines, score_line
from .model import Phase
from .renderer import Renderer

logger = logging.getLogger(__name__)


class GridSnake:
    """Wires the controller and renderer to a resizable pygame window."""

    def __init__(self, settings: GameSettings | None = None) -> None:
        pygame.init()
        self._window_flags = pygame.RESIZABLE | pygame.DOUBLEBUF
        self.window = pygame.display.set_mode(
            (WINDOW_SIZE, WINDOW_SIZE + HUD_HEIGHT), self._window_flags
        )
        pygame.display.set_caption("Grid Snake")
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        self.big_font = pygame.font.SysFont(FONT_NAME, FONT_SIZE * 2, bold=True)

        self.game = GameController(settings, store=HighScoreStore(HIGHSCORE_FILE))
        self.renderer = Renderer(self.game.settings.grid_size)
        self._swipe_start: tuple[float, float] | None = None

    # --- Input / events -----------------------------------------------

    def handle_events(self) -> bool:
        """Translate window, keyboard and pointer events into commands."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.VIDEORESIZE:
                # SDL2 resizes the display surface itself; the renderer
                # notices the new size on the next frame.
                logger.debug("Window resized to %sx%s", event.w, event.h)
                continue
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                self._handle_key(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._swipe_start = event.pos
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self._finish_swipe(event.pos)
            elif event.type == pygame.FINGERDOWN:
                self._swipe_start = self._finger_pos(event)
            elif event.type == pygame.FINGERUP:
                self._finish_swipe(self._finger_pos(event))
        return True

    def _handle_key(self, key: int) -> None:
        if key in START_KEYS:
            if self.game.phase is Phase.LEVEL_CLEARED:
                self.game.next_level()
            else:
                self.game.start()
            return
        if key == pygame.K_f:
            logger.info("Food sprite: %s", self.renderer.cycle_food())
            return
        if key == pygame.K_c:
            logger.info("Snake color: %s", self.renderer.cycle_preset().label)
            return
        name = KEY_TO_DIRECTION.get(key)
        if name:
            self.game.press_key(name)

    def _finger_pos(self, event: pygame.event.Event) -> tuple[float, float]:
        width, height = self.window.get_size()
        return event.x * width, event.y * height

    def _finish_swipe(self, end: tuple[float, float]) -> None:
        if self._swipe_start is None:
            return
        self.game.swipe(self._swipe_start, end)
        self._swipe_start = None

    # --- Draw ---------------------------------------------------------

    def _board_surface(self) -> pygame.Surface:
        width, height = self.window.get_size()
        if height <= HUD_HEIGHT:
            return self.window
        board = pygame.Rect(0, HUD_HEIGHT, width, height - HUD_HEIGHT)
        return self.window.subsurface(board)

    def _draw_hud(self) -> None:
        width = self.window.get_width()
        self.window.fill(PALETTE["bg_top"], pygame.Rect(0, 0, width, HUD_HEIGHT))
        text = self.font.render(score_line(self.game), True, PALETTE["text"])
        self.window.blit(text, text.get_rect(midleft=(12, HUD_HEIGHT // 2)))

    def _draw_overlay(self, board: pygame.Surface, lines: list[str]) -> None:
        if not lines:
            return
        overlay = pygame.Surface(board.get_size(), pygame.SRCALPHA)
        if self.game.phase is not Phase.RUNNING:
            overlay.fill((5, 5, 15, 140))
        cx, cy = board.get_width() // 2, board.get_height() // 2
        for idx, line in enumerate(lines):
            font = self.big_font if idx == 0 else self.font
            color = PALETTE["accent"] if idx == 0 else PALETTE["text"]
            surf = font.render(line, True, color)
            overlay.blit(surf, surf.get_rect(center=(cx, cy + idx * (FONT_SIZE + 12))))
        board.blit(overlay, (0, 0))

    def draw(self) -> None:
        """Render HUD, board and the phase overlay for the current frame."""
        self._draw_hud()
        board = self._board_surface()
        state = self.game.state
        food = state.food if self.game.phase is not Phase.IDLE else None
        self.renderer.draw(board, state.snake, state.direction, food)
        self._draw_overlay(board, overlay_lines(self.game))

    # --- Main loop ----------------------------------------------------

    def start(self) -> None:
        """Run the frame loop: events, one possible tick, then render."""
        clock = pygame.time.Clock()
        running = True
        logger.info("Grid Snake ready (best=%d)", self.game.high_score)

        while running:
            clock.tick(FPS)
            running = self.handle_events()
            self.game.update(pygame.time.get_ticks() / 1000.0)
            self.draw()
            pygame.display.flip()

        pygame.quit()
