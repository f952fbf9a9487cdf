"""
Pygame frontend for the territory-capture game.

Polls the keyboard, advances the simulation at a fixed tick rate and draws
the public game state. The simulation itself lives in ``axion.game`` and
never imports pygame.

Controls:
- Arrow keys / WASD to steer
- R to restart
- N or ENTER to continue after a win (next level) or a loss (restart)
- ESC to quit
"""

import logging
from typing import Optional

import pygame

from axion.config import GameConfig
from axion.entities import Direction
from axion.game import Game, GamePhase
from axion.grid import Cell

logger = logging.getLogger(__name__)


# ============================================================================
# INPUT MAPPING AND COLORS
# ============================================================================

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}

CONTINUE_KEYS = (pygame.K_n, pygame.K_RETURN)

OPEN_COLOR = (10, 10, 40)
TERRITORY_COLOR = (40, 150, 40)
TRAIL_COLOR = (255, 200, 0)
PLAYER_COLOR = (255, 255, 255)
BALL_COLOR = (200, 50, 50)
HUD_BG = (20, 20, 20)
HUD_TEXT = (230, 230, 230)


def direction_for_key(key: int) -> Optional[Direction]:
    """Translate a pygame key code into a steering direction."""
    return KEY_DIRECTIONS.get(key)


# ============================================================================
# GAME VIEW
# ============================================================================

class GameView:
    """
    Window, input loop and renderer around a ``Game``.

    The view only reads game state between ticks and drives the game through
    ``set_direction``, ``update``, ``reset`` and ``next_level``.
    """

    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None):
        """Initialize pygame, the window and a new game."""
        self.config = config if config is not None else GameConfig()
        self.game = Game(config=self.config, seed=seed)

        pygame.init()
        self.screen = pygame.display.set_mode(
            (self.config.screen_width,
             self.config.screen_height + self.config.HUD_HEIGHT)
        )
        pygame.display.set_caption("Axion")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("consolas", 18, bold=True)
        self.title_font = pygame.font.SysFont("consolas", 42, bold=True)

        self.tick_accumulator = 0
        self.running = True

    def handle_key(self, key: int):
        """Apply one key press to the game."""
        if key == pygame.K_ESCAPE:
            self.running = False
            return

        if key == pygame.K_r:
            self.game.reset()
            return

        if key in CONTINUE_KEYS:
            if self.game.phase == GamePhase.WON:
                self.game.next_level()
            elif self.game.phase == GamePhase.LOST:
                self.game.reset()
            return

        direction = direction_for_key(key)
        if direction is not None and self.game.phase == GamePhase.PLAYING:
            self.game.set_direction(direction)

    def handle_input(self):
        """Drain the pygame event queue."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key)

    def advance(self, elapsed_ms: int) -> int:
        """
        Run as many simulation ticks as the elapsed time allows.

        Returns:
            Number of ticks run
        """
        self.tick_accumulator += elapsed_ms
        ticks = 0
        while self.tick_accumulator >= self.config.TICK_INTERVAL_MS:
            self.tick_accumulator -= self.config.TICK_INTERVAL_MS
            self.game.update()
            ticks += 1
        return ticks

    def _cell_rect(self, x: int, y: int) -> pygame.Rect:
        size = self.config.TILE_SIZE
        return pygame.Rect(x * size, y * size, size, size)

    def render(self):
        """Render the board, actors and HUD."""
        game = self.game
        size = self.config.TILE_SIZE
        self.screen.fill(OPEN_COLOR)

        for y in range(game.height):
            for x in range(game.width):
                cell = game.cell_at(x, y)
                if cell == Cell.TERRITORY:
                    pygame.draw.rect(self.screen, TERRITORY_COLOR, self._cell_rect(x, y))
                elif cell == Cell.TRAIL:
                    pygame.draw.rect(self.screen, TRAIL_COLOR, self._cell_rect(x, y))

        for ball in game.hazards:
            center = (ball.position.x * size + size // 2,
                      ball.position.y * size + size // 2)
            pygame.draw.circle(self.screen, BALL_COLOR, center, size // 2)

        pygame.draw.rect(self.screen, PLAYER_COLOR,
                         self._cell_rect(game.player.position.x, game.player.position.y))

        # HUD
        hud_y = self.config.screen_height
        pygame.draw.rect(self.screen, HUD_BG,
                         pygame.Rect(0, hud_y, self.config.screen_width, self.config.HUD_HEIGHT))
        fill_pct = int(game.filled_percentage * 100)
        target_pct = int(game.target_percentage * 100)
        hud_text = self.font.render(
            f"Level: {game.level}  Score: {game.score}  Filled: {fill_pct}%/{target_pct}%",
            True,
            HUD_TEXT
        )
        self.screen.blit(hud_text, (4, hud_y + 2))

        if game.phase == GamePhase.WON:
            self._render_banner("LEVEL CLEAR!", "Press N for the next level", (100, 255, 100))
        elif game.phase == GamePhase.LOST:
            self._render_banner("GAME OVER", "Press N or R to restart", (255, 100, 100))

        pygame.display.flip()

    def _render_banner(self, title: str, hint: str, color):
        center_x = self.config.screen_width // 2
        center_y = self.config.screen_height // 2

        title_surface = self.title_font.render(title, True, color)
        self.screen.blit(title_surface, title_surface.get_rect(center=(center_x, center_y - 24)))

        hint_surface = self.font.render(hint, True, HUD_TEXT)
        self.screen.blit(hint_surface, hint_surface.get_rect(center=(center_x, center_y + 24)))

    def run(self):
        """
        Main loop.

        Renders at ``FPS`` and advances the simulation once every
        ``TICK_INTERVAL_MS``.
        """
        logger.info("Starting main loop")
        while self.running:
            elapsed = self.clock.tick(self.config.FPS)
            self.handle_input()
            self.advance(elapsed)
            self.render()

        pygame.quit()
        logger.info(f"Exited at level {self.game.level} with score {self.game.score}")
