from __future__ import annotations

import pygame

from . import config
from .direction import Direction
from .state import Clear, Fruit, Position, Quit, Turn

KEY_MAP = {
    pygame.K_UP: Direction.NORTH,
    pygame.K_w: Direction.NORTH,
    pygame.K_DOWN: Direction.SOUTH,
    pygame.K_s: Direction.SOUTH,
    pygame.K_LEFT: Direction.WEST,
    pygame.K_a: Direction.WEST,
    pygame.K_RIGHT: Direction.EAST,
    pygame.K_d: Direction.EAST,
}
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)

_FRUIT_GLYPHS = {fruit.glyph for fruit in Fruit}


def translate_events(events) -> list:
    # Unmapped keys are dropped here, so they never displace a queued turn.
    commands = []
    for event in events:
        if event.type == pygame.QUIT:
            commands.append(Quit())
        elif event.type == pygame.KEYDOWN and event.key in QUIT_KEYS:
            commands.append(Quit())
        elif event.type == pygame.KEYDOWN and event.key in KEY_MAP:
            commands.append(Turn(KEY_MAP[event.key]))
    return commands


class WindowFrontend:
    """pygame window laid out as a grid of character cells."""

    def __init__(self, grid_width: int = config.GRID_WIDTH, grid_height: int = config.GRID_HEIGHT):
        pygame.init()
        self.grid_width, self.grid_height = grid_width, grid_height
        self.screen = pygame.display.set_mode(
            (grid_width * config.CELL_SIZE, grid_height * config.CELL_SIZE)
        )
        self.font = pygame.font.SysFont("dejavusansmono", config.CELL_SIZE)

    def bounds(self) -> Position:
        return (self.grid_width - 1, self.grid_height - 1)

    def poll(self) -> list:
        return translate_events(pygame.event.get())

    def wait(self, seconds: float) -> None:
        pygame.time.wait(int(seconds * 1000))

    def draw(self, commands: list, score: int) -> None:
        for command in commands:
            if isinstance(command, Clear):
                self.screen.fill(config.BLACK)
            else:
                self.draw_cell(command.pos, command.glyph, config.COLORS[command.color])
        pygame.display.set_caption(f"fruitsnake  score {score}")
        pygame.display.flip()

    def draw_cell(self, pos: Position, glyph: str, color: tuple[int, int, int]) -> None:
        size = config.CELL_SIZE
        rect = pygame.Rect(pos[0] * size, pos[1] * size, size, size)
        pygame.draw.rect(self.screen, config.BLACK, rect)
        if glyph in _FRUIT_GLYPHS:
            # Most fonts lack the emoji; a disc in the fruit colour reads fine.
            pygame.draw.circle(self.screen, color, rect.center, size // 2 - 2)
        elif glyph.strip():
            text = self.font.render(glyph, True, color)
            self.screen.blit(text, text.get_rect(center=rect.center))

    def close(self) -> None:
        pygame.quit()
