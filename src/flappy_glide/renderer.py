"""
renderer.py: pygame presentation of a GameSnapshot.

The renderer never touches the session; it only reads the snapshot it is given.
Its own state (cached surfaces, cloud scroll offset) is purely cosmetic.
"""

import math
from typing import Tuple

import pygame

from .constants import GameConfig
from .data_models import ActorView, GameSnapshot, ObstacleView, Phase

Color = Tuple[int, int, int]

SKY_TOP: Color = (135, 206, 235)
SKY_BOTTOM: Color = (74, 144, 226)
PIPE_DARK: Color = (34, 139, 34)
PIPE_LIGHT: Color = (50, 205, 50)
PIPE_CAP: Color = (0, 100, 0)
BIRD_LIGHT: Color = (144, 238, 144)
BIRD_BODY: Color = (50, 205, 50)
BEAK: Color = (255, 107, 107)
WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)

CLOUD_SPEED = 0.5
CLOUD_COUNT = 3
PIPE_CAP_HEIGHT = 20


def lerp_color(a: Color, b: Color, t: float) -> Color:
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))


class Renderer:
    """Draws the sky, clouds, pipes, bird and HUD onto a target surface."""

    def __init__(self, config: GameConfig):
        self.config = config
        self.width = int(config.screen_width)
        self.height = int(config.screen_height)
        self.cloud_offset = 0.0

        self.large_font = pygame.font.Font(None, 48)
        self.font = pygame.font.Font(None, 32)
        self.small_font = pygame.font.Font(None, 28)

        self._sky = self._build_sky()
        self._pipe_column = self._build_pipe_column()
        self._clouds = pygame.Surface((self.width, self.height), pygame.SRCALPHA)

    def _build_sky(self) -> pygame.Surface:
        sky = pygame.Surface((self.width, self.height))
        for row in range(self.height):
            color = lerp_color(SKY_TOP, SKY_BOTTOM, row / max(1, self.height - 1))
            pygame.draw.line(sky, color, (0, row), (self.width, row))
        return sky

    def _build_pipe_column(self) -> pygame.Surface:
        """A full-height pipe strip, shaded dark-light-dark across its width."""
        width = int(self.config.pipe_width)
        column = pygame.Surface((width, self.height))
        for col in range(width):
            t = 1 - abs(col / max(1, width - 1) - 0.5) * 2
            color = lerp_color(PIPE_DARK, PIPE_LIGHT, t)
            pygame.draw.line(column, color, (col, 0), (col, self.height))
        return column

    # ---------- Layers ----------

    def draw_background(self, screen: pygame.Surface):
        screen.blit(self._sky, (0, 0))

        self.cloud_offset = (self.cloud_offset + CLOUD_SPEED) % self.width
        clouds = self._clouds
        clouds.fill((0, 0, 0, 0))
        for i in range(CLOUD_COUNT):
            x = (i * 200 - self.cloud_offset) % self.width
            self._draw_cloud(clouds, x, 50 + i * 30)
        screen.blit(clouds, (0, 0))

    @staticmethod
    def _draw_cloud(surface: pygame.Surface, x: float, y: float):
        color = (255, 255, 255, 204)
        for dx, dy, r in ((0, 0, 20), (15, -10, 15), (15, 10, 15), (30, 0, 20)):
            pygame.draw.circle(surface, color, (int(x + dx), int(y + dy)), r)

    def draw_obstacle(self, screen: pygame.Surface, pipe: ObstacleView):
        x = int(pipe.x)
        width = int(pipe.width)
        top_height = int(pipe.gap_top)
        bottom_y = int(pipe.gap_bottom)

        if top_height > 0:
            screen.blit(self._pipe_column, (x, 0), pygame.Rect(0, 0, width, top_height))
        if bottom_y < self.height:
            screen.blit(self._pipe_column, (x, bottom_y),
                        pygame.Rect(0, 0, width, self.height - bottom_y))

        pygame.draw.rect(screen, PIPE_CAP,
                         (x - 2, top_height - PIPE_CAP_HEIGHT, width + 4, PIPE_CAP_HEIGHT))
        pygame.draw.rect(screen, PIPE_CAP, (x - 2, bottom_y, width + 4, PIPE_CAP_HEIGHT))

    def draw_actor(self, screen: pygame.Surface, actor: ActorView):
        w, h = int(actor.width), int(actor.height)
        # Room for the beak and the glide trail on either side of the body
        sprite = pygame.Surface((w + 40, h + 10), pygame.SRCALPHA)
        cx, cy = sprite.get_width() // 2, sprite.get_height() // 2
        body = pygame.Rect(cx - w // 2, cy - h // 2, w, h)

        if actor.gliding:
            trail = pygame.Surface(sprite.get_size(), pygame.SRCALPHA)
            pygame.draw.ellipse(trail, BIRD_LIGHT + (51,), body.move(-10, 0))
            sprite.blit(trail, (0, 0))

        pygame.draw.ellipse(sprite, BIRD_BODY, body)
        pygame.draw.ellipse(sprite, BIRD_LIGHT, body.inflate(-w // 2, -h // 2))
        pygame.draw.circle(sprite, WHITE, (cx + 8, cy - 5), 5)
        pygame.draw.circle(sprite, BLACK, (cx + 10, cy - 5), 2)
        pygame.draw.polygon(sprite, BEAK, [(cx + 12, cy), (cx + 20, cy - 2), (cx + 20, cy + 2)])

        # pygame rotates counter-clockwise; a positive angle means nose down
        rotated = pygame.transform.rotate(sprite, -math.degrees(actor.angle))
        screen.blit(rotated, rotated.get_rect(center=(int(actor.x), int(actor.y))))

    def _shadowed_text(self, screen: pygame.Surface, font: pygame.font.Font, text: str,
                       pos: Tuple[int, int], color: Color = WHITE, centered: bool = False):
        shadow = font.render(text, True, BLACK)
        shadow.set_alpha(128)
        label = font.render(text, True, color)
        rect = label.get_rect(center=pos) if centered else label.get_rect(topleft=pos)
        screen.blit(shadow, rect.move(2, 2))
        screen.blit(label, rect)

    def draw_hud(self, screen: pygame.Surface, snapshot: GameSnapshot):
        self._shadowed_text(screen, self.font, f"Score: {snapshot.score}", (10, 10))
        self._shadowed_text(screen, self.font, f"Best: {snapshot.high_score}", (10, 40))

        mid_x, mid_y = self.width // 2, self.height // 2
        if snapshot.phase is Phase.NOT_STARTED:
            self._shadowed_text(screen, self.font, "Click to start",
                                (mid_x, mid_y), centered=True)
        elif snapshot.phase is Phase.OVER:
            self._shadowed_text(screen, self.large_font, "Game Over",
                                (mid_x, mid_y - 40), color=BEAK, centered=True)
            self._shadowed_text(screen, self.small_font, "Click to restart",
                                (mid_x, mid_y + 40), centered=True)

    def draw(self, screen: pygame.Surface, snapshot: GameSnapshot):
        """Renders one full frame. Does not flip the display."""
        self.draw_background(screen)
        for pipe in snapshot.obstacles:
            self.draw_obstacle(screen, pipe)
        self.draw_actor(screen, snapshot.actor)
        self.draw_hud(screen, snapshot)
