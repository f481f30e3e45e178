#!/usr/bin/env python3
"""
flappy_client.py

pygame window, frame clock and input mapping around a GameSession.
"""

import argparse
import logging
import random
from typing import List, Optional

import pygame

from .constants import RENDER_FPS, GameConfig
from .renderer import Renderer
from .session import GameSession

logger = logging.getLogger(__name__)


def is_primary_action(event: pygame.event.Event) -> bool:
    """Click, touch or space all count as the single game input."""
    if event.type == pygame.FINGERDOWN:
        return True
    if event.type == pygame.MOUSEBUTTONDOWN:
        # SDL mirrors every tap as a mouse click; the FINGERDOWN already counted
        return not getattr(event, "touch", False)
    return event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE


def is_quit(event: pygame.event.Event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE


class FlappyClient:
    def __init__(self, session: GameSession, fps: int = RENDER_FPS):
        pygame.init()
        self.session = session
        self.fps = fps
        config = session.config
        self.screen = pygame.display.set_mode(
            (int(config.screen_width), int(config.screen_height)))
        pygame.display.set_caption("Flappy Glide")

        self.renderer = Renderer(config)
        self.clock = pygame.time.Clock()

    def handle_events(self) -> bool:
        """Feeds pending input to the session. Returns False when the player quits."""
        running = True
        for event in pygame.event.get():
            if is_quit(event):
                running = False
            elif is_primary_action(event):
                self.session.primary_action()
        return running

    def run(self):
        """The main client execution loop: input, update, render, flip."""
        logger.info("Starting game loop at %d FPS", self.fps)
        try:
            running = True
            while running:
                dt = self.clock.tick(self.fps) / 1000.0
                running = self.handle_events()
                snapshot = self.session.update(dt)
                self.renderer.draw(self.screen, snapshot)
                pygame.display.flip()
        finally:
            logger.info("Session closed. Best score: %d",
                        max(self.session.score, self.session.high_score))
            pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flappy-glide",
        description="Flap through the pipes. Click, tap or press space.",
    )
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the pipe gap layout")
    parser.add_argument("--fps", type=int, default=RENDER_FPS,
                        help=f"Frames per second (default: {RENDER_FPS})")
    parser.add_argument("--end-on-out-of-bounds", action="store_true",
                        help="End the run when the bird leaves the screen vertically")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity")
    return parser


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    if args.fps <= 0:
        raise SystemExit("--fps must be positive")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GameConfig(end_on_out_of_bounds=args.end_on_out_of_bounds)
    session = GameSession(config, rng=random.Random(args.seed))
    FlappyClient(session, fps=args.fps).run()


if __name__ == "__main__":
    main()
