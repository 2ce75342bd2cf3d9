"""
Space Shooter game
"""

from __future__ import annotations

import random
from typing import Optional

import pygame

from space_shooter.config import GameSettings
from space_shooter.constants import BLACK, BLUE, CAPTION, RED, WHITE
from space_shooter.utils import logger, set_screen
from space_shooter.world import FrameInput, ShooterWorld


class Game:
    """
    Game class
    """

    _clock = pygame.time.Clock()

    _carry_on = True

    def __init__(self, name: str, fps: int):
        """
        :param name: Name of the game
        :type name: str

        :param fps: Frames per second the loop is paced at
        :type fps: int
        """
        logger.debug(f"Initializing {name}")
        self._name = name
        self._fps = fps
        pygame.init()

    def _set_screen(self, width: int, height: int) -> pygame.Surface:
        """
        Set the screen

        :param width: Width of the screen
        :type width: int

        :param height: Height of the screen
        :type height: int

        :raise SystemExit: If the display cannot be opened

        :return: pygame.Surface
        :rtype: pygame.Surface
        """

        logger.debug("Setting screen")

        try:
            return set_screen(self._name, width, height)
        except pygame.error as e:
            logger.error(f"Failed to open a {width}x{height} window: {e}")
            raise SystemExit(e) from e

    def handle_events(self):
        """
        Handle the events

        :raise NotImplementedError: Subclasses must implement this method
        """
        raise NotImplementedError("Subclasses must implement this method")

    def handle_game_logic(self):
        """
        Handle the game logic

        :raise NotImplementedError: Subclasses must implement this method
        """
        raise NotImplementedError("Subclasses must implement this method")

    def draw_stuff(self):
        """
        Draw the stuff

        :raise NotImplementedError: Subclasses must implement this method
        """
        raise NotImplementedError("Subclasses must implement this method")

    def run(self):
        """
        Run the game
        """
        logger.info(f"Running {self._name}")

        while self._carry_on:
            self._clock.tick(self._fps)
            self.handle_events()
            self.handle_game_logic()
            self.draw_stuff()

        pygame.quit()


class SpaceShooter(Game):
    """
    Space Shooter class
    """

    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        seed: Optional[int] = None,
    ):
        """
        :param settings: Game settings, defaults when omitted
        :type settings: GameSettings

        :param seed: Seed for enemy placement
        :type seed: int
        """
        self._settings = settings or GameSettings()
        super().__init__(CAPTION, self._settings.fps)

        logger.info(self._settings.to_dict())

        self._screen = self._set_screen(self._settings.width, self._settings.height)
        self._font = pygame.font.Font(None, 20)
        self._big_font = pygame.font.Font(None, 40)

        self._world = ShooterWorld(
            pygame.time.get_ticks(),
            settings=self._settings,
            rng=random.Random(seed),
        )

    def handle_events(self):
        """
        Handle the events
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.debug("Quitting the game")
                self._carry_on = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_r and self._world.game_over:
                    logger.info("Restarting")
                    self._world.reset(pygame.time.get_ticks())

    def handle_game_logic(self):
        """
        Handle the game logic
        """
        keys = pygame.key.get_pressed()
        inputs = FrameInput(
            left=bool(keys[pygame.K_LEFT]),
            right=bool(keys[pygame.K_RIGHT]),
            fire=bool(keys[pygame.K_SPACE]),
        )
        self._world.update(inputs, pygame.time.get_ticks())

    def _draw_text(self, font: pygame.font.Font, text: str, position: tuple):
        """
        Draw a line of white text

        :param font: Font to render with
        :type font: pygame.font.Font

        :param text: Text to draw
        :type text: str

        :param position: Top-left corner on the screen
        :type position: tuple
        """
        self._screen.blit(font.render(text, True, WHITE), position)

    def draw_stuff(self):
        """
        Draw the stuff
        """
        world = self._world
        s = self._settings

        self._screen.fill(BLACK)

        if world.game_over:
            self._draw_text(self._big_font, "Game Over", (300, 250))
            self._draw_text(self._font, f"Final Score: {world.score}", (300, 300))
            self._draw_text(self._font, "Press R to restart", (300, 330))
        else:
            player = world.player
            pygame.draw.rect(
                self._screen,
                BLUE,
                pygame.Rect(player.x, player.y, s.player_width, s.player_height),
            )
            for bullet in world.bullets.active():
                pygame.draw.rect(
                    self._screen,
                    WHITE,
                    pygame.Rect(bullet.x, bullet.y, s.bullet_width, s.bullet_height),
                )
            for enemy in world.enemies.active():
                pygame.draw.rect(
                    self._screen,
                    RED,
                    pygame.Rect(enemy.x, enemy.y, s.enemy_width, s.enemy_height),
                )

            self._draw_text(self._font, f"Score: {world.score}", (10, 10))
            self._draw_text(self._font, f"Lives: {world.lives}", (10, 30))
            self._draw_text(self._font, f"FPS: {world.fps}", (10, 50))

        pygame.display.flip()
