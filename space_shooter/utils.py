"""
Space Shooter utils
"""

from __future__ import annotations

import logging

import pygame

logger = logging.getLogger("space_shooter")


def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure the root logging handler for the game.

    :param level: Logging level
    :type level: int
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.setLevel(level)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into the inclusive range [low, high]."""
    return low if value < low else high if value > high else value


def aabb(ax, ay, aw, ah, bx, by, bw, bh) -> bool:
    """
    Axis-aligned bounding box test.

    Edges that merely touch do not count as an overlap.
    """
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def set_screen(caption: str, width: int, height: int) -> pygame.Surface:
    """
    Set the screen

    :param caption: Caption of the screen
    :type caption: str

    :param width: Width of the screen
    :type width: int

    :param height: Height of the screen
    :type height: int

    :return: pygame.Surface
    """

    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(caption)

    return screen
