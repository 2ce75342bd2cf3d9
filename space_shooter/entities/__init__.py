"""
Game entities
"""

from __future__ import annotations

from dataclasses import dataclass

from space_shooter.constants import (
    PLAYER_ACCELERATION,
    PLAYER_DAMPING,
    PLAYER_MAX_SPEED,
    PLAYER_SIZE,
    WIDTH,
)
from space_shooter.utils import clamp


@dataclass
class Bullet:
    """
    Bullet entity

    Position is meaningless while the slot is inactive.
    """

    x: float = 0.0
    y: float = 0.0
    active: bool = False


@dataclass
class Enemy:
    """
    Enemy entity
    """

    x: float = 0.0
    y: float = 0.0
    active: bool = False


@dataclass
class Player:  # pylint: disable=too-many-instance-attributes
    """
    Player ship. Only moves horizontally; ``y`` never changes.
    """

    x: float
    y: float
    velocity_x: float = 0.0
    acceleration: float = PLAYER_ACCELERATION
    max_speed: float = PLAYER_MAX_SPEED
    damping: float = PLAYER_DAMPING
    min_x: float = 0.0
    max_x: float = float(WIDTH - PLAYER_SIZE[0])

    def update(self, left: bool, right: bool) -> None:
        """
        Apply one frame of acceleration or damping, then move.

        Left wins when both directions are held.

        :param left: Left key held
        :type left: bool

        :param right: Right key held
        :type right: bool
        """
        if left:
            self.velocity_x -= self.acceleration
        elif right:
            self.velocity_x += self.acceleration
        else:
            self.velocity_x *= self.damping

        self.velocity_x = clamp(self.velocity_x, -self.max_speed, self.max_speed)

        self.x = clamp(self.x + self.velocity_x, self.min_x, self.max_x)

    def stop(self, x: float) -> None:
        """Place the ship at x with no momentum."""
        self.x = x
        self.velocity_x = 0.0
