"""
Space Shooter World

Holds every piece of mutable game state and advances it one frame at a time.
Nothing in here touches the display or the keyboard: the app feeds in a
:class:`FrameInput` and a millisecond timestamp each tick.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from space_shooter.config import GameSettings
from space_shooter.constants import FPS_SAMPLE_INTERVAL
from space_shooter.entities import Bullet, Enemy, Player
from space_shooter.grid import SpatialGrid
from space_shooter.pool import ObjectPool
from space_shooter.utils import aabb, logger


@dataclass(frozen=True)
class FrameInput:
    """
    Key state sampled once per frame
    """

    left: bool = False
    right: bool = False
    fire: bool = False


class FpsCounter:
    """
    Frames counted over the last full sampling window.
    """

    def __init__(self, now: int, interval: int = FPS_SAMPLE_INTERVAL):
        """
        :param now: Current clock reading in milliseconds
        :type now: int

        :param interval: Length of a sampling window in milliseconds
        :type interval: int
        """
        self.interval = interval
        self.fps = 0
        self.frame_count = 0
        self.last_sample_time = now

    def reset(self, now: int) -> None:
        """
        Forget the current reading and start a new window

        :param now: Current clock reading in milliseconds
        :type now: int
        """
        self.fps = 0
        self.frame_count = 0
        self.last_sample_time = now

    def tick(self, now: int) -> None:
        """
        Count one frame, publishing the count once a window has elapsed

        :param now: Current clock reading in milliseconds
        :type now: int
        """
        self.frame_count += 1
        if now - self.last_sample_time >= self.interval:
            self.fps = self.frame_count
            self.frame_count = 0
            self.last_sample_time = now


class ShooterWorld:  # pylint: disable=too-many-instance-attributes
    """
    Player, bullet and enemy pools, score and lives.

    The world is either running or over; once ``game_over`` is set,
    :meth:`update` does nothing until :meth:`reset` is called.
    """

    def __init__(
        self,
        now: int,
        settings: Optional[GameSettings] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        :param now: Current clock reading in milliseconds
        :type now: int

        :param settings: Tunables, defaults when omitted
        :type settings: GameSettings

        :param rng: Source of enemy spawn positions
        :type rng: random.Random
        """
        self.settings = settings or GameSettings()
        self._rng = rng or random.Random()

        s = self.settings
        self.player = Player(
            x=s.player_start_x,
            y=s.player_y,
            acceleration=s.acceleration,
            max_speed=s.max_speed,
            damping=s.damping,
            max_x=s.max_player_x,
        )
        self.bullets: ObjectPool[Bullet] = ObjectPool(Bullet, s.bullet_pool_size)
        self.enemies: ObjectPool[Enemy] = ObjectPool(Enemy, s.enemy_pool_size)
        self.grid = SpatialGrid(s.width, s.height, s.grid_columns, s.grid_rows)
        self.fps_counter = FpsCounter(now, s.fps_sample_interval)

        self.score = 0
        self.lives = s.starting_lives
        self.game_over = False
        self.fire_pressed = False
        self.last_shot_time = now
        self.last_spawn_time = now

    @property
    def fps(self) -> int:
        """
        Frames counted in the last full second

        :return: int
        :rtype: int
        """
        return self.fps_counter.fps

    def reset(self, now: int) -> None:
        """
        Start a fresh round, reusing the existing pools

        :param now: Current clock reading in milliseconds
        :type now: int
        """
        s = self.settings
        self.player.stop(s.player_start_x)
        self.bullets.release_all()
        self.enemies.release_all()
        self.fps_counter.reset(now)

        self.score = 0
        self.lives = s.starting_lives
        self.game_over = False
        self.fire_pressed = False
        self.last_shot_time = now
        self.last_spawn_time = now

        logger.info("World reset")

    def update(self, inputs: FrameInput, now: int) -> None:
        """
        Advance the simulation by one frame

        :param inputs: Keys held this frame
        :type inputs: FrameInput

        :param now: Current clock reading in milliseconds
        :type now: int
        """
        if self.game_over:
            return

        self.player.update(inputs.left, inputs.right)
        self._handle_shooting(inputs.fire, now)
        self._advance_bullets()

        if (
            now - self.last_spawn_time >= self.settings.spawn_interval
            and self.enemies.active_count() < self.settings.max_active_enemies
        ):
            self.spawn_enemy()
            self.last_spawn_time = now

        self._advance_enemies()

        self.grid.rebuild(self.enemies)
        self._resolve_collisions()

        self.fps_counter.tick(now)

    def _handle_shooting(self, fire: bool, now: int) -> None:
        if not fire:
            self.fire_pressed = False
            return

        if self.fire_pressed or now - self.last_shot_time < self.settings.shot_cooldown:
            return

        self.spawn_bullet()
        self.last_shot_time = now
        self.fire_pressed = True

    def spawn_bullet(self) -> Optional[Bullet]:
        """
        Launch a bullet from the ship's nose.

        :return: The bullet, or None when every slot is in flight
        :rtype: Optional[Bullet]
        """
        bullet = self.bullets.acquire()
        if bullet is None:
            logger.debug("Bullet pool exhausted, shot dropped")
            return None

        bullet.x = self.player.x + self.settings.bullet_offset_x
        bullet.y = self.player.y
        bullet.active = True
        logger.debug(f"Shooting bullet at ({bullet.x}, {bullet.y})")
        return bullet

    def spawn_enemy(self) -> Optional[Enemy]:
        """
        Drop a new enemy in at a random column.

        The attempt is abandoned, not retried, when the column is too close
        to an enemy still near the top of the screen.

        :return: The enemy, or None when nothing spawned
        :rtype: Optional[Enemy]
        """
        s = self.settings
        enemy = self.enemies.acquire()
        if enemy is None:
            return None

        spawn_x = self._rng.randrange(s.spawn_x_range)
        crowded = any(
            abs(other.x - spawn_x) < s.spawn_min_distance and other.y < s.spawn_band_y
            for other in self.enemies.active()
        )
        if crowded:
            logger.debug(f"Spawn at x={spawn_x} rejected, too close to another enemy")
            return None

        enemy.x = float(spawn_x)
        enemy.y = s.enemy_spawn_y
        enemy.active = True
        logger.debug(f"Enemy spawned at x={spawn_x}")
        return enemy

    def _advance_bullets(self) -> None:
        for bullet in self.bullets.active():
            bullet.y -= self.settings.bullet_speed
            if bullet.y < 0:
                bullet.active = False

    def _advance_enemies(self) -> None:
        for enemy in self.enemies.active():
            enemy.y += self.settings.enemy_speed
            if enemy.y > self.settings.height:
                enemy.active = False
                self.lives -= 1
                logger.debug(f"Enemy got through, lives left: {self.lives}")
                if self.lives <= 0:
                    self.game_over = True
                    logger.info(f"Game over, final score: {self.score}")

    def _resolve_collisions(self) -> None:
        for bullet in self.bullets.active():
            enemy = self._first_hit(bullet)
            if enemy is None:
                continue

            bullet.active = False
            enemy.active = False
            self.score += 1
            logger.debug(f"Hit! Score: {self.score}")

    def _first_hit(self, bullet: Bullet) -> Optional[Enemy]:
        s = self.settings
        for enemy in self.grid.nearby(bullet.x, bullet.y):
            if enemy.active and aabb(
                bullet.x,
                bullet.y,
                s.bullet_width,
                s.bullet_height,
                enemy.x,
                enemy.y,
                s.enemy_width,
                s.enemy_height,
            ):
                return enemy
        return None
