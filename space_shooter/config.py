"""
Game settings
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields

from space_shooter import constants


@dataclass(frozen=True)
class GameSettings:  # pylint: disable=too-many-instance-attributes
    """
    Every tunable of the game loop, defaulting to the compiled-in constants.
    """

    width: int = constants.WIDTH
    height: int = constants.HEIGHT
    fps: int = constants.FPS

    player_width: int = constants.PLAYER_SIZE[0]
    player_height: int = constants.PLAYER_SIZE[1]
    player_start_x: float = constants.PLAYER_START[0]
    player_y: float = constants.PLAYER_START[1]
    acceleration: float = constants.PLAYER_ACCELERATION
    max_speed: float = constants.PLAYER_MAX_SPEED
    damping: float = constants.PLAYER_DAMPING

    bullet_width: int = constants.BULLET_SIZE[0]
    bullet_height: int = constants.BULLET_SIZE[1]
    bullet_speed: float = constants.BULLET_SPEED
    bullet_pool_size: int = constants.BULLET_POOL_SIZE
    bullet_offset_x: float = constants.BULLET_OFFSET_X

    enemy_width: int = constants.ENEMY_SIZE[0]
    enemy_height: int = constants.ENEMY_SIZE[1]
    enemy_speed: float = constants.ENEMY_SPEED
    enemy_pool_size: int = constants.ENEMY_POOL_SIZE
    max_active_enemies: int = constants.MAX_ACTIVE_ENEMIES
    enemy_spawn_y: float = constants.ENEMY_SPAWN_Y
    spawn_band_y: float = constants.SPAWN_BAND_Y
    spawn_min_distance: float = constants.SPAWN_MIN_DISTANCE

    spawn_interval: int = constants.SPAWN_INTERVAL
    shot_cooldown: int = constants.SHOT_COOLDOWN
    fps_sample_interval: int = constants.FPS_SAMPLE_INTERVAL

    starting_lives: int = constants.STARTING_LIVES

    grid_columns: int = constants.GRID_COLUMNS
    grid_rows: int = constants.GRID_ROWS

    def __post_init__(self) -> None:
        """
        Reject settings the game loop cannot run with.

        :raise ValueError: If a value has the wrong type or is out of range
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{f.name} must be a number, got {value!r}")

        positive = (
            "width",
            "height",
            "fps",
            "player_width",
            "player_height",
            "bullet_width",
            "bullet_height",
            "bullet_pool_size",
            "enemy_width",
            "enemy_height",
            "enemy_pool_size",
            "max_active_enemies",
            "spawn_interval",
            "fps_sample_interval",
            "starting_lives",
            "grid_columns",
            "grid_rows",
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")

        if self.max_active_enemies > self.enemy_pool_size:
            raise ValueError(
                f"max_active_enemies ({self.max_active_enemies}) exceeds "
                f"enemy_pool_size ({self.enemy_pool_size})"
            )

        if self.shot_cooldown < 0:
            raise ValueError(f"shot_cooldown must not be negative, got {self.shot_cooldown}")

        if self.enemy_width >= self.width:
            raise ValueError(
                f"enemy_width ({self.enemy_width}) leaves no room to spawn "
                f"in a field {self.width} wide"
            )

        if self.player_width > self.width:
            raise ValueError(
                f"player_width ({self.player_width}) exceeds width ({self.width})"
            )

        if not 0 <= self.player_start_x <= self.max_player_x:
            raise ValueError(
                f"player_start_x ({self.player_start_x}) must lie in "
                f"[0, {self.max_player_x}]"
            )

        # The 3x3 neighbourhood scan only finds an overlap when no entity
        # spans more than one cell.
        cell_width = self.width / self.grid_columns
        cell_height = self.height / self.grid_rows
        if cell_width < max(self.enemy_width, self.bullet_width):
            raise ValueError(
                f"grid cells ({cell_width:g} px wide) are narrower than the "
                f"widest entity; lower grid_columns"
            )
        if cell_height < max(self.enemy_height, self.bullet_height):
            raise ValueError(
                f"grid cells ({cell_height:g} px tall) are shorter than the "
                f"tallest entity; lower grid_rows"
            )

    @property
    def max_player_x(self) -> float:
        """Rightmost x the ship may occupy."""
        return float(self.width - self.player_width)

    @property
    def spawn_x_range(self) -> int:
        """Enemies spawn at an integer x in [0, spawn_x_range)."""
        return self.width - self.enemy_width

    @classmethod
    def from_dict(cls, data: dict) -> GameSettings:
        """
        Build settings from a flat dictionary, falling back to the defaults.

        :param data: Setting overrides
        :type data: dict

        :raise ValueError: If a key is unknown or a value is out of range

        :return: GameSettings
        :rtype: GameSettings
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(unknown)}")
        return cls(**data)

    def to_dict(self) -> dict:
        """Return the settings as a plain dictionary."""
        return asdict(self)
