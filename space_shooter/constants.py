"""
Space Shooter Constants
"""

WIDTH = 800
HEIGHT = 600

FPS = 60
CAPTION = "Space Shooter"

PLAYER_SIZE = (50, 50)
PLAYER_START = (375.0, 500.0)
PLAYER_ACCELERATION = 0.5  # px/frame, per frame
PLAYER_MAX_SPEED = 8.0  # px/frame
PLAYER_DAMPING = 0.9

BULLET_SIZE = (5, 10)
BULLET_SPEED = 12  # px/frame
BULLET_POOL_SIZE = 20
BULLET_OFFSET_X = 22.5  # centres the bullet on the ship

ENEMY_SIZE = (40, 40)
ENEMY_SPEED = 3  # px/frame
ENEMY_POOL_SIZE = 10
MAX_ACTIVE_ENEMIES = 6
ENEMY_SPAWN_Y = -40.0
# Spawns are rejected when an enemy still inside this top band is too close.
SPAWN_BAND_Y = 100
SPAWN_MIN_DISTANCE = 100

SPAWN_INTERVAL = 1000  # ms
SHOT_COOLDOWN = 250  # ms
FPS_SAMPLE_INTERVAL = 1000  # ms

STARTING_LIVES = 3

GRID_COLUMNS = 10
GRID_ROWS = 10

BLUE = (0, 0, 255)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
BLACK = (0, 0, 0)
