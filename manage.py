"""
This is the main file to run the game.
It imports the SpaceShooter class from the space_shooter package and runs it.
"""

from space_shooter.app import SpaceShooter
from space_shooter.utils import configure_logging

if __name__ == "__main__":
    configure_logging()
    game = SpaceShooter()
    game.run()
