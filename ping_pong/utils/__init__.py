"""
Utilities of the Ping Pong game
"""

from ping_pong.utils.config import GameConfig
from ping_pong.utils.config import game_config

__all__ = ["game_config", "GameConfig"]
