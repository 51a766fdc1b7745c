"""
GUI module for Ping Pong - PyGame interface
"""

from ping_pong.gui.game_app import PingPongApp, main, run_headless
from ping_pong.gui.headless import HeadlessSurface
from ping_pong.gui.human_player import PointerInput
from ping_pong.gui.pygame_surface import PygameSurface

__all__ = [
    "HeadlessSurface",
    "PygameSurface",
    "PointerInput",
    "PingPongApp",
    "main",
    "run_headless",
]
