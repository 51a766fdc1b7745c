"""
Opponent AIs for Ping Pong
"""

from ping_pong.ai.simple_ai import ProportionalAI
from ping_pong.ai.simple_ai import StaticAI

__all__ = ["ProportionalAI", "StaticAI"]
