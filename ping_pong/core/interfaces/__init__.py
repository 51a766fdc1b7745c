"""
Core interfaces and protocols for Ping Pong

This module defines abstract interfaces that components must implement,
enabling loose coupling and easier testing/extension.
"""

from ping_pong.core.interfaces.opponent import OpponentController
from ping_pong.core.interfaces.surface import DrawingSurface

__all__ = ["DrawingSurface", "OpponentController"]
