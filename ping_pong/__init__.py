"""
Ping Pong: mouse-controlled Pong against a proportional-control AI
"""

__version__ = "1.0.0"
