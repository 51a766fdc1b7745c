"""
Human player input for Ping Pong
"""

import pygame

from ping_pong.core.game_engine import GameEngine


class PointerInput:
    """Feeds PyGame mouse events to the engine for the left paddle"""

    def __init__(self, engine: GameEngine, surface_top: float = 0.0):
        """
        Initialize pointer input

        Args:
            engine: Engine that receives the pointer heights
            surface_top: Window y coordinate of the drawing surface's top edge
        """
        self.engine = engine
        self.surface_top = surface_top

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """
        Handle pygame events

        Returns:
            String indicating special actions (quit) or None
        """
        if event.type == pygame.MOUSEMOTION:
            self.engine.submit_pointer(event.pos[1] - self.surface_top)

        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return "quit"

        elif event.type == pygame.QUIT:
            return "quit"

        return None
