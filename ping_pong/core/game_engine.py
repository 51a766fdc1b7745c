"""
Ping Pong main game engine
"""

from collections import deque
from collections.abc import Callable
from typing import Any

from ping_pong.core.entities import GameState
from ping_pong.core.interfaces.surface import DrawingSurface
from ping_pong.core.physics import PhysicsEngine
from ping_pong.core.renderer import FrameRenderer


class GameEngine:
    """
    Main engine that orchestrates the game.

    The engine does not schedule itself: a host calls `step` once per
    displayed frame (or `run` to loop until stopped). Everything runs on one
    thread. Pointer input is queued by `submit_pointer` and only applied at
    the start of the next step, so the simulation never sees a paddle move
    in the middle of a frame.
    """

    def __init__(
        self,
        surface: DrawingSurface,
        physics_engine: PhysicsEngine | None = None,
        renderer: FrameRenderer | None = None,
    ):
        self.surface = surface
        self.physics_engine = physics_engine or PhysicsEngine(surface.width, surface.height)
        self.renderer = renderer or FrameRenderer()

        self.running = False
        self.frames = 0
        self._pointer_events: deque[float] = deque()

    def start(self) -> None:
        """Starts the loop; the game state is kept as is"""
        self.running = True

    def stop(self) -> None:
        """Stops the loop; pending input is dropped"""
        self.running = False
        self._pointer_events.clear()

    def is_running(self) -> bool:
        """Checks if the game is running"""
        return self.running

    def submit_pointer(self, pointer_y: float) -> None:
        """Queues a pointer height, relative to the top of the surface"""
        self._pointer_events.append(pointer_y)

    def pending_input(self) -> int:
        return len(self._pointer_events)

    def _drain_input(self) -> None:
        while self._pointer_events:
            self.physics_engine.move_player_to(self._pointer_events.popleft())

    def step(self) -> dict[str, Any]:
        """
        Runs one frame: apply queued input, update physics, draw.

        Returns:
            Dict containing the frame's events, empty when the engine is stopped
        """
        if not self.running:
            return {}

        self._drain_input()
        events = self.physics_engine.update()
        self.renderer.render(self.physics_engine, self.surface)
        self.frames += 1
        return events

    def run(
        self,
        max_frames: int | None = None,
        on_frame: Callable[[dict[str, Any]], None] | None = None,
    ) -> int:
        """
        Steps until stopped or until `max_frames` frames have run.

        Args:
            max_frames: Frame budget, None for no limit
            on_frame: Called with each frame's events; may call `stop`

        Returns:
            Number of frames run by this call
        """
        self.start()
        count = 0
        while self.running and (max_frames is None or count < max_frames):
            events = self.step()
            count += 1
            if on_frame is not None:
                on_frame(events)
        return count

    def get_game_state(self) -> GameState:
        """Returns the complete game state"""
        return self.physics_engine.get_game_state()
