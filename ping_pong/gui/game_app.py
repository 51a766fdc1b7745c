"""
Main game application with PyGame GUI
"""

import argparse
import sys
import traceback

import pygame

from ping_pong.core.game_engine import GameEngine
from ping_pong.gui.headless import HeadlessSurface
from ping_pong.gui.human_player import PointerInput
from ping_pong.gui.pygame_surface import PygameSurface
from ping_pong.utils.config import game_config
from ping_pong.utils.config import load_config_from_file


class PingPongApp:
    """Main application class: hosts the engine in a PyGame window"""

    def __init__(self) -> None:
        """Initialize the application"""
        self.surface = PygameSurface()
        self.game_engine = GameEngine(self.surface)
        self.input = PointerInput(self.game_engine)
        self.clock = pygame.time.Clock()

        print("Ping Pong initialized successfully!")
        print("Move the mouse to control the left paddle, ESC to quit")

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if self.input.handle_event(event) == "quit":
                self.game_engine.stop()

    def run(self) -> None:
        """Main application loop"""
        print("Starting Ping Pong...")
        self.game_engine.start()

        try:
            while self.game_engine.is_running():
                self.handle_events()
                if not self.game_engine.is_running():
                    break

                self.game_engine.step()
                self.surface.present()

                # Control frame rate
                self.clock.tick(game_config.FPS)

        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        print("Cleaning up resources...")
        self.game_engine.stop()
        self.surface.cleanup()
        print("Ping Pong closed properly.")


def run_headless(frames: int) -> GameEngine:
    """Plays a number of frames without a display and reports the final state"""
    engine = GameEngine(HeadlessSurface())
    engine.run(max_frames=frames)
    state = engine.get_game_state()
    print(f"Played {state.frame} frames, score {state.score[0]} - {state.score[1]}")
    return engine


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ping Pong against a simple AI")
    parser.add_argument(
        "--config", type=str, default="ping_pong_config.json", help="JSON configuration file"
    )
    parser.add_argument(
        "--headless", action="store_true", help="Run without a window (simulation only)"
    )
    parser.add_argument(
        "--frames", type=int, default=600, help="Number of frames to play in headless mode"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point"""
    args = parse_args(argv)
    if load_config_from_file(args.config):
        print(f"Loaded configuration from {args.config}")

    if args.headless:
        run_headless(args.frames)
        return

    try:
        app = PingPongApp()
        app.run()
    except KeyboardInterrupt:
        print("\nUser interruption")
    except Exception as e:
        print(f"Fatal error: {e}")
        traceback.print_exc()
        sys.exit(1)
    finally:
        # Ensure pygame is properly closed
        pygame.quit()


if __name__ == "__main__":
    main()
