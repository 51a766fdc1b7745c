#!/usr/bin/env python3
"""
Main script to launch Ping Pong with PyGame graphical interface
"""

import importlib.util
import sys

if __name__ == "__main__":
    if importlib.util.find_spec("pygame") is None:
        print("✗ pygame is not installed - pip install pygame")
        sys.exit(1)

    from ping_pong.gui.game_app import main

    print("=== PING PONG ===")
    print()
    print("CONTROLS:")
    print("  Mouse: move the left paddle")
    print("  ESC: Quit")
    print()

    main()
