#!/usr/bin/env python3
"""
Main script to launch Mini Pong with PyGame graphical interface
"""

import argparse
import logging
import sys

from mini_pong.core.game_loop import GameLoop
from mini_pong.utils.config import game_config
from mini_pong.utils.config import load_config_from_file


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Mini Pong, a two-paddle ball game",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--config", default="mini_pong_config.json", help="JSON configuration file to load"
    )
    parser.add_argument("--fps", type=int, default=None, help="Override the target frame rate")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    load_config_from_file(args.config)
    if args.fps is not None:
        game_config.FPS = args.fps

    # Imported late so that --help works without a display
    from mini_pong.gui.pygame_renderer import PygameClock
    from mini_pong.gui.pygame_renderer import PygameRenderer

    print("=== MINI PONG ===")
    print("Close the window or press ESC to quit")
    print()

    renderer = PygameRenderer()
    try:
        GameLoop(PygameClock(), renderer).run()
    finally:
        renderer.cleanup()
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        print(f"Error: {e}")
        import traceback

        traceback.print_exc()
        sys.exit(1)
