import argparse
import logging
import sys

import pygame

from config import *


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Anti-Gravity Snake")
    parser.add_argument("--width", type=int, default=GAME_WIDTH, help="Window width")
    parser.add_argument("--height", type=int, default=GAME_HEIGHT, help="Window height")
    parser.add_argument("--profile", default=PROFILE_FILE, help="Profile JSON file")
    parser.add_argument("--camera", action="store_true",
                        help="Steer with your index finger via the webcam (needs the tracking extra)")
    parser.add_argument("--mute", action="store_true", help="Start with sound off")
    parser.add_argument("--frame-rate-independent", action="store_true",
                        help="Scale movement by elapsed time instead of once per frame")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(message)s")

    from snike import SnikeGame

    try:
        game = SnikeGame(
            width=args.width,
            height=args.height,
            profile_path=args.profile,
            camera=args.camera,
            muted=args.mute,
            frame_rate_independent=args.frame_rate_independent,
        )
    except pygame.error:
        logging.exception("Could not initialise the display")
        pygame.quit()
        sys.exit(1)
    game.run()


if __name__ == "__main__":
    main()
