"""Entry point: load config, set up logging, then run the command shell."""

import logging
import random
import sys

from video_player import VideoPlayer
from video_player.commands import CommandShell
from video_player.config import load_config, log_level, validate_config
from video_player.console import ConsoleView
from video_player.log_config import setup_logging


def main():
    config = load_config()
    setup_logging(log_level(config), config["log_dir"])
    log = logging.getLogger("video_player.main")
    for error in validate_config():
        log.warning("Config: %s", error)
    try:
        seed = config["random_seed"]
        player = VideoPlayer(rng=random.Random(seed) if seed is not None else None)
        shell = CommandShell(player, ConsoleView())
    except Exception:
        log.exception("Startup error")
        sys.exit(1)
    shell.run()


if __name__ == '__main__':
    main()
