"""Configure application logging to a file and stderr."""

import logging
import os
import sys

from video_player.config import default_log_dir

# Set by setup_logging(); None when the log file could not be opened.
LOG_FILE_PATH: str | None = None


def setup_logging(level: int = logging.WARNING, log_dir: str = "") -> None:
    """Configure the package logger: app.log in log_dir at DEBUG + stderr at level."""
    root = logging.getLogger("video_player")
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    global LOG_FILE_PATH
    LOG_FILE_PATH = None
    if not log_dir:
        log_dir = default_log_dir()
    try:
        os.makedirs(log_dir, exist_ok=True)
        log_path = os.path.join(log_dir, "app.log")
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)
        LOG_FILE_PATH = log_path
    except OSError:
        pass

    eh = logging.StreamHandler(sys.stderr)
    eh.setLevel(level)
    eh.setFormatter(fmt)
    root.addHandler(eh)

    root.info("Logging started; file: %s", LOG_FILE_PATH or "(none)")
