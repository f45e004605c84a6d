import io
import logging
import random

import pytest
from rich.console import Console

from video_player import VideoPlayer
from video_player.console import ConsoleView

CAT_RECORDS = [
    ("v1", "Amazing Cat Video", ("#cat", "#animal")),
    ("v2", "Another Cat Video", ("#cat",)),
    ("v3", "Angry Cat Video", ("#cat",)),
    ("v4", "Life at Google", ("#google", "#career")),
]


@pytest.fixture
def player():
    """VideoPlayer over the built-in catalog with a fixed random seed."""
    return VideoPlayer(rng=random.Random(1234))


@pytest.fixture
def cat_player():
    """VideoPlayer over CAT_RECORDS with v3 flagged."""
    p = VideoPlayer(CAT_RECORDS, rng=random.Random(1234))
    p.flag_video("v3", "spam")
    return p


def _make_view(answers=()):
    """ConsoleView writing to a buffer and answering from a list, then EOF."""
    out = io.StringIO()
    it = iter(answers)

    def reader():
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return ConsoleView(Console(file=out, width=200), reader), out


@pytest.fixture
def make_view():
    return _make_view


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers setup_logging() attached during a test."""
    yield
    logger = logging.getLogger('video_player')
    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)
