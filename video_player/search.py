"""Search the catalog by title or tag and play a numbered result (no UI)."""

import logging
import re

from video_player import outcome
from video_player.library import VideoLibrary
from video_player.outcome import Outcome
from video_player.playback import Player
from video_player.video import Video

log = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[+-]?[0-9]+")


def _sorted_results(videos: list[Video], term: str) -> Outcome:
    results = sorted(videos, key=lambda v: v.title)
    if not results:
        return Outcome.fail(outcome.NO_RESULTS, reason=term)
    return Outcome(value=results, reason=term)


def search_by_title(library: VideoLibrary, term: str) -> Outcome:
    """Unflagged videos whose title contains term (ignoring case), sorted by title."""
    wanted = term.upper()
    return _sorted_results([v for v in library.unflagged() if wanted in v.title.upper()], term)


def search_by_tag(library: VideoLibrary, tag: str) -> Outcome:
    """Unflagged videos carrying tag (exact match, ignoring case), sorted by title."""
    return _sorted_results([v for v in library.unflagged() if v.has_tag(tag)], tag)


def parse_selection(token: str | None, count: int) -> int | None:
    """1-based selection from a raw answer, or None if it is not a valid number in 1..count."""
    if token is None:
        return None
    token = token.strip()
    if not _NUMBER_RE.fullmatch(token):
        return None
    number = int(token)
    if 1 <= number <= count:
        return number
    return None


def select_from_results(player: Player, results: list[Video], token: str | None) -> Outcome:
    """Play results[n-1] for a valid answer n; anything else is ignored."""
    number = parse_selection(token, len(results))
    if number is None:
        log.debug("Ignoring search selection %r", token)
        return Outcome()
    return player.play(results[number - 1].video_id)
