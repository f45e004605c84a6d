"""Playback state machine: at most one active (playing or paused) video (no UI)."""

import logging
import random
from typing import NamedTuple

from video_player import outcome
from video_player.library import VideoLibrary
from video_player.outcome import Event, Outcome
from video_player.video import Video

log = logging.getLogger(__name__)


class PlaybackState(NamedTuple):
    """Idle when video_id is None; otherwise Playing or Paused(video_id)."""

    video_id: str | None = None
    paused: bool = False

    @property
    def idle(self) -> bool:
        return self.video_id is None


IDLE = PlaybackState()


class Player:
    """Owns the single PlaybackState and the flag operations that may end it."""

    def __init__(self, library: VideoLibrary, rng: random.Random | None = None) -> None:
        self._library = library
        self._rng = rng or random.Random()
        self._state = IDLE

    @property
    def state(self) -> PlaybackState:
        return self._state

    def current(self) -> tuple[Video, bool] | None:
        """(video, paused) for the active video, or None when idle."""
        if self._state.idle:
            return None
        return self._library.get_video(self._state.video_id), self._state.paused

    def _active_video(self) -> Video | None:
        if self._state.idle:
            return None
        return self._library.get_video(self._state.video_id)

    def _stop_active(self) -> list[Event]:
        video = self._active_video()
        if video is None:
            return []
        self._state = IDLE
        log.debug("Stopped %s", video.video_id)
        return [Event(outcome.STOPPED, video)]

    def play(self, video_id: str) -> Outcome:
        video = self._library.get_video(video_id)
        if video is None:
            return Outcome.fail(outcome.VIDEO_NOT_FOUND)
        if video.flagged:
            return Outcome.fail(outcome.VIDEO_FLAGGED, video=video, reason=video.flag_reason)
        events = self._stop_active()
        self._state = PlaybackState(video.video_id)
        log.debug("Playing %s", video.video_id)
        events.append(Event(outcome.PLAYING, video))
        return Outcome(events)

    def stop(self) -> Outcome:
        if self._state.idle:
            return Outcome.fail(outcome.NO_ACTIVE_VIDEO)
        return Outcome(self._stop_active())

    def play_random(self) -> Outcome:
        candidates = self._library.unflagged()
        if not candidates:
            return Outcome.fail(outcome.NO_VIDEOS_AVAILABLE)
        return self.play(self._rng.choice(candidates).video_id)

    def pause(self) -> Outcome:
        video = self._active_video()
        if video is None:
            return Outcome.fail(outcome.NO_ACTIVE_VIDEO)
        if self._state.paused:
            return Outcome.fail(outcome.ALREADY_PAUSED, video=video)
        self._state = PlaybackState(video.video_id, paused=True)
        log.debug("Paused %s", video.video_id)
        return Outcome([Event(outcome.PAUSED, video)])

    def resume(self) -> Outcome:
        video = self._active_video()
        if video is None:
            return Outcome.fail(outcome.NO_ACTIVE_VIDEO)
        if not self._state.paused:
            return Outcome.fail(outcome.NOT_PAUSED, video=video)
        self._state = PlaybackState(video.video_id)
        log.debug("Continued %s", video.video_id)
        return Outcome([Event(outcome.CONTINUED, video)])

    def flag(self, video_id: str, reason: str = "") -> Outcome:
        """Flag a video, stopping it first if it is the active one. Empty reason -> 'Not supplied'."""
        video = self._library.get_video(video_id)
        if video is None:
            return Outcome.fail(outcome.VIDEO_NOT_FOUND)
        if video.flagged:
            return Outcome.fail(outcome.ALREADY_FLAGGED, video=video, reason=video.flag_reason)
        events = self._stop_active() if self._state.video_id == video_id else []
        video.flag(reason)
        log.debug("Flagged %s (reason: %s)", video_id, video.flag_reason)
        events.append(Event(outcome.FLAGGED, video, reason=video.flag_reason))
        return Outcome(events)

    def unflag(self, video_id: str) -> Outcome:
        video = self._library.get_video(video_id)
        if video is None:
            return Outcome.fail(outcome.VIDEO_NOT_FOUND)
        if not video.flagged:
            return Outcome.fail(outcome.NOT_FLAGGED, video=video)
        video.unflag()
        log.debug("Unflagged %s", video_id)
        return Outcome([Event(outcome.UNFLAGGED, video)])
