"""Structured results of core operations: ordered events or an error tag (no output)."""

import logging
from typing import Any, NamedTuple

from video_player.video import Video

log = logging.getLogger(__name__)

# Error tags
VIDEO_NOT_FOUND = "VideoNotFound"
VIDEO_FLAGGED = "VideoFlagged"
PLAYLIST_NOT_FOUND = "PlaylistNotFound"
DUPLICATE_NAME = "DuplicateName"
ALREADY_IN_PLAYLIST = "AlreadyInPlaylist"
NOT_IN_PLAYLIST = "NotInPlaylist"
NO_ACTIVE_VIDEO = "NoActiveVideo"
ALREADY_PAUSED = "AlreadyPaused"
NOT_PAUSED = "NotPaused"
NO_VIDEOS_AVAILABLE = "NoVideosAvailable"
NO_RESULTS = "NoResults"
ALREADY_FLAGGED = "AlreadyFlagged"
NOT_FLAGGED = "NotFlagged"

# Event kinds
STOPPED = "stopped"
PLAYING = "playing"
PAUSED = "paused"
CONTINUED = "continued"
FLAGGED = "flagged"
UNFLAGGED = "unflagged"
PLAYLIST_CREATED = "playlist_created"
PLAYLIST_ADDED = "playlist_added"
PLAYLIST_REMOVED = "playlist_removed"
PLAYLIST_CLEARED = "playlist_cleared"
PLAYLIST_DELETED = "playlist_deleted"


class Event(NamedTuple):
    kind: str
    video: Video | None = None
    playlist: str | None = None
    reason: str | None = None


class Outcome:
    """What an operation did.

    On success `error` is None and `events` lists what happened, in order.
    On failure `error` is one of the tags above and nothing was mutated;
    `video`, `playlist` and `reason` carry context for rendering the error.
    `value` holds the answer of query operations.
    """

    def __init__(
        self,
        events: list[Event] | None = None,
        error: str | None = None,
        video: Video | None = None,
        playlist: str | None = None,
        reason: str | None = None,
        value: Any = None,
    ) -> None:
        self.events = events or []
        self.error = error
        self.video = video
        self.playlist = playlist
        self.reason = reason
        self.value = value

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def fail(cls, error: str, **context: Any) -> "Outcome":
        video = context.get("video")
        log.debug(
            "Rejected: %s (video=%s, playlist=%s)",
            error,
            video.video_id if video else None,
            context.get("playlist"),
        )
        return cls(error=error, **context)

    def kinds(self) -> list[str]:
        return [e.kind for e in self.events]

    def __repr__(self) -> str:
        if self.error:
            return f"Outcome(error={self.error!r})"
        return f"Outcome(events={self.kinds()!r})"
