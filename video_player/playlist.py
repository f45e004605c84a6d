"""Playlist state: named playlists of video ids, names unique ignoring case (no UI)."""

import logging

from video_player import outcome
from video_player.library import VideoLibrary
from video_player.outcome import Event, Outcome
from video_player.video import Video

log = logging.getLogger(__name__)


def _key(name: str) -> str:
    return name.upper()


class Playlist:
    """Ordered, duplicate-free list of video ids. Name keeps its original case."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._items: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    def items(self) -> list[str]:
        return list(self._items)

    def contains(self, video_id: str) -> bool:
        return video_id in self._items

    def add(self, video_id: str) -> None:
        self._items.append(video_id)

    def remove(self, video_id: str) -> None:
        self._items.remove(video_id)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Playlist({self._name!r}, {self._items!r})"


class PlaylistStore:
    """Playlists keyed by upper-cased name; videos resolved through the library."""

    def __init__(self, library: VideoLibrary) -> None:
        self._library = library
        self._playlists: dict[str, Playlist] = {}

    def find(self, name: str) -> Playlist | None:
        return self._playlists.get(_key(name))

    def list_all(self) -> list[Playlist]:
        """All playlists sorted by name, ignoring case."""
        return [self._playlists[k] for k in sorted(self._playlists)]

    def videos(self, playlist: Playlist) -> list[Video]:
        """Videos of a playlist in insertion order (flagged ones included)."""
        return [self._library.get_video(vid) for vid in playlist.items()]

    def create(self, name: str) -> Outcome:
        if _key(name) in self._playlists:
            return Outcome.fail(outcome.DUPLICATE_NAME, playlist=name)
        self._playlists[_key(name)] = Playlist(name)
        log.debug("Created playlist %s", name)
        return Outcome([Event(outcome.PLAYLIST_CREATED, playlist=name)])

    def add_video(self, name: str, video_id: str) -> Outcome:
        playlist = self.find(name)
        if playlist is None:
            return Outcome.fail(outcome.PLAYLIST_NOT_FOUND, playlist=name)
        video = self._library.get_video(video_id)
        if video is None:
            return Outcome.fail(outcome.VIDEO_NOT_FOUND, playlist=name)
        # Flag check comes first even when the video is already in the playlist
        if video.flagged:
            return Outcome.fail(
                outcome.VIDEO_FLAGGED, playlist=name, video=video, reason=video.flag_reason
            )
        if playlist.contains(video_id):
            return Outcome.fail(outcome.ALREADY_IN_PLAYLIST, playlist=name, video=video)
        playlist.add(video_id)
        log.debug("Added %s to playlist %s", video_id, playlist.name)
        return Outcome([Event(outcome.PLAYLIST_ADDED, video, playlist=name)])

    def remove_video(self, name: str, video_id: str) -> Outcome:
        playlist = self.find(name)
        if playlist is None:
            return Outcome.fail(outcome.PLAYLIST_NOT_FOUND, playlist=name)
        video = self._library.get_video(video_id)
        if video is None:
            return Outcome.fail(outcome.VIDEO_NOT_FOUND, playlist=name)
        if not playlist.contains(video_id):
            return Outcome.fail(outcome.NOT_IN_PLAYLIST, playlist=name, video=video)
        playlist.remove(video_id)
        log.debug("Removed %s from playlist %s", video_id, playlist.name)
        return Outcome([Event(outcome.PLAYLIST_REMOVED, video, playlist=name)])

    def clear(self, name: str) -> Outcome:
        playlist = self.find(name)
        if playlist is None:
            return Outcome.fail(outcome.PLAYLIST_NOT_FOUND, playlist=name)
        playlist.clear()
        return Outcome([Event(outcome.PLAYLIST_CLEARED, playlist=name)])

    def delete(self, name: str) -> Outcome:
        if self.find(name) is None:
            return Outcome.fail(outcome.PLAYLIST_NOT_FOUND, playlist=name)
        del self._playlists[_key(name)]
        log.debug("Deleted playlist %s", name)
        return Outcome([Event(outcome.PLAYLIST_DELETED, playlist=name)])

    def __len__(self) -> int:
        return len(self._playlists)
