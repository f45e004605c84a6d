"""VideoPlayer: one owner for the catalog, playback state and playlists."""

import logging
import random
import threading

from video_player import outcome, search
from video_player.library import VideoLibrary, VideoRecord
from video_player.outcome import Outcome
from video_player.playback import Player
from video_player.playlist import Playlist, PlaylistStore
from video_player.video import Video

log = logging.getLogger(__name__)


class VideoPlayer:
    """Entry point for every core operation.

    All calls take one lock, so a host that shares the player between threads
    sees each operation as atomic. Nothing here blocks or does I/O.
    """

    def __init__(
        self,
        records: list[VideoRecord] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self.library = VideoLibrary(records)
        self.player = Player(self.library, rng)
        self.playlists = PlaylistStore(self.library)
        log.info("Video player ready with %d videos", len(self.library))

    # -- catalog --

    def number_of_videos(self) -> int:
        with self._lock:
            return len(self.library)

    def all_videos(self) -> list[Video]:
        """Unflagged videos sorted by title."""
        with self._lock:
            return sorted(self.library.unflagged(), key=lambda v: v.title)

    # -- playback --

    def play_video(self, video_id: str) -> Outcome:
        with self._lock:
            return self.player.play(video_id)

    def stop_video(self) -> Outcome:
        with self._lock:
            return self.player.stop()

    def play_random_video(self) -> Outcome:
        with self._lock:
            return self.player.play_random()

    def pause_video(self) -> Outcome:
        with self._lock:
            return self.player.pause()

    def continue_video(self) -> Outcome:
        with self._lock:
            return self.player.resume()

    def current(self) -> tuple[Video, bool] | None:
        with self._lock:
            return self.player.current()

    def flag_video(self, video_id: str, reason: str = "") -> Outcome:
        with self._lock:
            return self.player.flag(video_id, reason)

    def allow_video(self, video_id: str) -> Outcome:
        with self._lock:
            return self.player.unflag(video_id)

    # -- playlists --

    def create_playlist(self, name: str) -> Outcome:
        with self._lock:
            return self.playlists.create(name)

    def add_to_playlist(self, name: str, video_id: str) -> Outcome:
        with self._lock:
            return self.playlists.add_video(name, video_id)

    def remove_from_playlist(self, name: str, video_id: str) -> Outcome:
        with self._lock:
            return self.playlists.remove_video(name, video_id)

    def clear_playlist(self, name: str) -> Outcome:
        with self._lock:
            return self.playlists.clear(name)

    def delete_playlist(self, name: str) -> Outcome:
        with self._lock:
            return self.playlists.delete(name)

    def all_playlists(self) -> list[Playlist]:
        with self._lock:
            return self.playlists.list_all()

    def show_playlist(self, name: str) -> Outcome:
        """Videos of a playlist in insertion order as `value`."""
        with self._lock:
            playlist = self.playlists.find(name)
            if playlist is None:
                return Outcome.fail(outcome.PLAYLIST_NOT_FOUND, playlist=name)
            return Outcome(playlist=name, value=self.playlists.videos(playlist))

    # -- search --

    def search_videos(self, term: str) -> Outcome:
        with self._lock:
            return search.search_by_title(self.library, term)

    def search_videos_with_tag(self, tag: str) -> Outcome:
        with self._lock:
            return search.search_by_tag(self.library, tag)

    def select_result(self, results: list[Video], token: str | None) -> Outcome:
        with self._lock:
            return search.select_from_results(self.player, results, token)
