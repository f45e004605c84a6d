"""Video player: catalog, playback state machine, playlists and search."""

from video_player.core import VideoPlayer
from video_player.library import DEFAULT_VIDEOS, VideoLibrary
from video_player.outcome import Event, Outcome
from video_player.playback import IDLE, PlaybackState, Player
from video_player.playlist import Playlist, PlaylistStore
from video_player.version import __version__
from video_player.video import Video

__all__ = [
    'DEFAULT_VIDEOS',
    'Event',
    'IDLE',
    'Outcome',
    'PlaybackState',
    'Player',
    'Playlist',
    'PlaylistStore',
    'Video',
    'VideoLibrary',
    'VideoPlayer',
    '__version__',
]
