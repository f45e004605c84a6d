"""Interactive command shell: parse one command per line and drive a VideoPlayer."""

import logging
from typing import Callable

from video_player.console import (
    ConsoleView,
    render_playing,
    render_playlist,
    render_playlists,
    render_results,
    render_videos,
)
from video_player.core import VideoPlayer
from video_player.outcome import Outcome

log = logging.getLogger(__name__)

PROMPT = "VP> "
WELCOME = (
    "Hello and welcome to the video player, what would you like to do?",
    "Enter HELP for list of available commands or EXIT to terminate.",
)
GOODBYE = "Video player has now terminated its execution. Thank you and goodbye!"
INVALID = "Please enter a valid command, type HELP for a list of available commands."

HELP_TEXT = """Available commands:
    NUMBER_OF_VIDEOS - Shows how many videos are in the library.
    SHOW_ALL_VIDEOS - Lists all videos from the library.
    PLAY <video_id> - Plays specified video.
    PLAY_RANDOM - Plays a random video from the library.
    STOP - Stop the current video.
    PAUSE - Pause the current video.
    CONTINUE - Resume the current paused video.
    SHOW_PLAYING - Displays the title, video_id, video tags and paused status of the video that is currently playing (or paused).
    CREATE_PLAYLIST <playlist_name> - Creates a new (empty) playlist with the provided name.
    ADD_TO_PLAYLIST <playlist_name> <video_id> - Adds the requested video to the playlist.
    REMOVE_FROM_PLAYLIST <playlist_name> <video_id> - Removes the specified video from the specified playlist
    CLEAR_PLAYLIST <playlist_name> - Removes all the videos from the playlist.
    DELETE_PLAYLIST <playlist_name> - Deletes the playlist.
    SHOW_PLAYLIST <playlist_name> - List all the videos in this playlist.
    SHOW_ALL_PLAYLISTS - Display all the available playlists.
    SEARCH_VIDEOS <search_term> - Display all the videos whose titles contain the search_term.
    SEARCH_VIDEOS_WITH_TAG <tag_name> - Display all videos whose tags contains the provided tag.
    FLAG_VIDEO <video_id> <flag_reason> - Mark a video as flagged.
    ALLOW_VIDEO <video_id> - Removes a flag from a video.
    HELP - Displays help.
    EXIT - Terminates the program execution.
"""


class CommandShell:
    """Maps command words to VideoPlayer calls and prints what happened."""

    def __init__(self, player: VideoPlayer, view: ConsoleView) -> None:
        self.player = player
        self.view = view
        # name -> (handler, min args, max args or None for unbounded, usage)
        self._commands: dict[str, tuple[Callable[..., None], int, int | None, str]] = {
            "NUMBER_OF_VIDEOS": (self._number_of_videos, 0, 0, ""),
            "SHOW_ALL_VIDEOS": (self._show_all_videos, 0, 0, ""),
            "PLAY": (self._play, 1, 1, "video_id"),
            "PLAY_RANDOM": (self._play_random, 0, 0, ""),
            "STOP": (self._stop, 0, 0, ""),
            "PAUSE": (self._pause, 0, 0, ""),
            "CONTINUE": (self._continue, 0, 0, ""),
            "SHOW_PLAYING": (self._show_playing, 0, 0, ""),
            "CREATE_PLAYLIST": (self._create_playlist, 1, 1, "playlist_name"),
            "ADD_TO_PLAYLIST": (self._add_to_playlist, 2, 2, "playlist_name video_id"),
            "REMOVE_FROM_PLAYLIST": (self._remove_from_playlist, 2, 2, "playlist_name video_id"),
            "CLEAR_PLAYLIST": (self._clear_playlist, 1, 1, "playlist_name"),
            "DELETE_PLAYLIST": (self._delete_playlist, 1, 1, "playlist_name"),
            "SHOW_PLAYLIST": (self._show_playlist, 1, 1, "playlist_name"),
            "SHOW_ALL_PLAYLISTS": (self._show_all_playlists, 0, 0, ""),
            "SEARCH_VIDEOS": (self._search_videos, 1, 1, "search_term"),
            "SEARCH_VIDEOS_WITH_TAG": (self._search_videos_with_tag, 1, 1, "tag_name"),
            "FLAG_VIDEO": (self._flag_video, 1, None, "video_id [flag_reason]"),
            "ALLOW_VIDEO": (self._allow_video, 1, 1, "video_id"),
            "HELP": (self._help, 0, 0, ""),
        }

    def execute(self, line: str) -> bool:
        """Run one command line. Returns False when the shell should exit."""
        words = line.split()
        if not words:
            return True
        name, args = words[0].upper(), words[1:]
        if name == "EXIT":
            return False
        entry = self._commands.get(name)
        if entry is None:
            log.debug("Unknown command %r", name)
            self.view.emit([INVALID])
            return True
        handler, min_args, max_args, usage = entry
        if len(args) < min_args or (max_args is not None and len(args) > max_args):
            if usage:
                self.view.emit([f"Please enter {name} command followed by {usage}."])
            else:
                self.view.emit([f"{name} command takes no arguments."])
            return True
        handler(*args)
        return True

    def run(self) -> None:
        """Read and execute commands until EXIT or end of input."""
        self.view.emit(list(WELCOME))
        while True:
            self.view.console.print(PROMPT, end="", markup=False, highlight=False, soft_wrap=True)
            line = self.view.read_line()
            if line is None or not self.execute(line):
                break
        self.view.emit([GOODBYE])

    # -- handlers --

    def _number_of_videos(self) -> None:
        self.view.emit([f"{self.player.number_of_videos()} videos in the library"])

    def _show_all_videos(self) -> None:
        self.view.emit(render_videos(self.player.all_videos()))

    def _play(self, video_id: str) -> None:
        self.view.show("play", self.player.play_video(video_id))

    def _play_random(self) -> None:
        self.view.show("play", self.player.play_random_video())

    def _stop(self) -> None:
        self.view.show("stop", self.player.stop_video())

    def _pause(self) -> None:
        self.view.show("pause", self.player.pause_video())

    def _continue(self) -> None:
        self.view.show("continue", self.player.continue_video())

    def _show_playing(self) -> None:
        self.view.emit(render_playing(self.player.current()))

    def _create_playlist(self, name: str) -> None:
        self.view.show("create", self.player.create_playlist(name))

    def _add_to_playlist(self, name: str, video_id: str) -> None:
        self.view.show("add", self.player.add_to_playlist(name, video_id))

    def _remove_from_playlist(self, name: str, video_id: str) -> None:
        self.view.show("remove", self.player.remove_from_playlist(name, video_id))

    def _clear_playlist(self, name: str) -> None:
        self.view.show("clear", self.player.clear_playlist(name))

    def _delete_playlist(self, name: str) -> None:
        self.view.show("delete", self.player.delete_playlist(name))

    def _show_playlist(self, name: str) -> None:
        self.view.emit(render_playlist(self.player.show_playlist(name)))

    def _show_all_playlists(self) -> None:
        self.view.emit(render_playlists(self.player.all_playlists()))

    def _search_videos(self, term: str) -> None:
        self._search(self.player.search_videos(term))

    def _search_videos_with_tag(self, tag: str) -> None:
        self._search(self.player.search_videos_with_tag(tag))

    def _search(self, result: Outcome) -> None:
        self.view.emit(render_results(result))
        if not result.ok:
            return
        answer = self.view.read_line()
        self.view.show("play", self.player.select_result(result.value, answer))

    def _flag_video(self, video_id: str, *reason: str) -> None:
        self.view.show("flag", self.player.flag_video(video_id, " ".join(reason)))

    def _allow_video(self, video_id: str) -> None:
        self.view.show("allow", self.player.allow_video(video_id))

    def _help(self) -> None:
        self.view.emit(HELP_TEXT.splitlines())
