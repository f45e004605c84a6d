"""Render core outcomes as text lines and read the search follow-up answer."""

from typing import Callable

from rich.console import Console

from video_player import outcome
from video_player.outcome import Outcome
from video_player.playlist import Playlist
from video_player.video import Video

# Prefix of a failure message, per action. {playlist} is the name as typed.
FAILURE_PREFIX = {
    "play": "Cannot play video",
    "stop": "Cannot stop video",
    "pause": "Cannot pause video",
    "continue": "Cannot continue video",
    "create": "Cannot create playlist",
    "add": "Cannot add video to {playlist}",
    "remove": "Cannot remove video from {playlist}",
    "clear": "Cannot clear playlist {playlist}",
    "delete": "Cannot delete playlist {playlist}",
    "show_playlist": "Cannot show playlist {playlist}",
    "flag": "Cannot flag video",
    "allow": "Cannot remove flag from video",
}

FAILURE_TEXT = {
    outcome.VIDEO_NOT_FOUND: "Video does not exist",
    outcome.VIDEO_FLAGGED: "Video is currently flagged (reason: {reason})",
    outcome.PLAYLIST_NOT_FOUND: "Playlist does not exist",
    outcome.DUPLICATE_NAME: "A playlist with the same name already exists",
    outcome.ALREADY_IN_PLAYLIST: "Video already added",
    outcome.NOT_IN_PLAYLIST: "Video is not in playlist",
    outcome.NO_ACTIVE_VIDEO: "No video is currently playing",
    outcome.NOT_PAUSED: "Video is not paused",
    outcome.ALREADY_FLAGGED: "Video is already flagged",
    outcome.NOT_FLAGGED: "Video is not flagged",
}

# Failures that read as a whole line rather than "prefix: text"
STANDALONE_FAILURE = {
    outcome.ALREADY_PAUSED: "Video already paused: {title}",
    outcome.NO_VIDEOS_AVAILABLE: "No videos available",
    outcome.NO_RESULTS: "No search results for {reason}",
}

EVENT_TEXT = {
    outcome.STOPPED: "Stopping video: {title}",
    outcome.PLAYING: "Playing video: {title}",
    outcome.PAUSED: "Pausing video: {title}",
    outcome.CONTINUED: "Continuing video: {title}",
    outcome.FLAGGED: "Successfully flagged video: {title} (reason: {reason})",
    outcome.UNFLAGGED: "Successfully removed flag from video: {title}",
    outcome.PLAYLIST_CREATED: "Successfully created new playlist: {playlist}",
    outcome.PLAYLIST_ADDED: "Added video to {playlist}: {title}",
    outcome.PLAYLIST_REMOVED: "Removed video from {playlist}: {title}",
    outcome.PLAYLIST_CLEARED: "Successfully removed all videos from {playlist}",
    outcome.PLAYLIST_DELETED: "Deleted playlist: {playlist}",
}

SEARCH_PROMPT = (
    "Would you like to play any of the above? If yes, specify the number of the video.",
    "If your answer is not a valid number, we will assume it's a no.",
)


def video_line(video: Video) -> str:
    """Video display form, with a FLAGGED marker when flagged."""
    line = video.show()
    if video.flagged:
        line += f" - FLAGGED (reason: {video.flag_reason})"
    return line


def render(action: str, result: Outcome) -> list[str]:
    """Lines for one operation outcome: its events, or its failure."""
    if result.ok:
        return [
            EVENT_TEXT[e.kind].format(
                title=e.video.title if e.video else "",
                playlist=e.playlist or "",
                reason=e.reason or "",
            )
            for e in result.events
        ]
    fields = {
        "title": result.video.title if result.video else "",
        "playlist": result.playlist or "",
        "reason": result.reason or "",
    }
    if result.error in STANDALONE_FAILURE:
        return [STANDALONE_FAILURE[result.error].format(**fields)]
    prefix = FAILURE_PREFIX[action].format(**fields)
    return [f"{prefix}: {FAILURE_TEXT[result.error].format(**fields)}"]


def render_videos(videos: list[Video]) -> list[str]:
    return ["Here's a list of all available videos:"] + [f" {video_line(v)}" for v in videos]


def render_playing(current: tuple[Video, bool] | None) -> list[str]:
    if current is None:
        return ["No video is currently playing"]
    video, paused = current
    return [f"Currently playing: {video.show()}" + (" - PAUSED" if paused else "")]


def render_playlists(playlists: list[Playlist]) -> list[str]:
    if not playlists:
        return ["No playlists exist yet"]
    return ["Showing all playlists:"] + [f" {p.name}" for p in playlists]


def render_playlist(result: Outcome) -> list[str]:
    if not result.ok:
        return render("show_playlist", result)
    lines = [f"Showing playlist: {result.playlist}"]
    if not result.value:
        return lines + [" No videos here yet"]
    return lines + [f" {video_line(v)}" for v in result.value]


def render_results(result: Outcome) -> list[str]:
    """Numbered search results followed by the play prompt."""
    if not result.ok:
        return render("search", result)
    lines = [f"Here are the results for {result.reason}:"]
    lines += [f" {i}) {v.show()}" for i, v in enumerate(result.value, start=1)]
    return lines + list(SEARCH_PROMPT)


class ConsoleView:
    """Plain-text output sink and line input source on a rich Console."""

    def __init__(
        self,
        console: Console | None = None,
        reader: Callable[[], str] | None = None,
    ) -> None:
        self.console = console or Console(markup=False, highlight=False, emoji=False)
        self._reader = reader or self.console.input

    def emit(self, lines: list[str]) -> None:
        for line in lines:
            self.console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def show(self, action: str, result: Outcome) -> None:
        self.emit(render(action, result))

    def read_line(self) -> str | None:
        """One line from the input source, or None at end of input."""
        try:
            return self._reader()
        except (EOFError, KeyboardInterrupt):
            return None
