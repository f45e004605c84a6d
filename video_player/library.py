"""Video catalog: the single owning table of Video records, keyed by id."""

import logging

from video_player.video import Video

log = logging.getLogger(__name__)

# Record: (video_id, title, tags)
VideoRecord = tuple[str, str, tuple[str, ...]]

DEFAULT_VIDEOS: list[VideoRecord] = [
    ("funny_dogs_video_id", "Funny Dogs", ("#dog", "#animal")),
    ("amazing_cats_video_id", "Amazing Cats", ("#cat", "#animal")),
    ("another_cat_video_id", "Another Cat Video", ("#cat", "#animal")),
    ("life_at_google_video_id", "Life at Google", ("#google", "#career")),
    ("nothing_video_id", "Video about nothing", ()),
]


class VideoLibrary:
    """Read-only mapping id -> Video. Flag state is changed on the Video itself."""

    def __init__(self, records: list[VideoRecord] | None = None) -> None:
        self._videos: dict[str, Video] = {}
        for video_id, title, tags in DEFAULT_VIDEOS if records is None else records:
            if video_id in self._videos:
                raise ValueError(f"duplicate video id: {video_id}")
            self._videos[video_id] = Video(video_id, title, tags)
        log.debug("Loaded %d videos", len(self._videos))

    def get_video(self, video_id: str) -> Video | None:
        return self._videos.get(video_id)

    def get_videos(self) -> list[Video]:
        """Snapshot in load order; callers may sort it."""
        return list(self._videos.values())

    def unflagged(self) -> list[Video]:
        return [v for v in self._videos.values() if not v.flagged]

    def __contains__(self, video_id: str) -> bool:
        return video_id in self._videos

    def __len__(self) -> int:
        return len(self._videos)
