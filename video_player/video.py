"""Video record: immutable identity (id, title, tags) plus mutable flag state (no UI)."""

DEFAULT_FLAG_REASON = "Not supplied"


class Video:
    """A catalog entry. Only flag state changes after load."""

    def __init__(self, video_id: str, title: str, tags: tuple[str, ...] | list[str] = ()):
        self._video_id = video_id
        self._title = title
        self._tags = tuple(tags)
        self._flag_reason: str | None = None
        self.flagged = False

    @property
    def video_id(self) -> str:
        return self._video_id

    @property
    def title(self) -> str:
        return self._title

    @property
    def tags(self) -> tuple[str, ...]:
        return self._tags

    @property
    def flag_reason(self) -> str | None:
        return self._flag_reason if self.flagged else None

    def flag(self, reason: str = "") -> None:
        self.flagged = True
        self._flag_reason = reason or DEFAULT_FLAG_REASON

    def unflag(self) -> None:
        self.flagged = False
        self._flag_reason = None

    def has_tag(self, tag: str) -> bool:
        """Case-insensitive exact tag match."""
        wanted = tag.upper()
        return any(t.upper() == wanted for t in self._tags)

    def show(self) -> str:
        """Display form: 'Title (id) [#tag1 #tag2]'."""
        return f"{self._title} ({self._video_id}) [{' '.join(self._tags)}]"

    def __repr__(self) -> str:
        return f"Video(id={self._video_id!r}, title={self._title!r})"
