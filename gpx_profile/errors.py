class ProfileError(ValueError):
    """Base class for input problems detected at the pipeline entry."""


class NoTrackDataError(ProfileError):
    """The parsed input contains no tracks, or the first track has no points."""


class MalformedTrackError(ProfileError):
    """A track point has a non-finite value or an out-of-order cumulative distance."""

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index
