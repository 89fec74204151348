"""Navigation error types."""


class DocnavError(Exception):
    """Base class for docnav errors."""


class ValidationError(DocnavError, ValueError):
    """Manifest is malformed or contradictory.

    Raised only while building a tree. The build is abandoned and no
    partial tree is returned.
    """

    def __init__(self, message: str, location: str | None = None) -> None:
        self.location = location
        if location:
            message = f"{location}: {message}"
        super().__init__(message)


class NotFound(DocnavError, LookupError):
    """Path does not resolve, or is hidden from the requested channel."""

    def __init__(self, path: str, channel: str | None = None) -> None:
        self.path = path
        self.channel = channel
        if channel is None:
            message = f"Route not found: {path}"
        else:
            message = f"Route not found in {channel} channel: {path}"
        super().__init__(message)
