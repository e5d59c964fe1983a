"""Errors raised while fetching a transcript."""


class TranscriptError(Exception):
    """Base class for transcript fetch failures."""

    def __init__(self, video_id: str, message: str):
        self.video_id = video_id
        super().__init__(message)

    def user_lines(self) -> list[str]:
        """Lines shown to the user when the fetch fails."""
        return [str(self)]


class VideoUnavailableError(TranscriptError):
    """Raised when the video does not exist or has been removed."""

    def __init__(self, video_id: str):
        super().__init__(video_id, "Video is unavailable or has been removed")


class TranscriptsDisabledError(TranscriptError):
    """Raised when the uploader disabled transcripts."""

    def __init__(self, video_id: str):
        super().__init__(video_id, "Transcripts are disabled for this video")


class TranscriptNotAvailableError(TranscriptError):
    """Raised when the video has no transcript in any language."""

    def __init__(self, video_id: str):
        super().__init__(video_id, "No transcript is available for this video")


class TranscriptLanguageNotAvailableError(TranscriptError):
    """Raised when no transcript exists in the requested language."""

    def __init__(self, video_id: str, lang: str):
        self.lang = lang
        super().__init__(video_id, f"Transcript is not available in language: {lang}")

    def user_lines(self) -> list[str]:
        return [str(self), "Try a different language with --lang flag"]


class InvalidVideoIdError(TranscriptError):
    """Raised when the id (or URL) is not a valid YouTube video id."""

    def __init__(self, video_id: str):
        super().__init__(video_id, "Invalid video ID or URL")


class TranscriptFetchError(TranscriptError):
    """Raised for any other failure; carries the underlying message."""

    def __init__(self, video_id: str, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(video_id, message)
