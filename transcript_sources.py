import os

import requests
from supadata import Supadata, SupadataError
from youtube_transcript_api import (
    InvalidVideoId,
    NoTranscriptFound,
    TranscriptsDisabled,
    VideoUnavailable,
    YouTubeTranscriptApi,
    YouTubeTranscriptApiException,
)

from transcript_errors import (
    InvalidVideoIdError,
    TranscriptFetchError,
    TranscriptLanguageNotAvailableError,
    TranscriptNotAvailableError,
    TranscriptsDisabledError,
    VideoUnavailableError,
)

PROVIDERS = ("youtube", "supadata")

# Supadata error codes we can classify; anything else is reported verbatim
SUPADATA_ERRORS = {
    "not-found": VideoUnavailableError,
    "video-not-found": VideoUnavailableError,
    "transcript-unavailable": TranscriptNotAvailableError,
}


def fetch_transcript(video_id: str, lang: str = "en", provider: str = "youtube") -> list[dict]:
    """
    Fetch the transcript of a video as a list of segments.

    Each segment is a dict with ``text``, ``start`` and ``duration`` (seconds),
    in the order they are spoken. Failures are raised as a ``TranscriptError``
    subclass.
    """
    if provider == "youtube":
        return fetch_from_youtube(video_id, lang)
    if provider == "supadata":
        return fetch_from_supadata(video_id, lang)
    raise ValueError(f"Unknown transcript provider: {provider}")


# YouTube (youtube-transcript-api)
def fetch_from_youtube(video_id: str, lang: str) -> list[dict]:
    api = YouTubeTranscriptApi()
    try:
        transcripts = api.list(video_id)
    except InvalidVideoId as e:
        raise InvalidVideoIdError(video_id) from e
    except VideoUnavailable as e:
        raise VideoUnavailableError(video_id) from e
    except TranscriptsDisabled as e:
        raise TranscriptsDisabledError(video_id) from e
    except (YouTubeTranscriptApiException, requests.RequestException) as e:
        raise TranscriptFetchError(video_id, str(e), cause=e) from e

    try:
        transcript = transcripts.find_transcript([lang])
    except NoTranscriptFound as e:
        if next(iter(transcripts), None) is None:
            raise TranscriptNotAvailableError(video_id) from e
        raise TranscriptLanguageNotAvailableError(video_id, lang) from e

    try:
        fetched = transcript.fetch()
    except (YouTubeTranscriptApiException, requests.RequestException) as e:
        raise TranscriptFetchError(video_id, str(e), cause=e) from e

    return fetched.to_raw_data()


# Supadata
def _chunk_field(chunk, name: str, default=None):
    # Chunks come back as objects, older clients return plain dicts
    if isinstance(chunk, dict):
        return chunk.get(name, default)
    return getattr(chunk, name, default)


def _same_language(requested: str, returned: str | None) -> bool:
    if not returned:
        return True
    return requested.split("-")[0].lower() == returned.split("-")[0].lower()


def fetch_from_supadata(video_id: str, lang: str) -> list[dict]:
    api_key = os.environ.get("SUPADATA_API_KEY")
    if not api_key:
        raise TranscriptFetchError(video_id, "SUPADATA_API_KEY is not set")

    supadata = Supadata(api_key=api_key)
    try:
        # Deprecated since supadata 1.6; supadata.transcript() may hand back an async job instead
        transcript_obj = supadata.youtube.transcript(video_id=video_id, lang=lang)
    except SupadataError as e:
        error_cls = SUPADATA_ERRORS.get(e.error)
        if error_cls is not None:
            raise error_cls(video_id) from e
        raise TranscriptFetchError(video_id, e.message, cause=e) from e
    except requests.RequestException as e:
        raise TranscriptFetchError(video_id, str(e), cause=e) from e

    # Supadata falls back to another language instead of failing
    if not _same_language(lang, getattr(transcript_obj, "lang", None)):
        raise TranscriptLanguageNotAvailableError(video_id, lang)

    chunks = getattr(transcript_obj, "content", None) or []
    if isinstance(chunks, str):
        raise TranscriptFetchError(video_id, "Supadata returned plain text instead of segments")

    segments = []
    for chunk in chunks:
        segments.append({
            "text": _chunk_field(chunk, "text", ""),
            "start": _chunk_field(chunk, "offset", 0) / 1000.0,
            "duration": _chunk_field(chunk, "duration", 0) / 1000.0,
        })
    return segments
