import pytest

import youtube_transcript


SEGMENTS = [
    {"text": "Hello", "start": 0.0, "duration": 1.5},
    {"text": "world", "start": 1.5, "duration": 2.0},
]


@pytest.fixture
def transcripts_dir(tmp_path, monkeypatch):
    d = tmp_path / "transcripts"
    monkeypatch.setattr(youtube_transcript, "TRANSCRIPTS_DIR", d)
    return d


@pytest.fixture
def fake_fetch(monkeypatch):
    """Replace the transcript source; records every call made to it."""
    calls = []
    state = {"result": SEGMENTS}

    def fetch(video_id, lang="en", provider="youtube"):
        calls.append((video_id, lang, provider))
        result = state["result"]
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(youtube_transcript, "fetch_transcript", fetch)
    fetch.calls = calls
    fetch.state = state
    return fetch
