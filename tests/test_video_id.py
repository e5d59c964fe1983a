import pytest

from youtube_transcript import extract_video_id


@pytest.mark.parametrize("video_id", ["dQw4w9WgXcQ", "a-b_c-d_e-f", "-abcdefghij", "12345678901"])
def test_canonical_id_unchanged(video_id):
    assert extract_video_id(video_id) == video_id


@pytest.mark.parametrize("url", [
    "https://youtu.be/dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ?t=42",
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "youtube.com/watch?v=dQw4w9WgXcQ&list=PL123",
    "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
    "https://www.youtube.com/embed/dQw4w9WgXcQ",
    "https://www.youtube.com/shorts/dQw4w9WgXcQ",
    "https://m.youtube.com/watch?v=dQw4w9WgXcQ",
])
def test_url_shapes(url):
    assert extract_video_id(url) == "dQw4w9WgXcQ"


@pytest.mark.parametrize("value", [
    "not-a-video",
    "https://vimeo.com/123456789",
    "https://www.youtube.com/watch?v=short",
    "dQw4w9WgXcQX",
])
def test_unmatched_input_passes_through(value):
    assert extract_video_id(value) == value
