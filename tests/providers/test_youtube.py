"""YouTube 平台測試。"""

import httpx
import pytest

from tests.providers.conftest import mock_json
from set_plays.providers.youtube import API_URL, YouTubeProvider

VIDEO_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("YOUTUBE_API_KEY", "test-key")


class TestYouTubeProvider:
    """YouTube 觀看次數查詢測試。"""

    def test_view_count(self, mock_http, api_key):
        route = mock_http.get(API_URL).mock(
            return_value=mock_json({"items": [{"statistics": {"viewCount": "2500"}}]})
        )

        assert YouTubeProvider().play_count(VIDEO_URL) == 2500
        params = route.calls.last.request.url.params
        assert params["id"] == "dQw4w9WgXcQ"
        assert params["key"] == "test-key"
        assert params["part"] == "statistics"

    def test_missing_api_key_makes_no_request(self, mock_http):
        assert YouTubeProvider().play_count(VIDEO_URL) == 0
        assert not mock_http.calls

    def test_unknown_url_makes_no_request(self, mock_http, api_key):
        assert YouTubeProvider().play_count("https://www.youtube.com/channel/UC123") == 0
        assert not mock_http.calls

    def test_empty_items(self, mock_http, api_key):
        mock_http.get(API_URL).mock(return_value=mock_json({"items": []}))

        assert YouTubeProvider().play_count(VIDEO_URL) == 0

    def test_non_numeric_view_count(self, mock_http, api_key):
        mock_http.get(API_URL).mock(
            return_value=mock_json({"items": [{"statistics": {"viewCount": "lots"}}]})
        )

        assert YouTubeProvider().play_count(VIDEO_URL) == 0

    def test_non_200_status(self, mock_http, api_key):
        mock_http.get(API_URL).mock(return_value=mock_json({"error": {"code": 403}}, status_code=403))

        assert YouTubeProvider().play_count(VIDEO_URL) == 0

    def test_network_error(self, mock_http, api_key):
        mock_http.get(API_URL).mock(side_effect=httpx.ConnectTimeout("timeout"))

        assert YouTubeProvider().play_count(VIDEO_URL) == 0


class TestExtractVideoId:
    """extract_video_id() 靜態方法測試。"""

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
            ("https://youtube.com/watch?v=abc_DEF-123&t=42", "abc_DEF-123"),
            ("https://www.youtube.com/live/XyZ987", "XyZ987"),
            ("https://youtu.be/dQw4w9WgXcQ?si=share", "dQw4w9WgXcQ"),
            ("https://www.youtube.com/@djsomeone", None),
        ],
    )
    def test_extract_video_id(self, url, expected):
        assert YouTubeProvider.extract_video_id(url) == expected
