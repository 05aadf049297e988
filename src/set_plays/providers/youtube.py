"""YouTube 平台（YouTube Data API v3）。

需設定 YOUTUBE_API_KEY，未設定時直接回傳 0、不發送請求。
支援網址格式：
  - https://www.youtube.com/watch?v=VIDEO_ID
  - https://www.youtube.com/live/VIDEO_ID
  - https://youtu.be/VIDEO_ID
"""

import logging
import re

from .base import BaseProvider
from ..config import get_credentials

logger = logging.getLogger(__name__)

VIDEO_ID_PATTERNS = [
    re.compile(r"youtube\.com/(?:watch\?v=|live/)([a-zA-Z0-9_-]+)"),
    re.compile(r"youtu\.be/([a-zA-Z0-9_-]+)"),
]
API_URL = "https://www.googleapis.com/youtube/v3/videos"


class YouTubeProvider(BaseProvider):
    name = "YouTube"

    def fetch_count(self, url: str) -> int:
        api_key = get_credentials().youtube_api_key
        if not api_key:
            logger.warning("未設定 YOUTUBE_API_KEY，跳過 YouTube 查詢")
            return 0

        video_id = self.extract_video_id(url)
        if video_id is None:
            logger.debug(f"無法解析 YouTube 影片 ID：{url}")
            return 0

        resp = self._get(API_URL, params={"part": "statistics", "id": video_id, "key": api_key})
        if resp.status_code != 200:
            logger.debug(f"YouTube API 回傳狀態碼 {resp.status_code}（影片 {video_id}）")
            return 0

        items = resp.json().get("items") or []
        if not items:
            logger.debug(f"YouTube 查無影片：{video_id}")
            return 0

        view_count = items[0].get("statistics", {}).get("viewCount", "")
        if not isinstance(view_count, str) or not view_count.isdecimal():
            logger.debug(f"YouTube viewCount 無法解析：{view_count!r}")
            return 0
        return int(view_count)

    @staticmethod
    def extract_video_id(url: str) -> str | None:
        """依序嘗試各網址格式，回傳影片 ID。"""
        for pattern in VIDEO_ID_PATTERNS:
            m = pattern.search(url)
            if m:
                return m.group(1)
        return None
