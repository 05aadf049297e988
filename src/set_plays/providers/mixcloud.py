"""Mixcloud 平台（公開 API）。

來源：api.mixcloud.com：不需憑證。
查詢方式：從 set 網址解析 username / slug，呼叫 /<username>/<slug>/ 取得 play_count。
"""

import logging
import re
from urllib.parse import quote

from .base import BaseProvider

logger = logging.getLogger(__name__)

URL_RE = re.compile(r"https://www\.mixcloud\.com/([^/]+)/([^/?#]+)/?")
API_URL = "https://api.mixcloud.com/{username}/{slug}/"


class MixcloudProvider(BaseProvider):
    name = "Mixcloud"

    def fetch_count(self, url: str) -> int:
        parsed = self.parse_url(url)
        if parsed is None:
            logger.debug(f"無法解析 Mixcloud 網址：{url}")
            return 0

        username, slug = parsed
        api_url = API_URL.format(username=quote(username, safe=""), slug=quote(slug, safe=""))
        resp = self._get(api_url)
        if resp.status_code != 200:
            logger.debug(f"Mixcloud API 回傳狀態碼 {resp.status_code}：{api_url}")
            return 0
        return self.read_count(resp.json(), "play_count")

    @staticmethod
    def parse_url(url: str) -> tuple[str, str] | None:
        """解析 Mixcloud 網址，回傳 (username, slug)。"""
        m = URL_RE.search(url)
        if not m:
            return None
        return m.group(1), m.group(2)
