"""平台基礎模組：定義 BaseProvider 抽象類別。

所有平台必須繼承 BaseProvider 並實作 fetch_count() 方法。
"""

import logging
from abc import ABC, abstractmethod

import httpx

from ..config import USER_AGENT

logger = logging.getLogger(__name__)

# 平台查詢過程中視為「本平台 0 次播放」的錯誤
RESOLVE_ERRORS = (httpx.HTTPError, httpx.InvalidURL, ValueError, KeyError, TypeError, AttributeError)


class BaseProvider(ABC):
    """平台抽象基礎類別。

    提供共用的 HTTP 請求與 JSON 數值解析工具方法。
    子類別需設定 name 屬性並實作 fetch_count()。
    """
    name: str = "base"

    @abstractmethod
    def fetch_count(self, url: str) -> int:
        """查詢單一連結的播放次數，失敗時可拋出 RESOLVE_ERRORS 中的例外。"""
        ...

    def play_count(self, url: str) -> int:
        """查詢播放次數，任何查詢失敗皆回傳 0。"""
        logger.debug(f"{self.name}：查詢 {url}")
        try:
            count = self.fetch_count(url)
        except RESOLVE_ERRORS as e:
            logger.warning(f"{self.name} 查詢失敗 {url}：{e}")
            return 0
        logger.debug(f"{self.name}：{url} 播放次數 {count}")
        return count

    @staticmethod
    def _get(
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """發送 HTTP GET 請求，不自動跟隨重新導向，由呼叫端檢查狀態碼。"""
        all_headers = {"User-Agent": USER_AGENT}
        if headers:
            all_headers.update(headers)
        return httpx.get(url, params=params, headers=all_headers)

    @staticmethod
    def read_count(data: dict, field: str) -> int:
        """從 JSON 物件中取出非負整數欄位。

        欄位缺少時拋出 KeyError，型別不符時拋出 TypeError。
        """
        value = data[field]
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise TypeError(f"{field} 不是非負整數：{value!r}")
        return value
