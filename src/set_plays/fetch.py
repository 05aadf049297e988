"""頁面擷取模組：以單次阻塞請求取得頁面原始內容。"""

import logging

import httpx

from .config import USER_AGENT

logger = logging.getLogger(__name__)


def fetch_page(url: str, check_status: bool = True) -> str:
    """發送 HTTP GET 請求並回傳回應內容。

    不重試、不覆寫逾時設定；連線錯誤時拋出 httpx.HTTPError，網址格式錯誤時拋出 httpx.InvalidURL。
    check_status 為 True 時，非 2xx 狀態碼同樣拋出 httpx.HTTPError。
    """
    logger.debug(f"擷取頁面：{url}")
    resp = httpx.get(url, headers={"User-Agent": USER_AGENT}, follow_redirects=True)
    if check_status:
        resp.raise_for_status()
    logger.debug(f"已取得 {len(resp.text)} 字元：{url}")
    return resp.text
