"""SoundCloud 平台（多階段 fallback）。

SoundCloud 的公開 API 需要憑證，且舊版 client_id 常被拒絕，因此依序嘗試：
  1. TokenResolver：使用 SOUNDCLOUD_OAUTH_TOKEN 呼叫 /resolve
  2. ClientCredentialResolver：以 client_id + client_secret 換取 token 後呼叫 /resolve
  3. LegacyResolver：以 client_id 查詢參數呼叫舊版 /resolve
  4. HtmlScrapeResolver：直接擷取 SoundCloud 頁面，搜尋內嵌 JSON 的 playback_count
缺少憑證的步驟不會建立；任一步驟成功即停止。
API 回應 200 但缺少 playback_count 時視為失敗，繼續下一步（不當作 0 次播放）。
"""

import logging
import re
from abc import ABC, abstractmethod

import httpx

from .base import RESOLVE_ERRORS, BaseProvider
from ..config import USER_AGENT, Credentials, get_credentials
from ..fetch import fetch_page

logger = logging.getLogger(__name__)

RESOLVE_URL = "https://api.soundcloud.com/resolve"
TOKEN_URL = "https://api.soundcloud.com/oauth2/token"

# 頁面內嵌資料的兩種寫法：JSON（帶引號）與 JS 物件（不帶引號）
PLAYBACK_COUNT_PATTERNS = [
    re.compile(r'"playback_count"\s*:\s*([0-9]+)'),
    re.compile(r"playback_count\s*:\s*([0-9]+)"),
]


class ResolveStrategy(ABC):
    """SoundCloud 查詢策略，resolve() 回傳 (播放次數, 是否成功)。"""
    name: str = "strategy"

    @abstractmethod
    def resolve(self, url: str) -> tuple[int, bool]:
        ...


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"OAuth {token}"}


def resolve_with_token(url: str, token: str) -> tuple[int, bool]:
    """以 OAuth token 呼叫 /resolve，302 時帶相同標頭跟隨一次。"""
    resp = BaseProvider._get(RESOLVE_URL, params={"url": url}, headers=_auth(token))

    if resp.status_code == 302:
        location = resp.headers.get("location", "")
        logger.debug(f"SoundCloud token resolve 重新導向至：{location}")
        resp = BaseProvider._get(location, headers=_auth(token))

    if resp.status_code != 200:
        logger.debug(f"SoundCloud token resolve 回傳狀態碼 {resp.status_code}")
        return 0, False
    return BaseProvider.read_count(resp.json(), "playback_count"), True


class TokenResolver(ResolveStrategy):
    name = "OAuth token"

    def __init__(self, token: str):
        self.token = token

    def resolve(self, url: str) -> tuple[int, bool]:
        return resolve_with_token(url, self.token)


class ClientCredentialResolver(ResolveStrategy):
    name = "client credentials"

    def __init__(self, client_id: str, client_secret: str):
        self.client_id = client_id
        self.client_secret = client_secret

    def request_token(self) -> str:
        """以 client_credentials grant 換取 access token，失敗回傳空字串。"""
        resp = httpx.post(
            TOKEN_URL,
            data={
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "grant_type": "client_credentials",
            },
            headers={"User-Agent": USER_AGENT},
        )
        if resp.status_code != 200:
            logger.debug(f"SoundCloud token 端點回傳狀態碼 {resp.status_code}")
            return ""
        token = resp.json().get("access_token") or ""
        if not isinstance(token, str):
            return ""
        return token

    def resolve(self, url: str) -> tuple[int, bool]:
        token = self.request_token()
        if not token:
            return 0, False
        logger.debug("已透過 client credentials 取得 SoundCloud token")
        return resolve_with_token(url, token)


class LegacyResolver(ResolveStrategy):
    name = "client_id"

    def __init__(self, client_id: str):
        self.client_id = client_id

    def resolve(self, url: str) -> tuple[int, bool]:
        resp = BaseProvider._get(RESOLVE_URL, params={"url": url, "client_id": self.client_id})

        if resp.status_code == 200:
            return BaseProvider.read_count(resp.json(), "playback_count"), True

        if resp.status_code == 302:
            location = resp.headers.get("location", "")
            logger.debug(f"SoundCloud client_id resolve 重新導向至：{location}")
            redirected = BaseProvider._get(location, params={"client_id": self.client_id})
            if redirected.status_code == 200:
                return BaseProvider.read_count(redirected.json(), "playback_count"), True
            logger.debug(f"SoundCloud 重新導向目標回傳狀態碼 {redirected.status_code}")
        elif resp.status_code == 401:
            logger.warning("SoundCloud resolve 回傳 401（client_id 無效），改用 HTML 解析")
        else:
            logger.debug(f"SoundCloud client_id resolve 回傳狀態碼 {resp.status_code}")
        return 0, False


class HtmlScrapeResolver(ResolveStrategy):
    name = "HTML"

    def resolve(self, url: str) -> tuple[int, bool]:
        # 錯誤頁面仍可能內嵌 playback_count，不檢查狀態碼
        page = fetch_page(url, check_status=False)
        count = self.extract_playback_count(page)
        if count is None:
            return 0, False
        return count, True

    @staticmethod
    def extract_playback_count(page: str) -> int | None:
        """依序嘗試兩種寫法，回傳第一個符合的 playback_count。"""
        for pattern in PLAYBACK_COUNT_PATTERNS:
            m = pattern.search(page)
            if m:
                return int(m.group(1))
        return None


def build_chain(creds: Credentials) -> list[ResolveStrategy]:
    """依憑證組出查詢策略鏈，順序固定。"""
    chain: list[ResolveStrategy] = []
    if creds.soundcloud_oauth_token:
        chain.append(TokenResolver(creds.soundcloud_oauth_token))
    if creds.soundcloud_client_id and creds.soundcloud_client_secret:
        chain.append(ClientCredentialResolver(creds.soundcloud_client_id, creds.soundcloud_client_secret))
    else:
        logger.debug("未設定 SOUNDCLOUD_CLIENT_ID 或 SOUNDCLOUD_CLIENT_SECRET，跳過 token 交換")
    if creds.soundcloud_client_id:
        chain.append(LegacyResolver(creds.soundcloud_client_id))
    chain.append(HtmlScrapeResolver())
    return chain


class SoundCloudProvider(BaseProvider):
    name = "SoundCloud"

    def fetch_count(self, url: str) -> int:
        for strategy in build_chain(get_credentials()):
            try:
                count, ok = strategy.resolve(url)
            except RESOLVE_ERRORS as e:
                logger.warning(f"SoundCloud {strategy.name} 查詢失敗：{e}")
                continue
            if ok:
                logger.debug(f"SoundCloud playback_count（{strategy.name}）：{count}")
                return count
            logger.debug(f"SoundCloud {strategy.name} 未取得結果，嘗試下一步")

        logger.warning(f"無法取得 SoundCloud playback_count：{url}")
        return 0
