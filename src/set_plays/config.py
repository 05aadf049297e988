"""設定模組：從 .env 載入環境變數，定義全域常數。"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# 載入 .env 檔案中的環境變數
load_dotenv()

# ── 檔案路徑 ──
SETS_FILE = os.environ.get("SETS_FILE", "../all-sets.md")  # set 清單（相對於執行目錄）

# ── 清單格式 ──
LIST_MARKER = "* "          # 清單項目前綴
PLAYS_MARKER = "🎧"         # 播放次數標記
SETS_MARKER = "🎶"          # set 數量標記

# ── 網頁擷取設定 ──
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)


@dataclass(frozen=True)
class Credentials:
    """各平台 API 憑證，未設定者為空字串。"""
    soundcloud_oauth_token: str = ""
    soundcloud_client_id: str = ""
    soundcloud_client_secret: str = ""
    youtube_api_key: str = ""


def get_credentials() -> Credentials:
    """讀取目前環境中的 API 憑證。

    每次呼叫都重新讀取環境變數，不做快取。
    """
    return Credentials(
        soundcloud_oauth_token=os.environ.get("SOUNDCLOUD_OAUTH_TOKEN", ""),
        soundcloud_client_id=os.environ.get("SOUNDCLOUD_CLIENT_ID", ""),
        soundcloud_client_secret=os.environ.get("SOUNDCLOUD_CLIENT_SECRET", ""),
        youtube_api_key=os.environ.get("YOUTUBE_API_KEY", ""),
    )
