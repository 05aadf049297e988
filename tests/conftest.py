"""全域測試 fixtures。"""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "html"

CREDENTIAL_VARS = (
    "SOUNDCLOUD_OAUTH_TOKEN",
    "SOUNDCLOUD_CLIENT_ID",
    "SOUNDCLOUD_CLIENT_SECRET",
    "YOUTUBE_API_KEY",
)


@pytest.fixture(autouse=True)
def clean_credentials(monkeypatch):
    """清除環境中的 API 憑證，避免本機 .env 影響測試。"""
    for var in CREDENTIAL_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def fixture_dir() -> Path:
    """回傳 HTML fixture 目錄路徑。"""
    return FIXTURES_DIR


def load_fixture(name: str) -> str:
    """讀取 HTML fixture 檔案。"""
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")
