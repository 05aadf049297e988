"""外部連結偵測模組：從 set 頁面中找出 Mixcloud / SoundCloud / YouTube 連結。

各平台獨立掃描同一份頁面內容，只保留第一個符合的連結，遇到雙引號即截斷。
"""

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)

MIXCLOUD_RE = re.compile(r'https://www\.mixcloud\.com/[^"]+')
SOUNDCLOUD_RE = re.compile(r'https://soundcloud\.com/[^"]+')
YOUTUBE_RE = re.compile(r'https://(?:www\.)?youtube\.com/[^"]+|https://youtu\.be/[^"]+')


@dataclass(frozen=True)
class ProviderLinks:
    """set 頁面上的各平台連結，未找到者為空字串。"""
    mixcloud: str = ""
    soundcloud: str = ""
    youtube: str = ""

    def present(self) -> Iterator[tuple[str, str]]:
        """依序產生 (平台名稱, 連結)，略過未找到的平台。"""
        for name in ("mixcloud", "soundcloud", "youtube"):
            url = getattr(self, name)
            if url:
                yield name, url


def _first_match(pattern: re.Pattern[str], page: str) -> str:
    m = pattern.search(page)
    return m.group(0) if m else ""


def find_external_links(page: str) -> ProviderLinks:
    """掃描頁面內容，回傳三個平台各自的第一個連結。"""
    links = ProviderLinks(
        mixcloud=_first_match(MIXCLOUD_RE, page),
        soundcloud=_first_match(SOUNDCLOUD_RE, page),
        youtube=_first_match(YOUTUBE_RE, page),
    )
    logger.debug(
        f"外部連結：Mixcloud: {links.mixcloud or '-'}, "
        f"SoundCloud: {links.soundcloud or '-'}, YouTube: {links.youtube or '-'}"
    )
    return links
