"""播放次數彙整模組：逐一查詢 set 頁面、加總各平台播放次數並輸出清單。

流程：擷取 set 頁面 → 偵測外部連結 → 各平台查詢 → 加總 → 輸出。
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

import httpx

from .config import PLAYS_MARKER, SETS_MARKER
from .detect import find_external_links
from .fetch import fetch_page
from .providers import ALL_PROVIDERS
from .setlist import Entry, parse_sets

logger = logging.getLogger(__name__)


@dataclass
class RunTotals:
    """單次執行的累計結果。"""
    plays: int = 0   # 總播放次數
    sets: int = 0    # 已發佈 set 數量


def format_plays(n: int) -> str:
    """格式化播放次數：百萬以上用 M、千以上用 k，取一位小數。"""
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 1_000:
        return f"{n / 1_000:.1f}k"
    return str(n)


def format_entry(entry: Entry, plays: int = 0) -> str:
    """組出輸出行；未連結項目原樣輸出，播放次數為 0 時不加註記。"""
    if not entry.is_linked:
        return entry.raw_line
    line = f"* [{entry.name}]({entry.link})"
    if plays > 0:
        line += f" _//_ {format_plays(plays)}{PLAYS_MARKER}"
    return line


def count_set_plays(link: str) -> int | None:
    """查詢單一 set 的總播放次數；set 頁面無法擷取時回傳 None。"""
    try:
        page = fetch_page(link)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning(f"set 頁面擷取失敗 {link}：{e}")
        return None

    plays = 0
    for name, url in find_external_links(page).present():
        plays += ALL_PROVIDERS[name].play_count(url)
    return plays


def run(path: str | Path, out: TextIO | None = None) -> RunTotals:
    """主流程：讀取清單、逐一查詢並輸出，最後輸出總計。

    清單無法讀取時拋出 OSError。
    """
    entries = parse_sets(path)
    logger.info(f"處理 {len(entries)} 個項目")

    totals = RunTotals()
    for entry in entries:
        if not entry.is_linked:
            print(format_entry(entry), file=out)
            continue

        totals.sets += 1
        plays = count_set_plays(entry.link) or 0
        totals.plays += plays
        print(format_entry(entry, plays), file=out)

    print(f"\nTotal plays: **{format_plays(totals.plays)}{PLAYS_MARKER}**", file=out)
    print(f"Total amount of sets: **{totals.sets}{SETS_MARKER}**", file=out)
    return totals
