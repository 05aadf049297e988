"""排序模組：依清單中已標註的播放次數重新排序，不重新查詢。"""

import re
from pathlib import Path
from typing import TextIO

from .config import LIST_MARKER, PLAYS_MARKER

PLAYS_RE = re.compile(r"([0-9]+(?:\.[0-9]+)?)([kM]?)" + re.escape(PLAYS_MARKER))
LINK_RE = re.compile(r"\((https?://[^\s)]+)\)")

_MULTIPLIERS = {"": 1, "k": 1_000, "M": 1_000_000}


def extract_plays(line: str) -> int:
    """取出行內「數字🎧」標註的播放次數，支援 k / M 縮寫；無標註回傳 0。"""
    m = PLAYS_RE.search(line)
    if not m:
        return 0
    number, suffix = m.groups()
    return int(round(float(number) * _MULTIPLIERS[suffix]))


def sort_sets(path: str | Path) -> list[str]:
    """讀取清單，以連結去重後依播放次數降序排列（穩定排序）。

    沒有連結的項目不去重。檔案無法讀取時拋出 OSError。
    """
    text = Path(path).read_text(encoding="utf-8")

    seen_links: set[str] = set()
    entries: list[tuple[str, int]] = []
    for line in text.splitlines():
        trim = line.strip()
        if not trim.startswith(LIST_MARKER):
            continue

        m = LINK_RE.search(trim)
        link = m.group(1) if m else ""
        if link:
            if link in seen_links:
                continue
            seen_links.add(link)

        entries.append((trim, extract_plays(trim)))

    entries.sort(key=lambda e: e[1], reverse=True)
    return [line for line, _ in entries]


def print_sorted_sets(path: str | Path, out: TextIO | None = None) -> None:
    for line in sort_sets(path):
        print(line, file=out)
