"""set 清單解析模組：讀取 markdown 清單，回傳去重後的 Entry 列表。

只處理以「* 」開頭的清單項目：
  - 「* [名稱](連結)」→ 有連結的 set
  - 其他清單項目（如「* Faixa Azul (June 2023) _// NOT PUBLISHED YET_」）→ 原樣輸出
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from .config import LIST_MARKER

logger = logging.getLogger(__name__)

LINK_RE = re.compile(r"\* \[(.*?)\]\((.*?)\)")


@dataclass(frozen=True)
class Entry:
    """清單項目資料模型。"""
    name: str       # set 名稱（未連結項目為整行文字）
    link: str       # set 頁面連結，未發佈則為空字串
    raw_line: str   # 去除前後空白的原始行

    @property
    def key(self) -> str:
        """去重鍵：優先使用連結，否則使用原始行。"""
        return self.link or self.raw_line

    @property
    def is_linked(self) -> bool:
        return bool(self.link)


def parse_line(line: str) -> Entry | None:
    """解析單行文字，非清單項目回傳 None。"""
    trim = line.strip()
    if not trim.startswith(LIST_MARKER):
        return None

    m = LINK_RE.search(trim)
    if m:
        return Entry(name=m.group(1), link=m.group(2), raw_line=trim)
    return Entry(name=trim, link="", raw_line=trim)


def parse_sets(path: str | Path) -> list[Entry]:
    """讀取 set 清單檔案，依首次出現順序回傳去重後的 Entry。

    檔案無法讀取時拋出 OSError。
    """
    logger.debug(f"讀取清單：{path}")
    text = Path(path).read_text(encoding="utf-8")

    seen: set[str] = set()
    entries: list[Entry] = []
    for line in text.splitlines():
        entry = parse_line(line)
        if entry is None or entry.key in seen:
            continue
        seen.add(entry.key)
        if entry.is_linked:
            logger.debug(f"找到 set：{entry.name} ({entry.link})")
        else:
            logger.debug(f"找到未連結項目：{entry.raw_line}")
        entries.append(entry)

    logger.debug(f"共 {len(entries)} 個不重複項目（含未連結）")
    return entries
