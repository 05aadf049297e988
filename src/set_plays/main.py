"""主流程模組：解析命令列參數，執行播放次數彙整或排序。

使用方式：
    python -m set_plays                    # 查詢各平台播放次數並輸出清單
    python -m set_plays sort               # 依既有標註的播放次數排序清單
    python -m set_plays --file sets.md     # 指定清單檔案
    python -m set_plays --debug            # 輸出除錯日誌（stderr）
"""

import argparse
import logging
import sys

from .aggregate import run
from .config import SETS_FILE
from .sort import print_sorted_sets

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """設定日誌格式；日誌寫入 stderr，stdout 只輸出清單。"""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # httpx 的請求日誌在除錯模式下也過於冗長
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def main(argv: list[str] | None = None) -> None:
    """CLI 進入點：解析命令列參數並執行對應功能。"""
    parser = argparse.ArgumentParser(description="彙整 set 清單在 Mixcloud / SoundCloud / YouTube 的播放次數")
    parser.add_argument("mode", nargs="?", choices=["sort"],
                        help="sort：依清單中已標註的播放次數排序，不重新查詢")
    parser.add_argument("--file", default=SETS_FILE, metavar="PATH",
                        help=f"set 清單檔案（預設 {SETS_FILE}）")
    parser.add_argument("--debug", action="store_true", help="輸出除錯日誌")
    args = parser.parse_args(argv)

    setup_logging(args.debug)

    try:
        if args.mode == "sort":
            print_sorted_sets(args.file)
        else:
            totals = run(args.file)
            logger.info(f"完成：{totals.sets} 個 set，共 {totals.plays} 次播放")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading {args.file}: {e}")
        sys.exit(1)
