# src/image_deck/core.py
"""
アプリケーションの入口。ロギング、QApplication、ウィンドウ、起動時のパスを扱う。
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from image_deck.ui.main_window import APP_NAME, MainWindow

LOG_LEVEL_ENV = "IMAGE_DECK_LOG_LEVEL"


def setup_logging(level_name: str | None = None) -> int:
    name = (level_name or os.environ.get(LOG_LEVEL_ENV) or "INFO").upper()
    level = getattr(logging, name, None)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    return level


def path_from_argv(argv: list[str]) -> Path | None:
    # 関連付け /「プログラムから開く」では第1引数に画像パスが来る
    if len(argv) < 2 or not argv[1]:
        return None
    return Path(argv[1]).expanduser()


def main() -> None:
    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("starting %s", APP_NAME)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    win = MainWindow()
    win.show()

    # 画像を表示できなくてもウィンドウは（空のまま）開いておく
    win.open_image(path_from_argv(sys.argv))

    sys.exit(app.exec())
