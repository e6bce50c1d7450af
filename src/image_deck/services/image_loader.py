# src/image_deck/services/image_loader.py
from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, ImageOps
from PyQt6.QtGui import QImage

logger = logging.getLogger(__name__)


class ImageLoadError(Exception):
    """パスから表示可能な画像を作れなかったときに送出する。"""


def load_image(path: Path) -> QImage:
    if not path.is_file():
        raise ImageLoadError(f"file not found: {path}")

    try:
        with Image.open(path) as im:
            # カメラのJPEG: EXIFの向きタグに従う
            rgba = ImageOps.exif_transpose(im).convert("RGBA")
    except Exception as e:
        # ヘッダが正しくてもデコード中に ValueError 等が出る（IHDR破損、タイル範囲外など）
        logger.error("failed to decode %s: %s", path, e)
        raise ImageLoadError(f"cannot decode {path.name}: {e}") from e

    data = rgba.tobytes("raw", "RGBA")
    qimg = QImage(data, rgba.width, rgba.height, rgba.width * 4, QImage.Format.Format_RGBA8888)

    # QImage は data を所有しないのでコピーして切り離す
    qimg = qimg.copy()
    logger.info("loaded %s (%dx%d)", path, qimg.width(), qimg.height())
    return qimg
