# tests/conftest.py
import os
import struct
import zlib

import pytest

# CI 用にヘッドレスで Qt を動かす
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def png_path(tmp_path):
    from PIL import Image

    p = tmp_path / "sample.png"
    Image.new("RGB", (40, 20), (200, 30, 30)).save(p)
    return p


@pytest.fixture
def truncated_ihdr_png(tmp_path):
    """PNG シグネチャは正しいが IHDR が 13 バイトに満たない（Pillow は ValueError）。"""
    body = b"\x00\x00\x00\x28"
    chunk = struct.pack(">I", len(body)) + b"IHDR" + body
    chunk += struct.pack(">I", zlib.crc32(b"IHDR" + body) & 0xFFFFFFFF)

    p = tmp_path / "truncated_ihdr.png"
    p.write_bytes(b"\x89PNG\r\n\x1a\n" + chunk)
    return p


@pytest.fixture
def bad_tile_gif(tmp_path, monkeypatch):
    """
    ヘッダは正しい GIF。デコード時にタイルが画像外にはみ出した場合と同じ
    ValueError をデコーダから送出させる。
    """
    from PIL import Image, ImageFile

    p = tmp_path / "bad_tile.gif"
    Image.new("P", (16, 16), 3).save(p)

    def broken_load(self):
        raise ValueError("tile cannot extend outside image")

    monkeypatch.setattr(ImageFile.ImageFile, "load", broken_load)
    return p
