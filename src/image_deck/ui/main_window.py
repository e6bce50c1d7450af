# src/image_deck/ui/main_window.py
from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QMessageBox

from image_deck.services.image_loader import ImageLoadError, load_image
from image_deck.ui.image_canvas import ImageCanvas

logger = logging.getLogger(__name__)

APP_NAME = "ImageDeck"

NO_IMAGE_MESSAGE = (
    "No image path was given, or the image does not exist.\n"
    "Open an image with this program from your file manager."
)


class Notice(Enum):
    INFO = "info"
    ERROR = "error"


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.resize(1024, 768)

        self._canvas = ImageCanvas()
        self.setCentralWidget(self._canvas)

        self._build_actions()

    @property
    def canvas(self) -> ImageCanvas:
        return self._canvas

    def _build_actions(self) -> None:
        # ショートカットのみ（ツールバーやメニューは置かない）
        act_zoomin = QAction("Zoom In", self)
        act_zoomin.setShortcut(QKeySequence.StandardKey.ZoomIn)
        act_zoomin.triggered.connect(lambda: self._canvas.zoom_step(1))
        self.addAction(act_zoomin)

        act_zoomout = QAction("Zoom Out", self)
        act_zoomout.setShortcut(QKeySequence.StandardKey.ZoomOut)
        act_zoomout.triggered.connect(lambda: self._canvas.zoom_step(-1))
        self.addAction(act_zoomout)

        act_actual = QAction("Actual Size", self)
        act_actual.setShortcut(QKeySequence("Ctrl+0"))
        act_actual.triggered.connect(self._canvas.controller.reset)
        self.addAction(act_actual)

        act_exit = QAction("Exit", self)
        act_exit.setShortcut(QKeySequence.StandardKey.Quit)
        act_exit.triggered.connect(self.close)
        self.addAction(act_exit)

    def notify(self, kind: Notice, title: str, message: str) -> None:
        if kind is Notice.ERROR:
            QMessageBox.critical(self, title, message)
        else:
            QMessageBox.information(self, title, message)

    def open_image(self, path: Path | None) -> bool:
        if path is None or not path.is_file():
            logger.info("no image to open (path=%s)", path)
            self.notify(Notice.INFO, "Notice", NO_IMAGE_MESSAGE)
            return False

        try:
            image = load_image(path)
        except ImageLoadError as e:
            self.notify(Notice.ERROR, "Open failed", f"Could not load image: {e}")
            return False

        self._canvas.set_image(image)
        self.setWindowTitle(f"{APP_NAME} - {path.name}")
        return True
