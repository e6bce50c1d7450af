# src/image_deck/ui/image_canvas.py
from __future__ import annotations

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QColor, QImage, QPainter, QPixmap
from PyQt6.QtWidgets import QWidget

from image_deck.viewport import ViewportController, ZoomLimits


class ImageCanvas(QWidget):
    def __init__(self, limits: ZoomLimits | None = None) -> None:
        super().__init__()
        self.setMinimumSize(200, 150)

        self._pixmap: QPixmap | None = None
        self.controller = ViewportController(
            limits=limits,
            on_change=self.update,
            capture_pointer=self.grabMouse,
            release_pointer=self.releaseMouse,
        )

    # ---- public ----

    def set_image(self, image: QImage | None) -> None:
        if image is None or image.isNull():
            self._pixmap = None
        else:
            self._pixmap = QPixmap.fromImage(image)
        self.controller.reset()

    def has_image(self) -> bool:
        return self._pixmap is not None

    def zoom_step(self, direction: int) -> None:
        """キャンバス中央を基準に1段ズーム（キーボードショートカット用）。"""
        if not self._pixmap:
            return
        center = QPointF(self.width() * 0.5, self.height() * 0.5)
        self.controller.on_wheel(self.widget_to_image(center), direction)

    def base_rect(self) -> QRectF:
        """
        ズーム/パン変換を掛ける前に pixmap が占める矩形。
        縦横比を保ってウィジェットに収め、中央に置く。
        """
        if not self._pixmap:
            return QRectF()

        pw = float(self._pixmap.width())
        ph = float(self._pixmap.height())
        if pw <= 0 or ph <= 0:
            return QRectF()

        fit = min(self.width() / pw, self.height() / ph)
        w = pw * fit
        h = ph * fit
        return QRectF((self.width() - w) * 0.5, (self.height() - h) * 0.5, w, h)

    def image_rect(self) -> QRectF:
        """現在の変換を適用した、実際に描画される矩形（ウィジェット座標）。"""
        base = self.base_rect()
        if base.isEmpty():
            return QRectF()

        t = self.controller.transform
        x0, y0 = t.map_point(0.0, 0.0)
        x1, y1 = t.map_point(base.width(), base.height())
        return QRectF(QPointF(x0, y0), QPointF(x1, y1)).translated(base.topLeft())

    def widget_to_image(self, pos: QPointF) -> tuple[float, float]:
        """
        ウィジェット座標 -> 画像ローカル座標（base_rect 基準、現在の変換を戻したもの）。
        """
        origin = self.base_rect().topLeft()
        return self.controller.transform.inverted_point(pos.x() - origin.x(), pos.y() - origin.y())

    # ---- Qt events ----

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(32, 32, 32))

        if self._pixmap:
            # 原点基準で拡大し、その後に平行移動
            painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
            painter.drawPixmap(self.image_rect(), self._pixmap, QRectF(self._pixmap.rect()))

        painter.end()

    def wheelEvent(self, event) -> None:
        delta = event.angleDelta().y()
        # 横スクロール（delta=0）はズームに使わない
        if not self._pixmap or delta == 0:
            event.ignore()
            return

        self.controller.on_wheel(self.widget_to_image(event.position()), delta)
        event.accept()

    def mousePressEvent(self, event) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return

        p = event.position()
        if self.controller.on_left_button_down((p.x(), p.y())):
            self.setCursor(Qt.CursorShape.ClosedHandCursor)
        event.accept()

    def mouseMoveEvent(self, event) -> None:
        p = event.position()
        if not self.controller.on_mouse_move((p.x(), p.y())):
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mouseReleaseEvent(event)
            return

        self.controller.on_left_button_up()
        self.unsetCursor()
        event.accept()
