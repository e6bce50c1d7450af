# src/image_deck/viewport.py
"""
画像キャンバスのズーム/パン状態。

ウィンドウ無しで計算をテストできるよう Qt には依存しない。
キャンバスが座標を渡し、描画時に `ViewportController.transform` を適用する。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)

Point = tuple[float, float]


def _noop() -> None:
    pass


@dataclass(frozen=True)
class ZoomLimits:
    step: float = 1.1  # ホイール1ノッチあたりの倍率
    minimum: float = 0.5
    maximum: float = 5.0

    def clamp(self, scale: float) -> float:
        return max(self.minimum, min(self.maximum, scale))


@dataclass(frozen=True)
class ViewTransform:
    """
    原点基準の等倍率拡大のあと平行移動する。
    """
    scale: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0

    @property
    def offset(self) -> Point:
        return (self.offset_x, self.offset_y)

    def map_point(self, x: float, y: float) -> Point:
        return (x * self.scale + self.offset_x, y * self.scale + self.offset_y)

    def inverted_point(self, x: float, y: float) -> Point:
        return ((x - self.offset_x) / self.scale, (y - self.offset_y) / self.scale)


@dataclass
class DragState:
    active: bool = False
    last_position: Point = (0.0, 0.0)


class ViewportController:
    """
    表示中の画像の拡大率とオフセットを保持する。

    フック:
        on_change       -- 拡大率/オフセット変更後（再描画）
        capture_pointer -- ドラッグ開始時
        release_pointer -- 左ボタンを離すたび
    """

    def __init__(
        self,
        limits: ZoomLimits | None = None,
        on_change: Callable[[], None] | None = None,
        capture_pointer: Callable[[], None] | None = None,
        release_pointer: Callable[[], None] | None = None,
    ) -> None:
        self._limits = limits or ZoomLimits()
        self._on_change = on_change or _noop
        self._capture_pointer = capture_pointer or _noop
        self._release_pointer = release_pointer or _noop

        self._scale: float = 1.0
        self._offset_x: float = 0.0
        self._offset_y: float = 0.0
        self._drag = DragState()

        self.reset()

    # ---- state ----

    @property
    def limits(self) -> ZoomLimits:
        return self._limits

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def offset(self) -> Point:
        return (self._offset_x, self._offset_y)

    @property
    def is_dragging(self) -> bool:
        return self._drag.active

    @property
    def transform(self) -> ViewTransform:
        return ViewTransform(self._scale, self._offset_x, self._offset_y)

    def reset(self) -> None:
        self._scale = 1.0
        self._offset_x = 0.0
        self._offset_y = 0.0
        self._drag = DragState()
        self._on_change()

    # ---- input ----

    def on_wheel(self, position: Point, delta: float) -> None:
        factor = self._limits.step if delta > 0 else 1 / self._limits.step
        self._scale = self._limits.clamp(self._scale * factor)

        if self._scale > 1:
            # クランプで実際の変化が小さくなっても生の倍率を使う（アンカーが正確なのは拡大率1のときだけ）。
            # 拡大/縮小をN回ずつ繰り返すと 1.0000000000000002 になり得るが、元の挙動どおり残す。
            x, y = position
            self._offset_x -= x * (factor - 1)
            self._offset_y -= y * (factor - 1)
        else:
            # 100%以下なら常に中央
            self._offset_x = 0.0
            self._offset_y = 0.0

        logger.debug("zoom -> %.4f offset=(%.1f, %.1f)", self._scale, self._offset_x, self._offset_y)
        self._on_change()

    def on_left_button_down(self, position: Point) -> bool:
        # 画像がウィンドウより大きくないとドラッグできない
        if self._scale <= 1:
            return False

        self._drag = DragState(active=True, last_position=position)
        self._capture_pointer()
        logger.debug("drag start at %s", position)
        return True

    def on_mouse_move(self, position: Point) -> bool:
        if not self._drag.active:
            return False

        lx, ly = self._drag.last_position
        self._offset_x += position[0] - lx
        self._offset_y += position[1] - ly
        self._drag.last_position = position
        self._on_change()
        return True

    def on_left_button_up(self) -> None:
        if self._drag.active:
            logger.debug("drag end offset=(%.1f, %.1f)", self._offset_x, self._offset_y)
        self._drag.active = False
        self._release_pointer()
