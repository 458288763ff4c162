"""Drag/resize handling for the on-screen danger zone."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from dangerzone.common import ScreenRect
from dangerzone.config import ROI_DEFAULT_SIZE, ROI_HANDLE_SIZE, ROI_MIN_SIZE


class RoiGesture(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    RESIZING = "resizing"


def centered_rect(
    display_dims: Tuple[int, int], size: Tuple[int, int] = ROI_DEFAULT_SIZE
) -> ScreenRect:
    display_w, display_h = display_dims
    width = min(size[0], display_w)
    height = min(size[1], display_h)
    return ScreenRect((display_w - width) / 2, (display_h - height) / 2, width, height)


@dataclass
class RoiEditor:
    """Press/move/release state machine over a ScreenRect.

    A press on the bottom-right handle resizes, a press anywhere else inside
    the rectangle drags it. The rectangle is kept inside the display bounds
    when those are known and never shrinks below ``min_size``.
    """

    rect: ScreenRect
    display_dims: Tuple[int, int] = (0, 0)
    min_size: int = ROI_MIN_SIZE
    handle_size: int = ROI_HANDLE_SIZE
    gesture: RoiGesture = RoiGesture.IDLE
    _anchor: Tuple[float, float] = field(default=(0.0, 0.0), repr=False)
    _start: Optional[ScreenRect] = field(default=None, repr=False)

    def on_handle(self, x: float, y: float) -> bool:
        right = self.rect.left + self.rect.width
        bottom = self.rect.top + self.rect.height
        return (
            right - self.handle_size <= x <= right
            and bottom - self.handle_size <= y <= bottom
        )

    def inside(self, x: float, y: float) -> bool:
        return (
            self.rect.left <= x <= self.rect.left + self.rect.width
            and self.rect.top <= y <= self.rect.top + self.rect.height
        )

    def press(self, x: float, y: float) -> RoiGesture:
        if self.gesture is not RoiGesture.IDLE:
            return self.gesture
        if self.on_handle(x, y):
            self.gesture = RoiGesture.RESIZING
        elif self.inside(x, y):
            self.gesture = RoiGesture.DRAGGING
        else:
            return self.gesture
        self._anchor = (x, y)
        self._start = self.rect
        return self.gesture

    def move(self, x: float, y: float) -> ScreenRect:
        if self.gesture is RoiGesture.IDLE:
            return self.rect
        start = self._start or self.rect
        dx = x - self._anchor[0]
        dy = y - self._anchor[1]
        if self.gesture is RoiGesture.DRAGGING:
            self.rect = self._clamp_position(
                replace(start, left=start.left + dx, top=start.top + dy)
            )
        else:
            self.rect = self._clamp_size(
                replace(
                    start,
                    width=max(self.min_size, start.width + dx),
                    height=max(self.min_size, start.height + dy),
                )
            )
        return self.rect

    def release(self) -> None:
        self.gesture = RoiGesture.IDLE
        self._start = None

    def resize_display(self, display_dims: Tuple[int, int]) -> None:
        if display_dims == self.display_dims:
            return
        self.display_dims = display_dims
        self.rect = self._clamp_size(self._clamp_position(self.rect))

    def _bounded(self) -> bool:
        return self.display_dims[0] > 0 and self.display_dims[1] > 0

    def _clamp_position(self, rect: ScreenRect) -> ScreenRect:
        if not self._bounded():
            return rect
        display_w, display_h = self.display_dims
        left = max(0.0, min(rect.left, display_w - rect.width))
        top = max(0.0, min(rect.top, display_h - rect.height))
        return replace(rect, left=left, top=top)

    def _clamp_size(self, rect: ScreenRect) -> ScreenRect:
        if not self._bounded():
            return rect
        display_w, display_h = self.display_dims
        width = max(self.min_size, min(rect.width, display_w - rect.left))
        height = max(self.min_size, min(rect.height, display_h - rect.top))
        return replace(rect, width=width, height=height)
