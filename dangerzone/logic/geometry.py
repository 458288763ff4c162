"""Screen-to-video coordinate mapping for the fitted display."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from dangerzone.common import ScreenRect, VideoRect


@dataclass(frozen=True)
class FitTransform:
    """Uniform scale plus centering offset between video and display pixels.

    ``scale`` is video pixels per display pixel; offsets are in display pixels.
    """

    scale: float
    offset_x: float
    offset_y: float

    def to_display(self, x: float, y: float) -> Tuple[float, float]:
        return x / self.scale + self.offset_x, y / self.scale + self.offset_y


def display_fit(
    video_dims: Tuple[float, float], display_dims: Tuple[float, float]
) -> Optional[FitTransform]:
    """Scale/offset used both to draw the frame and to map the ROI.

    The dominant axis (larger video/display ratio) fixes the scale, the
    rendered frame keeps its aspect ratio and is centered in the display.
    """
    video_w, video_h = video_dims
    display_w, display_h = display_dims
    if display_w <= 0 or display_h <= 0 or video_w <= 0 or video_h <= 0:
        return None
    scale = max(video_w / display_w, video_h / display_h)
    rendered_w = video_w / scale
    rendered_h = video_h / scale
    return FitTransform(
        scale=scale,
        offset_x=(display_w - rendered_w) / 2,
        offset_y=(display_h - rendered_h) / 2,
    )


def mirror_x(x: float, width: float, frame_width: float) -> float:
    """Reflect a span horizontally inside a frame. Applying it twice is a no-op."""
    return frame_width - (x + width)


def clip_rect(rect: VideoRect, video_dims: Tuple[float, float]) -> Optional[VideoRect]:
    video_w, video_h = video_dims
    x1 = max(0.0, rect.x)
    y1 = max(0.0, rect.y)
    x2 = min(float(video_w), rect.x + rect.width)
    y2 = min(float(video_h), rect.y + rect.height)
    if x2 <= x1 or y2 <= y1:
        return None
    if x1 == rect.x and y1 == rect.y and x2 == rect.x + rect.width and y2 == rect.y + rect.height:
        return rect
    return VideoRect(x=x1, y=y1, width=x2 - x1, height=y2 - y1)


def map_screen_rect_to_video_rect(
    screen_rect: ScreenRect,
    video_dims: Tuple[float, float],
    display_dims: Tuple[float, float],
    mirrored: bool = False,
) -> Optional[VideoRect]:
    """Express an on-screen ROI in source-frame pixels.

    The display shows the frame through ``display_fit``. When the source is a
    front camera the display is mirrored, so the result is reflected back
    into the unmirrored frame space used by detections. Parts of the ROI that
    fall outside the frame are clipped away.

    Returns None when the display or the video has no area (mapping is
    skipped for that frame only), or when nothing of the ROI is left after
    clipping.
    """
    fit = display_fit(video_dims, display_dims)
    if fit is None:
        return None
    video_x = (screen_rect.left - fit.offset_x) * fit.scale
    video_y = (screen_rect.top - fit.offset_y) * fit.scale
    video_w = screen_rect.width * fit.scale
    video_h = screen_rect.height * fit.scale
    if mirrored:
        video_x = mirror_x(video_x, video_w, video_dims[0])
    return clip_rect(VideoRect(video_x, video_y, video_w, video_h), video_dims)
