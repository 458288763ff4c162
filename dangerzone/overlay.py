"""Drawing of detections, the danger zone and the HUD."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any, List, Optional, Sequence, Tuple

import cv2
import numpy as np

from dangerzone.common import Detection, ScreenRect, VideoRect, VisualState
from dangerzone.log_console import ConsoleLine
from dangerzone.logic.colors import class_hue
from dangerzone.logic.detection_filter import unique_labels
from dangerzone.logic.geometry import FitTransform, display_fit, mirror_x
from dangerzone.voice.phrases import message, translate

if TYPE_CHECKING:
    from dangerzone.frame_loop import CycleResult
    from dangerzone.session import SessionState

Color = Tuple[int, int, int]

FONT = cv2.FONT_HERSHEY_SIMPLEX
RED: Color = (0, 0, 255)
BLACK: Color = (0, 0, 0)
GREEN: Color = (0, 255, 0)
LEVEL_COLORS = {
    "ERROR": (68, 68, 239),
    "WARNING": (8, 179, 234),
    "SUCCESS": (94, 197, 34),
    "INFO": (94, 197, 34),
}


def hsl_to_bgr(hue: float, lightness: float = 0.5) -> Color:
    """Fully saturated HSL colour as a BGR tuple."""
    hls = np.uint8([[[int(round(hue / 2)) % 180, int(round(lightness * 255)), 255]]])
    b, g, r = cv2.cvtColor(hls, cv2.COLOR_HLS2BGR)[0, 0]
    return int(b), int(g), int(r)


def class_color(label: str) -> Color:
    return hsl_to_bgr(class_hue(label))


def fit_frame(frame: Any, display_dims: Tuple[int, int]) -> Tuple[Any, Optional[FitTransform]]:
    """Scale ``frame`` onto a display-sized canvas the way the ROI is mapped."""
    display_w, display_h = display_dims
    canvas = np.zeros((max(display_h, 1), max(display_w, 1), 3), dtype=np.uint8)
    height, width = frame.shape[:2]
    fit = display_fit((width, height), display_dims)
    if fit is None:
        return canvas, None
    rendered_w = max(1, min(display_w, int(round(width / fit.scale))))
    rendered_h = max(1, min(display_h, int(round(height / fit.scale))))
    resized = cv2.resize(frame, (rendered_w, rendered_h), interpolation=cv2.INTER_AREA)
    x0 = max(0, int(round(fit.offset_x)))
    y0 = max(0, int(round(fit.offset_y)))
    x1 = min(display_w, x0 + rendered_w)
    y1 = min(display_h, y0 + rendered_h)
    canvas[y0:y1, x0:x1] = resized[: y1 - y0, : x1 - x0]
    return canvas, fit


def _dashed_rect(image: Any, p1: Tuple[int, int], p2: Tuple[int, int], color: Color, dash: int = 5) -> None:
    x1, y1 = p1
    x2, y2 = p2
    for x in range(x1, x2, dash * 2):
        cv2.line(image, (x, y1), (min(x + dash, x2), y1), color, 1)
        cv2.line(image, (x, y2), (min(x + dash, x2), y2), color, 1)
    for y in range(y1, y2, dash * 2):
        cv2.line(image, (x1, y), (x1, min(y + dash, y2)), color, 1)
        cv2.line(image, (x2, y), (x2, min(y + dash, y2)), color, 1)


def _label_box(image: Any, text: str, origin: Tuple[int, int], color: Color, scale: float = 0.55) -> None:
    (text_w, text_h), baseline = cv2.getTextSize(text, FONT, scale, 1)
    x, y = origin
    cv2.rectangle(image, (x, y), (x + text_w + 4, y + text_h + baseline + 4), color, -1)
    cv2.putText(image, text, (x + 2, y + text_h + 2), FONT, scale, BLACK, 1, cv2.LINE_AA)


def _blend_rect(image: Any, p1: Tuple[int, int], p2: Tuple[int, int], color: Color, alpha: float) -> None:
    x1, y1 = max(0, p1[0]), max(0, p1[1])
    x2, y2 = min(image.shape[1], p2[0]), min(image.shape[0], p2[1])
    if x2 <= x1 or y2 <= y1:
        return
    region = image[y1:y2, x1:x2]
    fill = np.full_like(region, color)
    image[y1:y2, x1:x2] = cv2.addWeighted(fill, alpha, region, 1 - alpha, 0)


def draw_detections(
    frame: Any,
    detections: Sequence[Detection],
    danger: Sequence[Detection],
    language: str,
    mirrored: bool = False,
    thickness: int = 2,
) -> None:
    """Boxes and labels on a frame already flipped for display when mirrored."""
    width = frame.shape[1]
    for det in detections:
        x, y, w, h = det.bbox
        if mirrored:
            x = mirror_x(x, w, width)
        p1 = (int(x), int(y))
        p2 = (int(x + w), int(y + h))
        color = class_color(det.label)
        line = thickness
        if det in danger:
            color = RED
            line = 6
            cv2.putText(
                frame,
                f"! {message('danger', language)}",
                (p1[0], max(20, p1[1] - 10)),
                FONT,
                0.8,
                RED,
                2,
                cv2.LINE_AA,
            )
        cv2.rectangle(frame, p1, p2, color, line)
        _label_box(frame, translate(det.label, language), p1, color)


def draw_roi_outline(frame: Any, video_rect: VideoRect, mirrored: bool = False) -> None:
    x = video_rect.x
    if mirrored:
        x = mirror_x(x, video_rect.width, frame.shape[1])
    p1 = (int(x), int(video_rect.y))
    p2 = (int(x + video_rect.width), int(video_rect.y + video_rect.height))
    _dashed_rect(frame, p1, p2, (80, 80, 255))


def draw_roi(canvas: Any, rect: ScreenRect, visual: VisualState, language: str, now: float) -> None:
    p1 = (int(rect.left), int(rect.top))
    p2 = (int(rect.left + rect.width), int(rect.top + rect.height))
    border = hsl_to_bgr(visual.border_hue)
    alpha = visual.fill_alpha
    if visual.pulsing:
        # ~1 Hz breathing between the nominal alpha and half of it
        alpha *= 0.75 + 0.25 * np.sin(now * 2 * np.pi)
    _blend_rect(canvas, p1, p2, border, alpha)
    cv2.rectangle(canvas, p1, p2, border, 2)
    _label_box(canvas, message(visual.label, language), (p1[0], max(0, p1[1] - 22)), hsl_to_bgr(visual.border_hue, 0.4))
    handle = 10
    cv2.rectangle(canvas, (p2[0] - handle, p2[1] - handle), p2, border, -1)


def draw_results_panel(canvas: Any, labels: List[str], language: str) -> None:
    x = canvas.shape[1] - 230
    y = 40
    if not labels:
        cv2.putText(canvas, message("scanning", language), (x, y), FONT, 0.5, (140, 140, 140), 1, cv2.LINE_AA)
        return
    for label in labels:
        color = class_color(label)
        cv2.line(canvas, (x - 6, y - 12), (x - 6, y + 4), color, 3)
        text = f"{message('detected', language)}: {translate(label, language).upper()}"
        cv2.putText(canvas, text, (x, y), FONT, 0.5, color, 1, cv2.LINE_AA)
        y += 22


def draw_console(canvas: Any, lines: Sequence[ConsoleLine]) -> None:
    height = canvas.shape[0]
    y = height - 10 - 18 * (len(lines) - 1)
    for line in lines:
        color = LEVEL_COLORS.get(line.level, (200, 200, 200))
        cv2.putText(canvas, line.text, (10, y), FONT, 0.45, color, 1, cv2.LINE_AA)
        y += 18


def draw_status(canvas: Any, online: bool, fps: float, min_confidence: float, voice_on: bool) -> None:
    status = "ONLINE" if online else "OFFLINE"
    color = GREEN if online else RED
    cv2.circle(canvas, (16, 16), 6, color, -1)
    cv2.putText(canvas, status, (28, 21), FONT, 0.5, color, 1, cv2.LINE_AA)
    cv2.putText(canvas, f"FPS: {fps:.1f}", (10, 42), FONT, 0.5, GREEN, 1, cv2.LINE_AA)
    cv2.putText(
        canvas,
        f"conf {round(min_confidence * 100)}% | voice {'on' if voice_on else 'off'}",
        (10, 62),
        FONT,
        0.45,
        (200, 200, 200),
        1,
        cv2.LINE_AA,
    )


class Overlay:
    """Composes the display image for one cycle."""

    def __init__(self, console_lines=None) -> None:
        self._console_lines = console_lines or (lambda: [])

    def compose(
        self,
        frame: Any,
        result: "CycleResult",
        session: "SessionState",
        voice_on: bool = True,
        show_roi: bool = True,
    ) -> Any:
        language = session.language
        annotated = cv2.flip(frame, 1) if result.mirrored else frame.copy()
        if result.video_rect is not None:
            draw_roi_outline(annotated, result.video_rect, result.mirrored)
        draw_detections(
            annotated,
            result.detections,
            result.evaluation.danger,
            language,
            mirrored=result.mirrored,
            thickness=2 if show_roi else 4,
        )
        canvas, _ = fit_frame(annotated, session.display_dims)
        if show_roi and session.roi_active:
            draw_roi(canvas, session.roi.rect, result.visual, language, time.monotonic())
        draw_results_panel(canvas, unique_labels(result.detections), language)
        draw_status(canvas, session.detecting, result.fps, session.min_confidence, voice_on)
        draw_console(canvas, self._console_lines())
        return canvas

    def idle_screen(self, session: "SessionState", voice_on: bool = True) -> Any:
        display_w, display_h = session.display_dims
        canvas = np.zeros((max(display_h, 1), max(display_w, 1), 3), dtype=np.uint8)
        draw_status(canvas, False, 0.0, session.min_confidence, voice_on)
        draw_console(canvas, self._console_lines())
        return canvas
