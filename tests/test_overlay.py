import numpy as np

from dangerzone.common import Detection, ScreenRect, VisualState
from dangerzone.frame_loop import CycleResult
from dangerzone.logic.proximity import render_zone_visual
from dangerzone.logic.zone import evaluate_zone
from dangerzone.overlay import Overlay, class_color, fit_frame, hsl_to_bgr
from dangerzone.session import SessionState


def test_hsl_primaries() -> None:
    b, g, r = hsl_to_bgr(0)
    assert r >= 250 and g <= 2 and b <= 2
    b, g, r = hsl_to_bgr(120)
    assert g >= 250 and r <= 2 and b <= 2


def test_class_colour_is_deterministic() -> None:
    assert class_color("person") == class_color("person")


def test_fit_frame_letterboxes_the_short_axis() -> None:
    frame = np.full((720, 1280, 3), 255, dtype=np.uint8)
    canvas, fit = fit_frame(frame, (640, 480))
    assert canvas.shape == (480, 640, 3)
    assert fit.scale == 2.0
    assert fit.offset_y == 60.0
    assert canvas[10, 320].tolist() == [0, 0, 0]
    assert canvas[240, 320].tolist() == [255, 255, 255]


def test_fit_frame_with_empty_display_returns_blank_canvas() -> None:
    canvas, fit = fit_frame(np.zeros((10, 10, 3), dtype=np.uint8), (0, 0))
    assert fit is None
    assert canvas.shape == (1, 1, 3)


def test_compose_draws_on_a_display_sized_canvas() -> None:
    session = SessionState(detecting=True, roi_active=True, display_dims=(640, 360))
    session.roi.rect = ScreenRect(100, 50, 80, 60)
    person = Detection(label="person", conf=0.9, bbox=(190, 90, 40, 40))
    evaluation = evaluate_zone([person], None)
    result = CycleResult(
        detections=[person],
        evaluation=evaluation,
        visual=render_zone_visual(evaluation.state, evaluation.radius),
    )
    display = Overlay().compose(np.zeros((720, 1280, 3), dtype=np.uint8), result, session)
    assert display.shape == (360, 640, 3)
    assert display.any()


def test_idle_screen_matches_display() -> None:
    session = SessionState(display_dims=(320, 240))
    assert Overlay().idle_screen(session).shape == (240, 320, 3)


def test_danger_style_uses_pulsing_visual() -> None:
    visual = VisualState(border_hue=0.0, fill_alpha=0.4, label="danger detected", pulsing=True)
    session = SessionState(detecting=True, roi_active=True, display_dims=(640, 360))
    evaluation = evaluate_zone([], None)
    result = CycleResult(detections=[], evaluation=evaluation, visual=visual, mirrored=True)
    display = Overlay().compose(np.zeros((720, 1280, 3), dtype=np.uint8), result, session)
    assert display.shape == (360, 640, 3)
