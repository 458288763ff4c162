import pytest

from dangerzone.common import ScreenRect, VideoRect
from dangerzone.logic.geometry import clip_rect, display_fit, map_screen_rect_to_video_rect, mirror_x


def test_scenario_maps_with_scale_factor_two() -> None:
    rect = map_screen_rect_to_video_rect(ScreenRect(100, 50, 80, 60), (1280, 720), (640, 360))
    assert rect == VideoRect(200, 100, 160, 120)


@pytest.mark.parametrize("display_dims", [(0, 360), (640, 0), (0, 0)])
def test_zero_display_skips_mapping(display_dims) -> None:
    assert map_screen_rect_to_video_rect(ScreenRect(10, 10, 50, 50), (1280, 720), display_dims) is None


def test_zero_video_skips_mapping() -> None:
    assert map_screen_rect_to_video_rect(ScreenRect(10, 10, 50, 50), (0, 0), (640, 360)) is None


def test_dominant_axis_sets_scale_and_centers_other_axis() -> None:
    fit = display_fit((1280, 720), (640, 480))
    assert fit.scale == 2.0
    assert fit.offset_x == 0.0
    assert fit.offset_y == 60.0
    rect = map_screen_rect_to_video_rect(ScreenRect(100, 60, 80, 60), (1280, 720), (640, 480))
    assert rect == VideoRect(200, 0, 160, 120)


@pytest.mark.parametrize(
    "screen_rect",
    [ScreenRect(100, 80, 80, 60), ScreenRect(0, 60, 50, 50), ScreenRect(333.5, 101.25, 120, 90)],
)
def test_mapping_round_trips_through_the_fit(screen_rect) -> None:
    video_dims, display_dims = (1280, 720), (640, 480)
    fit = display_fit(video_dims, display_dims)
    rect = map_screen_rect_to_video_rect(screen_rect, video_dims, display_dims)
    assert rect is not None
    assert fit.to_display(rect.x, rect.y) == pytest.approx((screen_rect.left, screen_rect.top))
    assert rect.width / fit.scale == pytest.approx(screen_rect.width)
    assert rect.height / fit.scale == pytest.approx(screen_rect.height)


def test_mirrored_mapping_reflects_horizontally() -> None:
    rect = map_screen_rect_to_video_rect(
        ScreenRect(100, 50, 80, 60), (1280, 720), (640, 360), mirrored=True
    )
    assert rect == VideoRect(920, 100, 160, 120)


def test_mirroring_twice_restores_x() -> None:
    assert mirror_x(mirror_x(200, 160, 1280), 160, 1280) == 200
    assert mirror_x(mirror_x(17.5, 3.25, 640), 3.25, 640) == pytest.approx(17.5)


def test_partially_outside_rect_is_clipped_to_frame() -> None:
    rect = map_screen_rect_to_video_rect(ScreenRect(-20, 50, 80, 60), (1280, 720), (640, 360))
    assert rect == VideoRect(0, 100, 120, 120)


def test_rect_outside_frame_maps_to_none() -> None:
    assert map_screen_rect_to_video_rect(ScreenRect(700, 50, 80, 60), (1280, 720), (640, 360)) is None


def test_clip_keeps_inner_rect_untouched() -> None:
    rect = VideoRect(10, 20, 30, 40)
    assert clip_rect(rect, (100, 100)) is rect
