import pytest

from dangerzone.common import Detection, VideoRect, ZoneKind
from dangerzone.logic.zone import evaluate_zone

ROI = VideoRect(200, 100, 160, 120)


def _person(x: float, y: float, w: float = 20, h: float = 20, conf: float = 0.9) -> Detection:
    return Detection(label="person", conf=conf, bbox=(x, y, w, h))


def test_person_center_inside_is_danger() -> None:
    person = _person(190, 90, 40, 40)
    evaluation = evaluate_zone([person], ROI)
    assert evaluation.state.kind is ZoneKind.DANGER
    assert evaluation.danger == [person]
    assert evaluation.is_danger(person)


@pytest.mark.parametrize("bbox_origin", [(190, 90), (350, 210), (350, 90), (190, 210)])
def test_center_on_corner_counts_as_inside(bbox_origin) -> None:
    evaluation = evaluate_zone([_person(*bbox_origin)], ROI)
    assert evaluation.state.kind is ZoneKind.DANGER


def test_every_person_inside_is_collected() -> None:
    first = _person(230, 130)
    second = _person(300, 180)
    outside = _person(600, 400)
    evaluation = evaluate_zone([first, outside, second], ROI)
    assert evaluation.state.kind is ZoneKind.DANGER
    assert evaluation.danger == [first, second]
    assert not evaluation.is_danger(outside)


def test_closest_person_outside_gives_proximity() -> None:
    near = _person(490, 150)  # center (500, 160), 220 px right of the ROI center
    far = _person(890, 150)
    evaluation = evaluate_zone([far, near], ROI)
    assert evaluation.state.kind is ZoneKind.PROXIMITY
    assert evaluation.state.min_distance == pytest.approx(220.0)
    assert evaluation.radius == pytest.approx(70.0)
    assert evaluation.danger == []


def test_other_classes_never_trigger_the_zone() -> None:
    cup = Detection(label="cup", conf=0.9, bbox=(270, 150, 20, 20))
    assert evaluate_zone([cup], ROI).state.kind is ZoneKind.IDLE

    person = _person(490, 150)
    evaluation = evaluate_zone([cup, person], ROI)
    assert evaluation.state.kind is ZoneKind.PROXIMITY
    assert evaluation.state.min_distance == pytest.approx(220.0)


def test_no_detections_is_idle() -> None:
    assert evaluate_zone([], ROI).state.kind is ZoneKind.IDLE


def test_inactive_roi_is_idle() -> None:
    evaluation = evaluate_zone([_person(190, 90, 40, 40)], None)
    assert evaluation.state.kind is ZoneKind.IDLE
    assert evaluation.danger == []
