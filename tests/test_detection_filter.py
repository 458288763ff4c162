from dangerzone.common import Detection
from dangerzone.logic.detection_filter import filter_detections, unique_labels

DETECTIONS = [
    Detection(label="person", conf=0.95, bbox=(0, 0, 10, 10)),
    Detection(label="cup", conf=0.6, bbox=(5, 5, 10, 10)),
    Detection(label="dog", conf=0.59, bbox=(8, 8, 10, 10)),
    Detection(label="person", conf=0.7, bbox=(20, 20, 10, 10)),
]


def test_threshold_is_inclusive() -> None:
    kept = filter_detections(DETECTIONS, 0.6)
    assert [det.label for det in kept] == ["person", "cup", "person"]


def test_filtering_is_idempotent() -> None:
    once = filter_detections(DETECTIONS, 0.65)
    assert filter_detections(once, 0.65) == once


def test_extreme_thresholds() -> None:
    assert filter_detections(DETECTIONS, 0.0) == DETECTIONS
    assert filter_detections(DETECTIONS, 1.0) == []


def test_unique_labels_keep_first_seen_order() -> None:
    assert unique_labels(DETECTIONS) == ["person", "cup", "dog"]
