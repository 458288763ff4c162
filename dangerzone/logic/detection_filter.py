"""Confidence filtering of raw detections."""

from __future__ import annotations

from typing import Iterable, List

from dangerzone.common import Detection
from dangerzone.config import CONF_THRESHOLD


def filter_detections(
    detections: Iterable[Detection], min_confidence: float = CONF_THRESHOLD
) -> List[Detection]:
    return [det for det in detections if det.conf >= min_confidence]


def unique_labels(detections: Iterable[Detection]) -> List[str]:
    """Detected class labels, de-duplicated in first-seen order."""
    seen: List[str] = []
    for det in detections:
        if det.label not in seen:
            seen.append(det.label)
    return seen
