"""Danger zone evaluation for person detections."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from dangerzone.common import Detection, VideoRect, ZoneState
from dangerzone.config import PERSON_LABEL


@dataclass(frozen=True)
class ZoneEvaluation:
    state: ZoneState
    radius: float = 0.0
    danger: List[Detection] = field(default_factory=list)

    def is_danger(self, det: Detection) -> bool:
        return det in self.danger


def evaluate_zone(
    detections: Sequence[Detection], video_rect: Optional[VideoRect]
) -> ZoneEvaluation:
    """Classify the frame against the ROI.

    Any person whose bbox center lies inside the ROI (edges included) puts
    the zone in danger; every such person is collected so it can be
    highlighted. Otherwise the closest person center to the ROI center gives
    the proximity distance. Other classes are ignored here.
    """
    if video_rect is None:
        return ZoneEvaluation(state=ZoneState.idle())

    center_x, center_y = video_rect.center
    radius = video_rect.radius
    danger: List[Detection] = []
    min_distance = math.inf

    for det in detections:
        if det.label != PERSON_LABEL:
            continue
        cx, cy = det.center
        if video_rect.contains(cx, cy):
            danger.append(det)
            continue
        min_distance = min(min_distance, math.hypot(cx - center_x, cy - center_y))

    if danger:
        return ZoneEvaluation(state=ZoneState.danger(), radius=radius, danger=danger)
    if min_distance != math.inf:
        return ZoneEvaluation(state=ZoneState.proximity(min_distance), radius=radius)
    return ZoneEvaluation(state=ZoneState.idle(), radius=radius)
