"""Zone state -> ROI visual style."""

from __future__ import annotations

from dangerzone.common import VisualState, ZoneKind, ZoneState
from dangerzone.config import SAFE_ZONE_FACTOR

HUE_DANGER = 0.0
HUE_SAFE = 120.0

LABEL_DANGER = "danger detected"
LABEL_IMMINENT = "danger imminent"
LABEL_CAUTION = "caution"
LABEL_SAFE = "safe zone"


def proximity_factor(distance: float, radius: float) -> float:
    """0.0 at or inside the ROI edge, 1.0 at SAFE_ZONE_FACTOR radii and beyond."""
    danger_zone = radius
    safe_zone = radius * SAFE_ZONE_FACTOR
    span = safe_zone - danger_zone
    if span <= 0:
        return 0.0 if distance <= danger_zone else 1.0
    return max(0.0, min(1.0, (distance - danger_zone) / span))


def render_zone_visual(state: ZoneState, radius: float) -> VisualState:
    # no hysteresis: each frame is styled from its own evaluation only
    if state.kind is ZoneKind.DANGER:
        return VisualState(border_hue=HUE_DANGER, fill_alpha=0.4, label=LABEL_DANGER, pulsing=True)
    if state.kind is ZoneKind.PROXIMITY and state.min_distance is not None:
        factor = proximity_factor(state.min_distance, radius)
        hue = factor * HUE_SAFE
        alpha = 0.1 + (1.0 - factor) * 0.2
        if hue < 40:
            label = LABEL_IMMINENT
        elif hue < 80:
            label = LABEL_CAUTION
        else:
            label = LABEL_SAFE
        return VisualState(border_hue=hue, fill_alpha=alpha, label=label)
    return VisualState(border_hue=HUE_SAFE, fill_alpha=0.1, label=LABEL_SAFE)
