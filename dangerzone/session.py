"""Session state shared by the frame loop and the UI."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Tuple

from dangerzone.config import (
    CONF_STEP,
    CONF_THRESHOLD,
    DEFAULT_FACING_MODE,
    DEFAULT_RESOLUTION,
    DISPLAY_SIZE,
    LANGUAGE,
    RESOLUTION_PRESETS,
)
from dangerzone.logic.roi_editor import RoiEditor, centered_rect

_logger = logging.getLogger(__name__)


def _default_roi() -> RoiEditor:
    return RoiEditor(rect=centered_rect(DISPLAY_SIZE), display_dims=DISPLAY_SIZE)


@dataclass
class SessionState:
    detecting: bool = False
    roi_active: bool = False
    facing_mode: str = DEFAULT_FACING_MODE
    resolution: str = DEFAULT_RESOLUTION
    min_confidence: float = CONF_THRESHOLD
    language: str = LANGUAGE
    display_dims: Tuple[int, int] = DISPLAY_SIZE
    roi: RoiEditor = field(default_factory=_default_roi)

    @property
    def mirrored(self) -> bool:
        return self.facing_mode == "user"

    def set_display_dims(self, display_dims: Tuple[int, int]) -> None:
        self.display_dims = display_dims
        self.roi.resize_display(display_dims)

    def toggle_roi(self) -> bool:
        self.roi_active = not self.roi_active
        _logger.info("Danger zone %s.", "visible" if self.roi_active else "hidden")
        return self.roi_active

    def switch_facing_mode(self) -> str:
        self.facing_mode = "user" if self.facing_mode == "environment" else "environment"
        _logger.info("Switching to %s camera...", "front" if self.mirrored else "rear")
        return self.facing_mode

    def next_resolution(self) -> str:
        names = list(RESOLUTION_PRESETS)
        idx = names.index(self.resolution) if self.resolution in names else 0
        self.resolution = names[(idx + 1) % len(names)]
        _logger.info("Resolution changed to: %s", self.resolution.upper())
        return self.resolution

    def adjust_confidence(self, delta: float = CONF_STEP) -> float:
        self.min_confidence = round(max(0.0, min(1.0, self.min_confidence + delta)), 2)
        _logger.info("Confidence threshold: %d%%", round(self.min_confidence * 100))
        return self.min_confidence
