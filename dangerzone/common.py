"""Shared dataclasses for detections, rectangles and zone states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class Detection:
    label: str
    conf: float
    bbox: Tuple[float, float, float, float]

    @property
    def center(self) -> Tuple[float, float]:
        x, y, w, h = self.bbox
        return x + w / 2, y + h / 2


@dataclass(frozen=True)
class ScreenRect:
    """ROI in display pixels, relative to the display's top-left corner."""

    left: float
    top: float
    width: float
    height: float


@dataclass(frozen=True)
class VideoRect:
    """ROI in source-frame pixels, the same space as ``Detection.bbox``."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    @property
    def radius(self) -> float:
        return (self.width + self.height) / 4

    def contains(self, px: float, py: float) -> bool:
        return (
            self.x <= px <= self.x + self.width
            and self.y <= py <= self.y + self.height
        )


class ZoneKind(str, Enum):
    DANGER = "danger"
    PROXIMITY = "proximity"
    IDLE = "idle"


@dataclass(frozen=True)
class ZoneState:
    kind: ZoneKind
    min_distance: Optional[float] = None

    @classmethod
    def danger(cls) -> "ZoneState":
        return cls(ZoneKind.DANGER)

    @classmethod
    def proximity(cls, min_distance: float) -> "ZoneState":
        return cls(ZoneKind.PROXIMITY, min_distance)

    @classmethod
    def idle(cls) -> "ZoneState":
        return cls(ZoneKind.IDLE)


@dataclass(frozen=True)
class VisualState:
    border_hue: float
    fill_alpha: float
    label: str
    pulsing: bool = False
