"""Per-frame detection, zone evaluation, drawing and announcements."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Protocol

from dangerzone.common import Detection, VideoRect, VisualState, ZoneKind, ZoneState
from dangerzone.log_console import log_success
from dangerzone.logic.detection_filter import filter_detections, unique_labels
from dangerzone.logic.geometry import map_screen_rect_to_video_rect
from dangerzone.logic.proximity import render_zone_visual
from dangerzone.logic.zone import ZoneEvaluation, evaluate_zone
from dangerzone.session import SessionState
from dangerzone.voice.phrases import alert_phrase, object_list
from dangerzone.voice.voice_notifier import SpeechKind, VoiceNotifier


class Detector(Protocol):
    def detect(self, frame: Any) -> List[Detection]: ...


class FrameSource(Protocol):
    def read(self) -> Optional[Any]: ...


@dataclass
class CycleResult:
    detections: List[Detection]
    evaluation: ZoneEvaluation
    visual: VisualState
    video_rect: Optional[VideoRect] = None
    mirrored: bool = False
    fps: float = 0.0
    display: Any = None


class FrameLoop:
    """Runs one detection cycle at a time until the session stops detecting."""

    def __init__(
        self,
        detector: Detector,
        notifier: VoiceNotifier,
        session: SessionState,
        overlay: Any = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._logger = logging.getLogger(__name__)
        self._detector = detector
        self._notifier = notifier
        self.session = session
        self._overlay = overlay
        self._clock = clock
        self._last_cycle_ts = 0.0

    def reset_fps(self) -> None:
        self._last_cycle_ts = 0.0

    def run(self, source: FrameSource, present: Callable[[Any], None]) -> int:
        """Cycle until ``session.detecting`` is cleared; returns the cycle count.

        ``present`` receives each display image (None when no frame came in)
        and is where the caller polls input, which may stop detection.
        """
        cycles = 0
        self.reset_fps()
        while self.session.detecting:
            frame = source.read()
            if frame is None:
                self._logger.warning("No frame received from camera.")
                present(None)
                continue
            result = self.run_cycle(frame)
            cycles += 1
            present(result.display if result is not None else None)
        return cycles

    def run_cycle(self, frame: Any) -> Optional[CycleResult]:
        if not self.session.detecting:
            return None
        now = self._clock()
        fps = 1.0 / (now - self._last_cycle_ts) if 0 < self._last_cycle_ts < now else 0.0
        self._last_cycle_ts = now

        try:
            raw = self._detector.detect(frame)
        except Exception as exc:
            self._logger.error("Detection failed: %s", exc)
            return None
        if not self.session.detecting:
            # stopped while the detector was busy
            return None

        session = self.session
        detections = filter_detections(raw, session.min_confidence)
        video_rect = None
        if session.roi_active:
            height, width = frame.shape[:2]
            video_rect = map_screen_rect_to_video_rect(
                session.roi.rect, (width, height), session.display_dims, session.mirrored
            )
            if video_rect is None:
                self._logger.debug("Danger zone mapping skipped for this frame.")
        evaluation = evaluate_zone(detections, video_rect)
        result = CycleResult(
            detections=detections,
            evaluation=evaluation,
            visual=render_zone_visual(evaluation.state, evaluation.radius),
            video_rect=video_rect,
            mirrored=session.mirrored,
            fps=fps,
        )
        if self._overlay is not None:
            result.display = self._overlay.compose(
                frame, result, session, voice_on=self._notifier.info_enabled
            )
        self._announce(detections, evaluation, now)
        return result

    def detect_static(self, image: Any) -> Optional[CycleResult]:
        """Detect on a still image; the danger zone does not apply."""
        self._logger.info("Analyzing static image...")
        try:
            raw = self._detector.detect(image)
        except Exception as exc:
            self._logger.error("Detection failed: %s", exc)
            return None
        detections = filter_detections(raw, self.session.min_confidence)
        evaluation = ZoneEvaluation(state=ZoneState.idle())
        result = CycleResult(
            detections=detections,
            evaluation=evaluation,
            visual=render_zone_visual(evaluation.state, 0.0),
        )
        if self._overlay is not None:
            result.display = self._overlay.compose(
                image, result, self.session, voice_on=self._notifier.info_enabled, show_roi=False
            )
        self._announce(detections, evaluation, self._clock())
        log_success(self._logger, "Detection complete. %d objects found.", len(detections))
        return result

    def _announce(self, detections: List[Detection], evaluation: ZoneEvaluation, now: float) -> None:
        language = self.session.language
        # a danger alert replaces the object list for this frame
        if evaluation.state.kind is ZoneKind.DANGER:
            self._notifier.notify(alert_phrase(language), SpeechKind.ALERT, now)
        elif detections:
            self._notifier.notify(
                object_list(unique_labels(detections), language), SpeechKind.INFO, now
            )
