"""Vision module using YOLOv8."""

from __future__ import annotations

import importlib.util
import logging
from typing import Any, List, Tuple

from dangerzone.common import Detection
from dangerzone.config import WEIGHTS_PATH


class DetectorLoadError(RuntimeError):
    """The detection model could not be initialized."""


class VisionEngine:
    """YOLOv8 detection engine returning (x, y, w, h) boxes in frame pixels."""

    def __init__(self, weights_path: str = WEIGHTS_PATH) -> None:
        self._weights_path = weights_path
        self._logger = logging.getLogger(__name__)
        if importlib.util.find_spec("ultralytics") is None:
            raise DetectorLoadError(
                "Ultralytics not installed. Install the package dependencies to use YOLO."
            )
        from ultralytics import YOLO

        self._logger.info("Loading detection model (%s)...", weights_path)
        try:
            self._model = YOLO(str(weights_path))
        except Exception as exc:
            raise DetectorLoadError(f"Failed to load YOLO weights: {exc}") from exc

    def detect(self, frame: Any) -> List[Detection]:
        if frame is None:
            return []
        results = self._model.predict(source=frame, verbose=False)
        detections: List[Detection] = []
        height, width = frame.shape[:2]
        for result in results:
            boxes = result.boxes
            if boxes is None or len(boxes) == 0:
                continue
            xyxy = boxes.xyxy.cpu().numpy()
            confs = boxes.conf.cpu().numpy()
            classes = boxes.cls.cpu().numpy().astype(int)
            names = result.names or getattr(self._model, "names", {})
            for (x1, y1, x2, y2), conf, cls_idx in zip(xyxy, confs, classes):
                label = names.get(int(cls_idx), str(int(cls_idx)))
                bbox = self._clip_bbox((x1, y1, x2, y2), width, height)
                detections.append(Detection(label=label, conf=float(conf), bbox=bbox))
        return detections

    @staticmethod
    def _clip_bbox(
        bbox: Tuple[float, float, float, float], width: int, height: int
    ) -> Tuple[float, float, float, float]:
        x1, y1, x2, y2 = bbox
        x1 = max(0.0, min(float(x1), float(width)))
        y1 = max(0.0, min(float(y1), float(height)))
        x2 = max(0.0, min(float(x2), float(width)))
        y2 = max(0.0, min(float(y2), float(height)))
        return x1, y1, max(0.0, x2 - x1), max(0.0, y2 - y1)
