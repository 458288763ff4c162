"""Camera capture module."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TYPE_CHECKING, Any, Iterable, Tuple

from dangerzone.config import CAMERA_INDICES, DEFAULT_FACING_MODE, DEFAULT_RESOLUTION, RESOLUTION_PRESETS

if TYPE_CHECKING:
    import numpy as np

Frame = "np.ndarray" if TYPE_CHECKING else Any


class CaptureUnavailableError(RuntimeError):
    """No camera could be opened (missing backend, no device, or denied)."""


def resolution_size(quality: str) -> Tuple[int, int]:
    return RESOLUTION_PRESETS.get(quality, RESOLUTION_PRESETS[DEFAULT_RESOLUTION])


class CameraStream:
    """Camera stream wrapper for one facing mode and resolution preset."""

    def __init__(
        self,
        facing_mode: str = DEFAULT_FACING_MODE,
        resolution: str = DEFAULT_RESOLUTION,
        camera_index: int | None = None,
        backend: int | None = None,
        fallback_indices: Iterable[int] = (0, 1, 2, 3),
    ) -> None:
        self._logger = logging.getLogger(__name__)
        self._cv2 = None
        self._cap = None
        self.facing_mode = facing_mode
        self.resolution = resolution
        self._width, self._height = resolution_size(resolution)
        self._backend = backend

        try:
            import cv2
        except Exception as exc:
            raise CaptureUnavailableError(f"OpenCV not available: {exc}") from exc

        self._cv2 = cv2
        if self._backend is None and sys.platform == "darwin":
            self._backend = cv2.CAP_AVFOUNDATION
        if camera_index is None:
            camera_index = CAMERA_INDICES.get(facing_mode, 0)
        self._cap = self._open_camera(camera_index, fallback_indices)
        if self._cap is None:
            raise CaptureUnavailableError(
                "No camera found. Try a different index or check permissions."
            )

    @property
    def mirrored(self) -> bool:
        return self.facing_mode == "user"

    @property
    def is_opened(self) -> bool:
        return self._cap is not None and self._cap.isOpened()

    def read(self) -> Optional[Frame]:
        if not self.is_opened:
            return None
        ok, frame = self._cap.read()
        if not ok or frame is None:
            return None
        return frame

    def release(self) -> None:
        if self._cap is not None and self._cap.isOpened():
            self._cap.release()
            self._logger.info("Camera released.")
        self._cap = None

    def _open_camera(self, camera_index: int, fallback_indices: Iterable[int]) -> Optional[Any]:
        indices = [camera_index] + [idx for idx in fallback_indices if idx != camera_index]
        for idx in indices:
            cap = self._create_capture(idx)
            if cap is None:
                continue
            if cap.isOpened():
                self._configure_capture(cap)
                self._logger.info(
                    "Camera opened at index %s (%s, %s %sx%s)",
                    idx,
                    self.facing_mode,
                    self.resolution,
                    self._width,
                    self._height,
                )
                return cap
            cap.release()
        return None

    def _create_capture(self, index: int) -> Optional[Any]:
        try:
            if self._backend is not None:
                return self._cv2.VideoCapture(index, self._backend)
            return self._cv2.VideoCapture(index)
        except Exception as exc:
            self._logger.warning("Failed to open camera index %s: %s", index, exc)
            return None

    def _configure_capture(self, cap: Any) -> None:
        # the driver picks the nearest supported size if this one is not
        cap.set(self._cv2.CAP_PROP_FRAME_WIDTH, self._width)
        cap.set(self._cv2.CAP_PROP_FRAME_HEIGHT, self._height)
