"""Main integration entry point."""

from __future__ import annotations

import argparse
import logging
from typing import Any, List, Optional

import cv2

from dangerzone.camera_module import CameraStream, CaptureUnavailableError
from dangerzone.config import (
    CONF_STEP,
    CONF_THRESHOLD,
    DEFAULT_FACING_MODE,
    DEFAULT_RESOLUTION,
    DISPLAY_SIZE,
    LANGUAGE,
    RESOLUTION_PRESETS,
    WEIGHTS_PATH,
    WINDOW_NAME,
)
from dangerzone.frame_loop import FrameLoop
from dangerzone.log_console import ConsoleLogHandler, log_success, setup_logging
from dangerzone.overlay import Overlay
from dangerzone.session import SessionState
from dangerzone.vision_module import DetectorLoadError, VisionEngine
from dangerzone.voice.commands import key_to_action
from dangerzone.voice.speech_module import SpeechConfig, SpeechEngine
from dangerzone.voice.voice_notifier import VoiceNotifier


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Danger zone monitor")
    parser.add_argument("--weights", default=WEIGHTS_PATH, help="YOLO weights file")
    parser.add_argument("--image", default=None, help="Analyze a still image instead of the camera")
    parser.add_argument("--facing", choices=["environment", "user"], default=DEFAULT_FACING_MODE)
    parser.add_argument("--resolution", choices=list(RESOLUTION_PRESETS), default=DEFAULT_RESOLUTION)
    parser.add_argument("--confidence", type=float, default=CONF_THRESHOLD, help="Minimum score (0-1)")
    parser.add_argument("--language", default=LANGUAGE, help="Label/speech language (es, en)")
    parser.add_argument("--no-voice", action="store_true", help="Start with object announcements muted")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


class MonitorApp:
    """Owns the capture stream, the window and the keyboard/mouse wiring."""

    def __init__(
        self,
        loop: FrameLoop,
        notifier: VoiceNotifier,
        overlay: Overlay,
        console: ConsoleLogHandler,
        image_path: Optional[str] = None,
    ) -> None:
        self._logger = logging.getLogger(__name__)
        self.loop = loop
        self.session = loop.session
        self.notifier = notifier
        self.overlay = overlay
        self.console = console
        self.camera: Optional[CameraStream] = None
        self._image_path = image_path
        self._still: Any = None
        self._quit = False

    # frame source for the loop; follows camera restarts
    def read(self) -> Optional[Any]:
        if self.camera is None:
            return None
        return self.camera.read()

    def run(self) -> None:
        cv2.namedWindow(WINDOW_NAME, cv2.WINDOW_NORMAL)
        cv2.resizeWindow(WINDOW_NAME, *DISPLAY_SIZE)
        cv2.setMouseCallback(WINDOW_NAME, self._on_mouse)
        if self._image_path:
            self.open_image(self._image_path)
        else:
            self.start_camera()
        try:
            while not self._quit:
                if self.session.detecting and self.camera is not None:
                    self.loop.run(self, self._present)
                    continue
                if self._still is not None:
                    self._present(self._still)
                else:
                    self._present(self.overlay.idle_screen(self.session, self.notifier.info_enabled))
        finally:
            self.stop_camera()
            cv2.destroyAllWindows()

    def start_camera(self) -> None:
        self.stop_camera()
        try:
            self.camera = CameraStream(
                facing_mode=self.session.facing_mode, resolution=self.session.resolution
            )
        except CaptureUnavailableError as exc:
            self._logger.warning("Could not access the camera (%s). Opening file selection.", exc)
            self.open_image()
            return
        self._still = None
        self.session.detecting = True
        self._logger.info("Camera started. Real-time detection active.")

    def stop_camera(self) -> None:
        if self.camera is None:
            return
        # the stream is released before any new one is requested
        self.camera.release()
        self.camera = None
        self.session.detecting = False
        self._logger.info("System stopped.")

    def restart_camera(self) -> None:
        if self.camera is not None:
            self.start_camera()

    def open_image(self, path: Optional[str] = None) -> None:
        self.stop_camera()
        if path is None:
            path = self._image_path or input("Image path: ").strip()
        if not path:
            return
        image = cv2.imread(path)
        if image is None:
            self._logger.error("Could not read image: %s", path)
            return
        result = self.loop.detect_static(image)
        if result is not None:
            self._still = result.display

    def handle_action(self, action: str) -> None:
        if action == "none":
            return
        if action == "quit":
            self._quit = True
            self.session.detecting = False
        elif action == "toggle_detection":
            if self.camera is not None:
                self.stop_camera()
            else:
                self.start_camera()
        elif action == "switch_camera":
            self.session.switch_facing_mode()
            self.restart_camera()
        elif action == "cycle_resolution":
            self.session.next_resolution()
            self.restart_camera()
        elif action == "toggle_voice":
            self.notifier.toggle_info()
        elif action == "toggle_roi":
            self.session.toggle_roi()
        elif action == "confidence_up":
            self.session.adjust_confidence(CONF_STEP)
        elif action == "confidence_down":
            self.session.adjust_confidence(-CONF_STEP)
        elif action == "open_image":
            self.open_image(input("Image path: ").strip())
        elif action == "clear_logs":
            self.console.clear()
            self._logger.info("Logs cleared.")

    def _present(self, display: Any) -> None:
        if display is not None:
            cv2.imshow(WINDOW_NAME, display)
        self._sync_display_dims()
        key = cv2.waitKey(1) & 0xFF
        self.handle_action(key_to_action(key))

    def _sync_display_dims(self) -> None:
        try:
            _, _, width, height = cv2.getWindowImageRect(WINDOW_NAME)
        except cv2.error:
            return
        # a zero-sized (minimized) window is passed through: mapping skips those frames
        if width >= 0 and height >= 0 and (width, height) != self.session.display_dims:
            self.session.set_display_dims((width, height))

    def _on_mouse(self, event: int, x: int, y: int, flags: int, param: Any) -> None:
        if not self.session.roi_active:
            return
        roi = self.session.roi
        if event == cv2.EVENT_LBUTTONDOWN:
            roi.press(x, y)
        elif event == cv2.EVENT_MOUSEMOVE:
            roi.move(x, y)
        elif event == cv2.EVENT_LBUTTONUP:
            roi.release()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    console = setup_logging(getattr(logging, str(args.log_level).upper(), logging.INFO))
    logger = logging.getLogger(__name__)

    try:
        vision = VisionEngine(weights_path=args.weights)
    except DetectorLoadError as exc:
        logger.error("Error loading model: %s", exc)
        return 1
    log_success(logger, "Model loaded. Ready to detect.")

    speech = SpeechEngine(SpeechConfig(language=args.language))
    notifier = VoiceNotifier(speech, info_enabled=not args.no_voice)
    session = SessionState(
        facing_mode=args.facing,
        resolution=args.resolution,
        min_confidence=max(0.0, min(1.0, args.confidence)),
        language=args.language,
    )
    overlay = Overlay(console_lines=console.lines)
    loop = FrameLoop(vision, notifier, session, overlay=overlay)
    app = MonitorApp(loop, notifier, overlay, console, image_path=args.image)
    try:
        app.run()
    finally:
        speech.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
