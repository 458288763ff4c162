"""Application configuration constants."""

from typing import Dict, Tuple

CONF_THRESHOLD: float = 0.6
CONF_STEP: float = 0.05
SPEAK_COOLDOWN_S: float = 3.0
SPEECH_RATE: int = 170
LANGUAGE: str = "es"
WINDOW_NAME: str = "Danger Zone Monitor"
DEBUG_DRAW: bool = True
WEIGHTS_PATH: str = "yolov8n.pt"

PERSON_LABEL: str = "person"
SAFE_ZONE_FACTOR: float = 4.0

RESOLUTION_PRESETS: Dict[str, Tuple[int, int]] = {
    "low": (640, 480),
    "medium": (1280, 720),
    "high": (1920, 1080),
}
DEFAULT_RESOLUTION: str = "medium"

CAMERA_INDICES: Dict[str, int] = {"environment": 0, "user": 1}
DEFAULT_FACING_MODE: str = "environment"

DISPLAY_SIZE: Tuple[int, int] = (960, 540)
ROI_DEFAULT_SIZE: Tuple[int, int] = (240, 180)
ROI_MIN_SIZE: int = 50
ROI_HANDLE_SIZE: int = 18

CONSOLE_LINES: int = 6
