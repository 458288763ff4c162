"""Keyboard command mappings."""

from __future__ import annotations

from typing import Dict


KEY_COMMANDS: Dict[str, str] = {
    " ": "toggle_detection",
    "s": "switch_camera",
    "v": "toggle_voice",
    "z": "toggle_roi",
    "r": "cycle_resolution",
    "+": "confidence_up",
    "=": "confidence_up",
    "-": "confidence_down",
    "o": "open_image",
    "c": "clear_logs",
    "q": "quit",
}

ESC_KEY = 27


def key_to_action(key: int) -> str:
    if key == -1 or key == 255:
        return "none"
    if key == ESC_KEY:
        return "quit"
    return KEY_COMMANDS.get(chr(key).lower(), "none")
