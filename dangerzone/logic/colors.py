"""Stable per-class colour hue."""

from __future__ import annotations


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def class_hue(label: str) -> int:
    """Hue in [0, 360) derived from a 31x string hash of ``label``.

    The shift is done in signed 32-bit arithmetic so the same label always
    maps to the same hue, across runs and platforms.
    """
    hash_value = 0
    for char in label:
        hash_value = ord(char) + (_to_int32(_to_int32(hash_value) << 5) - hash_value)
    return abs(hash_value) % 360
