"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
from typing import Tuple


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def rects_overlap(a: Tuple[float, float, float, float],
                  b: Tuple[float, float, float, float]) -> bool:
    """Check if two (left, top, w, h) boxes overlap; touching edges count"""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax <= bx + bw and ax + aw >= bx and ay <= by + bh and ay + ah >= by


def round_half_up(x: float) -> int:
    """Round to nearest integer, halves away from zero"""
    if x < 0:
        return -int(math.floor(-x + 0.5))
    return int(math.floor(x + 0.5))


