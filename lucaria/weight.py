"""Blend weight curves over time."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _clamp01(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def _raised_cosine(phase: float) -> float:
    return _clamp01(0.5 * (1.0 - math.cos(phase)))


@dataclass
class FadeinWeight:
    """Weight rising smoothly from 0 to 1 over ``length``."""

    length: float = 1.0

    def compute_weight(self, cursor: float) -> float:
        if cursor >= self.length:
            return 1.0
        return _raised_cosine(math.pi * cursor / self.length)


@dataclass
class FadeoutWeight:
    """Weight falling smoothly to 0 over the last ``length`` of a duration."""

    length: float = 1.0

    def compute_weight(self, cursor: float, duration: float) -> float:
        reversed_cursor = duration - cursor
        if reversed_cursor >= self.length:
            return 1.0
        if reversed_cursor < 0.0:
            return 0.0
        return _raised_cosine(math.pi * reversed_cursor / self.length)


@dataclass
class OscillateWeight:
    """Weight oscillating between 0 and 1 with the given ``period``."""

    period: float = 1.0

    def compute_weight(self, cursor: float) -> float:
        return _raised_cosine(2.0 * math.pi * cursor / self.period)