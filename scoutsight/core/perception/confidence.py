"""Confidence range layer: the window a scout reports around a reading."""

from scoutsight.core.numeric import clamp, round_half_up

MIN_VALUE = 1
MAX_VALUE = 20
MIN_WIDTH = 1
CONFIDENCE_NARROWING = 0.4


def confidence_range_width(confidence: float, scout_skill: int, observation_count: int = 1) -> float:
    """Unrounded window width; shrinks with skill, repetition and confidence."""
    skill = clamp(scout_skill, MIN_VALUE, MAX_VALUE)
    raw = (MAX_VALUE - skill) / (1 + max(1, observation_count) * 0.3)
    return max(MIN_WIDTH, raw * (1 - confidence * CONFIDENCE_NARROWING))


def calculate_confidence_range(
    perceived_value: int,
    confidence: float,
    scout_skill: int,
    observation_count: int = 1,
) -> tuple[int, int]:
    """
    Symmetric integer window around a perceived value, clamped to 1-20.

    A window that collapses to a single point is widened to at least 1.
    """
    half = confidence_range_width(confidence, scout_skill, observation_count) / 2
    low = max(MIN_VALUE, round_half_up(perceived_value - half))
    high = min(MAX_VALUE, round_half_up(perceived_value + half))
    if high <= low:
        if low >= MAX_VALUE:
            return MAX_VALUE - 1, MAX_VALUE
        return low, low + 1
    return low, high
