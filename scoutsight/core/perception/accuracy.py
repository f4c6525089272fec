"""
Accuracy layer: how close a perceived value lands to the truth.

A perceived value is a Gaussian draw centred on the true value plus a form
bias. The spread shrinks with scout skill, with the number of times the
attribute has been read, and with the diversity of prior observations. The
observation context scales it.
"""

import math
from dataclasses import dataclass

from scoutsight.core.enums import ObservationContext
from scoutsight.core.numeric import clamp, round_half_up
from scoutsight.core.perception.tables import CONTEXT_CONFIDENCE_ADJUSTMENT, CONTEXT_NOISE
from scoutsight.core.rng import RNG

MIN_VALUE = 1
MAX_VALUE = 20

# Perceived value moves 1.5 points per point of form
FORM_BIAS_MULTIPLIER = 1.5
MIN_STDDEV = 0.4
MAX_DIVERSITY_DISCOUNT = 0.3

SKILL_CONFIDENCE_WEIGHT = 0.5
MAX_REPEAT_CONFIDENCE = 0.35
DIVERSITY_CONFIDENCE_WEIGHT = 0.1


@dataclass(frozen=True)
class Perception:
    """One perceived attribute value with its confidence."""

    perceived_value: int
    confidence: float


def _clamp_skill(skill: int) -> int:
    return int(clamp(skill, MIN_VALUE, MAX_VALUE))


def diversity_factor(context_diversity: float) -> float:
    """Spread multiplier: up to 30% tighter for a well-observed player."""
    return 1 - min(MAX_DIVERSITY_DISCOUNT, context_diversity * MAX_DIVERSITY_DISCOUNT)


def perception_stddev(
    scout_skill: int,
    observation_count: int,
    context_diversity: float,
    context: ObservationContext,
) -> float:
    """
    Standard deviation of the perceived-value draw.

    Skill 5 gives a base of 5.0, skill 15 about 1.7, skill 20 the floor of
    0.4. Non-increasing in skill and in observation count.
    """
    skill = _clamp_skill(scout_skill)
    count = max(1, observation_count)
    base = max(MIN_STDDEV, (MAX_VALUE - skill) / 3)
    return (base / math.sqrt(count)) * diversity_factor(context_diversity) * CONTEXT_NOISE[context]


def perception_confidence(
    scout_skill: int,
    observation_count: int,
    context_diversity: float,
    context: ObservationContext,
) -> float:
    """Confidence in [0, 1] blending skill, repetition, diversity and context."""
    skill = _clamp_skill(scout_skill)
    count = max(1, observation_count)
    raw = (
        skill / MAX_VALUE * SKILL_CONFIDENCE_WEIGHT
        + min(MAX_REPEAT_CONFIDENCE, (1 - 1 / math.sqrt(count)) * MAX_REPEAT_CONFIDENCE)
        + context_diversity * DIVERSITY_CONFIDENCE_WEIGHT
        + CONTEXT_CONFIDENCE_ADJUSTMENT.get(context, 0.0)
    )
    return clamp(raw, 0.0, 1.0)


def perceive_attribute(
    rng: RNG,
    true_value: int,
    scout_skill: int,
    observation_count: int,
    context_diversity: float,
    player_form: int,
    context: ObservationContext,
) -> Perception:
    """
    Draw one perceived value for an attribute.

    Args:
        rng: Random source, one Gaussian draw is consumed
        true_value: Ground-truth attribute value (1-20)
        scout_skill: Skill governing the attribute's domain (clamped to 1-20)
        observation_count: Reads of this attribute including this one
        context_diversity: 0-1, how many distinct prior observations exist
        player_form: -3..+3
        context: Where the observation takes place

    Returns:
        Perceived value rounded and clamped to 1-20, with confidence
    """
    stddev = perception_stddev(scout_skill, observation_count, context_diversity, context)
    raw = rng.gaussian(true_value + player_form * FORM_BIAS_MULTIPLIER, stddev)
    perceived = int(clamp(round_half_up(raw), MIN_VALUE, MAX_VALUE))
    confidence = perception_confidence(scout_skill, observation_count, context_diversity, context)
    return Perception(perceived_value=perceived, confidence=confidence)
