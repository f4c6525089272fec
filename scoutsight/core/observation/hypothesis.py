"""
Hypotheses: a scout's working theories about a player.

Two ways evidence resolves a hypothesis:
- Count thresholds, used by the session's update_hypothesis during
  reflection: three pieces either way resolve it, two lean it.
- Weighted balance, used when moments are evaluated in bulk: strong
  evidence counts 2, moderate 1, weak 0.5.

Confirmed and debunked are absorbing: nothing changes a resolved
hypothesis.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional, Sequence

from scoutsight.core.attributes import AttributeDomain
from scoutsight.core.enums import (
    EvidenceDirection,
    EvidenceStrength,
    HypothesisState,
    MomentType,
)
from scoutsight.core.observation.types import Hypothesis, HypothesisEvidence, PlayerMoment
from scoutsight.core.rng import RNG

logger = logging.getLogger(__name__)

# Count thresholds
RESOLVE_COUNT = 3
LEAN_COUNT = 2

# Generation
TRIGGER_CHANCE = 0.3
MIN_MOMENTS_FOR_HYPOTHESIS = 2
HIGH_QUALITY_THRESHOLD = 7
LOW_QUALITY_THRESHOLD = 5

# Evidence strength by moment quality
STRONG_EVIDENCE_THRESHOLD = 8
MODERATE_EVIDENCE_MIN = 5

EVIDENCE_WEIGHTS: dict[EvidenceStrength, float] = {
    EvidenceStrength.STRONG: 2.0,
    EvidenceStrength.MODERATE: 1.0,
    EvidenceStrength.WEAK: 0.5,
}

INSIGHT_BONUS: dict[HypothesisState, int] = {
    HypothesisState.CONFIRMED: 5,
    HypothesisState.DEBUNKED: 2,  # Learning from a wrong first impression
}

MOMENT_DOMAINS: dict[MomentType, AttributeDomain] = {
    MomentType.TECHNICAL_ACTION: AttributeDomain.TECHNICAL,
    MomentType.PHYSICAL_TEST: AttributeDomain.PHYSICAL,
    MomentType.MENTAL_RESPONSE: AttributeDomain.MENTAL,
    MomentType.TACTICAL_DECISION: AttributeDomain.TACTICAL,
    MomentType.CHARACTER_REVEAL: AttributeDomain.HIDDEN,
}


class QualityBand(str, Enum):
    HIGH = "high"
    MIXED = "mixed"
    LOW = "low"


@dataclass(frozen=True)
class HypothesisTemplate:
    """Hypothesis text with a {player_name} placeholder."""

    text: str
    band: QualityBand
    domain: AttributeDomain


def _templates(domain: AttributeDomain, high: list[str], mixed: list[str], low: list[str]) -> tuple[HypothesisTemplate, ...]:
    return tuple(
        HypothesisTemplate(text, band, domain)
        for band, texts in ((QualityBand.HIGH, high), (QualityBand.MIXED, mixed), (QualityBand.LOW, low))
        for text in texts
    )


DEFAULT_HYPOTHESIS_TEMPLATES: dict[MomentType, tuple[HypothesisTemplate, ...]] = {
    MomentType.TECHNICAL_ACTION: _templates(
        AttributeDomain.TECHNICAL,
        high=[
            "Is {player_name} technically better than the level suggests?",
            "Will {player_name}'s touch hold up against stronger opposition?",
        ],
        mixed=[
            "Is {player_name} technically inconsistent, or was that an off day?",
            "Does {player_name}'s technique depend on confidence?",
        ],
        low=[
            "Does {player_name} lack the technical base for the next level?",
            "Can {player_name}'s technical errors be coached out?",
        ],
    ),
    MomentType.PHYSICAL_TEST: _templates(
        AttributeDomain.PHYSICAL,
        high=[
            "Is {player_name} genuinely quick, or was there too much space?",
            "Could {player_name}'s physical profile be the main asset?",
        ],
        mixed=[
            "Can {player_name} sustain physical output over a full game?",
        ],
        low=[
            "Is {player_name}'s lack of pace a hard limit?",
            "Is {player_name} physically underdeveloped for their age?",
        ],
    ),
    MomentType.MENTAL_RESPONSE: _templates(
        AttributeDomain.MENTAL,
        high=[
            "Does {player_name} really stay calm under pressure?",
            "Is {player_name}'s decision-making ahead of their years?",
        ],
        mixed=[
            "Does {player_name}'s concentration drift in longer games?",
        ],
        low=[
            "Does {player_name} go missing when the pressure rises?",
            "Is {player_name}'s decision-making a long-term concern?",
        ],
    ),
    MomentType.TACTICAL_DECISION: _templates(
        AttributeDomain.TACTICAL,
        high=[
            "Does {player_name} read the game better than most at this level?",
        ],
        mixed=[
            "Does {player_name} understand the system, or just follow instructions?",
        ],
        low=[
            "Is {player_name} tactically naive, or badly coached so far?",
        ],
    ),
    MomentType.CHARACTER_REVEAL: _templates(
        AttributeDomain.HIDDEN,
        high=[
            "Is {player_name}'s attitude as strong as it looked today?",
        ],
        mixed=[
            "Does {player_name} need things to go well to stay engaged?",
        ],
        low=[
            "Is {player_name}'s reaction to setbacks a warning sign?",
        ],
    ),
}


# ============================================================================
# Count-threshold resolution
# ============================================================================

def state_from_counts(for_count: int, against_count: int) -> HypothesisState:
    """Hypothesis state implied by evidence counts."""
    if for_count >= RESOLVE_COUNT:
        return HypothesisState.CONFIRMED
    if against_count >= RESOLVE_COUNT:
        return HypothesisState.DEBUNKED
    if for_count >= LEAN_COUNT:
        return HypothesisState.SUPPORTED
    if against_count >= LEAN_COUNT:
        return HypothesisState.CONTRADICTED
    return HypothesisState.OPEN


def add_evidence(hypothesis: Hypothesis, evidence: HypothesisEvidence) -> Hypothesis:
    """
    Append one piece of evidence and recompute state by counts.

    A resolved hypothesis is returned unchanged.
    """
    if hypothesis.is_resolved:
        return hypothesis
    updated = replace(hypothesis, evidence=hypothesis.evidence + (evidence,))
    return replace(updated, state=state_from_counts(updated.for_count, updated.against_count))


# ============================================================================
# Weighted evaluation
# ============================================================================

def classify_quality(quality: float) -> QualityBand:
    if quality >= HIGH_QUALITY_THRESHOLD:
        return QualityBand.HIGH
    if quality < LOW_QUALITY_THRESHOLD:
        return QualityBand.LOW
    return QualityBand.MIXED


def classify_evidence_strength(quality: int) -> EvidenceStrength:
    if quality >= STRONG_EVIDENCE_THRESHOLD:
        return EvidenceStrength.STRONG
    if quality >= MODERATE_EVIDENCE_MIN:
        return EvidenceStrength.MODERATE
    return EvidenceStrength.WEAK


def weighted_totals(evidence: Iterable[HypothesisEvidence]) -> tuple[float, float]:
    """(for, against) weighted evidence totals."""
    for_total = 0.0
    against_total = 0.0
    for item in evidence:
        weight = EVIDENCE_WEIGHTS[item.strength]
        if item.direction == EvidenceDirection.FOR:
            for_total += weight
        else:
            against_total += weight
    return for_total, against_total


def format_hypothesis_text(template: str, player_name: str) -> str:
    return template.replace("{player_name}", player_name)


def generate_hypothesis(
    rng: RNG,
    player_id: str,
    player_name: str,
    moments: Sequence[PlayerMoment],
    week: int,
    templates: Optional[dict[MomentType, tuple[HypothesisTemplate, ...]]] = None,
) -> Optional[Hypothesis]:
    """
    Maybe form a new hypothesis from a session's moments.

    Needs at least two moments for the player and passes a 30% gate. The
    most frequent moment type picks the template table; the average
    quality picks the band.
    """
    player_moments = [m for m in moments if m.player_id == player_id]
    if len(player_moments) < MIN_MOMENTS_FOR_HYPOTHESIS:
        return None

    if rng.next() >= TRIGGER_CHANCE:
        return None

    counts: dict[MomentType, int] = {}
    for moment in player_moments:
        counts[moment.moment_type] = counts.get(moment.moment_type, 0) + 1
    # Ties go to the type seen first
    dominant = max(counts, key=lambda t: counts[t])

    average = sum(m.quality for m in player_moments) / len(player_moments)
    band = classify_quality(average)

    table = templates if templates is not None else DEFAULT_HYPOTHESIS_TEMPLATES
    available = table.get(dominant, ())
    if not available:
        return None
    candidates = [t for t in available if t.band == band] or list(available)
    template = rng.pick(candidates)

    hypothesis = Hypothesis(
        id=f"hyp-{player_id[:8]}-w{week}-{rng.next_int(1000, 9999)}",
        player_id=player_id,
        text=format_hypothesis_text(template.text, player_name),
        domain=template.domain,
        state=HypothesisState.OPEN,
        created_at_week=week,
    )
    logger.debug("Formed hypothesis %s for player %s", hypothesis.id, player_id)
    return hypothesis


def _evidence_description(moment: PlayerMoment, direction: EvidenceDirection) -> str:
    qualifier = "positive" if direction == EvidenceDirection.FOR else "negative"
    text = f"{qualifier} {moment.moment_type.value} observation (quality {moment.quality}/10)"
    if moment.vague_description:
        text += f": {moment.vague_description}"
    return text


def evaluate_hypothesis(
    hypothesis: Hypothesis,
    moments: Sequence[PlayerMoment],
    week: int,
) -> Hypothesis:
    """
    Fold new moments into a hypothesis by weighted balance.

    Moments for the same player in the hypothesis's domain become evidence:
    quality 7+ for, below 5 against, anything between is inconclusive and
    skipped. State becomes supported or contradicted by weight; an exact
    tie leaves it alone. Resolved hypotheses are returned unchanged.
    """
    if hypothesis.is_resolved:
        return hypothesis

    new_evidence = []
    for moment in moments:
        if moment.player_id != hypothesis.player_id:
            continue
        if MOMENT_DOMAINS[moment.moment_type] != hypothesis.domain:
            continue
        if moment.quality >= HIGH_QUALITY_THRESHOLD:
            direction = EvidenceDirection.FOR
        elif moment.quality < LOW_QUALITY_THRESHOLD:
            direction = EvidenceDirection.AGAINST
        else:
            continue
        new_evidence.append(HypothesisEvidence(
            week=week,
            direction=direction,
            description=_evidence_description(moment, direction),
            strength=classify_evidence_strength(moment.quality),
        ))

    if not new_evidence:
        return hypothesis

    evidence = hypothesis.evidence + tuple(new_evidence)
    for_total, against_total = weighted_totals(evidence)
    state = hypothesis.state
    if for_total > against_total:
        state = HypothesisState.SUPPORTED
    elif against_total > for_total:
        state = HypothesisState.CONTRADICTED
    return replace(hypothesis, evidence=evidence, state=state)


def resolve_hypothesis(hypothesis: Hypothesis) -> Hypothesis:
    """Force a terminal state by weighted balance. A tie leaves it unresolved."""
    if hypothesis.is_resolved:
        return hypothesis
    for_total, against_total = weighted_totals(hypothesis.evidence)
    if for_total > against_total:
        return replace(hypothesis, state=HypothesisState.CONFIRMED)
    if against_total > for_total:
        return replace(hypothesis, state=HypothesisState.DEBUNKED)
    return hypothesis


def hypothesis_insight_bonus(hypothesis: Hypothesis) -> int:
    return INSIGHT_BONUS.get(hypothesis.state, 0)


def get_open_hypotheses(hypotheses: Iterable[Hypothesis]) -> list[Hypothesis]:
    return [h for h in hypotheses if not h.is_resolved]


def get_resolved_hypotheses(hypotheses: Iterable[Hypothesis]) -> list[Hypothesis]:
    return [h for h in hypotheses if h.is_resolved]
