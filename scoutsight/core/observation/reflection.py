"""
Post-session reflection.

Once a session reaches reflection the scout takes stock of it:
- Flagged moments, grouped by player and domain, suggest hypotheses
- A gut feeling may trigger about the most-flagged player
- Prompts and a one-paragraph summary frame the write-up

Suggestions are offers, not session state: accepting one goes through
add_hypothesis. Insight points earned by reflecting are reported on the
result and left for the caller to award.
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from scoutsight.core.attributes import AttributeDomain
from scoutsight.core.enums import (
    EvidenceDirection,
    EvidenceStrength,
    FlagReaction,
    HypothesisState,
    LensType,
)
from scoutsight.core.observation.collection import context_for_activity
from scoutsight.core.observation.hypothesis import MOMENT_DOMAINS
from scoutsight.core.observation.session import make_id
from scoutsight.core.observation.types import (
    Hypothesis,
    HypothesisEvidence,
    ObservationSession,
    SessionFlaggedMoment,
    SessionPlayer,
)
from scoutsight.core.perception.tables import CONTEXT_LABELS
from scoutsight.core.rng import RNG

logger = logging.getLogger(__name__)

# Insight points for reflecting
REFLECTION_BASE_INSIGHT = 5
INSIGHT_PER_SUGGESTION = 2
GUT_FEELING_INSIGHT = 3

# Suggestions
MIN_FLAGS_FOR_SUGGESTION = 2  # Unless one of them is a standout

# Gut feelings
GUT_FEELING_BASE_CHANCE = 0.1
GUT_FEELING_CHANCE_PER_FLAG = 0.05
GUT_FEELING_MAX_CHANCE = 0.95
GUT_FEELING_BASE_RELIABILITY = 0.3
GUT_FEELING_MAX_RELIABILITY = 0.85

NarrativeTable = Mapping[AttributeDomain, Sequence[str]]

GUT_FEELING_NARRATIVES: dict[AttributeDomain, tuple[str, ...]] = {
    AttributeDomain.TECHNICAL: (
        "You keep replaying {player_name}'s touches on the drive home. Soft, unhurried, always set for the next pass.",
        "Nothing {player_name} did was flashy, but every contact was clean. That kind of consistency is rarer than it looks.",
    ),
    AttributeDomain.PHYSICAL: (
        "{player_name} covered the pitch without ever seeming to strain. The effort doesn't show, and that is the tell.",
        "The way {player_name} stops and turns stays with you. Balance like that usually grows into something.",
    ),
    AttributeDomain.MENTAL: (
        "When the game got frantic, {player_name} got calmer. You have learned to trust that.",
        "{player_name} checked over a shoulder before almost every touch. That habit compounds.",
    ),
    AttributeDomain.TACTICAL: (
        "{player_name} kept arriving in the right space a beat before the ball did. You can't coach that read.",
        "Nobody told {player_name} where to stand, yet the shape was right every time.",
    ),
    AttributeDomain.HIDDEN: (
        "You can't name a single moment, but you left sure there is more to {player_name} than today showed.",
        "It was the small things: how {player_name} reacted to a mistake, how they talked at set pieces.",
    ),
}

SUGGESTED_HYPOTHESIS_TEXTS: dict[AttributeDomain, dict[EvidenceDirection, tuple[str, ...]]] = {
    AttributeDomain.TECHNICAL: {
        EvidenceDirection.FOR: (
            "{player_name}'s technique looks above the level around them.",
            "{player_name}'s ball control may be a genuine strength.",
        ),
        EvidenceDirection.AGAINST: (
            "{player_name}'s technique seems to break down under pressure.",
            "{player_name}'s first touch lets them down in tight areas.",
        ),
    },
    AttributeDomain.PHYSICAL: {
        EvidenceDirection.FOR: (
            "{player_name}'s athleticism stands out for their age.",
            "{player_name} recovers quickly and covers ground well.",
        ),
        EvidenceDirection.AGAINST: (
            "{player_name} may have physical limits that cap their development.",
            "{player_name} faded late on. Stamina could be a concern.",
        ),
    },
    AttributeDomain.MENTAL: {
        EvidenceDirection.FOR: (
            "{player_name} stays composed beyond what you'd expect at this level.",
            "{player_name} makes good decisions when the pressure is on.",
        ),
        EvidenceDirection.AGAINST: (
            "{player_name} looked rattled after things went wrong.",
            "{player_name}'s decisions got worse as the game wore on.",
        ),
    },
    AttributeDomain.TACTICAL: {
        EvidenceDirection.FOR: (
            "{player_name} finds space by instinct. Their reading of the game looks advanced.",
            "{player_name}'s positioning suggests a natural feel for structure.",
        ),
        EvidenceDirection.AGAINST: (
            "{player_name} was caught out of position too often.",
            "{player_name} struggles to read the press and ends up isolated.",
        ),
    },
    AttributeDomain.HIDDEN: {
        EvidenceDirection.FOR: (
            "{player_name} shows a drive the standard attributes don't capture.",
            "{player_name} has something intangible worth tracking.",
        ),
        EvidenceDirection.AGAINST: (
            "{player_name}'s response to adversity raises questions.",
            "{player_name} switched off at key moments.",
        ),
    },
}

PLAYER_PROMPTS: tuple[str, ...] = (
    "You couldn't settle on {player_name}'s ceiling today. That doubt is worth another look.",
    "{player_name} was quieter later on. Fatigue, or something else? A follow-up would tell.",
    "{player_name} under pressure and {player_name} at rest looked like different players. Watch the mental side next time.",
)

FOCUS_PROMPTS: tuple[str, ...] = (
    "Most of your focus went on {player_name}. Don't forget the players on the edge of the picture.",
    "Your focus was spread thin. Next time, narrow it to two or three players.",
    "You flagged {flag_count} moments. Sort the standouts before writing anything up.",
)

GENERIC_PROMPTS: tuple[str, ...] = (
    "First impressions age. Reread these notes in a week and see if they hold.",
    "Which moments would you defend in a scouting meeting? Start with those.",
    "You're carrying {hypothesis_count} open questions out of this session. Each is a reason to return.",
)


@dataclass(frozen=True)
class GutFeelingCandidate:
    """A hunch surfaced in reflection. The caller decides whether to keep it."""

    player_id: str
    player_name: str
    domain: AttributeDomain
    narrative: str
    reliability: float  # 0-1, how much weight the hunch deserves
    trigger_reason: str

    def to_dict(self) -> dict:
        return {
            "player_id": self.player_id,
            "player_name": self.player_name,
            "domain": self.domain.value,
            "narrative": self.narrative,
            "reliability": self.reliability,
            "trigger_reason": self.trigger_reason,
        }


@dataclass(frozen=True)
class ReflectionResult:
    suggested_hypotheses: tuple[Hypothesis, ...]
    gut_feeling: Optional[GutFeelingCandidate]
    prompts: tuple[str, ...]
    insight_points: int
    summary: str

    def to_dict(self) -> dict:
        return {
            "suggested_hypotheses": [h.to_dict() for h in self.suggested_hypotheses],
            "gut_feeling": self.gut_feeling.to_dict() if self.gut_feeling else None,
            "prompts": list(self.prompts),
            "insight_points": self.insight_points,
            "summary": self.summary,
        }


# =============================================================================
# Helpers
# =============================================================================

def flagged_domain(flagged: SessionFlaggedMoment) -> AttributeDomain:
    return MOMENT_DOMAINS[flagged.moment.moment_type]


def dominant_domain(flagged: Sequence[SessionFlaggedMoment]) -> AttributeDomain:
    """Most common domain across flags. Ties go to the earlier domain; technical when empty."""
    counts = dict.fromkeys(AttributeDomain, 0)
    for f in flagged:
        counts[flagged_domain(f)] += 1
    return max(counts, key=lambda domain: counts[domain])


def lens_domain(lens: LensType) -> AttributeDomain:
    if lens == LensType.GENERAL:
        return AttributeDomain.TECHNICAL
    return AttributeDomain(lens.value)


def most_focused_player(session: ObservationSession) -> Optional[SessionPlayer]:
    """The player focused for the most phases, earliest on ties. None if nobody was focused."""
    best: Optional[SessionPlayer] = None
    for player in session.players:
        if not player.focused_phases:
            continue
        if best is None or len(player.focused_phases) > len(best.focused_phases):
            best = player
    return best


def _flags_by_player(session: ObservationSession) -> dict[str, list[SessionFlaggedMoment]]:
    by_player: dict[str, list[SessionFlaggedMoment]] = {}
    for flagged in session.flagged_moments:
        by_player.setdefault(flagged.moment.player_id, []).append(flagged)
    return by_player


def _fill(template: str, player_name: str = "", flag_count: int = 0, hypothesis_count: int = 0) -> str:
    return template.format(
        player_name=player_name,
        flag_count=flag_count,
        hypothesis_count=hypothesis_count,
    )


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


# =============================================================================
# Suggested hypotheses
# =============================================================================

def _suggestion_strength(flag_count: int) -> EvidenceStrength:
    if flag_count >= 3:
        return EvidenceStrength.STRONG
    if flag_count == 2:
        return EvidenceStrength.MODERATE
    return EvidenceStrength.WEAK


def build_suggested_hypothesis(
    session: ObservationSession,
    player_id: str,
    domain: AttributeDomain,
    flagged: Sequence[SessionFlaggedMoment],
    rng: RNG,
) -> Hypothesis:
    """
    An open hypothesis carrying one piece of evidence from a flag group.

    Promising flags outnumbering concerning ones (ties included) point the
    hypothesis and its evidence for the player; otherwise against.
    """
    promising = sum(1 for f in flagged if f.reaction == FlagReaction.PROMISING)
    concerning = sum(1 for f in flagged if f.reaction == FlagReaction.CONCERNING)
    direction = EvidenceDirection.FOR if promising >= concerning else EvidenceDirection.AGAINST

    player = session.player(player_id)
    name = player.name if player is not None else player_id
    text = _fill(rng.pick(SUGGESTED_HYPOTHESIS_TEXTS[domain][direction]), player_name=name)

    tone = "positive" if direction == EvidenceDirection.FOR else "concerning"
    evidence = HypothesisEvidence(
        week=session.started_at_week,
        direction=direction,
        description=f"Flagged {len(flagged)} {tone} {domain.value} moment(s) during the session.",
        strength=_suggestion_strength(len(flagged)),
    )
    return Hypothesis(
        id=make_id(session.id, f"suggest-{player_id}-{domain.value}"),
        player_id=player_id,
        text=text,
        domain=domain,
        state=HypothesisState.OPEN,
        created_at_week=session.started_at_week,
        evidence=(evidence,),
    )


def suggest_hypotheses(session: ObservationSession, rng: RNG) -> tuple[Hypothesis, ...]:
    """
    One suggestion per (player, domain) group of flagged moments.

    A group needs two flags, or one standout flag. Groups the session
    already holds a hypothesis for are skipped.
    """
    groups: dict[tuple[str, AttributeDomain], list[SessionFlaggedMoment]] = {}
    for flagged in session.flagged_moments:
        key = (flagged.moment.player_id, flagged_domain(flagged))
        groups.setdefault(key, []).append(flagged)

    suggestions = []
    for (player_id, domain), flagged in groups.items():
        if len(flagged) < MIN_FLAGS_FOR_SUGGESTION and not any(f.moment.is_standout for f in flagged):
            continue
        if any(h.player_id == player_id and h.domain == domain for h in session.hypotheses):
            logger.debug("Skipping suggestion for %s/%s: already hypothesised", player_id, domain.value)
            continue
        suggestions.append(build_suggested_hypothesis(session, player_id, domain, flagged, rng))
    return tuple(suggestions)


# =============================================================================
# Gut feelings
# =============================================================================

def gut_feeling_chance(scout_intuition: int, scout_spec_level: int, flag_count: int) -> float:
    """10% base, plus intuition/200, specialisation level/100 and 5% per flag, capped at 95%."""
    chance = (
        GUT_FEELING_BASE_CHANCE
        + scout_intuition / 200
        + scout_spec_level / 100
        + flag_count * GUT_FEELING_CHANCE_PER_FLAG
    )
    return min(chance, GUT_FEELING_MAX_CHANCE)


def gut_feeling_reliability(scout_intuition: int) -> float:
    return min(GUT_FEELING_BASE_RELIABILITY + scout_intuition / 30, GUT_FEELING_MAX_RELIABILITY)


def check_gut_feeling(
    rng: RNG,
    session: ObservationSession,
    scout_intuition: int,
    scout_spec_level: int,
    narratives: Optional[NarrativeTable] = None,
) -> Optional[GutFeelingCandidate]:
    """
    Roll for a gut feeling.

    The subject is the player with the most flags (earliest on ties), or
    the most-focused player when nothing was flagged. The domain is the
    dominant one across the subject's flags, else their current lens.
    """
    chance = gut_feeling_chance(scout_intuition, scout_spec_level, len(session.flagged_moments))
    if not rng.chance(chance):
        return None

    by_player = _flags_by_player(session)
    if by_player:
        target_id = max(by_player, key=lambda pid: len(by_player[pid]))
        target = session.player(target_id)
        flagged = by_player[target_id]
    else:
        target = most_focused_player(session)
        flagged = []
    if target is None:
        logger.debug("Gut feeling rolled in session %s but found no subject", session.id)
        return None

    if flagged:
        domain = dominant_domain(flagged)
    elif target.current_lens is not None:
        domain = lens_domain(target.current_lens)
    else:
        domain = AttributeDomain.TECHNICAL

    table = narratives if narratives is not None else GUT_FEELING_NARRATIVES
    narrative = _fill(rng.pick(table[domain]), player_name=target.name)

    reasons = []
    if flagged:
        reasons.append(f"{len(flagged)} flagged {domain.value} moment{'' if len(flagged) == 1 else 's'}")
    if target.focused_phases:
        reasons.append(_plural(len(target.focused_phases), "phase", "phases") + " of direct focus")
    trigger_reason = f"Triggered by: {', '.join(reasons)}." if reasons else "Triggered during general reflection."

    logger.info("Gut feeling about %s (%s) in session %s", target.player_id, domain.value, session.id)
    return GutFeelingCandidate(
        player_id=target.player_id,
        player_name=target.name,
        domain=domain,
        narrative=narrative,
        reliability=gut_feeling_reliability(scout_intuition),
        trigger_reason=trigger_reason,
    )


# =============================================================================
# Prompts and summary
# =============================================================================

def generate_reflection_prompts(session: ObservationSession, rng: RNG) -> tuple[str, ...]:
    """Two or three prompts in shuffled order: player, focus, generic."""
    primary = most_focused_player(session)
    values = dict(
        player_name=primary.name if primary is not None else "your primary player",
        flag_count=len(session.flagged_moments),
        hypothesis_count=len(session.hypotheses),
    )

    prompts = []
    if primary is not None:
        prompts.append(_fill(rng.pick(PLAYER_PROMPTS), **values))
    prompts.append(_fill(rng.pick(FOCUS_PROMPTS), **values))
    prompts.append(_fill(rng.pick(GENERIC_PROMPTS), **values))
    return tuple(rng.shuffle(prompts))


def _player_label(player: SessionPlayer) -> str:
    if player.current_lens is None:
        return player.name
    return f"{player.name} ({player.current_lens.value} lens)"


def generate_session_summary(session: ObservationSession) -> str:
    """One paragraph: phases watched, who got focus, what was flagged and hypothesised."""
    completed = session.current_phase_index + 1
    venue = CONTEXT_LABELS.get(context_for_activity(session.activity_type), session.activity_type.value)

    labels = [_player_label(p) for p in session.players if p.focused_phases]
    if not labels:
        focus = "without concentrating on any single player"
    elif len(labels) == 1:
        focus = f"focusing primarily on {labels[0]}"
    else:
        focus = f"focusing primarily on {', '.join(labels[:-1])} and {labels[-1]}"

    flag_count = len(session.flagged_moments)
    moments = "no moments worth flagging" if flag_count == 0 else (
        _plural(flag_count, "moment", "moments") + " worth flagging"
    )
    hyp_count = len(session.hypotheses)
    hypotheses = "no new hypotheses" if hyp_count == 0 else (
        _plural(hyp_count, "new hypothesis", "new hypotheses")
    )

    return (
        f"After {completed} of {len(session.phases)} phases observing {venue}, "
        f"you spent the session {focus}. "
        f"You identified {moments} and formed {hypotheses}."
    )


def generate_reflection(
    session: ObservationSession,
    rng: RNG,
    scout_intuition: int,
    scout_spec_level: int,
) -> ReflectionResult:
    """
    Reflect on a session.

    Insight points: 5 for reflecting, 2 per suggested hypothesis, 3 more
    if a gut feeling triggers. Draw order is suggestions, gut feeling,
    then prompts, so a given seed always reflects the same way.
    """
    suggestions = suggest_hypotheses(session, rng)
    gut_feeling = check_gut_feeling(rng, session, scout_intuition, scout_spec_level)
    prompts = generate_reflection_prompts(session, rng)

    insight = (
        REFLECTION_BASE_INSIGHT
        + len(suggestions) * INSIGHT_PER_SUGGESTION
        + (GUT_FEELING_INSIGHT if gut_feeling is not None else 0)
    )
    logger.debug(
        "Reflection on %s: %d suggestions, gut feeling %s, %d insight",
        session.id, len(suggestions), gut_feeling is not None, insight,
    )
    return ReflectionResult(
        suggested_hypotheses=suggestions,
        gut_feeling=gut_feeling,
        prompts=prompts,
        insight_points=insight,
        summary=generate_session_summary(session),
    )
