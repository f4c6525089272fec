"""
Attention and focus.

Focus tokens are scarce: three per half in full observation. A lens
gives a domain-specific accuracy boost, but the first phase under a new
lens is a partial read (warm-up), and holding one lens too long wears the
scout down (fatigue).

    consecutive phase   1     2-4    5     6     7+
    effectiveness       0.5   1.0    0.9   0.8   0.7
"""

from typing import Optional

from scoutsight.core.attributes import AttributeDomain
from scoutsight.core.enums import LensType, ObservationMode, ObservationQuality
from scoutsight.core.observation.constants import TOKENS_PER_HALF
from scoutsight.core.observation.types import FocusAllocation, FocusTokenState

WARMUP_EFFECTIVENESS = 0.5
NORMAL_EFFECTIVENESS = 1.0
FATIGUE_EFFECTIVENESS_FLOOR = 0.7
FATIGUE_ONSET_PHASE = 4
FATIGUE_DECAY_PER_PHASE = 0.1

# Phases after focus ends that still count as peripheral attention
PERIPHERAL_PHASE_WINDOW = 2


def tokens_per_half(mode: ObservationMode) -> int:
    """Focus tokens granted per half for a session mode."""
    return TOKENS_PER_HALF[mode]


def create_focus_token_state(mode: ObservationMode) -> FocusTokenState:
    per_half = tokens_per_half(mode)
    return FocusTokenState(available=per_half, total=per_half)


def lens_effectiveness(consecutive_phases: int) -> float:
    """Effectiveness for the Nth consecutive phase (1-based) under one lens."""
    if consecutive_phases <= 1:
        return WARMUP_EFFECTIVENESS
    if consecutive_phases <= FATIGUE_ONSET_PHASE:
        return NORMAL_EFFECTIVENESS
    fatigued = NORMAL_EFFECTIVENESS - (consecutive_phases - FATIGUE_ONSET_PHASE) * FATIGUE_DECAY_PER_PHASE
    return max(FATIGUE_EFFECTIVENESS_FLOOR, fatigued)


def find_covering_allocation(
    state: FocusTokenState,
    player_id: str,
    phase_index: int,
) -> Optional[FocusAllocation]:
    """The most recent allocation for a player that covers a phase."""
    best: Optional[FocusAllocation] = None
    for allocation in state.allocations:
        if allocation.player_id != player_id or not allocation.covers(phase_index):
            continue
        if best is None or allocation.start_phase >= best.start_phase:
            best = allocation
    return best


def get_lens_effectiveness(
    state: FocusTokenState,
    player_id: str,
    lens: LensType,
    phase_index: int,
) -> float:
    """
    0.0-1.0 multiplier for how well a lens works on a player at a phase.

    0.0 when no allocation with that lens covers the phase.
    """
    allocation = find_covering_allocation(state, player_id, phase_index)
    if allocation is None or allocation.lens != lens:
        return 0.0
    return lens_effectiveness(phase_index - allocation.start_phase + 1)


def get_observation_quality(
    state: FocusTokenState,
    player_id: str,
    phase_index: int,
) -> ObservationQuality:
    """Focused now, focused within the last two phases, or not at all."""
    if find_covering_allocation(state, player_id, phase_index) is not None:
        return ObservationQuality.FOCUSED

    for allocation in state.allocations:
        if allocation.player_id != player_id:
            continue
        phases_since = phase_index - allocation.last_phase
        if 0 < phases_since <= PERIPHERAL_PHASE_WINDOW:
            return ObservationQuality.PERIPHERAL

    return ObservationQuality.UNFOCUSED


def is_player_focused(state: FocusTokenState, player_id: str) -> bool:
    """True if any allocation, current or historical, went to the player."""
    return any(a.player_id == player_id for a in state.allocations)


def get_lens_accuracy_bonus(lens: LensType) -> dict[AttributeDomain, int]:
    """Accuracy bonus per attribute domain for a lens. General gives none."""
    if lens == LensType.TECHNICAL:
        return {AttributeDomain.TECHNICAL: 3}
    if lens == LensType.PHYSICAL:
        return {AttributeDomain.PHYSICAL: 3}
    if lens == LensType.MENTAL:
        return {AttributeDomain.MENTAL: 3}
    if lens == LensType.TACTICAL:
        # Tactical reads carry a psychological component
        return {AttributeDomain.TACTICAL: 3, AttributeDomain.MENTAL: 1}
    return {}


def allocation_phase_effectiveness(
    state: FocusTokenState,
    player_id: str,
) -> dict[LensType, dict[int, float]]:
    """
    Per lens, the effectiveness at every phase a player was focused.

    Where allocations overlap, the most recent one owns the phase.
    """
    result: dict[LensType, dict[int, float]] = {}
    covered: set[int] = set()
    for allocation in reversed(state.allocations):
        if allocation.player_id != player_id:
            continue
        for phase_index in range(allocation.start_phase, allocation.last_phase + 1):
            if phase_index in covered:
                continue
            covered.add(phase_index)
            consecutive = phase_index - allocation.start_phase + 1
            result.setdefault(allocation.lens, {})[phase_index] = lens_effectiveness(consecutive)
    return result
