"""
Perception model.

Three layers, each a pure function:
- Visibility: which attributes can be read at all
- Accuracy: how close the perceived value lands, and how sure the scout is
- Confidence range: the window the scout reports
"""

from scoutsight.core.perception.accuracy import (
    Perception,
    perceive_attribute,
    perception_confidence,
    perception_stddev,
)
from scoutsight.core.perception.confidence import calculate_confidence_range
from scoutsight.core.perception.visibility import (
    get_context_visible_attributes,
    get_passive_attributes,
    get_visible_attributes,
)
from scoutsight.core.perception.pipeline import (
    PhaseRead,
    observe_phases,
    observe_player,
    observe_player_light,
)
from scoutsight.core.perception.focus import (
    LENS_SKILL_BOOST,
    apply_lens_confidence_bonus,
    lens_phase_read,
    observe_focused_player,
)

__all__ = [
    "LENS_SKILL_BOOST",
    "Perception",
    "PhaseRead",
    "apply_lens_confidence_bonus",
    "calculate_confidence_range",
    "get_context_visible_attributes",
    "get_passive_attributes",
    "get_visible_attributes",
    "lens_phase_read",
    "observe_focused_player",
    "observe_phases",
    "observe_player",
    "observe_player_light",
    "perceive_attribute",
    "perception_confidence",
    "perception_stddev",
]
