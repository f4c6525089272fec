"""
Scout model.

Skills are read-only inputs to the engine. Anything that trains or ages a
scout lives outside this package and produces a new Scout.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Mapping, Optional

from scoutsight.core.attributes import AttributeDomain
from scoutsight.core.enums import Specialization

MIN_SKILL = 1
MAX_SKILL = 20


class ScoutSkill(str, Enum):
    """Scout skills. ScoutSkills.levels() maps each one to its field."""

    TECHNICAL_EYE = "technical_eye"
    PHYSICAL_ASSESSMENT = "physical_assessment"
    PSYCHOLOGICAL_READ = "psychological_read"
    TACTICAL_UNDERSTANDING = "tactical_understanding"
    # Ability judgment
    PLAYER_JUDGMENT = "player_judgment"  # Governs CA reads
    POTENTIAL_ASSESSMENT = "potential_assessment"  # Governs PA reads


# The scout skill that governs accuracy for each attribute domain
DOMAIN_SKILL_MAP: dict[AttributeDomain, ScoutSkill] = {
    AttributeDomain.TECHNICAL: ScoutSkill.TECHNICAL_EYE,
    AttributeDomain.PHYSICAL: ScoutSkill.PHYSICAL_ASSESSMENT,
    AttributeDomain.MENTAL: ScoutSkill.PSYCHOLOGICAL_READ,
    AttributeDomain.TACTICAL: ScoutSkill.TACTICAL_UNDERSTANDING,
    AttributeDomain.HIDDEN: ScoutSkill.PSYCHOLOGICAL_READ,
}


@dataclass(frozen=True)
class ScoutSkills:
    """One field per skill, each on the 1-20 scale."""

    technical_eye: int = 10
    physical_assessment: int = 10
    psychological_read: int = 10
    tactical_understanding: int = 10
    player_judgment: int = 10
    potential_assessment: int = 10

    def __post_init__(self) -> None:
        for skill, value in self.levels().items():
            if not MIN_SKILL <= value <= MAX_SKILL:
                raise ValueError(
                    f"Scout skill {skill.value} must be within {MIN_SKILL}-{MAX_SKILL}, got {value}"
                )

    def levels(self) -> dict[ScoutSkill, int]:
        return {
            ScoutSkill.TECHNICAL_EYE: self.technical_eye,
            ScoutSkill.PHYSICAL_ASSESSMENT: self.physical_assessment,
            ScoutSkill.PSYCHOLOGICAL_READ: self.psychological_read,
            ScoutSkill.TACTICAL_UNDERSTANDING: self.tactical_understanding,
            ScoutSkill.PLAYER_JUDGMENT: self.player_judgment,
            ScoutSkill.POTENTIAL_ASSESSMENT: self.potential_assessment,
        }

    def get(self, skill: ScoutSkill) -> int:
        return self.levels()[skill]

    def for_domain(self, domain: AttributeDomain) -> int:
        """Skill level that governs reads in an attribute domain."""
        return self.get(DOMAIN_SKILL_MAP[domain])

    def with_boosts(self, boosts: Mapping[ScoutSkill, int]) -> "ScoutSkills":
        """Return a copy with transient boosts applied, capped at 20."""
        if not boosts:
            return self
        levels = self.levels()
        for skill, boost in boosts.items():
            levels[skill] = min(MAX_SKILL, max(MIN_SKILL, levels[skill] + boost))
        return ScoutSkills.from_levels(levels)

    def to_dict(self) -> dict[str, int]:
        return {skill.value: level for skill, level in self.levels().items()}

    @classmethod
    def uniform(cls, level: int) -> "ScoutSkills":
        """Every skill at the same level."""
        return cls.from_levels({skill: level for skill in ScoutSkill})

    @classmethod
    def from_levels(cls, levels: Mapping[ScoutSkill, int]) -> "ScoutSkills":
        """Build from a skill mapping. Missing skills default to 10."""
        return cls(
            technical_eye=levels.get(ScoutSkill.TECHNICAL_EYE, 10),
            physical_assessment=levels.get(ScoutSkill.PHYSICAL_ASSESSMENT, 10),
            psychological_read=levels.get(ScoutSkill.PSYCHOLOGICAL_READ, 10),
            tactical_understanding=levels.get(ScoutSkill.TACTICAL_UNDERSTANDING, 10),
            player_judgment=levels.get(ScoutSkill.PLAYER_JUDGMENT, 10),
            potential_assessment=levels.get(ScoutSkill.POTENTIAL_ASSESSMENT, 10),
        )


@dataclass(frozen=True)
class Scout:
    """A scout as seen by the engine."""

    id: str
    name: str
    skills: ScoutSkills = field(default_factory=ScoutSkills)
    specialization: Optional[Specialization] = None

    def skill(self, skill: ScoutSkill) -> int:
        return self.skills.get(skill)

    def with_skills(self, skills: ScoutSkills) -> "Scout":
        return replace(self, skills=skills)
