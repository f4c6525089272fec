"""
Engine configuration.

Insight-point rewards and the fallback phase range for unmapped activity
types. All settings can be overridden via environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return int(value)


@dataclass
class EngineConfig:
    """Tunable constants for observation sessions."""

    # Insight point rewards
    ip_per_flagged_moment: int = field(
        default_factory=lambda: _env_int("SCOUTSIGHT_IP_PER_FLAGGED_MOMENT", 5)
    )
    ip_per_hypothesis_resolved: int = field(
        default_factory=lambda: _env_int("SCOUTSIGHT_IP_PER_HYPOTHESIS_RESOLVED", 10)
    )
    ip_per_reflection_note: int = field(
        default_factory=lambda: _env_int("SCOUTSIGHT_IP_PER_REFLECTION_NOTE", 3)
    )

    # Phase range for activity types with no entry of their own
    fallback_min_phases: int = field(
        default_factory=lambda: _env_int("SCOUTSIGHT_FALLBACK_MIN_PHASES", 4)
    )
    fallback_max_phases: int = field(
        default_factory=lambda: _env_int("SCOUTSIGHT_FALLBACK_MAX_PHASES", 8)
    )

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.ip_per_flagged_moment < 0:
            errors.append("SCOUTSIGHT_IP_PER_FLAGGED_MOMENT must not be negative")
        if self.ip_per_hypothesis_resolved < 0:
            errors.append("SCOUTSIGHT_IP_PER_HYPOTHESIS_RESOLVED must not be negative")
        if self.ip_per_reflection_note < 0:
            errors.append("SCOUTSIGHT_IP_PER_REFLECTION_NOTE must not be negative")
        if self.fallback_min_phases < 1:
            errors.append("SCOUTSIGHT_FALLBACK_MIN_PHASES must be at least 1")
        if self.fallback_max_phases < self.fallback_min_phases:
            errors.append(
                "SCOUTSIGHT_FALLBACK_MAX_PHASES must be >= SCOUTSIGHT_FALLBACK_MIN_PHASES"
            )
        return errors


# Singleton config instance
_config: Optional[EngineConfig] = None


def get_config() -> EngineConfig:
    """Get the global engine configuration."""
    global _config
    if _config is None:
        _config = EngineConfig.from_env()
    return _config


def set_config(config: EngineConfig) -> None:
    """
    Replace the global configuration.

    Useful for testing or embedding the engine with custom rewards.
    """
    global _config
    _config = config


def reset_config() -> None:
    """Drop the global configuration so the next get_config() rereads the environment."""
    global _config
    _config = None
