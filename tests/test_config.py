"""Tests for engine configuration."""

from scoutsight.config import EngineConfig, get_config, reset_config, set_config


class TestEngineConfig:
    def test_defaults(self, monkeypatch):
        for name in (
            "SCOUTSIGHT_IP_PER_FLAGGED_MOMENT",
            "SCOUTSIGHT_IP_PER_HYPOTHESIS_RESOLVED",
            "SCOUTSIGHT_IP_PER_REFLECTION_NOTE",
            "SCOUTSIGHT_FALLBACK_MIN_PHASES",
            "SCOUTSIGHT_FALLBACK_MAX_PHASES",
        ):
            monkeypatch.delenv(name, raising=False)
        config = EngineConfig()
        assert config.ip_per_flagged_moment == 5
        assert config.ip_per_hypothesis_resolved == 10
        assert config.ip_per_reflection_note == 3
        assert (config.fallback_min_phases, config.fallback_max_phases) == (4, 8)
        assert config.validate() == []

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SCOUTSIGHT_IP_PER_FLAGGED_MOMENT", "8")
        monkeypatch.setenv("SCOUTSIGHT_FALLBACK_MAX_PHASES", "")
        config = EngineConfig.from_env()
        assert config.ip_per_flagged_moment == 8
        assert config.fallback_max_phases == 8

    def test_validate(self):
        config = EngineConfig(ip_per_reflection_note=-1, fallback_min_phases=6, fallback_max_phases=5)
        errors = config.validate()
        assert len(errors) == 2
        assert any("REFLECTION_NOTE" in e for e in errors)
        assert any("FALLBACK_MAX_PHASES" in e for e in errors)

    def test_zero_min_phases_invalid(self):
        errors = EngineConfig(fallback_min_phases=0, fallback_max_phases=3).validate()
        assert errors == ["SCOUTSIGHT_FALLBACK_MIN_PHASES must be at least 1"]

    def test_set_and_reset(self, monkeypatch):
        custom = EngineConfig(ip_per_flagged_moment=1)
        set_config(custom)
        assert get_config() is custom

        monkeypatch.setenv("SCOUTSIGHT_IP_PER_FLAGGED_MOMENT", "2")
        reset_config()
        assert get_config().ip_per_flagged_moment == 2
