"""
Тесты конфигурации дашборда.
"""

from pathlib import Path

from lpg_density.config import (
    DASHBOARD_CONFIG,
    MAX_MEASUREMENTS,
    DashboardSettings,
    get_chart_samples,
    get_dashboard_config,
    validate_config,
)


def test_default_config_is_valid():
    assert validate_config() is True


def test_model_constants():
    assert MAX_MEASUREMENTS == 50
    assert DASHBOARD_CONFIG["reference_temperature"] == 15.0
    assert (DASHBOARD_CONFIG["min_density"], DASHBOARD_CONFIG["max_density"]) == (0.45, 0.65)
    assert DASHBOARD_CONFIG["storage_key"] == "propane-dashboard-state"


def test_get_dashboard_config_returns_copy():
    config = get_dashboard_config()
    config["max_measurements"] = 1

    assert DASHBOARD_CONFIG["max_measurements"] == 50


def test_get_chart_samples():
    assert get_chart_samples() == 50
    assert get_chart_samples(12) == 12


class TestDashboardSettings:
    def test_defaults(self, monkeypatch):
        for name in ("LPG_STATE_DIR", "LPG_LOG_LEVEL", "LPG_LOGS_DIR", "LPG_FILE_LOGGING", "LPG_CHART_SAMPLES"):
            monkeypatch.delenv(name, raising=False)

        settings = DashboardSettings.from_env()

        assert settings.state_dir == "data/state"
        assert settings.log_level == "INFO"
        assert settings.enable_file_logging is False
        assert settings.chart_samples == 50
        assert settings.state_path == Path("data/state")

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LPG_STATE_DIR", str(tmp_path))
        monkeypatch.setenv("LPG_LOG_LEVEL", "debug")
        monkeypatch.setenv("LPG_LOGS_DIR", "custom_logs")
        monkeypatch.setenv("LPG_FILE_LOGGING", "True")
        monkeypatch.setenv("LPG_CHART_SAMPLES", "25")

        settings = DashboardSettings.from_env()

        assert settings.state_path == tmp_path
        assert settings.log_level == "DEBUG"
        assert settings.logs_dir == "custom_logs"
        assert settings.enable_file_logging is True
        assert settings.chart_samples == 25
