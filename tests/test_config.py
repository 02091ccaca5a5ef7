import pytest
from pydantic import ValidationError

from netdraw.config import AppConfig, ImportConfig, RenderConfig, get_config, reset_config


class TestConfig:
    def test_defaults(self):
        config = AppConfig()

        assert config.importing.analysis_period == 1.0
        assert config.render.format == "PNG"
        assert config.render.width_cm == 14.0
        assert config.observability.level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("NETDRAW_IMPORT_ANALYSIS_PERIOD", "2.5")
        monkeypatch.setenv("NETDRAW_RENDER_FORMAT", "SVG")

        assert ImportConfig().analysis_period == 2.5
        assert RenderConfig().format == "SVG"

    def test_non_positive_analysis_period(self):
        with pytest.raises(ValidationError):
            ImportConfig(analysis_period=0)

    def test_unknown_format(self):
        with pytest.raises(ValidationError):
            RenderConfig(format="GIF")

    def test_get_config_is_cached(self):
        assert get_config() is get_config()
        first = get_config()
        reset_config()
        assert get_config() is not first
