"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from rootx.infrastructure.config import Settings


class TestSettings:

    def test_defaults(self):
        config = Settings.from_env({})
        assert config.port == 8000
        assert config.api_prefix == ""
        assert config.cors_origins == ("*",)
        assert config.store_timeout == 30.0
        assert config.log_level == "INFO"

    def test_overrides(self):
        config = Settings.from_env({
            "ROOTX_DATA_DIR": "/srv/rootx",
            "PORT": "5000",
            "ROOTX_API_PREFIX": "/api/",
            "ROOTX_CORS_ORIGINS": "https://a.example, https://b.example",
            "ROOTX_STORE_TIMEOUT": "2.5",
            "ROOTX_LOG_LEVEL": "debug",
        })
        assert config.data_dir == Path("/srv/rootx")
        assert config.port == 5000
        assert config.api_prefix == "/api"
        assert config.cors_origins == ("https://a.example", "https://b.example")
        assert config.store_timeout == 2.5
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("name", ["PORT", "ROOTX_STORE_TIMEOUT"])
    def test_bad_numbers(self, name):
        with pytest.raises(ValueError, match=name):
            Settings.from_env({name: "soon"})

    def test_non_positive_timeout(self):
        with pytest.raises(ValueError, match="positive"):
            Settings.from_env({"ROOTX_STORE_TIMEOUT": "0"})
