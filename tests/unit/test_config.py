#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for MonitorConfig."""

import pytest

from xidmon.config import DEFAULT_BURST_WINDOW_MS, ConfigurationError, MonitorConfig


class TestMonitorConfig:
    """Tests for MonitorConfig model."""

    def test_default_values(self):
        config = MonitorConfig()
        assert config.display is None
        assert config.burst_window_ms == DEFAULT_BURST_WINDOW_MS == 250
        assert config.burst_window == 0.25
        assert config.log_level == "WARNING"

    def test_validation_non_positive_window(self):
        with pytest.raises(ValueError, match="positive"):
            MonitorConfig(burst_window_ms=0)

    def test_log_level_is_normalised(self):
        assert MonitorConfig(log_level="debug").log_level == "DEBUG"

    def test_validation_unknown_log_level(self):
        with pytest.raises(ValueError):
            MonitorConfig(log_level="LOUD")

    def test_is_frozen(self):
        config = MonitorConfig()
        with pytest.raises(AttributeError):
            config.burst_window_ms = 10


class TestMonitorConfigFromEnv:
    """Tests for reading settings from the environment."""

    def test_empty_environment(self):
        config = MonitorConfig.from_env({})
        assert config == MonitorConfig()

    def test_reads_display_and_window(self):
        config = MonitorConfig.from_env({"DISPLAY": ":1", "XIDMON_BURST_WINDOW_MS": "100"})
        assert config.display == ":1"
        assert config.burst_window_ms == 100
        assert config.burst_window == pytest.approx(0.1)

    def test_empty_display_means_unset(self):
        assert MonitorConfig.from_env({"DISPLAY": ""}).display is None

    def test_blank_window_uses_default(self):
        assert MonitorConfig.from_env({"XIDMON_BURST_WINDOW_MS": " "}).burst_window_ms == 250

    def test_non_integer_window(self):
        with pytest.raises(ConfigurationError, match="integer"):
            MonitorConfig.from_env({"XIDMON_BURST_WINDOW_MS": "fast"})

    def test_non_positive_window(self):
        with pytest.raises(ConfigurationError, match="positive"):
            MonitorConfig.from_env({"XIDMON_BURST_WINDOW_MS": "-5"})

    def test_log_level(self):
        assert MonitorConfig.from_env({"XIDMON_LOG_LEVEL": "info"}).log_level == "INFO"

    def test_unknown_log_level(self):
        with pytest.raises(ConfigurationError, match="XIDMON_LOG_LEVEL"):
            MonitorConfig.from_env({"XIDMON_LOG_LEVEL": "chatty"})

    def test_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv("DISPLAY", ":7")
        monkeypatch.setenv("XIDMON_BURST_WINDOW_MS", "500")
        config = MonitorConfig.from_env()
        assert config.display == ":7"
        assert config.burst_window_ms == 500


# 🔼⚙️🔚
