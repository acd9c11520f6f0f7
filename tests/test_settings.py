# ABOUTME: Tests for the pydantic-settings configuration
# ABOUTME: Defaults, environment overrides and the lazy global instance

import os
from pathlib import Path
from unittest.mock import patch

from reddit_authors import __version__
from reddit_authors.config import Config, get_config, reload_config


class TestConfigDefaults:
    def test_paths(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config(_env_file=None)

        assert config.input_dir == Path("input")
        assert config.output_dir == Path("output")
        assert config.input_path == Path("input") / "urls.txt"

    def test_http_defaults_match_reference_behaviour(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config(_env_file=None)

        assert config.about_suffix == "about.json"
        assert config.follow_redirects is False
        assert config.fail_on_http_error is False
        assert config.user_agent == f"reddit-authors/{__version__}"

    def test_log_mode_is_detected_when_unset(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config(_env_file=None)

        assert config.log_mode is None


class TestEnvironmentOverrides:
    def test_prefixed_variables(self):
        env = {
            "REDDIT_AUTHORS_INPUT_DIR": "/data/in",
            "REDDIT_AUTHORS_INPUT_FILENAME": "posts.txt",
            "REDDIT_AUTHORS_FAIL_ON_HTTP_ERROR": "true",
            "REDDIT_AUTHORS_REQUEST_TIMEOUT": "2.5",
            "REDDIT_AUTHORS_LOG_LEVEL": "DEBUG",
            "REDDIT_AUTHORS_LOG_MODE": "production",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config(_env_file=None)

        assert config.input_path == Path("/data/in/posts.txt")
        assert config.fail_on_http_error is True
        assert config.request_timeout == 2.5
        assert config.log_level == "DEBUG"
        assert config.log_mode == "production"

    def test_case_insensitive(self):
        with patch.dict(os.environ, {"reddit_authors_output_dir": "reports"}, clear=True):
            config = Config(_env_file=None)

        assert config.output_dir == Path("reports")


class TestGlobalConfig:
    def test_get_config_is_cached(self):
        reload_config()

        assert get_config() is get_config()

    def test_reload_replaces_instance(self):
        first = get_config()

        second = reload_config()

        assert second is not first
        assert get_config() is second
