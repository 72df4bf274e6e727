"""Tests for topfortunes/config.py — settings resolution."""

import json
import os
from unittest.mock import patch

from topfortunes.config import (
    DEFAULT_K, DEFAULT_STRATEGY, default_k, default_strategy, get_setting, load_config,
)


class TestLoadConfig:
    @patch("topfortunes.config.CONFIG_FILE")
    def test_loads_valid_json(self, mock_path):
        mock_path.exists.return_value = True
        mock_path.read_text.return_value = json.dumps({"k": 50})
        assert load_config() == {"k": 50}

    @patch("topfortunes.config.CONFIG_FILE")
    def test_returns_empty_for_missing(self, mock_path):
        mock_path.exists.return_value = False
        assert load_config() == {}

    @patch("topfortunes.config.CONFIG_FILE")
    def test_returns_empty_for_invalid_json(self, mock_path):
        mock_path.exists.return_value = True
        mock_path.read_text.return_value = "not json"
        assert load_config() == {}

    @patch("topfortunes.config.CONFIG_FILE")
    def test_returns_empty_for_non_object(self, mock_path):
        mock_path.exists.return_value = True
        mock_path.read_text.return_value = "[1, 2]"
        assert load_config() == {}


class TestGetSetting:
    def test_env_var_priority(self):
        with patch.dict(os.environ, {"TOPFORTUNES_STRATEGY": "sort"}):
            assert get_setting("strategy") == "sort"

    @patch("topfortunes.config.CONFIG_FILE")
    def test_reads_from_config(self, mock_path):
        mock_path.exists.return_value = True
        mock_path.read_text.return_value = json.dumps({"strategy": "ordered"})

        with patch.dict(os.environ, {}, clear=True):
            assert get_setting("strategy") == "ordered"

    @patch("topfortunes.config.CONFIG_FILE")
    def test_default_when_unset(self, mock_path):
        mock_path.exists.return_value = False
        with patch.dict(os.environ, {}, clear=True):
            assert get_setting("nothing_here", "fallback") == "fallback"


@patch("topfortunes.config.CONFIG_FILE")
class TestDefaults:
    def test_constants(self, mock_path):
        assert DEFAULT_K == 10000
        assert DEFAULT_STRATEGY == "heap"

    def test_default_k_from_env(self, mock_path):
        mock_path.exists.return_value = False
        with patch.dict(os.environ, {"TOPFORTUNES_K": "250"}):
            assert default_k() == 250

    def test_default_k_rejects_garbage(self, mock_path):
        mock_path.exists.return_value = False
        with patch.dict(os.environ, {"TOPFORTUNES_K": "lots"}):
            assert default_k() == DEFAULT_K
        with patch.dict(os.environ, {"TOPFORTUNES_K": "0"}):
            assert default_k() == DEFAULT_K

    def test_default_k_from_config(self, mock_path):
        mock_path.exists.return_value = True
        mock_path.read_text.return_value = json.dumps({"k": 42})
        with patch.dict(os.environ, {}, clear=True):
            assert default_k() == 42

    def test_default_strategy(self, mock_path):
        mock_path.exists.return_value = False
        with patch.dict(os.environ, {}, clear=True):
            assert default_strategy() == "heap"
