"""Tests for the service configuration loader."""

from pathlib import Path

import pytest
import yaml

from citefetch.core.config import (
    DEFAULT_RECORD_BASE,
    DEFAULT_SEARCH_BASE,
    ServiceConfig,
    load_service_config,
)
from citefetch.core.errors import ConfigError

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "services.yaml"


# ── Loading ──────────────────────────────────────────────────────────


def test_load_shipped_config():
    config = load_service_config(CONFIG_PATH)
    assert config.search_base == DEFAULT_SEARCH_BASE
    assert config.record_base == DEFAULT_RECORD_BASE
    assert config.timeout > 0


def test_missing_keys_use_defaults(tmp_path):
    path = tmp_path / "services.yaml"
    path.write_text(yaml.safe_dump({"timeout": 3}))
    config = load_service_config(path)
    assert config.timeout == 3.0
    assert config.search_base == DEFAULT_SEARCH_BASE
    assert config.email is None


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "services.yaml"
    path.write_text("")
    assert load_service_config(path) == ServiceConfig()


def test_trailing_question_mark_stripped():
    config = ServiceConfig(search_base="https://example.org/search?")
    assert config.search_base == "https://example.org/search"


# ── Errors ───────────────────────────────────────────────────────────


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_service_config(tmp_path / "nope.yaml")


def test_non_http_base(tmp_path):
    path = tmp_path / "services.yaml"
    path.write_text(yaml.safe_dump({"record_base": "ftp://example.org/records"}))
    with pytest.raises(ConfigError):
        load_service_config(path)


def test_non_positive_timeout(tmp_path):
    path = tmp_path / "services.yaml"
    path.write_text(yaml.safe_dump({"timeout": 0}))
    with pytest.raises(ConfigError):
        load_service_config(path)


def test_not_a_mapping(tmp_path):
    path = tmp_path / "services.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ConfigError):
        load_service_config(path)
