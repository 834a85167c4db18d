"""
Tests for Settings
==================
Tests for the YAML settings loader in pseudoword/settings.py.
"""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pseudoword import settings
from pseudoword.seed import default_charset, default_order


@pytest.fixture
def fresh_config():
    """Clear the cached config before and after the test."""
    settings.load_app_config.cache_clear()
    yield
    settings.load_app_config.cache_clear()


class TestBundledConfig:
    """Tests against configs/app.yaml."""

    def test_bundled_file_exists(self):
        assert settings.APP_CONFIG_PATH.exists()

    def test_dotted_lookup(self, fresh_config):
        assert settings.get_setting('generation.order') == 2
        assert settings.get_setting('generation.max_length') == 20

    def test_missing_key_default(self, fresh_config):
        assert settings.get_setting('generation.nope', 'x') == 'x'

    def test_lookup_through_scalar(self, fresh_config):
        assert settings.get_setting('generation.order.deeper', 5) == 5

    def test_section(self, fresh_config):
        assert isinstance(settings.get_setting('logging'), dict)


class TestConfigOverride:
    """Tests for the PSEUDOWORD_CONFIG override."""

    def test_override_file(self, tmp_path, monkeypatch, fresh_config):
        path = tmp_path / 'custom.yaml'
        path.write_text("generation:\n  order: 4\ncharset:\n  default: 'xyz$'\n")
        monkeypatch.setenv(settings.CONFIG_ENV_VAR, str(path))

        assert settings.config_path() == path
        assert default_order() == 4
        assert default_charset() == 'xyz$'

    def test_malformed_values_fall_back(self, tmp_path, monkeypatch, fresh_config):
        path = tmp_path / 'bad.yaml'
        path.write_text("generation:\n  order: two\ncharset:\n  default: 7\n")
        monkeypatch.setenv(settings.CONFIG_ENV_VAR, str(path))

        assert default_order() == 2
        assert default_charset().startswith('abc')

    def test_empty_file(self, tmp_path, monkeypatch, fresh_config):
        path = tmp_path / 'empty.yaml'
        path.write_text("")
        monkeypatch.setenv(settings.CONFIG_ENV_VAR, str(path))

        assert settings.load_app_config() == {}
        assert default_order() == 2

    def test_missing_file(self, tmp_path, monkeypatch, fresh_config):
        monkeypatch.setenv(settings.CONFIG_ENV_VAR, str(tmp_path / 'missing.yaml'))
        with pytest.raises(FileNotFoundError):
            settings.load_app_config()
