"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from quran_vault.config import TRANSLATIONS, AppConfig, DisplayConfig, load_config


class TestAppConfigDefaults:
    """Test that AppConfig provides sensible defaults."""

    def test_default_config_creates_successfully(self) -> None:
        config = AppConfig()
        assert config.api.base_url == "https://api.quran.com/api/v4"
        assert config.display.language == "en"

    def test_default_display_config(self) -> None:
        config = AppConfig()
        assert config.display.default_translation == 20
        assert config.display.show_arabic is True
        assert config.display.show_translation is True
        assert config.display.font_size == 24

    def test_default_notes_config(self) -> None:
        config = AppConfig()
        assert config.notes.default_view_mode == "verse"
        assert config.notes.include_mushaf is True

    def test_default_vault_config(self) -> None:
        config = AppConfig()
        assert config.vault.base_folder == "Quran"
        assert config.vault.pause_every == 10
        assert config.vault.pause_seconds == 0.1

    def test_default_translation_is_offered(self) -> None:
        assert AppConfig().display.default_translation in TRANSLATIONS

    def test_font_size_is_bounded(self) -> None:
        with pytest.raises(ValidationError):
            DisplayConfig(font_size=100)

    def test_view_mode_is_restricted(self) -> None:
        with pytest.raises(ValidationError):
            AppConfig(notes={"default_view_mode": "grid"})


class TestLoadConfig:
    """Test loading config from YAML files."""

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        yaml_data = {
            "display": {"language": "fr", "default_translation": 85},
            "vault": {"root_dir": "/tmp/notes"},
        }
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump(yaml_data))

        config = load_config(config_file)
        assert config.display.language == "fr"
        assert config.display.default_translation == 85
        assert config.vault.root_dir == "/tmp/notes"
        # Other fields keep defaults
        assert config.vault.base_folder == "Quran"

    def test_load_missing_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.vault.root_dir == "./vault"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        config = load_config(config_file)
        assert config.display.font_size == 24

    def test_env_vars_override_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"vault": {"root_dir": "./from-yaml"}}))

        monkeypatch.setenv("QURAN_VAULT_DIR", "/srv/vault")
        monkeypatch.setenv("QURAN_API_BASE_URL", "http://localhost:9000/v4")
        monkeypatch.setenv("QURAN_LOG_LEVEL", "debug")

        config = load_config(config_file)
        assert config.vault.root_dir == "/srv/vault"
        assert config.api.base_url == "http://localhost:9000/v4"
        assert config.logging.level == "DEBUG"

    def test_load_project_config_yaml(self) -> None:
        """Test loading the actual project config.yaml."""
        config = load_config(Path(__file__).parent.parent / "config.yaml")
        assert config.vault.base_folder == "Quran"
        assert config.notes.include_mushaf is True
