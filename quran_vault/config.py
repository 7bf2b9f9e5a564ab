"""Configuration loader for the Quran vault tooling."""

import os
from pathlib import Path
from typing import Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Translation resource ids offered as the default translation
TRANSLATIONS: dict[int, str] = {
    20: "Saheeh International",
    85: "Abdul Haleem",
    19: "Pickthall",
    22: "Yusuf Ali",
    84: "Mufti Taqi Usmani",
    203: "Al-Hilali & Khan",
}

LANGUAGES: dict[str, str] = {
    "en": "English",
    "ar": "Arabic",
    "fr": "French",
    "ur": "Urdu",
    "tr": "Turkish",
    "id": "Indonesian",
    "bn": "Bengali",
    "ru": "Russian",
    "es": "Spanish",
    "de": "German",
}


class ApiConfig(BaseModel):
    """Remote content API configuration."""

    base_url: str = "https://api.quran.com/api/v4"
    timeout_seconds: float = 30.0
    user_agent: str = "quran-vault/1.0.0"


class DisplayConfig(BaseModel):
    """Reader and rendering preferences."""

    default_translation: int = 20
    show_arabic: bool = True
    show_translation: bool = True
    font_size: int = Field(default=24, ge=16, le=48)
    language: str = "en"


class NotesConfig(BaseModel):
    """Generated note preferences."""

    default_view_mode: Literal["verse", "mushaf"] = "verse"
    include_mushaf: bool = True


class VaultConfig(BaseModel):
    """Vault location and generation pacing."""

    root_dir: str = "./vault"
    base_folder: str = "Quran"
    pause_every: int = 10
    pause_seconds: float = 0.1


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"


class AppConfig(BaseModel):
    """Root application configuration."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    notes: NotesConfig = Field(default_factory=NotesConfig)
    vault: VaultConfig = Field(default_factory=VaultConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file, encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Environment takes precedence over the YAML file
    base_url = os.getenv("QURAN_API_BASE_URL")
    if base_url:
        config.api.base_url = base_url
    vault_dir = os.getenv("QURAN_VAULT_DIR")
    if vault_dir:
        config.vault.root_dir = vault_dir
    log_level = os.getenv("QURAN_LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()

    return config
