"""Shared fixtures for the test suite."""

import pytest

from quran_vault.config import AppConfig

from fakes import FakeQuranClient


@pytest.fixture
def fake_client() -> FakeQuranClient:
    return FakeQuranClient()


@pytest.fixture
def app_config(tmp_path) -> AppConfig:
    config = AppConfig()
    config.vault.root_dir = str(tmp_path / "vault")
    config.vault.pause_seconds = 0
    return config
