"""Persistence for generated notes."""

from quran_vault.storage.vault import VaultStore, normalize_path

__all__ = ["VaultStore", "normalize_path"]
