"""Note generation: the full vault and custom collections."""

from quran_vault.generation.collection import PRESETS, CollectionBuilder, get_preset, parse_range
from quran_vault.generation.juz import build_juz_page_map, page_to_juz
from quran_vault.generation.vault import GenerationOptions, VaultGenerator

__all__ = [
    "PRESETS",
    "CollectionBuilder",
    "GenerationOptions",
    "VaultGenerator",
    "build_juz_page_map",
    "get_preset",
    "page_to_juz",
    "parse_range",
]
