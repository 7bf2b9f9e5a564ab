"""Custom reading collections: verse ranges gathered into one note."""

import datetime
import logging
from collections.abc import Callable, Sequence

from quran_vault.api import QuranClient
from quran_vault.config import AppConfig
from quran_vault.generation.vault import render_verse_block, surah_note_name
from quran_vault.markdown import format_frontmatter, sanitize_filename
from quran_vault.models import CollectionPreset, VerseRange
from quran_vault.storage import VaultStore

logger = logging.getLogger(__name__)

COLLECTION_VERSE_FIELDS = "text_uthmani,chapter_id,page_number"

PRESETS: list[CollectionPreset] = [
    CollectionPreset(
        name="Ayatul Kursi",
        ranges=[VerseRange(surah=2, start_verse=255, end_verse=255)],
    ),
    CollectionPreset(
        name="Moses Story (Al-Kahf)",
        ranges=[VerseRange(surah=18, start_verse=60, end_verse=82, label="Moses & Khidr")],
    ),
    CollectionPreset(
        name="Surah Yasin",
        ranges=[VerseRange(surah=36, start_verse=1, end_verse=83)],
    ),
    CollectionPreset(
        name="Surah Al-Mulk",
        ranges=[VerseRange(surah=67, start_verse=1, end_verse=30)],
    ),
    CollectionPreset(
        name="Last 10 Surahs",
        ranges=[VerseRange(surah=s, start_verse=1) for s in range(105, 115)],
    ),
    CollectionPreset(
        name="Friday Recitation",
        ranges=[
            VerseRange(surah=18, start_verse=1, end_verse=10, label="First 10"),
            VerseRange(surah=18, start_verse=101, end_verse=110, label="Last 10"),
        ],
    ),
]


def get_preset(name: str) -> CollectionPreset:
    """Look up a preset by name, case-insensitively.

    Raises:
        KeyError: If no preset has that name.
    """
    for preset in PRESETS:
        if preset.name.lower() == name.lower():
            return preset
    raise KeyError(f"Unknown preset: {name}")


def parse_range(text: str) -> VerseRange:
    """Parse ``S:A-B``, ``S:A``, ``S:A-`` or ``S`` into a VerseRange.

    An omitted end means "through the end of the surah".

    Raises:
        ValueError: If the text is not in one of these forms.
    """
    surah_part, _, verses_part = text.strip().partition(":")
    try:
        surah = int(surah_part)
        if not verses_part:
            return VerseRange(surah=surah)
        start_part, dash, end_part = verses_part.partition("-")
        start = int(start_part)
        if not dash:
            return VerseRange(surah=surah, start_verse=start, end_verse=start)
        end = int(end_part) if end_part else None
        return VerseRange(surah=surah, start_verse=start, end_verse=end)
    except ValueError as e:
        raise ValueError(f"Invalid verse range '{text}': expected S:A-B") from e


class CollectionBuilder:
    """Builds one collection note from a list of verse ranges.

    Ranges are processed in the order given and are neither merged nor
    de-duplicated: overlapping ranges repeat the shared verses.

    Args:
        client: API client for chapters and verses.
        store: Vault the collection is written to.
        config: Application configuration.
        notify: Receives result and failure messages for the user.
    """

    def __init__(
        self,
        client: QuranClient,
        store: VaultStore,
        config: AppConfig,
        notify: Callable[[str], None] | None = None,
    ) -> None:
        self._client = client
        self._store = store
        self._config = config
        self._notify = notify or logger.info
        self.folder = f"{config.vault.base_folder}/Collections"

    def collection_path(self, name: str) -> str:
        return f"{self.folder}/{sanitize_filename(name)}.md"

    async def build_content(
        self,
        name: str,
        ranges: Sequence[VerseRange],
        created: datetime.date | None = None,
    ) -> str:
        """Fetch every range and assemble the full note in memory.

        Args:
            name: Collection title.
            ranges: Verse ranges, in the order they should appear.
            created: Creation date for front-matter; today if omitted.

        Returns:
            The complete markdown document.

        Raises:
            QuranApiError: If any chapter or verse request fails.
        """
        language = self._config.display.language
        translation_id = self._config.display.default_translation
        pages: set[int] = set()
        resolved: list[VerseRange] = []
        sections: list[str] = []

        for verse_range in ranges:
            chapter = await self._client.get_chapter(verse_range.surah, language)
            end_verse = verse_range.end_verse
            if end_verse is None:
                end_verse = chapter.verses_count
            resolved.append(verse_range.model_copy(update={"end_verse": end_verse}))

            label = verse_range.label or (
                f"{verse_range.surah}:{verse_range.start_verse}-{end_verse}"
            )
            section = [
                f"\n## {chapter.name_simple} ({label})\n",
                f"**Link:** [[{surah_note_name(chapter.id, chapter.name_simple)}]]\n\n",
            ]

            verses = await self._client.get_verses_by_chapter(
                verse_range.surah,
                translations=[translation_id],
                per_page=300,
                fields=COLLECTION_VERSE_FIELDS,
            )
            for verse in verses:
                if not verse_range.start_verse <= verse.verse_number <= end_verse:
                    continue
                if verse.page_number:
                    pages.add(verse.page_number)
                section.append(render_verse_block(verse, include_translation=True))

            sections.append("".join(section))

        frontmatter = format_frontmatter(
            {
                "type": "collection",
                "name": name,
                "created": created or datetime.date.today(),
                "ranges": [r.model_dump(exclude_none=True) for r in resolved],
                "pages": sorted(pages),
                "status": "not_started",
                "tags": ["quran", "collection", "custom"],
            }
        )
        return (
            f"{frontmatter}\n"
            f"# {name}\n\n"
            f"{''.join(sections)}\n"
            "## Progress\n\n"
            "- [ ] Started\n"
            "- [ ] Completed\n"
            "- [ ] Memorized\n\n"
            "## Notes\n\n"
        )

    async def create_collection(self, name: str, ranges: Sequence[VerseRange]) -> str | None:
        """Build and write a collection note, reporting instead of raising.

        Nothing is written unless the whole document was built.

        Returns:
            The vault path of the new note, or None on failure.
        """
        if not name.strip() or not ranges:
            self._notify("Please provide a name and at least one verse range.")
            return None

        self._notify("Creating collection...")
        path = self.collection_path(name)
        try:
            content = await self.build_content(name, ranges)
            if not self._store.exists(self.folder):
                self._store.create_folder(self.folder)
            self._store.create(path, content)
        except Exception as e:
            logger.exception("Failed to create collection %r", name)
            self._notify(f"Failed to create collection: {e}")
            return None

        self._notify(f'Collection "{name}" created!')
        return path
