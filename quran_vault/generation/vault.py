"""Generates the static Quran vault: surah notes, page notes and an index."""

import asyncio
import logging
from collections.abc import Callable, Sequence

from pydantic import BaseModel

from quran_vault.api import ChapterCache, QuranClient
from quran_vault.config import AppConfig
from quran_vault.constants import TOTAL_JUZ, TOTAL_PAGES, TOTAL_SURAHS
from quran_vault.generation.juz import page_to_juz
from quran_vault.markdown import format_frontmatter, pad_number, strip_html
from quran_vault.models import Chapter, Verse
from quran_vault.rendering.embed import MUSHAF_BLOCK, VIEW_TOGGLE_BLOCK
from quran_vault.storage import VaultStore

logger = logging.getLogger(__name__)

VAULT_FOLDERS = ("Surahs", "Pages", "Juz", "Collections")

Notify = Callable[[str], None]


class GenerationOptions(BaseModel):
    """Per-run choices for page notes."""

    include_translation: bool = True
    translation_id: int = 20
    include_mushaf: bool = False
    default_view_mode: str = "verse"

    @classmethod
    def from_config(cls, config: AppConfig) -> "GenerationOptions":
        return cls(
            include_translation=config.display.show_translation,
            translation_id=config.display.default_translation,
            include_mushaf=config.notes.include_mushaf,
            default_view_mode=config.notes.default_view_mode,
        )


def surah_note_name(chapter_id: int, name: str) -> str:
    return f"{pad_number(chapter_id, 3)} - {name}"


def page_note_name(page: int) -> str:
    return f"Page {pad_number(page, 3)}"


def render_verse_block(verse: Verse, include_translation: bool) -> str:
    """Markdown for one verse: key heading, quoted Arabic, translation, rule."""
    parts = [f"### {verse.verse_key}", f"> {verse.text_uthmani}"]
    translation = verse.first_translation
    if include_translation and translation is not None:
        text = strip_html(translation.text)
        if text:
            parts.append(text)
    parts.append("---")
    return "\n\n".join(parts) + "\n\n"


def build_surah_content(chapter: Chapter) -> str:
    """Full markdown for a surah note. Needs only the chapter metadata."""
    frontmatter = format_frontmatter(
        {
            "surah": chapter.id,
            "name_arabic": chapter.name_arabic,
            "name_english": chapter.name_simple,
            "verses_count": chapter.verses_count,
            "revelation_place": chapter.revelation_place,
            "pages": chapter.pages,
            "status": "not_started",
            "tags": ["quran", "surah", chapter.revelation_place],
        }
    )
    page_links = "\n".join(f"- [[{page_note_name(p)}]]" for p in chapter.page_span)
    if chapter.pages:
        page_span = f"{chapter.first_page} - {chapter.last_page}"
    else:
        page_span = ""

    return (
        f"{frontmatter}\n"
        f"# {chapter.name_simple}\n\n"
        f"## {chapter.name_arabic}\n\n"
        "| Property | Value |\n"
        "|----------|-------|\n"
        f"| **English** | {chapter.name_simple} |\n"
        f"| **Verses** | {chapter.verses_count} |\n"
        f"| **Revelation** | {chapter.revelation_place} |\n"
        f"| **Pages** | {page_span} |\n\n"
        "## Pages in this Surah\n\n"
        f"{page_links}\n\n"
        "## Reading Progress\n\n"
        "- [ ] Started reading\n"
        "- [ ] Completed reading\n"
        "- [ ] Memorized\n\n"
        "## Notes\n\n"
    )


def build_page_content(
    page: int,
    verses: Sequence[Verse],
    chapters: Sequence[Chapter],
    juz_number: int,
    options: GenerationOptions,
) -> str:
    """Full markdown for a page note.

    Args:
        page: Page number, 1-604.
        verses: Verses on the page in order.
        chapters: Chapters touched by the page, first-seen order.
        juz_number: Juz the page is attributed to.
        options: Translation and Mushaf embedding choices.
    """
    first_verse = verses[0].verse_key if verses else ""
    last_verse = verses[-1].verse_key if verses else ""

    frontmatter = format_frontmatter(
        {
            "page": page,
            "juz": juz_number,
            "surahs": [c.id for c in chapters],
            "first_verse": first_verse,
            "last_verse": last_verse,
            "status": "not_read",
            "memorized": False,
            "tags": ["quran", "page", f"juz-{juz_number}"],
        }
    )
    surah_links = ", ".join(
        f"[[{surah_note_name(c.id, c.name_simple)}|{c.name_simple}]]" for c in chapters
    )

    embed = ""
    if options.include_mushaf:
        embed = (
            f"```{VIEW_TOGGLE_BLOCK}\n{options.default_view_mode}\n```\n\n"
            f"```{MUSHAF_BLOCK}\n```\n\n"
        )

    verse_blocks = "".join(render_verse_block(v, options.include_translation) for v in verses)

    return (
        f"{frontmatter}\n"
        f"# Page {page}\n\n"
        f"**Surahs:** {surah_links}\n"
        f"**Juz:** [[Juz {pad_number(juz_number, 2)}]]\n"
        f"**Verses:** {first_verse} → {last_verse}\n\n"
        "---\n\n"
        f"{embed}"
        f"{verse_blocks}"
        "## Status\n\n"
        "- [ ] Read\n"
        "- [ ] Memorized\n"
        "- [ ] Reviewed\n"
    )


def build_index_content(base_folder: str) -> str:
    """Static index note; dataview queries over the surah and page folders."""
    return (
        f"{format_frontmatter({'tags': ['quran', 'index']})}\n"
        "# Quran Index\n\n"
        "## Quick Navigation\n\n"
        "### By Surah\n"
        "```dataview\n"
        'TABLE name_arabic as "Arabic", verses_count as "Verses", status\n'
        f'FROM "{base_folder}/Surahs"\n'
        "SORT surah ASC\n"
        "```\n\n"
        "### Reading Progress\n"
        "```dataview\n"
        'TABLE length(filter(file.tasks, (t) => t.completed)) as "Completed"\n'
        f'FROM "{base_folder}/Pages"\n'
        'WHERE status = "read"\n'
        "```\n\n"
        "### Memorization Progress\n"
        "```dataview\n"
        "LIST\n"
        f'FROM "{base_folder}/Pages"\n'
        "WHERE memorized = true\n"
        "SORT page ASC\n"
        "```\n\n"
        "## Statistics\n\n"
        f"- **Total Surahs:** {TOTAL_SURAHS}\n"
        f"- **Total Pages:** {TOTAL_PAGES}\n"
        f"- **Total Juz:** {TOTAL_JUZ}\n"
    )


class VaultGenerator:
    """Writes every surah note, every page note and the index.

    Existing notes are never overwritten, so an interrupted run can be
    repeated and only fills in what is missing. Pages are generated one
    at a time with a short pause every ``pause_every`` pages to stay
    gentle on the API.

    Args:
        client: API client for chapters and verses.
        store: Vault the notes are written to.
        config: Application configuration.
        cache: Chapter list memo for this run; a fresh one if omitted.
        notify: Receives progress and failure messages for the user.
    """

    def __init__(
        self,
        client: QuranClient,
        store: VaultStore,
        config: AppConfig,
        cache: ChapterCache | None = None,
        notify: Notify | None = None,
    ) -> None:
        self._client = client
        self._store = store
        self._config = config
        self._cache = cache or ChapterCache(client, config.display.language)
        self._notify = notify or logger.info
        self.base_folder = config.vault.base_folder

    def _path(self, *parts: str) -> str:
        return "/".join((self.base_folder, *parts))

    async def generate_full_vault(self, options: GenerationOptions | None = None) -> bool:
        """Run the whole generation, reporting instead of raising.

        The first failure stops the run. Notes written before it stay on
        disk.

        Returns:
            True if every step completed.
        """
        options = options or GenerationOptions.from_config(self._config)
        self._notify("Generating Quran vault...")
        try:
            self.create_folders()

            self._notify("Generating surah notes...")
            await self.generate_surah_notes()

            self._notify("Generating page notes (this may take a few minutes)...")
            await self.generate_page_notes(options)

            self._notify("Generating index...")
            self.generate_index()
        except Exception as e:
            logger.exception("Vault generation failed")
            self._notify(f"Vault generation failed: {e}")
            return False

        self._notify("Quran vault generated successfully!")
        return True

    def create_folders(self) -> None:
        for folder in VAULT_FOLDERS:
            path = self._path(folder)
            if not self._store.exists(path):
                self._store.create_folder(path)

    async def generate_surah_notes(self) -> int:
        """Write a note per surah. Returns how many were created."""
        created = 0
        for chapter in await self._cache.get_or_fetch():
            path = self._path("Surahs", f"{surah_note_name(chapter.id, chapter.name_simple)}.md")
            if self._store.exists(path):
                continue
            self._store.create(path, build_surah_content(chapter))
            created += 1
        logger.info("Created %d surah notes", created)
        return created

    async def generate_page_notes(self, options: GenerationOptions) -> int:
        """Write a note per page, 1 through 604. Returns how many were created."""
        translations = [options.translation_id] if options.include_translation else None
        pause_every = self._config.vault.pause_every
        created = 0

        for page in range(1, TOTAL_PAGES + 1):
            path = self._path("Pages", f"{page_note_name(page)}.md")
            if self._store.exists(path):
                continue

            verses = await self._client.get_verses_by_page(
                page, translations=translations, per_page=50
            )
            chapter_ids = list(dict.fromkeys(v.chapter_id for v in verses if v.chapter_id > 0))
            chapters = list((await self._cache.for_ids(chapter_ids)).values())

            content = build_page_content(page, verses, chapters, page_to_juz(page), options)
            self._store.create(path, content)
            created += 1

            if pause_every > 0 and page % pause_every == 0:
                self._notify(f"Generated {page}/{TOTAL_PAGES} pages...")
                await asyncio.sleep(self._config.vault.pause_seconds)

        logger.info("Created %d page notes", created)
        return created

    def generate_index(self) -> bool:
        """Write the index note unless it exists. Returns True if written."""
        path = self._path("_Index.md")
        if self._store.exists(path):
            return False
        self._store.create(path, build_index_content(self.base_folder))
        return True
