"""Command-line interface for generating and previewing Quran notes."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from quran_vault.api import ChapterCache, QuranClient
from quran_vault.config import AppConfig, load_config
from quran_vault.generation import (
    PRESETS,
    CollectionBuilder,
    GenerationOptions,
    VaultGenerator,
    get_preset,
    parse_range,
)
from quran_vault.markdown import read_frontmatter
from quran_vault.models import VerseRange
from quran_vault.rendering.dom import new_container
from quran_vault.rendering.embed import render_note_pages
from quran_vault.storage import VaultStore
from quran_vault.views import MushafNavigator, SearchPanel, SurahList

logger = logging.getLogger(__name__)


def _notify(message: str) -> None:
    print(message, file=sys.stderr)


def _emit(html: str, output: Path | None) -> None:
    if output:
        output.write_text(html, encoding="utf-8")
    else:
        print(html)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quran-vault", description=__doc__)
    parser.add_argument("--config", default="config.yaml", help="Path to config.yaml")
    sub = parser.add_subparsers(dest="command", required=True)

    generate = sub.add_parser("generate", help="Generate surah, page and index notes")
    generate.add_argument("--no-translation", action="store_true")
    generate.add_argument("--no-mushaf", action="store_true")

    collection = sub.add_parser("collection", help="Create a reading collection note")
    collection.add_argument("--preset", help="Name of a built-in preset")
    collection.add_argument("--name", help="Collection name")
    collection.add_argument(
        "--range",
        dest="ranges",
        action="append",
        default=[],
        metavar="S:A-B",
        help="Verse range; repeat for several. Omit B for the end of the surah.",
    )

    page = sub.add_parser("page", help="Render a Mushaf page as HTML")
    page.add_argument("number", type=int)
    page.add_argument("--output", type=Path, help="Write HTML here instead of stdout")

    note = sub.add_parser("note", help="Render the Mushaf pages named in a note's front-matter")
    note.add_argument("path", type=Path)
    note.add_argument("--output", type=Path, help="Write HTML here instead of stdout")

    sub.add_parser("surahs", help="List all surahs")

    search = sub.add_parser("search", help="Search verses")
    search.add_argument("query")

    return parser


def _collection_request(args: argparse.Namespace) -> tuple[str, list[VerseRange]]:
    """Name and ranges for the ``collection`` command.

    Raises:
        ValueError: For an unknown preset or a malformed range.
    """
    if args.preset:
        try:
            preset = get_preset(args.preset)
        except KeyError:
            choices = ", ".join(p.name for p in PRESETS)
            raise ValueError(f"Unknown preset: {args.preset} (choose from: {choices})") from None
        return args.name or preset.name, list(preset.ranges)
    return args.name or "", [parse_range(r) for r in args.ranges]


async def _run(
    args: argparse.Namespace,
    config: AppConfig,
    collection: tuple[str, list[VerseRange]] | None = None,
) -> int:
    store = VaultStore(config.vault.root_dir)

    async with QuranClient(config.api) as client:
        cache = ChapterCache(client, config.display.language)

        if args.command == "generate":
            options = GenerationOptions.from_config(config)
            if args.no_translation:
                options.include_translation = False
            if args.no_mushaf:
                options.include_mushaf = False
            generator = VaultGenerator(client, store, config, cache=cache, notify=_notify)
            return 0 if await generator.generate_full_vault(options) else 1

        if args.command == "collection" and collection is not None:
            name, ranges = collection
            builder = CollectionBuilder(client, store, config, notify=_notify)
            return 0 if await builder.create_collection(name, ranges) else 1

        if args.command == "page":
            navigator = MushafNavigator(client, cache)
            ok = await navigator.load_page(args.number)
            _emit(navigator.target.html(), args.output)
            return 0 if ok else 1

        if args.command == "note":
            frontmatter = read_frontmatter(args.path.read_text(encoding="utf-8"))
            container = new_container()
            results = await render_note_pages(
                container, frontmatter, client, cache, config.notes.default_view_mode
            )
            if not results:
                _notify(f"No valid page or pages in the front-matter of {args.path}")
                return 1
            _emit(str(container), args.output)
            return 0 if all(results) else 1

        if args.command == "surahs":
            surah_list = SurahList(cache)
            if not await surah_list.load():
                _notify(surah_list.target.container.get_text())
                return 1
            for chapter in surah_list.chapters:
                print(
                    f"{chapter.id:3d}  {chapter.name_simple} ({chapter.verses_count} verses, "
                    f"{chapter.revelation_place})  {chapter.name_arabic}"
                )
            return 0

        if args.command == "search":
            panel = SearchPanel(client, language=config.display.language)
            results = await panel.search(args.query)
            if panel.error is not None:
                _notify(f"Search error: {panel.error}")
                return 1
            for result in results:
                print(result.verse_key)
            return 0

    return 2


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, configure logging and run one command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config(args.config)

    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    collection = None
    if args.command == "collection":
        try:
            collection = _collection_request(args)
        except ValueError as e:
            parser.error(str(e))
    if args.command == "note" and not args.path.is_file():
        parser.error(f"Note not found: {args.path}")

    return asyncio.run(_run(args, config, collection))
