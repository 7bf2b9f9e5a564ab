"""Tests for markdown and front-matter helpers."""

import datetime

import pytest

from quran_vault.markdown import (
    format_frontmatter,
    pad_number,
    read_frontmatter,
    sanitize_filename,
    strip_html,
)


class TestPadNumber:
    def test_pads(self) -> None:
        assert pad_number(7, 3) == "007"
        assert pad_number(604, 3) == "604"
        assert pad_number(3, 2) == "03"


class TestStripHtml:
    def test_nested_tags(self) -> None:
        html = "<p>Allah - there is no deity <i>except <b>Him</b></i>, the Ever-Living</p>"
        assert strip_html(html) == "Allah - there is no deity except Him, the Ever-Living"

    def test_footnote_markers_flattened(self) -> None:
        html = 'Those who believe<sup foot_note="77">1</sup> in the unseen'
        result = strip_html(html)
        assert "<" not in result and ">" not in result
        assert result == "Those who believe1 in the unseen"

    def test_plain_text_unchanged(self) -> None:
        assert strip_html("In the name of Allah") == "In the name of Allah"

    def test_entities_decoded(self) -> None:
        assert strip_html("Moses &amp; Khidr") == "Moses & Khidr"

    def test_empty(self) -> None:
        assert strip_html("") == ""


class TestSanitizeFilename:
    def test_replaces_unsafe_characters(self) -> None:
        assert sanitize_filename("Moses Story (Al-Kahf)") == "Moses Story _Al-Kahf_"

    def test_keeps_safe_characters(self) -> None:
        assert sanitize_filename("Last 10 Surahs_v2") == "Last 10 Surahs_v2"

    def test_path_separators(self) -> None:
        assert "/" not in sanitize_filename("a/b\\c")


class TestFrontmatter:
    def test_format_page_frontmatter(self) -> None:
        text = format_frontmatter(
            {
                "page": 42,
                "juz": 3,
                "surahs": [2, 3],
                "first_verse": "2:253",
                "memorized": False,
                "tags": ["quran", "page", "juz-3"],
            }
        )
        assert text.startswith("---\npage: 42\njuz: 3\n")
        assert "surahs: [2, 3]\n" in text
        assert 'first_verse: "2:253"\n' in text
        assert "memorized: false\n" in text
        assert text.endswith("---\n")

    def test_round_trip_types(self) -> None:
        fields = {
            "surah": 1,
            "name_arabic": "الفاتحة",
            "name_english": "Al-Fatihah",
            "pages": [1, 1],
            "status": "not_started",
            "tags": ["quran", "surah", "makkah"],
            "memorized": True,
            "created": datetime.date(2024, 5, 17),
            "ranges": [{"surah": 2, "start_verse": 255, "end_verse": 255}],
        }
        parsed = read_frontmatter(format_frontmatter(fields) + "\n# Body\n")
        assert parsed == fields

    def test_quotes_in_names(self) -> None:
        parsed = read_frontmatter(format_frontmatter({"name": 'Ali \'Imran "3"'}))
        assert parsed["name"] == 'Ali \'Imran "3"'

    def test_read_without_frontmatter(self) -> None:
        assert read_frontmatter("# Just a note\n") == {}

    def test_read_unterminated(self) -> None:
        assert read_frontmatter("---\npage: 1\n") == {}

    def test_unsupported_value(self) -> None:
        with pytest.raises(TypeError):
            format_frontmatter({"bad": object()})
