"""Tests for the content grammar."""

from __future__ import annotations

import pytest

from todogist.contracts.task import ParsedContent
from todogist.core.content import format_date, parse_content, strip_youtube_suffix


class TestTags:
    def test_leading_tag_is_lowercased_and_youtube_suffix_dropped(self) -> None:
        parsed = parse_content("{Music} Song Title - YouTube")

        assert parsed == ParsedContent(text="Song Title", tag="music")
        assert parsed.link is None

    def test_tag_requires_whitespace_and_rest(self) -> None:
        assert parse_content("{Music}") == ParsedContent(text="{Music}")

    @pytest.mark.parametrize(
        "content",
        ["My playlist", "playlist of the week", "the best playlist ever - YouTube"],
    )
    def test_playlist_word_sets_implicit_tag(self, content: str) -> None:
        assert parse_content(content).tag == "playlist"

    def test_playlist_must_be_a_standalone_word(self) -> None:
        assert parse_content("playlists galore").tag is None

    def test_explicit_tag_wins_over_playlist_word(self) -> None:
        assert parse_content("{Mix} my playlist").tag == "mix"


class TestHypertext:
    def test_label_followed_by_parenthesized_url(self) -> None:
        assert parse_content("Doc (http://x)") == ParsedContent(text="Doc", link="http://x")

    def test_bracketed_label(self) -> None:
        assert parse_content("[Doc](http://x)") == ParsedContent(text="Doc", link="http://x")

    def test_label_with_whitespace_is_not_a_link(self) -> None:
        assert parse_content("My Doc (http://x)") == ParsedContent(text="My Doc (http://x)")

    def test_text_after_link_is_kept(self) -> None:
        parsed = parse_content("Video (https://youtu.be/abc) - YouTube")

        assert parsed == ParsedContent(text="Video", link="https://youtu.be/abc")

    def test_tag_and_link_combined(self) -> None:
        parsed = parse_content("{Read} [Article](https://example.com/a)")

        assert parsed == ParsedContent(text="Article", tag="read", link="https://example.com/a")


class TestOutputShape:
    def test_empty_fields_are_omitted_on_dump(self) -> None:
        assert parse_content("Plain task").model_dump() == {"text": "Plain task"}

    def test_empty_content_yields_empty_record(self) -> None:
        assert parse_content("").model_dump() == {}

    def test_non_string_raises_type_error(self) -> None:
        with pytest.raises(TypeError, match="content is not a string"):
            parse_content(42)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "content",
        ["Song Title", "Doc (http://x)", "[Doc](http://x)", "{Music} Song Title - YouTube"],
    )
    def test_reparsing_text_is_idempotent(self, content: str) -> None:
        text = parse_content(content).text
        assert text is not None

        assert parse_content(text) == ParsedContent(text=text)

    def test_reparsing_text_containing_playlist_adds_tag_again(self) -> None:
        parsed = parse_content("{Mix} summer playlist")
        assert parsed.tag == "mix"

        assert parse_content(parsed.text or "").tag == "playlist"


def test_strip_youtube_suffix_only_at_end() -> None:
    assert strip_youtube_suffix("Song -  YouTube") == "Song"
    assert strip_youtube_suffix("YouTube - Song") == "YouTube - Song"
    assert strip_youtube_suffix("Song - YouTube\n") == "Song - YouTube\n"


class TestFormatDate:
    def test_formats_month_day_year(self) -> None:
        assert format_date("2020-01-05T10:00:00Z") == "January 5, 2020"

    def test_accepts_bare_date(self) -> None:
        assert format_date("2019-12-31") == "December 31, 2019"

    def test_non_string_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            format_date(20200105)  # type: ignore[arg-type]

    def test_malformed_date_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            format_date("05/01/2020")
