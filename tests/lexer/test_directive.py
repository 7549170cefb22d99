"""Tests for the Story directive matcher and its attribute parsers."""

from __future__ import annotations

import pytest

from storymark.config import TokenizerConfig
from storymark.lexer import Tokenizer
from storymark.lexer.attributes import (
    find_target_attribute,
    has_flag_attribute,
    parse_value_attribute,
)


def _directive(source: str, pos: int = 0):  # type: ignore[no-untyped-def]
    return Tokenizer(source)._match_directive(pos)


def _target(content: str) -> str | None:
    found = find_target_attribute(content, 0, len(content))
    if found is None:
        return None
    offset, length = found
    return content[offset : offset + length]


class TestDirectiveMatcher:
    """Whole-tag recognition."""

    def test_single_story(self) -> None:
        source = '<Story of="path" />'
        directive = _directive(source)
        assert directive is not None
        assert directive.target == "path"
        assert directive.controls is False
        assert directive.length == len(source)

    def test_story_with_break_after_name(self) -> None:
        source = '<Story \nof="path" />'
        directive = _directive(source)
        assert directive is not None
        assert directive.target == "path"

    @pytest.mark.parametrize(
        "source",
        [
            '<Story of="path" controls/>',
            '<Story controls of="path"/>',
            '<Story of="path" controls />',
            '<Story\nof="path"\ncontrols\n/>',
        ],
    )
    def test_controls_flag(self, source: str) -> None:
        directive = _directive(source)
        assert directive is not None
        assert directive.target == "path"
        assert directive.controls is True
        assert directive.length == len(source)

    def test_repeated_flag_word_is_not_the_flag(self) -> None:
        directive = _directive('<Story\nof="path"\ncontrolscontrols\n/>')
        assert directive is not None
        assert directive.controls is False

    def test_missing_target_is_still_a_directive(self) -> None:
        directive = _directive("<Story controls />")
        assert directive is not None
        assert directive.target is None
        assert directive.target_offset is None
        assert directive.controls is True

    def test_unterminated_tag(self) -> None:
        assert _directive('<Story of="path" >') is None

    def test_not_a_story(self) -> None:
        assert _directive('<Canvas of="path" />') is None

    def test_length_stops_at_first_closer(self) -> None:
        source = '<Story of="a" /> and <br/>'
        directive = _directive(source)
        assert directive is not None
        assert directive.raw == '<Story of="a" />'

    def test_closer_far_away(self) -> None:
        """Any later ``/>`` closes the tag, even several lines down."""
        source = "<Story of='a'\n\ntext\n<br/>"
        directive = _directive(source)
        assert directive is not None
        assert directive.length == len(source)
        assert directive.target == "a"

    def test_match_at_offset(self) -> None:
        source = 'Intro <Story of="x/y" />'
        directive = _directive(source, pos=6)
        assert directive is not None
        assert directive.offset == 6
        assert directive.target == "x/y"

    def test_custom_names(self) -> None:
        config = TokenizerConfig(
            directive_name="Canvas", target_attribute="story", flag_attribute="docs"
        )
        directive = Tokenizer('<Canvas story="a/b" docs />', config)._match_directive(0)
        assert directive is not None
        assert directive.target == "a/b"
        assert directive.controls is True

    def test_closer_lookup_is_reused(self) -> None:
        source = '<Story of="a" <Story of="b" />'
        tokenizer = Tokenizer(source)
        first = tokenizer._match_directive(0)
        second = tokenizer._match_directive(14)
        assert first is not None and second is not None
        assert first.end == second.end == len(source)

    def test_failed_closer_lookup_is_remembered(self) -> None:
        tokenizer = Tokenizer("<Story a <Story b <Story c")
        assert tokenizer._match_directive(0) is None
        assert tokenizer._close_pos == -1
        assert tokenizer._match_directive(9) is None
        assert tokenizer._close_search_from == 0


class TestTargetAttribute:
    """of="..." parsing."""

    @pytest.mark.parametrize(
        ("content", "expected"),
        [
            ('of="path" ', "path"),
            (' of="path"', "path"),
            (" of='path'", "path"),
            (' of = "path"', "path"),
            (' of\n=\n"path"', "path"),
            (' of=""', ""),
            (' of="it\'s"', "it's"),
            (" of='say \"hi\"'", 'say "hi"'),
            (' title="x" of="a/b"', "a/b"),
        ],
    )
    def test_found(self, content: str, expected: str) -> None:
        assert _target(content) == expected

    @pytest.mark.parametrize(
        "content",
        [
            "",
            " ",
            " controls",
            ' proof="x"',
            ' of=path',
            ' of="unterminated',
            " of",
            " of=",
            ' off="x"',
        ],
    )
    def test_not_found(self, content: str) -> None:
        assert _target(content) is None

    def test_first_parsable_occurrence_wins(self) -> None:
        """A bare ``of`` does not stop the search."""
        assert _target(' of controls of="real"') == "real"

    def test_known_limitation_inside_other_value(self) -> None:
        assert _target(' whatever="some value of="sub/path" />') == "sub/path"

    def test_value_is_bounded_by_window(self) -> None:
        source = 'of="abc" rest'
        assert parse_value_attribute(source, 0, 6, "of") is None
        assert parse_value_attribute(source, 0, 8, "of") == (4, 3)


class TestFlagAttribute:
    """Bare boolean attribute detection."""

    @pytest.mark.parametrize(
        ("content", "expected"),
        [
            ("controls", True),
            (" controls", True),
            ("controls ", True),
            (' of="x" controls', True),
            ("\ncontrols\n", True),
            ("\tcontrols\t", True),
            ("", False),
            (" control", False),
            (" controlsx", False),
            (" xcontrols", False),
            (" controlscontrols ", False),
            (' data-controls="1"', False),
        ],
    )
    def test_detection(self, content: str, expected: bool) -> None:
        assert has_flag_attribute(content, 0, len(content)) is expected

    def test_known_limitation_inside_value(self) -> None:
        content = ' of="who controls this"'
        assert has_flag_attribute(content, 0, len(content)) is True

    def test_window_boundaries_count_as_delimiters(self) -> None:
        source = "xcontrolsx"
        assert has_flag_attribute(source, 1, 9) is True
