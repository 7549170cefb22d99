"""Tests for the fence-aware chunk scanner."""

from __future__ import annotations

import logging

import pytest

from storymark import Chunk, Heading, tokenize
from storymark.config import TokenizerConfig
from storymark.lexer import Tokenizer


def _chunk(source: str, pos: int = 0, config: TokenizerConfig | None = None) -> str:
    token = Tokenizer(source, config)._match_chunk(pos)
    assert isinstance(token, Chunk)
    return token.text


class TestStopPositions:
    """Where a chunk ends."""

    def test_runs_to_end_without_candidates(self) -> None:
        assert _chunk("just text\nand more") == "just text\nand more"

    def test_stops_before_heading_break(self) -> None:
        assert _chunk("intro\n# Title") == "intro"

    def test_stops_before_non_heading_hash_line(self) -> None:
        """A ``\\n#`` is a candidate even if the heading matcher later declines."""
        assert _chunk("intro\n#tag") == "intro"

    def test_stops_before_story_tag(self) -> None:
        assert _chunk('see <Story of="a" />') == "see "

    def test_stops_before_story_tag_with_break(self) -> None:
        assert _chunk('see <Story\nof="a" />') == "see "

    def test_other_tags_are_text(self) -> None:
        source = 'see <Storybook of="a" /> and <Story>'
        assert _chunk(source) == source

    def test_always_consumes_first_character(self) -> None:
        """The matchers already declined at pos, so pos itself is skipped."""
        assert _chunk('<Story of="a" >') == '<Story of="a" >'
        assert _chunk("\n#tag\nmore") == "\n#tag\nmore"

    def test_starts_at_offset(self) -> None:
        source = "# T\nbody\n## U"
        assert _chunk(source, pos=3) == "\nbody"


class TestFences:
    """Fenced code blocks are opaque."""

    @pytest.mark.parametrize("fence", ["```", "~~~", "````", "~~~~~"])
    def test_heading_inside_fence(self, fence: str) -> None:
        source = f"text\n{fence}\n# not a heading\n{fence}\nafter"
        assert _chunk(source) == source

    def test_story_inside_fence(self) -> None:
        source = 'text\n```markdown\n<Story of="a" />\n```\n'
        assert _chunk(source) == source

    def test_heading_after_fence_is_found(self) -> None:
        source = "text\n```\ncode\n```\n# Real"
        assert _chunk(source) == "text\n```\ncode\n```"

    def test_story_after_fence_is_found(self) -> None:
        source = 'text\n```\n<Story of="no" />\n```\n<Story of="yes" />'
        assert _chunk(source) == "text\n```\n<Story of=\"no\" />\n```\n"

    def test_longer_closer_closes(self) -> None:
        source = "x\n```\n# in\n`````\n# out"
        assert _chunk(source) == "x\n```\n# in\n`````"

    def test_shorter_closer_does_not_close(self) -> None:
        source = "x\n````\n```\n# in\n````\n# out"
        assert _chunk(source) == "x\n````\n```\n# in\n````"

    def test_other_fence_char_does_not_close(self) -> None:
        source = "x\n```\n~~~\n# in\n```\n# out"
        assert _chunk(source) == "x\n```\n~~~\n# in\n```"

    def test_two_backticks_are_not_a_fence(self) -> None:
        assert _chunk("x\n``\n# Title") == "x\n``"

    def test_fence_right_after_heading(self) -> None:
        source = "# Title\n```\n# not a heading\n```"
        tokens = tokenize(source)
        assert [type(t) for t in tokens] == [Heading, Chunk]
        assert tokens[1].text == "\n```\n# not a heading\n```"

    def test_fence_at_document_start(self) -> None:
        source = "```\n# not a heading\n```\n# Real"
        assert _chunk(source) == "```\n# not a heading\n```"

    def test_fence_at_document_start_can_be_disabled(self) -> None:
        config = TokenizerConfig(fence_at_document_start=False)
        source = "```\n# looks like a heading\n```"
        assert _chunk(source, config=config) == "```"
        kinds = [type(t) for t in tokenize(source, config=config)]
        assert kinds == [Chunk, Heading, Chunk]

    def test_fence_cap(self) -> None:
        """Only the capped prefix of the opener is required in the closer."""
        config = TokenizerConfig(max_fence_run=3)
        source = "x\n`````\n# in\n```\n# out"
        assert _chunk(source, config=config) == "x\n`````\n# in\n```"


class TestUnclosedFence:
    """Unclosed fences swallow the rest of the document."""

    def test_rest_of_document_is_one_chunk(self) -> None:
        source = "text\n```\n# a\n<Story of=\"x\" />\n## b"
        assert _chunk(source) == source

    def test_whole_remainder_from_chunk_start(self) -> None:
        source = "# T\nintro\n~~~\n# a"
        tokens = tokenize(source)
        assert [type(t) for t in tokens] == [Heading, Chunk]
        assert tokens[1].text == "\nintro\n~~~\n# a"

    def test_unclosed_fence_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="storymark"):
            tokenize("x\n```\nnever closed")
        assert any("Unclosed code fence" in r.getMessage() for r in caplog.records)


class TestDirectiveLeadLookup:
    """The ``<Story`` lookahead is reused across chunks."""

    def test_found_lead_is_reused(self) -> None:
        tokenizer = Tokenizer('a\n# h\nb <Story of="x" />')
        lead = tokenizer._find_directive_lead(1)
        assert lead == 8
        assert tokenizer._find_directive_lead(5) == 8
        assert tokenizer._lead_search_from == 1

    def test_failed_lookup_is_remembered(self) -> None:
        tokenizer = Tokenizer("a <Storyx\n# h\nb <Storyy")
        assert tokenizer._find_directive_lead(1) == -1
        assert tokenizer._find_directive_lead(12) == -1
        assert tokenizer._lead_search_from == 1

    def test_lead_behind_start_is_searched_again(self) -> None:
        tokenizer = Tokenizer("<Story a\n<Story\nb")
        assert tokenizer._find_directive_lead(0) == 0
        assert tokenizer._find_directive_lead(1) == 9
        assert tokenizer._lead_search_from == 1
