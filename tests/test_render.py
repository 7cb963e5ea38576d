"""Unit and property-based tests for the render-model builder."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from msgview.chatlog import (
    EMOJI_MAP,
    PARSE_ERROR,
    CorruptChatLogError,
    EmojiToken,
    LineBreak,
    MessageRecord,
    PlainWord,
    SenderLabel,
    TimestampFragment,
    build_fragments,
    content_fragments,
    format_sender,
    merge_emoji_map,
)


def record(sender: str, content: str = "hello", timestamp: str = "[1]") -> MessageRecord:
    return MessageRecord(timestamp=timestamp, sender=sender, content=content)


def sender_labels(fragments):
    return [f.text for f in fragments if isinstance(f, SenderLabel)]


class TestFormatSender:
    """Tests for format_sender."""

    def test_same_sender_collapses(self):
        assert format_sender("Alice: ", "Alice: ") == "..."

    def test_different_sender_is_shown(self):
        assert format_sender("Alice: ", "Bob: ") == "Bob: "


class TestContentFragments:
    """Tests for word and emoji splitting."""

    def test_emoji_substitution(self):
        fragments = content_fragments("hi :) there", {":)": "smile_happy.gif"})

        assert fragments == [
            PlainWord(text="hi", bold=True),
            EmojiToken(code="smile_happy.gif"),
            PlainWord(text="there", bold=True),
        ]

    def test_default_table_has_sad_face(self):
        assert content_fragments(":(") == [EmojiToken(code="smile_sad.gif")]

    def test_embedded_token_is_not_matched(self):
        """Test that emoji inside a word stay plain text."""
        assert content_fragments("ok:)") == [PlainWord(text="ok:)")]

    def test_whitespace_runs_are_collapsed(self):
        fragments = content_fragments("  a \t b  ")

        assert fragments == [PlainWord(text="a"), PlainWord(text="b")]

    def test_empty_content(self):
        assert content_fragments("") == []

    def test_edge_whitespace_yields_no_empty_words(self):
        assert content_fragments(" hi ") == [PlainWord(text="hi")]
        assert content_fragments(" \t ") == []

    def test_all_words_bold(self):
        assert all(f.bold for f in content_fragments("one two three"))


class TestBuildFragments:
    """Tests for build_fragments."""

    def test_fragment_order(self):
        """Test timestamp, sender, words, line break per message."""
        fragments = build_fragments([record("Alice: ", "hi :)", "[14:02]")])

        assert fragments == [
            TimestampFragment(text="[14:02]"),
            SenderLabel(text="Alice: "),
            PlainWord(text="hi"),
            EmojiToken(code="smile_happy.gif"),
            LineBreak(),
        ]

    def test_sender_run_compares_to_previous_record(self):
        """Test that each repeat collapses against its immediate predecessor."""
        records = [record("A: "), record("A: "), record("A: "), record("B: ")]

        assert sender_labels(build_fragments(records)) == ["A: ", "...", "...", "B: "]

    def test_sender_returns_after_interruption(self):
        records = [record("A: "), record("B: "), record("A: "), record("A: ")]

        assert sender_labels(build_fragments(records)) == ["A: ", "B: ", "A: ", "..."]

    def test_empty_records(self):
        assert build_fragments([]) == []

    def test_parse_error_raises_corrupt(self):
        with pytest.raises(CorruptChatLogError, match="corrupt or broken"):
            build_fragments(PARSE_ERROR)

    def test_custom_emoji_map(self):
        table = merge_emoji_map({":D": "grin.gif"})
        fragments = build_fragments([record("A: ", ":D :)")], emoji_map=table)

        assert EmojiToken(code="grin.gif") in fragments
        assert EmojiToken(code="smile_happy.gif") in fragments

    def test_empty_emoji_map_disables_substitution(self):
        fragments = build_fragments([record("A: ", ":)")], emoji_map={})

        assert PlainWord(text=":)") in fragments

    @given(st.lists(st.sampled_from(["A: ", "B: ", "C: "]), max_size=20))
    def test_one_line_break_and_label_per_record(self, senders):
        """Property test: every record yields one timestamp, label and line break."""
        fragments = build_fragments([record(s) for s in senders])

        assert sum(isinstance(f, LineBreak) for f in fragments) == len(senders)
        labels = sender_labels(fragments)
        assert len(labels) == len(senders)
        for i, label in enumerate(labels):
            if i > 0 and senders[i] == senders[i - 1]:
                assert label == "..."
            else:
                assert label == senders[i]


class TestEmojiMap:
    """Tests for the emoji table."""

    def test_default_entries(self):
        assert EMOJI_MAP == {":)": "smile_happy.gif", ":(": "smile_sad.gif"}

    def test_merge_does_not_mutate_default(self):
        merged = merge_emoji_map({":)": "other.gif"})

        assert merged[":)"] == "other.gif"
        assert EMOJI_MAP[":)"] == "smile_happy.gif"
