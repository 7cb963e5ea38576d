"""Render-model builder.

Turns parsed records into an ordered list of display fragments. The UI
renders the fragments verbatim, so the sender-collapse and emoji rules
live here rather than in any widget.
"""

from collections.abc import Mapping, Sequence

from .emoji import EMOJI_MAP
from .errors import CorruptChatLogError
from .models import (
    DisplayFragment,
    EmojiToken,
    LineBreak,
    MessageRecord,
    ParseError,
    PlainWord,
    SenderLabel,
    TimestampFragment,
)

REPEATED_SENDER_LABEL = "..."


def format_sender(previous: str, current: str) -> str:
    """Return an ellipsis if the sender didn't change, else the sender."""
    if previous == current:
        return REPEATED_SENDER_LABEL
    return current


def content_fragments(
    content: str,
    emoji_map: Mapping[str, str] = EMOJI_MAP,
) -> list[DisplayFragment]:
    """Split message content into word and emoji fragments.

    Only whole whitespace-delimited tokens are matched against the emoji
    table; every other word is bold. Leading and trailing whitespace is
    ignored, so blank content yields no fragments.
    """
    fragments: list[DisplayFragment] = []
    for word in content.split():
        if word in emoji_map:
            fragments.append(EmojiToken(code=emoji_map[word]))
        else:
            fragments.append(PlainWord(text=word, bold=True))
    return fragments


def build_fragments(
    records: Sequence[MessageRecord] | ParseError,
    emoji_map: Mapping[str, str] | None = None,
) -> list[DisplayFragment]:
    """Build display fragments for a parsed chat log.

    Each record's sender is compared with the immediately preceding
    record's sender, so a run of three or more messages from the same
    sender shows the name once followed by ellipses.

    Args:
        records: Parsed records, or the PARSE_ERROR sentinel
        emoji_map: Token to asset table (defaults to EMOJI_MAP)

    Returns:
        Fragments in display order

    Raises:
        CorruptChatLogError: If given the parse error sentinel
    """
    if isinstance(records, ParseError):
        raise CorruptChatLogError()

    table = EMOJI_MAP if emoji_map is None else emoji_map
    fragments: list[DisplayFragment] = []

    for i, record in enumerate(records):
        fragments.append(TimestampFragment(text=record.timestamp))

        if i == 0:
            label = record.sender
        else:
            label = format_sender(records[i - 1].sender, record.sender)
        fragments.append(SenderLabel(text=label))

        fragments.extend(content_fragments(record.content, table))
        fragments.append(LineBreak())

    return fragments
