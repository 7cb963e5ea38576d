"""Fragment rendering for the TUI.

Hides how display fragments become styled Rich text.
"""

from collections.abc import Iterable, Mapping

from rich.text import Text

from ..chatlog import (
    DisplayFragment,
    EmojiToken,
    LineBreak,
    PlainWord,
    SenderLabel,
    TimestampFragment,
)
from .config import EMOJI_GLYPHS, SENDER_STYLE, TIMESTAMP_STYLE, WORD_STYLE


def emoji_glyph(code: str, glyphs: Mapping[str, str] = EMOJI_GLYPHS) -> str:
    """Get the terminal glyph for an emoji asset id.

    Unknown asset ids are shown as ``[asset-id]`` so nothing is dropped.
    """
    return glyphs.get(code, f"[{code}]")


def render_fragments(
    fragments: Iterable[DisplayFragment],
    glyphs: Mapping[str, str] | None = None,
) -> Text:
    """Render display fragments into a single Rich Text.

    Words and emoji are each followed by a space, matching how the
    content was split.
    """
    table = EMOJI_GLYPHS if glyphs is None else glyphs
    text = Text(overflow="fold")

    for fragment in fragments:
        if isinstance(fragment, TimestampFragment):
            text.append(fragment.text, style=TIMESTAMP_STYLE)
        elif isinstance(fragment, SenderLabel):
            text.append(fragment.text, style=SENDER_STYLE)
        elif isinstance(fragment, PlainWord):
            text.append(fragment.text + " ", style=WORD_STYLE if fragment.bold else "")
        elif isinstance(fragment, EmojiToken):
            text.append(emoji_glyph(fragment.code, table) + " ")
        elif isinstance(fragment, LineBreak):
            text.append("\n")

    return text
