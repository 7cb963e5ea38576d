from .emoji import EMOJI_MAP, merge_emoji_map
from .errors import ChatLogError, CorruptChatLogError, InvalidFormatError
from .models import (
    PARSE_ERROR,
    DisplayFragment,
    EmojiToken,
    LineBreak,
    MessageRecord,
    ParseError,
    PlainWord,
    SenderLabel,
    TimestampFragment,
)
from .parser import ChatLogParser, is_chat_file, parse_lines, read_chat_file, split_lines
from .render import build_fragments, content_fragments, format_sender

__all__ = [
    # Models
    "MessageRecord",
    "ParseError",
    "PARSE_ERROR",
    "DisplayFragment",
    "TimestampFragment",
    "SenderLabel",
    "PlainWord",
    "EmojiToken",
    "LineBreak",
    # Errors
    "ChatLogError",
    "CorruptChatLogError",
    "InvalidFormatError",
    # Parser
    "ChatLogParser",
    "is_chat_file",
    "parse_lines",
    "read_chat_file",
    "split_lines",
    # Render model
    "EMOJI_MAP",
    "merge_emoji_map",
    "build_fragments",
    "content_fragments",
    "format_sender",
]
