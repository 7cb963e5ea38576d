"""msgview: a viewer for line-based .msg chat logs.

The chat log core (parsing and render-model building) is UI-free;
the Textual viewer and the Typer CLI only call into it.
"""

__version__ = "0.1.0"

from .chatlog import (
    PARSE_ERROR,
    ChatLogParser,
    DisplayFragment,
    MessageRecord,
    ParseError,
    build_fragments,
    parse_lines,
)

__all__ = [
    "PARSE_ERROR",
    "ChatLogParser",
    "DisplayFragment",
    "MessageRecord",
    "ParseError",
    "build_fragments",
    "parse_lines",
]
