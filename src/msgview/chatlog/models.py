"""Data models for parsed chat logs and their display fragments.

Hidden design decisions:
- Records and fragments are frozen pydantic models (immutable, comparable)
- Parse failures are a payload-free sentinel, not an exception
- Fragment variants are distinguished by a ``kind`` literal
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class MessageRecord(BaseModel):
    """One parsed Time/Name/Message triplet."""

    model_config = ConfigDict(frozen=True)

    timestamp: str = Field(description="Time text wrapped in brackets, e.g. '[14:02]'")
    sender: str = Field(description="Sender name with ': ' appended")
    content: str = Field(description="Message text, verbatim")


class ParseError(BaseModel):
    """Sentinel returned when a chat log is malformed.

    Carries no line number or cause; every instance equals every other.
    """

    model_config = ConfigDict(frozen=True)


PARSE_ERROR = ParseError()


class TimestampFragment(BaseModel):
    """Timestamp text shown at the start of a message."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["timestamp"] = "timestamp"
    text: str


class SenderLabel(BaseModel):
    """Sender name, or an ellipsis when the sender repeats."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["sender"] = "sender"
    text: str


class PlainWord(BaseModel):
    """A single content word."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["word"] = "word"
    text: str
    bold: bool = True


class EmojiToken(BaseModel):
    """A content word replaced by an emoji asset."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["emoji"] = "emoji"
    code: str = Field(description="Asset identifier, e.g. 'smile_happy.gif'")


class LineBreak(BaseModel):
    """End of a message."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["newline"] = "newline"


DisplayFragment = Annotated[
    TimestampFragment | SenderLabel | PlainWord | EmojiToken | LineBreak,
    Field(discriminator="kind"),
]
