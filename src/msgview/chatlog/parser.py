"""Parser for the line-based .msg chat log format.

A log is a sequence of record triplets with no separators:

    Time:<text>
    Name:<text>
    Message:<text>

Hidden design decisions:
- The whole file is read before parsing (no streaming)
- Line splitting mirrors a line reader (\\n, \\r\\n and \\r terminators)
- Every structural violation collapses into the PARSE_ERROR sentinel
"""

from collections.abc import Sequence
from pathlib import Path

from .errors import InvalidFormatError
from .models import PARSE_ERROR, MessageRecord, ParseError

TIME_PREFIX = "Time:"
NAME_PREFIX = "Name:"
MESSAGE_PREFIX = "Message:"

CHAT_FILE_EXTENSION = "msg"


def split_lines(text: str) -> list[str]:
    """Split text into lines the way a buffered line reader would.

    A single terminating newline does not produce a trailing empty line,
    but a blank line at the end of the text does.

    Args:
        text: Full file contents

    Returns:
        List of lines without terminators
    """
    if not text:
        return []
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = normalized.split("\n")
    if normalized.endswith("\n"):
        lines.pop()
    return lines


def parse_lines(lines: Sequence[str]) -> list[MessageRecord] | ParseError:
    """Parse chat log lines into message records.

    Args:
        lines: File contents as a sequence of lines

    Returns:
        Records in file order, or PARSE_ERROR if any triplet is malformed,
        incomplete, or followed by stray lines
    """
    if len(lines) % 3 != 0:
        return PARSE_ERROR

    records = []
    for i in range(0, len(lines), 3):
        time_line, name_line, message_line = lines[i:i + 3]
        if not (
            time_line.startswith(TIME_PREFIX)
            and name_line.startswith(NAME_PREFIX)
            and message_line.startswith(MESSAGE_PREFIX)
        ):
            return PARSE_ERROR

        records.append(MessageRecord(
            timestamp="[" + time_line[len(TIME_PREFIX):] + "]",
            sender=name_line[len(NAME_PREFIX):] + ": ",
            content=message_line[len(MESSAGE_PREFIX):],
        ))

    return records


def is_chat_file(path: str | Path) -> bool:
    """Check that a file name ends with the exact extension 'msg'.

    A leading dot (hidden file) or a trailing dot does not count as an
    extension separator.
    """
    name = Path(path).name
    index = name.rfind(".")
    if 0 < index < len(name) - 1:
        return name[index + 1:] == CHAT_FILE_EXTENSION
    return False


def read_chat_file(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """Read a whole chat log file into lines.

    Raises:
        FileNotFoundError: If the file doesn't exist
        UnicodeDecodeError: If the file is not valid in the given encoding
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    return split_lines(file_path.read_text(encoding=encoding))


class ChatLogParser:
    """Parser for .msg chat log files.

    Bundles the extension check, file reading and triplet parsing
    behind one object configured with a text encoding.
    """

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding
        self._supported_extensions = {"." + CHAT_FILE_EXTENSION}

    @property
    def encoding(self) -> str:
        """Text encoding used to read files."""
        return self._encoding

    def can_parse(self, file_path: str | Path) -> bool:
        """Check if this parser can handle the file.

        Args:
            file_path: Path to the file

        Returns:
            True if the file has the .msg extension
        """
        return is_chat_file(file_path)

    def get_file_type(self) -> str:
        """Get the file type this parser handles."""
        return CHAT_FILE_EXTENSION

    def get_supported_extensions(self) -> set[str]:
        """Get file extensions supported by this parser."""
        return self._supported_extensions

    def parse_file(self, file_path: str | Path) -> list[MessageRecord] | ParseError:
        """Read and parse a chat log file.

        Args:
            file_path: Path to the .msg file

        Returns:
            Parsed records, or PARSE_ERROR if the content is malformed
            or cannot be decoded

        Raises:
            FileNotFoundError: If file doesn't exist
            InvalidFormatError: If the file is not a .msg file
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        if not self.can_parse(path):
            raise InvalidFormatError()

        try:
            lines = read_chat_file(path, encoding=self._encoding)
        except UnicodeDecodeError:
            return PARSE_ERROR

        return parse_lines(lines)
