"""Exceptions raised by the chat log core."""

INVALID_FORMAT_MESSAGE = "File selected is an invalid format. Please select a .msg file."
CORRUPT_FILE_MESSAGE = "The uploaded chat history file is corrupt or broken."


class ChatLogError(Exception):
    """Base class for chat log errors."""

    default_message = "Chat log error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidFormatError(ChatLogError):
    """Selected file does not have the .msg extension."""

    default_message = INVALID_FORMAT_MESSAGE


class CorruptChatLogError(ChatLogError):
    """Chat log content does not follow the triplet grammar."""

    default_message = CORRUPT_FILE_MESSAGE
