"""UI configuration constants.

Centralizes user-facing text, styles and glyphs for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)


# Startup and status text
WELCOME_TEXT = "Upload a .msg file using the Upload button and chat history will display here."
NO_FILE_TEXT = "No file uploaded"
UPLOAD_BUTTON_LABEL = "Upload file"
ALERT_TITLE = "Error"

# Fragment styles
TIMESTAMP_STYLE = ""
SENDER_STYLE = "blue"
WORD_STYLE = "bold"

# Emoji asset id -> glyph shown in the terminal
EMOJI_GLYPHS = {
    "smile_happy.gif": "\U0001F642",  # slightly smiling face
    "smile_sad.gif": "\U0001F641",    # slightly frowning face
}

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
