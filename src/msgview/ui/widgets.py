"""Custom Textual widgets for the chat viewer.

Hides widget implementation details:
- Chat rendering and scrolling
- Log rendering and level filtering
"""

from datetime import datetime

from rich.text import Text
from textual.containers import VerticalScroll
from textual.widgets import RichLog, Static

from ..chatlog import DisplayFragment
from .config import LOG_TIMESTAMP_FORMAT, WELCOME_TEXT, LogLevel
from .formatting import render_fragments


class ChatLogView(VerticalScroll):
    """Scrollable view of a rendered chat log.

    Holds a single Static whose content is replaced on every upload.
    """

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "No messages"
    ALLOW_SELECT = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._plain_text = WELCOME_TEXT
        self._message_count = 0

    def compose(self):
        yield Static(WELCOME_TEXT, id="chat-text")

    @property
    def message_count(self) -> int:
        """Number of messages currently shown."""
        return self._message_count

    def show_fragments(self, fragments: list[DisplayFragment], message_count: int) -> None:
        """Replace the view with a rendered fragment list."""
        text = render_fragments(fragments)
        self._plain_text = text.plain
        self._message_count = message_count
        self.query_one("#chat-text", Static).update(text)
        self.border_subtitle = f"{message_count} messages"
        self.scroll_home(animate=False)

    def clear_chat(self) -> None:
        """Remove all rendered messages."""
        self._plain_text = ""
        self._message_count = 0
        self.query_one("#chat-text", Static).update("")
        self.border_subtitle = "No messages"

    def get_plain_text(self) -> str:
        """Get plain text content of the view."""
        return self._plain_text


class DebugPanel(RichLog):
    """Log panel for tracing uploads and parsing with level filtering.

    Shows timestamped entries from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        """Set log level threshold."""
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        """Update subtitle to show current log level."""
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def add_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> bool:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Parser, Render)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)

        Returns:
            True if the entry was written
        """
        if level < self._log_level:
            return False

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)

        level_colors = {
            LogLevel.DEBUG: "dim",
            LogLevel.INFO: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
        }
        component_colors = {
            "TUI": "cyan",
            "Parser": "green",
            "Render": "magenta",
        }
        level_color = level_colors.get(level, "white")
        comp_color = component_colors.get(component, "white")

        line = Text()
        line.append(timestamp, style="dim")
        line.append(" ")
        line.append(f"{LogLevel.name(level):<5}", style=level_color)
        line.append(" ")
        line.append(f"[{component}]", style=comp_color)
        line.append(f" {message}")
        self.write(line)
        return True

    def debug(self, component: str, message: str) -> None:
        """Log a DEBUG level message."""
        self.add_entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        """Log an INFO level message."""
        self.add_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        """Log a WARNING level message."""
        self.add_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        """Log an ERROR level message."""
        self.add_entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        """Show the log panel."""
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        """Hide the log panel."""
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
