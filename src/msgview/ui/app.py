"""Main Textual chat viewer application.

Orchestrates the upload flow: pick a file, check its extension, parse
it, build fragments and render them. The only state kept between
uploads is the folder of the last valid selection.
"""

from collections.abc import Mapping
from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Button, Footer, Header, Label

from ..chatlog import (
    ChatLogParser,
    CorruptChatLogError,
    ParseError,
    build_fragments,
    is_chat_file,
)
from ..chatlog.errors import INVALID_FORMAT_MESSAGE
from .config import NO_FILE_TEXT, UPLOAD_BUTTON_LABEL, LogLevel
from .screens import AlertScreen, FileOpenScreen
from .styles import APP_CSS
from .themes import CHAT_PAPER
from .widgets import ChatLogView, DebugPanel


def choose_initial_dir(previous: Path | None, start_dir: Path | None = None) -> Path:
    """Pick the folder the file picker opens in.

    The previous folder wins while it still exists as a directory, then
    the configured start folder, then the working directory.
    """
    for candidate in (previous, start_dir):
        if candidate is not None and candidate.is_dir():
            return candidate
    return Path.cwd()


class ChatViewerApp(App):
    """Textual viewer for .msg chat logs."""

    CSS = APP_CSS
    TITLE = "Chat Viewer"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+o", "upload", "Upload"),
        Binding("ctrl+k", "clear_chat", "Clear"),
        Binding("ctrl+d", "toggle_debug", "Log"),
    ]

    def __init__(
        self,
        initial_file: Path | None = None,
        start_dir: Path | None = None,
        log_level: str | None = None,
        encoding: str = "utf-8",
        emoji_map: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__()
        self._initial_file = initial_file
        self._start_dir = start_dir
        self._log_level = log_level
        self._parser = ChatLogParser(encoding=encoding)
        self._emoji_map = emoji_map
        self._previous_folder: Path | None = None
        self._current_file: Path | None = None

    @property
    def previous_folder(self) -> Path | None:
        """Folder of the last valid selection, if any."""
        return self._previous_folder

    @property
    def current_file(self) -> Path | None:
        """Last file accepted by the extension check."""
        return self._current_file

    def compose(self) -> ComposeResult:
        yield Header()
        yield ChatLogView(id="chat-view")
        yield DebugPanel(id="debug-panel")
        with Vertical(id="controls"):
            yield Button(UPLOAD_BUTTON_LABEL, id="upload-btn", variant="primary")
            yield Label(NO_FILE_TEXT, id="file-path")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(CHAT_PAPER)
        self.theme = "chat-paper"

        if self._log_level is not None:
            log_panel = self.log_panel
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        if self._initial_file is not None:
            self.open_chat_file(self._initial_file)

    @property
    def log_panel(self) -> DebugPanel:
        """The trace log panel."""
        return self.query_one("#debug-panel", DebugPanel)

    def initial_dir(self) -> Path:
        """Folder the next file picker should open in."""
        return choose_initial_dir(self._previous_folder, self._start_dir)

    def show_alert(self, message: str) -> None:
        """Show a modal error alert."""
        self.push_screen(AlertScreen(message))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "upload-btn":
            self.action_upload()

    def action_upload(self) -> None:
        """Open the file picker."""
        initial_dir = self.initial_dir()
        self.log_panel.debug("TUI", f"Opening file picker in {initial_dir}")
        self.push_screen(FileOpenScreen(initial_dir), self._on_file_chosen)

    def _on_file_chosen(self, path: Path | None) -> None:
        if path is None:
            self.log_panel.debug("TUI", "File picker cancelled")
            return
        self.open_chat_file(path)

    def open_chat_file(self, path: Path) -> bool:
        """Load a chat log into the view.

        Args:
            path: File chosen by the user

        Returns:
            True if the log was parsed and rendered
        """
        if not is_chat_file(path):
            self.log_panel.warning("TUI", f"Rejected {path.name}: not a .msg file")
            self.show_alert(INVALID_FORMAT_MESSAGE)
            return False

        try:
            records = self._parser.parse_file(path)
        except OSError as e:
            self.log_panel.error("Parser", f"Could not read {path}: {e}")
            self.show_alert(f"Could not read file: {e}")
            return False

        self._previous_folder = path.parent
        self._current_file = path
        self.query_one("#file-path", Label).update(Text(str(path)))

        view = self.query_one("#chat-view", ChatLogView)
        view.clear_chat()

        if isinstance(records, ParseError):
            self.log_panel.error("Parser", f"{path.name} is malformed")
        else:
            self.log_panel.info("Parser", f"Parsed {len(records)} messages from {path.name}")

        try:
            fragments = build_fragments(records, self._emoji_map)
        except CorruptChatLogError as e:
            self.show_alert(str(e))
            return False

        view.show_fragments(fragments, message_count=len(records))
        self.log_panel.debug("Render", f"Rendered {len(fragments)} fragments")
        return True

    def action_clear_chat(self) -> None:
        """Clear the chat view."""
        self.query_one("#chat-view", ChatLogView).clear_chat()
        self.notify("Chat cleared", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        is_visible = self.log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


def run_chat_viewer(
    initial_file: Path | None = None,
    start_dir: Path | None = None,
    log_level: str | None = None,
    encoding: str = "utf-8",
) -> None:
    """Run the chat viewer.

    Args:
        initial_file: Chat log to open on startup
        start_dir: Folder for the first file picker
        log_level: Log level for panel (debug/info/warning/error), None to hide
        encoding: Text encoding of .msg files
    """
    app = ChatViewerApp(
        initial_file=initial_file,
        start_dir=start_dir,
        log_level=log_level,
        encoding=encoding,
    )
    try:
        app.run()
    except KeyboardInterrupt:
        pass
