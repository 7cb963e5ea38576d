"""Modal screens for the chat viewer.

This module hides the design decisions about:
- How a chat log file is picked (directory tree plus a path input)
- How error alerts are presented and dismissed

To change how dialogs look, modify only this file.
"""

from pathlib import Path

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, DirectoryTree, Input, Static

from .config import ALERT_TITLE


class AlertScreen(ModalScreen[None]):
    """Modal error alert with a single OK button."""

    CSS = """
    AlertScreen {
        align: center middle;
        background: $background 70%;
    }

    #alert-dialog {
        width: 60;
        height: auto;
        border: tall $error;
        background: $surface;
        padding: 1 2;
    }

    #alert-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $error;
        padding: 0 0 1 0;
    }

    #alert-message {
        width: 100%;
        text-align: center;
        padding: 1 2;
        background: $panel;
    }

    #alert-buttons {
        width: 100%;
        height: 3;
        align: center middle;
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "close", "Close", show=False),
        Binding("enter", "close", "OK", show=False),
    ]

    def __init__(self, message: str, title: str = ALERT_TITLE) -> None:
        super().__init__()
        self._message = message
        self._title = title

    @property
    def message(self) -> str:
        """Alert text."""
        return self._message

    def compose(self) -> ComposeResult:
        with Vertical(id="alert-dialog"):
            yield Static(self._title, id="alert-title")
            yield Static(Text(self._message), id="alert-message")
            with Horizontal(id="alert-buttons"):
                yield Button("OK", id="alert-ok", variant="error")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "alert-ok":
            self.dismiss(None)

    def action_close(self) -> None:
        """Keyboard shortcut to dismiss the alert."""
        self.dismiss(None)


class FileOpenScreen(ModalScreen[Path | None]):
    """File picker returning the chosen path, or None when cancelled.

    Selecting a file in the tree fills the path input; Open or Enter
    confirms. Relative paths are resolved against the initial folder.
    """

    CSS = """
    FileOpenScreen {
        align: center middle;
        background: $background 70%;
    }

    #open-dialog {
        width: 80%;
        height: 80%;
        border: tall $primary;
        background: $surface;
        padding: 1 2;
    }

    #open-title {
        width: 100%;
        text-style: bold;
        color: $primary;
        padding: 0 0 1 0;
    }

    #file-tree {
        height: 1fr;
        border: round $border;
    }

    #file-input {
        margin-top: 1;
    }

    #open-buttons {
        width: 100%;
        height: 3;
        align: right middle;
        margin-top: 1;
    }

    #open-buttons Button {
        margin: 0 1;
    }
    """

    AUTO_FOCUS = "#file-input"

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    def __init__(self, initial_dir: Path) -> None:
        super().__init__()
        self._initial_dir = initial_dir

    @property
    def initial_dir(self) -> Path:
        """Folder the picker opened in."""
        return self._initial_dir

    def compose(self) -> ComposeResult:
        with Vertical(id="open-dialog"):
            yield Static(Text(f"Open chat log - {self._initial_dir}"), id="open-title")
            yield DirectoryTree(self._initial_dir, id="file-tree")
            yield Input(placeholder="Path to a .msg file", id="file-input")
            with Horizontal(id="open-buttons"):
                yield Button("Cancel", id="open-cancel")
                yield Button("Open", id="open-confirm", variant="primary")

    def on_directory_tree_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        """Copy the selected tree entry into the path input."""
        event.stop()
        file_input = self.query_one("#file-input", Input)
        file_input.value = str(event.path)
        file_input.focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._confirm()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "open-confirm":
            self._confirm()
        elif event.button.id == "open-cancel":
            self.dismiss(None)

    def action_cancel(self) -> None:
        """Close the picker without choosing a file."""
        self.dismiss(None)

    def _confirm(self) -> None:
        value = self.query_one("#file-input", Input).value.strip()
        if not value:
            self.app.notify("Enter or select a file", severity="warning", timeout=2)
            return
        path = Path(value).expanduser()
        if not path.is_absolute():
            path = self._initial_dir / path
        self.dismiss(path)
