"""Terminal UI module for msgview.

Provides a Textual-based viewer for .msg chat logs.

Module structure (each module hides a design decision):
- config.py: User-facing text, styles and emoji glyphs
- formatting.py: Fragment to Rich text rendering
- widgets.py: Chat view and log panel
- screens.py: Modal dialogs (file picker, alerts)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette
- app.py: Application orchestration (upload flow)
"""

from .app import ChatViewerApp, choose_initial_dir, run_chat_viewer
from .config import LogLevel
from .formatting import emoji_glyph, render_fragments
from .screens import AlertScreen, FileOpenScreen
from .widgets import ChatLogView, DebugPanel

__all__ = [
    "AlertScreen",
    "ChatLogView",
    "ChatViewerApp",
    "DebugPanel",
    "FileOpenScreen",
    "LogLevel",
    "choose_initial_dir",
    "emoji_glyph",
    "render_fragments",
    "run_chat_viewer",
]
