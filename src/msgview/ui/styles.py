"""CSS styles for the chat viewer.

Hides layout and styling decisions from the application logic.
The layout is a single column: chat view, optional log panel, and the
upload controls pinned to the bottom left.
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
}

/* Chat view - takes all remaining height */
#chat-view {
    height: 1fr;
    background: $surface;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus {
        border: round $primary;
    }
}

#chat-text {
    width: 100%;
    height: auto;
}

/* Log panel - hidden until toggled */
#debug-panel {
    height: 10;
    border: round $border;
    border-title-color: $text-muted;
    border-subtitle-color: $text-muted;
    background: $panel;
}

/* Upload controls */
#controls {
    height: auto;
    padding: 1 0 0 0;
    align: left bottom;
}

#upload-btn {
    min-width: 16;
}

#file-path {
    color: $text-muted;
    padding: 1 0 0 0;
    width: 100%;
}
"""
