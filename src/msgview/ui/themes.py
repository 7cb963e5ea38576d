"""Theme definitions for the chat viewer.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, buttons)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Light paper theme: dark text on a pale background so blue sender
# names and bold words stay readable
CHAT_PAPER = Theme(
    name="chat-paper",
    primary="#1e66f5",      # Blue - sender names, focus
    secondary="#8839ef",    # Mauve - secondary accent
    accent="#df8e1d",       # Yellow - highlights
    foreground="#4c4f69",   # Text
    background="#eff1f5",   # Base
    success="#40a02b",
    warning="#fe640b",
    error="#d20f39",
    surface="#e6e9ef",      # Mantle
    panel="#dce0e8",        # Crust
    dark=False,
    variables={
        "border": "#9ca0b0",
        "border-blurred": "#bcc0cc",

        "scrollbar": "#bcc0cc",
        "scrollbar-hover": "#9ca0b0",
        "scrollbar-active": "#1e66f5",
        "scrollbar-background": "#e6e9ef",

        "footer-foreground": "#5c5f77",
        "footer-background": "#dce0e8",
        "footer-key-foreground": "#1e66f5",

        "text-muted": "#8c8fa1",

        "button-foreground": "#4c4f69",
        "button-focus-text-style": "bold",
    },
)
