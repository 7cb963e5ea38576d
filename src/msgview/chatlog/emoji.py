"""Emoji token table.

Maps a whitespace-delimited token to the identifier of the image asset
that replaces it. Extend the table here or pass a merged copy to
``build_fragments``; parsing is unaffected.
"""

from collections.abc import Mapping

EMOJI_MAP: Mapping[str, str] = {
    ":)": "smile_happy.gif",
    ":(": "smile_sad.gif",
}


def merge_emoji_map(extra: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return the default emoji table updated with extra entries."""
    merged = dict(EMOJI_MAP)
    if extra:
        merged.update(extra)
    return merged
