"""Cleanup of the raw model output into a single question."""

# Literal ellipsis forms removed from the text. The last one is the UTF-8
# encoding of U+2026 read back as Windows-1252.
ELLIPSES = ("...", "â€¦")

STRIPPED_ENDINGS = (".", ",", "!")


def normalize_question(text: str) -> str:
    """
    Turn model output into a clean question ending in "?".

    Steps, in order:
    1. Trim whitespace and newlines.
    2. Remove ellipsis sequences.
    3. Trim again.
    4. Drop one trailing ".", "," or "!".
    5. Append "?" if missing.

    Never fails; empty input becomes "?".
    """
    cleaned = text.strip()
    cleaned = _remove_ellipses(cleaned)
    cleaned = cleaned.strip()

    if cleaned.endswith(STRIPPED_ENDINGS):
        cleaned = cleaned[:-1]

    if not cleaned.endswith("?"):
        cleaned += "?"

    return cleaned


def _remove_ellipses(text: str) -> str:
    # Removing one form can splice together another ("..â€¦." -> "..."),
    # so repeat until nothing changes.
    previous = None
    while text != previous:
        previous = text
        for ellipsis in ELLIPSES:
            text = text.replace(ellipsis, "")
    return text
