"""Formatting helpers for table-like page output."""


def get_column_string(text: str, width: int) -> str:
    """Pad text to width, or cut it short with a trailing ellipsis."""
    if width < 0:
        raise ValueError("width must not be negative")
    if len(text) <= width:
        return text.ljust(width)
    if width <= 3:
        return "." * width
    return text[: width - 3] + "..."