import logging
import textwrap
from typing import List

logger = logging.getLogger(__name__)

LINE_BREAK = "<br>"


def wrap_label(text: str, max_length: int = 25, line_break: str = LINE_BREAK) -> str:
    """
    Inserts soft line breaks into a label so that no line exceeds max_length.

    Breaks happen only at spaces. A single word longer than max_length is
    kept whole on its own line.

    Args:
        text: The label to wrap.
        max_length: The maximum number of characters per line.
        line_break: The marker inserted between lines.

    Returns:
        The wrapped label.
    """
    if len(text) <= max_length:
        return text

    lines = textwrap.wrap(
        text, width=max_length, break_long_words=False, break_on_hyphens=False
    )
    return line_break.join(lines)


def normalize_color(color: str) -> str:
    color = color.strip().upper()
    if color and not color.startswith("#") and all(
        c in "0123456789ABCDEF" for c in color
    ):
        color = "#" + color
    return color


def lorem_rows(text: str, num_rows: int, chars_per_row: int) -> List[str]:
    rows = []
    for _ in range(num_rows):
        row = text
        while len(row) < chars_per_row:
            row += text
        rows.append(row[:chars_per_row])
    return rows
