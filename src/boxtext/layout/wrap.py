"""Line wrapping."""

import re
from typing import Callable

from boxtext.geometry import Rectangle
from boxtext.types import TextWrapping

# Explicit line breaks: \n, \r\n and lone \r
LINE_BREAK = re.compile(r"\n|\r\n?")


def wrap_text(
    text: str,
    mode: TextWrapping,
    box_width: float,
    measure: Callable[[str], Rectangle],
) -> list[str]:
    """
    Split text into the lines that will be drawn.

    In NoWrap mode the text is returned as a single line, embedded breaks
    included. In WrapWithOverflow mode the text is first split on explicit
    line breaks, then each segment is wrapped greedily at single spaces: a
    word moves to the next line when appending it would make the line at
    least as wide as the box. A word wider than the box is never split.

    Args:
        text: Text to wrap.
        mode: Wrapping mode.
        box_width: Available width in pixels.
        measure: Returns the ink box of a string.

    Returns:
        Lines in drawing order. Empty segments yield empty lines.
    """
    if mode == TextWrapping.NO_WRAP:
        return [text]

    lines: list[str] = []
    for segment in LINE_BREAK.split(text):
        words = segment.split(" ")
        current = words[0]
        for word in words[1:]:
            candidate = f"{current} {word}"
            if measure(candidate).width >= box_width:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
    return lines
