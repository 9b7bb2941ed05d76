"""
# Span-Tokenizer: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

from typing import Iterable


def compute_longest_length(strings: Iterable[str]) -> int:
    return max((len(string) for string in strings), default=0)


def slide_window(window: str, character: str, window_size: int) -> str:
    """
    Append a character to a window, dropping the oldest character if the window would exceed `window_size`.

    A `window_size` of zero always yields the empty window.
    """
    window = window + character
    if len(window) > window_size:
        window = window[1:]

    return window


def substring(string: str, start: int, stop: int) -> str:
    """
    Extract the characters between two indices, in whichever order the indices are given.

    Each index is clamped to the range [0, len(string)] before extraction,
    so a negative index counts as 0 rather than from the end.
    """
    start = min(max(start, 0), len(string))
    stop = min(max(stop, 0), len(string))
    if start > stop:
        start, stop = stop, start

    return string[start:stop]
