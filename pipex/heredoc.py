"""Line-by-line reading of input streams and here-document collection."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines from ``stream`` one at a time, each with its newline.

    The final line lacks a newline if the stream does not end with one.
    """
    while True:
        line = stream.readline()
        if not line:
            return
        yield line
    

def collect_here_doc(stream: TextIO, limiter: str) -> str:
    """Read lines until one equal to ``limiter`` followed by a newline.

    Each line read is kept followed by an extra newline, and the limiter line
    itself is dropped. Reading stops there, leaving the rest of the stream.
    """
    terminator = limiter + "\n"
    parts = []
    for line in read_lines(stream):
        if line == terminator:
            break
        parts.append(line + "\n")
    return "".join(parts)