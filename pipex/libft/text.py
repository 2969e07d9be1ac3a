"""String helpers: splitting, searching, bounded copies and comparisons."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _char(c: int | str) -> str:
    """Normalise ``c``, given as a code or a one-char string, to a string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c)


def _check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    return [word for word in text.split(_char(sep)) if word]


def find_char(text: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    target = _char(c)
    if target == "\0" and target not in text:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def find_last_char(text: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    target = _char(c)
    if target == "\0" and target not in text:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def join(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copy and the full length of ``src``, so that a result length
    of ``size`` or more tells the caller the copy was truncated.
    """
    _check_non_negative(size=size)
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting string and the length the string would have had
    without truncation. When ``size`` does not exceed the length of ``dst``
    nothing is appended and the reported length is ``size + len(src)``.
    """
    _check_non_negative(size=size)
    dst_len = min(len(dst), size)
    if dst_len >= size:
        return dst, dst_len + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)


def map_chars(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def for_each_char(
    chars: MutableSequence[str], func: Callable[[int, str], str]
) -> None:
    """Replace each element of ``chars`` in place with ``func(index, char)``."""
    for index, char in enumerate(chars):
        chars[index] = func(index, char)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first differing character codes, with the
    end of a string counting as code 0, or 0 if the prefixes are equal.
    """
    _check_non_negative(n=n)
    for index in range(n):
        left = ord(first[index]) if index < len(first) else 0
        right = ord(second[index]) if index < len(second) else 0
        if left != right:
            return left - right
        if left == 0:
            return 0
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of the first ``needle`` lying wholly in the first ``length``
    characters of ``haystack``, or None. An empty needle is found at 0."""
    _check_non_negative(length=length)
    if not needle:
        return 0
    last_start = min(len(haystack), length - len(needle) + 1)
    for pos in range(max(last_start, 0)):
        if haystack.startswith(needle, pos):
            return pos
    return None


def trim(text: str, charset: str) -> str:
    """Strip characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``.

    A start past the end of the string gives an empty string.
    """
    _check_non_negative(start=start, length=length)
    if start > len(text):
        return ""
    return text[start : start + length]