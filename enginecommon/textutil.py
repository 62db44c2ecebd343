"""Small text helpers used by the model and script loaders."""

from __future__ import annotations

# The characters C's isspace() accepts in the default locale.
_SPACE = frozenset(" \t\n\v\f\r")


def remove_line_comments(line: str, marker: str) -> str:
    """Return ``line`` cut at the first occurrence of ``marker``."""
    position = line.find(marker)
    if position < 0:
        return line
    return line[:position]


def remove_whitespace(line: str, config: str) -> str:
    """Remove whitespace from ``line`` as selected by the letters in ``config``.

    ``l`` strips leading whitespace, ``t`` trailing whitespace and ``m``
    whitespace in the middle of the line. ``e`` together with ``m`` keeps the
    first whitespace character of the first run. The combination ``"melt"``
    is the one the loaders use.
    """
    leading = "l" in config
    middle = "m" in config
    trailing = "t" in config
    extra = "e" in config

    chars = list(line)

    lead = 0
    for ch in chars:
        if ch not in _SPACE:
            break
        lead += 1

    if leading:
        chars = chars[lead:]
        start = 0
    else:
        start = lead

    # Without "t" every whitespace character counts towards the cut at the end.
    tail_gap = 0
    for ch in reversed(chars):
        if ch in _SPACE:
            tail_gap += 1
        elif trailing:
            break
    end = len(chars) - tail_gap

    if middle:
        kept: list[str] = []
        gap = 0
        saw_space = False
        for ch in chars[start:end]:
            if ch in _SPACE:
                if saw_space or not extra:
                    gap += 1
                else:
                    kept.append(ch)
                    saw_space = gap == 0
            else:
                kept.append(ch)
                saw_space = False
    else:
        kept = chars[start:end]
        gap = 0

    body = chars[:start] + kept
    return "".join(body[: max(end - gap, 0)])


def tokenize(string: str, delimiters: str) -> list[str]:
    """Split ``string`` at every character found in ``delimiters``.

    Empty tokens between adjacent delimiters are kept.
    """
    tokens: list[str] = []
    current: list[str] = []
    for ch in string:
        if ch in delimiters:
            tokens.append("".join(current))
            current = []
        else:
            current.append(ch)
    tokens.append("".join(current))
    return tokens


def replace_char(s: str, find: str, replace: str) -> str:
    """Return ``s`` with every ``find`` character replaced by ``replace``."""
    return s.replace(find, replace)


def describe(s: str) -> str:
    """Return a one-line summary of a string: its length and its value."""
    return f'string: [length] {len(s)} ; [value] "{s}"'