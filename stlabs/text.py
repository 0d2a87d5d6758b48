"""Text normalisation and wrapping into short lines."""

from __future__ import annotations

import re
import string
import sys
from collections.abc import Sequence
from pathlib import Path

PUNCTUATION = ".,!?:;"
MAX_WORD_LENGTH = 10
MAX_LINE_LENGTH = 40
REPLACEMENT = "Vau!!!"

_SPACE_CHARS = frozenset(" \t\n\v\f\r")
_PUNCT_RE = re.compile(r"[.,!?:;]")
_WORD_RE = re.compile(r"[^ \t\n\v\f\r]+")


def _words(text: str) -> list[str]:
    return _WORD_RE.findall(text)


def remove_whitespaces(text: str) -> str:
    """Drop tabs and newlines, keeping ordinary spaces."""
    return text.replace("\t", "").replace("\n", "")


def remove_consecutive_whitespaces(text: str) -> str:
    """Keep only the first character of every run of whitespace."""
    kept: list[str] = []
    for ch in text:
        if ch in _SPACE_CHARS and kept and kept[-1] in _SPACE_CHARS:
            continue
        kept.append(ch)
    return "".join(kept)


def insert_space_after_punctuation(text: str) -> str:
    """Insert a space after punctuation marks.

    For each mark in turn, starting at its first occurrence, a space is
    inserted after that mark and after every punctuation mark following it.
    """
    for mark in PUNCTUATION:
        found = text.find(mark)
        while found != -1:
            text = f"{text[:found + 1]} {text[found + 1:]}"
            match = _PUNCT_RE.search(text, found + 2)
            found = match.start() if match else -1
    return text


def remove_space_before_punctuation(text: str) -> str:
    """Remove a single space standing right before a punctuation mark."""
    found = 0
    while (match := _PUNCT_RE.search(text, found)) is not None:
        found = match.start()
        if found > 0 and text[found - 1] == " ":
            text = text[:found - 1] + text[found:]
        found += 1
    return text


def replace_long_words(text: str) -> str:
    """Replace words longer than ten characters, keeping a trailing mark.

    Every resulting word is followed by one space.
    """
    out: list[str] = []
    for word in _words(text):
        if len(word) > MAX_WORD_LENGTH:
            tail = word[-1] if word[-1] in string.punctuation else ""
            out.append(REPLACEMENT + tail)
        else:
            out.append(word)
    return "".join(f"{word} " for word in out)


def transform_into_lines(text: str) -> list[str]:
    """Pack the words of ``text`` into lines of at most forty characters."""
    lines: list[str] = []
    line = ""
    for word in _words(text):
        if len(line) + len(word) + 1 > MAX_LINE_LENGTH:
            lines.append(line)
            line = f"{word} "
        else:
            line += f"{word} "
    if line:
        lines.append(line)
    return lines


def format_text(text: str) -> list[str]:
    """Run the whole normalisation pipeline and return the wrapped lines."""
    text = remove_whitespaces(text)
    text = remove_consecutive_whitespaces(text)
    text = insert_space_after_punctuation(text)
    text = remove_space_before_punctuation(text)
    text = replace_long_words(text)
    return transform_into_lines(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Format the file named on the command line and print its lines."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: stlabs-text <input_file>", file=sys.stderr)
        return 1
    try:
        text = Path(args[0]).read_text(encoding="utf-8", errors="replace")
    except OSError:
        print("Failed to open the file.", file=sys.stderr)
        return 1
    for line in format_text(text):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())