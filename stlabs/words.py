"""List the distinct words of a text file."""

from __future__ import annotations

import string
import sys
from collections.abc import Sequence
from pathlib import Path

_LETTERS = frozenset(string.ascii_letters)


def unique_words(text: str) -> list[str]:
    """Return the distinct lower-cased words in order of first appearance.

    Anything that is not an ASCII letter separates words.
    """
    cleaned = "".join(ch.lower() if ch in _LETTERS else " " for ch in text)
    return list(dict.fromkeys(cleaned.split()))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the distinct words of the file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Использование: stlabs-words <input_file>", file=sys.stderr)
        return 1
    try:
        text = Path(args[0]).read_text(encoding="utf-8", errors="replace")
    except OSError:
        print("Не удалось открыть файл.", file=sys.stderr)
        return 1
    words = unique_words(text)
    for word in words:
        print(word)
    print(f"Найдено {len(words)} уникальных слов.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())