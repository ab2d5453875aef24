"""Extract visible text from HTML and count the words in it."""

from __future__ import annotations

import re
from html.parser import HTMLParser

SKIP_ELEMENTS = frozenset({"script", "style", "noscript", "head", "meta", "link", "title"})

_VOID_ELEMENTS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "param", "source", "track", "wbr",
    }
)

# The whitespace set of the C locale.
_WHITESPACE = re.compile(r"[ \t\n\v\f\r]+")


class _TextExtractor(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._open_skips: list[str] = []
        self.chunks: list[str] = []

    def handle_starttag(self, tag, attrs):
        if tag == "body" and "head" in self._open_skips:
            # The body implicitly closes an unterminated head.
            while self._open_skips.pop() != "head":
                pass
        if tag in SKIP_ELEMENTS and tag not in _VOID_ELEMENTS:
            self._open_skips.append(tag)

    def handle_startendtag(self, tag, attrs):
        pass

    def handle_endtag(self, tag):
        if tag in self._open_skips:
            while self._open_skips.pop() != tag:
                pass

    def handle_data(self, data):
        if not self._open_skips:
            self.chunks.append(data)


def extract_text_from_html(html: str) -> str:
    """Return the text of *html* outside non-content elements, each run followed by a space."""
    if not html:
        return ""
    parser = _TextExtractor()
    parser.feed(html)
    parser.close()
    return "".join(f"{chunk} " for chunk in parser.chunks)


def _is_word_char(char: str) -> bool:
    return char.isascii() and char.isalnum()


def sanitize_word(word: str) -> str:
    """Strip leading and trailing characters that are not ASCII letters or digits."""
    first = next((i for i, char in enumerate(word) if _is_word_char(char)), None)
    if first is None:
        return ""
    last = next(i for i in range(len(word) - 1, -1, -1) if _is_word_char(word[i]))
    return word[first : last + 1]


def count_words(text: str) -> int:
    """Count whitespace-separated tokens that contain at least one letter or digit."""
    return sum(1 for token in _WHITESPACE.split(text) if token and sanitize_word(token))