#!/usr/bin/env python3
"""
LaTeX Span Locator
Finds \\( ... \\) and \\[ ... \\] math spans in raw markup
Offsets always refer to the text that was scanned, never to rewritten output
"""

import heapq
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class MathSyntax(Enum):
    """Delimiter family of a span; the value is the oracle input format"""
    INLINE = 'inline-TeX'
    DISPLAY = 'TeX'


@dataclass(frozen=True)
class MathSpan:
    source_text: str
    syntax: MathSyntax
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class SourceText:
    """
    Text handed to the locator, plus where it lives in the file on disk
    first_line is the file line on which text[0] sits
    """
    text: str
    path: str = ''
    first_line: int = 1

    def line_number(self, offset: int) -> int:
        return line_number(self.text, offset, self.first_line)


def line_number(text: str, offset: int, first_line: int = 1) -> int:
    """1-based line of offset: first_line plus the newlines preceding it"""
    return first_line + text.count('\n', 0, offset)


class MathSpanLocator:
    # Non-greedy and DOTALL: a span may cross lines but stops at the first closer
    INLINE_PATTERN = re.compile(r'\\\((.*?)\\\)', re.DOTALL)
    DISPLAY_PATTERN = re.compile(r'\\\[(.*?)\\\]', re.DOTALL)

    def __init__(self):
        self.patterns = (
            (self.INLINE_PATTERN, MathSyntax.INLINE),
            (self.DISPLAY_PATTERN, MathSyntax.DISPLAY),
        )

    def locate(self, text: str) -> Iterator[MathSpan]:
        """
        Yield every math span in text, left to right
        Each family is matched independently over the same text, then merged
        """
        families = [self._scan(text, pattern, syntax) for pattern, syntax in self.patterns]
        return heapq.merge(*families, key=lambda span: span.start)

    def _scan(self, text: str, pattern, syntax: MathSyntax) -> Iterator[MathSpan]:
        for match in pattern.finditer(text):
            yield MathSpan(
                source_text=match.group(1),
                syntax=syntax,
                start=match.start(),
                length=match.end() - match.start(),
            )
