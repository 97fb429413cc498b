#!/usr/bin/env python3
"""
HTML document wrapper
Exposes the body's inner markup for rewriting and re-serializes the whole page
Everything outside the body is written back exactly as it was read
"""

import re
from typing import Optional, Tuple

from bs4 import BeautifulSoup

# Quoted attribute values may contain '>'
BODY_START = re.compile(r'''<body\b(?:[^>"']|"[^"]*"|'[^']*')*>''', re.IGNORECASE)
BODY_END = re.compile(r'</body\s*>', re.IGNORECASE)
HTML_END = re.compile(r'</html\s*>', re.IGNORECASE)


class HtmlDocument:
    def __init__(self, raw_html: str):
        self.raw_html = raw_html
        self.soup = BeautifulSoup(raw_html, 'html.parser')
        self._body_html: Optional[str] = None
        self._bounds = self._locate_body() if self.body is not None else None

    @property
    def body(self):
        return self.soup.body

    @property
    def body_html(self) -> str:
        """Inner markup of <body>, or the whole text for fragments without one"""
        if self._body_html is None:
            if self.body is None:
                self._body_html = self.raw_html
            else:
                self._body_html = self.body.decode_contents()
        return self._body_html

    @property
    def body_line(self) -> int:
        """File line on which body_html begins, i.e. the line holding the '>' of <body ...>"""
        if self._bounds is None:
            if self.body is None or self.body.sourceline is None:
                return 1
            return self.body.sourceline
        return self.raw_html.count('\n', 0, self._bounds[0]) + 1

    def replace_body(self, markup: str):
        self._body_html = markup
        if self.body is None:
            return

        fragment = BeautifulSoup(markup, 'html.parser')
        self.body.clear()
        self.body.extend(list(fragment.contents))

    def serialize(self) -> str:
        if self.body is None:
            return self.body_html
        if self._bounds is None:
            return str(self.soup)

        inner_start, inner_end = self._bounds
        return self.raw_html[:inner_start] + self.body.decode_contents() + self.raw_html[inner_end:]

    def _locate_body(self) -> Optional[Tuple[int, int]]:
        """Offsets in raw_html where the body's inner markup starts and ends"""
        start = self._offset_of(self.body.sourceline, self.body.sourcepos)
        match = BODY_START.match(self.raw_html, start) if start is not None else None
        if match is None:
            match = BODY_START.search(self.raw_html)
        if match is None:
            return None

        inner_start = match.end()
        for closer in (BODY_END, HTML_END):
            ends = [m.start() for m in closer.finditer(self.raw_html, inner_start)]
            if ends:
                return inner_start, ends[-1]
        return inner_start, len(self.raw_html)

    def _offset_of(self, line: Optional[int], column: Optional[int]) -> Optional[int]:
        if line is None or column is None:
            return None
        offset = 0
        for _ in range(line - 1):
            offset = self.raw_html.find('\n', offset) + 1
            if offset == 0:
                return None
        return offset + column
