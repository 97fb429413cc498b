#!/usr/bin/env python3
"""
LaTeX Math Rewriter
Converts every \\( ... \\) and \\[ ... \\] span of an HTML document to MathML
A document converts completely or not at all
"""

import asyncio
import logging
from typing import Iterable

from html_document import HtmlDocument
from math_spans import MathSpan, MathSpanLocator, SourceText
from mathml_oracle import MathMLConverter
from patch_list import ReplacementPlan

logger = logging.getLogger('mathml_convert')


class MathRewriter:
    def __init__(self, converter: MathMLConverter = None):
        self.converter = converter if converter is not None else MathMLConverter()
        self.locator = MathSpanLocator()

    async def plan(self, spans: Iterable[MathSpan], source: SourceText) -> ReplacementPlan:
        """
        Convert all spans concurrently and order the results for splicing
        The first failing span propagates; results of the others are dropped
        """
        conversions = [self.converter.convert(span, source) for span in spans]
        results = await asyncio.gather(*conversions)
        return ReplacementPlan.from_results(results)

    async def rewrite(self, source: SourceText) -> str:
        """Return source.text with every math span replaced by MathML"""
        spans = list(self.locator.locate(source.text))
        if not spans:
            return source.text

        logger.debug(f"Found {len(spans)} math spans in {source.path or '<text>'}")
        plan = await self.plan(spans, source)
        return plan.apply(source.text)

    async def convert_document(self, raw_html: str, path: str = '') -> str:
        """
        Rewrite the body of one HTML document
        Documents without math come back exactly as they went in
        """
        document = HtmlDocument(raw_html)
        source = SourceText(document.body_html, path=path, first_line=document.body_line)

        rewritten = await self.rewrite(source)
        if rewritten == source.text:
            return raw_html

        document.replace_body(rewritten)
        return document.serialize()
