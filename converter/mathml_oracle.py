#!/usr/bin/env python3
"""
LaTeX to MathML conversion oracle
Wraps latex2mathml behind a typeset(math, format) contract and adapts it
into an async per-span converter with structured error reporting
"""

import asyncio
import html
import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from latex2mathml.converter import convert as latex_to_mathml

from conversion_config import MATHML_NAMESPACE
from math_spans import MathSpan, MathSyntax, SourceText
from patch_list import Replacement

logger = logging.getLogger('mathml_convert')


@dataclass
class TypesetResult:
    mml: Optional[str] = None
    errors: List[str] = field(default_factory=list)


class SpanConversionError(Exception):
    """The oracle rejected one LaTeX span of a document"""

    def __init__(self, path: str, line_number: int, source_text: str,
                 syntax: MathSyntax, detail: str):
        self.path = path
        self.line_number = line_number
        self.source_text = source_text
        self.syntax = syntax
        self.detail = detail
        super().__init__(self.report())

    def report(self) -> str:
        return (
            f"Error in file: {self.path}\n"
            f"Line Number: {self.line_number}\n"
            f"LaTeX Source: {self.source_text}\n"
            f"Error: {self.detail}"
        )


class Latex2MathMLOracle:
    """
    Typesets with latex2mathml
    Returns the MathML fragment without the library's own <math> root
    """

    DISPLAY_MODES = {
        MathSyntax.INLINE.value: 'inline',
        MathSyntax.DISPLAY.value: 'block',
    }
    ROOT_PATTERN = re.compile(r'^\s*<math\b[^>]*>(.*)</math>\s*$', re.DOTALL)

    def typeset(self, math: str, format: str) -> TypesetResult:
        display = self.DISPLAY_MODES.get(format)
        if display is None:
            return TypesetResult(errors=[f"Unknown math format: {format}"])

        try:
            mathml = latex_to_mathml(math, display=display)
        except Exception as e:
            # latex2mathml has no common exception base; any failure is a report
            name = type(e).__name__
            return TypesetResult(errors=[f"{name}: {e}" if str(e) else name])

        match = self.ROOT_PATTERN.match(mathml)
        return TypesetResult(mml=match.group(1) if match else mathml)


class MathMLConverter:
    def __init__(self, oracle=None, verbose: bool = False):
        self.oracle = oracle if oracle is not None else Latex2MathMLOracle()
        self.verbose = verbose

    async def convert(self, span: MathSpan, source: SourceText) -> Replacement:
        """
        Typeset one span off the event loop thread
        Raises SpanConversionError when the oracle reports errors
        """
        # Span text comes from serialized HTML, so &lt; and friends are still escaped
        tex = html.unescape(span.source_text)
        result = await asyncio.to_thread(self.oracle.typeset, tex, span.syntax.value)

        if result.errors:
            raise SpanConversionError(
                path=source.path,
                line_number=source.line_number(span.start),
                source_text=span.source_text,
                syntax=span.syntax,
                detail='; '.join(str(error) for error in result.errors),
            )

        display = ' display="block"' if span.syntax is MathSyntax.DISPLAY else ''
        mathml = f'<math xmlns="{MATHML_NAMESPACE}"{display}>{result.mml}</math>'
        if self.verbose:
            line = source.line_number(span.start)
            logger.info(f"Converted LaTeX (line {line}): {span.source_text}")
            logger.info(f"MathML: {mathml}")

        return Replacement(start=span.start, length=span.length, text=mathml)
