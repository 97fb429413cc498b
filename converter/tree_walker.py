#!/usr/bin/env python3
"""
HTML Tree Walker
Mirrors a source directory into an output directory, converting the math
of every .html file on the way
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from conversion_config import HTML_EXTENSION
from math_rewriter import MathRewriter
from mathml_oracle import SpanConversionError

logger = logging.getLogger('mathml_convert')


@dataclass
class WalkStats:
    converted: List[Path] = field(default_factory=list)
    failed: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


class MathTreeWalker:
    def __init__(self, rewriter: MathRewriter = None, extension: str = HTML_EXTENSION):
        self.rewriter = rewriter if rewriter is not None else MathRewriter()
        self.extension = extension

    async def walk(self, source_dir, output_dir, excluded_names: Iterable[str] = (),
                   stats: WalkStats = None) -> WalkStats:
        """
        Convert every document under source_dir into the same place under output_dir
        Excluded directory names are skipped at any depth without being listed
        """
        source_dir = Path(source_dir)
        output_dir = Path(output_dir)
        excluded = set(excluded_names)
        if stats is None:
            stats = WalkStats()

        for entry in sorted(source_dir.iterdir()):
            target = output_dir / entry.name

            # Symlinked directories are not followed
            if entry.is_dir() and not entry.is_symlink():
                if entry.name in excluded:
                    logger.info(f"Skipping directory: {entry.name}")
                    stats.skipped.append(entry)
                    continue
                await self.walk(entry, target, excluded, stats)
            elif entry.suffix == self.extension and entry.is_file():
                await self.convert_file(entry, target, stats)

        return stats

    async def convert_file(self, source_path: Path, output_path: Path, stats: WalkStats):
        """
        Run one document through the rewriter and write the result
        A span failure only abandons this document; I/O errors propagate
        """
        # newline='' keeps CRLF line endings exactly as they are on disk
        with source_path.open(encoding='utf-8', newline='') as f:
            raw_html = f.read()

        try:
            converted = await self.rewriter.convert_document(raw_html, str(source_path))
        except SpanConversionError as e:
            logger.error(e.report())
            stats.failed.append(source_path)
            return

        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open('w', encoding='utf-8', newline='') as f:
            f.write(converted)
        stats.converted.append(output_path)
        logger.info(f"Conversion complete. Output saved to {output_path}")
