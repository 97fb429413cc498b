#!/usr/bin/env python3
"""
HTML Math Converter
Rewrites LaTeX math in a tree of HTML files into MathML
"""

import sys
import argparse
import asyncio
import logging
from dataclasses import replace

from conversion_config import ConversionConfig
from math_rewriter import MathRewriter
from mathml_oracle import MathMLConverter
from tree_walker import MathTreeWalker

logger = logging.getLogger('mathml_convert')


class _BelowWarning(logging.Filter):
    def filter(self, record):
        return record.levelno < logging.WARNING


def setup_logging(verbose: bool = False):
    """Progress to stdout, problems to stderr"""
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(_BelowWarning())
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(message)s',
        handlers=[stdout_handler, stderr_handler],
        force=True,
    )


async def run(config: ConversionConfig):
    converter = MathMLConverter(verbose=config.verbose)
    walker = MathTreeWalker(MathRewriter(converter))
    return await walker.walk(config.source_dir, config.output_dir, config.excluded_dirs)


def main(argv=None, config: ConversionConfig = None) -> int:
    parser = argparse.ArgumentParser(description='Convert LaTeX math in HTML files to MathML')
    parser.add_argument('--verbose', action='store_true',
                        help='Print every converted formula with its MathML')
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    if config is None:
        config = ConversionConfig.default(verbose=args.verbose)
    elif args.verbose and not config.verbose:
        config = replace(config, verbose=True)

    logger.debug(f"Source: {config.source_dir}, output: {config.output_dir}, "
                 f"excluded: {sorted(config.excluded_dirs)}")

    stats = asyncio.run(run(config))

    logger.info(f"{len(stats.converted)} converted, {len(stats.failed)} failed, "
                f"{len(stats.skipped)} directories skipped")
    return 0 if stats.ok else 1


if __name__ == '__main__':
    sys.exit(main())
