#!/usr/bin/env python3
"""
Converter settings
Directories are fixed; only verbosity is chosen at run time
"""

from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet

SOURCE_DIRECTORY = '../../html'
GENERATED_DIRECTORY = '../../generated'
EXCLUDED_DIRECTORIES = ('searching',)  # Add directory names to exclude

HTML_EXTENSION = '.html'
MATHML_NAMESPACE = 'http://www.w3.org/1998/Math/MathML'


@dataclass(frozen=True)
class ConversionConfig:
    source_dir: Path
    output_dir: Path
    excluded_dirs: FrozenSet[str] = frozenset()
    verbose: bool = False

    @classmethod
    def default(cls, verbose: bool = False) -> 'ConversionConfig':
        return cls(
            source_dir=Path(SOURCE_DIRECTORY),
            output_dir=Path(GENERATED_DIRECTORY),
            excluded_dirs=frozenset(EXCLUDED_DIRECTORIES),
            verbose=verbose,
        )
