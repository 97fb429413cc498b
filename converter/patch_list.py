#!/usr/bin/env python3
"""
Offset-ordered patch list
Applies text replacements computed against one fixed original text
"""

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Replacement:
    start: int
    length: int
    text: str

    @property
    def end(self) -> int:
        return self.start + self.length


class ReplacementPlan:
    """
    Replacements sorted by start offset, descending

    Splicing right to left only shifts text after the current start, so every
    replacement still pending (all of them to the left) keeps a valid offset.
    The constructor refuses anything that is not already in that order; use
    from_results() for unordered input.
    """

    def __init__(self, replacements: Iterable[Replacement] = ()):
        self.replacements: Tuple[Replacement, ...] = tuple(replacements)
        for right, left in zip(self.replacements, self.replacements[1:]):
            if left.end > right.start:
                raise ValueError(
                    f"Replacements must be non-overlapping and sorted by descending offset: "
                    f"[{left.start}, {left.end}) is not left of [{right.start}, {right.end})"
                )

    @classmethod
    def from_results(cls, results: Iterable[Replacement]) -> 'ReplacementPlan':
        return cls(sorted(results, key=lambda r: r.start, reverse=True))

    def apply(self, text: str) -> str:
        """Return a new text with every replacement applied; text itself is untouched"""
        for replacement in self.replacements:
            text = text[:replacement.start] + replacement.text + text[replacement.end:]
        return text

    def __len__(self):
        return len(self.replacements)

    def __iter__(self):
        return iter(self.replacements)
