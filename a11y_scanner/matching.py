"""Regex match spans with source locations.

Detectors never walk the text by hand. They iterate a ``Matches`` sequence,
which re-runs the pattern on every iteration and yields ``Span`` records
carrying the matched text, captured groups and 1-based line/column.
"""

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Pattern, Tuple, Union


@dataclass(frozen=True)
class Span:
    start: int
    end: int
    text: str
    groups: Tuple[Optional[str], ...]
    line: int
    column: int

    def group(self, index: int) -> str:
        """Captured group ``index`` (1-based like ``re``), ``""`` if unmatched."""
        return self.groups[index - 1] or ""


def line_of(text: str, index: int) -> int:
    return text.count("\n", 0, index) + 1


def column_of(text: str, index: int) -> int:
    return index - (text.rfind("\n", 0, index) + 1) + 1


class Matches:
    def __init__(self, pattern: Union[str, Pattern], text: str, flags: int = 0):
        self.pattern = re.compile(pattern, flags) if isinstance(pattern, str) else pattern
        self.text = text

    def __iter__(self) -> Iterator[Span]:
        for m in self.pattern.finditer(self.text):
            yield Span(
                start=m.start(),
                end=m.end(),
                text=m.group(0),
                groups=m.groups(),
                line=line_of(self.text, m.start()),
                column=column_of(self.text, m.start()),
            )

    def first(self) -> Optional[Span]:
        return next(iter(self), None)
