from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class Span:
    """Half-open range of offsets `[start, end)` into the source program."""

    start: int
    end: int

    @property
    def empty(self) -> bool:
        return self.start == self.end

    @classmethod
    def default(cls):
        return cls(0, 0)

    def __len__(self) -> int:
        return self.end - self.start

    def __contains__(self, other: Span | int) -> bool:
        if isinstance(other, Span):
            return self.start <= other.start and other.end <= self.end
        # Empty spans still "contain" their own offset, e.g. for the EOF token
        return self.start <= other < self.end or self.start == other == self.end

    def __and__(self, other: Span) -> Span:
        return Span(min(self.start, other.start), max(self.end, other.end))

    def text(self, program: str) -> str:
        return program[self.start : self.end]


class LineIndex:
    """Converts offsets into (line, column) positions and back.

    Lines are 1-indexed, columns are 0-indexed, matching how errors are shown
    to the programmer.
    """

    def __init__(self, program: str) -> None:
        self.program = program
        self.line_starts: List[int] = [0]
        for i, char in enumerate(program):
            if char == "\n":
                self.line_starts.append(i + 1)

    def line_col(self, offset: int) -> Tuple[int, int]:
        offset = max(0, min(offset, len(self.program)))
        line = bisect_right(self.line_starts, offset)
        return line, offset - self.line_starts[line - 1]

    def offset(self, line: int, col: int) -> int:
        if not 1 <= line <= len(self.line_starts):
            raise ValueError(f"Line {line} is outside of the program.")
        return min(self.line_starts[line - 1] + col, len(self.program))

    def lines_str(self, span: Span) -> str:
        start_ln, _ = self.line_col(span.start)
        end_ln, _ = self.line_col(span.end)
        if start_ln != end_ln:
            return f"lines [{start_ln}-{end_ln}]"
        return f"line [{start_ln}]"


class Colors:
    RED = "\033[31m"
    ENDC = "\033[m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
