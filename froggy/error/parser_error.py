from dataclasses import dataclass
from typing import Optional, Tuple

from froggy.error.error import FroggyError, FroggyException
from froggy.token import Token
from froggy.type import Type
from froggy.util import LineIndex


class ParserException(FroggyException):
    pass


@dataclass
class ParseError(FroggyError):
    expected: Tuple[Type, ...]
    got: Token
    # The keyword that required an operand, if any
    keyword: Optional[Token] = None

    @property
    def expected_str(self) -> str:
        if len(self.expected) > 3:
            return "a statement"
        if len(self.expected) == 1:
            return self.expected[0].article_str()
        *init, last = self.expected
        return (
            ", ".join(_type.article_str() for _type in init)
            + f" or {last.article_str()}"
        )

    @property
    def keyword_lines_str(self) -> str:
        return LineIndex(self.program).lines_str(self.keyword.span)

    @property
    def got_str(self) -> str:
        if self.got.type == Type.EOF:
            return "the end of the program"
        return repr(self.got.text)

    def create_error(self, before: str):
        after = f"Expected {self.expected_str}, but got {self.got_str} instead."
        return super().create_error(before, after)


class UnexpectedTokenError(ParseError):
    def __str__(self) -> str:
        return self.create_error(
            f"Unexpected {self.got.type} {self.got_str} on {self.lines_str}."
        )


class MissingOperandError(ParseError):
    def __str__(self) -> str:
        return self.create_error(
            f"Missing operand after {self.keyword.text!r} on {self.keyword_lines_str}."
        )


class MissingIdentifierError(ParseError):
    def __str__(self) -> str:
        return self.create_error(
            f"Missing label name after {self.keyword.text!r} on {self.keyword_lines_str}."
        )
