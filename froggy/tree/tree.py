from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from froggy.error.communicator import Communicator
from froggy.error.parser_error import ParseError, ParserException
from froggy.error.scanner_error import LexError, ScannerException
from froggy.token import Token
from froggy.util import Span


class Rule(Enum):
    PROGRAM = "program"
    STATEMENT = "statement"
    # Statement categories
    STACK_OPERATION = "stack_operation"
    CONTROL_FLOW = "control_flow"
    STACK_MANIPULATION = "stack_manipulation"
    ARITHMETIC = "arithmetic"
    COMPARISON = "comparison"
    LABEL_DEFINITION = "label_definition"
    # Constructs
    RIBBIT = "ribbit"
    CROAK = "croak"
    PLOP = "plop"
    SPLASH = "splash"
    GULP = "gulp"
    BURP = "burp"
    HOP = "hop"
    LEAP = "leap"
    DUP = "dup"
    SWAP = "swap"
    OVER = "over"
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    EQUALS = "equals"
    NOT_EQUAL = "not_equal"
    LESS_THAN = "less_than"
    GREATER_THAN = "greater_than"
    LESS_EQ = "less_eq"
    GREATER_EQ = "greater_eq"
    # Literals
    NUMBER = "number"
    STRING = "string"
    IDENTIFIER = "identifier"

    def __str__(self) -> str:
        return self.value


# Rules that are only complete with one operand child, and the rules that operand may have
OPERAND_RULES = {
    Rule.PLOP: (Rule.NUMBER, Rule.STRING),
    Rule.HOP: (Rule.IDENTIFIER,),
    Rule.LEAP: (Rule.IDENTIFIER,),
    Rule.LABEL_DEFINITION: (Rule.IDENTIFIER,),
}


@dataclass(frozen=True)
class Node:
    kind: Rule
    children: Tuple[Node, ...] = ()
    # The keyword or literal this node stands for, e.g. PLOP for `plop` nodes
    token: Optional[Token] = None
    span: Span = field(repr=False, kw_only=True, compare=False, default=None)

    def __post_init__(self) -> None:
        if self.span is None:
            spans = [child.span for child in self.children]
            if self.token is not None:
                spans.insert(0, self.token.span)
            span = Span.default()
            if spans:
                span = spans[0]
                for other in spans[1:]:
                    span &= other
            object.__setattr__(self, "span", span)

    def __str__(self) -> str:
        from froggy.tree.printer import Printer

        printer = Printer()
        return printer.print(self)

    def __contains__(self, element: Node) -> bool:
        if self == element:
            return True
        return any(element in child for child in self.children)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_partial(self) -> bool:
        return self.kind in OPERAND_RULES and not self.children

    @property
    def child(self) -> Optional[Node]:
        return self.children[0] if self.children else None

    def iter_nodes(self) -> Iterator[Node]:
        """Yield this node and all of its descendants, in pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def iter_tokens(self) -> Iterator[Token]:
        """Yield every token in this subtree in source order.

        Concatenating the text of these tokens with the extras between them
        reconstructs the source that produced the subtree.
        """
        if self.token is not None:
            yield self.token
        for child in self.children:
            yield from child.iter_tokens()

    def descendant_at(self, offset: int) -> Optional[Node]:
        """Find the deepest node whose span contains `offset`, if any."""
        if offset not in self.span:
            return None
        for child in self.children:
            if found := child.descendant_at(offset):
                return found
        return self

    def to_sexp(self) -> str:
        from froggy.tree.printer import SexpPrinter

        return SexpPrinter().print(self)


@dataclass
class ParseTree:
    root: Node
    errors: List[ParseError] = field(default_factory=list)
    lex_errors: List[LexError] = field(default_factory=list)
    program: str = field(default="", repr=False, compare=False)

    @property
    def has_error(self) -> bool:
        return bool(self.errors or self.lex_errors)

    @property
    def all_errors(self) -> List[LexError | ParseError]:
        return sorted(
            [*self.lex_errors, *self.errors],
            key=lambda error: (error.span.start, error.span.end),
        )

    @property
    def statements(self) -> Tuple[Node, ...]:
        return self.root.children

    def to_sexp(self) -> str:
        return self.root.to_sexp()

    def raise_for_errors(self) -> None:
        """Raise the collected errors, if any, as one exception per stage.

        Raises:
            ScannerException: If the lexer reported any errors.
            ParserException: If the parser reported any errors.
        """
        Communicator.communicate(self.lex_errors, ScannerException)
        Communicator.communicate(self.errors, ParserException)

    def __str__(self) -> str:
        return str(self.root)
