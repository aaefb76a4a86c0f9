import logging
from enum import Enum, auto
from typing import List, Optional

from froggy.scanner.scanner import tokenize
from froggy.token import Token
from froggy.tree.tree import Node, ParseTree, Rule
from froggy.type import Type
from froggy.util import Span

from froggy.error.parser_error import (  # isort:skip
    MissingIdentifierError,
    MissingOperandError,
    ParseError,
    UnexpectedTokenError,
)

logger = logging.getLogger(__name__)


class Recovery(Enum):
    # Keep the incomplete statement in the tree, without its operand
    PARTIAL = auto()
    # Leave the incomplete statement out of the tree entirely
    DISCARD = auto()


# Every keyword starts a statement, and no other token does
STATEMENT_START = tuple(_type for _type in Type if _type.is_keyword)

# Keywords that must be followed by an operand, which operand types are accepted,
# and which error to report if the operand is missing
OPERANDS = {
    Type.PLOP: ((Type.NUMBER, Type.STRING), MissingOperandError),
    Type.HOP: ((Type.IDENTIFIER,), MissingIdentifierError),
    Type.LEAP: ((Type.IDENTIFIER,), MissingIdentifierError),
    Type.LILY: ((Type.IDENTIFIER,), MissingIdentifierError),
}

LITERALS = {
    Type.NUMBER: Rule.NUMBER,
    Type.STRING: Rule.STRING,
    Type.IDENTIFIER: Rule.IDENTIFIER,
}


class Parser:
    def __init__(
        self, program: str = "", recovery: Recovery = Recovery.PARTIAL
    ) -> None:
        self.og_program = program
        self.recovery = recovery
        self.errors: List[ParseError] = []
        self.tokens: List[Token] = []
        self.i = 0

    def parse(self, tokens: List[Token]) -> ParseTree:
        """Given a list of Tokens from the scanner, produce the syntax tree of the program.

        Parsing never stops at an error: errors are collected on the returned
        ParseTree, and the tree holds every statement that could be (partially) parsed.

        Args:
            tokens (List[Token]): A list of tokens, produced by `Scanner(program).scan()`

        Returns:
            ParseTree: The `program` root node, with the errors found while parsing.
        """
        # Comments are extras, which may occur between any two tokens
        self.tokens = [token for token in tokens if token.type != Type.COMMENT]
        if not self.tokens or self.tokens[-1].type != Type.EOF:
            end = self.tokens[-1].span.end if self.tokens else len(self.og_program)
            self.tokens.append(Token("", Type.EOF, Span(end, end)))
        self.i = 0
        self.errors = []

        root = self.parse_program()
        logger.debug(
            "Parsed %d statements with %d errors", len(root.children), len(self.errors)
        )
        return ParseTree(root, self.errors, program=self.og_program)

    @property
    def current(self) -> Token:
        return self.tokens[self.i]

    def advance(self) -> Token:
        token = self.current
        # Never move past the EOF token
        if token.type != Type.EOF:
            self.i += 1
        return token

    def parse_program(self) -> Node:
        statements = []
        # Every iteration consumes at least one token
        while self.current.type != Type.EOF:
            statement = self.parse_statement()
            if statement is not None:
                statements.append(statement)
        return Node(Rule.PROGRAM, tuple(statements))

    def parse_statement(self) -> Optional[Node]:
        match self.current.type:
            case (
                Type.RIBBIT
                | Type.CROAK
                | Type.PLOP
                | Type.SPLASH
                | Type.GULP
                | Type.BURP
            ):
                category = self.parse_category(Rule.STACK_OPERATION)
            case Type.HOP | Type.LEAP:
                category = self.parse_category(Rule.CONTROL_FLOW)
            case Type.DUP | Type.SWAP | Type.OVER:
                category = self.parse_category(Rule.STACK_MANIPULATION)
            case Type.ADD | Type.SUB | Type.MUL | Type.DIV:
                category = self.parse_category(Rule.ARITHMETIC)
            case (
                Type.EQUALS
                | Type.NOT_EQUAL
                | Type.LESS_THAN
                | Type.GREATER_THAN
                | Type.LESS_EQ
                | Type.GREATER_EQ
            ):
                category = self.parse_category(Rule.COMPARISON)
            case Type.LILY:
                category = self.parse_label_definition()
            case _:
                # Skip exactly this one token, and try again from the next one
                token = self.advance()
                self.errors.append(
                    UnexpectedTokenError(
                        self.og_program, token.span, STATEMENT_START, token
                    )
                )
                return None

        if category is None:
            return None
        return Node(Rule.STATEMENT, (category,))

    def parse_category(self, rule: Rule) -> Optional[Node]:
        construct = self.parse_construct()
        if construct is None:
            return None
        return Node(rule, (construct,))

    def parse_construct(self) -> Optional[Node]:
        keyword = self.advance()
        # Constructs are named after their keyword, e.g. Type.RIBBIT -> Rule.RIBBIT
        rule = Rule[keyword.type.name]
        if keyword.type in OPERANDS:
            return self.parse_operand(keyword, rule)
        return Node(rule, token=keyword)

    def parse_label_definition(self) -> Optional[Node]:
        keyword = self.advance()
        return self.parse_operand(keyword, Rule.LABEL_DEFINITION)

    def parse_operand(self, keyword: Token, rule: Rule) -> Optional[Node]:
        """Parse the operand that must follow `keyword`, e.g. the number after `PLOP`.

        If the operand is missing, the offending token is not consumed, so that it
        can start the next statement.
        """
        expected, error_class = OPERANDS[keyword.type]
        token = self.current
        if token.type in expected:
            self.advance()
            operand = Node(LITERALS[token.type], token=token)
            return Node(rule, (operand,), token=keyword)

        self.errors.append(
            error_class(self.og_program, token.span, expected, token, keyword)
        )
        if self.recovery == Recovery.DISCARD:
            return None
        return Node(rule, token=keyword)


def parse_tokens(
    tokens: List[Token], program: str = "", recovery: Recovery = Recovery.PARTIAL
) -> ParseTree:
    return Parser(program, recovery=recovery).parse(tokens)


def parse(program: str, recovery: Recovery = Recovery.PARTIAL) -> ParseTree:
    """Scan and parse a complete Froggy program.

    Both the lexer and the parser errors are collected on the returned ParseTree.
    """
    tokens, lex_errors = tokenize(program)
    tree = parse_tokens(tokens, program, recovery=recovery)
    tree.lex_errors = lex_errors
    return tree
