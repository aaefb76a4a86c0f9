import logging
import re
from typing import List, Tuple

from froggy.token import Token
from froggy.type import Type
from froggy.util import Span

from froggy.error.scanner_error import (  # isort:skip
    LexError,
    UnexpectedCharacterError,
    UnterminatedStringError,
)

logger = logging.getLogger(__name__)


class Scanner:
    def __init__(self, program: str, keep_comments: bool = False) -> None:
        self.og_program = program
        # Comments are extras, but can be kept e.g. for syntax highlighting.
        # The parser skips them either way.
        self.keep_comments = keep_comments
        self.errors: List[LexError] = []

        self.pattern = re.compile(
            r"""
                (?P<SPACE>\s+)|
                (?P<COMMENT>//[^\n]*)|
                (?P<NUMBER>[0-9]+(?:\.[0-9]+)?)|
                # Escapes are kept verbatim, an unescaped newline ends the attempt
                (?P<STRING>"(?:[^"\\\n]|\\.)*")|
                (?P<UNTERMINATED_STRING>"[^\n]*)|
                # Keywords and identifiers, told apart after matching the whole word
                (?P<WORD>[A-Za-z_][A-Za-z0-9_]*)|
                (?P<ERROR>.)
            """,
            flags=re.X,
        )

    def scan(self) -> List[Token]:
        """Extract the list of tokens from the program passed to `Scanner(program)`.

        Errors are not raised, but collected in `self.errors`. Scanning always
        continues after an error, and the returned list always ends with an EOF token.

        Returns:
            List[Token]: A list of Token instances, ending with a Type.EOF Token.
        """
        self.errors = []
        tokens = []
        for match in self.pattern.finditer(self.og_program):
            span = Span(*match.span())
            match match.lastgroup:
                case "SPACE":
                    continue
                case "COMMENT":
                    if self.keep_comments:
                        tokens.append(Token(match[0], Type.COMMENT, span))
                    continue
                case "ERROR":
                    self.errors.append(UnexpectedCharacterError(self.og_program, span))
                    continue
                case "UNTERMINATED_STRING":
                    # Skip the remainder of the line
                    self.errors.append(UnterminatedStringError(self.og_program, span))
                    continue
                case "WORD":
                    # Maximal munch: `HOPPER` is one identifier, never HOP + PER
                    _type = Type.keyword(match[0]) or Type.IDENTIFIER
                case _:
                    _type = Type.to_type(match.lastgroup)

            tokens.append(Token(match[0], _type, span))

        end = len(self.og_program)
        tokens.append(Token("", Type.EOF, Span(end, end)))
        logger.debug(
            "Scanned %d tokens with %d errors", len(tokens), len(self.errors)
        )
        return tokens


def tokenize(
    program: str, keep_comments: bool = False
) -> Tuple[List[Token], List[LexError]]:
    scanner = Scanner(program, keep_comments=keep_comments)
    tokens = scanner.scan()
    return tokens, scanner.errors
