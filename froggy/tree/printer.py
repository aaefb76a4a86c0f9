from enum import Enum, auto
from typing import Iterator

from froggy.token import Token
from froggy.tree.tree import OPERAND_RULES, Node
from froggy.tree.visitor import YieldVisitor


class PrintingInfo(Enum):
    NEWLINE = auto()
    INDENT = auto()
    UNINDENT = auto()


INDENT = " " * 4


class Printer(YieldVisitor):
    """Print a tree as canonical Froggy source.

    Every statement gets its own line, and statements following a `LILY` label
    are indented below that label.
    """

    def print(self, tree: Node) -> str:
        # Traverse the tree, collecting Tokens and printing information
        depth = 0
        program = ""
        for item in self.visit(tree):
            match item:
                case PrintingInfo.NEWLINE:
                    program += "\n"
                case PrintingInfo.INDENT:
                    depth = 1
                case PrintingInfo.UNINDENT:
                    depth = 0
                case Token():
                    # Ensure indentation is correct
                    if not program or program[-1] == "\n":
                        program += INDENT * depth
                    else:
                        program += " "
                    program += item.text

        return program.rstrip()

    def visit_children(self, node: Node, **kwargs) -> Iterator[Token | PrintingInfo]:
        if node.token is not None:
            yield node.token
        for child in node.children:
            yield from self.visit(child, **kwargs)

    def visit_statement(self, node: Node, **kwargs) -> Iterator[Token | PrintingInfo]:
        yield from self.visit_children(node, **kwargs)
        yield PrintingInfo.NEWLINE

    def visit_label_definition(
        self, node: Node, **kwargs
    ) -> Iterator[Token | PrintingInfo]:
        yield PrintingInfo.UNINDENT
        yield from self.visit_children(node, **kwargs)
        yield PrintingInfo.INDENT


class SexpPrinter(YieldVisitor):
    """Print a tree as an S-expression, e.g. `(program (statement (arithmetic (add))))`.

    Nodes that miss their operand are printed with a `(MISSING ...)` child.
    """

    def __init__(self, with_text: bool = False) -> None:
        super().__init__()
        # Also print the text of literal leaves, e.g. `(number "12")`
        self.with_text = with_text

    def print(self, tree: Node) -> str:
        return "".join(self.visit(tree))

    def visit_children(self, node: Node, **kwargs) -> Iterator[str]:
        yield f"({node.kind}"
        if self.with_text and node.token and not node.token.type.is_keyword:
            yield f" {node.token.text!r}"
        for child in node.children:
            yield " "
            yield from self.visit(child, **kwargs)
        if node.is_partial:
            missing = "/".join(str(rule) for rule in OPERAND_RULES[node.kind])
            yield f" (MISSING {missing})"
        yield ")"
