from __future__ import annotations

from typing import Dict, List, Optional

from froggy.tree.tree import Node, ParseTree
from froggy.tree.visitor import NodeVisitor
from froggy.util import Span


class LabelIndex(NodeVisitor):
    """Collects where labels are defined (`LILY name`) and referenced (`HOP name`,
    `LEAP name`).

    Nothing is validated here: a jump to a label that is never defined is simply
    a reference without a definition.
    """

    def __init__(self) -> None:
        super().__init__()
        # Label name -> span of the whole `label_definition`
        self.definitions: Dict[str, Span] = {}
        # Label name -> spans of the identifiers jumping to it
        self.references: Dict[str, List[Span]] = {}

    @classmethod
    def build(cls, tree: ParseTree | Node) -> LabelIndex:
        index = cls()
        index.visit(tree.root if isinstance(tree, ParseTree) else tree)
        return index

    def definition_of(self, name: str) -> Optional[Span]:
        return self.definitions.get(name)

    def references_to(self, name: str) -> List[Span]:
        return self.references.get(name, [])

    def visit_label_definition(self, node: Node) -> None:
        # Later definitions of the same label replace earlier ones
        if node.child:
            self.definitions[node.child.token.text] = node.span

    def visit_hop(self, node: Node) -> None:
        if node.child:
            identifier = node.child.token
            self.references.setdefault(identifier.text, []).append(identifier.span)

    visit_leap = visit_hop
