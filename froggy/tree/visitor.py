from froggy.tree.tree import Node


class NodeVisitor:
    """
    For visiting nodes in our syntax tree, e.g. `visit_plop` is called for `plop` nodes
    """

    def visit(self, node: Node, *args, **kwargs):
        """Visit a node."""
        method = "visit_" + node.kind.value
        visitor = getattr(self, method, self.visit_children)
        return visitor(node, *args, **kwargs)

    def visit_children(self, node: Node, *args, **kwargs):
        """Called if no explicit visitor function exists for a node."""
        for child in node.children:
            self.visit(child, *args, **kwargs)


class YieldVisitor(NodeVisitor):
    """
    For yielding values from nodes in our syntax tree
    """

    def visit(self, node: Node, *args, **kwargs):
        """Visit a node."""
        method = "visit_" + node.kind.value
        visitor = getattr(self, method, self.visit_children)
        yield from visitor(node, *args, **kwargs)

    def visit_children(self, node: Node, *args, **kwargs):
        """Called if no explicit visitor function exists for a node."""
        for child in node.children:
            yield from self.visit(child, *args, **kwargs)
