import logging

from froggy import Parser, Scanner
from froggy.error.error import FroggyException
from froggy.tree.labels import LabelIndex

logging.basicConfig(level=logging.DEBUG)

program = r"""
// Count down from 3
PLOP 3
LILY loop
    DUP
    RIBBIT
    PLOP 1
    SUB
    DUP
    PLOP 0
    GREATER_THAN
    HOP loop
PLOP "done\n"
RIBBIT
LEAP
"""

# Perform scanning on the input program
scanner = Scanner(program)
tokens = scanner.scan()

# Perform parsing on the scanned tokens
parser = Parser(program)
tree = parser.parse(tokens)
tree.lex_errors = scanner.errors

# Print out the tree
print("=" * 25)
print("Syntax tree:")
print("=" * 25)
print(tree.to_sexp())

print("=" * 25)
print("Program:")
print("=" * 25)
print(tree)

index = LabelIndex.build(tree)
print("=" * 25)
print("Labels:")
print("=" * 25)
for name, span in index.definitions.items():
    print(f"{name!r} defined at {span}, referenced at {index.references_to(name)}")

# Report every error at once, if there are any
try:
    tree.raise_for_errors()
except FroggyException as e:
    print(e)
