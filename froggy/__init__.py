from froggy.parser.parser import Parser, Recovery, parse, parse_tokens
from froggy.scanner.scanner import Scanner, tokenize
from froggy.token import Token
from froggy.tree.tree import Node, ParseTree, Rule
from froggy.type import Type
from froggy.util import Span
