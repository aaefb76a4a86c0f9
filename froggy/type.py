from enum import Enum


class Type(Enum):
    # Stack operations
    RIBBIT = "RIBBIT"
    CROAK = "CROAK"
    PLOP = "PLOP"
    SPLASH = "SPLASH"
    GULP = "GULP"
    BURP = "BURP"
    # Control flow & labels
    HOP = "HOP"
    LEAP = "LEAP"
    LILY = "LILY"
    # Stack manipulation
    DUP = "DUP"
    SWAP = "SWAP"
    OVER = "OVER"
    # Arithmetic
    ADD = "ADD"
    SUB = "SUB"
    MUL = "MUL"
    DIV = "DIV"
    # Comparison
    EQUALS = "EQUALS"
    NOT_EQUAL = "NOT_EQUAL"
    LESS_THAN = "LESS_THAN"
    GREATER_THAN = "GREATER_THAN"
    LESS_EQ = "LESS_EQ"
    GREATER_EQ = "GREATER_EQ"
    # Literals
    NUMBER = 1
    STRING = 2
    IDENTIFIER = 3
    COMMENT = 4
    EOF = 5

    def to_type(type_str: str):
        return Type[type_str]

    @staticmethod
    def keyword(text: str):
        """Return the keyword Type spelled exactly as `text`, or None."""
        return KEYWORDS.get(text)

    @property
    def is_keyword(self) -> bool:
        return isinstance(self.value, str)

    def __str__(self) -> str:
        match self:
            case Type.NUMBER:
                return "number"
            case Type.STRING:
                return "string"
            case Type.IDENTIFIER:
                return "identifier"
            case Type.COMMENT:
                return "comment"
            case Type.EOF:
                return "end of file"
        return repr(self.value)

    def article_str(self) -> str:
        match self:
            case Type.IDENTIFIER | Type.ADD | Type.OVER | Type.EQUALS:
                return f"an {self}"
            case Type.EOF:
                return f"the {self}"
            case _:
                return f"a {self}"


KEYWORDS = {member.value: member for member in Type if member.is_keyword}
