import pytest

from froggy import Scanner, Span, Token, Type, tokenize
from froggy.error.scanner_error import UnexpectedCharacterError, UnterminatedStringError
from tests.test_util import open_file


def types(tokens):
    return [token.type for token in tokens]


def test_scan(countdown_program: str):
    scanner = Scanner(countdown_program)
    tokens = scanner.scan()

    expected = [
        Token("PLOP", Type.PLOP),
        Token("10", Type.NUMBER),
        Token("LILY", Type.LILY),
        Token("loop", Type.IDENTIFIER),
        Token("DUP", Type.DUP),
    ]

    assert tokens[:5] == expected
    assert tokens[-1].type == Type.EOF
    assert scanner.errors == []


def test_empty():
    scanner = Scanner("")
    tokens = scanner.scan()
    assert tokens == [Token("", Type.EOF)]
    assert tokens[0].span == Span(0, 0)
    assert scanner.errors == []


def test_scan_file(file: str):
    program: str = open_file(file)
    tokens, _errors = tokenize(program)

    # Specifically, ensure no crashing, and that we always end with EOF
    assert tokens[-1].type == Type.EOF
    assert tokens[-1].span == Span(len(program), len(program))
    assert all(token.type != Type.COMMENT for token in tokens)


def test_spans_ignore_extras():
    program = "RIBBIT // drop\nCROAK"
    tokens = Scanner(program).scan()

    assert types(tokens) == [Type.RIBBIT, Type.CROAK, Type.EOF]
    assert tokens[0].span == Span(0, 6)
    assert tokens[1].span == Span(15, 20)
    assert all(token.span.text(program) == token.text for token in tokens)


def test_comment_at_end_of_program():
    tokens = Scanner("CROAK // bye").scan()
    assert types(tokens) == [Type.CROAK, Type.EOF]


def test_keep_comments():
    tokens = Scanner("RIBBIT // drop\nCROAK", keep_comments=True).scan()
    assert types(tokens) == [Type.RIBBIT, Type.COMMENT, Type.CROAK, Type.EOF]
    assert tokens[1].text == "// drop"


@pytest.mark.parametrize("keyword", [_type for _type in Type if _type.is_keyword])
def test_keywords(keyword: Type):
    tokens = Scanner(f"  {keyword.value}\n").scan()
    assert tokens == [Token(keyword.value, keyword), Token("", Type.EOF)]


@pytest.mark.parametrize(
    "program", ["HOPPER", "RIBBIT1", "LILY_pad", "_HOP", "ribbit", "Plop"]
)
def test_keyword_identifier_boundary(program: str):
    tokens = Scanner(program).scan()
    assert tokens == [Token(program, Type.IDENTIFIER), Token("", Type.EOF)]


def test_keywords_separated_by_punctuation():
    scanner = Scanner("HOP~PER")
    tokens = scanner.scan()
    assert tokens[:2] == [Token("HOP", Type.HOP), Token("PER", Type.IDENTIFIER)]
    assert len(scanner.errors) == 1


@pytest.mark.parametrize("number", ["0", "12", "3.25", "007.50"])
def test_numbers(number: str):
    tokens = Scanner(number).scan()
    assert tokens[0] == Token(number, Type.NUMBER)
    assert len(tokens) == 2


@pytest.mark.parametrize(
    "program, texts, error_chars",
    [
        ("1.", ["1"], ["."]),
        (".5", ["5"], ["."]),
        ("-3", ["3"], ["-"]),
        ("1e5", ["1", "e5"], []),
    ],
)
def test_number_edge_cases(program: str, texts, error_chars):
    scanner = Scanner(program)
    tokens = scanner.scan()
    assert [token.text for token in tokens[:-1]] == texts
    assert [error.offending_char for error in scanner.errors] == error_chars


def test_string_escapes_are_verbatim():
    program = r'PLOP "a\"b\\c" "\n"'
    scanner = Scanner(program)
    tokens = scanner.scan()

    assert types(tokens) == [Type.PLOP, Type.STRING, Type.STRING, Type.EOF]
    assert tokens[1].text == r'"a\"b\\c"'
    assert tokens[2].text == r'"\n"'
    assert scanner.errors == []


def test_unterminated_string():
    scanner = Scanner('PLOP "abc')
    tokens = scanner.scan()

    assert types(tokens) == [Type.PLOP, Type.EOF]
    assert len(scanner.errors) == 1
    error = scanner.errors[0]
    assert isinstance(error, UnterminatedStringError)
    assert error.position == 5
    assert error.span == Span(5, 9)


def test_unterminated_string_resumes_on_next_line():
    scanner = Scanner('PLOP "abc\\" RIBBIT\nRIBBIT')
    tokens = scanner.scan()

    # The RIBBIT on the first line is part of the failed string
    assert types(tokens) == [Type.PLOP, Type.RIBBIT, Type.EOF]
    assert tokens[1].span.start == 19
    assert [type(error) for error in scanner.errors] == [UnterminatedStringError]


def test_unexpected_character():
    scanner = Scanner("PLOP 1 ~ ADD")
    tokens = scanner.scan()

    assert types(tokens) == [Type.PLOP, Type.NUMBER, Type.ADD, Type.EOF]
    assert len(scanner.errors) == 1
    error = scanner.errors[0]
    assert isinstance(error, UnexpectedCharacterError)
    assert error.offending_char == "~"
    assert error.position == 7


def test_unexpected_characters_are_reported_one_by_one():
    scanner = Scanner("é$ RIBBIT")
    tokens = scanner.scan()

    assert types(tokens) == [Type.RIBBIT, Type.EOF]
    assert [error.offending_char for error in scanner.errors] == ["é", "$"]


def test_tokenize(hello_program: str):
    tokens, errors = tokenize(hello_program)
    assert errors == []
    assert tokens[:3] == [
        Token("PLOP", Type.PLOP),
        Token('"Hello, pond!"', Type.STRING),
        Token("RIBBIT", Type.RIBBIT),
    ]


def test_deterministic(file: str):
    program: str = open_file(file)
    first_tokens, first_errors = tokenize(program)
    second_tokens, second_errors = tokenize(program)

    assert first_tokens == second_tokens
    assert [token.span for token in first_tokens] == [
        token.span for token in second_tokens
    ]
    assert first_errors == second_errors
