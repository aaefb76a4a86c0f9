from froggy.error.error import FroggyError, FroggyException


class ScannerException(FroggyException):
    pass


class LexError(FroggyError):
    def create_error(self, before: str, after=""):
        return super().create_error(before, after=after)


class UnexpectedCharacterError(LexError):
    @property
    def offending_char(self) -> str:
        return self.error_chars

    def __str__(self) -> str:
        multiple_unexpected_chars = len(self.span) > 1
        return self.create_error(
            f"Unexpected character{'s' if multiple_unexpected_chars else ''} {self.error_chars!r} on {self.lines_str}."
        )


class UnterminatedStringError(LexError):
    def __str__(self) -> str:
        return self.create_error(
            f"Found unterminated string on {self.lines_str}.",
            'Strings must be closed with a \'"\' before the end of the line.',
        )
