from dataclasses import dataclass

from froggy.error.communicator import Communicator
from froggy.util import LineIndex, Span


# Python exceptions to differentiate the stage in which errors are raised
class FroggyException(Exception):
    pass


@dataclass
class FroggyError:
    program: str
    span: Span

    def create_error(self, before: str = "", after: str = "", class_name=None):
        return Communicator.create_message(
            self.program,
            self.span,
            class_name or self.__class__.__name__,
            before,
            after,
        )

    # Give the characters that caused the error
    @property
    def error_chars(self) -> str:
        return self.span.text(self.program)

    @property
    def lines_str(self) -> str:
        return LineIndex(self.program).lines_str(self.span)

    @property
    def position(self) -> int:
        return self.span.start
