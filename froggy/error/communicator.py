from typing import List, Sequence, Type

from froggy.util import Colors, LineIndex, Span

# Number of errors that are shown before the rest is omitted
MAX_ERRORS = 10


# Class used to create messages, which can be communicated to the programmer
class Communicator:

    # Creates an appropriate message string from the given arguments
    @staticmethod
    def create_message(
        program: str,
        span: Span,
        class_name="FroggyError",
        before: str = "",
        after: str = "",
        n_before: int = 1,
        n_after: int = 1,
        color=Colors.RED,
    ) -> str:
        line_index = LineIndex(program)
        start_ln, start_col = line_index.line_col(span.start)
        end_ln, end_col = line_index.line_col(span.end)
        multiline = start_ln != end_ln

        # Unlike `splitlines`, keep the empty line after a trailing newline,
        # as the EOF token lives there.
        lines = [line.rstrip("\r") for line in program.split("\n")]
        error_lines = lines[max(0, start_ln - n_before - 1) : end_ln + n_after]
        final_error_lines = []
        start_line_no = max(1, start_ln - n_before)
        end_line_no = start_line_no + len(error_lines) - 1
        for i, line in enumerate(error_lines, start=start_line_no):
            # Determine the number of spaces between e.g. '8.' and the code.
            # See the * in the following example:
            #    *8. PLOP 1
            # -> *9. PLOP
            #    10. ADD
            padding = " " * (len(str(end_line_no)) - len(str(i)))
            final_line = ""
            if start_ln <= i <= end_ln:
                # First line
                if i == start_ln:
                    # Do not color outside of span on first line
                    final_line += f"-> {padding}{i}. {line[:start_col]}"

                    # If we have more than 1 line, color the remaining line
                    if multiline:
                        final_line += f"{color}{line[start_col:]}{Colors.ENDC}"
                    # If there is one line, color up until the correct col
                    else:
                        final_line += f"{color}{line[start_col:end_col]}{Colors.ENDC}"
                        final_line += line[end_col:]

                # Color lines (if any) that are in between the first and last line
                elif i < end_ln:
                    final_line += f"-> {padding}{i}. {color}{line}{Colors.ENDC}"
                # The last line, of a multiline
                else:
                    final_line += f"-> {padding}{i}. {color}{line[:end_col]}{Colors.ENDC}"
                    final_line += line[end_col:]

            else:
                final_line += f"   {padding}{i}. {line}"
            final_error_lines.append(final_line)

        message = class_name + ": " + before + "\n" + "\n".join(final_error_lines)
        if after:
            message += "\n" + after
        return message

    # Communicates all errors to the programmer by raising `stage_of_exception`,
    # if there are any errors at all
    @staticmethod
    def communicate(errors: Sequence, stage_of_exception: Type[Exception]) -> None:
        errors = Communicator.combine_errors(errors)
        if not errors:
            return

        message = "".join("\n\n" + str(error) for error in errors[:MAX_ERRORS])
        if len(errors) > MAX_ERRORS:
            omitting_multiple_errors = len(errors) - MAX_ERRORS > 1
            message += f"\n\nShowing {MAX_ERRORS} errors, omitting {len(errors) - MAX_ERRORS} error{'s' if omitting_multiple_errors else ''}..."
        raise stage_of_exception(message)

    @staticmethod
    def combine_errors(errors: Sequence) -> List:
        """Sort the errors by position, and merge directly adjacent
        UnexpectedCharacterErrors into one error spanning all characters.

        The given errors are left untouched.
        """
        from froggy.error.scanner_error import UnexpectedCharacterError

        combined = []
        for error in sorted(errors, key=lambda error: (error.span.start, error.span.end)):
            previous = combined[-1] if combined else None
            if (
                isinstance(previous, UnexpectedCharacterError)
                and isinstance(error, UnexpectedCharacterError)
                and previous.span.end == error.span.start
            ):
                combined[-1] = UnexpectedCharacterError(
                    previous.program, previous.span & error.span
                )
            else:
                combined.append(error)
        return combined
