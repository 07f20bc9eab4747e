""" Errors raised while tokenizing, parsing or evaluating a line. """
from constants import LEX_ERROR_CONTEXT


class ShellError(Exception):
    """ Base class for every error the interpreter reports to the user. """
    # Offset into the source text and length of the offending span, when known.
    offset = None
    length = 1

    def at(self, offset, length=1):
        """ Attach a source position unless one is already known; returns self. """
        if self.offset is None and offset is not None:
            self.offset = offset
            self.length = max(length, 1)
        return self


class LexError(ShellError):
    def __init__(self, remainder: str, offset: int, line: int, column: int):
        self.remainder = remainder
        self.offset = offset
        self.line = line
        self.column = column
        snippet = remainder[:LEX_ERROR_CONTEXT]
        if len(remainder) > LEX_ERROR_CONTEXT:
            snippet += "..."
        super().__init__(f"unexpected input '{snippet}' at line {line + 1} char {column + 1}")


class ParseError(ShellError):
    def __init__(self, expected: str, token, index: int):
        self.expected = expected
        self.token = token      # None at end of input
        self.index = index
        if token is None:
            where = "end of input"
        else:
            self.offset = token.offset
            self.length = max(len(token.text), 1)
            where = f"token {index} ({token.text!r})"
        super().__init__(f"expected {expected} at {where}")


class EvalTypeError(ShellError):
    """ An operator was applied to values of the wrong kinds. """


class ProcessError(ShellError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class NestingError(ShellError):
    """ Input nested deeper than the interpreter can follow. """
