""" Format interpreter errors for the terminal, with a caret under the culprit. """
from termcolor import colored

from exceptions import ShellError

ERROR = "red"


def source_line(source: str, offset: int):
    """ Return (line text, column) for an offset into source. """
    start = source.rfind("\n", 0, offset) + 1
    end = source.find("\n", offset)
    if end == -1:
        end = len(source)
    return source[start:end], offset - start


def diagnose(source: str, offset: int, length: int = 1, color: bool = True) -> str:
    """ Two lines: the source line with the offending span highlighted, then a marker. """
    line, col = source_line(source, offset)
    end = min(max(col + length, col + 1), max(len(line), col + 1))

    def paint(text):
        return colored(text, ERROR, attrs=["bold"]) if color else text

    diagnosis = "  " + line[:col] + paint(line[col:end]) + line[end:] + "\n"
    diagnosis += "  " + " " * col + paint("^" + "~" * (end - col - 1))
    return diagnosis


def render_error(error: BaseException, source: str = "", color: bool = True) -> str:
    label = "error: "
    if not isinstance(error, ShellError):
        label = "[internal] error: "
        message = f"{type(error).__name__}: {error}"
    else:
        message = str(error)

    text = (colored(label, ERROR, attrs=["bold"]) if color else label) + message

    offset = getattr(error, "offset", None)
    if offset is not None and source and offset < len(source) and source[offset] != "\n":
        text += "\n" + diagnose(source, offset, getattr(error, "length", 1), color)
    return text
