""" Run-time values and the rule for displaying them as text. """
import math
from decimal import Decimal


def format_number(n: float) -> str:
    """ Shortest decimal rendering, no exponent, no trailing '.0'. """
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    if n.is_integer():
        return str(int(n))
    return format(Decimal(repr(n)), "f")


class Value:
    fields = ()

    def display(self) -> str:
        raise NotImplementedError

    def __str__(self):
        return self.display()

    def __eq__(self, other):
        return type(self) is type(other) and all(
            getattr(self, f) == getattr(other, f) for f in self.fields
        )

    def __hash__(self):
        return hash((type(self).__name__,) + tuple(getattr(self, f) for f in self.fields))

    def __repr__(self):
        args = ", ".join(repr(getattr(self, f)) for f in self.fields)
        return f"{type(self).__name__}({args})"


class Str(Value):
    fields = ("text",)

    def __init__(self, text: str):
        self.text = text

    def display(self) -> str:
        return self.text


class Num(Value):
    fields = ("number",)

    def __init__(self, number: float):
        self.number = float(number)

    def display(self) -> str:
        return format_number(self.number)


class Arr(Value):
    fields = ("items",)

    def __init__(self, items=()):
        self.items = tuple(items)

    def display(self) -> str:
        return "[" + ", ".join(item.display() for item in self.items) + "]"

    def flattened(self):
        """ Items with nested arrays spliced in place, depth first. """
        for item in self.items:
            if isinstance(item, Arr):
                yield from item.flattened()
            else:
                yield item


class ProcessResult(Value):
    """ Outcome of an external command.

    stdout is the captured output, or None when the child wrote straight to
    the terminal; in that case the exit code is what gets displayed.
    """
    fields = ("returncode", "stdout")

    def __init__(self, returncode: int, stdout: str|None = None):
        self.returncode = returncode
        self.stdout = stdout

    @property
    def captured(self) -> bool:
        return self.stdout is not None

    def display(self) -> str:
        if self.captured:
            return self.stdout.rstrip("\r\n")
        return str(self.returncode)


class Void(Value):
    """ Absence of a value: unset variables and assignments. """

    def display(self) -> str:
        return ""


VOID = Void()
