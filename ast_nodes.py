""" Syntax tree produced by the parser. """


class Node:
    """ Base class for syntax tree nodes; equal when type and fields match. """
    fields = ()
    # Source span of the token that introduced the node; not part of equality.
    offset = None
    length = 1

    def __eq__(self, other):
        return type(self) is type(other) and all(
            getattr(self, f) == getattr(other, f) for f in self.fields
        )

    def __repr__(self):
        args = ", ".join(repr(getattr(self, f)) for f in self.fields)
        return f"{type(self).__name__}({args})"


# -------------------------
# Program chain
# -------------------------
class Prog(Node):
    """ A statement sequence: either StmtProg(stmt, rest) or End(). """

    def __iter__(self):
        prog = self
        while isinstance(prog, StmtProg):
            yield prog.stmt
            prog = prog.rest


class StmtProg(Prog):
    fields = ("stmt", "rest")

    def __init__(self, stmt, rest: Prog):
        self.stmt = stmt
        self.rest = rest


class End(Prog):
    pass


def chain(stmts) -> Prog:
    """ Link a list of statements into a Prog ending in End(). """
    prog = End()
    for stmt in reversed(stmts):
        prog = StmtProg(stmt, prog)
    return prog


# -------------------------
# Statements
# -------------------------
class Assign(Node):
    fields = ("name", "expr")

    def __init__(self, name: str, expr):
        self.name = name
        self.expr = expr


class ExprStmt(Node):
    fields = ("expr",)

    def __init__(self, expr):
        self.expr = expr


# -------------------------
# Expressions
# -------------------------
class BinOp(Node):
    fields = ("left", "right")

    def __init__(self, left, right):
        self.left = left
        self.right = right


class Add(BinOp):
    pass


class Sub(BinOp):
    pass


class Mul(BinOp):
    pass


class Div(BinOp):
    pass


class Mod(BinOp):
    pass


class Num(Node):
    fields = ("value",)

    def __init__(self, value: float):
        self.value = value


class Str(Node):
    fields = ("text",)

    def __init__(self, text: str):
        self.text = text


class Var(Node):
    fields = ("name",)

    def __init__(self, name: str):
        self.name = name


class Path(Node):
    fields = ("text",)

    def __init__(self, text: str):
        self.text = text


class Param(Node):
    fields = ("text",)

    def __init__(self, text: str):
        self.text = text


class Command(Node):
    """ An external program invocation; path is always a Path node. """
    fields = ("path", "args")

    def __init__(self, path: Path, args: list):
        self.path = path
        self.args = args


class Arr(Node):
    fields = ("items",)

    def __init__(self, items=()):
        self.items = list(items)
