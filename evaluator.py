""" Tree-walking evaluation of parsed programs. """
import math

import ast_nodes as ast
from exceptions import EvalTypeError, ProcessError, ShellError
from shell_state import ShellState
from values import VOID, Arr, Num, Str, Value


def add(left: Value, right: Value) -> Value|None:
    if isinstance(left, Num) and isinstance(right, Num):
        return Num(left.number + right.number)
    if isinstance(left, Str) and isinstance(right, Str):
        return Str(left.text + right.text)
    if isinstance(left, Arr) and isinstance(right, Arr):
        # Concatenation flattens: nested arrays never survive an addition.
        return Arr(list(left.flattened()) + list(right.flattened()))
    return None


def numeric(op):
    """ Lift an operation on two floats to Num values; anything else gives None. """
    def apply(left: Value, right: Value) -> Value|None:
        if isinstance(left, Num) and isinstance(right, Num):
            return Num(op(left.number, right.number))
        return None
    return apply


def divide(a: float, b: float) -> float:
    """ IEEE-754 division: x/0 is a signed infinity, 0/0 is NaN. """
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def modulo(a: float, b: float) -> float:
    """ Floating remainder taking the sign of the dividend, as C fmod does. """
    if b == 0 or math.isinf(a) or math.isnan(a) or math.isnan(b):
        return math.nan
    return math.fmod(a, b)


# node type -> (operation on two values, error message)
OPERATORS = {
    ast.Add: (add, "can only add values of the same type"),
    ast.Sub: (numeric(lambda a, b: a - b), "can only subtract numbers"),
    ast.Mul: (numeric(lambda a, b: a * b), "can only multiply numbers"),
    ast.Div: (numeric(divide), "can only divide numbers"),
    ast.Mod: (numeric(modulo), "can only mod numbers"),
}


class Evaluator:
    """ Evaluates statements against one ShellState, running commands with runner. """

    def __init__(self, state: ShellState, runner):
        self.state = state
        self.runner = runner

    def run(self, prog: ast.Prog) -> list[Value]:
        """ Evaluate every statement in order and return the non-Void results. """
        outputs = []
        for stmt in prog:
            value = self.execute(stmt)
            if value is not VOID:
                outputs.append(value)
        return outputs

    def execute(self, stmt) -> Value:
        if isinstance(stmt, ast.Assign):
            self.state.set_var(stmt.name, self.evaluate(stmt.expr))
            return VOID
        if isinstance(stmt, ast.ExprStmt):
            return self.evaluate(stmt.expr)
        raise ShellError(f"cannot execute {type(stmt).__name__}")

    def evaluate(self, expr) -> Value:
        if isinstance(expr, ast.BinOp):
            return self.evaluate_chain(expr)
        if isinstance(expr, ast.Num):
            return Num(expr.value)
        if isinstance(expr, ast.Str):
            return Str(expr.text)
        if isinstance(expr, (ast.Path, ast.Param)):
            return Str(expr.text)
        if isinstance(expr, ast.Var):
            return self.state.get_var(expr.name)
        if isinstance(expr, ast.Arr):
            return Arr([self.evaluate(item) for item in expr.items])
        if isinstance(expr, ast.Command):
            return self.run_command(expr)

        raise ShellError(f"cannot evaluate {type(expr).__name__}")

    def evaluate_chain(self, expr: ast.BinOp) -> Value:
        """ Fold a left-leaning operator chain without recursing down its left side.

        `1 + 2 + 3` parses as Add(Add(1, 2), 3); long chains would otherwise
        cost one Python frame per operator.
        """
        spine = []
        while isinstance(expr, ast.BinOp):
            spine.append(expr)
            expr = expr.left

        # Left first; each right operand sees anything evaluated before it.
        value = self.evaluate(expr)
        for node in reversed(spine):
            value = self.apply(node, value, self.evaluate(node.right))
        return value

    def apply(self, node: ast.BinOp, left: Value, right: Value) -> Value:
        op, message = OPERATORS[type(node)]
        result = op(left, right)
        if result is None:
            raise EvalTypeError(message).at(node.offset, node.length)
        return result

    def run_command(self, cmd: ast.Command) -> Value:
        args = [self.evaluate(arg).display() for arg in cmd.args]
        try:
            result = self.runner.run(cmd.path.text, args)
        except ProcessError as e:
            raise e.at(cmd.offset, cmd.length)
        self.state.set_status(result.returncode)
        return result
