""" A session keeps one variable environment alive across many lines of input. """
from constants import DEFAULT_STRATEGY
from evaluator import Evaluator
from exceptions import NestingError
from lexer import tokenize
from parser import parse
from runner import get_runner
from shell_state import ShellState


class Session:
    """Governs an interpreter session: tokenize, parse and evaluate each input
    against the same environment. A call either succeeds as a whole or leaves
    the environment exactly as it found it.
    """

    def __init__(self, strategy=DEFAULT_STRATEGY, environ=None, cwd=None):
        self.state = ShellState(environ, cwd)
        self.runner = get_runner(strategy)
        self.evaluator = Evaluator(self.state, self.runner)

    @property
    def strategy(self) -> str:
        return self.runner.name

    def get_var(self, name: str) -> str:
        return self.state.get_var(name).display()

    def interpret(self, text: str) -> str:
        """ Run text and return the displayed results joined by newlines. """
        tokens = tokenize(text)
        try:
            prog = parse(tokens)
        except RecursionError:
            raise NestingError("expression is nested too deeply to parse") from None

        checkpoint = self.state.snapshot()
        try:
            outputs = self.evaluator.run(prog)
            # Displaying deeply nested arrays recurses too.
            return "\n".join(value.display() for value in outputs)
        except RecursionError:
            self.state.restore(checkpoint)
            raise NestingError("expression is nested too deeply to evaluate") from None
        except BaseException:
            self.state.restore(checkpoint)
            raise
