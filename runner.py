""" Run external programs.

Two strategies exist. "capture" pipes the child's stdout so the result can be
used in expressions, while stdin and stderr stay on the terminal. "inherit"
hands all three streams to the child so interactive programs work, and the
result only records the exit code.
"""
import logging
import subprocess

from constants import CAPTURE, INHERIT
from exceptions import ProcessError
from values import ProcessResult

logger = logging.getLogger(__name__)

STRATEGIES = {}


def strategy(name):
    """Decorator to register process strategies"""
    def wrapper(cls):
        STRATEGIES[name] = cls
        cls.name = name
        return cls
    return wrapper


def get_runner(name: str):
    try:
        return STRATEGIES[name]()
    except KeyError:
        known = ", ".join(sorted(STRATEGIES))
        raise ValueError(f"unknown process strategy {name!r} (expected one of: {known})") from None


class Runner:
    """ Base class for process strategies. """
    name = None

    def spawn(self, argv: list[str]) -> subprocess.CompletedProcess:
        raise NotImplementedError

    def result(self, completed: subprocess.CompletedProcess) -> ProcessResult:
        raise NotImplementedError

    def run(self, path: str, args: list[str]) -> ProcessResult:
        argv = [path] + args
        logger.debug("spawning %r (%s)", argv, self.name)
        try:
            completed = self.spawn(argv)
        except OSError as e:
            raise ProcessError(path, e.strerror or str(e)) from e
        logger.debug("%s exited with %d", path, completed.returncode)
        return self.result(completed)


@strategy(CAPTURE)
class CaptureRunner(Runner):
    def spawn(self, argv):
        return subprocess.run(argv, stdout=subprocess.PIPE)

    def result(self, completed):
        stdout = completed.stdout.decode("utf-8", errors="replace")
        return ProcessResult(completed.returncode, stdout)


@strategy(INHERIT)
class InheritRunner(Runner):
    def spawn(self, argv):
        return subprocess.run(argv)

    def result(self, completed):
        return ProcessResult(completed.returncode)
