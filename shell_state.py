""" Variable environment owned by a session. """
import logging
import os

from constants import CWD_VAR, STATUS_VAR
from values import VOID, Num, Str, Value

logger = logging.getLogger(__name__)


class ShellState:
    """ Name -> Value mapping seeded from the host environment.

    The PWD entry is a snapshot taken here; it is not updated if the working
    directory changes afterwards.
    """

    def __init__(self, environ=None, cwd=None):
        if environ is None:
            environ = os.environ
        if cwd is None:
            cwd = os.getcwd()

        self.vars = {name: Str(value) for name, value in environ.items()}
        self.vars[CWD_VAR] = Str(cwd)

    def set_var(self, name: str, value: Value):
        self.vars[name] = value

    def get_var(self, name: str) -> Value:
        return self.vars.get(name, VOID)

    def set_status(self, status: int):
        self.vars[STATUS_VAR] = Num(status)

    @property
    def last_status(self) -> int|None:
        status = self.vars.get(STATUS_VAR)
        return int(status.number) if isinstance(status, Num) else None

    def snapshot(self) -> dict:
        # Values are immutable, so a shallow copy is a full checkpoint.
        return dict(self.vars)

    def restore(self, snapshot: dict):
        logger.debug("rolling back environment to %d entries", len(snapshot))
        self.vars.clear()
        self.vars.update(snapshot)
