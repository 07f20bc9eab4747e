""" Interactive read-eval-print loop around a Session. """
import sys

from constants import CONTINUATION_PROMPT, CWD_VAR, PROMPT_SUFFIX
from error_display import render_error
from session import Session


def open_brackets(text: str) -> int:
    """ How many ( or [ are still unclosed, ignoring any inside string literals. """
    depth = 0
    in_string = False
    for ch in text:
        if ch == '"':
            in_string = not in_string
        elif in_string:
            continue
        elif ch in "([":
            depth += 1
        elif ch in ")]":
            depth -= 1
    return depth


def read_command(prompt=PROMPT_SUFFIX):
    """ Read one command, which may span several lines.

    A trailing backslash joins the next line directly; an unclosed bracket
    keeps reading, with a space where the line break was.
    """
    text = ""
    while True:
        line = input(prompt)
        prompt = CONTINUATION_PROMPT
        if line.endswith("\\"):
            text += line[:-1]
        elif open_brackets(text + line) > 0:
            text += line + " "
        else:
            return text + line


class Shell:
    def __init__(self, session: Session, color: bool = True):
        self.session = session
        self.color = color

    @property
    def prompt(self) -> str:
        return self.session.get_var(CWD_VAR) + PROMPT_SUFFIX

    def execute(self, line: str) -> bool:
        """ Interpret one block, print its result or error; True on success. """
        try:
            output = self.session.interpret(line)
        except Exception as e:
            print(render_error(e, line, self.color), file=sys.stderr)
            return False

        if output:
            print(output)
        return True

    def run(self):
        while True:
            try:
                line = read_command(self.prompt)
                if not line.strip():
                    continue
                self.execute(line)

            except EOFError:
                print()
                return 0

            except KeyboardInterrupt:
                print()
