""" Lexical analysis: turn a line of text into tokens. """
from constants import LEXICAL_CASES, SPACE_RX
from exceptions import LexError


class Token:
    """ One lexeme. Equality ignores where the token was found. """
    __slots__ = ("kind", "text", "offset", "line", "column")

    def __init__(self, kind: str, text: str, offset: int = 0, line: int = 0, column: int = 0):
        self.kind = kind
        self.text = text
        self.offset = offset
        self.line = line
        self.column = column

    def __eq__(self, other):
        return isinstance(other, Token) and (self.kind, self.text) == (other.kind, other.text)

    def __hash__(self):
        return hash((self.kind, self.text))

    def __repr__(self):
        return f"Token({self.kind!r}, {self.text!r})"


class Lexer:
    """ Cursor over the input; produces tokens until no case matches. """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 0
        self.line_start = 0

    @property
    def remainder(self) -> str:
        return self.text[self.pos:]

    @property
    def column(self) -> int:
        return self.pos - self.line_start

    def skip_whitespace(self):
        m = SPACE_RX.match(self.text, self.pos)
        if m:
            self.pos = m.end()

    def next_token(self) -> Token|None:
        self.skip_whitespace()
        if self.pos >= len(self.text):
            return None

        for kind, pattern in LEXICAL_CASES:
            m = pattern.match(self.text, self.pos)
            if m is None or m.end() == self.pos:
                continue
            tok = Token(kind, m.group(), self.pos, self.line, self.column)
            self.pos = m.end()
            if kind == "NewLine":
                self.line += 1
                self.line_start = self.pos
            return tok

        return None


def tokenize(text: str) -> list[Token]:
    """ Tokenize text, raising LexError if any input is left unconsumed. """
    lexer = Lexer(text)
    tokens = []
    while True:
        tok = lexer.next_token()
        if tok is None:
            break
        tokens.append(tok)

    if lexer.pos < len(text):
        raise LexError(lexer.remainder, lexer.pos, lexer.line, lexer.column)
    return tokens
