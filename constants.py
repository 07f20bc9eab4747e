import re

# Characters that end a bare word (path or parameter value).
WORD_STOP = r"\s;()\"=\[\]{},"

# Lexical cases in priority order: (kind, pattern). Fixed symbols carry their
# own text as kind.
LEXICAL_CASES = [
    ("NewLine", re.compile(r"\n")),
    ("Semi", re.compile(r";")),
    ("(", re.compile(r"\(")),
    (")", re.compile(r"\)")),
    ("[", re.compile(r"\[")),
    ("]", re.compile(r"\]")),
    ("{", re.compile(r"\{")),
    ("}", re.compile(r"\}")),
    ("+", re.compile(r"\+")),
    ("*", re.compile(r"\*")),
    ("%", re.compile(r"%")),
    ("=", re.compile(r"=")),
    ("|", re.compile(r"\|")),
    (",", re.compile(r",")),
    ("@", re.compile(r"@")),
    ("&", re.compile(r"&")),
    # must precede "-" so that -r and --long are flags, not a minus sign
    ("Param", re.compile(rf"--?[A-Za-z][\w-]*(?:=[^{WORD_STOP}]*)?")),
    # must precede "/" so that /bin/ls is a path, not a division
    ("Path", re.compile(rf"/[A-Za-z_.~][^{WORD_STOP}]*")),
    ("-", re.compile(r"-")),
    ("/", re.compile(r"/")),
    (":", re.compile(rf":(?![^{WORD_STOP}])")),
    ("Num", re.compile(r"\d+(?:\.\d+)?")),
    ("Var", re.compile(r"\$(?:[A-Za-z0-9_]+|\?)")),
    ("Str", re.compile(r"\"[^\"]*\"")),
    ("Path", re.compile(rf"[^{WORD_STOP}]+")),
]

SPACE_RX = re.compile(r"[ \t\r]+")

TERMINATORS = ("NewLine", "Semi")

# Token kinds that can begin a factor; a command keeps taking arguments while
# the next token is one of these.
FACTOR_START = ("Num", "Str", "Path", "Param", "Var", "(", "[")

# Session variable written after every external command.
STATUS_VAR = "?"
# Synthetic variable holding the working directory at session start.
CWD_VAR = "PWD"

CAPTURE = "capture"
INHERIT = "inherit"
DEFAULT_STRATEGY = INHERIT

PROMPT_SUFFIX = "> "
CONTINUATION_PROMPT = ". "

# How much of the unconsumed input a lexical error quotes.
LEX_ERROR_CONTEXT = 10
