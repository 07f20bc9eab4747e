""" Parse tokens into a program by recursive descent.

Grammar, loosest binding first:

    Program    := (Statement (NewLine|Semi))* Statement?
    Statement  := Var '=' Expression | Expression
    Expression := Path Factor*                   ; command form
                | Term (('+'|'-') Term)*
    Term       := Factor (('*'|'/'|'%') Factor)*
    Factor     := Num | Str | Path | Param | Var | '(' Expression ')'
                | '[' (Expression (',' Expression)*)? ']'

From parse_statement down, each parse_* function takes the token list and
an index and returns (node, next_index). Nothing here evaluates or does I/O.
"""
import ast_nodes as ast
from constants import FACTOR_START, TERMINATORS
from exceptions import ParseError
from lexer import Token

ADDITIVE = {"+": ast.Add, "-": ast.Sub}
MULTIPLICATIVE = {"*": ast.Mul, "/": ast.Div, "%": ast.Mod}


def peek(tokens: list[Token], i: int) -> Token|None:
    return tokens[i] if i < len(tokens) else None


def kind_at(tokens: list[Token], i: int) -> str|None:
    tok = peek(tokens, i)
    return tok.kind if tok is not None else None


def expect(tokens: list[Token], i: int, kind: str, expected: str) -> int:
    if kind_at(tokens, i) != kind:
        raise ParseError(expected, peek(tokens, i), i)
    return i + 1


def located(node: ast.Node, tok: Token) -> ast.Node:
    """ Record which token a node came from, for error positions. """
    node.offset = tok.offset
    node.length = max(len(tok.text), 1)
    return node


def parse(tokens: list[Token]) -> ast.Prog:
    """ Parse a whole token list into a Prog chain. """
    return ast.chain(parse_program(tokens, 0))


def parse_program(tokens: list[Token], i: int) -> list:
    """ Statements separated by terminators, up to the end of the tokens. """
    stmts = []
    while i < len(tokens):
        # Blank lines and doubled separators are empty statements.
        if kind_at(tokens, i) in TERMINATORS:
            i += 1
            continue

        stmt, i = parse_statement(tokens, i)
        stmts.append(stmt)

        if i < len(tokens):
            i = expect_terminator(tokens, i)
    return stmts


def expect_terminator(tokens: list[Token], i: int) -> int:
    if kind_at(tokens, i) not in TERMINATORS:
        raise ParseError("newline or ';'", peek(tokens, i), i)
    return i + 1


def parse_statement(tokens: list[Token], i: int):
    if kind_at(tokens, i) == "Var" and kind_at(tokens, i + 1) == "=":
        name = var_name(tokens[i])
        expr, i = parse_expression(tokens, i + 2)
        return ast.Assign(name, expr), i

    expr, i = parse_expression(tokens, i)
    return ast.ExprStmt(expr), i


def parse_expression(tokens: list[Token], i: int):
    # A leading bare word always means a command; arithmetic never starts with one.
    if kind_at(tokens, i) == "Path":
        return parse_command(tokens, i)
    return parse_additive(tokens, i)


def parse_command(tokens: list[Token], i: int):
    head = tokens[i]
    path = ast.Path(head.text)
    i += 1
    args = []
    while kind_at(tokens, i) in FACTOR_START:
        arg, i = parse_factor(tokens, i)
        args.append(arg)
    return located(ast.Command(path, args), head), i


def parse_additive(tokens: list[Token], i: int):
    expr, i = parse_term(tokens, i)
    while kind_at(tokens, i) in ADDITIVE:
        tok = tokens[i]
        right, i = parse_term(tokens, i + 1)
        expr = located(ADDITIVE[tok.kind](expr, right), tok)
    return expr, i


def parse_term(tokens: list[Token], i: int):
    expr, i = parse_factor(tokens, i)
    while kind_at(tokens, i) in MULTIPLICATIVE:
        tok = tokens[i]
        right, i = parse_factor(tokens, i + 1)
        expr = located(MULTIPLICATIVE[tok.kind](expr, right), tok)
    return expr, i


def parse_factor(tokens: list[Token], i: int):
    tok = peek(tokens, i)
    kind = tok.kind if tok is not None else None

    if kind == "Num":
        return ast.Num(float(tok.text)), i + 1
    if kind == "Str":
        return ast.Str(tok.text[1:-1]), i + 1
    if kind == "Var":
        return ast.Var(var_name(tok)), i + 1
    if kind == "Path":
        return ast.Path(tok.text), i + 1
    if kind == "Param":
        return ast.Param(tok.text), i + 1
    if kind == "(":
        expr, i = parse_expression(tokens, i + 1)
        i = expect(tokens, i, ")", "')'")
        return expr, i
    if kind == "[":
        return parse_array(tokens, i + 1)

    raise ParseError("a number, string, variable, path or '('", tok, i)


def parse_array(tokens: list[Token], i: int):
    """ Parse the rest of an array literal after its opening bracket. """
    items = []
    if kind_at(tokens, i) == "]":
        return ast.Arr(items), i + 1

    while True:
        item, i = parse_expression(tokens, i)
        items.append(item)
        if kind_at(tokens, i) != ",":
            break
        i += 1

    i = expect(tokens, i, "]", "',' or ']'")
    return ast.Arr(items), i


def var_name(tok: Token) -> str:
    """ Strip the sigil from a Var token. """
    return tok.text[1:]
