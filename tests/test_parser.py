import unittest

import ast_nodes as ast
import parser as parser_mod
from exceptions import ParseError
from lexer import Token, tokenize


def parse_text(text):
    return parser_mod.parse(tokenize(text))


def single_expr(text):
    stmts = list(parse_text(text))
    assert len(stmts) == 1, stmts
    return stmts[0].expr


class TestProgram(unittest.TestCase):
    def test_single_integer(self):
        prog = parser_mod.parse([Token("Num", "1"), Token("NewLine", "\n")])
        self.assertEqual(ast.StmtProg(ast.ExprStmt(ast.Num(1.0)), ast.End()), prog)

    def test_empty_input_is_end(self):
        self.assertEqual(ast.End(), parser_mod.parse([]))

    def test_final_terminator_is_optional(self):
        self.assertEqual(parse_text("1\n"), parse_text("1"))

    def test_multiple_statements_in_order(self):
        stmts = list(parse_text("1 + 1\n2 + 2;3 + 3"))
        self.assertEqual(3, len(stmts))
        self.assertEqual(ast.Add(ast.Num(3.0), ast.Num(3.0)), stmts[2].expr)

    def test_empty_statements_are_skipped(self):
        stmts = list(parse_text("\n\n1;;2\n"))
        self.assertEqual([ast.ExprStmt(ast.Num(1.0)), ast.ExprStmt(ast.Num(2.0))], stmts)


class TestArithmetic(unittest.TestCase):
    def test_multiplicative_binds_tighter(self):
        self.assertEqual(
            ast.Add(ast.Num(1.0), ast.Mul(ast.Num(2.0), ast.Num(3.0))),
            single_expr("1 + 2 * 3"),
        )

    def test_additive_is_left_associative(self):
        self.assertEqual(
            ast.Sub(ast.Sub(ast.Num(8.0), ast.Num(2.0)), ast.Num(1.0)),
            single_expr("8 - 2 - 1"),
        )

    def test_multiplicative_is_left_associative(self):
        self.assertEqual(
            ast.Div(ast.Div(ast.Num(1.0), ast.Num(2.0)), ast.Num(2.0)),
            single_expr("1 / 2 / 2"),
        )

    def test_parens_override_precedence(self):
        self.assertEqual(
            ast.Mul(ast.Add(ast.Num(1.0), ast.Num(2.0)), ast.Num(3.0)),
            single_expr("(1 + 2) * 3"),
        )

    def test_str_quotes_are_stripped(self):
        self.assertEqual(ast.Str("a b"), single_expr('"a b"'))

    def test_path_after_operator_is_a_value(self):
        self.assertEqual(ast.Add(ast.Num(1.0), ast.Path("ls")), single_expr("1 + ls"))


class TestStatements(unittest.TestCase):
    def test_assignment(self):
        stmts = list(parse_text("$a = 1 + 2"))
        self.assertEqual([ast.Assign("a", ast.Add(ast.Num(1.0), ast.Num(2.0)))], stmts)

    def test_var_alone_is_expression(self):
        self.assertEqual(ast.Var("a"), single_expr("$a"))

    def test_assign_command(self):
        stmts = list(parse_text("$out = ls -l"))
        self.assertEqual(
            [ast.Assign("out", ast.Command(ast.Path("ls"), [ast.Param("-l")]))],
            stmts,
        )


class TestCommands(unittest.TestCase):
    def test_parsing_commands(self):
        ts = [
            Token("Path", ".\\this\\is\\a\\path.txt"),
            Token("Str", '"something_else"'),
            Token("Path", ".\\this\\is\\a\\path.txt"),
            Token("Param", "-parameter"),
            Token("Str", '"something_else"'),
            Token("Num", "0.0"),
            Token("Str", '"something_else"'),
            Token("Num", "0.0"),
            Token("Param", "-parameter"),
            Token("NewLine", "\n"),
        ]
        stmts = list(parser_mod.parse(ts))
        self.assertEqual(1, len(stmts))
        cmd = stmts[0].expr
        self.assertIsInstance(cmd, ast.Command)
        self.assertEqual(ast.Path(".\\this\\is\\a\\path.txt"), cmd.path)
        self.assertEqual(len(ts) - 2, len(cmd.args))
        self.assertEqual(
            [ast.Str, ast.Path, ast.Param, ast.Str, ast.Num, ast.Str, ast.Num, ast.Param],
            [type(a) for a in cmd.args],
        )

    def test_command_args_are_factors(self):
        self.assertEqual(
            ast.Command(ast.Path("ls"), [
                ast.Param("-l"),
                ast.Var("dir"),
                ast.Add(ast.Num(1.0), ast.Num(2.0)),
            ]),
            single_expr("ls -l $dir (1 + 2)"),
        )

    def test_command_without_args(self):
        self.assertEqual(ast.Command(ast.Path("pwd"), []), single_expr("pwd"))

    def test_command_in_parens(self):
        self.assertEqual(ast.Command(ast.Path("ls"), []), single_expr("(ls)"))

    def test_command_args_are_not_arithmetic(self):
        with self.assertRaises(ParseError) as ctx:
            parse_text("echo 1 + 2")
        self.assertEqual(2, ctx.exception.index)
        self.assertEqual(Token("+", "+"), ctx.exception.token)

    def test_bare_word_assignment_is_rejected(self):
        with self.assertRaises(ParseError) as ctx:
            parse_text("x = 1")
        self.assertEqual("=", ctx.exception.token.kind)


class TestArrays(unittest.TestCase):
    def test_empty_array(self):
        self.assertEqual(ast.Arr(), single_expr("[]"))

    def test_array_items(self):
        self.assertEqual(
            ast.Arr([ast.Num(1.0), ast.Str("a"), ast.Var("x"), ast.Arr()]),
            single_expr('[1, "a", $x, []]'),
        )

    def test_unclosed_array(self):
        with self.assertRaises(ParseError) as ctx:
            parse_text("[1, 2")
        self.assertIsNone(ctx.exception.token)


class TestPositions(unittest.TestCase):
    def test_operators_remember_their_token(self):
        expr = single_expr("1 + 2 * 3")
        self.assertEqual(2, expr.offset)
        self.assertEqual(6, expr.right.offset)

    def test_command_remembers_its_path(self):
        expr = single_expr("  ./run.sh -v")
        self.assertEqual((2, len("./run.sh")), (expr.offset, expr.length))

    def test_positions_do_not_affect_equality(self):
        self.assertEqual(ast.Add(ast.Num(1.0), ast.Num(2.0)), single_expr("  1+2"))


class TestParseErrors(unittest.TestCase):
    def test_missing_operand(self):
        with self.assertRaises(ParseError) as ctx:
            parse_text("1 +")
        self.assertIsNone(ctx.exception.token)
        self.assertIn("end of input", str(ctx.exception))

    def test_unclosed_paren(self):
        with self.assertRaises(ParseError) as ctx:
            parse_text("(1 + 2")
        self.assertEqual("')'", ctx.exception.expected)

    def test_unexpected_token_names_position(self):
        with self.assertRaises(ParseError) as ctx:
            parse_text("1\n)")
        err = ctx.exception
        self.assertEqual(2, err.index)
        self.assertEqual(1, err.token.line)
        self.assertEqual(2, err.offset)

    def test_two_values_need_a_separator(self):
        with self.assertRaises(ParseError) as ctx:
            parse_text("1 2")
        self.assertEqual(1, ctx.exception.index)
        self.assertEqual("newline or ';'", ctx.exception.expected)


if __name__ == "__main__":
    unittest.main()
