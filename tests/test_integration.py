# tests/test_integration.py

import io
import unittest

import numpy as np
import pandas as pd

import exptree
from exptree.executor.session import (
    REPORT_COLUMNS,
    ExpressionSession,
    evaluate_batch,
    process_expression
)
from exptree.parser.config import ParserConfig
from main import main


class TestProcessExpression(unittest.TestCase):

    def test_numerical_expression(self):
        report = process_expression("(1+2)*3")
        self.assertTrue(report.accepted)
        self.assertEqual(report.tokens, "( 1 + 2 ) * 3")
        self.assertEqual(report.infix, "((1 + 2) * 3)")
        self.assertTrue(report.numerical)
        self.assertEqual(report.value, 9.0)
        self.assertIsNone(report.error)

    def test_symbolic_expression(self):
        report = process_expression("x + 1")
        self.assertTrue(report.accepted)
        self.assertFalse(report.numerical)
        self.assertIsNone(report.value)

    def test_rejected_expression(self):
        report = process_expression("2*3*4")
        self.assertFalse(report.accepted)
        self.assertIsNone(report.infix)
        self.assertIn("Unexpected token", report.error)

    def test_division_by_zero(self):
        report = process_expression("4/0")
        self.assertTrue(report.accepted)
        self.assertTrue(report.numerical)
        self.assertIsNone(report.value)
        self.assertIn("division by zero", report.error)

    def test_literal_too_large(self):
        report = process_expression("1" * 400 + "+1")
        self.assertTrue(report.accepted)
        self.assertTrue(report.numerical)
        self.assertIsNone(report.value)
        self.assertIn("number too large", report.error)

    def test_product_out_of_range(self):
        nines = "9" * 200
        report = process_expression(f"{nines}*{nines}")
        self.assertIsNone(report.value)
        self.assertIn("result too large", report.error)

    def test_very_long_additive_chain(self):
        report = process_expression("+".join(["1"] * 5000))
        self.assertFalse(report.accepted)
        self.assertIsNone(report.infix)
        self.assertEqual(report.error, "Expression too long to parse")

    def test_tree_outline(self):
        report = process_expression("1+x", show_tree=True)
        self.assertEqual(report.tree_outline.splitlines()[0], "symbol: +")


class TestExpressionSession(unittest.TestCase):

    def run_session(self, text: str) -> str:
        stdout = io.StringIO()
        session = ExpressionSession(ParserConfig(), stdin=io.StringIO(text), stdout=stdout)
        self.assertEqual(session.run(), 0)
        return stdout.getvalue()

    def test_dialogue(self):
        output = self.run_session("(1+2)*3\nx+1\n2*3*4\n4/0\n!\n")
        self.assertIn("the token list is ( 1 + 2 ) * 3\n", output)
        self.assertIn("in infix notation: ((1 + 2) * 3)\nthe value is 9\n", output)
        self.assertIn("in infix notation: (x + 1)\nthis is not a numerical expression\n", output)
        self.assertIn("the token list is 2 * 3 * 4\nthis is not an expression\n", output)
        self.assertIn("the value is undefined: division by zero", output)
        self.assertTrue(output.endswith("give an expression: good bye\n"))
        self.assertEqual(output.count("give an expression: "), 5)

    def test_sentinel_stops_immediately(self):
        self.assertEqual(self.run_session("!\n1+1\n"), "give an expression: good bye\n")

    def test_end_of_input_without_sentinel(self):
        output = self.run_session("1+1\n")
        self.assertIn("the value is 2\n", output)
        self.assertTrue(output.endswith("good bye\n"))

    def test_dialogue_continues_after_oversized_lines(self):
        chain = "+".join(["1"] * 5000)
        output = self.run_session(f"{'1' * 400}\n{chain}\n2+2\n!\n")
        self.assertIn("the value is undefined: number too large", output)
        self.assertIn("this is not an expression\n", output)
        self.assertIn("the value is 4\n", output)
        self.assertTrue(output.endswith("good bye\n"))

    def test_custom_sentinel(self):
        stdout = io.StringIO()
        config = ParserConfig(sentinel="quit", prompt="> ")
        session = ExpressionSession(config, stdin=io.StringIO("2*2\nquit\n"), stdout=stdout)
        session.run()
        self.assertEqual(session.processed, 1)
        self.assertTrue(stdout.getvalue().startswith("> the token list is 2 * 2"))


class TestBatchEvaluation(unittest.TestCase):

    def test_batch_frame(self):
        frame = evaluate_batch(["1+2", "x", "2*3*4", "4/0"])
        self.assertIsInstance(frame, pd.DataFrame)
        self.assertEqual(list(frame.columns), REPORT_COLUMNS)
        self.assertEqual(frame['value'].dtype, np.float64)
        self.assertEqual(frame['accepted'].tolist(), [True, True, False, True])
        self.assertEqual(frame['numerical'].tolist(), [True, False, False, True])
        self.assertEqual(frame.loc[0, 'value'], 3.0)
        self.assertTrue(frame['value'].iloc[1:].isna().all())
        self.assertIn("division by zero", frame.loc[3, 'error'])

    def test_empty_batch(self):
        frame = evaluate_batch([])
        self.assertEqual(len(frame), 0)
        self.assertEqual(list(frame.columns), REPORT_COLUMNS)


class TestPublicApi(unittest.TestCase):

    def test_top_level_names(self):
        outcome = exptree.parse("1+2+3")
        tree, rest = outcome
        self.assertTrue(rest.at_end)
        self.assertEqual(exptree.render_infix(tree), "(1 + (2 + 3))")
        self.assertTrue(exptree.is_numerical(tree))
        self.assertEqual(exptree.evaluate(tree), 6.0)
        self.assertEqual(exptree.release(tree), 5)
        self.assertEqual(exptree.release(None), 0)


def test_main_batch_to_csv(tmp_path):
    source = tmp_path / "expressions.txt"
    source.write_text("1+2\n\n(1+2)*3\nx*y\n", encoding="utf-8")
    output = tmp_path / "results.csv"
    assert main(["--file", str(source), "--output", str(output)]) == 0
    results = pd.read_csv(output)
    assert results["expression"].tolist() == ["1+2", "(1+2)*3", "x*y"]
    assert results["value"].iloc[:2].tolist() == [3.0, 9.0]
    assert np.isnan(results["value"].iloc[2])


def test_main_reports_rejected_lines(tmp_path, capsys):
    source = tmp_path / "expressions.txt"
    source.write_text("2*3*4\n", encoding="utf-8")
    assert main(["--file", str(source)]) == 1
    assert "2*3*4" in capsys.readouterr().out


if __name__ == '__main__':
    unittest.main()
