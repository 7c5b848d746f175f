import io
import unittest
from unittest.mock import MagicMock

from cqlab.exercises import ERROR, FAILED, IGNORED, PASSED, ExerciseContext, Lab
from cqlab.model import Row, ValueKind
from cqlab.renderers import CsvTableRenderer
from fakes import user_result


class TestExerciseContext(unittest.TestCase):

    def setUp(self):
        self.out = io.StringIO()
        self.ctx = ExerciseContext(self.out)

    def test_comment(self):
        self.ctx.comment("Did we get 1 user?")
        self.assertEqual(self.out.getvalue(), "> Did we get 1 user?\n")

    def test_check_records_and_prints(self):
        self.assertTrue(self.ctx.check(1 + 1 == 2, "arithmetic"))
        self.assertFalse(self.ctx.check(False))
        self.assertEqual([c.passed for c in self.ctx.checks], [True, False])
        self.assertIn("OK: arithmetic", self.out.getvalue())
        self.assertIn("FAILED: check #2", self.out.getvalue())

    def test_display_rows(self):
        self.ctx.display([Row.from_mapping({"id": "1", "age": 5}, {"age": ValueKind.NUMERIC})])
        self.assertIn("|1 |  5|", self.out.getvalue())

    def test_display_empty_rows(self):
        self.ctx.display([])
        self.assertEqual(self.out.getvalue(), "Nothing\n")

    def test_display_result_set(self):
        self.ctx.display(user_result(("123", "jon", 32)))
        self.assertIn("|123|jon | 32|", self.out.getvalue())

    def test_display_list_shaped_result_set(self):
        """A result set that is a list of driver rows is read through its column names."""
        result = user_result(("123", "jon", 32), ("456", "mary", 25))
        self.assertIsInstance(result, list)
        self.ctx.display(result)
        self.assertEqual(self.out.getvalue(), "\n".join([
            "+---+----+---+",
            "|id |name|age|",
            "+---+----+---+",
            "|123|jon | 32|",
            "|456|mary| 25|",
            "+---+----+---+",
        ]) + "\n")

    def test_display_tuple_of_rows(self):
        self.ctx.display((Row.from_mapping({"id": "7"}),))
        self.assertIn("|7 |", self.out.getvalue())

    def test_display_uses_renderer(self):
        ctx = ExerciseContext(self.out, CsvTableRenderer())
        ctx.display(user_result(("123", "jon", 32)))
        self.assertIn("123,jon,32", self.out.getvalue())


class TestLab(unittest.TestCase):

    def setUp(self):
        self.lab = Lab("Sample lab")
        self.calls = []

        @self.lab.exercise("passes")
        def passes(session, ctx):
            self.calls.append("passes")
            ctx.check(True, "fine")

        @self.lab.exercise("skipped", ignore=True)
        def skipped(session, ctx):
            self.calls.append("skipped")

        @self.lab.exercise("fails")
        def fails(session, ctx):
            self.calls.append("fails")
            ctx.check(False, "wrong")
            ctx.check(True, "still checked")

        @self.lab.exercise("raises")
        def raises(session, ctx):
            self.calls.append("raises")
            session.execute("SELECT * FROM missing")

        @self.lab.exercise("after error")
        def after_error(session, ctx):
            self.calls.append("after error")

        self.session = MagicMock()
        self.session.execute.side_effect = RuntimeError("unconfigured table missing")
        self.out = io.StringIO()
        self.results = self.lab.run(self.session, out=self.out)

    def test_names_in_order(self):
        self.assertEqual(
            self.lab.names(),
            ["passes", "skipped", "fails", "raises", "after error"],
        )

    def test_ignored_exercise_not_called(self):
        self.assertNotIn("skipped", self.calls)
        self.assertEqual(self.calls, ["passes", "fails", "raises", "after error"])

    def test_statuses(self):
        statuses = {r.name: r.status for r in self.results}
        self.assertEqual(statuses, {
            "passes": PASSED,
            "skipped": IGNORED,
            "fails": FAILED,
            "raises": ERROR,
            "after error": PASSED,
        })

    def test_failed_check_does_not_stop_exercise(self):
        failed = self.results[2]
        self.assertEqual([c.label for c in failed.checks], ["wrong", "still checked"])

    def test_error_recorded(self):
        errored = self.results[3]
        self.assertIsInstance(errored.error, RuntimeError)
        self.assertFalse(errored.ok)
        self.assertIn("ERROR: RuntimeError: unconfigured table missing", self.out.getvalue())

    def test_banners(self):
        output = self.out.getvalue()
        self.assertTrue(output.startswith("=== Sample lab ===\n"))
        self.assertIn("--- Exercise: passes ---", output)
        self.assertIn("--- Exercise: skipped (ignored) ---", output)


if __name__ == "__main__":
    unittest.main()
