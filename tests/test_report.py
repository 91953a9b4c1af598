import io
import unittest
from unittest import mock

from chmodrt.errors import StreamError
from chmodrt.report import Outcome, Reporter


class ReporterTests(unittest.TestCase):
    def setUp(self) -> None:
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()

    def report_all(self, verbose: bool) -> None:
        reporter = Reporter(self.stdout, self.stderr, verbose)
        reporter.report(Outcome.changed, "a")
        reporter.report(Outcome.would_change, "b")
        reporter.report(Outcome.skipped, "c")
        reporter.report(Outcome.not_found, "d")
        reporter.report(Outcome.failed, "e", "Permission denied")

    def test_verbose(self) -> None:
        self.report_all(verbose=True)
        self.assertEqual(self.stdout.getvalue(), '"a": mode changed.\n"b": mode will be changed.\n')
        self.assertEqual(
            self.stderr.getvalue(),
            '"c": skipped.\n'
            'Error: cannot find "d": no such file or directory\n'
            'Error: cannot access "e": Permission denied\n',
        )

    def test_quiet(self) -> None:
        self.report_all(verbose=False)
        self.assertEqual(self.stdout.getvalue(), '"b": mode will be changed.\n')
        self.assertEqual(
            self.stderr.getvalue(),
            'Error: cannot find "d": no such file or directory\nError: cannot access "e": Permission denied\n',
        )

    def test_write_failure_is_stream_error(self) -> None:
        stdout = mock.Mock()
        stdout.write.side_effect = BrokenPipeError(32, "Broken pipe")
        reporter = Reporter(stdout, self.stderr)
        with self.assertRaises(StreamError):
            reporter.report(Outcome.would_change, "a")


if __name__ == "__main__":
    unittest.main()
