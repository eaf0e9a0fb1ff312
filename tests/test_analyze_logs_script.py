import unittest
import io
import runpy
import shutil
import sys
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

SCRIPT = Path(__file__).parent.parent / "scripts" / "analyze_logs.py"
FIXTURES_DIR = Path(__file__).parent / "fixtures"


class TestAnalyzeLogsScript(unittest.TestCase):
    def setUp(self):
        self.output_dir = Path(tempfile.mkdtemp())
        self.config = self.output_dir / "analyzer.yaml"
        self.config.write_text(
            "analyzer:\n"
            f"  logs_root: '{FIXTURES_DIR.as_posix()}'\n"
            f"  output_dir: '{self.output_dir.as_posix()}'\n"
        )

    def tearDown(self):
        shutil.rmtree(self.output_dir)

    def run_script(self, *args):
        argv = [str(SCRIPT), "--config", str(self.config), *args]
        with patch.object(sys, 'argv', argv), \
                patch('sys.stdout', new_callable=io.StringIO) as stdout, \
                patch('sys.stderr', new_callable=io.StringIO) as stderr:
            with self.assertRaises(SystemExit) as cm:
                runpy.run_path(str(SCRIPT), run_name="__main__")
        return cm.exception.code, stdout.getvalue(), stderr.getvalue()

    def test_markdown_report(self):
        code, stdout, _ = self.run_script("--path", "*.txt", "--from", "2012-05-17")

        self.assertEqual(code, 0)
        self.assertIn("Total requests: 8", stdout)
        report = (self.output_dir / "log_report.md").read_text()
        self.assertIn("| Number of requests | 8 |", report)
        self.assertIn("| From date | 2012-05-17T00:00 |", report)

    def test_asciidoc_report_with_agent_filter(self):
        code, _, _ = self.run_script("--path", "10_lines_test.txt", "--format", "ADOC",
                                     "--filter-field", "agent", "--filter-value", "Wget*")

        self.assertEqual(code, 0)
        report = (self.output_dir / "log_report.adoc").read_text()
        self.assertIn("| Number of requests | 1", report)

    def test_unknown_filter_field_is_ignored(self):
        code, _, stderr = self.run_script("--path", "10_lines_test.txt",
                                          "--filter-field", "ip", "--filter-value", "1.2.3.4")

        self.assertEqual(code, 0)
        self.assertIn("Such a filter doesn't exist", stderr)
        self.assertIn("| Number of requests | 10 |", (self.output_dir / "log_report.md").read_text())

    def test_unparseable_bound_is_ignored(self):
        code, _, stderr = self.run_script("--path", "10_lines_test.txt", "--to", "someday")

        self.assertEqual(code, 0)
        self.assertIn("Unrecognized date for --to", stderr)
        self.assertIn("| To date | - |", (self.output_dir / "log_report.md").read_text())

    def test_unwritable_report_is_a_warning(self):
        self.config.write_text(
            "analyzer:\n"
            f"  logs_root: '{FIXTURES_DIR.as_posix()}'\n"
            f"  output_dir: '{(self.output_dir / 'missing' / 'dir').as_posix()}'\n"
        )
        code, stdout, stderr = self.run_script("--path", "10_lines_test.txt")

        self.assertEqual(code, 0)
        self.assertIn("Total requests: 10", stdout)
        self.assertIn("Error writing report", stderr)
        self.assertNotIn("Report saved", stdout)


if __name__ == '__main__':
    unittest.main()
