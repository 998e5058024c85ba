#logger_test.py

import io
import os
import sys
import tempfile
import unittest
from huffcodec.logger import Logger, Log, LogLevel, CodingLog, MergeProgressStep, TreeConstructionLog

class TestLogger(unittest.TestCase):
    def setUp(self):
        self.logger = Logger()
        self.saved_stdout = sys.stdout
        self.captured_output = io.StringIO()
        sys.stdout = self.captured_output

    def tearDown(self):
        sys.stdout = self.saved_stdout

    def test_invalid_log(self):
        with self.assertRaises(ValueError):
            self.logger.log(123)

    def test_string_log(self):
        self.logger.log("plain message")
        self.assertEqual(len(self.logger.logs), 1)
        self.assertEqual(self.logger.logs[0].type_name, "General")
        self.assertEqual(self.logger.logs[0].level, LogLevel.INFO)
        self.assertEqual(self.captured_output.getvalue(), "")

    def test_warning_logging(self):
        warning_log = Log("WarningTest", LogLevel.WARNING, "This is a warning")
        self.logger.log(warning_log)
        self.assertEqual(len(self.logger.logs), 1)
        printed_output = self.captured_output.getvalue()
        self.assertIn("This is a warning", printed_output)

    def test_error_logging(self):
        error_log = Log("ErrorTest", LogLevel.ERROR, "This is an error")
        self.logger.log(error_log)
        self.assertEqual(len(self.logger.logs), 1)

        printed_output = self.captured_output.getvalue()
        self.assertIn("This is an error", printed_output)

    def test_typed_logs(self):
        self.logger.log(TreeConstructionLog(6, 100, 4))
        self.logger.log(CodingLog(3, 7))
        self.assertIn("Alphabet size: 6", self.logger.logs[0].message)
        self.assertIn("Encoded size: 7", self.logger.logs[1].message)

    def test_progress_steps(self):
        self.logger.merge_step_interval_count = 2
        for _ in range(3):
            self.logger.log(MergeProgressStep("Merging nodes", 3))
        self.assertEqual(self.logger.get_progress_count(MergeProgressStep), 3)
        self.assertEqual(len(self.logger.logs), 0)
        printed_output = self.captured_output.getvalue()
        self.assertIn("Merging nodes (2/3)", printed_output)
        self.assertNotIn("(1/3)", printed_output)
        self.assertNotIn("(3/3)", printed_output)

    def test_record_progress(self):
        self.logger.record_progress = True
        self.logger.display_progress = False
        self.logger.log(MergeProgressStep("Merging nodes"))
        self.assertEqual(len(self.logger.logs), 1)
        self.assertEqual(self.logger.logs[0].message, "Merging nodes (1)")

    def test_save(self):
        self.logger.record_progress = True
        self.logger.display_progress = False
        self.logger.log(CodingLog(3, 7))
        self.logger.log(MergeProgressStep("Merging nodes"))
        with tempfile.NamedTemporaryFile(delete=False) as temp_file:
            temp_file_name = temp_file.name
        try:
            self.logger.save(temp_file_name)
            with open(temp_file_name) as file:
                lines = file.read().splitlines()
            self.assertEqual(len(lines), 1)
            self.assertIn("Coding_log", lines[0])
        finally:
            os.remove(temp_file_name)

if __name__ == '__main__':
    unittest.main()
