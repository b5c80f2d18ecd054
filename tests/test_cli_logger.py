import io
import os
import tempfile
import unittest
from unittest.mock import patch

from deploybuilder import cli_logger


class TestLogger(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.base = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def test_writes_log_file(self):
        log_dir = os.path.join(self.base, "logs")
        with patch('deploybuilder.cli_logger.LOG_DIR', log_dir), patch('sys.stdout', new_callable=io.StringIO):
            logger = cli_logger.Logger()
            logger._log("INFO", "resolved", "")
            latest = cli_logger.get_latest_log_file()

        self.assertEqual(latest, logger.log_file)
        with open(latest) as f:
            self.assertIn("[INFO] resolved", f.read())

    def test_uncreatable_log_directory_falls_back_to_console(self):
        blocker = os.path.join(self.base, "blocker")
        with open(blocker, "w") as f:
            f.write("")
        log_dir = os.path.join(blocker, "logs")

        with patch('deploybuilder.cli_logger.LOG_DIR', log_dir), \
                patch('sys.stderr', new_callable=io.StringIO) as stderr:
            logger = cli_logger.Logger()
            logger.error("still reported")
            latest = cli_logger.get_latest_log_file()

        self.assertIsNone(logger.log_file)
        self.assertIsNone(latest)
        self.assertIn("file logging disabled", stderr.getvalue())
        self.assertIn("still reported", stderr.getvalue())

    def test_unwritable_log_file_disables_file_logging(self):
        with patch('deploybuilder.cli_logger.LOG_DIR', self.base), \
                patch('sys.stderr', new_callable=io.StringIO):
            logger = cli_logger.Logger()
            logger.log_file = os.path.join(self.base, "missing", "run.log")
            logger.warning("first")
            logger.warning("second")

        self.assertIsNone(logger.log_file)


if __name__ == "__main__":
    unittest.main()
