from __future__ import annotations

import logging
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from podlocate.util.logging import configure_logging
from tests.helpers import reset_logging


class LoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        reset_logging()

    def test_configure_logging_creates_handlers(self) -> None:
        with TemporaryDirectory() as tmpdir:
            log_path = Path(tmpdir) / "logs" / "podlocate.log"
            logger = configure_logging(log_path=log_path)
            logger.info("hello")
            reset_logging()

            self.assertTrue(log_path.exists())
            self.assertIn("hello", log_path.read_text(encoding="utf-8"))

    def test_configure_logging_is_idempotent(self) -> None:
        with TemporaryDirectory() as tmpdir:
            log_path = Path(tmpdir) / "podlocate.log"
            configure_logging(log_path=log_path)
            logger = configure_logging(log_path=log_path)
            count = len(logger.handlers)
            reset_logging()

        self.assertEqual(count, 2)

    def test_level_accepts_names(self) -> None:
        logger = configure_logging(level="debug")

        self.assertEqual(logger.level, logging.DEBUG)

    def test_child_loggers_propagate(self) -> None:
        logger = configure_logging(level="INFO")
        with self.assertLogs("podlocate", level="INFO") as captured:
            logging.getLogger("podlocate.xcconfig").info("resolved")

        self.assertEqual(logger.name, "podlocate")
        self.assertIn("resolved", captured.output[0])


if __name__ == "__main__":
    unittest.main()
