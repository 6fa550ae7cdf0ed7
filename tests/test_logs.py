from __future__ import annotations

import io
import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from pykilo.logs import configure_logging, resolve_log_file, resolve_log_level


class LoggingSetupTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging(None)

    def test_without_file_only_null_handler(self) -> None:
        logger = configure_logging(None)
        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0], logging.NullHandler)
        self.assertFalse(logger.propagate)

    def test_file_handler_writes_records(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "logs" / "kilo.log"
            logger = configure_logging(log_file, logging.DEBUG)
            logging.getLogger("pykilo.loop").debug("hello %s", "log")
            for handler in logger.handlers:
                handler.flush()
            self.assertIn("DEBUG pykilo.loop: hello log", log_file.read_text(encoding="utf-8"))
            configure_logging(None)

    def test_log_path_under_regular_file_disables_logging(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "afile"
            blocker.write_text("x", encoding="utf-8")
            stderr = io.StringIO()
            with mock.patch("sys.stderr", stderr):
                logger = configure_logging(blocker / "sub" / "kilo.log")

        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0], logging.NullHandler)
        self.assertIn("cannot open log file", stderr.getvalue())

    def test_reconfiguring_replaces_handlers(self) -> None:
        configure_logging(None)
        logger = configure_logging(None)
        self.assertEqual(len(logger.handlers), 1)

    def test_resolve_log_file_precedence(self) -> None:
        with mock.patch.dict("os.environ", {"PYKILO_LOG_FILE": "/tmp/env.log"}, clear=True):
            self.assertEqual(resolve_log_file(Path("/tmp/cli.log"), Path("/tmp/cfg.log")), Path("/tmp/cli.log"))
            self.assertEqual(resolve_log_file(None, Path("/tmp/cfg.log")), Path("/tmp/env.log"))
        with mock.patch.dict("os.environ", {}, clear=True):
            self.assertEqual(resolve_log_file(None, Path("/tmp/cfg.log")), Path("/tmp/cfg.log"))
            self.assertIsNone(resolve_log_file(None, None))

    def test_resolve_log_level(self) -> None:
        with mock.patch.dict("os.environ", {"PYKILO_LOG_LEVEL": "debug"}, clear=True):
            self.assertEqual(resolve_log_level(), logging.DEBUG)
        with mock.patch.dict("os.environ", {"PYKILO_LOG_LEVEL": "loud"}, clear=True):
            self.assertEqual(resolve_log_level(), logging.INFO)
        with mock.patch.dict("os.environ", {}, clear=True):
            self.assertEqual(resolve_log_level(), logging.INFO)


if __name__ == "__main__":
    unittest.main()
