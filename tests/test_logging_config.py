"""Unit tests for app.core.logging_config."""

import logging
import time
import unittest
from unittest.mock import patch

from app.core.logging_config import LOG_DATEFMT, LOG_FORMAT, configure_logging


class TestLogTimestamps(unittest.TestCase):
    def test_timestamp_is_local_time_with_offset(self) -> None:
        self.assertFalse(LOG_DATEFMT.endswith("Z"))
        record = logging.makeLogRecord({"msg": "hello", "created": 1_700_000_000.0})
        formatted = logging.Formatter(LOG_FORMAT, LOG_DATEFMT).formatTime(record, LOG_DATEFMT)
        self.assertEqual(formatted, time.strftime(LOG_DATEFMT, time.localtime(record.created)))


class TestConfigureLogging(unittest.TestCase):
    def test_level_and_format_passed_to_basic_config(self) -> None:
        with patch("app.core.logging_config.logging.basicConfig") as basic_config:
            configure_logging("warning")
        basic_config.assert_called_once_with(
            level="WARNING", format=LOG_FORMAT, datefmt=LOG_DATEFMT
        )


if __name__ == "__main__":
    unittest.main()
