"""Unit tests for logger implementations.

Tests verify that:
1. ConsoleLogger and NullLogger implement LoggerPort
2. ConsoleLogger honors verbosity and tracks formatting statistics
3. The process-wide logger can be replaced
"""

from io import StringIO
import unittest

from rich.console import Console

from timeshape.application.ports.services import LoggerPort
from timeshape.infrastructure.logging import (
    ConsoleLogger,
    LogContext,
    LogLevel,
    NullLogger,
    create_logger,
    get_logger,
    set_logger,
)


class TestLoggerPort(unittest.TestCase):
    """Test that logger implementations comply with LoggerPort protocol."""

    def test_console_logger_implements_loggerport(self):
        self.assertIsInstance(ConsoleLogger(), LoggerPort)

    def test_null_logger_implements_loggerport(self):
        self.assertIsInstance(NullLogger(), LoggerPort)

    def test_loggerport_has_required_methods(self):
        required_methods = {
            "info",
            "success",
            "warning",
            "error",
            "debug",
            "verbose",
            "log_column_formatted",
            "log_final_stats",
        }
        protocol_methods = {
            name for name in dir(LoggerPort) if not name.startswith("_")
        }
        self.assertTrue(required_methods.issubset(protocol_methods))


class TestConsoleLogger(unittest.TestCase):
    def setUp(self):
        self.buffer = StringIO()
        self.console = Console(file=self.buffer, force_terminal=True, width=80)
        self.logger = ConsoleLogger(console=self.console, verbosity=LogLevel.DEBUG)

    def test_initialization(self):
        logger = ConsoleLogger()
        self.assertEqual(logger.verbosity, 0)
        self.assertIsNone(logger._context)
        self.assertEqual(logger.get_stats()["columns_formatted"], 0)

    def test_info_logging(self):
        self.logger.info("Test message")
        self.assertIn("Test message", self.buffer.getvalue())

    def test_success_logging(self):
        self.logger.success("Operation complete")
        self.assertIn("Operation complete", self.buffer.getvalue())

    def test_warning_logging(self):
        self.logger.warning("Warning message")
        self.assertIn("Warning message", self.buffer.getvalue())
        self.assertEqual(self.logger.get_stats()["warnings"], 1)

    def test_error_logging(self):
        self.logger.error("Error message")
        self.assertIn("Error message", self.buffer.getvalue())
        self.assertEqual(self.logger.get_stats()["errors"], 1)

    def test_debug_logging_with_verbosity(self):
        self.logger.debug("Debug message")
        self.assertIn("Debug message", self.buffer.getvalue())

        self.buffer.truncate(0)
        self.buffer.seek(0)
        normal_logger = ConsoleLogger(console=self.console, verbosity=LogLevel.NORMAL)
        normal_logger.debug("Should not appear")
        normal_logger.verbose("Nor this")
        self.assertEqual(self.buffer.getvalue().strip(), "")

    def test_info_level_threshold(self):
        normal_logger = ConsoleLogger(console=self.console, verbosity=LogLevel.NORMAL)
        normal_logger.info("Hidden detail", level=LogLevel.VERBOSE)
        self.assertNotIn("Hidden detail", self.buffer.getvalue())

    def test_context_management(self):
        self.logger.set_context(source="orders.json", column="created_at")
        self.assertIsInstance(self.logger._context, LogContext)
        self.assertEqual(self.logger._context.source, "orders.json")

        self.logger.debug("With context")
        self.assertIn("orders.json:created_at", self.buffer.getvalue())

        self.logger.clear_context()
        self.assertIsNone(self.logger._context)

    def test_unknown_context_keys_are_ignored(self):
        self.logger.set_context(study_id="X")
        self.assertFalse(hasattr(self.logger._context, "study_id"))

    def test_column_stats_tracking(self):
        self.logger.log_column_formatted("created_at", 100, 3)
        self.logger.log_column_formatted("updated_at", 50, 0)

        stats = self.logger.get_stats()
        self.assertEqual(stats["columns_formatted"], 2)
        self.assertEqual(stats["values_formatted"], 150)
        self.assertEqual(stats["invalid_values"], 3)
        self.assertIn("3 invalid", self.buffer.getvalue())

        self.logger.reset_stats()
        self.assertEqual(self.logger.get_stats()["values_formatted"], 0)

    def test_final_stats(self):
        self.logger.log_column_formatted("created_at", 10, 2)
        self.logger.log_final_stats()
        output = self.buffer.getvalue()
        self.assertIn("Formatting Statistics", output)
        self.assertIn("Invalid values: 2", output)

    def test_final_stats_quiet_by_default(self):
        quiet = ConsoleLogger(console=self.console, verbosity=LogLevel.NORMAL)
        quiet.log_final_stats()
        self.assertEqual(self.buffer.getvalue(), "")


class TestNullLogger(unittest.TestCase):
    def test_all_methods_are_silent(self):
        logger = NullLogger()
        logger.info("x")
        logger.success("x")
        logger.warning("x")
        logger.error("x")
        logger.debug("x")
        logger.verbose("x")
        logger.log_column_formatted("col", 1, 0)
        logger.log_final_stats()


class TestGlobalLogger(unittest.TestCase):
    def tearDown(self):
        set_logger(ConsoleLogger())

    def test_get_logger_returns_same_instance(self):
        self.assertIs(get_logger(), get_logger())

    def test_create_logger_replaces_global(self):
        console = Console(file=StringIO())
        logger = create_logger(console, verbosity=2)
        self.assertIs(get_logger(), logger)
        self.assertEqual(logger.verbosity, 2)
