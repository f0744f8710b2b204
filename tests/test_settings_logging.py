import logging
import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

import envload
from envload.logging import init_logging
from envload.settings import FileLoggingSettings, LoggingSettings


class LoggingSettingsTests(unittest.TestCase):
    def test_defaults_when_unset(self) -> None:
        settings = LoggingSettings.from_loader(envload.from_map({}))
        self.assertEqual(settings.level, "INFO")
        self.assertIsNone(settings.file)

    def test_reads_prefixed_variables(self) -> None:
        env = envload.from_map(
            {"APP_LOG_LEVEL": "debug", "APP_LOG_FILE": "logs/app.log", "APP_LOG_BACKUP_COUNT": "2"}
        ).prefix("APP_")
        settings = LoggingSettings.from_loader(env)
        self.assertEqual(settings.level, "DEBUG")
        self.assertEqual(settings.file, FileLoggingSettings(path="logs/app.log", backup_count=2))

    def test_leaves_existing_bindings_alone(self) -> None:
        env = envload.from_map({})
        env.string("HOST", None, "hostname")
        LoggingSettings.from_loader(env)
        self.assertEqual(env.help(), "HOST -- hostname\n")

    def test_invalid_values(self) -> None:
        with self.assertRaises(envload.LoadError):
            LoggingSettings.from_loader(envload.from_map({"LOG_BACKUP_COUNT": "many"}))
        with self.assertRaises(ValidationError):
            LoggingSettings.from_loader(envload.from_map({"LOG_LEVEL": "loud"}))
        with self.assertRaises(ValidationError):
            FileLoggingSettings(path="x.log", backup_count=-1)


class InitLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self._level = root.level
        self._handlers = list(root.handlers)
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)

    def tearDown(self) -> None:
        init_logging(LoggingSettings())
        root = logging.getLogger()
        for handler in list(root.handlers):
            if handler not in self._handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(self._level)

    def test_file_handler_writes(self) -> None:
        log_path = Path(self._tmp.name) / "nested" / "app.log"
        init_logging(LoggingSettings(level="DEBUG", file=FileLoggingSettings(path=str(log_path))))

        logging.getLogger("envload.test").info("test.event value=%d", 1)
        for handler in logging.getLogger().handlers:
            handler.flush()

        self.assertEqual(logging.getLogger().level, logging.DEBUG)
        self.assertIn("test.event value=1", log_path.read_text(encoding="utf-8"))

    def test_repeated_init_does_not_duplicate_handlers(self) -> None:
        init_logging(LoggingSettings())
        count = len(logging.getLogger().handlers)
        init_logging(LoggingSettings(level="WARNING"))
        self.assertEqual(len(logging.getLogger().handlers), count)
        self.assertEqual(logging.getLogger().level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()
