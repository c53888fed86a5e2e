"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_builder_writes_dated_file_under_logs(tmp_path, monkeypatch):
    """LoggerBuilder should place files in logs/<subdir>/<date>_<prefix>."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240301"),
    )

    builder = (
        logger_module.LoggerBuilder()
        .name("finance_visualizer.test_builder")
        .subdir("import")
        .prefix("import_logs")
        .console(False)
        .level(logging.DEBUG)
    )
    built = builder.build()

    assert built.level == logging.DEBUG
    assert built.propagate is False
    assert len(built.handlers) == 1
    (file_handler,) = built.handlers
    expected = tmp_path / "logs" / "import" / "20240301_import_logs.log"
    assert file_handler.baseFilename == str(expected)
    # A configured logger is returned untouched.
    assert builder.build() is built
    file_handler.close()
    built.handlers.clear()


def test_custom_handler_factories_are_used(tmp_path, monkeypatch):
    """Injected factories should receive the formatter."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    formatter = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    console_handler = logging.NullHandler()
    seen = {}

    def file_factory(path, fmt):
        seen["file"] = (path, fmt)
        return file_handler

    def console_factory(fmt):
        seen["console"] = fmt
        return console_handler

    built = (
        logger_module.LoggerBuilder()
        .name("finance_visualizer.test_factories")
        .formatter(lambda: formatter)
        .file_handler(file_factory)
        .console_handler(console_factory)
        .build()
    )

    assert built.handlers == [file_handler, console_handler]
    assert seen["file"][1] is formatter
    assert seen["console"] is formatter
    built.handlers.clear()


def test_default_handlers_log_at_info(tmp_path):
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "app.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_wrapper_delegates(monkeypatch):
    """Logger methods should forward to the wrapped logging.Logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    wrapper = logger_module.Logger("finance_visualizer.test_wrapper")
    wrapper.info("imported")
    wrapper.warning("skipped rows")
    wrapper.error("parse failed")
    wrapper.debug("details")
    wrapper.critical("store unavailable")

    fake_logger.info.assert_called_with("imported")
    fake_logger.warning.assert_called_with("skipped rows")
    fake_logger.error.assert_called_with("parse failed")
    fake_logger.debug.assert_called_with("details")
    fake_logger.critical.assert_called_with("store unavailable")
    assert logger_module.Logger() is wrapper


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch):
    """Each getter returns its own singleton with its own logger name."""
    built_names = []

    def _fake_build(self):
        built_names.append(self._name)
        return MagicMock(name=self._name)

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built_names == [
        "finance_visualizer",
        "finance_visualizer.usage",
    ]
