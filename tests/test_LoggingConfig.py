import contextlib
import logging
import re

from LoggingConfig import LoggingConfig


@contextlib.contextmanager
def bareRootLogger():
    """Detach root handlers so basicConfig applies, then restore them."""
    root = logging.getLogger()
    savedHandlers = root.handlers[:]
    savedLevel = root.level
    root.handlers.clear()
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = savedHandlers
        root.setLevel(savedLevel)


def test_log_to_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    with bareRootLogger() as root:
        LoggingConfig.setLogToFileConfig()
        logging.getLogger("LoggingConfigTest").debug("05 Mar 2024")
        assert root.level == logging.DEBUG

    content = (tmp_path / "debug.log").read_text(encoding="utf-8")
    assert "DEBUG - LoggingConfigTest - 05 Mar 2024" in content
    assert re.match(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} - DEBUG", content)
    assert logging.getLogger("dateutil").level == logging.WARNING


def test_log_to_console(capsys):
    with bareRootLogger() as root:
        LoggingConfig.setLogToConsoleConfig()
        logging.getLogger("LoggingConfigTest").info("05 Mar 2024")
        assert root.level == logging.INFO

    assert capsys.readouterr().out == "05 Mar 2024\n"
