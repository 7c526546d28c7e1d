import logging

import pytest
from rich.logging import RichHandler

from argot.utils import get_program_invocation, resolve_log_mode, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_cli_mode_uses_rich_handler():
    setup_logging(mode="cli")
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.WARNING


def test_json_mode():
    setup_logging(mode="json", console_log_level=logging.DEBUG)
    handler = logging.getLogger().handlers[0]
    assert type(handler).__name__ == "StreamHandler"
    assert type(handler.formatter).__name__ == "JsonFormatter"
    assert handler.level == logging.DEBUG


def test_mode_from_environment(monkeypatch):
    monkeypatch.setenv("ARGOT_LOG_MODE", "json")
    setup_logging()
    assert not isinstance(logging.getLogger().handlers[0], RichHandler)


def test_invalid_mode():
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")


def test_file_logging(tmp_path):
    log_file = tmp_path / "argot.log"
    setup_logging(mode="cli", log_filename=str(log_file), json_log_to_file=True)
    logging.getLogger("argot").debug("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert '"message": "hello"' in log_file.read_text(encoding="UTF-8")


def test_resolve_log_mode_prefers_argument(monkeypatch):
    monkeypatch.setenv("ARGOT_LOG_MODE", "json")
    assert resolve_log_mode("cli") == "cli"
    assert resolve_log_mode() == "json"


def test_resolve_log_mode_rejects_unknown_environment(monkeypatch):
    monkeypatch.setenv("ARGOT_LOG_MODE", "syslog")
    with pytest.raises(ValueError):
        resolve_log_mode()


def test_program_invocation_for_script(monkeypatch):
    monkeypatch.setattr("sys.argv", ["/no/such/dir/tool.py"])
    monkeypatch.setattr("sys.executable", "/usr/bin/python3")
    assert get_program_invocation() == "python /no/such/dir/tool.py"


def test_program_invocation_for_plain_name(monkeypatch):
    monkeypatch.setattr("sys.argv", ["/no/such/dir/tool"])
    assert get_program_invocation() == "tool"
