# Argot Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Process-level helpers for Argot: the program name shown in usage lines and the
logging setup used by the `argot` command.

Logging has two console modes:
- "cli": Rich-formatted records for people at a terminal.
- "json": one JSON object per record, for log collectors.

The mode is taken from the `mode` argument, then `ARGOT_LOG_MODE`, and finally
falls back to "json" inside a container and "cli" elsewhere.
"""
from __future__ import annotations

import logging
import os
import shutil
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler

LOG_MODE_ENV = "ARGOT_LOG_MODE"
LOG_MODES = ("cli", "json")
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def get_program_invocation() -> str:
    """Return how the running program was invoked, for usage lines."""
    script = sys.argv[0] if sys.argv and sys.argv[0] else "argot"
    installed = shutil.which(script)
    if installed:
        return os.path.basename(installed)
    if script.endswith(".py") and "python" in os.path.basename(sys.executable):
        return f"python {script}"
    return os.path.basename(script)


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as cgroup:
            content = cgroup.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def resolve_log_mode(mode: str | None = None) -> str:
    """
    Pick the console log mode.

    Raises:
        ValueError: If the chosen mode is not "cli" or "json".
    """
    if not mode:
        mode = os.getenv(LOG_MODE_ENV) or (
            "json" if running_in_container() else "cli"
        )
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}")
    return mode


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    handler = logging.StreamHandler()
    handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    return handler


def _file_handler(log_filename: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(log_filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        handler.setFormatter(
            logging.Formatter(TEXT_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Replace the root logger's handlers with Argot's console (and optional file)
    handlers.

    Args:
        mode (str | None): "cli" or "json". See `resolve_log_mode`.
        log_filename (str | None): Append records to this file as well. No file
            handler is installed when None.
        json_log_to_file (bool): Write file records as JSON instead of text.
        file_log_level (int): Threshold for the file handler.
        console_log_level (int): Threshold for the console handler.

    Raises:
        ValueError: If `mode` is not a known log mode.
    """
    mode = resolve_log_mode(mode)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = _file_handler(log_filename, json_log_to_file)
        file_handler.setLevel(file_log_level)
        root.addHandler(file_handler)

    logging.getLogger("argot").debug("Logging initialized in '%s' mode.", mode)
