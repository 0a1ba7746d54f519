"""Logging setup shared by the CLI and library callers.

Library modules only ever call ``logging.getLogger(__name__)``; handlers
are installed once, by the entrypoint, through ``setup_logging()``.

Line formats:
    text: 2026-10-18T13:45:12.345Z | INFO     | app=hilbert-plot depth=5 | Saved ...
    json: {"ts": "2026-10-18T13:45:12.345000+00:00", "level": "INFO", "logger": "...", "msg": "...", "app": "hilbert-plot"}

Context fields (pattern, depth, ...) live in a ContextVar and are merged
into every record.  Calling ``setup_logging()`` again replaces the
handlers it installed before; handlers added by anyone else (pytest's
caplog, for one) are left alone.
"""

import contextvars
import json as jsonlib
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

_LEVEL_COLORS = {
    'DEBUG': '\033[36m',
    'INFO': '\033[32m',
    'WARNING': '\033[33m',
    'ERROR': '\033[31m',
    'CRITICAL': '\033[35m',
}
_RESET = '\033[0m'

_log_context: contextvars.ContextVar[Optional[Dict[str, Any]]] = contextvars.ContextVar(
    'hilbert_plot_log_context', default=None
)

# Handlers owned by setup_logging(), replaced on every call
_installed: List[logging.Handler] = []


def _current_context() -> Dict[str, Any]:
    return _log_context.get() or {}


def _record_time(record: logging.LogRecord, utc: bool) -> datetime:
    if utc:
        return datetime.fromtimestamp(record.created, tz=timezone.utc)
    return datetime.fromtimestamp(record.created).astimezone()


class ContextFormatter(logging.Formatter):
    """Render records as text lines or JSON objects, context included.

    Parameters
    ----------
    mode : str
        "text" or "json"
    use_color : bool
        Colour the level name; only honoured when stderr is a TTY
    utc : bool
        UTC timestamps (default) or local time
    """

    def __init__(self, mode: str = "text", use_color: bool = True, utc: bool = True):
        if mode not in ("text", "json"):
            raise ValueError(f"Unknown log format mode: {mode!r}")
        super().__init__()
        self.mode = mode
        self.use_color = use_color and sys.stderr.isatty()
        self.utc = utc

    def format(self, record: logging.LogRecord) -> str:
        when = _record_time(record, self.utc)
        if self.mode == "json":
            return self._as_json(record, when)
        return self._as_text(record, when)

    def _as_json(self, record: logging.LogRecord, when: datetime) -> str:
        payload: Dict[str, Any] = {
            'ts': when.isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'msg': record.getMessage(),
        }
        payload.update(_current_context())
        if record.exc_info:
            payload['exc'] = self.formatException(record.exc_info)
        return jsonlib.dumps(payload, default=str)

    def _as_text(self, record: logging.LogRecord, when: datetime) -> str:
        stamp = when.strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3]
        stamp += 'Z' if self.utc else when.strftime('%z')

        level = f"{record.levelname:8s}"
        if self.use_color and record.levelname in _LEVEL_COLORS:
            level = f"{_LEVEL_COLORS[record.levelname]}{level}{_RESET}"

        fields = [stamp, level]
        context = _current_context()
        if context:
            fields.append(' '.join(f"{k}={v}" for k, v in context.items()))
        fields.append(record.getMessage())

        line = ' | '.join(fields)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    *,
    json: bool = False,
    color: bool = True,
    to_stderr: bool = True,
    utc: bool = True,
    capture_warnings: bool = True,
    context: Optional[Dict[str, Any]] = None
) -> List[logging.Handler]:
    """Install console / file handlers on the root logger.

    Parameters
    ----------
    log_level : str
        Level name, case-insensitive ("debug", "INFO", ...)
    log_file : str, optional
        Also append to this file (parent directories are created)
    json : bool
        JSON lines instead of text, for both handlers
    color : bool
        Coloured level names on a TTY console
    to_stderr : bool
        Attach a stderr handler; False leaves only the file handler
    utc : bool
        UTC timestamps, default True
    capture_warnings : bool
        Route ``warnings.warn`` through logging
    context : dict, optional
        Fields pushed with ``push_context`` right away

    Returns
    -------
    list[logging.Handler]
        The handlers now owned by this module.

    Raises
    ------
    ValueError
        If *log_level* is not a logging level name.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")

    root = logging.getLogger()
    while _installed:
        old = _installed.pop()
        root.removeHandler(old)
        old.close()

    mode = "json" if json else "text"
    if to_stderr:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(ContextFormatter(mode, use_color=color, utc=utc))
        _installed.append(console)
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding='utf-8')
        file_handler.setFormatter(ContextFormatter(mode, use_color=False, utc=utc))
        _installed.append(file_handler)

    root.setLevel(level)
    for handler in _installed:
        root.addHandler(handler)

    if context:
        push_context(**context)
    if capture_warnings:
        logging.captureWarnings(True)

    return list(_installed)


def push_context(**fields: Any) -> None:
    """Merge *fields* into the context attached to every log line.

    >>> push_context(pattern="ribbon", depth=6)
    """
    _log_context.set({**_current_context(), **fields})


def pop_context(keys: Optional[List[str]] = None) -> None:
    """Drop the named context fields, or all of them."""
    if keys is None:
        _log_context.set(None)
        return
    remaining = {k: v for k, v in _current_context().items() if k not in keys}
    _log_context.set(remaining)


def _log_uncaught(exc_type, exc_value, exc_traceback) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logging.getLogger("hilbert_plot").critical(
        "Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback)
    )


def install_excepthook() -> None:
    """Send uncaught exceptions (Ctrl+C excepted) to the log before exit."""
    sys.excepthook = _log_uncaught
