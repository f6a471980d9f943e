"""Structured, logfmt-style logging for hyperclient."""

from __future__ import annotations

import logging
from typing import IO, Any, Dict, Optional

# Attributes every LogRecord carries; anything else on a record is an extra.
RESERVED_LOG_KEYS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName", "event"}


def _clean_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in fields.items() if k not in RESERVED_LOG_KEYS}


def log_event(
    event: str,
    logger: Optional[logging.Logger] = None,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """
    Log ``event`` as the message with ``fields`` as LogRecord extras.
    Fields clashing with LogRecord attributes are dropped.
    """
    log = logger or logging.getLogger("hyperclient.events")
    log.log(level, event, extra=_clean_fields(fields))


class LogfmtFormatter(logging.Formatter):
    """
    Renders ``key=value`` pairs: level, logger, event, then every extra in
    the order it was attached.
    """

    def format(self, record: logging.LogRecord) -> str:
        pairs = [
            ("level", record.levelname.lower()),
            ("logger", record.name),
        ]
        msg = record.getMessage()
        if msg:
            pairs.append(("event", msg))

        for key, val in record.__dict__.items():
            if key in RESERVED_LOG_KEYS or val is None:
                continue
            pairs.append((key, val))

        if record.exc_info and record.exc_info[0] is not None:
            pairs.append(("exc_type", record.exc_info[0].__name__))

        return " ".join(f"{key}={self._fmt_val(val)}" for key, val in pairs)

    @staticmethod
    def _fmt_val(val: Any) -> str:
        if isinstance(val, (int, float, bool)):
            return str(val)
        s = str(val)
        if not s or any(c in s for c in ' ="'):
            s = '"' + s.replace('"', '\\"') + '"'
        return s


def setup_logging(level: str = "INFO", stream: Optional[IO[str]] = None) -> None:
    """Replace root handlers with a single logfmt handler."""
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(LogfmtFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


__all__ = ["setup_logging", "log_event", "LogfmtFormatter", "RESERVED_LOG_KEYS"]
