import logging
from logging.config import dictConfig
from typing import Any


class KeyValueFormatter(logging.Formatter):
    """
    Formatter that renders any 'extra' context added to the record as
    key=value pairs at the end of the log line.
    """
    # Attributes every LogRecord already has
    _RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}

    def format(self, record: logging.LogRecord) -> str:
        s = super().format(record)
        extras = {k: v for k, v in record.__dict__.items() if k not in self._RESERVED}
        if extras:
            context_str = " ".join(f"{k}={v}" for k, v in sorted(extras.items()))
            s = f"{s} | {context_str}"
        return s


def _default_conf(level: str | int) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "kv": {
                "()": KeyValueFormatter,
                "format": "%(asctime)s [%(levelname).1s] %(name)s | %(message)s",
            }
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "kv",
            }
        },
        "loggers": {
            "rails_http": {"level": level, "handlers": ["stderr"]},
        },
    }


def configure_logging(level: str | int = "WARNING", **overrides: Any) -> None:
    """
    Configure the `rails_http` logger.

    The library itself only attaches a NullHandler; call this from an
    application entry-point (the CLI does) to see its records.

    Args:
        level (str | int): Logging level. Defaults to "WARNING".
        **overrides: Top-level dictConfig keys to replace.
    """
    conf = {**_default_conf(level), **overrides}
    dictConfig(conf)
