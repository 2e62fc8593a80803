import json
import logging
import os
from datetime import datetime, timezone

from cupost_tracker.config import LOG_DIR, LOG_FILE_ENABLED, LOG_LEVEL


class ISO8601Formatter(logging.Formatter):
    """Custom formatter that uses ISO8601 timestamps with timezone."""

    def formatTime(self, record, datefmt=None):
        """Format timestamp as ISO8601 with timezone."""
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return dt.isoformat()

    def format(self, record):
        """Format log record with extra fields."""
        formatted = super().format(record)

        if hasattr(record, "extra_fields") and record.extra_fields:
            try:
                extra_json = json.dumps(
                    record.extra_fields,
                    separators=(",", ":"),
                    ensure_ascii=False,
                    default=str,
                )
                formatted += f" | EXTRA: {extra_json}"
            except (TypeError, ValueError) as e:
                formatted += f" | EXTRA_ERROR: {e}"

        return formatted


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Logger(logging.Logger):
    """Enhanced logger with extra field support."""

    def _log_with_extra(self, level, msg, *args, extra=None, **kwargs):
        """Internal method to handle extra fields."""
        if extra:
            log_kwargs = kwargs.copy()
            log_kwargs["extra"] = {"extra_fields": extra}
            super()._log(level, msg, args, **log_kwargs)
        else:
            super()._log(level, msg, args, **kwargs)

    def log(self, level, msg, *args, extra=None, **kwargs):
        if self.isEnabledFor(level):
            self._log_with_extra(level, msg, *args, extra=extra, **kwargs)

    def debug(self, msg, *args, extra=None, **kwargs):
        self.log(logging.DEBUG, msg, *args, extra=extra, **kwargs)

    def info(self, msg, *args, extra=None, **kwargs):
        self.log(logging.INFO, msg, *args, extra=extra, **kwargs)

    def warning(self, msg, *args, extra=None, **kwargs):
        self.log(logging.WARNING, msg, *args, extra=extra, **kwargs)

    def error(self, msg, *args, extra=None, **kwargs):
        self.log(logging.ERROR, msg, *args, extra=extra, **kwargs)

    def critical(self, msg, *args, extra=None, **kwargs):
        self.log(logging.CRITICAL, msg, *args, extra=extra, **kwargs)

    def exception(self, msg, *args, extra=None, **kwargs):
        kwargs["exc_info"] = True
        self.error(msg, *args, extra=extra, **kwargs)


class ContextLogger(logging.LoggerAdapter):
    """
    Logger adapter that carries bound context (carrier id, tracking number)
    into the extra fields of every record it emits.
    """

    def process(self, msg, kwargs):
        extra = dict(self.extra)
        extra.update(kwargs.pop("extra", None) or {})
        kwargs["extra"] = extra
        return msg, kwargs

    def bind(self, **context) -> "ContextLogger":
        """Return a child adapter with additional context."""
        return ContextLogger(self.logger, {**self.extra, **context})


def get_logger(name: str = __name__) -> Logger:
    logger = Logger(name)
    if not logger.hasHandlers():
        formatter = ISO8601Formatter(LOG_FORMAT)

        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

        if LOG_FILE_ENABLED:
            os.makedirs(LOG_DIR, exist_ok=True)
            log_filename = f"log_{datetime.now().strftime('%Y-%m-%d')}.log"
            file_handler = logging.FileHandler(
                os.path.join(LOG_DIR, log_filename), encoding="utf-8"
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        logger.setLevel(LOG_LEVEL)

    return logger


def get_context_logger(name: str = __name__, **context) -> ContextLogger:
    """Create a logger whose records always carry the given context."""
    return ContextLogger(get_logger(name), context)
