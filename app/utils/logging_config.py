"""
Logging setup for the Pick'em scoring API

Console output while developing, rotating pickem.log / errors.log files
otherwise. File records carry the API call they were logged under.
"""

import logging
import logging.handlers
import os

from flask import has_request_context, request

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class RequestContextFilter(logging.Filter):
    """Stamp records with the API call being served ("-" outside a request)"""

    def filter(self, record):
        if has_request_context():
            record.api_call = f"{request.method} {request.path}"
            record.remote_addr = request.remote_addr or "-"
        else:
            record.api_call = "-"
            record.remote_addr = "-"
        return True


class ColoredFormatter(logging.Formatter):
    """Colors the level name for terminal output"""

    COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record):
        color = self.COLORS.get(record.levelno)
        if color is None:
            return super().format(record)

        # Handlers share the record; only the copy gets escape codes
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def _rotating_file_handler(path, level, fmt, max_mb, backups):
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=max_mb * 1024 * 1024, backupCount=backups
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=DATE_FORMAT))
    handler.addFilter(RequestContextFilter())
    return handler


def setup_logging(app):
    """
    Configure the root logger from LOG_LEVEL, LOG_TO_CONSOLE, LOG_TO_FILE
    and LOG_DIR. Existing root handlers are replaced.
    """
    level = getattr(logging, app.config.get("LOG_LEVEL", "INFO").upper())

    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    if app.config.get("LOG_TO_CONSOLE", True):
        console = logging.StreamHandler()
        console.setLevel(level)
        if app.debug:
            console.setFormatter(
                ColoredFormatter(
                    f"{LOG_FORMAT} [%(filename)s:%(lineno)d]", datefmt="%H:%M:%S"
                )
            )
        else:
            console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(console)

    if app.config.get("LOG_TO_FILE", True):
        log_dir = app.config.get("LOG_DIR", "logs")
        os.makedirs(log_dir, exist_ok=True)

        root.addHandler(
            _rotating_file_handler(
                os.path.join(log_dir, "pickem.log"),
                level,
                f"{LOG_FORMAT} [%(api_call)s] [%(remote_addr)s]",
                max_mb=10,
                backups=5,
            )
        )
        root.addHandler(
            _rotating_file_handler(
                os.path.join(log_dir, "errors.log"),
                logging.ERROR,
                f"{LOG_FORMAT} [%(pathname)s:%(lineno)d] [%(api_call)s]",
                max_mb=5,
                backups=3,
            )
        )

    for noisy in ("werkzeug", "flask_limiter"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    app.logger.info(f"Logging configured - Level: {logging.getLevelName(level)}")


class MatchLogger(logging.LoggerAdapter):
    """
    Logger for one match being entered or scored.

    Appends the match to every message, e.g. "[pick_6 #2 Fighter One vs Fighter Two]".
    """

    def __init__(self, name, contest_type=None, match_order=None, wrestler_a=None, wrestler_b=None):
        super().__init__(
            logging.getLogger(name),
            {
                "contest_type": contest_type,
                "match_order": match_order,
                "wrestler_a": wrestler_a,
                "wrestler_b": wrestler_b,
            },
        )

    @classmethod
    def for_form(cls, name, form):
        return cls(
            name,
            contest_type=form.contest_type.data,
            match_order=form.match_order.data,
            wrestler_a=form.wrestler_a.data,
            wrestler_b=form.wrestler_b.data,
        )

    @property
    def label(self):
        parts = []
        if self.extra["contest_type"]:
            parts.append(str(self.extra["contest_type"]))
        if self.extra["match_order"] is not None:
            parts.append(f"#{self.extra['match_order']}")
        if self.extra["wrestler_a"] or self.extra["wrestler_b"]:
            parts.append(f"{self.extra['wrestler_a'] or '?'} vs {self.extra['wrestler_b'] or '?'}")
        return " ".join(parts)

    def process(self, msg, kwargs):
        if self.label:
            msg = f"{msg} [{self.label}]"
        return msg, kwargs
