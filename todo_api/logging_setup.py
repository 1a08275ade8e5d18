import logging
import sys

# Third-party loggers that drown out application logs at INFO.
_NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger with a single stderr handler.

    Safe to call more than once: existing root handlers are replaced, so
    reloads don't duplicate output.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
