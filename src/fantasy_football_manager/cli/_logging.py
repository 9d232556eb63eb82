import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Quiet unless --verbose; werkzeug writes an access line for every API request.
_QUIET_LOGGERS = {"werkzeug": logging.WARNING}


def _stderr_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    return handler


def configure_logging(*, verbose: bool = False) -> None:
    """Route league and server logs to stderr, keeping stdout for ``ffm`` tables."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.addHandler(_stderr_handler())
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    for name, quiet_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(logging.NOTSET if verbose else quiet_level)
