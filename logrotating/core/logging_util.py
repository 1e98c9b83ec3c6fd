from __future__ import annotations
import logging, sys

# Diagnostics about the logger itself (failed renames, bad settings files).
# Kept on the stdlib logging tree so they never re-enter a Logger's lock.


def get_logger(name: str = "logrotating") -> logging.Logger:
    if name != "logrotating" and not name.startswith("logrotating."):
        name = f"logrotating.{name}"
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.WARNING)
    stream = logging.StreamHandler(sys.stderr)
    fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    stream.setFormatter(fmt)
    logger.addHandler(stream)
    logger.propagate = False
    return logger
