from __future__ import annotations

import logging
import os

_LEVELS = {
    "0": logging.CRITICAL,
    "1": logging.INFO,
    "2": logging.DEBUG,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def setup_logging() -> None:
    """
    Configure the root logger from the environment.

    LOG_LEVEL: 0 (silent, default), 1 / info, 2 / debug.
    LOG_FILE: log destination. Without it no handler is attached, so stdout stays
    pure JSONL and stderr only carries the summary line.
    """
    lvl = _LEVELS.get(os.getenv("LOG_LEVEL", "0").strip().lower(), logging.CRITICAL)

    log_file = os.getenv("LOG_FILE")
    if log_file:
        logging.basicConfig(
            level=lvl,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            handlers=[logging.FileHandler(log_file, encoding="utf-8")],
            force=True,
        )
        return

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(lvl)
