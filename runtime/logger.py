# runtime/logger.py — MethodSource v1
import logging
import sys

from runtime.config import load_config

_FORMAT = "%(asctime)s | %(levelname)-8s | %(module)s:%(lineno)d | %(message)s"


def setup_logger(name: str = "MethodSource") -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    if not logger.handlers:
        cfg = load_config()

        sh = logging.StreamHandler(sys.stderr)
        level = logging.getLevelName(str(cfg.get("log_level") or "WARNING").upper())
        sh.setLevel(level if isinstance(level, int) else logging.WARNING)
        sh.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(sh)

        if cfg.get("log_file"):
            fh = logging.FileHandler(cfg["log_file"], encoding="utf-8", mode="a")
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(logging.Formatter(_FORMAT))
            logger.addHandler(fh)

    return logger


log = setup_logger()
