# todo_app/logging_setup.py

import logging

from todo_app.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
