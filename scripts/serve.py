# scripts/serve.py
"""
Run the Todo API under uvicorn.

Usage (from the project root):
    python -m scripts.serve
"""

import logging

import uvicorn

from todo_app.config import HOST, LOG_LEVEL, PORT
from todo_app.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main():
    setup_logging()
    logger.info("listening on http://%s:%s", HOST, PORT)
    uvicorn.run("todo_app:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
