# todo_app/config.py

import os

HOST = os.getenv("TODO_HOST", "0.0.0.0")
PORT = int(os.getenv("TODO_PORT", "3000"))
LOG_LEVEL = os.getenv("TODO_LOG_LEVEL", "INFO").upper()

# Any origin may call the API.
CORS_ORIGINS = ["*"]
