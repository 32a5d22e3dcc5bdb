"""Centralized logging configuration for the relay and the editor client."""

import logging
import os
import sys

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)

# httpx logs every request line at INFO, which drowns out stream progress
for noisy in ("httpx", "httpcore", "openai"):
    logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str | None = None):
    if name is None:
        return logging.getLogger("semphcode")
    return logging.getLogger(name)
