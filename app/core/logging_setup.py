# app/core/logging_setup.py
import logging
from app.config import settings

_INITIALIZED = False

def setup_logging() -> None:
    global _INITIALIZED
    if _INITIALIZED:
        return
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    _INITIALIZED = True
