"""Run the API: python -m travelvibe"""
import logging
import sys

import uvicorn

from travelvibe.core.config import settings
from travelvibe.core.log import setup_logging

logger = logging.getLogger("travelvibe")


def main() -> int:
    setup_logging()
    try:
        uvicorn.run("travelvibe.main:app", host=settings.HOST, port=settings.PORT, log_config=None)
    except Exception:
        logger.exception("Server startup failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
