"""
Run the API server.

Usage example:
    python -m work_api
"""

import logging

import uvicorn

from work_api.main import app, settings

logger = logging.getLogger("work_api")


def main():
    logger.info("server listen on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
