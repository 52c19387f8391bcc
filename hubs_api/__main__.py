"""
Lambda Hubs API — Entry Point
===============================

Binds the listening port and hands every request to the application object.

    python -m hubs_api                      # hubs variant on :4000
    API_VARIANT=shelter python -m hubs_api  # adopters/dogs variant
"""

import logging

import uvicorn

from hubs_api.config import settings
from hubs_api.main import create_app, setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging(settings)
    logger.info(
        "*** Server Running on http://%s:%d (%s) ***",
        settings.backend_host,
        settings.backend_port,
        settings.api_variant,
    )
    uvicorn.run(
        create_app(settings),
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
