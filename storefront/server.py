"""
Run the API with uvicorn. From project root:

  python -m storefront.server

HOST and PORT come from settings (defaults 0.0.0.0:5000).
"""

import logging

import uvicorn

from storefront.core.config import get_settings


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    logger = logging.getLogger(__name__)
    logger.info(
        "Starting %s env=%s port=%s token_expiry=%s",
        settings.APP_NAME,
        settings.APP_ENV,
        settings.PORT,
        settings.JWT_EXPIRE,
    )
    uvicorn.run(
        "storefront.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.APP_ENV == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
