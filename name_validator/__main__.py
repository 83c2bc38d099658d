import logging

import uvicorn

from .config import get_settings
from .logs import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Server listening on port %d", settings.port)
    uvicorn.run(
        "name_validator.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
