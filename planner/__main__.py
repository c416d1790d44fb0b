"""Run the API with uvicorn on the configured port."""
import logging

import uvicorn

from planner.config import settings

logger = logging.getLogger("planner")


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info("Listening on port %d", settings.PORT)
    uvicorn.run(
        "planner.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
