import logging
import sys

from sitecms.application import create_app
from sitecms.core.config import settings
from sitecms.core.logging_config import setup_logging

# Configure logging
setup_logging(settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = create_app(settings)


def main() -> None:
    """Run the API with uvicorn; exit 1 if the database cannot be reached."""
    import uvicorn

    if not app.state.database.ping():
        logger.error("Cannot reach the database; check DATABASE_URL")
        sys.exit(1)

    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
