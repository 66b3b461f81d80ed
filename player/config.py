import logging
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    REVIEW_DB_PATH = os.getenv("REVIEW_DB_PATH", "reviews.db")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
    TRACK_WIDTH = os.getenv("TRACK_WIDTH", "60")

    @staticmethod
    def track_width() -> int:
        return int(Config.TRACK_WIDTH)

    @staticmethod
    def validate_config():
        """Validate configuration values"""
        errors = []

        if not Config.REVIEW_DB_PATH:
            errors.append("REVIEW_DB_PATH is required")

        if not isinstance(logging.getLevelName(Config.LOG_LEVEL), int):
            errors.append(f"LOG_LEVEL '{Config.LOG_LEVEL}' is not a logging level")

        if not Config.TRACK_WIDTH.isdigit() or int(Config.TRACK_WIDTH) < 10:
            errors.append("TRACK_WIDTH must be an integer >= 10")

        if errors:
            raise RuntimeError(f"Configuration errors: {', '.join(errors)}")

        return True


def configure_logging(level: str = None) -> None:
    logging.basicConfig(
        level=(level or Config.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
