import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging once for the API process."""
    level_name = level.upper()
    if level_name not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        logging.getLogger(__name__).warning(
            "Invalid LOG_LEVEL '%s', falling back to INFO", level
        )
        level_name = "INFO"

    logging.basicConfig(level=level_name, format=LOG_FORMAT)
    logging.getLogger("app").setLevel(level_name)
