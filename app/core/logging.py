import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging for the service."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
