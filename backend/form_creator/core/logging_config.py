import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger; a no-op when handlers are already installed."""
    logging.basicConfig(format=LOG_FORMAT, level=level.upper())
