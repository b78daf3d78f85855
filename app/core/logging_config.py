"""Standard-library logging setup shared by the CLI entrypoints."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
# asctime is local time, so the format carries the offset instead of a literal Z.
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"


def configure_logging(level: str = "info") -> None:
    """Configure the root logger; level is a name such as 'info' or 'debug'."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, datefmt=LOG_DATEFMT)
