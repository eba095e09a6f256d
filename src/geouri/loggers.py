"""Contains logging configuration data."""
import sys

# Logger printing formats
DEFAULT_FORMAT = "<level>{level}</level>: {message}"
DEBUG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <7}</level> | "
    "<cyan>{name}:{line}</cyan> | "
    "{message}"
)


def setup_logging(
    filename=None,
    level="DEBUG",
    verbose=False,
) -> None:
    """Configures logging of the package to file and console.

    Parameters
    ----------
    filename : str | None
        log filename
    level : str, optional
        change default level of logging.
    verbose :  bool
        include time and source location in console messages.
    """
    from loguru import logger

    logger.remove()
    logger.enable("geouri")
    logger.add(sys.stderr, level=level, format=DEBUG_FORMAT if verbose else DEFAULT_FORMAT)
    if filename:
        logger.add(filename, level=level)


if __name__ == "__main__":
    from geouri import parse

    setup_logging(level="DEBUG", verbose=True)
    location = parse("geo:52.107,5.134,3.6;u=1000;foo=bar")
    location.pprint()
