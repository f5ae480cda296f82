import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Sets up console logging for the strsearch package.

    Only WARNING and above reach the console unless verbose is set, in
    which case DEBUG output from the matchers and runner is shown too.
    """
    package_logger = logging.getLogger('strsearch')

    # Clear existing handlers to prevent duplicate output on repeated calls
    package_logger.handlers.clear()

    level = logging.DEBUG if verbose else logging.WARNING
    package_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(console_handler)
    package_logger.propagate = False

    return package_logger
