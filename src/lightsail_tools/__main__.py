"""Runs lightsail-tools."""
import logging
import sys

from lightsail_tools import main as lightsail_main

logger = logging.getLogger(__name__)


def main() -> None:
    """Runs the tool, logs any returned message, and calls sys.exit.

    If the main function returns a non-empty value, it is passed to
    sys.exit causing a non-zero status code.

    """
    status = lightsail_main.main()
    if status:
        logger.debug('Exiting with status %s', status)
    sys.exit(status)


if __name__ == '__main__':
    main()
