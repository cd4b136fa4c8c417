import logging
import sys


def setup_logger(debug=False):
    # Progress lines belong on stdout next to the dry-run output
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(filename)s - %(funcName)s - %(levelname)s: %(message)s",
    )

    logging.debug("Debug logging is now enabled for realworld_readme")
