"""Shared ``gtfs_store`` logger writing ``LEVEL - message`` lines to stdout.

    from gtfs_store.common.logging_utils import logger
"""

import logging
import sys

logger = logging.getLogger("gtfs_store")

if not logger.hasHandlers():
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt='%(levelname)s - %(message)s'))
    logger.addHandler(handler)

logger.setLevel(logging.INFO)


def set_verbose(verbose: bool) -> None:
    """Toggle progress output.

    Args:
        verbose: When False only warnings and errors are emitted.
    """
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
