"""Logging setup for command-line use of the client."""
from __future__ import annotations

import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
PACKAGE_LOGGER = 'shopify_admin'


def configure_logging(level: str = 'INFO') -> None:
  """Send the package's log records to stderr at ``level``.

  Command output stays on stdout so it can be piped into other tools.

  Library code only creates module loggers; host applications that
  configure logging themselves never need to call this.
  """
  logger = logging.getLogger(PACKAGE_LOGGER)
  logger.setLevel(getattr(logging, level.upper(), logging.INFO))

  # Replace handlers from earlier calls, stderr may have been swapped since
  for handler in logger.handlers[:]:
    logger.removeHandler(handler)

  handler = logging.StreamHandler(sys.stderr)
  handler.setFormatter(logging.Formatter(LOG_FORMAT))
  logger.addHandler(handler)
  logger.propagate = False
