"""Package logger with rich console output.

Every module logs through the ``logger`` defined here. The level defaults to
WARNING so that building directives stays quiet; set ``SIMPLERRD_LOG_LEVEL``
(e.g. ``DEBUG``) to see each directive as it is produced.
"""

import logging
import os

from rich.logging import RichHandler

LOG_LEVEL: str = os.environ.get("SIMPLERRD_LOG_LEVEL", "WARNING").upper()

logger = logging.getLogger("simplerrd")
logger.setLevel(LOG_LEVEL)

if not logger.handlers:
    # Pretty console output
    rich_handler = RichHandler(rich_tracebacks=True)
    rich_handler.setLevel(LOG_LEVEL)
    logger.addHandler(rich_handler)
