from __future__ import annotations

import logging
import os
import sys

_DEBUG_ENV = "GBKIT_DEBUG"
_logging_configured = False


def configure_logging(verbose: bool = False, *, force: bool = False) -> None:
    """Attach a stderr handler to the ``gbkit`` logger.

    DEBUG when ``verbose`` or when GBKIT_DEBUG is set, INFO otherwise.
    """
    global _logging_configured
    if _logging_configured and not force:
        return

    logger = logging.getLogger("gbkit")
    if force:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

    level = logging.DEBUG if verbose or os.environ.get(_DEBUG_ENV) else logging.INFO
    logger.setLevel(level)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    _logging_configured = True
