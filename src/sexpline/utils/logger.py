"""Package loggers.

Every sexpline module logs under the "sexpline" hierarchy so callers can
tune the whole package with ``logging.getLogger("sexpline")``. The parser
reports aborted parses at DEBUG; nothing here installs handlers.
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "sexpline"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the sexpline hierarchy.

    Module names already under the package (``sexpline.parser``) are used
    as-is; anything else is nested below it.

        >>> get_logger("sexpline.parser").name
        'sexpline.parser'
        >>> get_logger("cursor").name
        'sexpline.cursor'
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
