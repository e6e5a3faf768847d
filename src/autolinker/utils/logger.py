"""Namespaced loggers for autolinker.

Every module logs under ``autolinker.*`` and only at DEBUG: candidate and
match counts from reconciliation, input/output sizes from link(), ignored
configuration keys. Nothing here installs a handler, so the records stay
silent until an application configures logging.

Example:
    >>> import logging
    >>> logging.basicConfig(level=logging.DEBUG)
    >>> from autolinker import link
    >>> html = link("google.com")  # logs under autolinker.reconcile and autolinker.linker
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the ``autolinker`` child logger for a module.

    Names already inside the package namespace pass through; bare names
    are moved under it.

    Args:
        name: Module name, usually ``__name__``

    Example:
        >>> get_logger("reconcile").name
        'autolinker.reconcile'
        >>> get_logger("autolinker.linker").name
        'autolinker.linker'
    """
    if name != "autolinker" and not name.startswith("autolinker."):
        name = f"autolinker.{name}"
    return logging.getLogger(name)
