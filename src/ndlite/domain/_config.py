"""
Runtime configuration for ndlite.

Configuration is read once from the process environment at import time. It
covers the two knobs the engine exposes:

- ``NDLITE_FLOAT_IMPL`` selects the storage width of the floating-point
  dtype: ``"double"`` (default, typecode ``'d'``) or ``"float"`` (typecode
  ``'f'``).
- ``NDLITE_DEBUG`` turns on DEBUG-level logging for the ``ndlite`` logger.

The fixed engine limits (maximum rank, maximum finite-difference order) live
here as module constants so that every layer reads them from one place.
"""

from __future__ import annotations

import logging
import os

MAX_DIMS = 4
"""Hard cap on array rank. Shape/stride storage always has this many slots."""

MAX_DIFF_ORDER = 9
"""Largest finite-difference order accepted by ``diff``."""

_FLOAT_TYPECODES = {"double": "d", "float": "f"}

_FALSY = ("0", "", "false", "off", "no")


def float_typecode() -> str:
    """
    Return the typecode used to store floating-point arrays.

    Returns
    -------
    str
        ``'d'`` for double precision or ``'f'`` for single precision.

    Raises
    ------
    ValueError
        If ``NDLITE_FLOAT_IMPL`` names an unknown implementation.
    """
    impl = os.environ.get("NDLITE_FLOAT_IMPL", "double").strip().lower()
    try:
        return _FLOAT_TYPECODES[impl]
    except KeyError:
        raise ValueError(
            f"NDLITE_FLOAT_IMPL must be one of {sorted(_FLOAT_TYPECODES)}, got {impl!r}"
        ) from None


def debug_enabled() -> bool:
    """Return True when ``NDLITE_DEBUG`` is set to a truthy value."""
    return os.environ.get("NDLITE_DEBUG", "0").strip().lower() not in _FALSY


def configure_logging() -> logging.Logger:
    """
    Attach the library's logging defaults to the ``ndlite`` logger.

    A ``NullHandler`` is always installed so that applications which never
    configure logging do not see "no handler" noise. When debugging is
    enabled through the environment, a stream handler is added and the level
    is lowered to DEBUG.

    Returns
    -------
    logging.Logger
        The package root logger.
    """
    root = logging.getLogger("ndlite")
    if not any(isinstance(h, logging.NullHandler) for h in root.handlers):
        root.addHandler(logging.NullHandler())

    if debug_enabled() and not any(
        type(h) is logging.StreamHandler for h in root.handlers
    ):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s")
        )
        root.addHandler(handler)
        root.setLevel(logging.DEBUG)
    return root
