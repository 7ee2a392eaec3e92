"""
Package-wide constants and environment switches.
"""

import os

import numpy as np

# Polynomial string hash: h = 31*h + c, wrapped to an unsigned 32-bit value
HASH_MULTIPLIER = 31
HASH_MASK = 0xFFFFFFFF

# Storage type of the per-slot state flags
SLOT_DTYPE = np.uint8

MEMORY_CHECK_ENV = "FIXEDSET_CHECK_MEMORY"

_FALSE_VALUES = ("0", "false", "no", "off")


def memory_check_enabled() -> bool:
    """Whether slot allocation is checked against available system memory."""
    value = os.getenv(MEMORY_CHECK_ENV, "1")
    return value.strip().lower() not in _FALSE_VALUES
