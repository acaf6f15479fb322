"""ChibiHash: a small, fast, seeded 64-bit non-cryptographic hash."""

from __future__ import annotations

from ._errors import ChibiHashError
from ._hash import hash64, load_le64

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "hash64",
    "load_le64",
    "ChibiHashError",
]
