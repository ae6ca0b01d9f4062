"""ID helpers for zone and route natural keys.

Provides:
- ``new_natural_id(prefix)``: returns ``{prefix}{nnn}`` with ``nnn`` in 100..999
  (e.g., ``me482``, ``rut107``).
- ``unique_natural_id(prefix, exists)``: retries until the store reports no clash.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional

ZONA_PREFIX = "me"
RUTA_PREFIX = "rut"

ID_MIN = 100
ID_MAX = 999


def new_natural_id(prefix: str, rng: Optional[random.Random] = None) -> str:
    """Generate a short natural key with the given prefix.

    Format: ``{prefix}{100..999}``. Uniqueness is not guaranteed here;
    callers check the store before using the key.
    """
    rng = rng or random
    return f"{prefix}{rng.randint(ID_MIN, ID_MAX)}"


class KeySpaceExhausted(RuntimeError):
    """No free natural key was found within the allowed attempts."""


def unique_natural_id(
    prefix: str,
    exists: Callable[[str], bool],
    max_attempts: int = 10,
    rng: Optional[random.Random] = None,
) -> str:
    """Draw natural keys until ``exists(candidate)`` is False.

    Raises KeySpaceExhausted after ``max_attempts`` collisions.
    """
    for _ in range(max(1, max_attempts)):
        candidate = new_natural_id(prefix, rng)
        if not exists(candidate):
            return candidate
        logging.warning(f"Natural key collision on {candidate}, retrying")
    raise KeySpaceExhausted(f"could not allocate a free '{prefix}' id after {max_attempts} attempts")
