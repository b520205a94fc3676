"""Defines types used throughout fuzzmf."""
from __future__ import annotations

from typing import Union

import jax.numpy as jnp

Array = jnp.ndarray
ScalarLike = Union[float, int, Array]

DTYPE = jnp.float32
F32_EPS = float(jnp.finfo(DTYPE).eps)
