"""Defines membership function kernels."""
from __future__ import annotations

from typing import Tuple

import jax.numpy as jnp

from ..utils.types import Array, ScalarLike, DTYPE, F32_EPS


def tri_coefficients(
    a: ScalarLike,
    xstar: ScalarLike,
    b: ScalarLike,
    eps: float = F32_EPS,
) -> Tuple[Array, Array, Array, Array, Array, Array, Array]:
    """Computes the linear-segment form of a triangle.

    Parameters
    ----------
    a : ScalarLike
        Left foot.
    xstar : ScalarLike
        Peak.
    b : ScalarLike
        Right foot.
    eps : float, optional
        Absolute width below which a segment is treated as degenerate, by
        default float32 machine epsilon.

    Returns
    -------
    Tuple[Array, ...]
        ``(slope1, intcpt1, slope2, intcpt2, a, xstar, b)`` with the control
        points sorted so that ``a <= xstar <= b``.
    """
    a = jnp.asarray(a, dtype=DTYPE)
    xstar = jnp.asarray(xstar, dtype=DTYPE)
    b = jnp.asarray(b, dtype=DTYPE)

    # comparisons against NaN are false, so a NaN alone never triggers the sort
    unsorted = (a > xstar) | (xstar > b) | (b < a)
    params = jnp.stack([a, xstar, b])
    params = jnp.where(unsorted, jnp.sort(params), params)
    a, xstar, b = params[0], params[1], params[2]

    # Numerical stability check
    rise = xstar - a
    fall = b - xstar
    has_rise = jnp.abs(rise) > eps
    has_fall = jnp.abs(fall) > eps

    slope1 = jnp.where(has_rise, 1.0 / jnp.where(has_rise, rise, 1.0), 0.0)
    slope2 = jnp.where(has_fall, -1.0 / jnp.where(has_fall, fall, 1.0), 0.0)

    intcpt1 = -slope1 * a
    intcpt2 = -slope2 * b

    return slope1, intcpt1, slope2, intcpt2, a, xstar, b

def tri_fuzzify(
    x: ScalarLike,
    slope1: Array,
    intcpt1: Array,
    slope2: Array,
    intcpt2: Array,
    a: Array,
    xstar: Array,
    b: Array,
) -> Array:
    x = jnp.clip(jnp.asarray(x, dtype=DTYPE), a, b)

    rising = jnp.clip(slope1 * x + intcpt1, 0.0, 1.0)
    falling = jnp.clip(slope2 * x + intcpt2, 0.0, 1.0)

    # only NaN falls through all three comparisons
    peak = jnp.where(x == xstar, 1.0, jnp.nan).astype(DTYPE)

    return jnp.where(x < xstar, rising, jnp.where(x > xstar, falling, peak))
